# pet/modules/actions/action.py

from enum import Enum

class Action(Enum):
    """Care actions the pet can receive."""
    FEED = "feed"
    PLAY = "play"
    CLEAN = "clean"
    SLEEP = "sleep"
    COMFORT = "comfort"  # the hug; only has an effect while anxious

ACTION_ALIASES = {
    'hug': Action.COMFORT,
}

def parse_action(name) -> Action:
    """
    Resolves an action from its name, case-insensitively.

    Args:
        name (str | Action): e.g. 'feed', 'FEED' or 'hug'.

    Returns:
        Action: The matching action.

    Raises:
        ValueError: If the name is not a known action.
    """
    if isinstance(name, Action):
        return name
    key = str(name).strip().lower()
    if key in ACTION_ALIASES:
        return ACTION_ALIASES[key]
    try:
        return Action(key)
    except ValueError:
        raise ValueError(f"Action '{name}' is not available.") from None
