# pet/modules/moods/mood.py

from enum import Enum

class Mood(Enum):
    """The pet's current mood; selects the active strategy."""
    CONTENT = "content"
    DISTRESSED = "distressed"
    ANXIOUS = "anxious"

MOOD_ALIASES = {
    'happy': Mood.CONTENT,
    'sad': Mood.DISTRESSED,
    'anxiety': Mood.ANXIOUS,
}

def parse_mood(name) -> Mood:
    """
    Resolves a mood from its name, case-insensitively.

    Raises:
        ValueError: If the name is not a known mood.
    """
    if isinstance(name, Mood):
        return name
    key = str(name).strip().lower()
    if key in MOOD_ALIASES:
        return MOOD_ALIASES[key]
    try:
        return Mood(key)
    except ValueError:
        raise ValueError(f"Mood '{name}' does not exist.") from None
