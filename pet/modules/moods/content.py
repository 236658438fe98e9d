# pet/modules/moods/content.py

from pet.modules.actions.action import Action
from .mood import Mood
from .strategy import TableMoodStrategy

class ContentMoodStrategy(TableMoodStrategy):
    """Behaviour of a content pet: care works well and needs drift slowly."""

    mood = Mood.CONTENT

    ACTION_EFFECTS = {
        Action.FEED: {'hunger': -15, 'social': 5, 'hygiene': 3, 'sleep': 5},
        Action.PLAY: {'hunger': 5, 'social': -10, 'hygiene': 3, 'sleep': 10},
        Action.CLEAN: {'social': 3, 'hygiene': -15, 'sleep': 10},
        Action.SLEEP: {'social': -10, 'sleep': -30},
    }

    TICK_EFFECTS = {'hunger': 2, 'social': 2, 'hygiene': 1, 'sleep': 1}
