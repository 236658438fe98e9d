# pet/modules/moods/distressed.py

from pet.modules.actions.action import Action
from .mood import Mood
from .strategy import TableMoodStrategy

class DistressedMoodStrategy(TableMoodStrategy):
    """
    Behaviour of a distressed pet.

    Care hits its main need harder but barely moves the others, and needs
    drift faster than when content.
    """

    mood = Mood.DISTRESSED

    ACTION_EFFECTS = {
        Action.FEED: {'hunger': -20, 'social': 1, 'hygiene': 1, 'sleep': 1},
        Action.PLAY: {'hunger': 1, 'social': -15, 'hygiene': 1, 'sleep': 1},
        Action.CLEAN: {'social': 1, 'hygiene': -20, 'sleep': 1},
        Action.SLEEP: {'sleep': -35},
    }

    TICK_EFFECTS = {'hunger': 5, 'social': 5, 'hygiene': 3, 'sleep': 5}
