from utils.random_source import RandomSource
from .mood import Mood, parse_mood
from .strategy import MoodStrategy, TableMoodStrategy
from .content import ContentMoodStrategy
from .distressed import DistressedMoodStrategy
from .anxious import AnxiousMoodStrategy

def create_strategy(mood: Mood, random_source: RandomSource) -> MoodStrategy:
    """
    Builds a fresh strategy for a mood.

    Raises:
        TypeError: If mood is not a Mood.
    """
    if mood is Mood.CONTENT:
        return ContentMoodStrategy()
    if mood is Mood.DISTRESSED:
        return DistressedMoodStrategy()
    if mood is Mood.ANXIOUS:
        return AnxiousMoodStrategy(random_source)
    raise TypeError(f"Unexpected mood: {mood!r}")

__all__ = [
    'Mood', 'parse_mood', 'MoodStrategy', 'TableMoodStrategy',
    'ContentMoodStrategy', 'DistressedMoodStrategy', 'AnxiousMoodStrategy',
    'create_strategy',
]
