# pet/__init__.py

from .pet import Pet
from .health import HealthSnapshot
from .modules.actions import Action, parse_action
from .modules.moods import Mood, parse_mood

__all__ = ['Pet', 'HealthSnapshot', 'Action', 'parse_action', 'Mood', 'parse_mood']
