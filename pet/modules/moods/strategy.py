# pet/modules/moods/strategy.py

from abc import ABC, abstractmethod
from typing import Dict
from config import Config
from pet.modules.actions.action import Action
from pet.modules.needs.needs_manager import NeedsManager
from loggers import PetLogger
from .mood import Mood

class MoodStrategy(ABC):
    """
    Abstract base class for mood-dependent behaviour.

    A strategy decides how care actions and the passage of time move the
    needs, and which mood the current needs justify. Strategies mutate the
    NeedsManager they are given; clamping is the manager's job.
    """

    mood: Mood

    @abstractmethod
    def apply_action(self, needs: NeedsManager, action: Action) -> None:
        """Applies the effect of a care action."""

    @abstractmethod
    def passive_tick(self, needs: NeedsManager) -> None:
        """Applies one time unit of drift."""

    @abstractmethod
    def recommended_mood(self, needs: NeedsManager) -> Mood:
        """Returns the mood the current needs justify."""

class TableMoodStrategy(MoodStrategy):
    """
    Strategy driven by fixed per-action and per-tick delta tables.

    Subclasses fill ACTION_EFFECTS and TICK_EFFECTS. An action without a
    table row (COMFORT outside of anxiety) leaves the needs untouched.
    """

    ACTION_EFFECTS: Dict[Action, Dict[str, int]] = {}
    TICK_EFFECTS: Dict[str, int] = {}

    def apply_action(self, needs, action):
        effects = self.ACTION_EFFECTS.get(action)
        if effects is None:
            PetLogger.debug(f"{action.name} has no effect while {self.mood.value}")
            return
        for need_name, amount in effects.items():
            needs.alter_need(need_name, amount)

    def passive_tick(self, needs):
        for need_name, amount in self.TICK_EFFECTS.items():
            needs.alter_need(need_name, amount)

    def recommended_mood(self, needs):
        # the same rule applies whether currently content or distressed
        if needs.count_above(Config.DISTRESS_THRESHOLD) >= Config.DISTRESS_COUNT:
            return Mood.DISTRESSED
        return Mood.CONTENT
