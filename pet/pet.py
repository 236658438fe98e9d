"""
Pet core implementation.

The pet owns its needs, its mood, the strategy bound to that mood and the
dead flag. It changes only through apply_action and tick (plus the
set_mood hook); once dead, all three are no-ops.
"""

from typing import Optional

from config import Config
from event_dispatcher import EventDispatcher, Event, global_event_dispatcher
from loggers import PetLogger
from utils.random_source import RandomSource, SystemRandomSource
from pet.health import HealthSnapshot
from pet.modules.actions.action import Action
from pet.modules.moods import Mood, MoodStrategy, create_strategy
from pet.modules.needs.needs_manager import NeedsManager

class Pet:
    """
    Virtual pet state machine.

    Not safe for concurrent use: callers that drive one pet from several
    sources (manual input and a timer, say) must serialize access.
    """

    def __init__(self, random_source: Optional[RandomSource] = None,
                 dispatcher: Optional[EventDispatcher] = None):
        """
        Initialize a pet with the default needs, content and alive.

        Args:
            random_source (RandomSource, optional): Source for anxiety onset and
                anxious behaviour. Defaults to a SystemRandomSource.
            dispatcher (EventDispatcher, optional): Receives pet events.
                Defaults to the global dispatcher.
        """
        self.random_source = random_source or SystemRandomSource(Config.get_random_seed())
        self.dispatcher = dispatcher or global_event_dispatcher
        self.needs = NeedsManager()
        self._mood = Mood.CONTENT
        self._dead = False
        self._strategy: MoodStrategy = create_strategy(self._mood, self.random_source)

    @property
    def mood(self) -> Mood:
        return self._mood

    @property
    def dead(self) -> bool:
        return self._dead

    @property
    def strategy(self) -> MoodStrategy:
        return self._strategy

    def apply_action(self, action: Action) -> None:
        """
        The pet receives a care action which affects its needs.

        Raises:
            TypeError: If action is not an Action.
        """
        if not isinstance(action, Action):
            raise TypeError(f"Expected an Action, got {action!r}")
        if self._dead:
            return

        self._strategy.apply_action(self.needs, action)
        PetLogger.log_action(action.name, self.needs.as_dict())
        self.dispatcher.dispatch_event(Event("pet:action", {
            "action": action.value,
            "needs": self.needs.as_dict()
        }))
        self._settle()

    def tick(self) -> None:
        """
        Advances the pet's internal state by one unit of time.
        """
        if self._dead:
            return

        self._strategy.passive_tick(self.needs)
        PetLogger.log_tick(self.needs.as_dict())
        self.dispatcher.dispatch_event(Event("pet:tick", {"needs": self.needs.as_dict()}))
        self._settle()

    def set_mood(self, mood: Mood) -> None:
        """
        Forces the mood and installs a fresh strategy for it, even if the mood is unchanged.

        Raises:
            TypeError: If mood is not a Mood.
        """
        if not isinstance(mood, Mood):
            raise TypeError(f"Expected a Mood, got {mood!r}")
        if self._dead:
            return
        self._install_mood(mood, "manual")

    def health(self) -> HealthSnapshot:
        """
        Returns a snapshot of the pet's current health.
        """
        return HealthSnapshot(
            mood=self._mood,
            dead=self._dead,
            hunger=self.needs.hunger,
            hygiene=self.needs.hygiene,
            social=self.needs.social,
            sleep=self.needs.sleep,
        )

    def _settle(self) -> None:
        """Re-evaluates mood, samples anxiety onset and checks for death, in that order."""
        recommended = self._strategy.recommended_mood(self.needs)
        if recommended is not self._mood:
            self._install_mood(recommended, "recommended")
        self._check_anxiety()
        self._check_death()

    def _install_mood(self, mood: Mood, reason: str) -> None:
        old_mood = self._mood
        self._mood = mood
        self._strategy = create_strategy(mood, self.random_source)
        if old_mood is not mood:
            PetLogger.log_state_change("mood", old_mood.value, mood.value)
            self.dispatcher.dispatch_event(Event("pet:mood_changed", {
                "old_mood": old_mood.value,
                "new_mood": mood.value,
                "reason": reason
            }))

    def _check_anxiety(self) -> None:
        """
        Random chance to become anxious if not already; higher when hungry and tired.
        """
        if self._mood is Mood.ANXIOUS:
            return
        stressed = (self.needs.hunger > Config.ANXIETY_TRIGGER_THRESHOLD
                    and self.needs.sleep > Config.ANXIETY_TRIGGER_THRESHOLD)
        ceiling = Config.ANXIETY_CHANCE_STRESSED if stressed else Config.ANXIETY_CHANCE_BASELINE
        if self.random_source.next_bounded_int(100) < ceiling:
            self._install_mood(Mood.ANXIOUS, "anxiety_onset")

    def _check_death(self) -> None:
        if self.needs.hunger > Config.DEATH_THRESHOLD and self.needs.sleep > Config.DEATH_THRESHOLD:
            self._dead = True
            PetLogger.log_death(self.needs.as_dict())
            self.dispatcher.dispatch_event(Event("pet:died", {"needs": self.needs.as_dict()}))
