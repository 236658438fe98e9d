# pet/modules/moods/anxious.py

"""
Anxious behaviour:

Care actions are unreliable {random ratio in [-1, 1]} -> {content effects scaled by 0.75 * ratio},
so feeding an anxious pet can just as well make it hungrier. A hug (COMFORT)
relieves social need and steadies the next actions {ratio pinned to 1.0}
until the next tick. Social and sleep wander randomly each tick.
"""

from config import Config
from utils.helpers import round_half_up
from utils.random_source import RandomSource
from pet.modules.actions.action import Action
from .content import ContentMoodStrategy
from .mood import Mood
from .strategy import MoodStrategy

class AnxiousMoodStrategy(MoodStrategy):
    """
    Strategy for an anxious pet. Carries the hug flag between calls.
    """

    mood = Mood.ANXIOUS

    HUNGER_DRIFT = 7
    HYGIENE_DRIFT = 3
    SOCIAL_SPREAD = 7   # social moves by -7..+7
    SLEEP_SPREAD = 10   # sleep moves by -10..+10

    def __init__(self, random_source: RandomSource):
        """
        Args:
            random_source (RandomSource): Source of the action ratio and tick drift.
        """
        self.random_source = random_source
        self.hug_applied = False

    def action_ratio(self) -> float:
        """Ratio applied to the scaled content effects; 1.0 while hugged."""
        if self.hug_applied:
            return 1.0
        return self.random_source.next_unit_float() * 2.0 - 1.0

    def apply_action(self, needs, action):
        if action is Action.COMFORT:
            needs.alter_need('social', -Config.COMFORT_SOCIAL_RELIEF)
            self.hug_applied = True
            return

        effects = ContentMoodStrategy.ACTION_EFFECTS.get(action)
        if effects is None:
            raise ValueError(f"Unexpected action: {action}")

        scale = Config.ANXIOUS_ACTION_SCALE * self.action_ratio()
        for need_name, amount in effects.items():
            # round the scaled magnitude, then apply the content sign
            scaled = round_half_up(abs(amount) * scale)
            needs.alter_need(need_name, scaled if amount > 0 else -scaled)

    def passive_tick(self, needs):
        needs.alter_need('hunger', self.HUNGER_DRIFT)
        needs.alter_need(
            'social',
            self.random_source.next_bounded_int(2 * self.SOCIAL_SPREAD + 1) - self.SOCIAL_SPREAD
        )
        needs.alter_need('hygiene', self.HYGIENE_DRIFT)
        needs.alter_need(
            'sleep',
            self.random_source.next_bounded_int(2 * self.SLEEP_SPREAD + 1) - self.SLEEP_SPREAD
        )
        self.hug_applied = False

    def recommended_mood(self, needs):
        if needs.count_below(Config.CALM_THRESHOLD) >= Config.CALM_COUNT:
            return Mood.CONTENT
        return Mood.ANXIOUS
