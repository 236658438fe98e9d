import pytest

from pet.modules.actions import Action
from pet.modules.moods import (
    AnxiousMoodStrategy, ContentMoodStrategy, DistressedMoodStrategy, Mood, create_strategy,
)
from pet.modules.needs import NeedsManager
from utils.random_source import ScriptedRandomSource

def needs_tuple(needs):
    return (needs.hunger, needs.hygiene, needs.social, needs.sleep)

# --- content ---------------------------------------------------------------

@pytest.mark.parametrize("action, expected", [
    # (hunger, hygiene, social, sleep) from (50, 50, 50, 50)
    (Action.FEED, (35, 53, 55, 55)),
    (Action.PLAY, (55, 53, 40, 60)),
    (Action.CLEAN, (50, 35, 53, 60)),
    (Action.SLEEP, (50, 50, 40, 20)),
])
def test_content_action_table(even_needs, action, expected):
    ContentMoodStrategy().apply_action(even_needs, action)
    assert needs_tuple(even_needs) == expected

def test_content_feed_from_defaults():
    needs = NeedsManager()
    strategy = ContentMoodStrategy()
    strategy.apply_action(needs, Action.FEED)
    assert needs_tuple(needs) == (5, 63, 65, 20)
    # hygiene and social are both above 60 now
    assert strategy.recommended_mood(needs) is Mood.DISTRESSED

def test_content_tick(even_needs):
    ContentMoodStrategy().passive_tick(even_needs)
    assert needs_tuple(even_needs) == (52, 51, 52, 51)

def test_content_comfort_has_no_effect(even_needs):
    ContentMoodStrategy().apply_action(even_needs, Action.COMFORT)
    assert needs_tuple(even_needs) == (50, 50, 50, 50)

def test_content_clamps():
    needs = NeedsManager(hunger=5, hygiene=99, social=98, sleep=97)
    ContentMoodStrategy().apply_action(needs, Action.FEED)
    assert needs_tuple(needs) == (0, 100, 100, 100)

@pytest.mark.parametrize("strategy_cls", [ContentMoodStrategy, DistressedMoodStrategy])
@pytest.mark.parametrize("values, expected", [
    ((61, 61, 0, 0), Mood.DISTRESSED),
    ((61, 60, 60, 60), Mood.CONTENT),
    ((100, 100, 100, 100), Mood.DISTRESSED),
    ((0, 0, 0, 0), Mood.CONTENT),
])
def test_table_strategies_recommendation(strategy_cls, values, expected):
    hunger, hygiene, social, sleep = values
    needs = NeedsManager(hunger=hunger, hygiene=hygiene, social=social, sleep=sleep)
    assert strategy_cls().recommended_mood(needs) is expected

# --- distressed ------------------------------------------------------------

@pytest.mark.parametrize("action, expected", [
    (Action.FEED, (30, 51, 51, 51)),
    (Action.PLAY, (51, 51, 35, 51)),
    (Action.CLEAN, (50, 30, 51, 51)),
    (Action.SLEEP, (50, 50, 50, 15)),
])
def test_distressed_action_table(even_needs, action, expected):
    DistressedMoodStrategy().apply_action(even_needs, action)
    assert needs_tuple(even_needs) == expected

def test_distressed_tick(even_needs):
    DistressedMoodStrategy().passive_tick(even_needs)
    assert needs_tuple(even_needs) == (55, 53, 55, 55)

# --- anxious ---------------------------------------------------------------

@pytest.fixture
def anxious_random():
    return ScriptedRandomSource(unit_float=0.5, ints=[0])

@pytest.fixture
def anxious(anxious_random):
    return AnxiousMoodStrategy(anxious_random)

def test_anxious_comfort(anxious, anxious_random, even_needs):
    anxious_random.set_unit_float(0.0)
    anxious.apply_action(even_needs, Action.COMFORT)
    assert needs_tuple(even_needs) == (50, 50, 20, 50)
    assert anxious.hug_applied

def test_anxious_comfort_clamps_social():
    needs = NeedsManager(social=10)
    AnxiousMoodStrategy(ScriptedRandomSource()).apply_action(needs, Action.COMFORT)
    assert needs.social == 0

def test_anxious_comfort_does_not_draw():
    class CountingSource(ScriptedRandomSource):
        draws = 0

        def next_unit_float(self):
            self.draws += 1
            return super().next_unit_float()

    source = CountingSource()
    AnxiousMoodStrategy(source).apply_action(NeedsManager(), Action.COMFORT)
    assert source.draws == 0

def test_anxious_feed_positive_ratio(anxious, anxious_random, even_needs):
    anxious_random.set_unit_float(0.75)  # ratio 0.5
    anxious.apply_action(even_needs, Action.FEED)
    # hunger 50 - round(5.625), social/sleep + round(1.875), hygiene + round(1.125)
    assert needs_tuple(even_needs) == (44, 51, 52, 52)

def test_anxious_feed_negative_ratio(anxious, anxious_random, even_needs):
    anxious_random.set_unit_float(0.25)  # ratio -0.5
    anxious.apply_action(even_needs, Action.FEED)
    assert needs_tuple(even_needs) == (56, 49, 48, 48)

def test_anxious_sleep_scaled():
    # ratio 0.5: sleep 30 * 0.375 = 11.25, social 10 * 0.375 = 3.75
    needs = NeedsManager(hunger=50, hygiene=50, social=50, sleep=50)
    AnxiousMoodStrategy(ScriptedRandomSource(unit_float=0.75)).apply_action(needs, Action.SLEEP)
    assert needs_tuple(needs) == (50, 50, 46, 39)

def test_anxious_play_halves_after_hug(anxious, even_needs):
    anxious.apply_action(even_needs, Action.COMFORT)
    anxious.apply_action(even_needs, Action.PLAY)
    # ratio 1.0: social and sleep move by 7.5, rounded to 8
    assert needs_tuple(even_needs) == (54, 52, 12, 58)

def test_anxious_play_negative_halves_round_up(anxious, anxious_random, even_needs):
    anxious_random.set_unit_float(0.0)  # ratio -1.0
    anxious.apply_action(even_needs, Action.PLAY)
    # social: 50 - round(-7.5) = 57, sleep: 50 + round(-7.5) = 43
    assert needs_tuple(even_needs) == (46, 48, 57, 43)

def test_anxious_clean_leaves_hunger(anxious, anxious_random, even_needs):
    anxious_random.set_unit_float(0.75)
    anxious.apply_action(even_needs, Action.CLEAN)
    # hygiene - round(5.625), social + round(1.125), sleep + round(3.75)
    assert needs_tuple(even_needs) == (50, 44, 51, 54)

def test_anxious_tick_scripted(anxious, anxious_random, even_needs):
    anxious_random.set_ints([10, 5])
    anxious.passive_tick(even_needs)
    assert needs_tuple(even_needs) == (57, 53, 53, 45)

def test_anxious_tick_extremes(anxious, anxious_random, even_needs):
    anxious_random.set_ints([14, 20])
    anxious.passive_tick(even_needs)
    assert (even_needs.social, even_needs.sleep) == (57, 60)
    anxious_random.set_ints([0, 0])
    anxious.passive_tick(even_needs)
    assert (even_needs.social, even_needs.sleep) == (50, 50)

def test_hug_pins_ratio_until_tick(anxious, anxious_random, even_needs):
    anxious.apply_action(even_needs, Action.COMFORT)
    anxious.apply_action(even_needs, Action.FEED)
    assert even_needs.hunger == 39

    anxious_random.set_ints([7, 10])  # no social or sleep change
    anxious.passive_tick(even_needs)
    assert not anxious.hug_applied
    assert even_needs.hunger == 46

    anxious_random.set_unit_float(0.25)  # ratio -0.5
    anxious.apply_action(even_needs, Action.FEED)
    assert even_needs.hunger == 52

@pytest.mark.parametrize("values, expected", [
    ((40, 60, 40, 40), Mood.CONTENT),
    ((40, 40, 40, 40), Mood.CONTENT),
    ((40, 60, 40, 60), Mood.ANXIOUS),
    ((50, 50, 50, 50), Mood.ANXIOUS),
])
def test_anxious_recommendation(anxious, values, expected):
    hunger, hygiene, social, sleep = values
    needs = NeedsManager(hunger=hunger, hygiene=hygiene, social=social, sleep=sleep)
    assert anxious.recommended_mood(needs) is expected

# --- factory ---------------------------------------------------------------

@pytest.mark.parametrize("mood, cls", [
    (Mood.CONTENT, ContentMoodStrategy),
    (Mood.DISTRESSED, DistressedMoodStrategy),
    (Mood.ANXIOUS, AnxiousMoodStrategy),
])
def test_create_strategy(mood, cls):
    strategy = create_strategy(mood, ScriptedRandomSource())
    assert isinstance(strategy, cls)
    assert strategy.mood is mood

def test_create_strategy_rejects_unknown():
    with pytest.raises(TypeError):
        create_strategy("content", ScriptedRandomSource())
