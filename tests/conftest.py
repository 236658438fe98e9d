"""
Shared fixtures for the petcare test suite.
"""

import pytest

from event_dispatcher import EventDispatcher
from pet import Pet
from pet.modules.needs import NeedsManager
from utils.random_source import ScriptedRandomSource

@pytest.fixture
def scripted_random():
    """Deterministic source: unit float 0.5, every int draw 99 (never anxious)."""
    return ScriptedRandomSource(unit_float=0.5, ints=[99])

@pytest.fixture
def dispatcher():
    """Fresh dispatcher so tests never share listeners."""
    return EventDispatcher()

@pytest.fixture
def events(dispatcher):
    """Every pet event dispatched during the test, in order."""
    recorded = []
    dispatcher.add_listener("pet:*", recorded.append)
    return recorded

@pytest.fixture
def pet(scripted_random, dispatcher):
    return Pet(random_source=scripted_random, dispatcher=dispatcher)

@pytest.fixture
def even_needs():
    """All four needs at 50."""
    return NeedsManager(hunger=50, hygiene=50, social=50, sleep=50)
