import random

import pytest

import config
import generation
from election import GameEngine


class FixedRandom(random.Random):
    """random() always returns `value`: AI noise and drift noise become 0 at 0.5."""

    def __init__(self, value=0.5, seed=0):
        self.value = value
        super().__init__(seed)

    def random(self):
        return self.value


SMALL_PARTIES = {
    "A": {"name": "Alpha", "short_name": "Alpha"},
    "B": {"name": "Beta", "short_name": "Beta"},
    "R": {"name": "Regional", "short_name": "Regional",
          "restricted_to": "X", "established_year": 2000},
}
SMALL_REGIONS = {
    "X": {"name": "Xland", "grouping": "g1", "seats": 10},
    "Y": {"name": "Yland", "grouping": "g1", "seats": 5},
    "Z": {"name": "Zland", "grouping": "g2", "seats": 1},
}
SMALL_GROUPINGS = {"g1": ["X", "Y"], "g2": ["Z"]}
SMALL_SUPPORT = {
    "X": {"A": 50, "B": 30, "R": 20},
    "Y": {"A": 40, "B": 60, "R": 0},
    "Z": {"A": 10, "B": 10},
}
SMALL_SCHEDULE = [1990, 2000, 2010]
SMALL_EVENTS = [
    {"id": "S1", "min_year": 1990, "max_year": 1995, "title": "Early",
     "effects": [{"party": "A", "grouping": "all", "delta": 5}]},
    {"id": "S2", "min_year": 1990, "max_year": 2010, "title": "Always",
     "effects": [{"party": "SELF", "region": "X", "delta": -3}]},
    {"id": "S3", "min_year": 2005, "max_year": 2010, "title": "Late",
     "effects": [{"party": "LEADER", "grouping": "g1", "delta": -4}]},
]
SMALL_POLICIES = [
    {"id": "Q1", "party": "all", "name": "Blitz", "cost": 4,
     "effects": [{"party": "SELF", "grouping": "all", "delta": 3}]},
    {"id": "Q2", "party": "B", "name": "Beta only", "cost": 2,
     "effects": [{"party": "SELF", "region": "Y", "delta": 5}]},
]


def build_small_reference(**overrides):
    tables = {
        "parties": SMALL_PARTIES,
        "regions": SMALL_REGIONS,
        "groupings": SMALL_GROUPINGS,
        "starting_support": SMALL_SUPPORT,
        "schedule": SMALL_SCHEDULE,
        "events": SMALL_EVENTS,
        "policies": SMALL_POLICIES,
    }
    tables.update(overrides)
    return generation.build_reference_data(**tables)


@pytest.fixture
def reference():
    return generation.default_reference_data()


@pytest.fixture
def small_reference():
    return build_small_reference()


@pytest.fixture
def engine(reference):
    return GameEngine("LPC", config.DIFFICULTY_NORMAL, reference=reference, seed=1234)


@pytest.fixture
def fixed_engine(reference):
    """Engine with flat randomness (noise terms cancel out)."""
    return GameEngine("LPC", config.DIFFICULTY_NORMAL, reference=reference, rng=FixedRandom(0.5))
