"""
Shared pytest fixtures for the advisor test suite.

This module provides reusable fixtures for:
- The bundled reference data
- Starter runs and hand-built run snapshots
- A small synthetic catalog, for tests that must not depend on the
  bundled ratings
"""

import pytest
import sys

# Ensure project root is in path
import os
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from packages.advisor.content.catalog import ReferenceData, default_reference_data
from packages.advisor.content.cards import Character
from packages.advisor.state.run import RunState, create_starter_run, make_deck


# =============================================================================
# Reference Data Fixtures
# =============================================================================


@pytest.fixture
def data():
    """The bundled catalogs."""
    return default_reference_data()


SYNTHETIC_CATALOG = {
    "cards": [
        {"id": "jab", "name": "Jab", "character": "ironclad", "rarity": "basic",
         "type": "attack", "cost": 1, "tier_rating": 1.0, "tags": ["strike"]},
        {"id": "guard", "name": "Guard", "character": "ironclad", "rarity": "basic",
         "type": "skill", "cost": 1, "tier_rating": 1.5, "tags": ["block"]},
        {"id": "cleave_wave", "name": "Cleave Wave", "character": "ironclad", "rarity": "common",
         "type": "attack", "cost": 1, "tier_rating": 3.0, "tags": ["aoe", "frontload"]},
        {"id": "grow", "name": "Grow", "character": "ironclad", "rarity": "uncommon",
         "type": "power", "cost": 1, "tier_rating": 3.5, "tags": ["scaling"],
         "synergies": ["cleave_wave"]},
        {"id": "gloom", "name": "Gloom", "character": "colorless", "rarity": "curse",
         "type": "curse", "cost": -2, "tier_rating": 1.0},
    ],
    "relics": [
        {"id": "lucky_coin", "name": "Lucky Coin", "tier": "common", "grade": "B",
         "description": "Gain 10 gold after each combat."},
        {"id": "heavy_crown", "name": "Heavy Crown", "tier": "boss", "grade": "A",
         "description": "Gain 1 energy."},
    ],
    "potions": [
        {"id": "red_flask", "name": "Red Flask", "rarity": "common",
         "effect": "Heal 10 HP.", "usage": "Drink when low.", "tags": ["heal"]},
    ],
    "monsters": [
        {"id": "brute", "name": "Brute", "act": 1, "hp": "60", "difficulty": "elite",
         "requirements": {"damage": "high", "block": "high", "scaling": "low"}},
        {"id": "big_boss", "name": "Big Boss", "act": 1, "hp": "200", "difficulty": "boss",
         "requirements": {"damage": "medium", "block": "medium", "scaling": "medium"}},
    ],
    "events": [
        {"id": "fountain", "name": "Fountain", "choices": [
            {"id": "drink", "label": "Drink", "hp_cost": 5},
            {"id": "toss", "label": "Toss a coin", "gold_cost": 500},
            {"id": "leave", "label": "Leave"},
        ]},
    ],
    "blessings": [
        {"id": "pocket_money", "name": "Pocket Money", "description": "Obtain 300 gold."},
        {"id": "spring_clean", "name": "Spring Clean", "description": "Remove a card from your deck."},
    ],
    "archetypes": [
        {"id": "growth", "name": "Growth", "character": "ironclad",
         "key_cards": ["grow"], "recommended_cards": ["cleave_wave"],
         "expected_key": 1, "expected_support": 2},
    ],
    "act_bosses": {"1": ["big_boss"]},
}


@pytest.fixture
def synthetic_catalog():
    """Catalog document with a handful of made-up records."""
    return SYNTHETIC_CATALOG


@pytest.fixture
def synthetic_data():
    return ReferenceData.from_dict(SYNTHETIC_CATALOG)


# =============================================================================
# Run State Fixtures
# =============================================================================


@pytest.fixture
def ironclad_run():
    """Floor-1 Ironclad starter run at ascension 0."""
    return create_starter_run(Character.IRONCLAD)


def build_run(card_ids, character=Character.IRONCLAD, **changes) -> RunState:
    """Run snapshot with the given deck; other fields default or come from changes."""
    return RunState(character=character, deck=make_deck(list(card_ids)), **changes)


@pytest.fixture
def make_run():
    """Factory fixture: make_run(["bash", "inflame"], floor=20, current_hp=40)."""
    return build_run
