"""
Content module - reference catalogs the advisor reads.

Contains cards, relics, potions, monsters, events, blessings and archetype
definitions, plus the ReferenceData handle that bundles them.
"""

# Cards
from .cards import (
    Card, CardType, CardRarity, Character, PLAYABLE_CHARACTERS,
    COST_X, COST_UNPLAYABLE, ALL_CARDS, STARTER_DECKS,
    get_card, get_cards_for_character, normalize_card_id, resolve_card_id,
)

# Relics
from .relics import (
    Relic, RelicTier, RelicGrade, ALL_RELICS, BOSS_RELICS, STARTER_RELIC_FOR,
    get_relic, get_relics_by_tier,
)

# Potions
from .potions import Potion, PotionRarity, ALL_POTIONS, get_potion

# Monsters
from .enemies import (
    Monster, MonsterAttack, DeckRequirements, Difficulty, RequirementLevel,
    ALL_MONSTERS, ACT_BOSSES, get_monster, get_monsters_for_act,
)

# Events
from .events import Event, EventChoice, ALL_EVENTS, ALL_GOLD, get_event

# Blessings
from .blessings import Blessing, ALL_BLESSINGS, get_blessing

# Archetypes
from .archetypes import ArchetypeDefinition, ALL_ARCHETYPES, get_archetypes_for_character

# Reference data handle
from .catalog import ReferenceData, default_reference_data
