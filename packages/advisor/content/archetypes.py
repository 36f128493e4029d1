"""
Archetype Definitions - named deck strategies, four per character.

An archetype is detected by counting its cards in the deck:
- key_cards: payoffs whose presence strongly signals the build
- recommended_cards: support cards that fill it out
- expected_key / expected_support: copies a finished build usually runs,
  used to normalize the 0-100 strength score
- min_key_cards: distinct key cards required before the archetype counts
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .cards import Character
from ..config import (
    DEFAULT_EXPECTED_KEY_CARDS,
    DEFAULT_EXPECTED_SUPPORT_CARDS,
    DEFAULT_MIN_KEY_CARDS,
)


@dataclass(frozen=True)
class ArchetypeDefinition:
    id: str
    name: str
    character: Character
    description: str
    key_cards: Tuple[str, ...]
    recommended_cards: Tuple[str, ...]
    expected_key: int = DEFAULT_EXPECTED_KEY_CARDS
    expected_support: int = DEFAULT_EXPECTED_SUPPORT_CARDS
    min_key_cards: int = DEFAULT_MIN_KEY_CARDS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArchetypeDefinition":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            character=Character(data["character"]),
            description=data.get("description", ""),
            key_cards=tuple(data.get("key_cards", ())),
            recommended_cards=tuple(data.get("recommended_cards", ())),
            expected_key=int(data.get("expected_key", DEFAULT_EXPECTED_KEY_CARDS)),
            expected_support=int(data.get("expected_support", DEFAULT_EXPECTED_SUPPORT_CARDS)),
            min_key_cards=int(data.get("min_key_cards", DEFAULT_MIN_KEY_CARDS)),
        )


# ============ IRONCLAD ============

IRONCLAD_ARCHETYPES = [
    ArchetypeDefinition(
        "strength_scaling", "Strength Scaling", Character.IRONCLAD,
        "Build Strength and cash it in with multi-hit and Strength-scaling attacks",
        key_cards=("inflame", "demon_form", "limit_break", "spot_weakness"),
        recommended_cards=("heavy_blade", "sword_boomerang", "twin_strike", "pummel",
                           "whirlwind", "reaper"),
    ),
    ArchetypeDefinition(
        "exhaust", "Exhaust Synergy", Character.IRONCLAD,
        "Exhaust cards on purpose and profit through Feel No Pain and Dark Embrace",
        key_cards=("corruption", "feel_no_pain", "dark_embrace"),
        recommended_cards=("true_grit", "burning_pact", "offering", "fiend_fire",
                           "second_wind", "sentinel", "immolate"),
    ),
    ArchetypeDefinition(
        "block", "Block Stacking", Character.IRONCLAD,
        "Keep Block between turns and turn it into damage",
        key_cards=("barricade", "entrench", "body_slam"),
        recommended_cards=("shrug_it_off", "flame_barrier", "impervious", "metallicize",
                           "ghostly_armor", "iron_wave"),
    ),
    ArchetypeDefinition(
        "self_damage", "Self Damage", Character.IRONCLAD,
        "Lose HP on purpose to fuel Rupture and heal it back",
        key_cards=("rupture", "brutality"),
        recommended_cards=("bloodletting", "hemokinesis", "offering", "combust", "reaper",
                           "feed"),
        expected_key=1,
    ),
]


# ============ SILENT ============

SILENT_ARCHETYPES = [
    ArchetypeDefinition(
        "poison", "Poison", Character.SILENT,
        "Stack Poison and multiply it with Catalyst",
        key_cards=("catalyst", "noxious_fumes", "corpse_explosion"),
        recommended_cards=("deadly_poison", "bouncing_flask", "poisoned_stab",
                           "crippling_cloud", "bane", "malaise"),
    ),
    ArchetypeDefinition(
        "shiv", "Shivs", Character.SILENT,
        "Generate Shivs and amplify every hit with Accuracy",
        key_cards=("accuracy", "infinite_blades", "blade_dance"),
        recommended_cards=("cloak_and_dagger", "storm_of_steel", "finisher", "after_image",
                           "a_thousand_cuts"),
    ),
    ArchetypeDefinition(
        "discard", "Discard", Character.SILENT,
        "Discard for value with Tactician, Reflex and Eviscerate",
        key_cards=("tactician", "reflex", "tools_of_the_trade"),
        recommended_cards=("acrobatics", "prepared", "calculated_gamble", "eviscerate",
                           "dagger_throw", "sneaky_strike"),
    ),
    ArchetypeDefinition(
        "zero_cost", "Zero-Cost Spam", Character.SILENT,
        "Play many cheap cards in a turn with After Image and A Thousand Cuts",
        key_cards=("after_image", "a_thousand_cuts"),
        recommended_cards=("backflip", "slice", "deflect", "prepared", "finisher",
                           "adrenaline"),
    ),
]


# ============ DEFECT ============

DEFECT_ARCHETYPES = [
    ArchetypeDefinition(
        "frost_focus", "Frost Focus", Character.DEFECT,
        "Stack Focus and Frost orbs for passive block",
        key_cards=("defragment", "biased_cognition", "glacier"),
        recommended_cards=("coolheaded", "cold_snap", "chill", "capacitor", "loop",
                           "consume"),
    ),
    ArchetypeDefinition(
        "lightning", "Lightning", Character.DEFECT,
        "Channel Lightning and spread it with Electrodynamics",
        key_cards=("electrodynamics", "thunder_strike", "tempest"),
        recommended_cards=("ball_lightning", "static_discharge", "storm", "zap",
                           "sweeping_beam", "defragment"),
    ),
    ArchetypeDefinition(
        "dark_orb", "Dark Orbs", Character.DEFECT,
        "Charge Dark orbs and evoke them for burst",
        key_cards=("darkness", "doom_and_gloom"),
        recommended_cards=("recursion", "multi_cast", "loop", "consume", "capacitor"),
        expected_key=1,
    ),
    ArchetypeDefinition(
        "power_spam", "Power Spam", Character.DEFECT,
        "Play many powers and reward them with Storm and Heatsinks",
        key_cards=("storm", "heatsinks", "creative_ai", "echo_form"),
        recommended_cards=("defragment", "capacitor", "loop", "buffer",
                           "machine_learning", "biased_cognition"),
    ),
]


# ============ WATCHER ============

WATCHER_ARCHETYPES = [
    ArchetypeDefinition(
        "stance_dance", "Stance Dance", Character.WATCHER,
        "Flip between Calm and Wrath for energy and Mental Fortress block",
        key_cards=("rushdown", "mental_fortress", "tantrum"),
        recommended_cards=("eruption", "vigilance", "inner_peace", "fear_no_evil",
                           "empty_fist", "empty_body", "flurry_of_blows"),
    ),
    ArchetypeDefinition(
        "scry", "Scry", Character.WATCHER,
        "Scry every turn with Nirvana and Foresight",
        key_cards=("nirvana", "foresight", "weave"),
        recommended_cards=("third_eye", "cut_through_fate", "just_lucky", "scrawl"),
        expected_key=1,
    ),
    ArchetypeDefinition(
        "divinity", "Divinity", Character.WATCHER,
        "Build Mantra into Divinity for triple damage turns",
        key_cards=("devotion", "worship", "blasphemy"),
        recommended_cards=("prostrate", "pray", "brilliance", "ragnarok", "deva_form"),
    ),
    ArchetypeDefinition(
        "retain", "Retain", Character.WATCHER,
        "Retain cards and grow them with Establishment",
        key_cards=("establishment", "sands_of_time", "windmill_strike"),
        recommended_cards=("perseverance", "protect", "flying_sleeves", "crescendo",
                           "tranquility"),
        expected_key=1,
    ),
]


ALL_ARCHETYPES: List[ArchetypeDefinition] = (
    IRONCLAD_ARCHETYPES + SILENT_ARCHETYPES + DEFECT_ARCHETYPES + WATCHER_ARCHETYPES
)


def get_archetypes_for_character(character: Character) -> List[ArchetypeDefinition]:
    """Definitions for one character, in catalog order."""
    return [a for a in ALL_ARCHETYPES if a.character == character]
