"""
Potion Reference Catalog.

Potions carry their effect text plus usage guidance surfaced by the combat
readiness analyzer. Tags group potions by role:
- offense: burst damage or damage scaling
- defense: block, weak, intangible
- heal: restores HP
- utility: draw, energy, card generation
- emergency: worth holding for elites and bosses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from .cards import Character


class PotionRarity(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"


OFFENSE = "offense"
DEFENSE = "defense"
HEAL = "heal"
UTILITY = "utility"
EMERGENCY = "emergency"


@dataclass(frozen=True)
class Potion:
    """A potion reference record."""
    id: str
    name: str
    rarity: PotionRarity
    effect: str
    usage: str
    character: Optional[Character] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "tags", frozenset(self.tags))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Potion":
        owner = data.get("character", "shared")
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            rarity=PotionRarity(data.get("rarity", "common")),
            effect=data.get("effect", ""),
            usage=data.get("usage", ""),
            character=None if owner in (None, "shared") else Character(owner),
            tags=frozenset(data.get("tags", ())),
        )


def _potion(potion_id, name, rarity, effect, usage, tags=(), character=None) -> Potion:
    return Potion(id=potion_id, name=name, rarity=rarity, effect=effect, usage=usage,
                  character=character, tags=tags)


ALL_POTIONS: Dict[str, Potion] = {p.id: p for p in [
    _potion("fire_potion", "Fire Potion", PotionRarity.COMMON, "Deal 20 damage to target enemy.",
            "Finish off a high-HP target or skip a dangerous turn.", (OFFENSE,)),
    _potion("explosive_potion", "Explosive Potion", PotionRarity.COMMON,
            "Deal 10 damage to ALL enemies.", "Best against multi-enemy fights.", (OFFENSE,)),
    _potion("attack_potion", "Attack Potion", PotionRarity.COMMON,
            "Add 1 of 3 random Attack cards into your hand, it costs 0 this turn.",
            "Use for a free burst of damage.", (OFFENSE, UTILITY)),
    _potion("strength_potion", "Strength Potion", PotionRarity.COMMON, "Gain 2 Strength.",
            "Drink on turn one of long fights.", (OFFENSE, EMERGENCY)),
    _potion("flex_potion", "Flex Potion", PotionRarity.COMMON, "Gain 5 Strength this turn.",
            "Pair with multi-hit attacks.", (OFFENSE,)),
    _potion("block_potion", "Block Potion", PotionRarity.COMMON, "Gain 12 Block.",
            "Absorb a big telegraphed hit.", (DEFENSE,)),
    _potion("dexterity_potion", "Dexterity Potion", PotionRarity.COMMON, "Gain 2 Dexterity.",
            "Drink early in long fights with many block cards.", (DEFENSE, EMERGENCY)),
    _potion("weak_potion", "Weak Potion", PotionRarity.COMMON, "Apply 3 Weak.",
            "Blunt an enemy's strongest attack turns.", (DEFENSE,)),
    _potion("fear_potion", "Fear Potion", PotionRarity.COMMON, "Apply 3 Vulnerable.",
            "Set up a big damage turn.", (OFFENSE,)),
    _potion("swift_potion", "Swift Potion", PotionRarity.COMMON, "Draw 3 cards.",
            "Dig for key cards.", (UTILITY,)),
    _potion("energy_potion", "Energy Potion", PotionRarity.COMMON, "Gain 2 Energy.",
            "Play an expensive power and attack in the same turn.", (UTILITY,)),
    _potion("blood_potion", "Blood Potion", PotionRarity.COMMON, "Heal for 20% of your Max HP.",
            "Save for emergencies or drink before a boss.", (HEAL,)),
    _potion("ancient_potion", "Ancient Potion", PotionRarity.UNCOMMON, "Gain 1 Artifact.",
            "Drink before an enemy applies its strongest debuff.", (DEFENSE,)),
    _potion("regen_potion", "Regen Potion", PotionRarity.UNCOMMON, "Gain 5 Regeneration.",
            "Drink early to heal over the fight.", (HEAL,)),
    _potion("essence_of_steel", "Essence of Steel", PotionRarity.UNCOMMON,
            "Gain 4 Plated Armor.", "Strong in long fights.", (DEFENSE, EMERGENCY)),
    _potion("gamblers_brew", "Gambler's Brew", PotionRarity.UNCOMMON,
            "Discard any number of cards, then draw that many.", "Fix a bad opening hand.",
            (UTILITY,)),
    _potion("duplication_potion", "Duplication Potion", PotionRarity.UNCOMMON,
            "This turn, your next card is played twice.", "Double a key power or big attack.",
            (UTILITY, OFFENSE)),
    _potion("liquid_memories", "Liquid Memories", PotionRarity.UNCOMMON,
            "Choose a card in your discard pile and return it to your hand.",
            "Replay your best card.", (UTILITY,)),
    _potion("smoke_bomb", "Smoke Bomb", PotionRarity.RARE, "Escape from a non-boss combat.",
            "Escape a losing hallway or elite fight.", (EMERGENCY,)),
    _potion("fairy_in_a_bottle", "Fairy in a Bottle", PotionRarity.RARE,
            "When you would die, heal to 30% of your Max HP instead.",
            "Keep it; it triggers automatically.", (HEAL, EMERGENCY)),
    _potion("fruit_juice", "Fruit Juice", PotionRarity.RARE, "Gain 5 Max HP.",
            "Drink immediately.", (HEAL,)),
    _potion("entropic_brew", "Entropic Brew", PotionRarity.RARE,
            "Fill all your empty potion slots with random potions.",
            "Drink when slots are empty.", (UTILITY,)),
    _potion("cultist_potion", "Cultist Potion", PotionRarity.RARE, "Gain 1 Ritual.",
            "Drink at the start of long boss fights.", (OFFENSE, EMERGENCY)),
    _potion("blessing_of_the_forge", "Blessing of the Forge", PotionRarity.COMMON,
            "Upgrade all cards in your hand for the rest of combat.",
            "Use on a turn with your key cards in hand.", (UTILITY,)),
    _potion("poison_potion", "Poison Potion", PotionRarity.COMMON, "Apply 6 Poison.",
            "Start poison early in long fights.", (OFFENSE,), Character.SILENT),
    _potion("focus_potion", "Focus Potion", PotionRarity.COMMON, "Gain 2 Focus.",
            "Drink before channeling orbs.", (OFFENSE, DEFENSE), Character.DEFECT),
    _potion("bottled_miracle", "Bottled Miracle", PotionRarity.COMMON,
            "Add 2 Miracles into your hand.", "Energy for a big Wrath turn.", (UTILITY,),
            Character.WATCHER),
    _potion("heart_of_iron", "Heart of Iron", PotionRarity.RARE, "Gain 6 Metallicize.",
            "Drink at the start of long fights.", (DEFENSE, EMERGENCY), Character.IRONCLAD),
]}


def get_potion(potion_id: str) -> Potion:
    """Get a potion by id."""
    if potion_id not in ALL_POTIONS:
        raise ValueError(f"Unknown potion: {potion_id}")
    return ALL_POTIONS[potion_id]
