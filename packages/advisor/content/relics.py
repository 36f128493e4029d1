"""
Relic Reference Catalog.

Relic records carry:
- tier: STARTER, COMMON, UNCOMMON, RARE, BOSS, SHOP, EVENT
- character: owning character, or None for relics any character can find
- grade: hand-authored letter grade (S/A/B/C/D)
- tier_rating: optional numeric override of the grade on the 0-5 scale
- synergies / anti_synergies: card or relic ids the relic plays well / badly with
- tags: coarse effect tags ("energy", "draw", "block", ...) used by rules

Boss relics are scored by the per-relic rule table in
handlers/relic_reward.py rather than by grade alone.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .cards import Character


class RelicTier(Enum):
    """Relic tiers (where a relic can be found)."""
    STARTER = "starter"
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    BOSS = "boss"
    SHOP = "shop"
    EVENT = "event"


class RelicGrade(Enum):
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"


SHARED = "shared"


@dataclass(frozen=True)
class Relic:
    """A relic reference record."""
    id: str
    name: str
    tier: RelicTier
    grade: RelicGrade
    description: str = ""
    character: Optional[Character] = None
    tier_rating: Optional[float] = None
    synergies: Tuple[str, ...] = ()
    anti_synergies: Tuple[str, ...] = ()
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "synergies", tuple(self.synergies))
        object.__setattr__(self, "anti_synergies", tuple(self.anti_synergies))
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def is_shared(self) -> bool:
        return self.character is None

    @property
    def is_boss(self) -> bool:
        return self.tier == RelicTier.BOSS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Relic":
        """Build a relic from a JSON catalog entry."""
        owner = data.get("character", SHARED)
        rating = data.get("tier_rating")
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            tier=RelicTier(data.get("tier", "common")),
            grade=RelicGrade(data.get("grade", "C")),
            description=data.get("description", ""),
            character=None if owner in (None, SHARED) else Character(owner),
            tier_rating=None if rating is None else float(rating),
            synergies=tuple(data.get("synergies", ())),
            anti_synergies=tuple(data.get("anti_synergies", ())),
            tags=frozenset(data.get("tags", ())),
        )


def _relic(relic_id: str, name: str, tier: RelicTier, grade: str, description: str,
           character: Optional[Character] = None, synergies: Tuple[str, ...] = (),
           anti_synergies: Tuple[str, ...] = (), tags: Tuple[str, ...] = (),
           tier_rating: Optional[float] = None) -> Relic:
    return Relic(
        id=relic_id, name=name, tier=tier, grade=RelicGrade(grade), description=description,
        character=character, tier_rating=tier_rating, synergies=synergies,
        anti_synergies=anti_synergies, tags=tags,
    )


# ============================================================================
# STARTER RELICS
# ============================================================================

STARTER_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("burning_blood", "Burning Blood", RelicTier.STARTER, "B",
           "At the end of combat, heal 6 HP.", Character.IRONCLAD, tags=("heal",)),
    _relic("ring_of_the_snake", "Ring of the Snake", RelicTier.STARTER, "B",
           "At the start of each combat, draw 2 additional cards.", Character.SILENT,
           tags=("draw",)),
    _relic("cracked_core", "Cracked Core", RelicTier.STARTER, "B",
           "At the start of each combat, Channel 1 Lightning.", Character.DEFECT),
    _relic("pure_water", "Pure Water", RelicTier.STARTER, "B",
           "At the start of each combat, add a Miracle into your hand.", Character.WATCHER,
           tags=("energy",)),
]}


# ============================================================================
# COMMON RELICS
# ============================================================================

COMMON_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("akabeko", "Akabeko", RelicTier.COMMON, "B",
           "Your first Attack each combat deals 8 additional damage."),
    _relic("anchor", "Anchor", RelicTier.COMMON, "B",
           "Start each combat with 10 Block.", synergies=("body_slam", "barricade"),
           tags=("block",)),
    _relic("art_of_war", "Art of War", RelicTier.COMMON, "B",
           "If you do not play any Attacks during your turn, gain an extra Energy next turn.",
           tags=("energy",)),
    _relic("bag_of_marbles", "Bag of Marbles", RelicTier.COMMON, "B",
           "At the start of each combat, apply 1 Vulnerable to ALL enemies."),
    _relic("bag_of_preparation", "Bag of Preparation", RelicTier.COMMON, "B",
           "At the start of each combat, draw 2 additional cards.", tags=("draw",)),
    _relic("blood_vial", "Blood Vial", RelicTier.COMMON, "C",
           "At the start of each combat, heal 2 HP.", tags=("heal",)),
    _relic("bronze_scales", "Bronze Scales", RelicTier.COMMON, "C",
           "Start each combat with 3 Thorns."),
    _relic("happy_flower", "Happy Flower", RelicTier.COMMON, "B",
           "Every 3 turns, gain 1 Energy.", tags=("energy",)),
    _relic("lantern", "Lantern", RelicTier.COMMON, "A",
           "Gain 1 Energy on the first turn of each combat.", tags=("energy",)),
    _relic("nunchaku", "Nunchaku", RelicTier.COMMON, "B",
           "Every time you play 10 Attacks, gain 1 Energy.", tags=("energy",)),
    _relic("oddly_smooth_stone", "Oddly Smooth Stone", RelicTier.COMMON, "B",
           "At the start of each combat, gain 1 Dexterity.", tags=("block",)),
    _relic("orichalcum", "Orichalcum", RelicTier.COMMON, "B",
           "If you end your turn without Block, gain 6 Block.", tags=("block",)),
    _relic("pen_nib", "Pen Nib", RelicTier.COMMON, "B",
           "Every 10th Attack you play deals double damage."),
    _relic("potion_belt", "Potion Belt", RelicTier.COMMON, "C",
           "Upon pickup, gain 2 potion slots."),
    _relic("preserved_insect", "Preserved Insect", RelicTier.COMMON, "B",
           "Enemies in Elite rooms have 25% less HP."),
    _relic("regal_pillow", "Regal Pillow", RelicTier.COMMON, "D",
           "Heal an additional 15 HP when you Rest.", tags=("heal",)),
    _relic("strawberry", "Strawberry", RelicTier.COMMON, "C",
           "Upon pickup, raise your Max HP by 7."),
    _relic("vajra", "Vajra", RelicTier.COMMON, "A",
           "At the start of each combat, gain 1 Strength.",
           synergies=("twin_strike", "sword_boomerang", "pummel", "whirlwind"), tags=("strength",)),
    _relic("war_paint", "War Paint", RelicTier.COMMON, "B",
           "Upon pickup, Upgrade 2 random Skills."),
    _relic("whetstone", "Whetstone", RelicTier.COMMON, "B",
           "Upon pickup, Upgrade 2 random Attacks."),
    _relic("red_skull", "Red Skull", RelicTier.COMMON, "B",
           "While your HP is at or below 50%, you have 3 additional Strength.",
           Character.IRONCLAD, tags=("strength",)),
    _relic("snecko_skull", "Snecko Skull", RelicTier.COMMON, "B",
           "Whenever you apply Poison, apply an additional 1 Poison.", Character.SILENT,
           synergies=("deadly_poison", "poisoned_stab", "bouncing_flask", "noxious_fumes")),
    _relic("data_disk", "Data Disk", RelicTier.COMMON, "A",
           "Start each combat with 1 Focus.", Character.DEFECT, tags=("focus",)),
    _relic("damaru", "Damaru", RelicTier.COMMON, "C",
           "At the start of your turn, gain 1 Mantra.", Character.WATCHER,
           synergies=("devotion", "brilliance")),
]}


# ============================================================================
# UNCOMMON RELICS
# ============================================================================

UNCOMMON_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("blue_candle", "Blue Candle", RelicTier.UNCOMMON, "C",
           "Curse cards can be played. Playing a Curse makes you lose 1 HP and Exhausts it."),
    _relic("eternal_feather", "Eternal Feather", RelicTier.UNCOMMON, "C",
           "For every 5 cards in your deck, heal 3 HP when you enter a Rest Site.", tags=("heal",)),
    _relic("frozen_egg", "Frozen Egg", RelicTier.UNCOMMON, "C",
           "Whenever you add a Power card into your deck, it is Upgraded."),
    _relic("gremlin_horn", "Gremlin Horn", RelicTier.UNCOMMON, "B",
           "Whenever an enemy dies, gain 1 Energy and draw 1 card.", tags=("energy",)),
    _relic("horn_cleat", "Horn Cleat", RelicTier.UNCOMMON, "B",
           "At the start of your 2nd turn, gain 14 Block.", tags=("block",)),
    _relic("kunai", "Kunai", RelicTier.UNCOMMON, "B",
           "Every time you play 3 Attacks in a single turn, gain 1 Dexterity.",
           synergies=("blade_dance", "infinite_blades", "storm_of_steel")),
    _relic("letter_opener", "Letter Opener", RelicTier.UNCOMMON, "B",
           "Every time you play 3 Skills in a single turn, deal 5 damage to ALL enemies."),
    _relic("meat_on_the_bone", "Meat on the Bone", RelicTier.UNCOMMON, "C",
           "If your HP is at or below 50% at the end of combat, heal 12 HP.", tags=("heal",)),
    _relic("mercury_hourglass", "Mercury Hourglass", RelicTier.UNCOMMON, "B",
           "At the start of your turn, deal 3 damage to ALL enemies."),
    _relic("molten_egg", "Molten Egg", RelicTier.UNCOMMON, "C",
           "Whenever you add an Attack into your deck, it is Upgraded."),
    _relic("ornamental_fan", "Ornamental Fan", RelicTier.UNCOMMON, "B",
           "Every time you play 3 Attacks in a single turn, gain 4 Block.",
           synergies=("blade_dance",)),
    _relic("pear", "Pear", RelicTier.UNCOMMON, "C", "Upon pickup, raise your Max HP by 10."),
    _relic("question_card", "Question Card", RelicTier.UNCOMMON, "C",
           "Future card rewards have 1 additional card to choose from."),
    _relic("shuriken", "Shuriken", RelicTier.UNCOMMON, "B",
           "Every time you play 3 Attacks in a single turn, gain 1 Strength.",
           synergies=("blade_dance", "infinite_blades", "storm_of_steel")),
    _relic("toxic_egg", "Toxic Egg", RelicTier.UNCOMMON, "C",
           "Whenever you add a Skill into your deck, it is Upgraded."),
    _relic("paper_phrog", "Paper Phrog", RelicTier.UNCOMMON, "B",
           "Enemies with Vulnerable take 75% more damage rather than 50%.", Character.IRONCLAD,
           synergies=("bash", "thunderclap", "uppercut", "shockwave")),
    _relic("self_forming_clay", "Self-Forming Clay", RelicTier.UNCOMMON, "C",
           "Whenever you lose HP in combat, gain 3 Block next turn.", Character.IRONCLAD,
           synergies=("hemokinesis", "offering", "bloodletting")),
    _relic("ninja_scroll", "Ninja Scroll", RelicTier.UNCOMMON, "B",
           "Start each combat with 3 Shivs in hand.", Character.SILENT,
           synergies=("accuracy", "after_image")),
    _relic("symbiotic_virus", "Symbiotic Virus", RelicTier.UNCOMMON, "B",
           "At the start of each combat, Channel 1 Dark.", Character.DEFECT,
           synergies=("loop", "consume")),
    _relic("teardrop_locket", "Teardrop Locket", RelicTier.UNCOMMON, "B",
           "Start each combat in Calm.", Character.WATCHER,
           synergies=("mental_fortress", "rushdown")),
]}


# ============================================================================
# RARE RELICS
# ============================================================================

RARE_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("bird_faced_urn", "Bird-Faced Urn", RelicTier.RARE, "C",
           "Whenever you play a Power card, heal 2 HP.", tags=("heal",)),
    _relic("calipers", "Calipers", RelicTier.RARE, "B",
           "At the start of your turn, lose 15 Block rather than all of your Block.",
           synergies=("body_slam", "entrench"), tags=("block",)),
    _relic("dead_branch", "Dead Branch", RelicTier.RARE, "B",
           "Whenever you Exhaust a card, add a random card into your hand.",
           synergies=("corruption", "feel_no_pain", "dark_embrace")),
    _relic("du_vu_doll", "Du-Vu Doll", RelicTier.RARE, "C",
           "For each Curse in your deck, start each combat with 1 additional Strength."),
    _relic("ginger", "Ginger", RelicTier.RARE, "B", "You can no longer become Weakened."),
    _relic("girya", "Girya", RelicTier.RARE, "B",
           "You can now gain Strength at Rest Sites (3 times max).",
           synergies=("twin_strike", "sword_boomerang", "heavy_blade")),
    _relic("ice_cream", "Ice Cream", RelicTier.RARE, "A",
           "Energy is now conserved between turns.", tags=("energy",)),
    _relic("incense_burner", "Incense Burner", RelicTier.RARE, "A",
           "Every 6 turns, gain 1 Intangible."),
    _relic("lizard_tail", "Lizard Tail", RelicTier.RARE, "A",
           "When you would die, heal to 50% of your Max HP instead (works once)."),
    _relic("peace_pipe", "Peace Pipe", RelicTier.RARE, "B",
           "You can now remove cards from your deck at Rest Sites."),
    _relic("shovel", "Shovel", RelicTier.RARE, "C", "You can now Dig for relics at Rest Sites."),
    _relic("thread_and_needle", "Thread and Needle", RelicTier.RARE, "A",
           "Start each combat with 4 Plated Armor.", tags=("block",)),
    _relic("torii", "Torii", RelicTier.RARE, "B",
           "Whenever you would receive 5 or less unblocked attack damage, reduce it to 1."),
    _relic("tungsten_rod", "Tungsten Rod", RelicTier.RARE, "A",
           "Whenever you would lose HP, lose 1 less."),
    _relic("unceasing_top", "Unceasing Top", RelicTier.RARE, "B",
           "Whenever you have no cards in hand during your turn, draw a card.", tags=("draw",)),
    _relic("charons_ashes", "Charon's Ashes", RelicTier.RARE, "B",
           "Whenever you Exhaust a card, deal 3 damage to ALL enemies.", Character.IRONCLAD,
           synergies=("corruption", "feel_no_pain", "second_wind", "fiend_fire")),
    _relic("champion_belt", "Champion Belt", RelicTier.RARE, "B",
           "Whenever you apply Vulnerable, also apply 1 Weak.", Character.IRONCLAD,
           synergies=("bash", "thunderclap", "uppercut", "shockwave")),
    _relic("tingsha", "Tingsha", RelicTier.RARE, "B",
           "Whenever you discard a card during your turn, deal 3 damage to a random enemy.",
           Character.SILENT, synergies=("acrobatics", "prepared", "tools_of_the_trade")),
    _relic("emotion_chip", "Emotion Chip", RelicTier.RARE, "B",
           "If you lost HP during the previous turn, trigger the passive of all Orbs.",
           Character.DEFECT, synergies=("glacier", "defragment")),
    _relic("cloak_clasp", "Cloak Clasp", RelicTier.RARE, "C",
           "At the end of your turn, gain 1 Block for each card in your hand.", Character.WATCHER,
           synergies=("establishment", "protect"), tags=("block",)),
]}


# ============================================================================
# BOSS RELICS
# ============================================================================

BOSS_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("astrolabe", "Astrolabe", RelicTier.BOSS, "B",
           "Upon pickup, choose and Transform 3 cards, then Upgrade them."),
    _relic("black_star", "Black Star", RelicTier.BOSS, "B",
           "Elites now drop an additional Relic when defeated."),
    _relic("busted_crown", "Busted Crown", RelicTier.BOSS, "C",
           "Gain 1 Energy. Future card rewards have 2 fewer cards.", tags=("energy",)),
    _relic("calling_bell", "Calling Bell", RelicTier.BOSS, "C",
           "Upon pickup, obtain a unique Curse and 3 relics."),
    _relic("coffee_dripper", "Coffee Dripper", RelicTier.BOSS, "B",
           "Gain 1 Energy. You can no longer Rest at Rest Sites.", tags=("energy",)),
    _relic("cursed_key", "Cursed Key", RelicTier.BOSS, "B",
           "Gain 1 Energy. Whenever you open a non-boss chest, obtain a Curse.", tags=("energy",)),
    _relic("ectoplasm", "Ectoplasm", RelicTier.BOSS, "B",
           "Gain 1 Energy. You can no longer gain Gold.", tags=("energy",)),
    _relic("empty_cage", "Empty Cage", RelicTier.BOSS, "C",
           "Upon pickup, remove 2 cards from your deck."),
    _relic("fusion_hammer", "Fusion Hammer", RelicTier.BOSS, "B",
           "Gain 1 Energy. You can no longer Smith at Rest Sites.", tags=("energy",)),
    _relic("pandoras_box", "Pandora's Box", RelicTier.BOSS, "C",
           "Transform all Strikes and Defends."),
    _relic("philosophers_stone", "Philosopher's Stone", RelicTier.BOSS, "B",
           "Gain 1 Energy. ALL enemies start with 1 Strength.", tags=("energy",)),
    _relic("runic_dome", "Runic Dome", RelicTier.BOSS, "B",
           "Gain 1 Energy. You can no longer see enemy Intents.", tags=("energy",)),
    _relic("runic_pyramid", "Runic Pyramid", RelicTier.BOSS, "A",
           "At the end of your turn, you no longer discard your hand."),
    _relic("sacred_bark", "Sacred Bark", RelicTier.BOSS, "C", "Double the effectiveness of potions."),
    _relic("slavers_collar", "Slaver's Collar", RelicTier.BOSS, "C",
           "During Boss and Elite combats, gain 1 Energy.", tags=("energy",)),
    _relic("snecko_eye", "Snecko Eye", RelicTier.BOSS, "A",
           "Draw 2 additional cards each turn. Start each combat Confused.", tags=("draw",)),
    _relic("sozu", "Sozu", RelicTier.BOSS, "B",
           "Gain 1 Energy. You can no longer obtain potions.", tags=("energy",)),
    _relic("tiny_house", "Tiny House", RelicTier.BOSS, "D",
           "Obtain 1 potion, 50 Gold, raise Max HP by 5, 1 card and Upgrade 1 random card."),
    _relic("velvet_choker", "Velvet Choker", RelicTier.BOSS, "B",
           "Gain 1 Energy. You cannot play more than 6 cards per turn.", tags=("energy",)),
    _relic("black_blood", "Black Blood", RelicTier.BOSS, "B",
           "Replaces Burning Blood. At the end of combat, heal 12 HP.", Character.IRONCLAD,
           tags=("heal",)),
    _relic("mark_of_pain", "Mark of Pain", RelicTier.BOSS, "B",
           "Gain 1 Energy. Start combats with 2 Wounds in your draw pile.", Character.IRONCLAD,
           synergies=("evolve", "fire_breathing"), tags=("energy",)),
    _relic("runic_cube", "Runic Cube", RelicTier.BOSS, "B",
           "Whenever you lose HP, draw 1 card.", Character.IRONCLAD,
           synergies=("rupture", "hemokinesis", "offering", "brutality"), tags=("draw",)),
    _relic("ring_of_the_serpent", "Ring of the Serpent", RelicTier.BOSS, "B",
           "Replaces Ring of the Snake. At the start of your turn, draw 1 additional card.",
           Character.SILENT, tags=("draw",)),
    _relic("wrist_blade", "Wrist Blade", RelicTier.BOSS, "C",
           "Attacks that cost 0 deal 4 additional damage.", Character.SILENT,
           synergies=("blade_dance", "neutralize", "backstab")),
    _relic("hovering_kite", "Hovering Kite", RelicTier.BOSS, "C",
           "The first time you discard a card each turn, gain 1 Energy.", Character.SILENT,
           synergies=("tactician", "reflex", "tools_of_the_trade")),
    _relic("frozen_core", "Frozen Core", RelicTier.BOSS, "B",
           "Replaces Cracked Core. If you end your turn with empty Orb slots, Channel 1 Frost.",
           Character.DEFECT),
    _relic("inserter", "Inserter", RelicTier.BOSS, "B",
           "Every 2 turns, gain 1 Orb slot.", Character.DEFECT),
    _relic("nuclear_battery", "Nuclear Battery", RelicTier.BOSS, "B",
           "At the start of each combat, Channel 1 Plasma.", Character.DEFECT,
           tags=("energy",)),
    _relic("holy_water", "Holy Water", RelicTier.BOSS, "B",
           "Replaces Pure Water. At the start of each combat, add 3 Miracles into your hand.",
           Character.WATCHER, tags=("energy",)),
    _relic("violet_lotus", "Violet Lotus", RelicTier.BOSS, "B",
           "Whenever you exit Calm, gain an additional Energy.", Character.WATCHER,
           synergies=("vigilance", "tranquility", "inner_peace", "fear_no_evil"),
           tags=("energy",)),
]}


# ============================================================================
# SHOP AND EVENT RELICS
# ============================================================================

SHOP_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("chemical_x", "Chemical X", RelicTier.SHOP, "B",
           "The effects of your cost X cards are increased by 2.",
           synergies=("whirlwind", "malaise", "tempest", "multi_cast")),
    _relic("clockwork_souvenir", "Clockwork Souvenir", RelicTier.SHOP, "B",
           "At the start of each combat, gain 1 Artifact."),
    _relic("medical_kit", "Medical Kit", RelicTier.SHOP, "C", "Status cards can now be played."),
    _relic("membership_card", "Membership Card", RelicTier.SHOP, "B",
           "50% discount on all products!"),
    _relic("orange_pellets", "Orange Pellets", RelicTier.SHOP, "C",
           "Whenever you play a Power, Attack, and Skill in the same turn, remove all debuffs."),
    _relic("smiling_mask", "Smiling Mask", RelicTier.SHOP, "C",
           "The merchant's card removal service now always costs 50 Gold."),
    _relic("strange_spoon", "Strange Spoon", RelicTier.SHOP, "B",
           "Cards which Exhaust when played have a 50% chance to be discarded instead.",
           synergies=("offering", "adrenaline", "seek")),
    _relic("the_courier", "The Courier", RelicTier.SHOP, "C",
           "The merchant restocks and all prices are reduced by 20%."),
    _relic("toolbox", "Toolbox", RelicTier.SHOP, "C",
           "At the start of each combat, choose 1 of 3 Colorless cards to add into your hand."),
]}

EVENT_RELICS: Dict[str, Relic] = {r.id: r for r in [
    _relic("golden_idol", "Golden Idol", RelicTier.EVENT, "B",
           "Enemies drop 25% more Gold."),
    _relic("mutagenic_strength", "Mutagenic Strength", RelicTier.EVENT, "B",
           "Start each combat with 3 Strength that is lost at the end of your turn."),
    _relic("necronomicon", "Necronomicon", RelicTier.EVENT, "B",
           "The first Attack costing 2 or more played each turn is played twice. Obtain a Curse."),
    _relic("odd_mushroom", "Odd Mushroom", RelicTier.EVENT, "C",
           "When Vulnerable, take 25% more damage rather than 50%."),
    _relic("red_mask", "Red Mask", RelicTier.EVENT, "B",
           "At the start of each combat, apply 1 Weak to ALL enemies."),
    _relic("enchiridion", "Enchiridion", RelicTier.EVENT, "B",
           "At the start of each combat, add a random Power card into your hand."),
]}


# ============================================================================
# REGISTRY
# ============================================================================

ALL_RELICS: Dict[str, Relic] = {
    **STARTER_RELICS,
    **COMMON_RELICS,
    **UNCOMMON_RELICS,
    **RARE_RELICS,
    **BOSS_RELICS,
    **SHOP_RELICS,
    **EVENT_RELICS,
}

STARTER_RELIC_FOR: Dict[Character, str] = {
    Character.IRONCLAD: "burning_blood",
    Character.SILENT: "ring_of_the_snake",
    Character.DEFECT: "cracked_core",
    Character.WATCHER: "pure_water",
}


def get_relic(relic_id: str) -> Relic:
    """Get a relic by id."""
    if relic_id not in ALL_RELICS:
        raise ValueError(f"Unknown relic: {relic_id}")
    return ALL_RELICS[relic_id]


def get_relics_by_tier(tier: RelicTier) -> List[Relic]:
    """Get all relics of a specific tier."""
    return [relic for relic in ALL_RELICS.values() if relic.tier == tier]
