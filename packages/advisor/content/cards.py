"""
Card Reference Catalog - hand-rated card records for all four characters.

Each record carries what the advisor needs to reason about a card without
simulating it:
- cost: energy cost (COST_X for X-cost cards, COST_UNPLAYABLE for Reflex etc.)
- tier_rating: hand-authored 1-5 baseline, independent of the current deck
- synergies / anti_synergies: card or relic ids that amplify / undermine it
- tags: capability tags (block, draw, scaling, aoe, ...) counted by the
  composition analyzer

Ids are lowercase snake_case. Basic Strikes and Defends carry a character
suffix (strike_r, defend_g, ...). Upgraded copies are written with a "+"
suffix in run snapshots ("bash+"); see normalize_card_id().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Tuple
from enum import Enum


class CardType(Enum):
    """Card types."""
    ATTACK = "attack"
    SKILL = "skill"
    POWER = "power"
    STATUS = "status"
    CURSE = "curse"


class CardRarity(Enum):
    """Card rarities."""
    BASIC = "basic"
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    SPECIAL = "special"
    CURSE = "curse"
    STATUS = "status"


class Character(Enum):
    """Card owners. COLORLESS also covers curses and statuses."""
    IRONCLAD = "ironclad"
    SILENT = "silent"
    DEFECT = "defect"
    WATCHER = "watcher"
    COLORLESS = "colorless"


PLAYABLE_CHARACTERS = (
    Character.IRONCLAD, Character.SILENT, Character.DEFECT, Character.WATCHER,
)

COST_X = -1
COST_UNPLAYABLE = -2


# ============ CAPABILITY TAGS ============

BLOCK = "block"
DRAW = "draw"
CYCLE = "cycle"
SCALING = "scaling"
AOE = "aoe"
ENERGY = "energy"
EXHAUST = "exhaust"
STRENGTH = "strength"
MULTI_HIT = "multi_hit"
SELF_DAMAGE = "self_damage"
FRONTLOAD = "frontload"
WEAK = "weak"
VULNERABLE = "vulnerable"
POISON = "poison"
SHIV = "shiv"
DISCARD = "discard"
ORB = "orb"
FOCUS = "focus"
LIGHTNING = "lightning"
FROST = "frost"
DARK = "dark"
CLAW = "claw"
STANCE = "stance"
SCRY = "scry"
DIVINITY = "divinity"
RETAIN = "retain"
HEAL = "heal"
STRIKE = "strike"


@dataclass(frozen=True)
class Card:
    """A card reference record. Decks hold CardInstance copies of these."""
    id: str
    name: str
    character: Character
    rarity: CardRarity
    card_type: CardType
    cost: int
    tier_rating: float
    description: str = ""
    upgraded: bool = False
    synergies: Tuple[str, ...] = ()
    anti_synergies: Tuple[str, ...] = ()
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "synergies", tuple(self.synergies))
        object.__setattr__(self, "anti_synergies", tuple(self.anti_synergies))
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def is_dead(self) -> bool:
        """Curses and statuses: cards that only clog the draw."""
        return self.card_type in (CardType.CURSE, CardType.STATUS)

    @property
    def is_playable(self) -> bool:
        return self.cost != COST_UNPLAYABLE

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        """Build a card from a JSON catalog entry."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            character=Character(data.get("character", "colorless")),
            rarity=CardRarity(data.get("rarity", "common")),
            card_type=CardType(data.get("type", data.get("card_type", "skill"))),
            cost=int(data.get("cost", 1)),
            tier_rating=float(data.get("tier_rating", 2.5)),
            description=data.get("description", ""),
            upgraded=bool(data.get("upgraded", False)),
            synergies=tuple(data.get("synergies", ())),
            anti_synergies=tuple(data.get("anti_synergies", ())),
            tags=frozenset(data.get("tags", ())),
        )


# ============ IRONCLAD CARDS ============

STRIKE_R = Card(
    id="strike_r", name="Strike", character=Character.IRONCLAD, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=1, tier_rating=1.0, description="Deal 6 damage.",
    synergies=("perfected_strike",), tags=(STRIKE,),
)
DEFEND_R = Card(
    id="defend_r", name="Defend", character=Character.IRONCLAD, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=1.0, description="Gain 5 Block.",
    tags=(BLOCK,),
)
BASH = Card(
    id="bash", name="Bash", character=Character.IRONCLAD, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Deal 8 damage. Apply 2 Vulnerable.", tags=(FRONTLOAD, VULNERABLE),
)
ANGER = Card(
    id="anger", name="Anger", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.0,
    description="Deal 6 damage. Add a copy of this card into your discard pile.",
)
ARMAMENTS = Card(
    id="armaments", name="Armaments", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 5 Block. Upgrade a card in your hand for the rest of combat.", tags=(BLOCK,),
)
BODY_SLAM = Card(
    id="body_slam", name="Body Slam", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal damage equal to your Block.",
    synergies=("barricade", "entrench", "metallicize", "impervious", "calipers"),
)
CLASH = Card(
    id="clash", name="Clash", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=1.5,
    description="Can only be played if every card in your hand is an Attack. Deal 14 damage.",
    anti_synergies=("corruption",), tags=(FRONTLOAD,),
)
CLEAVE = Card(
    id="cleave", name="Cleave", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 8 damage to ALL enemies.", tags=(AOE,),
)
CLOTHESLINE = Card(
    id="clothesline", name="Clothesline", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=2.0,
    description="Deal 12 damage. Apply 2 Weak.", tags=(FRONTLOAD, WEAK),
)
HEADBUTT = Card(
    id="headbutt", name="Headbutt", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 9 damage. Put a card from your discard pile on top of your draw pile.",
)
HEAVY_BLADE = Card(
    id="heavy_blade", name="Heavy Blade", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Deal 14 damage. Strength affects this card 3 times.",
    synergies=("inflame", "spot_weakness", "limit_break", "demon_form"), tags=(FRONTLOAD,),
)
IRON_WAVE = Card(
    id="iron_wave", name="Iron Wave", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Gain 5 Block. Deal 5 damage.", tags=(BLOCK,),
)
PERFECTED_STRIKE = Card(
    id="perfected_strike", name="Perfected Strike", character=Character.IRONCLAD,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Deal 6 damage. Deals 2 additional damage for ALL your cards containing \"Strike\".",
    synergies=("strike_r", "twin_strike", "pommel_strike", "wild_strike"), tags=(STRIKE, FRONTLOAD),
)
POMMEL_STRIKE = Card(
    id="pommel_strike", name="Pommel Strike", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 9 damage. Draw 1 card.", tags=(STRIKE, DRAW),
)
SHRUG_IT_OFF = Card(
    id="shrug_it_off", name="Shrug It Off", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="Gain 8 Block. Draw 1 card.", synergies=("juggernaut",), tags=(BLOCK, DRAW),
)
SWORD_BOOMERANG = Card(
    id="sword_boomerang", name="Sword Boomerang", character=Character.IRONCLAD,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.0,
    description="Deal 3 damage to a random enemy 3 times.",
    synergies=("inflame", "spot_weakness", "limit_break", "demon_form"), tags=(MULTI_HIT,),
)
THUNDERCLAP = Card(
    id="thunderclap", name="Thunderclap", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 4 damage and apply 1 Vulnerable to ALL enemies.", tags=(AOE, VULNERABLE),
)
TWIN_STRIKE = Card(
    id="twin_strike", name="Twin Strike", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5, description="Deal 5 damage twice.",
    synergies=("inflame", "spot_weakness", "limit_break", "demon_form"), tags=(STRIKE, MULTI_HIT),
)
TRUE_GRIT = Card(
    id="true_grit", name="True Grit", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Gain 7 Block. Exhaust a random card from your hand.",
    synergies=("feel_no_pain", "dark_embrace"), tags=(BLOCK, EXHAUST),
)
WILD_STRIKE = Card(
    id="wild_strike", name="Wild Strike", character=Character.IRONCLAD, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=1.5,
    description="Deal 12 damage. Shuffle a Wound into your draw pile.",
    synergies=("evolve", "fire_breathing"), anti_synergies=("runic_pyramid",),
    tags=(STRIKE, FRONTLOAD),
)
BATTLE_TRANCE = Card(
    id="battle_trance", name="Battle Trance", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=0, tier_rating=3.5,
    description="Draw 3 cards. You cannot draw additional cards this turn.", tags=(DRAW,),
)
BLOODLETTING = Card(
    id="bloodletting", name="Bloodletting", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=0, tier_rating=2.5,
    description="Lose 3 HP. Gain 2 Energy.", synergies=("rupture",), tags=(ENERGY, SELF_DAMAGE),
)
BURNING_PACT = Card(
    id="burning_pact", name="Burning Pact", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="Exhaust 1 card. Draw 2 cards.",
    synergies=("feel_no_pain", "dark_embrace"), tags=(DRAW, EXHAUST),
)
CARNAGE = Card(
    id="carnage", name="Carnage", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Ethereal. Deal 20 damage.", tags=(FRONTLOAD,),
)
COMBUST = Card(
    id="combust", name="Combust", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=2.5,
    description="At the end of your turn, lose 1 HP and deal 5 damage to ALL enemies.",
    synergies=("rupture",), tags=(AOE, SELF_DAMAGE, SCALING),
)
DARK_EMBRACE = Card(
    id="dark_embrace", name="Dark Embrace", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=2, tier_rating=3.5,
    description="Whenever a card is Exhausted, draw 1 card.",
    synergies=("corruption", "feel_no_pain", "true_grit", "burning_pact", "second_wind", "fiend_fire"),
    tags=(DRAW, SCALING),
)
DISARM = Card(
    id="disarm", name="Disarm", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="Enemy loses 2 Strength. Exhaust.", tags=(WEAK, EXHAUST),
)
ENTRENCH = Card(
    id="entrench", name="Entrench", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=2, tier_rating=2.5, description="Double your Block.",
    synergies=("barricade", "body_slam", "calipers"), tags=(BLOCK,),
)
EVOLVE = Card(
    id="evolve", name="Evolve", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=2.0,
    description="Whenever you draw a Status card, draw 1 card.",
    synergies=("wild_strike", "power_through", "mark_of_pain"), tags=(DRAW,),
)
FEEL_NO_PAIN = Card(
    id="feel_no_pain", name="Feel No Pain", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=4.0,
    description="Whenever a card is Exhausted, gain 3 Block.",
    synergies=("corruption", "dark_embrace", "true_grit", "burning_pact", "second_wind", "fiend_fire"),
    tags=(BLOCK, SCALING),
)
FIRE_BREATHING = Card(
    id="fire_breathing", name="Fire Breathing", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=2.0,
    description="Whenever you draw a Status or Curse card, deal 6 damage to ALL enemies.",
    synergies=("wild_strike", "power_through", "mark_of_pain"), tags=(AOE,),
)
FLAME_BARRIER = Card(
    id="flame_barrier", name="Flame Barrier", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=2, tier_rating=3.5,
    description="Gain 12 Block. Whenever you are attacked this turn, deal 4 damage back.",
    tags=(BLOCK,),
)
GHOSTLY_ARMOR = Card(
    id="ghostly_armor", name="Ghostly Armor", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Ethereal. Gain 10 Block.", tags=(BLOCK,),
)
HEMOKINESIS = Card(
    id="hemokinesis", name="Hemokinesis", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Lose 2 HP. Deal 15 damage.", synergies=("rupture",), tags=(SELF_DAMAGE, FRONTLOAD),
)
INFLAME = Card(
    id="inflame", name="Inflame", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=3.0, description="Gain 2 Strength.",
    synergies=("heavy_blade", "sword_boomerang", "twin_strike", "pummel", "whirlwind",
               "limit_break", "spot_weakness"),
    tags=(STRENGTH, SCALING),
)
METALLICIZE = Card(
    id="metallicize", name="Metallicize", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=3.0,
    description="At the end of your turn, gain 3 Block.",
    synergies=("body_slam", "barricade"), tags=(BLOCK, SCALING),
)
POWER_THROUGH = Card(
    id="power_through", name="Power Through", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Add 2 Wounds into your hand. Gain 15 Block.",
    synergies=("evolve", "fire_breathing"), anti_synergies=("runic_pyramid",), tags=(BLOCK,),
)
PUMMEL = Card(
    id="pummel", name="Pummel", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 2 damage 4 times. Exhaust.",
    synergies=("inflame", "spot_weakness", "limit_break", "demon_form"), tags=(MULTI_HIT, EXHAUST),
)
RAGE = Card(
    id="rage", name="Rage", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.0,
    description="Whenever you play an Attack this turn, gain 3 Block.", tags=(BLOCK,),
)
RUPTURE = Card(
    id="rupture", name="Rupture", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=2.5,
    description="Whenever you lose HP from a card, gain 1 Strength.",
    synergies=("hemokinesis", "offering", "bloodletting", "combust", "brutality", "runic_cube"),
    tags=(STRENGTH, SCALING),
)
SECOND_WIND = Card(
    id="second_wind", name="Second Wind", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Exhaust all non-Attack cards in your hand. Gain 5 Block for each.",
    synergies=("feel_no_pain", "dark_embrace"), tags=(BLOCK, EXHAUST),
)
SEEING_RED = Card(
    id="seeing_red", name="Seeing Red", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Gain 2 Energy. Exhaust.", tags=(ENERGY, EXHAUST),
)
SENTINEL = Card(
    id="sentinel", name="Sentinel", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 5 Block. If this card is Exhausted, gain 2 Energy.",
    synergies=("corruption", "second_wind", "burning_pact"), tags=(BLOCK, ENERGY),
)
SHOCKWAVE = Card(
    id="shockwave", name="Shockwave", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=2, tier_rating=4.0,
    description="Apply 3 Weak and Vulnerable to ALL enemies. Exhaust.",
    tags=(WEAK, VULNERABLE, AOE, EXHAUST),
)
SPOT_WEAKNESS = Card(
    id="spot_weakness", name="Spot Weakness", character=Character.IRONCLAD,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="If the enemy intends to attack, gain 3 Strength.",
    synergies=("heavy_blade", "sword_boomerang", "twin_strike", "pummel", "whirlwind"),
    tags=(STRENGTH, SCALING),
)
UPPERCUT = Card(
    id="uppercut", name="Uppercut", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Deal 13 damage. Apply 1 Weak. Apply 1 Vulnerable.",
    tags=(FRONTLOAD, WEAK, VULNERABLE),
)
WHIRLWIND = Card(
    id="whirlwind", name="Whirlwind", character=Character.IRONCLAD, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=COST_X, tier_rating=3.5,
    description="Deal 5 damage to ALL enemies X times.",
    synergies=("inflame", "spot_weakness", "limit_break", "demon_form", "chemical_x"),
    tags=(AOE, MULTI_HIT),
)
BARRICADE = Card(
    id="barricade", name="Barricade", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=3.0,
    description="Block is not removed at the start of your turn.",
    synergies=("entrench", "body_slam", "metallicize", "impervious", "juggernaut"),
    tags=(BLOCK, SCALING),
)
BERSERK = Card(
    id="berserk", name="Berserk", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=0, tier_rating=2.5,
    description="Gain 2 Vulnerable. At the start of your turn, gain 1 Energy.", tags=(ENERGY,),
)
BRUTALITY = Card(
    id="brutality", name="Brutality", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=0, tier_rating=3.0,
    description="At the start of your turn, lose 1 HP and draw 1 card.",
    synergies=("rupture",), tags=(DRAW, SELF_DAMAGE),
)
CORRUPTION = Card(
    id="corruption", name="Corruption", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=4.0,
    description="Skills cost 0. Whenever you play a Skill, Exhaust it.",
    synergies=("feel_no_pain", "dark_embrace", "sentinel", "dead_branch"), tags=(SCALING, EXHAUST),
)
DEMON_FORM = Card(
    id="demon_form", name="Demon Form", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=4.0,
    description="At the start of your turn, gain 2 Strength.",
    synergies=("heavy_blade", "sword_boomerang", "twin_strike", "pummel", "whirlwind"),
    tags=(STRENGTH, SCALING),
)
DOUBLE_TAP = Card(
    id="double_tap", name="Double Tap", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="This turn, your next Attack is played twice.",
)
EXHUME = Card(
    id="exhume", name="Exhume", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Put a card from your exhaust pile into your hand. Exhaust.",
    synergies=("corruption", "fiend_fire"), tags=(EXHAUST,),
)
FEED = Card(
    id="feed", name="Feed", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=1, tier_rating=3.5,
    description="Deal 10 damage. If Fatal, raise your Max HP by 3. Exhaust.", tags=(HEAL, EXHAUST),
)
FIEND_FIRE = Card(
    id="fiend_fire", name="Fiend Fire", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Exhaust all cards in your hand. Deal 7 damage for each Exhausted card.",
    synergies=("feel_no_pain", "dark_embrace"), tags=(EXHAUST, FRONTLOAD),
)
IMMOLATE = Card(
    id="immolate", name="Immolate", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=2, tier_rating=4.0,
    description="Deal 21 damage to ALL enemies. Add a Burn into your discard pile.",
    synergies=("evolve", "fire_breathing"), tags=(AOE, FRONTLOAD),
)
IMPERVIOUS = Card(
    id="impervious", name="Impervious", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=2, tier_rating=4.0, description="Gain 30 Block. Exhaust.",
    synergies=("body_slam", "barricade", "feel_no_pain"), tags=(BLOCK, EXHAUST),
)
JUGGERNAUT = Card(
    id="juggernaut", name="Juggernaut", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=2, tier_rating=3.0,
    description="Whenever you gain Block, deal 5 damage to a random enemy.",
    synergies=("barricade", "entrench", "metallicize", "shrug_it_off"), tags=(SCALING,),
)
LIMIT_BREAK = Card(
    id="limit_break", name="Limit Break", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Double your Strength. Exhaust.",
    synergies=("inflame", "demon_form", "spot_weakness"), tags=(STRENGTH, SCALING),
)
OFFERING = Card(
    id="offering", name="Offering", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=0, tier_rating=4.5,
    description="Lose 6 HP. Gain 2 Energy. Draw 3 cards. Exhaust.",
    synergies=("rupture",), tags=(DRAW, ENERGY, SELF_DAMAGE, EXHAUST),
)
REAPER = Card(
    id="reaper", name="Reaper", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.5,
    description="Deal 4 damage to ALL enemies. Heal HP equal to unblocked damage. Exhaust.",
    synergies=("inflame", "demon_form", "limit_break"), tags=(AOE, HEAL, EXHAUST),
)
BLUDGEON = Card(
    id="bludgeon", name="Bludgeon", character=Character.IRONCLAD, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=3, tier_rating=3.0, description="Deal 32 damage.",
    synergies=("inflame",), tags=(FRONTLOAD,),
)

IRONCLAD_CARDS: Dict[str, Card] = {c.id: c for c in [
    STRIKE_R, DEFEND_R, BASH, ANGER, ARMAMENTS, BODY_SLAM, CLASH, CLEAVE, CLOTHESLINE,
    HEADBUTT, HEAVY_BLADE, IRON_WAVE, PERFECTED_STRIKE, POMMEL_STRIKE, SHRUG_IT_OFF,
    SWORD_BOOMERANG, THUNDERCLAP, TWIN_STRIKE, TRUE_GRIT, WILD_STRIKE, BATTLE_TRANCE,
    BLOODLETTING, BURNING_PACT, CARNAGE, COMBUST, DARK_EMBRACE, DISARM, ENTRENCH, EVOLVE,
    FEEL_NO_PAIN, FIRE_BREATHING, FLAME_BARRIER, GHOSTLY_ARMOR, HEMOKINESIS, INFLAME,
    METALLICIZE, POWER_THROUGH, PUMMEL, RAGE, RUPTURE, SECOND_WIND, SEEING_RED, SENTINEL,
    SHOCKWAVE, SPOT_WEAKNESS, UPPERCUT, WHIRLWIND, BARRICADE, BERSERK, BRUTALITY,
    CORRUPTION, DEMON_FORM, DOUBLE_TAP, EXHUME, FEED, FIEND_FIRE, IMMOLATE, IMPERVIOUS,
    JUGGERNAUT, LIMIT_BREAK, OFFERING, REAPER, BLUDGEON,
]}


# ============ SILENT CARDS ============

STRIKE_G = Card(
    id="strike_g", name="Strike", character=Character.SILENT, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=1, tier_rating=1.0, description="Deal 6 damage.",
    tags=(STRIKE,),
)
DEFEND_G = Card(
    id="defend_g", name="Defend", character=Character.SILENT, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=1.0, description="Gain 5 Block.",
    tags=(BLOCK,),
)
NEUTRALIZE = Card(
    id="neutralize", name="Neutralize", character=Character.SILENT, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.5,
    description="Deal 3 damage. Apply 1 Weak.", tags=(WEAK,),
)
SURVIVOR = Card(
    id="survivor", name="Survivor", character=Character.SILENT, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=2.0,
    description="Gain 8 Block. Discard a card.", synergies=("reflex", "tactician"),
    tags=(BLOCK, DISCARD),
)
ACROBATICS = Card(
    id="acrobatics", name="Acrobatics", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.5, description="Draw 3 cards. Discard 1 card.",
    synergies=("tactician", "reflex"), tags=(DRAW, DISCARD),
)
BACKFLIP = Card(
    id="backflip", name="Backflip", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0, description="Gain 5 Block. Draw 2 cards.",
    tags=(BLOCK, DRAW),
)
BANE = Card(
    id="bane", name="Bane", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 7 damage. If the enemy is Poisoned, deal 7 damage again.",
    synergies=("deadly_poison", "poisoned_stab", "noxious_fumes", "bouncing_flask"),
    tags=(MULTI_HIT,),
)
BLADE_DANCE = Card(
    id="blade_dance", name="Blade Dance", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0, description="Add 3 Shivs into your hand.",
    synergies=("accuracy", "after_image", "a_thousand_cuts", "kunai", "shuriken"),
    tags=(SHIV, MULTI_HIT),
)
CLOAK_AND_DAGGER = Card(
    id="cloak_and_dagger", name="Cloak and Dagger", character=Character.SILENT,
    rarity=CardRarity.COMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Gain 6 Block. Add 1 Shiv into your hand.", synergies=("accuracy",),
    tags=(BLOCK, SHIV),
)
DAGGER_THROW = Card(
    id="dagger_throw", name="Dagger Throw", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 9 damage. Draw 1 card. Discard 1 card.", synergies=("reflex", "tactician"),
    tags=(DRAW, DISCARD),
)
DEADLY_POISON = Card(
    id="deadly_poison", name="Deadly Poison", character=Character.SILENT,
    rarity=CardRarity.COMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Apply 5 Poison.", synergies=("catalyst", "bane", "snecko_skull"), tags=(POISON,),
)
DEFLECT = Card(
    id="deflect", name="Deflect", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.0, description="Gain 4 Block.", tags=(BLOCK,),
)
DODGE_AND_ROLL = Card(
    id="dodge_and_roll", name="Dodge and Roll", character=Character.SILENT,
    rarity=CardRarity.COMMON, card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 4 Block. Next turn, gain 4 Block.", tags=(BLOCK,),
)
POISONED_STAB = Card(
    id="poisoned_stab", name="Poisoned Stab", character=Character.SILENT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 6 damage. Apply 3 Poison.", synergies=("catalyst", "bane"), tags=(POISON,),
)
PREPARED = Card(
    id="prepared", name="Prepared", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5, description="Draw 1 card. Discard 1 card.",
    synergies=("tactician", "reflex"), tags=(CYCLE, DISCARD),
)
SLICE = Card(
    id="slice", name="Slice", character=Character.SILENT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.0, description="Deal 6 damage.",
    synergies=("a_thousand_cuts",),
)
SNEAKY_STRIKE = Card(
    id="sneaky_strike", name="Sneaky Strike", character=Character.SILENT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Deal 12 damage. If you have discarded a card this turn, gain 2 Energy.",
    synergies=("survivor", "prepared", "acrobatics"), tags=(STRIKE, FRONTLOAD),
)
SUCKER_PUNCH = Card(
    id="sucker_punch", name="Sucker Punch", character=Character.SILENT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 7 damage. Apply 1 Weak.", tags=(WEAK,),
)
ACCURACY = Card(
    id="accuracy", name="Accuracy", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=3.0, description="Shivs deal 4 additional damage.",
    synergies=("blade_dance", "cloak_and_dagger", "infinite_blades", "storm_of_steel"),
    tags=(SHIV, SCALING),
)
BACKSTAB = Card(
    id="backstab", name="Backstab", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=3.0,
    description="Innate. Deal 11 damage. Exhaust.", tags=(FRONTLOAD, EXHAUST),
)
BOUNCING_FLASK = Card(
    id="bouncing_flask", name="Bouncing Flask", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=2, tier_rating=3.5,
    description="Apply 3 Poison to a random enemy 3 times.", synergies=("catalyst",),
    tags=(POISON, AOE),
)
CALCULATED_GAMBLE = Card(
    id="calculated_gamble", name="Calculated Gamble", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=0, tier_rating=3.0,
    description="Discard your hand, then draw that many cards. Exhaust.",
    synergies=("tactician", "reflex"), tags=(DRAW, DISCARD, EXHAUST),
)
CATALYST = Card(
    id="catalyst", name="Catalyst", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="Double an enemy's Poison. Exhaust.",
    synergies=("deadly_poison", "bouncing_flask", "noxious_fumes", "poisoned_stab", "crippling_cloud"),
    tags=(POISON, SCALING, EXHAUST),
)
CRIPPLING_CLOUD = Card(
    id="crippling_cloud", name="Crippling Cloud", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=2, tier_rating=3.5,
    description="Apply 4 Poison and 2 Weak to ALL enemies. Exhaust.",
    synergies=("catalyst",), tags=(POISON, WEAK, AOE, EXHAUST),
)
DASH = Card(
    id="dash", name="Dash", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0, description="Gain 10 Block. Deal 10 damage.",
    tags=(BLOCK, FRONTLOAD),
)
EVISCERATE = Card(
    id="eviscerate", name="Eviscerate", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=3, tier_rating=3.0,
    description="Costs 1 less for each card discarded this turn. Deal 7 damage 3 times.",
    synergies=("acrobatics", "prepared", "tools_of_the_trade"), tags=(DISCARD, MULTI_HIT),
)
FINISHER = Card(
    id="finisher", name="Finisher", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 6 damage for each Attack played this turn.",
    synergies=("blade_dance", "cloak_and_dagger"), tags=(MULTI_HIT,),
)
FOOTWORK = Card(
    id="footwork", name="Footwork", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=4.0, description="Gain 2 Dexterity.",
    synergies=("after_image",), tags=(BLOCK, SCALING),
)
INFINITE_BLADES = Card(
    id="infinite_blades", name="Infinite Blades", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=2.5,
    description="At the start of your turn, add a Shiv into your hand.",
    synergies=("accuracy",), tags=(SHIV, SCALING),
)
NOXIOUS_FUMES = Card(
    id="noxious_fumes", name="Noxious Fumes", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=3.5,
    description="At the start of your turn, apply 2 Poison to ALL enemies.",
    synergies=("catalyst", "bane"), tags=(POISON, AOE, SCALING),
)
PIERCING_WAIL = Card(
    id="piercing_wail", name="Piercing Wail", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="ALL enemies lose 6 Strength this turn. Exhaust.", tags=(WEAK, AOE, EXHAUST),
)
PREDATOR = Card(
    id="predator", name="Predator", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Deal 15 damage. Next turn, draw 2 additional cards.", tags=(DRAW, FRONTLOAD),
)
REFLEX = Card(
    id="reflex", name="Reflex", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=COST_UNPLAYABLE, tier_rating=2.5,
    description="Unplayable. If this card is discarded from your hand, draw 2 cards.",
    synergies=("acrobatics", "prepared", "calculated_gamble", "tools_of_the_trade", "survivor"),
    tags=(DRAW, DISCARD),
)
TACTICIAN = Card(
    id="tactician", name="Tactician", character=Character.SILENT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=COST_UNPLAYABLE, tier_rating=2.5,
    description="Unplayable. If this card is discarded from your hand, gain 1 Energy.",
    synergies=("acrobatics", "prepared", "calculated_gamble", "tools_of_the_trade", "survivor"),
    tags=(ENERGY, DISCARD),
)
WELL_LAID_PLANS = Card(
    id="well_laid_plans", name="Well-Laid Plans", character=Character.SILENT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=3.0,
    description="At the end of your turn, Retain up to 1 card.", tags=(RETAIN,),
)
A_THOUSAND_CUTS = Card(
    id="a_thousand_cuts", name="A Thousand Cuts", character=Character.SILENT,
    rarity=CardRarity.RARE, card_type=CardType.POWER, cost=2, tier_rating=3.5,
    description="Whenever you play a card, deal 1 damage to ALL enemies.",
    synergies=("blade_dance", "after_image", "slice"), tags=(AOE, SCALING),
)
ADRENALINE = Card(
    id="adrenaline", name="Adrenaline", character=Character.SILENT, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=0, tier_rating=4.5,
    description="Gain 1 Energy. Draw 2 cards. Exhaust.", tags=(DRAW, ENERGY, EXHAUST),
)
AFTER_IMAGE = Card(
    id="after_image", name="After Image", character=Character.SILENT, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=1, tier_rating=4.0,
    description="Whenever you play a card, gain 1 Block.",
    synergies=("blade_dance", "a_thousand_cuts", "footwork"), tags=(BLOCK, SCALING),
)
BURST = Card(
    id="burst", name="Burst", character=Character.SILENT, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="This turn, your next Skill is played twice.",
    synergies=("catalyst", "adrenaline", "calculated_gamble"),
)
CORPSE_EXPLOSION = Card(
    id="corpse_explosion", name="Corpse Explosion", character=Character.SILENT,
    rarity=CardRarity.RARE, card_type=CardType.SKILL, cost=2, tier_rating=3.5,
    description="Apply 6 Poison. When the enemy dies, deal damage equal to its Max HP to ALL enemies.",
    synergies=("catalyst", "noxious_fumes", "deadly_poison"), tags=(POISON, AOE),
)
GLASS_KNIFE = Card(
    id="glass_knife", name="Glass Knife", character=Character.SILENT, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 8 damage twice. Decrease the damage of this card by 2 this combat.",
    tags=(MULTI_HIT, FRONTLOAD),
)
MALAISE = Card(
    id="malaise", name="Malaise", character=Character.SILENT, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=COST_X, tier_rating=4.0,
    description="Enemy loses X Strength. Apply X Weak. Exhaust.",
    synergies=("chemical_x",), tags=(WEAK, EXHAUST),
)
STORM_OF_STEEL = Card(
    id="storm_of_steel", name="Storm of Steel", character=Character.SILENT,
    rarity=CardRarity.RARE, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Discard your hand. Add 1 Shiv into your hand for each card discarded.",
    synergies=("accuracy", "tactician", "reflex"), tags=(SHIV, DISCARD),
)
TOOLS_OF_THE_TRADE = Card(
    id="tools_of_the_trade", name="Tools of the Trade", character=Character.SILENT,
    rarity=CardRarity.RARE, card_type=CardType.POWER, cost=1, tier_rating=3.5,
    description="At the start of your turn, draw 1 card and discard 1 card.",
    synergies=("tactician", "reflex", "eviscerate"), tags=(DRAW, DISCARD, SCALING),
)
WRAITH_FORM = Card(
    id="wraith_form", name="Wraith Form", character=Character.SILENT, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=4.5,
    description="Gain 2 Intangible. At the end of your turn, lose 1 Dexterity.", tags=(BLOCK,),
)

SILENT_CARDS: Dict[str, Card] = {c.id: c for c in [
    STRIKE_G, DEFEND_G, NEUTRALIZE, SURVIVOR, ACROBATICS, BACKFLIP, BANE, BLADE_DANCE,
    CLOAK_AND_DAGGER, DAGGER_THROW, DEADLY_POISON, DEFLECT, DODGE_AND_ROLL, POISONED_STAB,
    PREPARED, SLICE, SNEAKY_STRIKE, SUCKER_PUNCH, ACCURACY, BACKSTAB, BOUNCING_FLASK,
    CALCULATED_GAMBLE, CATALYST, CRIPPLING_CLOUD, DASH, EVISCERATE, FINISHER, FOOTWORK,
    INFINITE_BLADES, NOXIOUS_FUMES, PIERCING_WAIL, PREDATOR, REFLEX, TACTICIAN,
    WELL_LAID_PLANS, A_THOUSAND_CUTS, ADRENALINE, AFTER_IMAGE, BURST, CORPSE_EXPLOSION,
    GLASS_KNIFE, MALAISE, STORM_OF_STEEL, TOOLS_OF_THE_TRADE, WRAITH_FORM,
]}


# ============ DEFECT CARDS ============

STRIKE_B = Card(
    id="strike_b", name="Strike", character=Character.DEFECT, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=1, tier_rating=1.0, description="Deal 6 damage.",
    tags=(STRIKE,),
)
DEFEND_B = Card(
    id="defend_b", name="Defend", character=Character.DEFECT, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=1.0, description="Gain 5 Block.",
    tags=(BLOCK,),
)
ZAP = Card(
    id="zap", name="Zap", character=Character.DEFECT, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=2.0, description="Channel 1 Lightning.",
    tags=(ORB, LIGHTNING),
)
DUALCAST = Card(
    id="dualcast", name="Dualcast", character=Character.DEFECT, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=2.0, description="Evoke your next Orb twice.",
    tags=(ORB,),
)
BALL_LIGHTNING = Card(
    id="ball_lightning", name="Ball Lightning", character=Character.DEFECT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 7 damage. Channel 1 Lightning.", synergies=("electrodynamics",),
    tags=(ORB, LIGHTNING, FRONTLOAD),
)
BARRAGE = Card(
    id="barrage", name="Barrage", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.0,
    description="Deal 4 damage for each Channeled Orb.", synergies=("capacitor",), tags=(MULTI_HIT,),
)
BEAM_CELL = Card(
    id="beam_cell", name="Beam Cell", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.0,
    description="Deal 3 damage. Apply 1 Vulnerable.", tags=(VULNERABLE,),
)
CHARGE_BATTERY = Card(
    id="charge_battery", name="Charge Battery", character=Character.DEFECT,
    rarity=CardRarity.COMMON, card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 7 Block. Next turn, gain 1 Energy.", tags=(BLOCK, ENERGY),
)
CLAW_CARD = Card(
    id="claw", name="Claw", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.5,
    description="Deal 3 damage. Increase the damage of ALL Claw cards by 2 this combat.",
    synergies=("all_for_one", "scrape", "ftl"), tags=(CLAW, SCALING),
)
COLD_SNAP = Card(
    id="cold_snap", name="Cold Snap", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 6 damage. Channel 1 Frost.", tags=(ORB, FROST),
)
COMPILE_DRIVER = Card(
    id="compile_driver", name="Compile Driver", character=Character.DEFECT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 7 damage. Draw 1 card for each unique Orb you have.", tags=(DRAW,),
)
COOLHEADED = Card(
    id="coolheaded", name="Coolheaded", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="Channel 1 Frost. Draw 1 card.", tags=(ORB, FROST, DRAW),
)
GO_FOR_THE_EYES = Card(
    id="go_for_the_eyes", name="Go for the Eyes", character=Character.DEFECT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=0, tier_rating=2.0,
    description="Deal 3 damage. If the enemy intends to attack, apply 1 Weak.", tags=(WEAK,),
)
HOLOGRAM = Card(
    id="hologram", name="Hologram", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 3 Block. Put a card from your discard pile into your hand. Exhaust.",
    tags=(BLOCK,),
)
LEAP = Card(
    id="leap", name="Leap", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.0, description="Gain 9 Block.", tags=(BLOCK,),
)
RECURSION = Card(
    id="recursion", name="Recursion", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.0,
    description="Evoke your next Orb. Channel the Orb that was just Evoked.",
    synergies=("darkness",), tags=(ORB,),
)
SKIM = Card(
    id="skim", name="Skim", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0, description="Draw 3 cards.", tags=(DRAW,),
)
SWEEPING_BEAM = Card(
    id="sweeping_beam", name="Sweeping Beam", character=Character.DEFECT,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 6 damage to ALL enemies. Draw 1 card.", tags=(AOE, DRAW),
)
TURBO = Card(
    id="turbo", name="TURBO", character=Character.DEFECT, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.0,
    description="Gain 2 Energy. Add a Void into your discard pile.", tags=(ENERGY,),
)
BLIZZARD = Card(
    id="blizzard", name="Blizzard", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal damage equal to 2 times the Frost Channeled this combat to ALL enemies.",
    synergies=("glacier", "coolheaded", "cold_snap", "chill"), tags=(AOE,),
)
CAPACITOR = Card(
    id="capacitor", name="Capacitor", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=3.0, description="Gain 2 Orb slots.",
    synergies=("glacier", "darkness", "barrage"), tags=(ORB, SCALING),
)
CHILL = Card(
    id="chill", name="Chill", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5,
    description="Channel 1 Frost for each enemy in combat. Exhaust.", tags=(ORB, FROST, EXHAUST),
)
CONSUME = Card(
    id="consume", name="Consume", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=2, tier_rating=3.0,
    description="Gain 2 Focus. Lose 1 Orb slot.", tags=(FOCUS, SCALING),
)
DARKNESS = Card(
    id="darkness", name="Darkness", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5, description="Channel 1 Dark.",
    synergies=("recursion", "consume", "loop"), tags=(ORB, DARK, SCALING),
)
DEFRAGMENT = Card(
    id="defragment", name="Defragment", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=4.0, description="Gain 1 Focus.",
    synergies=("glacier", "coolheaded", "ball_lightning", "darkness"), tags=(FOCUS, ORB, SCALING),
)
DOOM_AND_GLOOM = Card(
    id="doom_and_gloom", name="Doom and Gloom", character=Character.DEFECT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Deal 10 damage to ALL enemies. Channel 1 Dark.", tags=(AOE, ORB, DARK),
)
FTL = Card(
    id="ftl", name="FTL", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.5,
    description="Deal 5 damage. If you have played less than 3 cards this turn, draw 1 card.",
    tags=(DRAW,),
)
GLACIER = Card(
    id="glacier", name="Glacier", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=2, tier_rating=3.5, description="Gain 7 Block. Channel 2 Frost.",
    synergies=("defragment", "capacitor", "blizzard"), tags=(BLOCK, ORB, FROST),
)
HEATSINKS = Card(
    id="heatsinks", name="Heatsinks", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=2.5,
    description="Whenever you play a Power card, draw 1 card.",
    synergies=("storm", "loop", "defragment", "capacitor", "creative_ai"), tags=(DRAW,),
)
LOOP = Card(
    id="loop", name="Loop", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=3.0,
    description="At the start of your turn, use the passive ability of your next Orb.",
    synergies=("glacier", "darkness", "defragment"), tags=(ORB, SCALING),
)
SCRAPE = Card(
    id="scrape", name="Scrape", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 7 damage. Draw 4 cards. Discard all drawn cards that do not cost 0.",
    synergies=("claw",), tags=(DRAW,),
)
STATIC_DISCHARGE = Card(
    id="static_discharge", name="Static Discharge", character=Character.DEFECT,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=2.5,
    description="Whenever you receive unblocked attack damage, Channel 1 Lightning.",
    synergies=("electrodynamics",), tags=(ORB, LIGHTNING, SCALING),
)
STORM = Card(
    id="storm", name="Storm", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=2.5,
    description="Whenever you play a Power card, Channel 1 Lightning.",
    synergies=("defragment", "heatsinks", "capacitor", "creative_ai"), tags=(ORB, LIGHTNING, SCALING),
)
TEMPEST = Card(
    id="tempest", name="Tempest", character=Character.DEFECT, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=COST_X, tier_rating=2.5,
    description="Channel X Lightning. Exhaust.", synergies=("chemical_x",), tags=(ORB, LIGHTNING),
)
ALL_FOR_ONE = Card(
    id="all_for_one", name="All for One", character=Character.DEFECT, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Deal 10 damage. Put all cost 0 cards from your discard pile into your hand.",
    synergies=("claw", "ftl", "beam_cell"),
)
BIASED_COGNITION = Card(
    id="biased_cognition", name="Biased Cognition", character=Character.DEFECT,
    rarity=CardRarity.RARE, card_type=CardType.POWER, cost=1, tier_rating=4.5,
    description="Gain 4 Focus. At the start of each turn, lose 1 Focus.",
    synergies=("glacier", "coolheaded"), tags=(FOCUS, SCALING),
)
BUFFER = Card(
    id="buffer", name="Buffer", character=Character.DEFECT, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=2, tier_rating=3.0,
    description="Prevent the next time you would lose HP.", tags=(BLOCK,),
)
CREATIVE_AI = Card(
    id="creative_ai", name="Creative AI", character=Character.DEFECT, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=3.0,
    description="At the start of your turn, add a random Power card into your hand.",
    synergies=("heatsinks", "storm"), tags=(SCALING,),
)
ECHO_FORM = Card(
    id="echo_form", name="Echo Form", character=Character.DEFECT, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=4.0,
    description="Ethereal. The first card you play each turn is played twice.", tags=(SCALING,),
)
ELECTRODYNAMICS = Card(
    id="electrodynamics", name="Electrodynamics", character=Character.DEFECT,
    rarity=CardRarity.RARE, card_type=CardType.POWER, cost=2, tier_rating=4.0,
    description="Lightning now hits ALL enemies. Channel 2 Lightning.",
    synergies=("ball_lightning", "zap", "tempest", "storm", "thunder_strike"),
    tags=(AOE, ORB, LIGHTNING, SCALING),
)
MACHINE_LEARNING = Card(
    id="machine_learning", name="Machine Learning", character=Character.DEFECT,
    rarity=CardRarity.RARE, card_type=CardType.POWER, cost=1, tier_rating=3.5,
    description="At the start of your turn, draw 1 additional card.", tags=(DRAW, SCALING),
)
MULTI_CAST = Card(
    id="multi_cast", name="Multi-Cast", character=Character.DEFECT, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=COST_X, tier_rating=3.0,
    description="Evoke your next Orb X times.", synergies=("darkness", "chemical_x"), tags=(ORB,),
)
SEEK = Card(
    id="seek", name="Seek", character=Character.DEFECT, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=0, tier_rating=3.5,
    description="Choose a card from your draw pile and place it into your hand. Exhaust.",
    tags=(DRAW, EXHAUST),
)
THUNDER_STRIKE = Card(
    id="thunder_strike", name="Thunder Strike", character=Character.DEFECT,
    rarity=CardRarity.RARE, card_type=CardType.ATTACK, cost=3, tier_rating=3.0,
    description="Deal 7 damage to a random enemy for each Lightning Channeled this combat.",
    synergies=("ball_lightning", "zap", "electrodynamics", "tempest"),
    tags=(LIGHTNING, MULTI_HIT, STRIKE),
)

DEFECT_CARDS: Dict[str, Card] = {c.id: c for c in [
    STRIKE_B, DEFEND_B, ZAP, DUALCAST, BALL_LIGHTNING, BARRAGE, BEAM_CELL, CHARGE_BATTERY,
    CLAW_CARD, COLD_SNAP, COMPILE_DRIVER, COOLHEADED, GO_FOR_THE_EYES, HOLOGRAM, LEAP,
    RECURSION, SKIM, SWEEPING_BEAM, TURBO, BLIZZARD, CAPACITOR, CHILL, CONSUME, DARKNESS,
    DEFRAGMENT, DOOM_AND_GLOOM, FTL, GLACIER, HEATSINKS, LOOP, SCRAPE, STATIC_DISCHARGE,
    STORM, TEMPEST, ALL_FOR_ONE, BIASED_COGNITION, BUFFER, CREATIVE_AI, ECHO_FORM,
    ELECTRODYNAMICS, MACHINE_LEARNING, MULTI_CAST, SEEK, THUNDER_STRIKE,
]}


# ============ WATCHER CARDS ============

STRIKE_P = Card(
    id="strike_p", name="Strike", character=Character.WATCHER, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=1, tier_rating=1.0, description="Deal 6 damage.",
    tags=(STRIKE,),
)
DEFEND_P = Card(
    id="defend_p", name="Defend", character=Character.WATCHER, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=1, tier_rating=1.0, description="Gain 5 Block.",
    tags=(BLOCK,),
)
ERUPTION = Card(
    id="eruption", name="Eruption", character=Character.WATCHER, rarity=CardRarity.BASIC,
    card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Deal 9 damage. Enter Wrath.", synergies=("rushdown",), tags=(STANCE, FRONTLOAD),
)
VIGILANCE = Card(
    id="vigilance", name="Vigilance", character=Character.WATCHER, rarity=CardRarity.BASIC,
    card_type=CardType.SKILL, cost=2, tier_rating=2.5,
    description="Gain 8 Block. Enter Calm.", synergies=("mental_fortress",), tags=(BLOCK, STANCE),
)
BOWLING_BASH = Card(
    id="bowling_bash", name="Bowling Bash", character=Character.WATCHER,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 7 damage for each enemy in combat.", tags=(FRONTLOAD,),
)
CONSECRATE = Card(
    id="consecrate", name="Consecrate", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.0,
    description="Deal 5 damage to ALL enemies.", tags=(AOE,),
)
CRESCENDO = Card(
    id="crescendo", name="Crescendo", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Retain. Enter Wrath. Exhaust.", synergies=("rushdown",), tags=(STANCE, RETAIN),
)
CUT_THROUGH_FATE = Card(
    id="cut_through_fate", name="Cut Through Fate", character=Character.WATCHER,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=3.5,
    description="Deal 7 damage. Scry 2. Draw 1 card.", synergies=("nirvana",), tags=(SCRY, DRAW),
)
EMPTY_BODY = Card(
    id="empty_body", name="Empty Body", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 7 Block. Exit your Stance.", synergies=("mental_fortress",),
    tags=(BLOCK, STANCE),
)
EMPTY_FIST = Card(
    id="empty_fist", name="Empty Fist", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 9 damage. Exit your Stance.", synergies=("mental_fortress",), tags=(STANCE,),
)
FLURRY_OF_BLOWS = Card(
    id="flurry_of_blows", name="Flurry of Blows", character=Character.WATCHER,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=0, tier_rating=2.5,
    description="Deal 4 damage. Whenever you change Stances, return this from the discard pile.",
    synergies=("mental_fortress", "rushdown"), tags=(STANCE,),
)
FLYING_SLEEVES = Card(
    id="flying_sleeves", name="Flying Sleeves", character=Character.WATCHER,
    rarity=CardRarity.COMMON, card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Retain. Deal 4 damage twice.", synergies=("establishment",),
    tags=(RETAIN, MULTI_HIT),
)
FOLLOW_UP = Card(
    id="follow_up", name="Follow-Up", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.5,
    description="Deal 7 damage. If the last card played this combat was an Attack, gain 1 Energy.",
    tags=(ENERGY,),
)
HALT = Card(
    id="halt", name="Halt", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5,
    description="Gain 3 Block. Wrath: gain 9 additional Block.", tags=(BLOCK,),
)
JUST_LUCKY = Card(
    id="just_lucky", name="Just Lucky", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.0,
    description="Scry 1. Gain 2 Block. Deal 3 damage.", synergies=("nirvana",), tags=(SCRY, BLOCK),
)
PROSTRATE = Card(
    id="prostrate", name="Prostrate", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5,
    description="Gain 2 Mantra. Gain 4 Block.", synergies=("devotion", "worship"),
    tags=(DIVINITY, BLOCK),
)
PROTECT = Card(
    id="protect", name="Protect", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=2, tier_rating=2.5,
    description="Retain. Gain 12 Block.", synergies=("establishment",), tags=(BLOCK, RETAIN),
)
THIRD_EYE = Card(
    id="third_eye", name="Third Eye", character=Character.WATCHER, rarity=CardRarity.COMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 7 Block. Scry 3.", synergies=("nirvana",), tags=(BLOCK, SCRY),
)
TRANQUILITY = Card(
    id="tranquility", name="Tranquility", character=Character.WATCHER,
    rarity=CardRarity.COMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Retain. Enter Calm. Exhaust.", synergies=("mental_fortress",),
    tags=(STANCE, RETAIN),
)
FEAR_NO_EVIL = Card(
    id="fear_no_evil", name="Fear No Evil", character=Character.WATCHER,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 8 damage. If the enemy intends to Attack, enter Calm.",
    synergies=("mental_fortress",), tags=(STANCE,),
)
FORESIGHT = Card(
    id="foresight", name="Foresight", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=3.0,
    description="At the start of your turn, Scry 3.", synergies=("nirvana", "weave"),
    tags=(SCRY, SCALING),
)
INNER_PEACE = Card(
    id="inner_peace", name="Inner Peace", character=Character.WATCHER,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="If you are in Calm, draw 3 cards. Otherwise, enter Calm.",
    synergies=("mental_fortress",), tags=(STANCE, DRAW),
)
MENTAL_FORTRESS = Card(
    id="mental_fortress", name="Mental Fortress", character=Character.WATCHER,
    rarity=CardRarity.UNCOMMON, card_type=CardType.POWER, cost=1, tier_rating=4.0,
    description="Whenever you change Stances, gain 4 Block.",
    synergies=("eruption", "vigilance", "tantrum", "inner_peace", "empty_fist", "crescendo",
               "tranquility", "fear_no_evil"),
    tags=(BLOCK, STANCE, SCALING),
)
NIRVANA = Card(
    id="nirvana", name="Nirvana", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=3.0, description="Whenever you Scry, gain 3 Block.",
    synergies=("foresight", "cut_through_fate", "third_eye", "weave", "just_lucky"),
    tags=(BLOCK, SCRY, SCALING),
)
PRAY = Card(
    id="pray", name="Pray", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 3 Mantra. Shuffle an Insight into your draw pile.", synergies=("devotion",),
    tags=(DIVINITY,),
)
RUSHDOWN = Card(
    id="rushdown", name="Rushdown", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.POWER, cost=1, tier_rating=4.5,
    description="Whenever you enter Wrath, draw 2 cards.",
    synergies=("eruption", "tantrum", "crescendo", "fear_no_evil", "flurry_of_blows"),
    tags=(DRAW, STANCE, SCALING),
)
SANDS_OF_TIME = Card(
    id="sands_of_time", name="Sands of Time", character=Character.WATCHER,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=4, tier_rating=2.5,
    description="Retain. Deal 20 damage. Whenever this card is Retained, lower its cost by 1.",
    synergies=("establishment",), tags=(RETAIN, FRONTLOAD),
)
SANCTITY = Card(
    id="sanctity", name="Sanctity", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Gain 6 Block. If the previous card played was a Skill, draw 2 cards.",
    tags=(BLOCK, DRAW),
)
TALK_TO_THE_HAND = Card(
    id="talk_to_the_hand", name="Talk to the Hand", character=Character.WATCHER,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=1, tier_rating=3.5,
    description="Deal 5 damage. Whenever you attack this enemy, gain 2 Block. Exhaust.",
    tags=(BLOCK, SCALING, EXHAUST),
)
TANTRUM = Card(
    id="tantrum", name="Tantrum", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=1, tier_rating=4.0,
    description="Deal 3 damage 3 times. Enter Wrath. Shuffle this card into your draw pile.",
    synergies=("rushdown", "mental_fortress"), tags=(STANCE, MULTI_HIT),
)
WALLOP = Card(
    id="wallop", name="Wallop", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Deal 9 damage. Gain Block equal to unblocked damage dealt.", tags=(BLOCK,),
)
WEAVE = Card(
    id="weave", name="Weave", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.ATTACK, cost=0, tier_rating=2.5,
    description="Deal 4 damage. Whenever you Scry, return this to your hand.",
    synergies=("foresight", "nirvana", "cut_through_fate", "third_eye"), tags=(SCRY,),
)
WINDMILL_STRIKE = Card(
    id="windmill_strike", name="Windmill Strike", character=Character.WATCHER,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=2, tier_rating=2.5,
    description="Retain. Deal 7 damage. When Retained, increase its damage by 4.",
    synergies=("establishment",), tags=(RETAIN, FRONTLOAD, STRIKE),
)
WORSHIP = Card(
    id="worship", name="Worship", character=Character.WATCHER, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=2, tier_rating=2.5, description="Gain 5 Mantra.",
    synergies=("devotion", "prostrate"), tags=(DIVINITY,),
)
BLASPHEMY = Card(
    id="blasphemy", name="Blasphemy", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=1, tier_rating=3.0,
    description="Retain. Enter Divinity. Die next turn. Exhaust.", tags=(DIVINITY, RETAIN),
)
BRILLIANCE = Card(
    id="brilliance", name="Brilliance", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 12 damage. Deals additional damage for all Mantra gained this combat.",
    synergies=("devotion", "worship", "prostrate", "pray"), tags=(DIVINITY, FRONTLOAD),
)
DEVA_FORM = Card(
    id="deva_form", name="Deva Form", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=3, tier_rating=3.0,
    description="Ethereal. At the start of your turn, gain Energy and increase this gain by 1.",
    tags=(ENERGY, SCALING),
)
DEVOTION = Card(
    id="devotion", name="Devotion", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.POWER, cost=1, tier_rating=3.5,
    description="At the start of your turn, gain 2 Mantra.",
    synergies=("worship", "prostrate", "pray", "brilliance"), tags=(DIVINITY, SCALING),
)
ESTABLISHMENT = Card(
    id="establishment", name="Establishment", character=Character.WATCHER,
    rarity=CardRarity.RARE, card_type=CardType.POWER, cost=1, tier_rating=3.0,
    description="Whenever a card is Retained, reduce its cost by 1.",
    synergies=("protect", "flying_sleeves", "windmill_strike", "perseverance", "sands_of_time"),
    tags=(RETAIN, SCALING),
)
PERSEVERANCE = Card(
    id="perseverance", name="Perseverance", character=Character.WATCHER,
    rarity=CardRarity.RARE, card_type=CardType.SKILL, cost=1, tier_rating=2.5,
    description="Retain. Gain 5 Block. Whenever this card is Retained, increase its Block by 2.",
    synergies=("establishment",), tags=(BLOCK, RETAIN),
)
RAGNAROK = Card(
    id="ragnarok", name="Ragnarok", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.ATTACK, cost=3, tier_rating=3.5,
    description="Deal 5 damage to a random enemy 5 times.", tags=(AOE, MULTI_HIT),
)
SCRAWL = Card(
    id="scrawl", name="Scrawl", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=1, tier_rating=3.5,
    description="Draw cards until your hand is full. Exhaust.", tags=(DRAW, EXHAUST),
)
WISH = Card(
    id="wish", name="Wish", character=Character.WATCHER, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=3, tier_rating=3.0,
    description="Choose one: gain 3 Plated Armor, 3 Strength, or 25 Gold. Exhaust.",
    tags=(SCALING, EXHAUST),
)

WATCHER_CARDS: Dict[str, Card] = {c.id: c for c in [
    STRIKE_P, DEFEND_P, ERUPTION, VIGILANCE, BOWLING_BASH, CONSECRATE, CRESCENDO,
    CUT_THROUGH_FATE, EMPTY_BODY, EMPTY_FIST, FLURRY_OF_BLOWS, FLYING_SLEEVES, FOLLOW_UP,
    HALT, JUST_LUCKY, PROSTRATE, PROTECT, THIRD_EYE, TRANQUILITY, FEAR_NO_EVIL, FORESIGHT,
    INNER_PEACE, MENTAL_FORTRESS, NIRVANA, PRAY, RUSHDOWN, SANDS_OF_TIME, SANCTITY,
    TALK_TO_THE_HAND, TANTRUM, WALLOP, WEAVE, WINDMILL_STRIKE, WORSHIP, BLASPHEMY,
    BRILLIANCE, DEVA_FORM, DEVOTION, ESTABLISHMENT, PERSEVERANCE, RAGNAROK, SCRAWL, WISH,
]}


# ============ COLORLESS CARDS ============

APOTHEOSIS = Card(
    id="apotheosis", name="Apotheosis", character=Character.COLORLESS, rarity=CardRarity.RARE,
    card_type=CardType.SKILL, cost=2, tier_rating=4.0,
    description="Upgrade ALL of your cards for the rest of combat. Exhaust.", tags=(EXHAUST,),
)
BANDAGE_UP = Card(
    id="bandage_up", name="Bandage Up", character=Character.COLORLESS,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=0, tier_rating=2.0,
    description="Heal 4 HP. Exhaust.", tags=(HEAL, EXHAUST),
)
BLIND = Card(
    id="blind", name="Blind", character=Character.COLORLESS, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5, description="Apply 2 Weak.", tags=(WEAK,),
)
DARK_SHACKLES = Card(
    id="dark_shackles", name="Dark Shackles", character=Character.COLORLESS,
    rarity=CardRarity.UNCOMMON, card_type=CardType.SKILL, cost=0, tier_rating=2.5,
    description="Enemy loses 9 Strength this turn. Exhaust.", tags=(WEAK, EXHAUST),
)
FINESSE = Card(
    id="finesse", name="Finesse", character=Character.COLORLESS, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5, description="Gain 2 Block. Draw 1 card.",
    tags=(BLOCK, CYCLE),
)
FLASH_OF_STEEL = Card(
    id="flash_of_steel", name="Flash of Steel", character=Character.COLORLESS,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=0, tier_rating=2.5,
    description="Deal 3 damage. Draw 1 card.", tags=(CYCLE,),
)
HAND_OF_GREED = Card(
    id="hand_of_greed", name="Hand of Greed", character=Character.COLORLESS,
    rarity=CardRarity.RARE, card_type=CardType.ATTACK, cost=2, tier_rating=3.0,
    description="Deal 20 damage. If Fatal, gain 20 Gold.", tags=(FRONTLOAD,),
)
MASTER_OF_STRATEGY = Card(
    id="master_of_strategy", name="Master of Strategy", character=Character.COLORLESS,
    rarity=CardRarity.RARE, card_type=CardType.SKILL, cost=0, tier_rating=4.0,
    description="Draw 3 cards. Exhaust.", tags=(DRAW, EXHAUST),
)
PANACEA = Card(
    id="panacea", name="Panacea", character=Character.COLORLESS, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.0, description="Gain 1 Artifact. Exhaust.",
    tags=(EXHAUST,),
)
SWIFT_STRIKE = Card(
    id="swift_strike", name="Swift Strike", character=Character.COLORLESS,
    rarity=CardRarity.UNCOMMON, card_type=CardType.ATTACK, cost=0, tier_rating=2.0,
    description="Deal 7 damage.", tags=(STRIKE,),
)
TRIP = Card(
    id="trip", name="Trip", character=Character.COLORLESS, rarity=CardRarity.UNCOMMON,
    card_type=CardType.SKILL, cost=0, tier_rating=2.5, description="Apply 2 Vulnerable.",
    tags=(VULNERABLE,),
)
RITUAL_DAGGER = Card(
    id="ritual_dagger", name="Ritual Dagger", character=Character.COLORLESS,
    rarity=CardRarity.SPECIAL, card_type=CardType.ATTACK, cost=1, tier_rating=3.0,
    description="Deal 15 damage. If Fatal, permanently increase this card's damage by 3. Exhaust.",
    tags=(SCALING, FRONTLOAD, EXHAUST),
)
BITE = Card(
    id="bite", name="Bite", character=Character.COLORLESS, rarity=CardRarity.SPECIAL,
    card_type=CardType.ATTACK, cost=1, tier_rating=2.0, description="Deal 7 damage. Heal 2 HP.",
    tags=(HEAL,),
)
SHIV_CARD = Card(
    id="shiv", name="Shiv", character=Character.COLORLESS, rarity=CardRarity.SPECIAL,
    card_type=CardType.ATTACK, cost=0, tier_rating=1.5, description="Deal 4 damage. Exhaust.",
    synergies=("accuracy",), tags=(SHIV, EXHAUST),
)

COLORLESS_CARDS: Dict[str, Card] = {c.id: c for c in [
    APOTHEOSIS, BANDAGE_UP, BLIND, DARK_SHACKLES, FINESSE, FLASH_OF_STEEL, HAND_OF_GREED,
    MASTER_OF_STRATEGY, PANACEA, SWIFT_STRIKE, TRIP, RITUAL_DAGGER, BITE, SHIV_CARD,
]}


# ============ CURSES AND STATUSES ============

def _curse(card_id: str, name: str, description: str) -> Card:
    return Card(
        id=card_id, name=name, character=Character.COLORLESS, rarity=CardRarity.CURSE,
        card_type=CardType.CURSE, cost=COST_UNPLAYABLE, tier_rating=1.0, description=description,
    )


def _status(card_id: str, name: str, description: str, cost: int = COST_UNPLAYABLE) -> Card:
    return Card(
        id=card_id, name=name, character=Character.COLORLESS, rarity=CardRarity.STATUS,
        card_type=CardType.STATUS, cost=cost, tier_rating=1.0, description=description,
    )


CURSE_CARDS: Dict[str, Card] = {c.id: c for c in [
    _curse("ascenders_bane", "Ascender's Bane", "Unplayable. Ethereal. Cannot be removed."),
    _curse("necronomicurse", "Necronomicurse", "Unplayable. There is no escape from this Curse."),
    _curse("clumsy", "Clumsy", "Unplayable. Ethereal."),
    _curse("curse_of_the_bell", "Curse of the Bell", "Unplayable. Cannot be removed."),
    _curse("decay", "Decay", "Unplayable. At the end of your turn, take 2 damage."),
    _curse("doubt", "Doubt", "Unplayable. At the end of your turn, gain 1 Weak."),
    _curse("injury", "Injury", "Unplayable."),
    _curse("normality", "Normality", "Unplayable. You cannot play more than 3 cards this turn."),
    _curse("pain", "Pain", "Unplayable. While in hand, lose 1 HP when other cards are played."),
    _curse("parasite", "Parasite", "Unplayable. If transformed or removed, lose 3 Max HP."),
    _curse("regret", "Regret", "Unplayable. At the end of your turn, lose HP equal to cards in hand."),
    _curse("shame", "Shame", "Unplayable. At the end of your turn, gain 1 Frail."),
    _curse("writhe", "Writhe", "Unplayable. Innate."),
]}

STATUS_CARDS: Dict[str, Card] = {c.id: c for c in [
    _status("wound", "Wound", "Unplayable."),
    _status("dazed", "Dazed", "Unplayable. Ethereal."),
    _status("burn", "Burn", "Unplayable. At the end of your turn, take 2 damage."),
    _status("slimed", "Slimed", "Exhaust.", cost=1),
    _status("void", "Void", "Unplayable. Ethereal. When drawn, lose 1 Energy."),
]}


# ============ REGISTRY ============

ALL_CARDS: Dict[str, Card] = {
    **IRONCLAD_CARDS,
    **SILENT_CARDS,
    **DEFECT_CARDS,
    **WATCHER_CARDS,
    **COLORLESS_CARDS,
    **CURSE_CARDS,
    **STATUS_CARDS,
}

STARTER_DECKS: Dict[Character, List[str]] = {
    Character.IRONCLAD: ["strike_r"] * 5 + ["defend_r"] * 4 + ["bash"],
    Character.SILENT: ["strike_g"] * 5 + ["defend_g"] * 5 + ["neutralize", "survivor"],
    Character.DEFECT: ["strike_b"] * 4 + ["defend_b"] * 4 + ["zap", "dualcast"],
    Character.WATCHER: ["strike_p"] * 4 + ["defend_p"] * 4 + ["eruption", "vigilance"],
}

CARD_ID_ALIASES = {
    "strike": "strike_r",
    "defend": "defend_r",
    "claw_card": "claw",
}


def resolve_card_id(card_id: str) -> str:
    """Resolve display-style ids ("Perfected Strike") and aliases to catalog ids."""
    normalized = card_id.strip().lower().replace("'", "").replace("-", "_").replace(" ", "_")
    return CARD_ID_ALIASES.get(normalized, normalized)


def normalize_card_id(raw_id: str) -> Tuple[str, bool]:
    """
    Split a snapshot card id into (card_id, upgraded).

    Handles the '+' suffix convention for upgraded cards ("bash+").
    """
    upgraded = raw_id.endswith("+")
    base_id = raw_id[:-1] if upgraded else raw_id
    return resolve_card_id(base_id), upgraded


def is_basic_strike(card_id: str) -> bool:
    return card_id.startswith("strike_")


def is_basic_defend(card_id: str) -> bool:
    return card_id.startswith("defend_")


def get_card(card_id: str) -> Card:
    """Get a card by id."""
    resolved_id = resolve_card_id(card_id)
    if resolved_id not in ALL_CARDS:
        raise ValueError(f"Unknown card: {card_id}")
    return ALL_CARDS[resolved_id]


def get_cards_for_character(character: Character) -> Dict[str, Card]:
    """All non-curse, non-status cards a character can be offered."""
    return {
        card_id: card for card_id, card in ALL_CARDS.items()
        if card.character == character and not card.is_dead
    }
