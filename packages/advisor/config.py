"""
Advisor configuration - every tuned number the evaluators share.

The rating breakpoints, synergy weights, health weights, HP thresholds and
act boundaries below are product configuration: they were tuned by playing
the game, not derived. Evaluators import them by name so the same card is
bucketed identically whether it shows up in a combat reward, a shop or a
boss chest.

Process settings (log level, catalog override, output format) are read from
the environment by load_settings(); only the CLI calls it.
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


# ============================================================================
# RATING SCALES
# ============================================================================

RATING_MIN = 0.0
RATING_MAX = 5.0

# Unknown cards/relics sit in the middle of the scale
NEUTRAL_RATING = 2.5

# Rating -> priority breakpoints (cards and relics use the same mapping)
MUST_PICK_THRESHOLD = 4.0
GOOD_PICK_THRESHOLD = 3.0
SITUATIONAL_THRESHOLD = 2.0

# Representative rating reported for rule-table verdicts (boss relics)
RATING_FOR_BUCKET = (4.5, 3.5, 2.5, 1.0)

STRENGTH_MIN = 0
STRENGTH_MAX = 100
SCORE_MIN = 0.0
SCORE_MAX = 100.0


# ============================================================================
# CARD EVALUATOR
# ============================================================================

# First N synergy matches count in full, the rest at the diminished weight
SYNERGY_BONUS = 0.5
SYNERGY_FULL_MATCHES = 2
SYNERGY_DIMINISHED_BONUS = 0.25
SYNERGY_BONUS_CAP = 1.5

ANTI_SYNERGY_PENALTY = 0.5
ANTI_SYNERGY_PENALTY_CAP = 1.5

# Curses and statuses never rise above this
DEAD_CARD_RATING = 0.0

# Powers are worth more in a lean deck
SMALL_DECK_SIZE = 15
SMALL_DECK_POWER_BONUS = 0.5
POWER_GLUT_COUNT = 5
POWER_GLUT_PENALTY = 1.0

# Duplicates of low-tier cards
DUPLICATE_MIN_COPIES = 2
DUPLICATE_TIER_CEILING = 3.0
DUPLICATE_PENALTY = 0.5

# Deck balance
ATTACK_RATIO_FLOOR = 0.45
ATTACK_NEED_BONUS = 0.6
BLOCK_RATIO_FLOOR = 0.25
BLOCK_NEED_BONUS = 0.7

# Cost curve
LOW_COST_RATIO_FLOOR = 0.4
LOW_COST_BONUS = 0.5
HIGH_COST_RATIO_CEILING = 0.3
HIGH_COST_PENALTY = 0.6
HEAVY_CURVE_AVG_COST = 1.5
HEAVY_CURVE_CHEAP_BONUS = 0.4

# Capability needs (bonus applies while the deck has fewer than the count)
DRAW_NEED_COUNT = 3
DRAW_NEED_BONUS = 0.4
SCALING_NEED_COUNT = 3
SCALING_NEED_BONUS = 0.5
AOE_NEED_COUNT = 2
AOE_NEED_BONUS = 0.4
FIRST_ENERGY_BONUS = 0.5
EXTRA_ENERGY_BONUS = 0.2

# Bloated decks
LARGE_DECK_SIZE = 30
LARGE_DECK_TIER_CEILING = 4.0
LARGE_DECK_PENALTY = 0.5

OFF_CLASS_PENALTY = 1.0

# Archetype flag -> (card tag that benefits, bonus)
ARCHETYPE_TAG_BOOSTS: Dict[str, Tuple[str, float]] = {
    "barricade": ("block", 1.0),
    "rupture": ("self_damage", 1.0),
    "strength": ("multi_hit", 0.8),
    "exhaust": ("exhaust", 0.6),
    "poison": ("poison", 0.6),
    "shiv": ("shiv", 0.6),
    "discard": ("discard", 0.6),
    "orb_focus": ("orb", 0.6),
    "stance_dance": ("stance", 0.6),
    "scry": ("scry", 0.5),
}
CORRUPTION_SKILL_BONUS = 0.8
DEAD_BRANCH_EXHAUST_BONUS = 1.0


# ============================================================================
# DECK COMPOSITION
# ============================================================================

# Cost buckets
LOW_COST_MAX = 1
HIGH_COST_MIN = 3

# Build flag -> (card tag, copies needed); card-presence flags are separate
FLAG_TAG_THRESHOLDS: Dict[str, Tuple[str, int]] = {
    "strength": ("strength", 3),
    "poison": ("poison", 2),
    "shiv": ("shiv", 3),
    "discard": ("discard", 3),
    "orb_focus": ("focus", 2),
    "lightning": ("lightning", 3),
    "frost": ("frost", 3),
    "claw": ("claw", 3),
    "stance_dance": ("stance", 4),
    "divinity": ("divinity", 3),
    "scry": ("scry", 4),
    "exhaust": ("exhaust", 5),
    "defensive": ("block", 8),
    "scaling": ("scaling", 4),
}
ORB_FLAG_COUNT = 6

# Cards whose single copy defines a build
FLAG_KEY_CARDS: Dict[str, Tuple[str, ...]] = {
    "corruption": ("corruption",),
    "barricade": ("barricade",),
    "rupture": ("rupture",),
    "strength": ("demon_form", "limit_break"),
}


# ============================================================================
# RELIC EVALUATOR
# ============================================================================

GRADE_RATINGS: Dict[str, float] = {"S": 5.0, "A": 4.0, "B": 3.0, "C": 2.0, "D": 1.0}


# ============================================================================
# ARCHETYPE DETECTOR
# ============================================================================

KEY_CARD_WEIGHT = 2
SUPPORT_CARD_WEIGHT = 1
DEFAULT_EXPECTED_KEY_CARDS = 2
DEFAULT_EXPECTED_SUPPORT_CARDS = 4
DEFAULT_MIN_KEY_CARDS = 1


# ============================================================================
# DECK HEALTH
# ============================================================================

CATEGORY_BASE_SCORE = 50.0

HEALTH_WEIGHTS: Dict[str, float] = {
    "damage": 0.25,
    "defense": 0.25,
    "consistency": 0.15,
    "scaling": 0.20,
    "synergy": 0.15,
}

# Points shaved off damage/defense/scaling per ascension level
ASCENSION_BAR_PER_LEVEL = 0.75

# Lower bounds, checked top-down; anything below the last is F
GRADE_BREAKPOINTS: Tuple[Tuple[float, str], ...] = (
    (90.0, "S"),
    (80.0, "A"),
    (70.0, "B"),
    (60.0, "C"),
    (50.0, "D"),
)

STATUS_BREAKPOINTS: Tuple[Tuple[float, str], ...] = (
    (85.0, "excellent"),
    (70.0, "good"),
    (55.0, "adequate"),
    (40.0, "weak"),
)

# Categories below this produce a critical issue
CRITICAL_CATEGORY_SCORE = 40.0
TOP_RECOMMENDATION_COUNT = 2

WIN_RATE_SCORE_FACTOR = 0.7
WIN_RATE_ASCENSION_PENALTY = 2.0
WIN_RATE_ACT3_BONUS = 10.0
WIN_RATE_ACT2_BONUS = 5.0
WIN_RATE_MIN = 5.0
WIN_RATE_MAX = 70.0

LATE_GAME_FLOOR = 25


# ============================================================================
# ACTS AND FLOORS
# ============================================================================

# Boss floor of each act; act 4 is the Heart
ACT_BOSS_FLOORS: Dict[int, int] = {1: 16, 2: 33, 3: 52, 4: 56}
FINAL_ACT = 4


# ============================================================================
# HP THRESHOLDS
# ============================================================================

HP_CRITICAL = 0.3
HP_LOW = 0.4
HP_HALF = 0.5
HP_MODERATE = 0.6
HP_HEALTHY = 0.7
HP_STRONG = 0.75
HP_FULL = 0.8

# Below this ratio a rest site should be used to heal, by act
REST_HP_THRESHOLDS: Dict[int, float] = {1: 0.5, 2: 0.6, 3: 0.7, 4: 0.7}
REST_HEAL_FRACTION = 0.3


# ============================================================================
# COMBAT / BOSS READINESS
# ============================================================================

READY_SCORE = 75.0
CAUTION_SCORE = 50.0
REQUIREMENT_DEFICIT_PENALTY = 25.0
ELITE_READINESS_PENALTY = 5.0
BOSS_READINESS_PENALTY = 10.0
READINESS_ASCENSION_PENALTY = 0.5

IMPORTANCE_WEIGHTS: Dict[str, int] = {"critical": 3, "important": 2, "recommended": 1}
BOSS_HP_WEIGHT = 1
PREPARATION_TIME_FLOORS = 5
PREPARATION_TIME_BONUS = 10.0
URGENT_FLOORS = 3
MAX_PRIORITIES = 3

# (HP ratio lower bound, score) for the boss HP factor, checked top-down
BOSS_HP_SCORES: Tuple[Tuple[float, float], ...] = ((0.7, 100.0), (0.5, 70.0), (0.3, 40.0))
BOSS_HP_FLOOR_SCORE = 20.0

# Rough turn-one/two damage of one good frontload card
FRONTLOAD_DAMAGE_PER_CARD = 18

# Deck capability on each requirement axis: counts needed for LOW/MEDIUM/HIGH
DAMAGE_CAPABILITY_COUNTS = (3, 5, 8)
BLOCK_CAPABILITY_COUNTS = (1, 5, 8)
SCALING_CAPABILITY_COUNTS = (1, 2, 4)

# Block a deck can put up on one turn, by block capability level (0-3)
EXPECTED_BLOCK_BY_LEVEL = (0, 5, 10, 15)
# Damage through block at or above this share of current HP is a heavy hit
HEAVY_HIT_HP_SHARE = 0.5
HEAVY_HIT_PENALTY = 10.0
LETHAL_HIT_PENALTY = 25.0


# ============================================================================
# SHOP
# ============================================================================

REMOVAL_BASE_COST = 75
REMOVAL_COST_STEP = 25
UNREMOVABLE_CARDS = ("ascenders_bane", "necronomicurse", "curse_of_the_bell")

REMOVAL_SCORE_CRITICAL = 9
REMOVAL_SCORE_HIGH = 7
REMOVAL_SCORE_MEDIUM = 5
LOW_TIER_REMOVAL = 2.0

# Floors where basic Strikes/Defends stop being worth keeping
EARLY_REMOVAL_FLOOR = 8
MID_REMOVAL_FLOOR = 25
BLOATED_DECK_SIZE = 30

# Removal purchase: gold on hand needed per removal urgency
REMOVAL_SPARE_GOLD = 250
REMOVAL_COMFORT_GOLD = 200

# Purchase value = rating + efficiency x (1 - cost / gold); unaffordable items sink
PRICE_EFFICIENCY_WEIGHT = 5.0
UNAFFORDABLE_VALUE = -10.0
RELIC_VALUE_MULTIPLIER = 1.5
REMOVAL_VALUES: Dict[str, float] = {"must-buy": 10.0, "strong-buy": 7.0, "consider": 5.0}

# Largest share of current gold worth spending per bucket
CARD_CONSIDER_GOLD_SHARE = 0.3
CARD_EXPENSIVE_GOLD_SHARE = 0.5
RELIC_STRONG_GOLD_SHARE = 0.4
RELIC_CONSIDER_GOLD_SHARE = 0.2
RELIC_EXPENSIVE_GOLD_SHARE = 0.6

POTION_RARITY_RATINGS: Dict[str, float] = {"common": 2.5, "uncommon": 3.0, "rare": 3.5}
POTION_SLOTS = 3
POTION_SLOTS_HIGH_ASCENSION = 2
POTION_SLOT_ASCENSION = 11


# ============================================================================
# PATH
# ============================================================================

ELITE_MIN_HEALTH = 50.0
ELITE_SEEK_HEALTH = 70.0
EVENT_SEEK_HEALTH = 55.0
SHOP_RICH_GOLD = 250
SHOP_PRE_BOSS_GOLD = 150
SHOP_LOW_GOLD = 100
MAX_GOALS = 4

# Event HP floor, relic pace and deck-size cues used when scoring map nodes
EVENT_AVOID_HP = 0.35
FLOORS_PER_EXPECTED_RELIC = 8
RELIC_DEFICIT = 2
DECK_BUILDING_SIZE = 20
BASIC_TRANSFORM_COUNT = 7
BASIC_THINNING_COUNT = 8
DEAD_THINNING_COUNT = 2
RELIC_GOAL_FLOOR = 20
ELITE_NEAR_BOSS_HEALTH = 60.0
ELITE_ACT1_HEALTH = 55.0
ELITE_NEAR_BOSS_HP = 0.65
AGGRESSIVE_HEALTH = 75.0


# ============================================================================
# ASCENSION KEYS
# ============================================================================

# Unupgraded cards still worth a smith over the emerald key, by act
EMERALD_UNUPGRADED_LIMITS: Dict[int, int] = {2: 8, 3: 5}
RUBY_EARLY_RELICS = 5
RUBY_MID_RELICS = 8
RUBY_LATE_RELICS = 10
KEY_WEAK_DECK_HEALTH = 50.0


# ============================================================================
# PROCESS SETTINGS
# ============================================================================

@dataclass
class AdvisorSettings:
    """Settings for the command line front-end."""
    log_level: str = "INFO"
    catalog_path: Optional[str] = None
    output: str = "text"


def load_settings() -> AdvisorSettings:
    """Read settings from the environment (after load_dotenv())."""
    return AdvisorSettings(
        log_level=os.environ.get("ADVISOR_LOG_LEVEL", "INFO").upper(),
        catalog_path=os.environ.get("ADVISOR_CATALOG") or None,
        output=os.environ.get("ADVISOR_OUTPUT", "text"),
    )
