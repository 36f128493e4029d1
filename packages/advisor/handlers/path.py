"""
Path Handler - which map nodes to path toward.

Every node type gets a priority (critical/high/neutral/low/avoid) and a risk
label from HP ratio, deck health, gold and distance to the boss:
- elites are sought only when deck health and HP are both high, and avoided
  when either is low
- events are sought when HP and deck health allow, and avoided at low HP
- rest sites climb toward critical as the boss gets closer
- shops follow gold on hand and removal needs
- treasure is always worth taking; the boss is unavoidable

A general strategy line, up to four goals and any warnings complete the
picture.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..calc.composition import DeckComposition, analyze_deck
from ..calc.deck_health import DeckHealthReport, analyze_deck_health
from ..config import (
    AGGRESSIVE_HEALTH,
    BASIC_THINNING_COUNT,
    BASIC_TRANSFORM_COUNT,
    DEAD_THINNING_COUNT,
    DECK_BUILDING_SIZE,
    ELITE_ACT1_HEALTH,
    ELITE_MIN_HEALTH,
    ELITE_NEAR_BOSS_HEALTH,
    ELITE_NEAR_BOSS_HP,
    ELITE_SEEK_HEALTH,
    EVENT_AVOID_HP,
    EVENT_SEEK_HEALTH,
    FLOORS_PER_EXPECTED_RELIC,
    HP_CRITICAL,
    HP_FULL,
    HP_HALF,
    HP_HEALTHY,
    HP_LOW,
    HP_MODERATE,
    HP_STRONG,
    MAX_GOALS,
    PREPARATION_TIME_FLOORS,
    RELIC_DEFICIT,
    RELIC_GOAL_FLOOR,
    REMOVAL_BASE_COST,
    SHOP_LOW_GOLD,
    SHOP_PRE_BOSS_GOLD,
    SHOP_RICH_GOLD,
    URGENT_FLOORS,
)
from ..content.catalog import ReferenceData
from ..recommendations import CategoryStatus, NodePriority, RiskLevel
from ..state.run import RunState

logger = logging.getLogger(__name__)


class NodeType(Enum):
    """Map node types, in map-legend order."""
    MONSTER = "monster"
    ELITE = "elite"
    EVENT = "event"
    SHOP = "shop"
    REST = "rest"
    TREASURE = "treasure"
    BOSS = "boss"


@dataclass(frozen=True)
class PathRecommendation:
    node: NodeType
    priority: NodePriority
    risk: RiskLevel
    reason: str


@dataclass(frozen=True)
class PathStrategy:
    """Node-by-node pathing advice for the rest of the act."""
    floor: int
    act: int
    floors_until_boss: int
    recommendations: Tuple[PathRecommendation, ...]
    general_strategy: str
    goals: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    def recommendation_for(self, node: NodeType) -> PathRecommendation:
        for recommendation in self.recommendations:
            if recommendation.node == node:
                return recommendation
        raise KeyError(node)


@dataclass(frozen=True)
class PathContext:
    """What the node rules look at."""
    state: RunState
    composition: DeckComposition
    health: DeckHealthReport

    @property
    def hp_ratio(self) -> float:
        return self.state.hp_ratio

    @property
    def score(self) -> float:
        return self.health.overall_score

    def status(self, category: str) -> CategoryStatus:
        return self.health.category(category).status

    @property
    def hp_text(self) -> str:
        return f"{self.state.current_hp}/{self.state.max_hp} HP"


def _rec(node: NodeType, priority: NodePriority, risk: RiskLevel, reason: str) -> PathRecommendation:
    return PathRecommendation(node=node, priority=priority, risk=risk, reason=reason)


# ============================================================================
# NODE RULES
# ============================================================================

def recommend_monster(ctx: PathContext) -> PathRecommendation:
    node = NodeType.MONSTER
    if ctx.composition.size < DECK_BUILDING_SIZE and ctx.status("damage") == CategoryStatus.CRITICAL:
        return _rec(node, NodePriority.HIGH, RiskLevel.MODERATE,
                    "Need card rewards to build damage output")
    if ctx.hp_ratio < HP_CRITICAL:
        return _rec(node, NodePriority.AVOID, RiskLevel.DANGEROUS,
                    "Too low HP; avoid combat and path to rest sites")
    if ctx.state.floors_until_boss <= URGENT_FLOORS and ctx.hp_ratio < HP_MODERATE:
        return _rec(node, NodePriority.LOW, RiskLevel.RISKY,
                    "Boss soon; preserve HP and avoid unnecessary fights")
    if ctx.hp_ratio >= HP_HEALTHY and ctx.score < ELITE_SEEK_HEALTH:
        return _rec(node, NodePriority.HIGH, RiskLevel.SAFE,
                    "Good HP and the deck needs improvement; take hallway fights for cards")
    return _rec(node, NodePriority.NEUTRAL, RiskLevel.MODERATE,
                "Standard hallway fights for card rewards and gold")


def recommend_elite(ctx: PathContext) -> PathRecommendation:
    node = NodeType.ELITE
    state = ctx.state
    hp, score, act = ctx.hp_ratio, ctx.score, state.act

    if hp < HP_LOW:
        return _rec(node, NodePriority.AVOID, RiskLevel.DANGEROUS,
                    f"{ctx.hp_text} is too low for elite fights")
    if score < ELITE_MIN_HEALTH:
        return _rec(node, NodePriority.AVOID, RiskLevel.DANGEROUS,
                    f"Deck score {score:g}/100 is too weak for elites")

    relic_count = len(state.relics)
    expected = state.floor // FLOORS_PER_EXPECTED_RELIC
    if relic_count < expected - RELIC_DEFICIT:
        risk = RiskLevel.MODERATE if hp >= HP_HEALTHY else RiskLevel.RISKY
        return _rec(node, NodePriority.HIGH, risk,
                    f"Only {relic_count} relics; you critically need elite rewards")
    if hp >= HP_STRONG and score >= ELITE_SEEK_HEALTH:
        return _rec(node, NodePriority.HIGH, RiskLevel.MODERATE,
                    "Strong deck and good HP; elites are efficient for relics")
    if (state.floors_until_boss <= PREPARATION_TIME_FLOORS and hp >= ELITE_NEAR_BOSS_HP
            and score >= ELITE_NEAR_BOSS_HEALTH):
        return _rec(node, NodePriority.NEUTRAL, RiskLevel.RISKY,
                    "Can fit one elite before the boss for a relic")
    if act == 1 and hp >= HP_MODERATE and score >= ELITE_ACT1_HEALTH:
        return _rec(node, NodePriority.HIGH, RiskLevel.MODERATE,
                    "Act 1 elites are manageable; get relics early")
    if act >= 3 and (hp < HP_HEALTHY or score < ELITE_SEEK_HEALTH):
        return _rec(node, NodePriority.AVOID, RiskLevel.DANGEROUS,
                    "Late elites are deadly; only take them with a strong deck")
    return _rec(node, NodePriority.LOW, RiskLevel.RISKY,
                "Elites are risky; only take them if you need relics urgently")


def recommend_event(ctx: PathContext) -> PathRecommendation:
    node = NodeType.EVENT
    if ctx.hp_ratio < EVENT_AVOID_HP:
        return _rec(node, NodePriority.AVOID, RiskLevel.RISKY,
                    "Low HP makes event risks dangerous")
    if ctx.hp_ratio >= HP_MODERATE and ctx.score >= EVENT_SEEK_HEALTH:
        return _rec(node, NodePriority.HIGH, RiskLevel.MODERATE,
                    "Events offer upgrades, transforms and relics with manageable risk")

    basics = ctx.composition.basic_count
    if basics >= BASIC_TRANSFORM_COUNT and ctx.state.act >= 2:
        return _rec(node, NodePriority.HIGH, RiskLevel.MODERATE,
                    f"{basics} Strikes/Defends; events can transform them")
    if ctx.hp_ratio < HP_HALF:
        return _rec(node, NodePriority.LOW, RiskLevel.RISKY,
                    "Events with HP costs are a gamble at this HP")
    return _rec(node, NodePriority.NEUTRAL, RiskLevel.MODERATE,
                "Events provide card upgrades, transforms and occasional relics")


def recommend_shop(ctx: PathContext) -> PathRecommendation:
    node = NodeType.SHOP
    gold = ctx.state.gold
    if gold >= SHOP_RICH_GOLD:
        return _rec(node, NodePriority.CRITICAL, RiskLevel.SAFE,
                    f"{gold} gold can buy key cards, relics or removal")
    if ctx.state.floors_until_boss <= PREPARATION_TIME_FLOORS and gold >= SHOP_PRE_BOSS_GOLD:
        return _rec(node, NodePriority.HIGH, RiskLevel.SAFE,
                    "Shop before the boss for last-minute improvements")

    comp = ctx.composition
    needs_thinning = comp.dead_count >= DEAD_THINNING_COUNT or comp.basic_count >= BASIC_THINNING_COUNT
    if needs_thinning and gold >= REMOVAL_BASE_COST:
        return _rec(node, NodePriority.HIGH, RiskLevel.SAFE,
                    "Can afford card removal to thin the deck")
    if gold < SHOP_LOW_GOLD:
        return _rec(node, NodePriority.LOW, RiskLevel.SAFE,
                    f"Only {gold} gold; probably can't afford anything good")
    return _rec(node, NodePriority.NEUTRAL, RiskLevel.SAFE,
                "Shops offer cards, relics and removal")


def recommend_rest(ctx: PathContext) -> PathRecommendation:
    node = NodeType.REST
    hp = ctx.hp_ratio
    floors_left = ctx.state.floors_until_boss

    if hp < HP_CRITICAL:
        return _rec(node, NodePriority.CRITICAL, RiskLevel.SAFE,
                    f"{ctx.hp_text}; you must rest or you will die")
    if floors_left <= URGENT_FLOORS and hp < HP_HEALTHY:
        return _rec(node, NodePriority.CRITICAL, RiskLevel.SAFE,
                    f"Boss in {floors_left} floors; rest to maximize HP for the fight")
    if hp < HP_HALF:
        return _rec(node, NodePriority.HIGH, RiskLevel.SAFE, f"{ctx.hp_text}; you need healing")
    if floors_left <= PREPARATION_TIME_FLOORS and hp < HP_FULL:
        return _rec(node, NodePriority.HIGH, RiskLevel.SAFE,
                    "Boss approaching; top up HP or take a final upgrade")
    if hp >= HP_FULL:
        return _rec(node, NodePriority.NEUTRAL, RiskLevel.SAFE,
                    "Good HP; use rest sites for key upgrades")
    return _rec(node, NodePriority.NEUTRAL, RiskLevel.SAFE,
                "Rest sites for healing or key card upgrades")


def recommend_treasure(ctx: PathContext) -> PathRecommendation:
    return _rec(NodeType.TREASURE, NodePriority.HIGH, RiskLevel.SAFE,
                "Free relic with no combat")


def recommend_boss(ctx: PathContext) -> PathRecommendation:
    if ctx.hp_ratio < HP_LOW or ctx.score < ELITE_MIN_HEALTH:
        risk = RiskLevel.DANGEROUS
    elif ctx.hp_ratio >= HP_HEALTHY and ctx.score >= ELITE_SEEK_HEALTH:
        risk = RiskLevel.MODERATE
    else:
        risk = RiskLevel.RISKY
    return _rec(NodeType.BOSS, NodePriority.CRITICAL, risk,
                "Unavoidable; arrive with as much HP and as many upgrades as possible")


NODE_RULES = (
    recommend_monster,
    recommend_elite,
    recommend_event,
    recommend_shop,
    recommend_rest,
    recommend_treasure,
    recommend_boss,
)


# ============================================================================
# STRATEGY TEXT
# ============================================================================

def general_strategy(ctx: PathContext) -> str:
    if ctx.hp_ratio < HP_CRITICAL:
        return "SURVIVAL MODE: path directly to rest sites and avoid all combat"
    if ctx.score < ELITE_MIN_HEALTH:
        return "DECK BUILDING: prioritize hallways and events for card rewards"
    if ctx.state.floors_until_boss <= URGENT_FLOORS:
        return "BOSS PREP: minimize risks and prepare the deck for the boss fight"
    if ctx.score >= AGGRESSIVE_HEALTH and ctx.hp_ratio >= HP_HEALTHY:
        return "AGGRESSIVE: strong deck and good HP; take elites for relics"
    return "BALANCED: mix hallways, events and elites based on HP"


def path_goals(ctx: PathContext) -> List[str]:
    goals = []
    if ctx.status("damage") == CategoryStatus.CRITICAL:
        goals.append("Get 2-3 high-damage attack cards")
    if ctx.status("defense") == CategoryStatus.CRITICAL:
        goals.append("Add 3-4 block cards immediately")
    if (ctx.status("scaling") in (CategoryStatus.WEAK, CategoryStatus.CRITICAL)
            and ctx.state.floors_until_boss > PREPARATION_TIME_FLOORS):
        goals.append("Add scaling cards for boss fights")

    basics = ctx.composition.basic_count
    if basics >= BASIC_TRANSFORM_COUNT:
        goals.append(f"Remove {min(3, basics - 4)} Strikes/Defends")
    if ctx.state.floor >= RELIC_GOAL_FLOOR and len(goals) < 3:
        goals.append("Take 1-2 elites for relics")
    if not goals:
        goals.append("Deck is solid; optimize the path for efficiency")
    return goals[:MAX_GOALS]


def path_warnings(ctx: PathContext) -> List[str]:
    warnings = []
    floors_left = ctx.state.floors_until_boss
    if ctx.hp_ratio < HP_LOW and floors_left <= PREPARATION_TIME_FLOORS:
        warnings.append("Low HP with the boss approaching; prioritize rest sites")
    if ctx.score < ELITE_MIN_HEALTH and floors_left <= URGENT_FLOORS:
        warnings.append("Weak deck approaching the boss; you may not be ready")
    if ctx.status("damage") == CategoryStatus.CRITICAL:
        warnings.append("Damage is critically low; you will struggle in all fights")
    if ctx.status("defense") == CategoryStatus.CRITICAL:
        warnings.append("Defense is critically low; you are taking excessive damage")
    return warnings


def generate_path_strategy(
    state: RunState,
    data: ReferenceData,
    composition: Optional[DeckComposition] = None,
    health: Optional[DeckHealthReport] = None,
) -> PathStrategy:
    """Recommend a priority and risk for every map node type."""
    if composition is None:
        composition = analyze_deck(state.deck, data)
    if health is None:
        health = analyze_deck_health(state, data, composition)
    ctx = PathContext(state=state, composition=composition, health=health)

    recommendations = tuple(rule(ctx) for rule in NODE_RULES)
    logger.debug("Path strategy for floor %d: %s", state.floor,
                 ", ".join(f"{r.node.value}={r.priority.value}" for r in recommendations))
    return PathStrategy(
        floor=state.floor,
        act=state.act,
        floors_until_boss=state.floors_until_boss,
        recommendations=recommendations,
        general_strategy=general_strategy(ctx),
        goals=tuple(path_goals(ctx)),
        warnings=tuple(path_warnings(ctx)),
    )
