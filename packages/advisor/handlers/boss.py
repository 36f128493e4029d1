"""
Boss Preparation Handler - is the deck ready for the act boss?

The upcoming boss comes from the run snapshot when the map has revealed it;
otherwise every boss the act can roll is prepared for at once. Each boss
maps to a rule that returns a requirements checklist; every act adds a few
general requirements on top.

Readiness score (0-100):
    sum(weight x 100 for met requirements) + HP score + time bonus
    ---------------------------------------------------------------
              sum(weights) + HP weight

with weights critical=3, important=2, recommended=1, the HP score banded
100/70/40/20, and a +10 time bonus while more than 5 floors remain.

The verdict then follows the same HP escalation as a single fight: HP at or
below 30% forces DANGER and below 50% drops it one step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..calc.composition import DeckComposition, analyze_deck
from ..config import (
    BOSS_HP_FLOOR_SCORE,
    BOSS_HP_SCORES,
    BOSS_HP_WEIGHT,
    FRONTLOAD_DAMAGE_PER_CARD,
    HP_CRITICAL,
    HP_HALF,
    IMPORTANCE_WEIGHTS,
    MAX_PRIORITIES,
    PREPARATION_TIME_BONUS,
    PREPARATION_TIME_FLOORS,
    READINESS_ASCENSION_PENALTY,
    SCORE_MAX,
    SCORE_MIN,
    URGENT_FLOORS,
)
from ..content.cards import FRONTLOAD, SCALING, SHIV, Card, CardType
from ..content.catalog import ReferenceData
from ..content.enemies import Monster
from ..recommendations import Importance, Readiness, clamp
from ..state.run import RunState
from .combat import deck_capability, escalate_for_hp, readiness_for_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BossRequirement:
    name: str
    met: bool
    importance: Importance
    description: str


@dataclass(frozen=True)
class BossPreparation:
    """Boss readiness report with a requirements checklist."""
    boss_id: Optional[str]
    boss_name: str
    act: int
    floors_until_boss: int
    readiness: Readiness
    score: float
    requirements: Tuple[BossRequirement, ...]
    top_priorities: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    strategy: str = ""

    @property
    def unmet(self) -> Tuple[BossRequirement, ...]:
        return tuple(r for r in self.requirements if not r.met)


@dataclass(frozen=True)
class BossContext:
    """What requirement rules look at."""
    composition: DeckComposition
    cards: Tuple[Card, ...]
    state: RunState

    # ------------------------------------------------------------------
    # Deck facts
    # ------------------------------------------------------------------

    def has_aoe(self, count: int) -> bool:
        return self.composition.aoe_count >= count

    def frontload_damage(self) -> int:
        frontload = sum(
            1 for c in self.cards
            if (c.card_type == CardType.ATTACK and 0 <= c.cost <= 2 and c.tier_rating >= 4)
            or c.has_tag(FRONTLOAD)
        )
        return frontload * FRONTLOAD_DAMAGE_PER_CARD

    def has_frontload(self, damage: int) -> bool:
        return self.frontload_damage() >= damage

    def has_multi_hit(self) -> bool:
        return self.composition.multi_hit_count + self.composition.tag_count(SHIV) >= 2

    def has_weak_sources(self) -> bool:
        return self.composition.weak_count >= 2

    def has_big_damage(self) -> bool:
        big = sum(
            1 for c in self.cards
            if c.card_type == CardType.ATTACK and c.tier_rating >= 4
            and (c.cost >= 2 or c.has_tag(SCALING))
        )
        return big >= 2

    def multi_hit_total(self) -> int:
        return self.composition.multi_hit_count + self.composition.tag_count(SHIV)

    def has_purge(self) -> bool:
        return self.composition.exhaust_count > 0


def _req(name: str, met: bool, importance: Importance, description: str) -> BossRequirement:
    return BossRequirement(name=name, met=bool(met), importance=importance, description=description)


CRITICAL = Importance.CRITICAL
IMPORTANT = Importance.IMPORTANT
RECOMMENDED = Importance.RECOMMENDED


# ============================================================================
# PER-BOSS RULES
# ============================================================================

BossRule = Callable[[BossContext], List[BossRequirement]]

BOSS_RULES: Dict[str, BossRule] = {}


def boss_rule(boss_id: str):
    """Register the requirements checklist for one boss."""
    def decorator(func: BossRule) -> BossRule:
        BOSS_RULES[boss_id] = func
        return func
    return decorator


@boss_rule("slime_boss")
def _slime_boss(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("AoE Damage (Slime Boss)", ctx.has_aoe(2), CRITICAL,
             "Slime Boss splits into smaller slimes; you need area damage."),
    ]


@boss_rule("the_guardian")
def _guardian(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Frontload Damage (Guardian)", ctx.has_frontload(50), CRITICAL,
             "Guardian shifts to Defensive Mode after enough damage; hit hard early."),
        _req("Defense Mode Answer (Guardian)",
             ctx.has_multi_hit() or ctx.composition.scaling_count >= 2, IMPORTANT,
             "Guardian gains 20 Block in Defensive Mode. Need scaling or multi-hit."),
    ]


@boss_rule("hexaghost")
def _hexaghost(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Scaling Damage (Hexaghost)", ctx.composition.scaling_count >= 3, CRITICAL,
             "Hexaghost has 250 HP. Without scaling you cannot win this fight."),
        _req("Multi-Target (Hexaghost)", ctx.has_aoe(1), IMPORTANT,
             "AoE helps clear the Burns Hexaghost adds."),
    ]


@boss_rule("bronze_automaton")
def _automaton(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Multi-Target Damage (Automaton)", ctx.has_aoe(3), CRITICAL,
             "Automaton summons 2 orbs with 30-50 HP each."),
        _req("High Burst Damage (Automaton)", ctx.has_frontload(70), CRITICAL,
             "Hyper Beam hits for 45; kill it fast or block big."),
    ]


@boss_rule("the_champ")
def _champ(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Weak Application (Champ)", ctx.has_weak_sources(), CRITICAL,
             "Champ hits for 16-18 every turn. Weak is essential."),
        _req("Execute Counter (Champ)",
             ctx.has_big_damage() or ctx.composition.scaling_count >= 3, IMPORTANT,
             "Champ executes below half HP. Need big damage or strong scaling."),
        _req("Consistent Block (Champ)", ctx.composition.block_count >= 8, CRITICAL,
             f"{ctx.composition.block_count} block cards. Champ attacks every turn; need 8+."),
    ]


@boss_rule("the_collector")
def _collector(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Multi-Target Damage (Collector)", ctx.has_aoe(2), CRITICAL,
             "Collector summons minions constantly."),
        _req("Scaling Solution (Collector)", ctx.composition.scaling_count >= 2, CRITICAL,
             "Collector is a marathon fight; without scaling you run out of damage."),
    ]


@boss_rule("awakened_one")
def _awakened_one(ctx: BossContext) -> List[BossRequirement]:
    powers = ctx.composition.power_count
    return [
        _req("Limit Powers (Awakened One)", powers <= 3, CRITICAL,
             f"You have {powers} powers. Awakened One punishes powers; keep to 3 or fewer."),
        _req("Strong Frontload (Awakened One)", ctx.has_frontload(80), IMPORTANT,
             "Phase two gains Strength every turn; kill phase one fast."),
    ]


@boss_rule("time_eater")
def _time_eater(ctx: BossContext) -> List[BossRequirement]:
    zero_cost = ctx.composition.zero_cost_count
    return [
        _req("Avoid 0-Cost Spam (Time Eater)", zero_cost <= 5, CRITICAL,
             f"You have {zero_cost} zero-cost cards. Time Eater ends your turn every 12 cards."),
        _req("High Impact Cards (Time Eater)",
             ctx.composition.average_cost >= 1.2 and ctx.has_big_damage(), CRITICAL,
             "Time Eater wants fewer, bigger plays."),
    ]


@boss_rule("donu_and_deca")
def _donu_and_deca(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Multi-Target Damage (Donu & Deca)", ctx.has_aoe(4), CRITICAL,
             "Both bosses must be damaged; strong AoE splits the work."),
        _req("Strong Defense (Donu & Deca)",
             ctx.composition.block_count >= 10 or ctx.has_weak_sources(), CRITICAL,
             "Both bosses attack every turn. Need 10+ block cards or Weak sources."),
    ]


@boss_rule("corrupt_heart")
def _heart(ctx: BossContext) -> List[BossRequirement]:
    return [
        _req("Massive Scaling", ctx.composition.scaling_count >= 4, CRITICAL,
             "The Heart has 750+ HP. Without 4+ scaling cards you cannot deal enough damage."),
        _req("Multi-Hit Management", ctx.multi_hit_total() <= 8, CRITICAL,
             "Beat of Death punishes card spam. Avoid excessive shiv/claw decks."),
        _req("Status Card Handling", ctx.composition.draw_count >= 3 or ctx.has_purge(), CRITICAL,
             "The Heart adds many status cards. Need draw or exhaust effects."),
    ]


def requirements_from_monster(monster: Monster, ctx: BossContext) -> List[BossRequirement]:
    """Checklist derived from a monster's declared deck requirements."""
    capability = deck_capability(ctx.composition)
    needs = (
        ("damage", monster.requirements.damage),
        ("block", monster.requirements.block),
        ("scaling", monster.requirements.scaling),
    )
    return [
        _req(f"{axis.title()} ({monster.name})", capability[axis] >= level.value,
             CRITICAL if level.value >= 3 else IMPORTANT,
             f"{monster.name} expects {level.name.lower()} {axis}.")
        for axis, level in needs
    ]


# ============================================================================
# GENERAL ACT REQUIREMENTS
# ============================================================================

def _act_requirements(act: int, ctx: BossContext) -> List[BossRequirement]:
    comp = ctx.composition
    if act == 1:
        return [
            _req("Basic Defense", comp.block_count >= 5, CRITICAL,
                 f"You have {comp.block_count} block cards. Need 5+ for the Act 1 boss."),
            _req("Deck Consistency", comp.size <= 25 or comp.draw_count >= 2, IMPORTANT,
                 f"Deck is {comp.size} cards. Above 25 you need draw for consistency."),
        ]
    if act == 2:
        return [
            _req("Scaling Online", comp.scaling_count >= 2, IMPORTANT,
                 "Act 2 bosses outlast decks without scaling."),
            _req("Lean Basics", comp.basic_count <= 6, RECOMMENDED,
                 f"{comp.basic_count} Strikes/Defends left; remove some at shops."),
        ]
    if act == 3:
        return [
            _req("Deck Maturity", comp.scaling_count >= 3 and comp.block_count >= 8, CRITICAL,
                 "Act 3 bosses need a mature deck with scaling AND defense."),
        ]
    return [
        _req("Max HP Check", ctx.state.max_hp >= 70, IMPORTANT,
             "The Heart fight is long. Have 70+ max HP or excellent defense."),
    ]


ACT_STRATEGY: Dict[int, str] = {
    1: "Be ready for any of: Slime Boss (AoE), Guardian (frontload), Hexaghost (scaling).",
    2: "Prep for: Automaton (AoE + burst), Champ (Weak + block), Collector (AoE + scaling).",
    3: "Could face: Awakened One (limit powers), Time Eater (avoid 0-cost spam), "
       "Donu & Deca (AoE damage).",
    4: "Final boss: huge HP, punishes card spam, adds status cards. Need scaling, draw and defense.",
}


# ============================================================================
# SCORING
# ============================================================================

def _hp_score(hp_ratio: float) -> float:
    for lower_bound, score in BOSS_HP_SCORES:
        if hp_ratio > lower_bound:
            return score
    return BOSS_HP_FLOOR_SCORE


def readiness_score(requirements: Sequence[BossRequirement], floors_left: int,
                    hp_ratio: float, ascension: int = 0) -> float:
    total = 0.0
    weight_sum = 0
    for requirement in requirements:
        weight = IMPORTANCE_WEIGHTS[requirement.importance.value]
        if requirement.met:
            total += weight * 100
        weight_sum += weight
    total += _hp_score(hp_ratio) * BOSS_HP_WEIGHT
    weight_sum += BOSS_HP_WEIGHT
    if floors_left > PREPARATION_TIME_FLOORS:
        total += PREPARATION_TIME_BONUS
    score = total / weight_sum - ascension * READINESS_ASCENSION_PENALTY
    return round(clamp(score, SCORE_MIN, SCORE_MAX), 1)


def _top_priorities(requirements: Sequence[BossRequirement], floors_left: int) -> List[str]:
    unmet = [r for r in requirements if not r.met and r.importance != Importance.RECOMMENDED]
    # stable: critical first, declaration order within a tier
    unmet.sort(key=lambda r: r.importance.rank)
    priorities = []
    if floors_left <= URGENT_FLOORS and unmet:
        priorities.append(f"URGENT: {floors_left} floors left and critical gaps remain")
    priorities.extend(r.name for r in unmet[:MAX_PRIORITIES])
    return priorities


def _warnings(requirements: Sequence[BossRequirement], readiness: Readiness,
              floors_left: int, state: RunState) -> List[str]:
    critical = sum(1 for r in requirements if not r.met and r.importance == Importance.CRITICAL)
    warnings = []
    if state.hp_ratio <= HP_CRITICAL:
        warnings.append(f"HP is critical ({state.current_hp}/{state.max_hp}): rest before the boss")
    elif state.hp_ratio < HP_HALF:
        warnings.append(f"HP is low ({state.current_hp}/{state.max_hp}): heal before the boss")
    if readiness == Readiness.DANGER:
        if critical:
            warnings.append(f"DECK NOT READY: {critical} critical requirements unmet")
        warnings.append("Consider safer pathing to buy time before the boss")
    elif readiness == Readiness.CAUTION and critical:
        warnings.append(f"Winnable but risky: {critical} critical gaps in your deck")
    if floors_left <= PREPARATION_TIME_FLOORS and critical:
        warnings.append(f"Only {floors_left} floors to fix critical issues")
    return warnings


def analyze_boss_preparation(
    state: RunState,
    data: ReferenceData,
    composition: Optional[DeckComposition] = None,
) -> BossPreparation:
    """Requirements checklist and readiness verdict for the upcoming boss."""
    if composition is None:
        composition = analyze_deck(state.deck, data)
    cards = tuple(card for card in (data.card(c.card_id) for c in state.deck) if card is not None)
    ctx = BossContext(composition=composition, cards=cards, state=state)
    act = state.act

    boss = data.monster(state.boss) if state.boss else None
    if state.boss and boss is None:
        logger.debug("Boss %s not in catalog; preparing for the whole act", state.boss)
    candidates = [boss] if boss is not None else [
        monster for monster in (data.monster(b) for b in data.bosses_for_act(act))
        if monster is not None
    ]

    requirements: List[BossRequirement] = []
    for monster in candidates:
        rule = BOSS_RULES.get(monster.id)
        if rule is None:
            logger.debug("No boss rule for %s; using its deck requirements", monster.id)
            requirements.extend(requirements_from_monster(monster, ctx))
        else:
            requirements.extend(rule(ctx))
    requirements.extend(_act_requirements(act, ctx))

    floors_left = state.floors_until_boss
    score = readiness_score(requirements, floors_left, state.hp_ratio, state.ascension)
    readiness = escalate_for_hp(readiness_for_score(score), state.hp_ratio)

    if boss is not None:
        boss_id, boss_name, strategy = boss.id, boss.name, boss.strategy or ACT_STRATEGY.get(act, "")
    else:
        boss_id = None
        boss_name = "The Heart" if act >= 4 else f"Act {act} Boss"
        strategy = ACT_STRATEGY.get(act, "Prepare your deck for the upcoming boss fight.")

    return BossPreparation(
        boss_id=boss_id,
        boss_name=boss_name,
        act=act,
        floors_until_boss=floors_left,
        readiness=readiness,
        score=score,
        requirements=tuple(requirements),
        top_priorities=tuple(_top_priorities(requirements, floors_left)),
        warnings=tuple(_warnings(requirements, readiness, floors_left, state)),
        strategy=strategy,
    )
