"""
Relic Reward Handler - scores relics from chests, elites, shops and bosses.

Two evaluators share one vocabulary:

- evaluate_relic(): mirrors the card evaluator. Base is the relic's numeric
  tier rating (or its letter grade converted 5/4/3/2/1), adjusted for
  synergy / anti-synergy and by an optional per-relic rule.
- evaluate_boss_relic(): boss relics carry large trade-offs, so each maps
  to a dedicated rule that returns a bucket directly. Unmapped boss relics
  fall back to a neutral "situational" verdict.

Rules register with decorators, the same way card effects do:

    @boss_relic_rule("sozu")
    def sozu(ctx: RelicContext) -> RuleVerdict:
        return RuleVerdict(RelicPriority.GOOD_TAKE, "+1 energy beats potions")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..config import (
    ANTI_SYNERGY_PENALTY,
    ANTI_SYNERGY_PENALTY_CAP,
    GRADE_RATINGS,
    HP_HEALTHY,
    NEUTRAL_RATING,
    OFF_CLASS_PENALTY,
    RATING_FOR_BUCKET,
    RATING_MAX,
    RATING_MIN,
)
from ..content.cards import Character
from ..content.catalog import ReferenceData
from ..content.relics import Relic
from ..recommendations import (
    RelicPriority,
    clamp,
    rank_key,
    relic_priority_for_rating,
)
from ..calc.composition import DeckComposition, DeckEntry, analyze_deck
from ..state.run import RunState
from .card_reward import synergy_bonus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelicEvaluation:
    """Relic advice for one candidate."""
    relic_id: str
    name: str
    rating: float
    priority: RelicPriority
    reason: str
    synergies: Tuple[str, ...] = ()
    anti_synergies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RelicContext:
    """What a relic rule may look at."""
    relic: Relic
    composition: DeckComposition
    relics: Tuple[str, ...]
    character: Optional[Character] = None
    state: Optional[RunState] = None


@dataclass(frozen=True)
class RuleAdjustment:
    """Non-boss rule output: a rating delta with an explanation."""
    delta: float
    note: str


@dataclass(frozen=True)
class RuleVerdict:
    """Boss rule output: a bucket with its reason."""
    priority: RelicPriority
    reason: str


# ============================================================================
# RULE REGISTRIES
# ============================================================================

RelicRule = Callable[[RelicContext], Optional[RuleAdjustment]]
BossRelicRule = Callable[[RelicContext], RuleVerdict]

RELIC_RULES: Dict[str, RelicRule] = {}
BOSS_RELIC_RULES: Dict[str, BossRelicRule] = {}

DEFAULT_BOSS_REASON = "Boss relic with a unique effect; weigh its trade-off against your deck"


def relic_rule(*relic_ids: str):
    """Register a rating adjustment for one or more relics."""
    def decorator(func: RelicRule) -> RelicRule:
        for relic_id in relic_ids:
            RELIC_RULES[relic_id] = func
        return func
    return decorator


def boss_relic_rule(*relic_ids: str):
    """Register the verdict rule for one or more boss relics."""
    def decorator(func: BossRelicRule) -> BossRelicRule:
        for relic_id in relic_ids:
            BOSS_RELIC_RULES[relic_id] = func
        return func
    return decorator


def default_boss_rule(ctx: RelicContext) -> RuleVerdict:
    return RuleVerdict(RelicPriority.SITUATIONAL, DEFAULT_BOSS_REASON)


def get_boss_relic_rule(relic_id: str) -> BossRelicRule:
    rule = BOSS_RELIC_RULES.get(relic_id)
    if rule is None:
        logger.debug("No boss relic rule for %s; using default", relic_id)
        return default_boss_rule
    return rule


# ============================================================================
# RELIC RULES
# ============================================================================

@relic_rule("pen_nib")
def _pen_nib(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if ctx.composition.attack_count >= 8:
        return RuleAdjustment(1.0, f"{ctx.composition.attack_count} attacks in deck")
    return None


@relic_rule("ornamental_fan")
def _ornamental_fan(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if ctx.composition.attack_count >= 10:
        return RuleAdjustment(1.0, "Block generation for an attack-heavy deck")
    return None


@relic_rule("kunai", "shuriken", "ninja_scroll", "letter_opener")
def _card_spam(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if ctx.character == Character.SILENT or ctx.composition.zero_cost_count >= 4:
        return RuleAdjustment(1.0, "Works well with card spam strategies")
    return None


@relic_rule("bird_faced_urn")
def _bird_faced_urn(ctx: RelicContext) -> Optional[RuleAdjustment]:
    powers = ctx.composition.power_count
    if powers >= 3:
        return RuleAdjustment(1.0, f"{powers} powers in deck")
    return RuleAdjustment(-1.0, "Requires powers to trigger")


@relic_rule("dead_branch", "charons_ashes")
def _exhaust_payoff(ctx: RelicContext) -> Optional[RuleAdjustment]:
    exhaust = ctx.composition.exhaust_count
    if exhaust >= 3:
        return RuleAdjustment(2.0, f"{exhaust} exhaust cards in deck")
    if exhaust >= 1:
        return RuleAdjustment(1.0, "Some exhaust synergy")
    return None


@relic_rule("unceasing_top")
def _unceasing_top(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if ctx.composition.average_cost and ctx.composition.average_cost <= 1.0:
        return RuleAdjustment(1.0, "Cheap deck empties its hand quickly")
    return None


@relic_rule("frozen_egg", "molten_egg", "toxic_egg")
def _upgrade_egg(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if ctx.state is not None and ctx.state.act >= 3:
        return RuleAdjustment(-1.0, "Few card rewards left this late")
    return None


@relic_rule("blue_candle", "medical_kit")
def _dead_card_relic(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if ctx.composition.curse_count >= 3 or ctx.composition.status_count >= 3:
        return RuleAdjustment(1.0, "Helps mitigate curses and statuses")
    return None


@relic_rule("potion_belt")
def _potion_belt(ctx: RelicContext) -> Optional[RuleAdjustment]:
    if "sozu" in ctx.relics:
        return RuleAdjustment(-2.0, "Sozu blocks potions")
    return None


# ============================================================================
# BOSS RELIC RULES
# ============================================================================

@boss_relic_rule("snecko_eye")
def _snecko_eye(ctx: RelicContext) -> RuleVerdict:
    avg = ctx.composition.average_cost
    if avg >= 1.5:
        return RuleVerdict(
            RelicPriority.MUST_TAKE,
            f"High average cost ({avg:.1f}); Snecko Eye makes expensive cards playable and draws 2 more",
        )
    if avg >= 1.2:
        return RuleVerdict(
            RelicPriority.GOOD_TAKE,
            f"Average cost {avg:.1f}; two extra draws outweigh randomized costs",
        )
    return RuleVerdict(
        RelicPriority.SITUATIONAL,
        f"Low average cost ({avg:.1f}); randomized costs make cheap cards worse",
    )


@boss_relic_rule("runic_pyramid")
def _runic_pyramid(ctx: RelicContext) -> RuleVerdict:
    draw = ctx.composition.draw_count
    statuses = ctx.composition.status_count
    if draw >= 3 and statuses == 0:
        return RuleVerdict(
            RelicPriority.MUST_TAKE,
            f"{draw} draw cards and no statuses; keeping your hand is huge",
        )
    if statuses >= 3:
        return RuleVerdict(
            RelicPriority.SKIP, f"{statuses} status cards would clog a retained hand",
        )
    return RuleVerdict(
        RelicPriority.GOOD_TAKE, "Retaining your hand is strong; watch for statuses",
    )


@boss_relic_rule("velvet_choker")
def _velvet_choker(ctx: RelicContext) -> RuleVerdict:
    ratio = ctx.composition.low_cost_ratio
    avg = ctx.composition.average_cost
    if ratio > 0.6:
        return RuleVerdict(
            RelicPriority.SKIP,
            f"{round(ratio * 100)}% of the deck costs 1 or less; the 6-card limit will bite",
        )
    if avg >= 1.5:
        return RuleVerdict(
            RelicPriority.GOOD_TAKE,
            f"High average cost ({avg:.1f}); you rarely play 6 cards a turn",
        )
    return RuleVerdict(
        RelicPriority.SITUATIONAL, f"Average cost {avg:.1f}; energy is great but the limit can hurt",
    )


@boss_relic_rule("runic_dome")
def _runic_dome(ctx: RelicContext) -> RuleVerdict:
    return RuleVerdict(
        RelicPriority.SITUATIONAL,
        "+1 energy, but playing blind is risky unless you know the enemy patterns",
    )


@boss_relic_rule("philosophers_stone")
def _philosophers_stone(ctx: RelicContext) -> RuleVerdict:
    blocks = ctx.composition.block_count
    if ctx.composition.block_ratio >= 0.3:
        return RuleVerdict(
            RelicPriority.GOOD_TAKE,
            f"{blocks} block cards can absorb +1 enemy Strength",
        )
    return RuleVerdict(
        RelicPriority.SITUATIONAL, f"Only {blocks} block cards; +1 enemy Strength hurts",
    )


@boss_relic_rule("ectoplasm")
def _ectoplasm(ctx: RelicContext) -> RuleVerdict:
    act = ctx.state.act if ctx.state is not None else 1
    if act >= 2:
        return RuleVerdict(
            RelicPriority.GOOD_TAKE, "Fewer shops left; +1 energy for the rest of the run",
        )
    return RuleVerdict(
        RelicPriority.SITUATIONAL, "No gold means no shops or removals for two acts",
    )


@boss_relic_rule("sozu")
def _sozu(ctx: RelicContext) -> RuleVerdict:
    return RuleVerdict(RelicPriority.GOOD_TAKE, "+1 energy is worth losing potions")


@boss_relic_rule("fusion_hammer")
def _fusion_hammer(ctx: RelicContext) -> RuleVerdict:
    ratio = ctx.composition.upgraded_ratio
    if ratio >= 0.5:
        return RuleVerdict(
            RelicPriority.GOOD_TAKE,
            f"{round(ratio * 100)}% of the deck is upgraded; you can give up smithing",
        )
    return RuleVerdict(
        RelicPriority.SITUATIONAL,
        f"Only {round(ratio * 100)}% upgraded; losing smithing hurts",
    )


@boss_relic_rule("cursed_key")
def _cursed_key(ctx: RelicContext) -> RuleVerdict:
    return RuleVerdict(
        RelicPriority.GOOD_TAKE, "+1 energy; chest curses can be removed at shops",
    )


@boss_relic_rule("coffee_dripper")
def _coffee_dripper(ctx: RelicContext) -> RuleVerdict:
    if ctx.state is not None and ctx.state.hp_ratio >= HP_HEALTHY:
        return RuleVerdict(
            RelicPriority.GOOD_TAKE, "Healthy enough to give up resting for +1 energy",
        )
    return RuleVerdict(
        RelicPriority.SITUATIONAL, "Low HP; losing rest sites is dangerous",
    )


@boss_relic_rule("mark_of_pain")
def _mark_of_pain(ctx: RelicContext) -> RuleVerdict:
    if ctx.composition.has_flag("exhaust") or ctx.composition.exhaust_count >= 3:
        return RuleVerdict(RelicPriority.MUST_TAKE, "Exhaust cards clear the Wounds; free energy")
    return RuleVerdict(RelicPriority.GOOD_TAKE, "+1 energy; two Wounds are a mild cost")


@boss_relic_rule("busted_crown")
def _busted_crown(ctx: RelicContext) -> RuleVerdict:
    if ctx.composition.size >= 20:
        return RuleVerdict(RelicPriority.GOOD_TAKE, "Deck is built; fewer card choices matter less")
    return RuleVerdict(RelicPriority.SITUATIONAL, "Deck still needs good card rewards")


@boss_relic_rule("black_star")
def _black_star(ctx: RelicContext) -> RuleVerdict:
    if ctx.state is not None and ctx.state.hp_ratio < HP_HEALTHY:
        return RuleVerdict(RelicPriority.SITUATIONAL, "Extra elite relics only pay if you can fight elites")
    return RuleVerdict(RelicPriority.GOOD_TAKE, "Every elite drops two relics")


@boss_relic_rule("runic_cube")
def _runic_cube(ctx: RelicContext) -> RuleVerdict:
    if ctx.composition.tag_count("self_damage") >= 2:
        return RuleVerdict(RelicPriority.MUST_TAKE, "Self-damage cards turn into card draw")
    return RuleVerdict(RelicPriority.GOOD_TAKE, "Draw whenever you lose HP")


@boss_relic_rule("black_blood", "ring_of_the_serpent", "frozen_core", "holy_water")
def _starter_upgrade(ctx: RelicContext) -> RuleVerdict:
    return RuleVerdict(
        RelicPriority.GOOD_TAKE, "Safe upgrade of your starter relic with no drawback",
    )


@boss_relic_rule("violet_lotus")
def _violet_lotus(ctx: RelicContext) -> RuleVerdict:
    if ctx.composition.has_flag("stance_dance"):
        return RuleVerdict(RelicPriority.MUST_TAKE, "Every Calm exit pays an extra energy")
    return RuleVerdict(RelicPriority.GOOD_TAKE, "Extra energy when leaving Calm")


@boss_relic_rule("pandoras_box")
def _pandoras_box(ctx: RelicContext) -> RuleVerdict:
    basics = ctx.composition.basic_count
    if basics >= 6:
        return RuleVerdict(RelicPriority.GOOD_TAKE, f"Transforms {basics} Strikes and Defends")
    return RuleVerdict(RelicPriority.SITUATIONAL, f"Only {basics} basics left to transform")


@boss_relic_rule("astrolabe")
def _astrolabe(ctx: RelicContext) -> RuleVerdict:
    if ctx.composition.basic_count >= 5:
        return RuleVerdict(RelicPriority.GOOD_TAKE, "Three weak cards become upgraded random cards")
    return RuleVerdict(RelicPriority.SITUATIONAL, "Few weak cards left to transform")


@boss_relic_rule("empty_cage")
def _empty_cage(ctx: RelicContext) -> RuleVerdict:
    if ctx.composition.curse_count or ctx.composition.basic_count >= 4:
        return RuleVerdict(RelicPriority.GOOD_TAKE, "Two free removals thin the deck")
    return RuleVerdict(RelicPriority.SITUATIONAL, "Little left worth removing")


@boss_relic_rule("calling_bell")
def _calling_bell(ctx: RelicContext) -> RuleVerdict:
    return RuleVerdict(RelicPriority.GOOD_TAKE, "Three relics for one curse")


# ============================================================================
# EVALUATORS
# ============================================================================

def base_relic_rating(relic: Relic) -> float:
    if relic.tier_rating is not None:
        return relic.tier_rating
    return GRADE_RATINGS.get(relic.grade.value, NEUTRAL_RATING)


def _relic_matches(ids: Sequence[str], composition: DeckComposition,
                   relics: Sequence[str]) -> List[str]:
    return [
        other_id for other_id in dict.fromkeys(ids)
        if other_id in composition.card_ids or other_id in relics
    ]


def _bucket_reason(priority: RelicPriority, rating: float, relic: Relic) -> str:
    summary = relic.description.split(".")[0]
    if priority == RelicPriority.MUST_TAKE:
        return f"Extremely powerful relic ({rating:.1f}/5). {summary}."
    if priority == RelicPriority.GOOD_TAKE:
        return f"Solid choice ({rating:.1f}/5). {summary}."
    if priority == RelicPriority.SITUATIONAL:
        return f"Decent but situational ({rating:.1f}/5). {summary}."
    return f"Not recommended for your current deck ({rating:.1f}/5)."


def _neutral(relic_id: str, reason: str) -> RelicEvaluation:
    return RelicEvaluation(
        relic_id=relic_id,
        name=relic_id,
        rating=NEUTRAL_RATING,
        priority=relic_priority_for_rating(NEUTRAL_RATING),
        reason=reason,
    )


def evaluate_relic(
    relic_id: str,
    deck: Iterable[DeckEntry],
    data: ReferenceData,
    relics: Sequence[str] = (),
    character: Optional[Character] = None,
    state: Optional[RunState] = None,
    composition: Optional[DeckComposition] = None,
) -> RelicEvaluation:
    """Evaluate a candidate relic against the deck and owned relics."""
    relic = data.relic(relic_id)
    if relic is None:
        logger.debug("Unknown relic %s; neutral rating", relic_id)
        return _neutral(relic_id, "Unknown relic; no rating data")

    owned = tuple(relics)
    if relic_id in owned:
        return RelicEvaluation(
            relic_id=relic.id, name=relic.name, rating=RATING_FOR_BUCKET[RelicPriority.SKIP.rank],
            priority=RelicPriority.SKIP, reason="You already have this relic",
        )

    if composition is None:
        composition = analyze_deck(deck, data)

    rating = base_relic_rating(relic)
    synergy_notes: List[str] = []
    anti_notes: List[str] = []

    synergies = _relic_matches(relic.synergies, composition, owned)
    if synergies:
        rating += synergy_bonus(len(synergies))
        synergy_notes.append(f"Synergizes with {', '.join(synergies)}")
    anti_synergies = _relic_matches(relic.anti_synergies, composition, owned)
    if anti_synergies:
        rating -= min(len(anti_synergies) * ANTI_SYNERGY_PENALTY, ANTI_SYNERGY_PENALTY_CAP)
        anti_notes.append(f"Conflicts with {', '.join(anti_synergies)}")

    rule = RELIC_RULES.get(relic.id)
    if rule is not None:
        adjustment = rule(RelicContext(relic, composition, owned, character, state))
        if adjustment is not None:
            rating += adjustment.delta
            (synergy_notes if adjustment.delta >= 0 else anti_notes).append(adjustment.note)

    if character is not None and relic.character is not None and relic.character != character:
        rating -= OFF_CLASS_PENALTY
        anti_notes.append(f"Only works for {relic.character.value.title()}")

    rating = round(clamp(rating, RATING_MIN, RATING_MAX), 2)
    priority = relic_priority_for_rating(rating)
    if synergy_notes:
        reason = f"{synergy_notes[0]}. {relic.description.split('.')[0]}."
    elif anti_notes:
        reason = f"{anti_notes[0]}."
    else:
        reason = _bucket_reason(priority, rating, relic)

    return RelicEvaluation(
        relic_id=relic.id,
        name=relic.name,
        rating=rating,
        priority=priority,
        reason=reason,
        synergies=tuple(synergy_notes),
        anti_synergies=tuple(anti_notes),
    )


def evaluate_boss_relic(
    relic_id: str,
    state: RunState,
    data: ReferenceData,
    composition: Optional[DeckComposition] = None,
) -> RelicEvaluation:
    """
    Evaluate a boss relic through its rule.

    Unknown relics and relics without a rule get the situational default.
    """
    relic = data.relic(relic_id)
    if relic is None:
        logger.debug("Unknown boss relic %s; default verdict", relic_id)
        return _neutral(relic_id, DEFAULT_BOSS_REASON)

    if composition is None:
        composition = analyze_deck(state.deck, data)

    if relic.id in state.relics:
        verdict = RuleVerdict(RelicPriority.SKIP, "You already have this relic")
    elif relic.character is not None and relic.character != state.character:
        verdict = RuleVerdict(
            RelicPriority.SKIP, f"Only works for {relic.character.value.title()}",
        )
    else:
        rule = get_boss_relic_rule(relic.id)
        verdict = rule(RelicContext(relic, composition, state.relics, state.character, state))

    return RelicEvaluation(
        relic_id=relic.id,
        name=relic.name,
        rating=RATING_FOR_BUCKET[verdict.priority.rank],
        priority=verdict.priority,
        reason=verdict.reason,
    )


def rank_boss_relics(
    relic_ids: Iterable[str],
    state: RunState,
    data: ReferenceData,
) -> List[RelicEvaluation]:
    """Evaluate a boss chest, best first."""
    composition = analyze_deck(state.deck, data)
    evaluations = [
        evaluate_boss_relic(relic_id, state, data, composition=composition)
        for relic_id in relic_ids
    ]
    return sorted(evaluations, key=lambda e: rank_key(e.priority, e.rating, e.name))
