"""
Deck Health Analyzer - letter-grade report card for a deck.

Five categories, always reported in this order:
- damage: attack density, AoE, frontload, high-tier attacks
- defense: block count and quality, Weak sources, defensive relics
- consistency: deck size, draw, energy, curse pollution, cost curve
- scaling: scaling cards, powers, a focused archetype
- synergy: synergy density, card quality, leftover basics, dead cards

Each category starts at 50 and moves with fixed adjustments; the act and
ascension raise the bar. The overall score is a fixed weighted average
(see HEALTH_WEIGHTS) mapped to a grade, a status and a rough win-rate.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..config import (
    ASCENSION_BAR_PER_LEVEL,
    CATEGORY_BASE_SCORE,
    CRITICAL_CATEGORY_SCORE,
    HEALTH_WEIGHTS,
    LATE_GAME_FLOOR,
    SCORE_MAX,
    SCORE_MIN,
    TOP_RECOMMENDATION_COUNT,
    WIN_RATE_ACT2_BONUS,
    WIN_RATE_ACT3_BONUS,
    WIN_RATE_ASCENSION_PENALTY,
    WIN_RATE_MAX,
    WIN_RATE_MIN,
    WIN_RATE_SCORE_FACTOR,
)
from ..content.cards import BLOCK, SCALING, Card, CardType, Character
from ..content.catalog import ReferenceData
from ..recommendations import CategoryStatus, Grade, clamp, grade_for_score, status_for_score
from ..state.run import RunState
from .archetypes import detect_archetypes
from .composition import DeckComposition, analyze_deck

logger = logging.getLogger(__name__)

CATEGORY_ORDER = ("damage", "defense", "consistency", "scaling", "synergy")

DEFENSIVE_RELICS = (
    "ornamental_fan", "orichalcum", "thread_and_needle", "bronze_scales", "anchor",
    "torii", "tungsten_rod", "calipers",
)


@dataclass(frozen=True)
class HealthCategory:
    name: str
    score: float
    grade: Grade
    status: CategoryStatus
    issues: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DeckHealthReport:
    """Health advice: overall grade plus the per-category breakdown."""
    overall_score: float
    grade: Grade
    status: CategoryStatus
    categories: Tuple[HealthCategory, ...]
    critical_issues: Tuple[str, ...] = ()
    top_recommendations: Tuple[str, ...] = ()
    projected_win_rate: int = 0

    def category(self, name: str) -> HealthCategory:
        for category in self.categories:
            if category.name == name:
                return category
        raise KeyError(name)


@dataclass
class _Tally:
    """Mutable scratch pad for one category."""
    name: str
    score: float = CATEGORY_BASE_SCORE
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def adjust(self, delta: float, issue: Optional[str] = None,
               recommendation: Optional[str] = None) -> None:
        self.score += delta
        if issue:
            self.issues.append(issue)
        if recommendation:
            self.recommendations.append(recommendation)

    def finish(self) -> HealthCategory:
        score = round(clamp(self.score, SCORE_MIN, SCORE_MAX), 1)
        return HealthCategory(
            name=self.name,
            score=score,
            grade=grade_for_score(score),
            status=status_for_score(score),
            issues=tuple(self.issues),
            recommendations=tuple(self.recommendations),
        )


# ============================================================================
# CATEGORIES
# ============================================================================

def _damage(cards: Sequence[Card], comp: DeckComposition, act: int) -> _Tally:
    tally = _Tally("damage")
    size = comp.size

    if comp.attack_ratio < 0.25:
        tally.adjust(-20, f"Only {comp.attack_count}/{size} attacks; too few damage sources",
                     "Add 2-3 more attack cards to increase damage output")
    elif comp.attack_ratio < 0.35:
        tally.adjust(-10, f"{comp.attack_count} attacks is low; could use more damage")
    elif comp.attack_ratio > 0.5:
        tally.adjust(10)

    if comp.aoe_count == 0:
        tally.adjust(-25, "No AoE damage; multi-enemy fights will hurt",
                     "Add AoE damage (Whirlwind, Immolate, Electrodynamics, ...)")
    elif comp.aoe_count == 1:
        tally.adjust(-10, "Only 1 AoE card; risky against multi-enemy encounters")
    elif comp.aoe_count >= 3:
        tally.adjust(10)

    frontload = [
        c for c in cards
        if c.card_type == CardType.ATTACK and 0 <= c.cost <= 2
        and c.tier_rating >= 3 and not c.has_tag(SCALING)
    ]
    if len(frontload) < 3:
        tally.adjust(-15, "Weak frontload damage; you will take heavy damage early in fights",
                     "Add cards that deal good damage without setup")
    elif len(frontload) >= 5:
        tally.adjust(10)

    good_attacks = sum(1 for c in cards if c.card_type == CardType.ATTACK and c.tier_rating >= 4)
    if good_attacks >= 4:
        tally.adjust(15)
    elif good_attacks < 2:
        tally.adjust(-10, f"Only {good_attacks} high-tier attacks; damage quality is low",
                     "Prioritize tier 4-5 attacks in rewards")

    if act >= 2 and good_attacks < 3:
        tally.adjust(-10, "Act 2 needs more high-quality damage cards")
    if act >= 3 and good_attacks < 4:
        tally.adjust(-15, "Damage is below curve for the late game")
    return tally


def _defense(cards: Sequence[Card], comp: DeckComposition, relics: Sequence[str],
             character: Character, act: int) -> _Tally:
    tally = _Tally("defense")
    blocks = comp.block_count

    if blocks < 5:
        tally.adjust(-30, f"Only {blocks} block cards; you will take too much damage",
                     "Add 3-5 block cards")
    elif blocks < 7:
        tally.adjust(-15, f"{blocks} block cards is risky; need more defense",
                     "Add 2-3 more defensive cards")
    elif blocks >= 10:
        tally.adjust(15)

    good_block = sum(1 for c in cards if c.has_tag(BLOCK) and c.tier_rating >= 3)
    if good_block < 3:
        tally.adjust(-10, "Block cards are low quality (mostly Defends)",
                     "Replace Defends with better block cards")
    elif good_block >= 5:
        tally.adjust(10)

    if comp.weak_count == 0 and character != Character.DEFECT:
        tally.adjust(-20, "No Weak sources; you take full damage every fight",
                     "Add cards that apply Weak")
    elif comp.weak_count >= 2:
        tally.adjust(10)

    if any(relic_id in DEFENSIVE_RELICS for relic_id in relics):
        tally.adjust(5)

    if character == Character.IRONCLAD:
        tally.adjust(5)
    elif character == Character.SILENT and blocks < 8:
        tally.adjust(-10, "Silent has low HP; aim for 8+ block cards")

    if act >= 2 and blocks < 7:
        tally.adjust(-15, "Defense is insufficient for Act 2 enemies")
    if act >= 3 and blocks < 9:
        tally.adjust(-20, "Defense is critically weak for the late game")
    return tally


def _consistency(comp: DeckComposition, energy_sources: int, act: int) -> _Tally:
    tally = _Tally("consistency")
    size = comp.size

    if size <= 20:
        tally.adjust(15)
    elif size <= 25:
        tally.adjust(5)
    elif size > 35:
        tally.adjust(-20, f"Deck is {size} cards; extremely bloated",
                     "Remove weak cards (Strikes, Defends, curses)")
    elif size > 30:
        tally.adjust(-10, f"Deck is {size} cards; bloat reduces consistency",
                     "Remove weak cards (Strikes, Defends, curses)")

    if comp.draw_count == 0 and size > 20:
        tally.adjust(-25, "No draw cards; a large deck will be inconsistent",
                     "Add draw cards (Offering, Battle Trance, Acrobatics, ...)")
    elif comp.draw_count < 2 and size > 25:
        tally.adjust(-15, "Need more draw for this deck size", "Add 1-2 draw sources")
    elif comp.draw_count >= 3:
        tally.adjust(15)

    if energy_sources >= 2:
        tally.adjust(10)
    elif energy_sources == 0 and act >= 2:
        tally.adjust(-5, "No energy generation limits big turns")

    pollution = comp.dead_count
    if pollution >= 3:
        tally.adjust(-20, f"{pollution} curses/statuses pollute your deck",
                     "Remove curses as soon as possible (shops, events)")
    elif pollution >= 1:
        tally.adjust(-10, f"{pollution} curse/status in deck")

    if comp.average_cost > 1.8:
        tally.adjust(-10, f"High average cost ({comp.average_cost:.1f}); deck may be clunky")
    elif 0 < comp.average_cost < 1.0:
        tally.adjust(5)
    return tally


def _scaling(comp: DeckComposition, archetype_count: int, act: int) -> _Tally:
    tally = _Tally("scaling")
    scaling = comp.scaling_count

    if scaling == 0:
        tally.adjust(-40, "No scaling; long fights and bosses will outlast you",
                     "Add scaling cards (Demon Form, Footwork, Defragment, ...)")
    elif scaling < 2:
        tally.adjust(-20, "Only 1 scaling card; not enough for harder fights",
                     "Add 1-2 more scaling sources")
    elif scaling >= 4:
        tally.adjust(20)

    if comp.power_count == 0 and scaling < 3:
        tally.adjust(-15, "No powers and weak scaling; deck has a low ceiling")
    elif comp.power_count >= 3:
        tally.adjust(10)

    if act >= 2 and scaling < 2:
        tally.adjust(-20, "Act 2 bosses demand scaling")
    if act >= 3 and scaling < 3:
        tally.adjust(-30, "Insufficient scaling for late game bosses")

    if archetype_count >= 2:
        tally.adjust(10)
    elif archetype_count == 0 and comp.size > 20:
        tally.adjust(-10, "No clear archetype; scaling is unfocused",
                     "Commit to one archetype in card rewards")
    return tally


def _synergy(cards: Sequence[Card], comp: DeckComposition, floor: int, act: int) -> _Tally:
    tally = _Tally("synergy")
    size = comp.size

    synergy_links = sum(
        sum(1 for other in card.synergies if comp.has_card(other)) for card in cards
    )
    if synergy_links >= 15:
        tally.adjust(15)
    elif synergy_links >= 8:
        tally.adjust(5)
    elif synergy_links < 5 and size > 20:
        tally.adjust(-10, "Low synergy between cards; deck lacks coherence",
                     "Favor cards that synergize with your key cards")

    avg_tier = sum(c.tier_rating for c in cards) / len(cards) if cards else 0.0
    if avg_tier >= 3.5:
        tally.adjust(20)
    elif avg_tier >= 3.0:
        tally.adjust(10)
    elif avg_tier < 2.5:
        tally.adjust(-15, f"Low card quality (average tier {avg_tier:.1f}/5)",
                     "Remove low-tier cards and add high-tier ones")

    basics = comp.basic_count
    if act >= 2 and basics >= 8:
        tally.adjust(-20, f"{basics} Strikes/Defends in Act 2+; very inefficient",
                     "Remove Strikes and Defends at shops and events")
    elif act >= 2 and basics >= 6:
        tally.adjust(-10, f"{basics} basics is high for mid-game")

    if floor >= LATE_GAME_FLOOR:
        dead = sum(1 for c in cards if c.tier_rating <= 2)
        if dead >= 4:
            tally.adjust(-15, f"{dead} dead cards in the late game",
                         "Remove or transform weak cards")
    return tally


# ============================================================================
# REPORT
# ============================================================================

def estimate_win_rate(score: float, ascension: int, act: int) -> int:
    """Monotonic heuristic in score; not a statistical model."""
    rate = score * WIN_RATE_SCORE_FACTOR - ascension * WIN_RATE_ASCENSION_PENALTY
    if act >= 3:
        rate += WIN_RATE_ACT3_BONUS
    elif act == 2:
        rate += WIN_RATE_ACT2_BONUS
    return int(clamp(round(rate), WIN_RATE_MIN, WIN_RATE_MAX))


def analyze_deck_health(
    state: RunState,
    data: ReferenceData,
    composition: Optional[DeckComposition] = None,
) -> DeckHealthReport:
    """Grade the deck in a run snapshot."""
    if composition is None:
        composition = analyze_deck(state.deck, data)
    cards = [card for card in (data.card(c.card_id) for c in state.deck) if card is not None]
    act = state.act

    owned = [data.relic(relic_id) for relic_id in state.relics]
    energy_sources = composition.energy_count + sum(
        1 for relic in owned if relic is not None and "energy" in relic.tags
    )
    archetypes = detect_archetypes(state.deck, data, state.character, composition)

    tallies = {
        "damage": _damage(cards, composition, act),
        "defense": _defense(cards, composition, state.relics, state.character, act),
        "consistency": _consistency(composition, energy_sources, act),
        "scaling": _scaling(composition, len(archetypes), act),
        "synergy": _synergy(cards, composition, state.floor, act),
    }

    # Higher ascensions raise the bar
    bar = state.ascension * ASCENSION_BAR_PER_LEVEL
    if bar:
        for name in ("damage", "defense", "scaling"):
            tallies[name].adjust(-bar)

    categories = tuple(tallies[name].finish() for name in CATEGORY_ORDER)
    overall = round(clamp(
        sum(c.score * HEALTH_WEIGHTS[c.name] for c in categories), SCORE_MIN, SCORE_MAX,
    ), 1)

    critical = tuple(
        f"{c.name.title()}: {c.issues[0] if c.issues else f'score {c.score:.0f}'}"
        for c in categories if c.score < CRITICAL_CATEGORY_SCORE
    )

    # sorted() is stable, so ties keep category order
    weakest = sorted(categories, key=lambda c: c.score)[:TOP_RECOMMENDATION_COUNT]
    top = tuple(
        c.recommendations[0] if c.recommendations else f"Shore up {c.name}"
        for c in weakest
    )

    logger.debug("Deck health %.1f for %d cards", overall, composition.size)
    return DeckHealthReport(
        overall_score=overall,
        grade=grade_for_score(overall),
        status=status_for_score(overall),
        categories=categories,
        critical_issues=critical,
        top_recommendations=top,
        projected_win_rate=estimate_win_rate(overall, state.ascension, act),
    )
