"""
Card Reward Handler - scores a candidate card against the current deck.

The most reused primitive: combat rewards, shop cards and blessing card
picks all come through evaluate_card(), so a card gets the same rating
wherever it is offered.

Scoring order:
1. Base: the card's hand-authored tier rating
2. Synergy / anti-synergy with cards in the deck and owned relics
3. Build boosts (Barricade wants block, Rupture wants self-damage, ...)
4. Deck needs: attacks, block, draw, scaling, AoE, energy, cost curve
5. Size effects: powers in a lean deck, power glut, duplicates, bloat
6. Off-class penalty
7. Clamp to 0-5 and bucket with the shared breakpoints

Steps 3-5 look at the deck with the candidate's synergy partners taken
out, so adding a partner to the deck only ever moves the synergy term.

Curses and statuses skip all of this and are rated 0 / skip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import (
    ANTI_SYNERGY_PENALTY,
    ANTI_SYNERGY_PENALTY_CAP,
    ARCHETYPE_TAG_BOOSTS,
    ATTACK_NEED_BONUS,
    ATTACK_RATIO_FLOOR,
    AOE_NEED_BONUS,
    AOE_NEED_COUNT,
    BLOCK_NEED_BONUS,
    BLOCK_RATIO_FLOOR,
    CORRUPTION_SKILL_BONUS,
    DEAD_BRANCH_EXHAUST_BONUS,
    DEAD_CARD_RATING,
    DRAW_NEED_BONUS,
    DRAW_NEED_COUNT,
    DUPLICATE_MIN_COPIES,
    DUPLICATE_PENALTY,
    DUPLICATE_TIER_CEILING,
    EXTRA_ENERGY_BONUS,
    FIRST_ENERGY_BONUS,
    HEAVY_CURVE_AVG_COST,
    HEAVY_CURVE_CHEAP_BONUS,
    HIGH_COST_MIN,
    HIGH_COST_PENALTY,
    HIGH_COST_RATIO_CEILING,
    LARGE_DECK_PENALTY,
    LARGE_DECK_SIZE,
    LARGE_DECK_TIER_CEILING,
    LOW_COST_BONUS,
    LOW_COST_MAX,
    LOW_COST_RATIO_FLOOR,
    NEUTRAL_RATING,
    OFF_CLASS_PENALTY,
    POWER_GLUT_COUNT,
    POWER_GLUT_PENALTY,
    RATING_MAX,
    RATING_MIN,
    SCALING_NEED_BONUS,
    SCALING_NEED_COUNT,
    SMALL_DECK_POWER_BONUS,
    SMALL_DECK_SIZE,
    SYNERGY_BONUS,
    SYNERGY_BONUS_CAP,
    SYNERGY_DIMINISHED_BONUS,
    SYNERGY_FULL_MATCHES,
)
from ..content.cards import (
    AOE, BLOCK, CYCLE, DRAW, ENERGY, EXHAUST, SCALING,
    Card, CardType, Character,
)
from ..content.catalog import ReferenceData
from ..recommendations import Priority, clamp, priority_for_rating, rank_key
from ..calc.composition import DeckComposition, DeckEntry, analyze_deck, entry_card_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreFactor:
    """One adjustment applied on top of the base tier."""
    name: str
    delta: float
    reason: str


@dataclass(frozen=True)
class CardEvaluation:
    """Card advice for one candidate."""
    card_id: str
    name: str
    rating: float
    priority: Priority
    reason: str
    reasons: Tuple[str, ...] = ()
    factors: Tuple[ScoreFactor, ...] = ()
    synergies: Tuple[str, ...] = ()
    anti_synergies: Tuple[str, ...] = ()


# ============================================================================
# SCORING
# ============================================================================

def _matches(ids: Sequence[str], composition: DeckComposition,
             relic_ids: Sequence[str]) -> List[str]:
    found = []
    for other_id in ids:
        if other_id in found:
            continue
        if other_id in composition.card_ids or other_id in relic_ids:
            found.append(other_id)
    return found


def synergy_bonus(match_count: int) -> float:
    """Full weight for the first matches, diminished after, capped."""
    full = min(match_count, SYNERGY_FULL_MATCHES)
    diminished = max(0, match_count - SYNERGY_FULL_MATCHES)
    bonus = full * SYNERGY_BONUS + diminished * SYNERGY_DIMINISHED_BONUS
    return min(bonus, SYNERGY_BONUS_CAP)


def _dead_card(card: Card) -> CardEvaluation:
    kind = "Curse" if card.card_type == CardType.CURSE else "Status"
    reason = f"{kind} cards only clog your draw; never take one"
    return CardEvaluation(
        card_id=card.id,
        name=card.name,
        rating=DEAD_CARD_RATING,
        priority=Priority.SKIP,
        reason=reason,
        reasons=(reason,),
        factors=(ScoreFactor("dead_card", DEAD_CARD_RATING - card.tier_rating, reason),),
    )


def _context_factors(card: Card, composition: DeckComposition) -> List[ScoreFactor]:
    """Adjustments from deck needs, builds and size."""
    factors = []
    deck_size = composition.size
    cheap = 0 <= card.cost <= LOW_COST_MAX
    expensive = card.cost >= HIGH_COST_MIN

    # Build boosts
    for flag, (tag, bonus) in ARCHETYPE_TAG_BOOSTS.items():
        if composition.has_flag(flag) and card.has_tag(tag):
            factors.append(ScoreFactor(
                f"build_{flag}", bonus,
                f"Feeds your {flag.replace('_', ' ')} build",
            ))
    if composition.has_flag("corruption") and card.card_type == CardType.SKILL:
        factors.append(ScoreFactor(
            "corruption", CORRUPTION_SKILL_BONUS, "Skills are free and exhaust with Corruption",
        ))

    # Deck balance
    if card.card_type == CardType.ATTACK and deck_size and composition.attack_ratio < ATTACK_RATIO_FLOOR:
        factors.append(ScoreFactor(
            "attack_need", ATTACK_NEED_BONUS, "Deck is short on attacks",
        ))
    if card.has_tag(BLOCK) and deck_size and composition.block_ratio < BLOCK_RATIO_FLOOR:
        factors.append(ScoreFactor(
            "block_need", BLOCK_NEED_BONUS, "Deck needs more block",
        ))

    # Powers and deck size
    if card.card_type == CardType.POWER:
        if deck_size < SMALL_DECK_SIZE:
            factors.append(ScoreFactor(
                "small_deck_power", SMALL_DECK_POWER_BONUS,
                "Powers come up often in a small deck",
            ))
        if composition.power_count >= POWER_GLUT_COUNT:
            factors.append(ScoreFactor(
                "power_glut", -POWER_GLUT_PENALTY,
                f"Already {composition.power_count} powers; setup turns add up",
            ))

    # Duplicates of low-tier cards
    copies = composition.copies(card.id)
    if copies >= DUPLICATE_MIN_COPIES and card.tier_rating < DUPLICATE_TIER_CEILING:
        factors.append(ScoreFactor(
            "duplicate", -DUPLICATE_PENALTY, f"Already have {copies} copies",
        ))

    # Cost curve
    if deck_size:
        if cheap and composition.low_cost_ratio < LOW_COST_RATIO_FLOOR:
            factors.append(ScoreFactor(
                "cheap_card", LOW_COST_BONUS, "Cheap card smooths a top-heavy curve",
            ))
        elif cheap and composition.average_cost >= HEAVY_CURVE_AVG_COST:
            factors.append(ScoreFactor(
                "heavy_curve", HEAVY_CURVE_CHEAP_BONUS,
                f"Average cost is {composition.average_cost:.1f}; cheap cards help",
            ))
        if expensive and composition.high_cost_ratio >= HIGH_COST_RATIO_CEILING:
            factors.append(ScoreFactor(
                "expensive_card", -HIGH_COST_PENALTY, "Too many expensive cards already",
            ))

    # Capability needs
    if (card.has_tag(DRAW) or card.has_tag(CYCLE)) and composition.draw_count < DRAW_NEED_COUNT:
        factors.append(ScoreFactor("draw_need", DRAW_NEED_BONUS, "Deck needs card draw"))
    if card.has_tag(SCALING) and composition.scaling_count < SCALING_NEED_COUNT:
        factors.append(ScoreFactor("scaling_need", SCALING_NEED_BONUS, "Deck lacks scaling"))
    if card.has_tag(AOE) and composition.aoe_count < AOE_NEED_COUNT:
        factors.append(ScoreFactor("aoe_need", AOE_NEED_BONUS, "Deck lacks area damage"))
    if card.has_tag(ENERGY):
        if composition.energy_count == 0:
            factors.append(ScoreFactor("energy", FIRST_ENERGY_BONUS, "First source of extra energy"))
        else:
            factors.append(ScoreFactor("energy", EXTRA_ENERGY_BONUS, "More energy"))

    # Bloat
    if deck_size > LARGE_DECK_SIZE and card.tier_rating < LARGE_DECK_TIER_CEILING:
        factors.append(ScoreFactor(
            "large_deck", -LARGE_DECK_PENALTY,
            f"Deck is already {deck_size} cards; only great cards are worth adding",
        ))
    return factors


def partner_free_composition(
    card: Card,
    deck: Sequence[DeckEntry],
    data: ReferenceData,
    composition: DeckComposition,
) -> DeckComposition:
    """Composition of the deck without any of the card's synergy partners."""
    partners = set(card.synergies) & composition.card_ids
    if not partners or not deck:
        return composition
    return analyze_deck([entry for entry in deck if entry_card_id(entry) not in partners], data)


def score_card(
    card: Card,
    composition: DeckComposition,
    relic_ids: Sequence[str] = (),
    character: Optional[Character] = None,
    context: Optional[DeckComposition] = None,
) -> CardEvaluation:
    """
    Score a known card against a composition summary.

    Synergy and anti-synergy read `composition`; deck needs, builds and
    size effects read `context` (the deck without the card's synergy
    partners) when given, else `composition`.
    """
    if context is None:
        context = composition
    if card.is_dead:
        return _dead_card(card)

    factors: List[ScoreFactor] = []

    synergies = _matches(card.synergies, composition, relic_ids)
    if synergies:
        factors.append(ScoreFactor(
            "synergy", synergy_bonus(len(synergies)),
            f"Synergizes with {', '.join(synergies)}",
        ))
    anti_synergies = _matches(card.anti_synergies, composition, relic_ids)
    if anti_synergies:
        penalty = min(len(anti_synergies) * ANTI_SYNERGY_PENALTY, ANTI_SYNERGY_PENALTY_CAP)
        factors.append(ScoreFactor(
            "anti_synergy", -penalty, f"Conflicts with {', '.join(anti_synergies)}",
        ))

    if "dead_branch" in relic_ids and card.has_tag(EXHAUST):
        factors.append(ScoreFactor(
            "dead_branch", DEAD_BRANCH_EXHAUST_BONUS, "Dead Branch turns every exhaust into a card",
        ))

    factors.extend(_context_factors(card, context))

    if (character is not None and card.character != Character.COLORLESS
            and card.character != character):
        factors.append(ScoreFactor(
            "off_class", -OFF_CLASS_PENALTY, f"{card.character.value.title()} card",
        ))

    raw = card.tier_rating + sum(f.delta for f in factors)
    rating = round(clamp(raw, RATING_MIN, RATING_MAX), 2)

    base_reason = f"Base tier {card.tier_rating:.1f}"
    if factors:
        # First factor wins ties
        dominant = max(factors, key=lambda f: abs(f.delta))
        reason = dominant.reason
    else:
        reason = base_reason

    return CardEvaluation(
        card_id=card.id,
        name=card.name,
        rating=rating,
        priority=priority_for_rating(rating),
        reason=reason,
        reasons=(base_reason,) + tuple(f.reason for f in factors),
        factors=tuple(factors),
        synergies=tuple(synergies),
        anti_synergies=tuple(anti_synergies),
    )


def evaluate_card(
    card_id: str,
    deck: Iterable[DeckEntry],
    data: ReferenceData,
    relics: Sequence[str] = (),
    character: Optional[Character] = None,
    composition: Optional[DeckComposition] = None,
) -> CardEvaluation:
    """
    Evaluate a candidate card for the given deck.

    Unknown card ids get the neutral rating and a generic reason.
    Pass a precomputed composition of the same deck to skip re-analyzing it.
    """
    card = data.card(card_id)
    if card is None:
        logger.debug("Unknown card %s; neutral rating", card_id)
        reason = "Unknown card; no rating data"
        return CardEvaluation(
            card_id=card_id,
            name=card_id,
            rating=NEUTRAL_RATING,
            priority=priority_for_rating(NEUTRAL_RATING),
            reason=reason,
            reasons=(reason,),
        )
    deck = tuple(deck)
    if composition is None:
        composition = analyze_deck(deck, data)
    context = partner_free_composition(card, deck, data, composition)
    return score_card(card, composition, tuple(relics), character, context)


def rank_card_rewards(
    card_ids: Iterable[str],
    deck: Iterable[DeckEntry],
    data: ReferenceData,
    relics: Sequence[str] = (),
    character: Optional[Character] = None,
) -> List[CardEvaluation]:
    """Evaluate offered cards, best first (bucket, rating, then name)."""
    deck = tuple(deck)
    composition = analyze_deck(deck, data)
    evaluations = [
        evaluate_card(card_id, deck, data, relics, character, composition=composition)
        for card_id in card_ids
    ]
    return sorted(evaluations, key=lambda e: rank_key(e.priority, e.rating, e.name))
