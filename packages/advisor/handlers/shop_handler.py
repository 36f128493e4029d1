"""
Shop Handler - card removal, purchases and shop strategy.

Removal ranking is the card evaluator turned inside out:
- curses and statuses are always MUST_REMOVE
- low-tier cards (rating 2 or below) with no active synergy are SHOULD_REMOVE
- everything else is KEEP unless its removal score says otherwise

Each card also gets a 0-10 removal score (basics are kept early and culled
late, anti-synergy and deck bloat add to it) that orders cards within a
bucket and sets the urgency. The ranking takes no shop state, so blessing
"remove N cards" effects reuse it unchanged.

Purchases score each card / relic / potion on sale by its evaluator rating
plus price efficiency and bucket it into must-buy / strong-buy / consider /
skip. Items the player cannot afford are always skip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..calc.composition import DeckComposition, analyze_deck
from ..config import (
    BLOATED_DECK_SIZE,
    CARD_CONSIDER_GOLD_SHARE,
    CARD_EXPENSIVE_GOLD_SHARE,
    EARLY_REMOVAL_FLOOR,
    LOW_TIER_REMOVAL,
    MID_REMOVAL_FLOOR,
    MUST_PICK_THRESHOLD,
    GOOD_PICK_THRESHOLD,
    POTION_RARITY_RATINGS,
    POTION_SLOT_ASCENSION,
    POTION_SLOTS,
    POTION_SLOTS_HIGH_ASCENSION,
    PRICE_EFFICIENCY_WEIGHT,
    RELIC_CONSIDER_GOLD_SHARE,
    RELIC_EXPENSIVE_GOLD_SHARE,
    RELIC_STRONG_GOLD_SHARE,
    RELIC_VALUE_MULTIPLIER,
    REMOVAL_BASE_COST,
    REMOVAL_COMFORT_GOLD,
    REMOVAL_COST_STEP,
    REMOVAL_SCORE_CRITICAL,
    REMOVAL_SCORE_HIGH,
    REMOVAL_SCORE_MEDIUM,
    REMOVAL_SPARE_GOLD,
    REMOVAL_VALUES,
    SITUATIONAL_THRESHOLD,
    UNAFFORDABLE_VALUE,
    UNREMOVABLE_CARDS,
    URGENT_FLOORS,
)
from ..content.cards import Card, CardRarity, CardType, Character, is_basic_defend, is_basic_strike
from ..content.catalog import ReferenceData
from ..content.potions import EMERGENCY
from ..recommendations import Priority, RemovalPriority, ShopPriority, Urgency
from ..state.run import CardInstance, RunState
from .card_reward import evaluate_card
from .relic_reward import evaluate_relic

logger = logging.getLogger(__name__)


# ============================================================================
# REMOVAL
# ============================================================================

@dataclass(frozen=True)
class RemovalAdvice:
    """Removal advice for one card instance in the deck."""
    instance_id: str
    card_id: str
    name: str
    priority: RemovalPriority
    score: int
    urgency: Urgency
    reason: str
    removable: bool = True


@dataclass(frozen=True)
class RemovalDecision:
    """Whether to buy a card removal at this shop."""
    recommend: bool
    reason: str
    cost: int
    target: Optional[RemovalAdvice] = None
    alternative_use: Optional[str] = None


def removal_cost(cards_removed: int) -> int:
    """Shop removal price after a number of earlier removals."""
    return REMOVAL_BASE_COST + REMOVAL_COST_STEP * max(cards_removed, 0)


def urgency_for_score(score: int) -> Urgency:
    if score >= REMOVAL_SCORE_CRITICAL:
        return Urgency.CRITICAL
    if score >= REMOVAL_SCORE_HIGH:
        return Urgency.HIGH
    if score >= REMOVAL_SCORE_MEDIUM:
        return Urgency.MEDIUM
    return Urgency.LOW


def has_active_synergy(card: Card, composition: DeckComposition, relics: Sequence[str]) -> bool:
    """Whether any of the card's synergy partners is in the deck or relics."""
    for partner in card.synergies:
        if partner == card.id:
            continue
        if composition.has_card(partner) or partner in relics:
            return True
    return False


def _anti_synergy_conflicts(card: Card, composition: DeckComposition) -> List[str]:
    return [other for other in card.anti_synergies if composition.has_card(other)]


def _removal_score(card: Card, comp: DeckComposition, state: RunState) -> int:
    floor = state.floor

    if card.card_type == CardType.CURSE:
        if card.id == "ascenders_bane":
            return 10
        return 9 if card.id in ("clumsy", "parasite") else 8
    if card.card_type == CardType.STATUS:
        if card.id in ("wound", "dazed"):
            return 8
        return 7 if card.id in ("burn", "slimed") else 6

    if is_basic_strike(card.id):
        strikes = comp.basic_strike_count
        if floor <= EARLY_REMOVAL_FLOOR:
            return 2 if strikes <= 3 else 5
        if floor <= MID_REMOVAL_FLOOR:
            return 3 if strikes == 1 and comp.attack_count < 8 else 7
        return 9

    if is_basic_defend(card.id):
        if comp.basic_defend_count <= 3 and comp.block_count < 6:
            return 2
        if floor <= EARLY_REMOVAL_FLOOR:
            return 3
        if floor <= MID_REMOVAL_FLOOR:
            return 6
        return 8 if comp.block_count >= 8 else 5

    if (card.tier_rating <= LOW_TIER_REMOVAL
            and card.rarity in (CardRarity.UNCOMMON, CardRarity.RARE)
            and not has_active_synergy(card, comp, state.relics)):
        return 7
    if _anti_synergy_conflicts(card, comp):
        return 6
    if comp.size > BLOATED_DECK_SIZE and card.tier_rating <= 3:
        return 5

    character = state.character
    if character == Character.IRONCLAD and card.id == "bash":
        if floor > 15 and comp.has_card("thunderclap"):
            return 6
    elif character == Character.SILENT:
        if card.id == "survivor" and floor > 10:
            return 5
        if card.id == "neutralize" and floor > 20 and comp.has_card("leg_sweep"):
            return 4
    elif character == Character.DEFECT:
        if card.id == "zap" and floor > 15 and comp.has_card("ball_lightning"):
            return 5
    elif character == Character.WATCHER and card.id in ("eruption", "vigilance"):
        return 1
    return 2


def _removal_reason(card: Card, comp: DeckComposition, state: RunState) -> str:
    if card.card_type == CardType.CURSE:
        if card.id in UNREMOVABLE_CARDS:
            return f"{card.name} is a curse that cannot be removed at a shop"
        return "Curses actively hurt your deck; remove as soon as possible"
    if card.card_type == CardType.STATUS:
        return "Status cards dilute your deck and provide no value"

    if is_basic_strike(card.id):
        if state.floor <= EARLY_REMOVAL_FLOOR:
            return f"Early game: keep {comp.basic_strike_count} Strikes for now, but start removing soon"
        if state.floor <= MID_REMOVAL_FLOOR:
            return f"Strikes are weak; replace with better damage ({comp.attack_count} attacks total)"
        return "Late game: Strikes are far below curve, remove immediately"

    if is_basic_defend(card.id):
        if comp.basic_defend_count <= 3 and comp.block_count < 6:
            return f"Only {comp.block_count} block cards; keep some Defends"
        if comp.block_count >= 8:
            return f"Defense covered: {comp.block_count} block cards make Defends redundant"
        return "Defends are weak, but better than nothing"

    if card.tier_rating <= LOW_TIER_REMOVAL:
        if not has_active_synergy(card, comp, state.relics):
            return f"Tier {card.tier_rating:g}/5 card with no synergy in your deck"
        return f"Low tier card ({card.tier_rating:g}/5); consider removing for efficiency"

    conflicts = _anti_synergy_conflicts(card, comp)
    if conflicts:
        return f"Anti-synergizes with {len(conflicts)} card(s) in your deck"
    if comp.size > BLOATED_DECK_SIZE and card.tier_rating <= 3:
        return f"Deck bloat: {comp.size} cards is too many, remove mediocre cards"
    return "Low priority removal; keep if nothing better to remove"


def advise_removal(instance: CardInstance, state: RunState, data: ReferenceData,
                   composition: DeckComposition) -> RemovalAdvice:
    """Removal advice for a single deck card."""
    card = data.card(instance.card_id)
    if card is None:
        logger.debug("Card %s not in catalog; keeping it", instance.card_id)
        return RemovalAdvice(
            instance_id=instance.instance_id, card_id=instance.card_id, name=instance.card_id,
            priority=RemovalPriority.KEEP, score=2, urgency=Urgency.LOW,
            reason="Unknown card; no rating data",
        )

    score = _removal_score(card, composition, state)
    if card.is_dead:
        priority = RemovalPriority.MUST_REMOVE
    elif card.tier_rating <= LOW_TIER_REMOVAL and not has_active_synergy(card, composition, state.relics):
        priority = RemovalPriority.SHOULD_REMOVE
    elif score >= REMOVAL_SCORE_HIGH:
        priority = RemovalPriority.SHOULD_REMOVE
    else:
        priority = RemovalPriority.KEEP

    return RemovalAdvice(
        instance_id=instance.instance_id,
        card_id=card.id,
        name=card.name,
        priority=priority,
        score=score,
        urgency=urgency_for_score(score),
        reason=_removal_reason(card, composition, state),
        removable=card.id not in UNREMOVABLE_CARDS,
    )


def rank_removals(state: RunState, data: ReferenceData,
                  composition: Optional[DeckComposition] = None) -> List[RemovalAdvice]:
    """
    Every deck card ranked for removal, most urgent first.

    Order: bucket, removable before unremovable, score, then deck order.
    """
    if composition is None:
        composition = analyze_deck(state.deck, data)
    advice = [advise_removal(instance, state, data, composition) for instance in state.deck]
    advice.sort(key=lambda a: (a.priority.rank, not a.removable, -a.score))
    return advice


def removal_candidates(state: RunState, data: ReferenceData, count: int = 1,
                       composition: Optional[DeckComposition] = None) -> List[RemovalAdvice]:
    """The top `count` removable cards in removal order."""
    ranked = [a for a in rank_removals(state, data, composition) if a.removable]
    return ranked[:max(count, 0)]


def should_remove_at_shop(state: RunState, data: ReferenceData,
                          removals: Optional[Sequence[RemovalAdvice]] = None) -> RemovalDecision:
    """Whether the shop's card removal is worth its price right now."""
    cost = removal_cost(state.cards_removed)
    if removals is None:
        removals = rank_removals(state, data)
    top = next((a for a in removals if a.removable), None)
    gold = state.gold

    if top is None:
        return RemovalDecision(False, "Nothing in the deck can be removed", cost)
    if gold < cost:
        return RemovalDecision(False, f"Removal costs {cost} gold (have {gold})", cost, top)

    if top.priority == RemovalPriority.MUST_REMOVE or top.urgency == Urgency.CRITICAL:
        return RemovalDecision(True, f"{top.name}: {top.reason}", cost, top)
    if top.urgency == Urgency.HIGH:
        if gold >= REMOVAL_COMFORT_GOLD:
            return RemovalDecision(
                True, f"Remove {top.name}; you have enough gold for other purchases too", cost, top,
            )
        return RemovalDecision(
            True, f"{top.name}: {top.reason}", cost, top,
            alternative_use="Consider it only if no key card or relic is on sale",
        )
    if top.urgency == Urgency.MEDIUM and gold >= REMOVAL_SPARE_GOLD:
        return RemovalDecision(
            True, f"You have spare gold ({gold}g); remove {top.name}", cost, top,
            alternative_use="Only if no critical purchases are available",
        )
    return RemovalDecision(
        False, "Save gold for cards/relics unless an urgent removal is needed", cost, top,
        alternative_use="Removal is a luxury; prioritize build-enabling cards and relics",
    )


# ============================================================================
# PURCHASES
# ============================================================================

@dataclass(frozen=True)
class ShopItem:
    """Something on sale: kind is "card", "relic" or "potion"."""
    kind: str
    item_id: str
    cost: int
    upgraded: bool = False


@dataclass(frozen=True)
class ShopRecommendation:
    action: str
    item_id: str
    name: str
    cost: int
    priority: ShopPriority
    value: float
    affordable: bool
    reasons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ShopAdvice:
    """Everything the shop screen needs."""
    recommendations: Tuple[ShopRecommendation, ...]
    removal: RemovalDecision
    strategy: Tuple[str, ...] = field(default_factory=tuple)


def _price_value(rating: float, cost: int, gold: int) -> float:
    if cost > gold:
        return UNAFFORDABLE_VALUE
    return rating + PRICE_EFFICIENCY_WEIGHT * (1 - cost / max(gold, 1))


def evaluate_card_for_sale(item: ShopItem, state: RunState, data: ReferenceData,
                           composition: DeckComposition) -> ShopRecommendation:
    evaluation = evaluate_card(item.item_id, state.deck, data, state.relics,
                               state.character, composition)
    gold = state.gold
    affordable = item.cost <= gold

    if not affordable:
        priority = ShopPriority.SKIP
    elif evaluation.priority == Priority.MUST_PICK:
        priority = ShopPriority.MUST_BUY
    elif evaluation.priority == Priority.GOOD_PICK:
        priority = ShopPriority.STRONG_BUY
    elif evaluation.priority == Priority.SITUATIONAL and item.cost <= gold * CARD_CONSIDER_GOLD_SHARE:
        priority = ShopPriority.CONSIDER
    else:
        priority = ShopPriority.SKIP

    reasons = [f"{evaluation.name}{'+' if item.upgraded else ''} - {item.cost} gold"]
    reasons.extend(evaluation.reasons)
    if not affordable:
        reasons.append("Cannot afford this")
    elif item.cost > gold * CARD_EXPENSIVE_GOLD_SHARE:
        reasons.append("Very expensive; will leave you broke")

    return ShopRecommendation(
        action="buy-card", item_id=item.item_id, name=evaluation.name, cost=item.cost,
        priority=priority, value=round(_price_value(evaluation.rating, item.cost, gold), 2),
        affordable=affordable, reasons=tuple(reasons),
    )


def evaluate_relic_for_sale(item: ShopItem, state: RunState, data: ReferenceData,
                            composition: DeckComposition) -> ShopRecommendation:
    evaluation = evaluate_relic(item.item_id, state.deck, data, state.relics,
                                state.character, state, composition)
    gold = state.gold
    affordable = item.cost <= gold
    rating = evaluation.rating

    if not affordable:
        priority = ShopPriority.SKIP
    elif rating >= MUST_PICK_THRESHOLD:
        priority = ShopPriority.MUST_BUY
    elif rating >= GOOD_PICK_THRESHOLD and item.cost <= gold * RELIC_STRONG_GOLD_SHARE:
        priority = ShopPriority.STRONG_BUY
    elif rating >= SITUATIONAL_THRESHOLD and item.cost <= gold * RELIC_CONSIDER_GOLD_SHARE:
        priority = ShopPriority.CONSIDER
    else:
        priority = ShopPriority.SKIP

    reasons = [f"{evaluation.name} - {item.cost} gold", evaluation.reason]
    if not affordable:
        reasons.append("Cannot afford this")
    elif item.cost > gold * RELIC_EXPENSIVE_GOLD_SHARE:
        reasons.append("Very expensive; buy only if it solves a critical problem")

    value = _price_value(rating * RELIC_VALUE_MULTIPLIER, item.cost, gold)
    return ShopRecommendation(
        action="buy-relic", item_id=item.item_id, name=evaluation.name, cost=item.cost,
        priority=priority, value=round(value, 2), affordable=affordable, reasons=tuple(reasons),
    )


def potion_slots(state: RunState) -> int:
    if state.has_relic("potion_belt"):
        extra = 2
    else:
        extra = 0
    base = POTION_SLOTS_HIGH_ASCENSION if state.ascension >= POTION_SLOT_ASCENSION else POTION_SLOTS
    return base + extra


def evaluate_potion_for_sale(item: ShopItem, state: RunState,
                             data: ReferenceData) -> ShopRecommendation:
    potion = data.potion(item.item_id)
    name = potion.name if potion is not None else item.item_id
    gold = state.gold
    affordable = item.cost <= gold
    reasons = [f"{name} - {item.cost} gold"]

    rating = POTION_RARITY_RATINGS.get(potion.rarity.value, 2.5) if potion is not None else 2.5
    if potion is not None:
        reasons.append(potion.usage)
        if EMERGENCY in potion.tags and state.floors_until_boss <= URGENT_FLOORS:
            rating += 0.5
            reasons.append("Boss is close; emergency potions are worth more")

    if state.has_relic("sozu"):
        priority = ShopPriority.SKIP
        reasons.append("Sozu: you cannot obtain potions")
    elif len(state.potions) >= potion_slots(state):
        priority = ShopPriority.SKIP
        reasons.append("No free potion slot")
    elif not affordable:
        priority = ShopPriority.SKIP
        reasons.append("Cannot afford this")
    elif rating >= GOOD_PICK_THRESHOLD and item.cost <= gold * RELIC_STRONG_GOLD_SHARE:
        priority = ShopPriority.STRONG_BUY
    elif item.cost <= gold * CARD_CONSIDER_GOLD_SHARE:
        priority = ShopPriority.CONSIDER
    else:
        priority = ShopPriority.SKIP

    return ShopRecommendation(
        action="buy-potion", item_id=item.item_id, name=name, cost=item.cost,
        priority=priority, value=round(_price_value(rating, item.cost, gold), 2),
        affordable=affordable, reasons=tuple(reasons),
    )


def _removal_recommendation(decision: RemovalDecision) -> Optional[ShopRecommendation]:
    target = decision.target
    if not decision.recommend or target is None:
        return None
    if target.priority == RemovalPriority.MUST_REMOVE or target.urgency == Urgency.CRITICAL:
        priority = ShopPriority.MUST_BUY
    elif target.urgency == Urgency.HIGH:
        priority = ShopPriority.STRONG_BUY
    else:
        priority = ShopPriority.CONSIDER
    reasons = [f"Remove {target.name}", target.reason]
    if priority == ShopPriority.MUST_BUY:
        reasons.append("Do this before buying anything else")
    return ShopRecommendation(
        action="remove-card", item_id=target.card_id, name=target.name, cost=decision.cost,
        priority=priority, value=REMOVAL_VALUES[priority.value], affordable=True,
        reasons=tuple(reasons),
    )


def shop_strategy(recommendations: Sequence[ShopRecommendation], gold: int, act: int) -> List[str]:
    """Short act-keyed spending plan."""
    lines = []
    top = next((r for r in recommendations if r.priority == ShopPriority.MUST_BUY), None)
    if top is not None:
        verb = "Remove" if top.action == "remove-card" else "Buy"
        lines.append(f"PRIORITY: {verb} {top.name} ({top.cost}g)")

    must_buy_total = sum(r.cost for r in recommendations if r.priority == ShopPriority.MUST_BUY)
    if must_buy_total > gold:
        lines.append("BUDGET WARNING: several must-buys but not enough gold; "
                     "take the one that solves your biggest problem.")

    if act == 1:
        lines.append("Act 1 shop: prioritize damage for elites. Only remove if you have gold to spare.")
    elif act == 2:
        lines.append("Act 2 shop: look for AoE and scaling. Remove Strikes if affordable.")
    else:
        lines.append("Act 3 shop: prioritize mitigation and deck refinement. Remove aggressively.")
    return lines


def evaluate_shop(state: RunState, data: ReferenceData, items: Sequence[ShopItem] = ()) -> ShopAdvice:
    """
    Rank every purchase on offer, including a card removal.

    Recommendations sort by value (highest first), then name.
    """
    composition = analyze_deck(state.deck, data)
    decision = should_remove_at_shop(state, data, rank_removals(state, data, composition))

    recommendations: List[ShopRecommendation] = []
    removal = _removal_recommendation(decision)
    if removal is not None:
        recommendations.append(removal)

    for item in items:
        if item.kind == "card":
            recommendations.append(evaluate_card_for_sale(item, state, data, composition))
        elif item.kind == "relic":
            recommendations.append(evaluate_relic_for_sale(item, state, data, composition))
        elif item.kind == "potion":
            recommendations.append(evaluate_potion_for_sale(item, state, data))
        else:
            raise ValueError(f"Unknown shop item kind: {item.kind}")

    recommendations.sort(key=lambda r: (-r.value, r.name))
    return ShopAdvice(
        recommendations=tuple(recommendations),
        removal=decision,
        strategy=tuple(shop_strategy(recommendations, state.gold, state.act)),
    )
