"""
Event Handler - advice for "?" room event choices.

Every choice of an event gets a rating (highly-recommended / recommended /
situational / avoid) and a reason; the best enabled choice is the
recommendation. Ratings come from a rule table keyed by event id:

    @event_rule("golden_shrine")
    def golden_shrine(ctx: EventContext) -> Optional[Verdict]:
        if ctx.choice.id == "desecrate" and ctx.state.gold >= 50:
            return EventRating.HIGHLY_RECOMMENDED, "Net +225 gold"

A rule returning None (or an unmapped event) falls back to a neutral
"situational" verdict.

Independently of its rating, a choice is disabled when the player cannot
pay for it: gold cost above current gold, HP cost that would be lethal, or
a required relic that is not owned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..calc.composition import DeckComposition, analyze_deck
from ..config import HP_CRITICAL, HP_HALF, HP_LOW, HP_MODERATE, SHOP_LOW_GOLD
from ..content.catalog import ReferenceData
from ..content.events import Event, EventChoice
from ..recommendations import EventRating
from ..state.run import RunState

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Evaluate based on your current situation."

Verdict = Tuple[EventRating, str]


@dataclass(frozen=True)
class ChoiceAdvice:
    choice_id: str
    label: str
    rating: EventRating
    reason: str
    disabled: bool = False
    disabled_reason: Optional[str] = None


@dataclass(frozen=True)
class EventAdvice:
    """Per-choice advice plus the recommended choice (None if none is possible)."""
    event_id: str
    event_name: str
    choices: Tuple[ChoiceAdvice, ...]
    recommended_choice: Optional[str]

    def advice_for(self, choice_id: str) -> Optional[ChoiceAdvice]:
        for advice in self.choices:
            if advice.choice_id == choice_id:
                return advice
        return None


@dataclass(frozen=True)
class EventContext:
    """What event rules look at."""
    event: Event
    choice: EventChoice
    state: RunState
    composition: DeckComposition
    data: ReferenceData

    @property
    def unupgraded_count(self) -> int:
        return sum(1 for card in self.state.deck if not card.upgraded)

    @property
    def weak_card_count(self) -> int:
        """Basics plus cards rated 2 or below."""
        count = 0
        for instance in self.state.deck:
            card = self.data.card(instance.card_id)
            if card is not None and not card.is_dead and card.tier_rating <= 2.0:
                count += 1
        return count


# ============================================================================
# RULE TABLE
# ============================================================================

EventRule = Callable[[EventContext], Optional[Verdict]]

EVENT_RULES: Dict[str, EventRule] = {}


def event_rule(event_id: str):
    """Register the rule for one event."""
    def decorator(func: EventRule) -> EventRule:
        EVENT_RULES[event_id] = func
        return func
    return decorator


HR = EventRating.HIGHLY_RECOMMENDED
REC = EventRating.RECOMMENDED
SIT = EventRating.SITUATIONAL
AVOID = EventRating.AVOID


@event_rule("golden_shrine")
def _golden_shrine(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "desecrate" and ctx.state.gold >= ctx.choice.gold_cost:
        return HR, "Net +225 gold profit is excellent value."
    if ctx.choice.id == "pray":
        return REC, "+100 gold is decent if you cannot afford Desecrate."
    if ctx.choice.id == "leave":
        return AVOID, "Free gold is always valuable. Don't skip this event."
    return None


@event_rule("wing_statue")
def _wing_statue(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "remove":
        return None
    if ctx.state.hp_ratio < HP_CRITICAL:
        return SIT, "Removal is valuable, but the HP cost is dangerous right now."
    if ctx.composition.curse_count:
        return HR, "Cheap removal! Remove curses first, then Strikes/Defends."
    if ctx.composition.basic_strike_count or ctx.composition.size > 20:
        return HR, "Removal is always valuable. Slim your deck."
    return REC, "Removal is good. Consider removing basic cards."


@event_rule("shining_light")
def _shining_light(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "upgrade_two":
        return None
    if ctx.state.hp_ratio < HP_LOW:
        return SIT, "Two upgrades are strong, but the damage hurts at low HP."
    unupgraded = ctx.unupgraded_count
    if unupgraded >= 5:
        return HR, f"{unupgraded} unupgraded cards. Two upgrades are excellent."
    return REC, "Upgrades are always good. Take this."


@event_rule("world_of_goop")
def _world_of_goop(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "curse":
        if len(ctx.state.relics) < 5:
            return HR, "Early game: a relic outweighs the curse. Remove it at a shop."
        return SIT, "Relic is good but the curse hurts. Only if you can remove it soon."
    if ctx.choice.id == "gold":
        return REC, "75 gold is solid. Safe choice if you don't want a curse."
    return None


@event_rule("big_fish")
def _big_fish(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "box":
        return HR, "A relic is almost always the best choice. Relics win runs."
    if ctx.choice.id == "banana" and ctx.state.max_hp < 60:
        return REC, "Low max HP. +5 Max HP is valuable."
    if ctx.choice.id == "donut" and ctx.state.hp_ratio < HP_HALF:
        return SIT, f"Low HP ({round(ctx.state.hp_ratio * 100)}%). Healing is tempting but the relic is usually better."
    return None


@event_rule("scrap_ooze")
def _scrap_ooze(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "dig":
        return None
    if ctx.state.current_hp > 10:
        return HR, f"You have {ctx.state.current_hp} HP. A few HP for a relic is excellent value."
    return AVOID, f"Only {ctx.state.current_hp} HP. Too risky to keep digging."


@event_rule("golden_idol")
def _golden_idol(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "take":
        return REC, "Golden Idol pays out gold all run; the trap costs little."
    return None


@event_rule("wheel_of_change")
def _wheel_of_change(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "spin":
        return None
    weak = ctx.weak_card_count
    if weak >= 8:
        return HR, f"{weak} weak cards. Good odds the wheel improves your deck."
    if weak >= 5:
        return REC, "Some weak cards. The wheel is a gamble but usually beneficial."
    return SIT, "Good deck already. The wheel is risky."


@event_rule("match_and_keep")
def _match_and_keep(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "play":
        return REC, "Free cards with no downside; match the best ones."
    return None


@event_rule("mushrooms")
def _mushrooms(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "stomp":
        if ctx.state.hp_ratio >= HP_MODERATE:
            return REC, "Healthy enough to fight for Odd Mushroom and the gold."
        return AVOID, "Three Fungi Beasts at low HP is a real risk."
    if ctx.choice.id == "eat" and ctx.state.hp_ratio < HP_LOW:
        return REC, "You need the heal; Parasite can be removed later."
    return None


@event_rule("old_beggar")
def _old_beggar(ctx: EventContext) -> Optional[Verdict]:
    curses = ctx.composition.curse_count
    basics = ctx.composition.basic_count
    if ctx.choice.id == "give_all" and (curses >= 2 or basics >= 8):
        return HR, f"{curses} curses + {basics} basics. Two removals are worth all your gold!"
    if ctx.choice.id == "give_75" and ctx.state.gold >= ctx.choice.gold_cost:
        return REC, "75 gold for a removal is a fair trade."
    if ctx.choice.id == "refuse":
        return AVOID, "Getting a curse is bad. Better to give something."
    return None


@event_rule("lab")
def _lab(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "search":
        return HR, "Free potions with no downside."
    return None


@event_rule("nest")
def _nest(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "stay":
        if ctx.state.hp_ratio > HP_HALF:
            return REC, "Ritual Dagger scales all run; the HP cost is small."
        return SIT, "Ritual Dagger is good, but HP is already low."
    if ctx.choice.id == "smash":
        if ctx.state.gold < SHOP_LOW_GOLD:
            return REC, "Low on gold; 99 gold funds the next shop."
        return SIT, "Gold is fine; the dagger may be worth more."
    return None


@event_rule("cursed_tome")
def _cursed_tome(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "read":
        return None
    if ctx.state.current_hp <= ctx.choice.hp_cost + 10:
        return AVOID, "Reading to the end would leave you nearly dead."
    return SIT, "A book relic for a big chunk of HP. Only if you can afford the damage."


@event_rule("face_trader")
def _face_trader(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "touch":
        if ctx.state.gold < SHOP_LOW_GOLD and ctx.state.hp_ratio > HP_MODERATE:
            return REC, "Cheap HP for gold while you are short on gold."
        return SIT, "Gold for HP; only if you need the gold."
    if ctx.choice.id == "trade":
        return SIT, "Face relics are a gamble; some are strong, some are drawbacks."
    return None


@event_rule("vampire")
def _vampire(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "accept":
        strikes = ctx.composition.basic_strike_count
        if strikes >= 4 and ctx.state.max_hp >= 60:
            return HR, f"{strikes} Strikes become Bites (heal on hit). Max HP cost is manageable."
        if ctx.state.max_hp < 50:
            return AVOID, f"Max HP too low ({ctx.state.max_hp}). -30% would cripple you."
        return SIT, "Bites are strong but -30% Max HP is steep."
    if ctx.choice.id == "offer_vial":
        return HR, "Bites without losing Max HP. Take it."
    if ctx.choice.id == "refuse":
        return REC, "Safe choice. The Vampires are a risk."
    return None


@event_rule("the_moai_head")
def _moai_head(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "offer_idol":
        return HR, "333 gold for the idol is excellent."
    if ctx.choice.id == "jump_in":
        if ctx.state.hp_ratio < HP_HALF:
            return HR, "A full heal is worth a little Max HP when you are this low."
        return SIT, "You are healthy; the Max HP loss is not worth it."
    return None


@event_rule("knowing_skull")
def _knowing_skull(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id in ("potion", "gold", "card"):
        if ctx.state.hp_ratio > HP_MODERATE:
            return REC, "Healthy enough to trade a little HP for a reward."
        return AVOID, "HP is too low to pay the Skull."
    return None


@event_rule("purifier")
def _purifier(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "pray":
        return None
    if ctx.composition.curse_count:
        return HR, "Free removal of a curse."
    return REC, "Free removal. Take out a Strike or Defend."


@event_rule("upgrade_shrine")
def _upgrade_shrine(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id == "pray":
        return REC, "Free upgrade."
    return None


@event_rule("council_of_ghosts")
def _council_of_ghosts(ctx: EventContext) -> Optional[Verdict]:
    if ctx.choice.id != "accept":
        return None
    if ctx.state.max_hp >= 60:
        return REC, "Apparitions make hard fights trivial; Max HP is the price."
    return SIT, "Apparitions are strong but your Max HP is already low."


# ============================================================================
# EVALUATION
# ============================================================================

def disabled_reason(choice: EventChoice, state: RunState) -> Optional[str]:
    """Why a choice cannot be taken, or None if it can."""
    if choice.required_relic and not state.has_relic(choice.required_relic):
        return f"Requires {choice.required_relic}"
    if not choice.costs_all_gold and choice.gold_cost > state.gold:
        return f"Need {choice.gold_cost} gold (have {state.gold})"
    if choice.hp_cost and choice.hp_cost >= state.current_hp:
        return f"Costs {choice.hp_cost} HP (have {state.current_hp})"
    if choice.max_hp_cost and choice.max_hp_cost >= state.max_hp:
        return f"Costs {choice.max_hp_cost} Max HP (have {state.max_hp})"
    return None


def evaluate_event_choice(event: Event, choice: EventChoice, state: RunState,
                          data: ReferenceData,
                          composition: Optional[DeckComposition] = None) -> ChoiceAdvice:
    if composition is None:
        composition = analyze_deck(state.deck, data)
    ctx = EventContext(event=event, choice=choice, state=state, composition=composition, data=data)

    verdict = None
    rule = EVENT_RULES.get(event.id)
    if rule is None:
        logger.debug("No event rule for %s; using default verdict", event.id)
    else:
        verdict = rule(ctx)
    rating, reason = verdict if verdict is not None else (SIT, DEFAULT_REASON)

    blocked = disabled_reason(choice, state)
    return ChoiceAdvice(
        choice_id=choice.id,
        label=choice.label,
        rating=rating,
        reason=reason,
        disabled=blocked is not None,
        disabled_reason=blocked,
    )


def evaluate_event(event_id: str, state: RunState, data: ReferenceData,
                   composition: Optional[DeckComposition] = None) -> EventAdvice:
    """
    Rate every choice of an event.

    The recommended choice is the best-rated enabled choice; ties go to the
    earlier choice in the event. Unknown events yield no choices.
    """
    event = data.event(event_id)
    if event is None:
        logger.debug("Event %s not in catalog", event_id)
        return EventAdvice(event_id=event_id, event_name=event_id, choices=(),
                           recommended_choice=None)
    if composition is None:
        composition = analyze_deck(state.deck, data)

    choices: List[ChoiceAdvice] = [
        evaluate_event_choice(event, choice, state, data, composition) for choice in event.choices
    ]
    enabled = [c for c in choices if not c.disabled]
    recommended = min(enabled, key=lambda c: c.rating.rank).choice_id if enabled else None

    return EventAdvice(
        event_id=event.id,
        event_name=event.name,
        choices=tuple(choices),
        recommended_choice=recommended,
    )
