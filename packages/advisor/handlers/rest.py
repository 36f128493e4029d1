"""
Rest Handler - rest, smith, or a relic-granted rest site action.

Options:
- rest: heal 30% of max HP (forbidden by Coffee Dripper)
- smith: upgrade a card (forbidden by Fusion Hammer)
- toke: remove a card (Peace Pipe)
- lift: gain Strength (Girya)
- dig: obtain a relic (Shovel)

HP counts as critical below an act-keyed ratio (50% / 60% / 70%); at
critical HP resting is a must and everything else steps down.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..calc.composition import DeckComposition, analyze_deck
from ..config import HP_FULL, HP_MODERATE, REST_HEAL_FRACTION, REST_HP_THRESHOLDS
from ..content.cards import CardType, is_basic_defend, is_basic_strike
from ..content.catalog import ReferenceData
from ..recommendations import RemovalPriority, RestPriority
from ..state.run import RunState
from .shop_handler import rank_removals

logger = logging.getLogger(__name__)


class RestAction(Enum):
    REST = "rest"
    SMITH = "smith"
    TOKE = "toke"
    LIFT = "lift"
    DIG = "dig"


# Upgrades that change a card the most
KEY_UPGRADES = frozenset([
    "bash", "neutralize", "survivor", "pommel_strike", "anger",
    "seeing_red", "offering", "spot_weakness", "limit_break",
    "dark_shackles", "deflect", "prepared", "backflip", "footwork",
    "dagger_spray", "terror", "catalyst", "wraith_form",
    "zap", "dualcast", "coolheaded", "seek", "defragment",
    "echo_form", "eruption", "vigilance", "conclude", "scrawl",
])
# Played every fight
CORE_UPGRADES = frozenset(["bash", "neutralize", "survivor", "zap", "dualcast", "eruption", "vigilance"])
COST_REDUCTION_UPGRADES = frozenset(["seeing_red", "offering", "dagger_throw", "prepared", "coolheaded"])

BASE_UPGRADE_PRIORITY = 5
STARTER_UPGRADE_PRIORITY = 6
POWER_UPGRADE_PRIORITY = 8
CORE_UPGRADE_PRIORITY = 9
KEY_UPGRADE_PRIORITY = 10


@dataclass(frozen=True)
class UpgradeCandidate:
    instance_id: str
    card_id: str
    name: str
    priority: int
    tier_rating: float
    reason: str


@dataclass(frozen=True)
class RestOption:
    action: RestAction
    priority: RestPriority
    reasons: Tuple[str, ...]
    hp_gain: int = 0
    target: Optional[str] = None


@dataclass(frozen=True)
class RestAdvice:
    """Rest site options, best first."""
    options: Tuple[RestOption, ...]
    hp_critical: bool
    strategy: str

    @property
    def best(self) -> RestOption:
        return self.options[0]

    def option_for(self, action: RestAction) -> Optional[RestOption]:
        return next((o for o in self.options if o.action == action), None)


def is_hp_critical(state: RunState) -> bool:
    threshold = REST_HP_THRESHOLDS.get(state.act, max(REST_HP_THRESHOLDS.values()))
    return state.hp_ratio < threshold


def rest_heal(max_hp: int) -> int:
    return int(max_hp * REST_HEAL_FRACTION)


def upgrade_priorities(state: RunState, data: ReferenceData) -> List[UpgradeCandidate]:
    """
    Unupgraded deck cards in upgrade order.

    Order: priority (key upgrades, core cards, powers), then tier rating,
    then deck order. Curses, statuses and unknown cards are skipped.
    """
    candidates = []
    for instance in state.deck:
        if instance.upgraded:
            continue
        card = data.card(instance.card_id)
        if card is None or card.is_dead:
            continue

        priority, reason = BASE_UPGRADE_PRIORITY, "Upgrade improves effectiveness"
        if card.id in KEY_UPGRADES:
            priority, reason = KEY_UPGRADE_PRIORITY, "Critical upgrade; significantly improves the card"
        if card.card_type == CardType.POWER and priority < POWER_UPGRADE_PRIORITY:
            priority, reason = POWER_UPGRADE_PRIORITY, "Power upgrade lasts the entire combat"
        if state.act == 1 and (is_basic_strike(card.id) or is_basic_defend(card.id)):
            priority, reason = STARTER_UPGRADE_PRIORITY, "Starter card; upgrade before replacing"
        if card.id in CORE_UPGRADES and priority < CORE_UPGRADE_PRIORITY:
            priority, reason = CORE_UPGRADE_PRIORITY, "Core card played every fight"
        if card.id in COST_REDUCTION_UPGRADES and priority < CORE_UPGRADE_PRIORITY:
            priority, reason = CORE_UPGRADE_PRIORITY, "Upgrade reduces its energy cost"

        candidates.append(UpgradeCandidate(
            instance_id=instance.instance_id, card_id=card.id, name=card.name,
            priority=priority, tier_rating=card.tier_rating, reason=reason,
        ))

    candidates.sort(key=lambda c: (-c.priority, -c.tier_rating))
    return candidates


def _rest_option(state: RunState, critical: bool) -> RestOption:
    heal = min(rest_heal(state.max_hp), state.max_hp - state.current_hp)
    percent = int(state.hp_ratio * 100)
    hp_text = f"{state.current_hp}/{state.max_hp} ({percent}%)"

    if state.has_relic("coffee_dripper"):
        return RestOption(RestAction.REST, RestPriority.AVOID,
                          ("Coffee Dripper: you cannot rest",), hp_gain=0)
    if critical:
        return RestOption(RestAction.REST, RestPriority.MUST_DO,
                          (f"CRITICAL HP: {hp_text}", f"Heal {heal} HP to survive upcoming fights"),
                          hp_gain=heal)
    if state.hp_ratio < HP_FULL:
        return RestOption(RestAction.REST, RestPriority.STRONG,
                          (f"HP: {hp_text}", f"Heal {heal} HP for safety"), hp_gain=heal)
    return RestOption(RestAction.REST, RestPriority.AVOID,
                      (f"High HP: {hp_text}", "Don't waste this rest site; upgrade instead"),
                      hp_gain=heal)


def _smith_option(state: RunState, data: ReferenceData, critical: bool) -> RestOption:
    if state.has_relic("fusion_hammer"):
        return RestOption(RestAction.SMITH, RestPriority.AVOID, ("Fusion Hammer: you cannot smith",))

    upgrades = upgrade_priorities(state, data)
    if not upgrades:
        return RestOption(RestAction.SMITH, RestPriority.AVOID, ("No cards to upgrade",))

    best = upgrades[0]
    if critical:
        priority = RestPriority.AVOID
        reasons = ("HP is too low; rest instead", f"Best upgrade would be: {best.name}")
    elif state.hp_ratio >= HP_FULL:
        priority = RestPriority.MUST_DO
        reasons = (f"HP is safe ({int(state.hp_ratio * 100)}%); upgrade for value",
                   f"Best: {best.name} - {best.reason}")
    elif state.hp_ratio >= HP_MODERATE and best.priority >= CORE_UPGRADE_PRIORITY:
        priority = RestPriority.STRONG
        reasons = ("High-value upgrade available", f"Best: {best.name} - {best.reason}")
    else:
        priority = RestPriority.CONSIDER
        reasons = (f"HP: {state.current_hp}/{state.max_hp}; upgrade if you feel safe",
                   f"Best: {best.name} - {best.reason}")
    return RestOption(RestAction.SMITH, priority, reasons, target=best.card_id)


def _toke_option(state: RunState, data: ReferenceData, composition: DeckComposition,
                 critical: bool) -> RestOption:
    removals = [a for a in rank_removals(state, data, composition) if a.removable]
    curse = next((a for a in removals if a.priority == RemovalPriority.MUST_REMOVE), None)
    strike = next((a for a in removals if is_basic_strike(a.card_id)), None)
    defend = next((a for a in removals if is_basic_defend(a.card_id)), None)

    if curse is not None:
        priority = RestPriority.STRONG if critical else RestPriority.MUST_DO
        return RestOption(RestAction.TOKE, priority, (f"Peace Pipe: remove {curse.name}",),
                          target=curse.card_id)
    if state.act >= 2 and strike is not None:
        priority = RestPriority.CONSIDER if critical else RestPriority.STRONG
        return RestOption(RestAction.TOKE, priority, ("Peace Pipe: remove a Strike",),
                          target=strike.card_id)
    if state.act >= 3 and defend is not None and composition.basic_defend_count > 3:
        return RestOption(RestAction.TOKE, RestPriority.CONSIDER, ("Peace Pipe: remove an extra Defend",),
                          target=defend.card_id)
    return RestOption(RestAction.TOKE, RestPriority.AVOID, ("Peace Pipe: no priority removals",))


def _lift_option(critical: bool) -> RestOption:
    if critical:
        return RestOption(RestAction.LIFT, RestPriority.CONSIDER,
                          ("Girya: gain 1 Strength", "HP is low; you might want to rest instead"))
    return RestOption(RestAction.LIFT, RestPriority.STRONG,
                      ("Girya: gain 1 Strength", "Permanent Strength scaling"))


def _dig_option(critical: bool) -> RestOption:
    if critical:
        return RestOption(RestAction.DIG, RestPriority.CONSIDER,
                          ("Shovel: dig for a relic", "HP is low; healing comes first"))
    return RestOption(RestAction.DIG, RestPriority.STRONG,
                      ("Shovel: dig for a relic", "A free relic beats a minor upgrade"))


def rest_strategy(options: Tuple[RestOption, ...]) -> str:
    top = options[0]
    if top.priority == RestPriority.MUST_DO:
        if top.action == RestAction.REST:
            headline = f"PRIORITY: REST (heal {top.hp_gain} HP)"
        elif top.target:
            headline = f"PRIORITY: {top.action.value.upper()} {top.target}"
        else:
            headline = f"PRIORITY: {top.action.value.upper()}"
        return "\n".join([headline, top.reasons[0]])

    lines = ["Rest site options:"]
    for option in options[:2]:
        if option.priority != RestPriority.AVOID:
            lines.append(f"- {option.action.value.upper()}: {option.reasons[0]}")
    if len(lines) == 1:
        lines.append("- No good options; take the least bad one")
    return "\n".join(lines)


def evaluate_rest_site(state: RunState, data: ReferenceData,
                       composition: Optional[DeckComposition] = None) -> RestAdvice:
    """Rank every action available at this rest site."""
    if composition is None:
        composition = analyze_deck(state.deck, data)
    critical = is_hp_critical(state)

    options = [_rest_option(state, critical), _smith_option(state, data, critical)]
    if state.has_relic("peace_pipe"):
        options.append(_toke_option(state, data, composition, critical))
    if state.has_relic("girya"):
        options.append(_lift_option(critical))
    if state.has_relic("shovel"):
        options.append(_dig_option(critical))

    options.sort(key=lambda o: o.priority.rank)
    logger.debug("Rest site on floor %d: %s", state.floor,
                 ", ".join(f"{o.action.value}={o.priority.value}" for o in options))
    ordered = tuple(options)
    return RestAdvice(options=ordered, hp_critical=critical, strategy=rest_strategy(ordered))
