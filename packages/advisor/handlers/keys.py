"""
Keys Handler - whether to take the emerald, ruby or sapphire key.

Each key replaces a reward:
- emerald: offered at rest sites instead of resting or smithing
- ruby: offered at treasure chests instead of the chest contents
- sapphire: offered after elites instead of the relic

Holding the other two keys always makes the third a high priority.
Otherwise priority follows act, HP ratio and relic count; a weak deck
knocks any non-completing recommendation down one step. Keys already
obtained are omitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..calc.deck_health import DeckHealthReport, analyze_deck_health
from ..config import (
    EMERALD_UNUPGRADED_LIMITS,
    HP_CRITICAL,
    HP_HALF,
    HP_HEALTHY,
    HP_LOW,
    HP_MODERATE,
    KEY_WEAK_DECK_HEALTH,
    RUBY_EARLY_RELICS,
    RUBY_LATE_RELICS,
    RUBY_MID_RELICS,
)
from ..content.catalog import ReferenceData
from ..recommendations import KeyPriority
from ..state.run import KEYS, RunState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyAdvice:
    key: str
    priority: KeyPriority
    reason: str


def _unupgraded_count(state: RunState, data: ReferenceData) -> int:
    count = 0
    for instance in state.deck:
        card = data.card(instance.card_id)
        if not instance.upgraded and (card is None or not card.is_dead):
            count += 1
    return count


def _percent(state: RunState) -> int:
    return round(state.hp_ratio * 100)


def _emerald(state: RunState, data: ReferenceData) -> Tuple[KeyPriority, str]:
    act, hp = state.act, state.hp_ratio
    if act == 1:
        return KeyPriority.LOW, "Act 1: too early; you need upgrades and rest more than keys"
    if hp < HP_LOW:
        return KeyPriority.AVOID, f"Low HP ({_percent(state)}%); resting is critical, skip the emerald key"

    unupgraded = _unupgraded_count(state, data)
    if act >= 3:
        if hp > HP_HEALTHY and unupgraded < EMERALD_UNUPGRADED_LIMITS[3]:
            return KeyPriority.HIGH, (f"High HP ({_percent(state)}%) and few unupgraded cards; "
                                      "safe to take the emerald key")
        if hp > HP_HALF:
            return KeyPriority.MEDIUM, f"Decent HP ({_percent(state)}%); consider the emerald key"
        return KeyPriority.LOW, "HP is middling; heal or upgrade first"
    if hp > HP_HEALTHY and unupgraded < EMERALD_UNUPGRADED_LIMITS[2]:
        return KeyPriority.MEDIUM, f"Act 2, high HP ({_percent(state)}%); you can afford to skip a rest"
    return KeyPriority.LOW, f"Act 2 with {unupgraded} unupgraded cards; upgrades come first"


def _ruby(state: RunState, data: ReferenceData) -> Tuple[KeyPriority, str]:
    act, relic_count = state.act, len(state.relics)
    if act == 1:
        if relic_count < RUBY_EARLY_RELICS:
            return KeyPriority.AVOID, "Act 1 with few relics; chest rewards are critical, skip the ruby key"
        return KeyPriority.LOW, "Too early; build strength first"
    if act >= 3:
        if relic_count >= RUBY_LATE_RELICS:
            return KeyPriority.HIGH, f"{relic_count} relics; you're strong enough to skip a chest"
        return KeyPriority.MEDIUM, "The ruby key is worth a chest to reach the final act"
    if relic_count >= RUBY_MID_RELICS and state.hp_ratio > HP_MODERATE:
        return KeyPriority.MEDIUM, f"{relic_count} relics and decent HP; you can skip a chest"
    return KeyPriority.LOW, f"Act 2 with only {relic_count} relics; chest rewards are still valuable"


def _sapphire(state: RunState, data: ReferenceData) -> Tuple[KeyPriority, str]:
    act, hp = state.act, state.hp_ratio
    if hp < HP_CRITICAL:
        return KeyPriority.AVOID, (f"Very low HP ({_percent(state)}%) after the elite; "
                                   "you might not survive to use the key")
    if act == 1:
        return KeyPriority.MEDIUM, "The sapphire key only costs an elite relic; safe to take early"
    if act >= 3:
        return KeyPriority.HIGH, "Last chance before the boss; take the sapphire key"
    if hp > HP_HALF:
        return KeyPriority.HIGH, f"Decent HP ({_percent(state)}%); the sapphire key is low-cost"
    return KeyPriority.MEDIUM, "The sapphire key is cheap; consider taking it"


KEY_RULES: Dict[str, Callable[[RunState, ReferenceData], Tuple[KeyPriority, str]]] = {
    "emerald": _emerald,
    "ruby": _ruby,
    "sapphire": _sapphire,
}


def _step_down(priority: KeyPriority) -> KeyPriority:
    members = list(KeyPriority)
    return members[min(priority.rank + 1, len(members) - 1)]


def evaluate_key(key: str, state: RunState, data: ReferenceData,
                 health: Optional[DeckHealthReport] = None) -> KeyAdvice:
    """Advice for one key. Raises ValueError for anything but the three keys."""
    if key not in KEY_RULES:
        raise ValueError(f"Unknown key: {key}")

    others = [k for k in KEYS if k != key]
    if all(state.has_key(k) for k in others):
        names = " and ".join(k.capitalize() for k in others)
        return KeyAdvice(key, KeyPriority.HIGH, f"You have the {names} keys; take this one to unlock the final act")

    priority, reason = KEY_RULES[key](state, data)
    if health is None:
        health = analyze_deck_health(state, data)
    if health.overall_score < KEY_WEAK_DECK_HEALTH and priority in (KeyPriority.HIGH, KeyPriority.MEDIUM):
        priority = _step_down(priority)
        reason = f"{reason} (deck health {health.overall_score:g}/100 argues for the reward instead)"
    return KeyAdvice(key, priority, reason)


def evaluate_keys(state: RunState, data: ReferenceData,
                  health: Optional[DeckHealthReport] = None) -> Tuple[KeyAdvice, ...]:
    """Advice for every key not yet obtained, in emerald/ruby/sapphire order."""
    missing = [k for k in KEYS if not state.has_key(k)]
    if missing and health is None:
        health = analyze_deck_health(state, data)
    return tuple(evaluate_key(k, state, data, health) for k in missing)
