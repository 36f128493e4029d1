"""
Deck Composition Analyzer - aggregate statistics every evaluator reads.

Recomputed from scratch on each call; decks are small (40 cards at most)
so there is no incremental state to keep in sync.

Counts are per instance: three Strikes count three times. Card ids that
are not in the catalog still count toward size and card_ids (so synergy
lookups see them) but toward no type, cost or tag bucket.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Union

from ..config import (
    FLAG_KEY_CARDS,
    FLAG_TAG_THRESHOLDS,
    HIGH_COST_MIN,
    LOW_COST_MAX,
    ORB_FLAG_COUNT,
)
from ..content.cards import (
    BLOCK, CYCLE, DRAW, ORB, SCALING, AOE, ENERGY, EXHAUST, FRONTLOAD, MULTI_HIT, WEAK,
    CardType, COST_X, is_basic_defend, is_basic_strike, normalize_card_id,
)
from ..content.catalog import ReferenceData
from ..state.run import CardInstance

logger = logging.getLogger(__name__)

DeckEntry = Union[CardInstance, str]


@dataclass(frozen=True)
class DeckComposition:
    """Composition summary of one deck."""
    size: int = 0

    # Type counts
    attack_count: int = 0
    skill_count: int = 0
    power_count: int = 0
    status_count: int = 0
    curse_count: int = 0
    unknown_count: int = 0

    # Cost curve (X-cost cards under COST_X; unplayable cards excluded)
    cost_distribution: Dict[int, int] = field(default_factory=dict)
    average_cost: float = 0.0
    low_cost_count: int = 0
    high_cost_count: int = 0
    zero_cost_count: int = 0

    # Capability tags, one count per tagged card
    tag_counts: Dict[str, int] = field(default_factory=dict)
    draw_count: int = 0

    # Identity
    card_ids: FrozenSet[str] = frozenset()
    card_counts: Dict[str, int] = field(default_factory=dict)
    upgraded_count: int = 0
    basic_strike_count: int = 0
    basic_defend_count: int = 0

    # Build flags (barricade, strength, poison, ...)
    flags: FrozenSet[str] = frozenset()

    # ------------------------------------------------------------------
    # Derived counts
    # ------------------------------------------------------------------

    def tag_count(self, tag: str) -> int:
        return self.tag_counts.get(tag, 0)

    def copies(self, card_id: str) -> int:
        return self.card_counts.get(card_id, 0)

    def has_card(self, card_id: str) -> bool:
        return card_id in self.card_ids

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    @property
    def basic_count(self) -> int:
        return self.basic_strike_count + self.basic_defend_count

    @property
    def dead_count(self) -> int:
        """Curses plus statuses."""
        return self.status_count + self.curse_count

    @property
    def block_count(self) -> int:
        return self.tag_count(BLOCK)

    @property
    def scaling_count(self) -> int:
        return self.tag_count(SCALING)

    @property
    def aoe_count(self) -> int:
        return self.tag_count(AOE)

    @property
    def energy_count(self) -> int:
        return self.tag_count(ENERGY)

    @property
    def exhaust_count(self) -> int:
        return self.tag_count(EXHAUST)

    @property
    def frontload_count(self) -> int:
        return self.tag_count(FRONTLOAD)

    @property
    def multi_hit_count(self) -> int:
        return self.tag_count(MULTI_HIT)

    @property
    def weak_count(self) -> int:
        return self.tag_count(WEAK)

    # ------------------------------------------------------------------
    # Ratios (0.0 for an empty deck)
    # ------------------------------------------------------------------

    def _ratio(self, count: int) -> float:
        return count / self.size if self.size else 0.0

    @property
    def attack_ratio(self) -> float:
        return self._ratio(self.attack_count)

    @property
    def skill_ratio(self) -> float:
        return self._ratio(self.skill_count)

    @property
    def power_ratio(self) -> float:
        return self._ratio(self.power_count)

    @property
    def block_ratio(self) -> float:
        return self._ratio(self.block_count)

    @property
    def low_cost_ratio(self) -> float:
        return self._ratio(self.low_cost_count)

    @property
    def high_cost_ratio(self) -> float:
        return self._ratio(self.high_cost_count)

    @property
    def upgraded_ratio(self) -> float:
        return self._ratio(self.upgraded_count)

    @property
    def basic_ratio(self) -> float:
        return self._ratio(self.basic_count)


def _entry_id(entry: DeckEntry):
    if isinstance(entry, CardInstance):
        return entry.card_id, entry.upgraded
    return normalize_card_id(entry)


def entry_card_id(entry: DeckEntry) -> str:
    """Catalog id of a deck entry, upgrade marker stripped."""
    return _entry_id(entry)[0]


def _build_flags(card_ids: FrozenSet[str], tag_counts: Dict[str, int]) -> FrozenSet[str]:
    flags = set()
    for flag, key_cards in FLAG_KEY_CARDS.items():
        if any(card_id in card_ids for card_id in key_cards):
            flags.add(flag)
    for flag, (tag, needed) in FLAG_TAG_THRESHOLDS.items():
        if tag_counts.get(tag, 0) >= needed:
            flags.add(flag)
    if tag_counts.get(ORB, 0) >= ORB_FLAG_COUNT:
        flags.add("orb_focus")
    return frozenset(flags)


def analyze_deck(deck: Iterable[DeckEntry], data: ReferenceData) -> DeckComposition:
    """
    Compute the composition summary of a deck.

    Args:
        deck: CardInstance objects or snapshot ids ("bash+")
        data: reference catalogs

    Returns:
        DeckComposition for the deck; an empty deck yields all zeros
    """
    type_counts: Counter = Counter()
    cost_distribution: Counter = Counter()
    tag_counts: Counter = Counter()
    card_counts: Counter = Counter()
    costs: List[int] = []
    size = unknown = upgraded = strikes = defends = draw = 0
    low_cost = high_cost = zero_cost = 0

    for entry in deck:
        card_id, is_upgraded = _entry_id(entry)
        size += 1
        card_counts[card_id] += 1
        if is_upgraded:
            upgraded += 1
        if is_basic_strike(card_id):
            strikes += 1
        elif is_basic_defend(card_id):
            defends += 1

        card = data.card(card_id)
        if card is None:
            logger.debug("Card %s not in catalog; counted by size only", card_id)
            unknown += 1
            continue

        type_counts[card.card_type] += 1
        for tag in card.tags:
            tag_counts[tag] += 1
        if DRAW in card.tags or CYCLE in card.tags:
            draw += 1

        if not card.is_playable:
            continue
        cost_distribution[card.cost] += 1
        if card.cost == COST_X:
            continue
        costs.append(card.cost)
        if card.cost <= LOW_COST_MAX:
            low_cost += 1
        if card.cost >= HIGH_COST_MIN:
            high_cost += 1
        if card.cost == 0:
            zero_cost += 1

    card_ids = frozenset(card_counts)
    return DeckComposition(
        size=size,
        attack_count=type_counts[CardType.ATTACK],
        skill_count=type_counts[CardType.SKILL],
        power_count=type_counts[CardType.POWER],
        status_count=type_counts[CardType.STATUS],
        curse_count=type_counts[CardType.CURSE],
        unknown_count=unknown,
        cost_distribution=dict(sorted(cost_distribution.items())),
        average_cost=round(sum(costs) / len(costs), 2) if costs else 0.0,
        low_cost_count=low_cost,
        high_cost_count=high_cost,
        zero_cost_count=zero_cost,
        tag_counts=dict(sorted(tag_counts.items())),
        draw_count=draw,
        card_ids=card_ids,
        card_counts=dict(sorted(card_counts.items())),
        upgraded_count=upgraded,
        basic_strike_count=strikes,
        basic_defend_count=defends,
        flags=_build_flags(card_ids, tag_counts),
    )
