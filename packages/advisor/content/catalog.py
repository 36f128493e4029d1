"""
ReferenceData - the read-only catalog handle every evaluator receives.

Build it once (default_reference_data() for the bundled catalogs, or
ReferenceData.from_json() for an external file) and pass it into each
evaluator call. Lookups return None for unknown ids so evaluators can fall
back to neutral results instead of raising.
"""

import json
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .archetypes import ALL_ARCHETYPES, ArchetypeDefinition
from .blessings import ALL_BLESSINGS, Blessing
from .cards import ALL_CARDS, Card, Character, resolve_card_id
from .enemies import ACT_BOSSES, ALL_MONSTERS, Monster
from .events import ALL_EVENTS, Event
from .potions import ALL_POTIONS, Potion
from .relics import ALL_RELICS, Relic

logger = logging.getLogger(__name__)


def _freeze(records: Iterable[Any]) -> Mapping[str, Any]:
    return MappingProxyType({record.id: record for record in records})


class ReferenceData:
    """Identifier-keyed, read-only views over the reference catalogs."""

    def __init__(
        self,
        cards: Iterable[Card] = (),
        relics: Iterable[Relic] = (),
        potions: Iterable[Potion] = (),
        monsters: Iterable[Monster] = (),
        events: Iterable[Event] = (),
        blessings: Iterable[Blessing] = (),
        archetypes: Iterable[ArchetypeDefinition] = (),
        act_bosses: Optional[Mapping[int, Tuple[str, ...]]] = None,
    ):
        self.cards = _freeze(cards)
        self.relics = _freeze(relics)
        self.potions = _freeze(potions)
        self.monsters = _freeze(monsters)
        self.events = _freeze(events)
        self.blessings = _freeze(blessings)
        self.archetypes: Tuple[ArchetypeDefinition, ...] = tuple(archetypes)
        self.act_bosses = MappingProxyType(dict(act_bosses or {}))

    def __repr__(self) -> str:
        return (
            f"ReferenceData(cards={len(self.cards)}, relics={len(self.relics)}, "
            f"potions={len(self.potions)}, monsters={len(self.monsters)}, "
            f"events={len(self.events)}, blessings={len(self.blessings)}, "
            f"archetypes={len(self.archetypes)})"
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def card(self, card_id: str) -> Optional[Card]:
        card = self.cards.get(card_id)
        if card is None:
            card = self.cards.get(resolve_card_id(card_id))
        return card

    def relic(self, relic_id: str) -> Optional[Relic]:
        return self.relics.get(relic_id)

    def potion(self, potion_id: str) -> Optional[Potion]:
        return self.potions.get(potion_id)

    def monster(self, monster_id: str) -> Optional[Monster]:
        return self.monsters.get(monster_id)

    def event(self, event_id: str) -> Optional[Event]:
        return self.events.get(event_id)

    def blessing(self, blessing_id: str) -> Optional[Blessing]:
        return self.blessings.get(blessing_id)

    def archetypes_for(self, character: Character) -> Tuple[ArchetypeDefinition, ...]:
        return tuple(a for a in self.archetypes if a.character == character)

    def bosses_for_act(self, act: int) -> Tuple[str, ...]:
        return tuple(self.act_bosses.get(act, ()))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReferenceData":
        """Build from a parsed catalog document; missing sections are empty."""
        act_bosses = {
            int(act): tuple(ids) for act, ids in data.get("act_bosses", {}).items()
        }
        return cls(
            cards=[Card.from_dict(c) for c in data.get("cards", ())],
            relics=[Relic.from_dict(r) for r in data.get("relics", ())],
            potions=[Potion.from_dict(p) for p in data.get("potions", ())],
            monsters=[Monster.from_dict(m) for m in data.get("monsters", ())],
            events=[Event.from_dict(e) for e in data.get("events", ())],
            blessings=[Blessing.from_dict(b) for b in data.get("blessings", ())],
            archetypes=[ArchetypeDefinition.from_dict(a) for a in data.get("archetypes", ())],
            act_bosses=act_bosses,
        )

    @classmethod
    def from_json(cls, path: str) -> "ReferenceData":
        """Load an external catalog file."""
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Catalog {path} must contain a JSON object")
        reference = cls.from_dict(data)
        logger.info("Loaded catalog %s: %r", path, reference)
        return reference


@lru_cache(maxsize=1)
def default_reference_data() -> ReferenceData:
    """The bundled catalogs, built once."""
    return ReferenceData(
        cards=ALL_CARDS.values(),
        relics=ALL_RELICS.values(),
        potions=ALL_POTIONS.values(),
        monsters=ALL_MONSTERS.values(),
        events=ALL_EVENTS.values(),
        blessings=ALL_BLESSINGS.values(),
        archetypes=ALL_ARCHETYPES,
        act_bosses=ACT_BOSSES,
    )
