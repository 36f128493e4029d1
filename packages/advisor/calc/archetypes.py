"""
Archetype Detector - which named builds the deck is growing into.

For each of the character's archetype definitions:
    raw      = 2 x key-card copies + 1 x recommended-card copies
    target   = 2 x expected_key + expected_support
    strength = clamp(round(100 * raw / target), 0, 100)

An archetype only qualifies once min_key_cards distinct key cards are in
the deck. Results sort by strength, then key cards present, then name.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..config import KEY_CARD_WEIGHT, STRENGTH_MAX, STRENGTH_MIN, SUPPORT_CARD_WEIGHT
from ..content.archetypes import ArchetypeDefinition
from ..content.cards import Character
from ..content.catalog import ReferenceData
from ..recommendations import clamp
from .composition import DeckComposition, DeckEntry, analyze_deck


@dataclass(frozen=True)
class DetectedArchetype:
    """Archetype advice: a qualifying build and how far along it is."""
    id: str
    name: str
    description: str
    strength: int
    key_cards_present: Tuple[str, ...]
    support_cards_present: Tuple[str, ...]
    key_cards: Tuple[str, ...]
    recommended_cards: Tuple[str, ...]

    @property
    def missing_key_cards(self) -> Tuple[str, ...]:
        return tuple(c for c in self.key_cards if c not in self.key_cards_present)


def score_archetype(definition: ArchetypeDefinition,
                    composition: DeckComposition) -> Optional[DetectedArchetype]:
    """Strength of one archetype, or None when it does not qualify."""
    key_present = tuple(c for c in definition.key_cards if composition.has_card(c))
    if len(key_present) < max(definition.min_key_cards, 1):
        return None
    support_present = tuple(c for c in definition.recommended_cards if composition.has_card(c))

    raw = (
        KEY_CARD_WEIGHT * sum(composition.copies(c) for c in key_present)
        + SUPPORT_CARD_WEIGHT * sum(composition.copies(c) for c in support_present)
    )
    target = KEY_CARD_WEIGHT * definition.expected_key + SUPPORT_CARD_WEIGHT * definition.expected_support
    strength = int(clamp(round(100 * raw / max(target, 1)), STRENGTH_MIN, STRENGTH_MAX))

    return DetectedArchetype(
        id=definition.id,
        name=definition.name,
        description=definition.description,
        strength=strength,
        key_cards_present=key_present,
        support_cards_present=support_present,
        key_cards=definition.key_cards,
        recommended_cards=definition.recommended_cards,
    )


def detect_archetypes(
    deck: Iterable[DeckEntry],
    data: ReferenceData,
    character: Character,
    composition: Optional[DeckComposition] = None,
) -> List[DetectedArchetype]:
    """All qualifying archetypes for the character, strongest first."""
    if composition is None:
        composition = analyze_deck(deck, data)
    detected = []
    for definition in data.archetypes_for(character):
        result = score_archetype(definition, composition)
        if result is not None:
            detected.append(result)
    detected.sort(key=lambda a: (-a.strength, -len(a.key_cards_present), a.name))
    return detected


def top_archetype(
    deck: Iterable[DeckEntry],
    data: ReferenceData,
    character: Character,
    composition: Optional[DeckComposition] = None,
) -> Optional[DetectedArchetype]:
    """The "Detected Build" shown in summaries."""
    detected = detect_archetypes(deck, data, character, composition)
    return detected[0] if detected else None
