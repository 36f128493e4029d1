"""
Deck calculations shared by the advisors.

Contains:
- Deck composition summary (pure, recomputed on every call)
- Archetype detection
- Deck health report card
- Relic start-of-combat buffs
"""

from .composition import DeckComposition, DeckEntry, analyze_deck, entry_card_id

from .archetypes import DetectedArchetype, detect_archetypes, score_archetype, top_archetype

from .deck_health import (
    CATEGORY_ORDER,
    DeckHealthReport,
    HealthCategory,
    analyze_deck_health,
    estimate_win_rate,
)

from .relic_buffs import BUFF_RULES, RelicBuffs, calculate_relic_buffs
