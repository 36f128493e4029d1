"""
Advisory Engine - Simple API Entry Point

A curated set of exports for common use cases. Every evaluator takes the
reference data handle explicitly; build it once and pass it everywhere.

Quick Start Examples:

1. Rate a card reward for a starter deck:
    ```python
    from packages.advisor.api import default_reference_data, create_starter_run, evaluate_card
    from packages.advisor.api import Character

    data = default_reference_data()
    run = create_starter_run(Character.IRONCLAD)
    advice = evaluate_card("inflame", run.deck, data, run.relics, run.character)
    print(advice.priority, advice.reason)
    ```

2. Summarize a saved run snapshot:
    ```python
    import json
    from packages.advisor.api import RunState, default_reference_data, summarize_run

    with open("run.json") as f:
        run = RunState.from_dict(json.load(f))
    summary = summarize_run(run, default_reference_data())
    print(summary.health.grade, summary.path.general_strategy)
    ```

3. Use a custom catalog:
    ```python
    from packages.advisor.api import ReferenceData

    data = ReferenceData.from_json("my_catalog.json")
    ```
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

# Reference data
from .content.catalog import ReferenceData, default_reference_data
from .content.cards import Card, CardType, CardRarity, Character, get_card
from .content.relics import Relic, RelicTier, get_relic
from .content.potions import Potion, get_potion
from .content.enemies import Monster, get_monster
from .content.events import Event, EventChoice, get_event
from .content.blessings import Blessing, get_blessing

# Run state
from .state.run import CardInstance, RunState, create_starter_run, make_deck

# Recommendation vocabulary
from .recommendations import (
    Priority,
    RelicPriority,
    RemovalPriority,
    ShopPriority,
    EventRating,
    Readiness,
    NodePriority,
    RiskLevel,
    KeyPriority,
    RestPriority,
    Grade,
    to_jsonable,
)

# Deck calculations
from .calc.composition import DeckComposition, analyze_deck
from .calc.archetypes import DetectedArchetype, detect_archetypes, top_archetype
from .calc.deck_health import DeckHealthReport, analyze_deck_health
from .calc.relic_buffs import RelicBuffs, calculate_relic_buffs

# Advisors
from .handlers.card_reward import CardEvaluation, evaluate_card, rank_card_rewards
from .handlers.relic_reward import RelicEvaluation, evaluate_boss_relic, evaluate_relic, rank_boss_relics
from .handlers.combat import CombatReadiness, evaluate_combat_readiness
from .handlers.boss import BossPreparation, analyze_boss_preparation
from .handlers.event_handler import EventAdvice, evaluate_event
from .handlers.shop_handler import (
    RemovalAdvice,
    RemovalDecision,
    ShopAdvice,
    ShopItem,
    evaluate_shop,
    rank_removals,
    should_remove_at_shop,
)
from .handlers.path import NodeType, PathStrategy, generate_path_strategy
from .handlers.rest import RestAction, RestAdvice, evaluate_rest_site
from .handlers.keys import KeyAdvice, evaluate_keys
from .handlers.blessing import BlessingAdvice, blessing_removal_targets, rank_blessings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Dashboard view of a run: health, build, boss and path in one record."""
    character: Character
    floor: int
    act: int
    floors_until_boss: int
    current_hp: int
    max_hp: int
    gold: int
    health: DeckHealthReport
    build: Optional[DetectedArchetype]
    archetypes: Tuple[DetectedArchetype, ...]
    boss: BossPreparation
    path: PathStrategy


def summarize_run(state: RunState, data: ReferenceData) -> RunSummary:
    """Deck health, detected build, boss preparation and path strategy for a run."""
    composition = analyze_deck(state.deck, data)
    health = analyze_deck_health(state, data, composition)
    archetypes = detect_archetypes(state.deck, data, state.character, composition)
    logger.debug("Summarizing floor %d run: health %.1f, %d archetype(s)",
                 state.floor, health.overall_score, len(archetypes))
    return RunSummary(
        character=state.character,
        floor=state.floor,
        act=state.act,
        floors_until_boss=state.floors_until_boss,
        current_hp=state.current_hp,
        max_hp=state.max_hp,
        gold=state.gold,
        health=health,
        build=archetypes[0] if archetypes else None,
        archetypes=tuple(archetypes),
        boss=analyze_boss_preparation(state, data, composition),
        path=generate_path_strategy(state, data, composition, health),
    )


__all__ = [
    # Reference data
    "ReferenceData", "default_reference_data",
    "Card", "CardType", "CardRarity", "Character", "get_card",
    "Relic", "RelicTier", "get_relic",
    "Potion", "get_potion",
    "Monster", "get_monster",
    "Event", "EventChoice", "get_event",
    "Blessing", "get_blessing",
    # Run state
    "CardInstance", "RunState", "create_starter_run", "make_deck",
    # Vocabulary
    "Priority", "RelicPriority", "RemovalPriority", "ShopPriority", "EventRating",
    "Readiness", "NodePriority", "RiskLevel", "KeyPriority", "RestPriority", "Grade",
    "to_jsonable",
    # Calculations
    "DeckComposition", "analyze_deck",
    "DetectedArchetype", "detect_archetypes", "top_archetype",
    "DeckHealthReport", "analyze_deck_health",
    "RelicBuffs", "calculate_relic_buffs",
    # Advisors
    "CardEvaluation", "evaluate_card", "rank_card_rewards",
    "RelicEvaluation", "evaluate_relic", "evaluate_boss_relic", "rank_boss_relics",
    "CombatReadiness", "evaluate_combat_readiness",
    "BossPreparation", "analyze_boss_preparation",
    "EventAdvice", "evaluate_event",
    "RemovalAdvice", "RemovalDecision", "ShopAdvice", "ShopItem",
    "evaluate_shop", "rank_removals", "should_remove_at_shop",
    "NodeType", "PathStrategy", "generate_path_strategy",
    "RestAction", "RestAdvice", "evaluate_rest_site",
    "KeyAdvice", "evaluate_keys",
    "BlessingAdvice", "blessing_removal_targets", "rank_blessings",
    # Summary
    "RunSummary", "summarize_run",
]
