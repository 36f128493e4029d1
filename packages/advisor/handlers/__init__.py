"""
Advisors, one per decision point.

Reward Handlers:
- evaluate_card / rank_card_rewards: card reward screen
- evaluate_relic / evaluate_boss_relic / rank_boss_relics: relic rewards

Fight Handlers:
- evaluate_combat_readiness: a specific monster
- analyze_boss_preparation: the act boss checklist

Room Handlers:
- evaluate_event: per-choice event ratings
- evaluate_shop / rank_removals / should_remove_at_shop: shop and removal
- evaluate_rest_site: rest, smith, toke, lift, dig
- generate_path_strategy: map node priorities
- evaluate_keys: emerald/ruby/sapphire keys
- rank_blessings / blessing_removal_targets: start-of-run bonuses
"""

from .card_reward import CardEvaluation, ScoreFactor, evaluate_card, rank_card_rewards, score_card
from .relic_reward import (
    BOSS_RELIC_RULES,
    RELIC_RULES,
    RelicEvaluation,
    evaluate_boss_relic,
    evaluate_relic,
    rank_boss_relics,
)
from .combat import CombatReadiness, combat_tips, deck_capability, evaluate_combat_readiness
from .boss import BOSS_RULES, BossPreparation, BossRequirement, analyze_boss_preparation
from .event_handler import EVENT_RULES, ChoiceAdvice, EventAdvice, evaluate_event
from .shop_handler import (
    RemovalAdvice,
    RemovalDecision,
    ShopAdvice,
    ShopItem,
    ShopRecommendation,
    evaluate_shop,
    rank_removals,
    removal_candidates,
    removal_cost,
    should_remove_at_shop,
)
from .path import NodeType, PathRecommendation, PathStrategy, generate_path_strategy
from .rest import RestAction, RestAdvice, RestOption, evaluate_rest_site, upgrade_priorities
from .keys import KeyAdvice, evaluate_key, evaluate_keys
from .blessing import (
    BlessingAction,
    BlessingAdvice,
    blessing_removal_targets,
    classify_blessing,
    evaluate_blessing,
    rank_blessings,
)
