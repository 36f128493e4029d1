"""
Blessing Handler - start-of-run bonuses.

A blessing's action is read from its description text, so catalogs loaded
from JSON only need id, name and description. Offered blessings are rated
on the card/relic 0-5 scale and bucketed the same way; "remove N cards"
blessings pick their targets with the shop removal ranking.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..config import NEUTRAL_RATING, RATING_MAX, RATING_MIN
from ..content.blessings import Blessing
from ..content.catalog import ReferenceData
from ..recommendations import Priority, clamp, priority_for_rating
from ..state.run import RunState
from .shop_handler import RemovalAdvice, removal_candidates

logger = logging.getLogger(__name__)


class BlessingAction(Enum):
    CHOOSE_CARD = "choose_card"
    CHOOSE_RARE_CARD = "choose_rare_card"
    CHOOSE_COLORLESS_CARD = "choose_colorless_card"
    CHOOSE_POTIONS = "choose_potions"
    CHOOSE_RARE_RELIC = "choose_rare_relic"
    CHOOSE_COMMON_RELIC = "choose_common_relic"
    BOSS_SWAP = "boss_swap"
    REMOVE_CARD = "remove_card"
    REMOVE_2_CARDS = "remove_2_cards"
    UPGRADE_CARD = "upgrade_card"
    TRANSFORM_CARD = "transform_card"
    TRANSFORM_2_CARDS = "transform_2_cards"
    GAIN_GOLD = "gain_gold"
    MAX_HP = "max_hp"
    NONE = "none"


ACTION_DESCRIPTIONS = {
    BlessingAction.CHOOSE_CARD: "Choose 1 card to add to your deck",
    BlessingAction.CHOOSE_RARE_CARD: "Choose 1 rare card to add to your deck",
    BlessingAction.CHOOSE_COLORLESS_CARD: "Choose 1 colorless card to add to your deck",
    BlessingAction.CHOOSE_POTIONS: "Obtain 3 potions",
    BlessingAction.CHOOSE_RARE_RELIC: "Obtain 1 rare relic",
    BlessingAction.CHOOSE_COMMON_RELIC: "Obtain 1 common relic",
    BlessingAction.BOSS_SWAP: "Swap your starting relic for a random boss relic",
    BlessingAction.REMOVE_CARD: "Choose 1 card to remove from your deck",
    BlessingAction.REMOVE_2_CARDS: "Choose 2 cards to remove from your deck",
    BlessingAction.UPGRADE_CARD: "Choose 1 card to upgrade",
    BlessingAction.TRANSFORM_CARD: "Choose 1 card to transform into a random card",
    BlessingAction.TRANSFORM_2_CARDS: "Choose 2 cards to transform into random cards",
    BlessingAction.GAIN_GOLD: "Gold is added automatically",
    BlessingAction.MAX_HP: "Max HP is raised automatically",
    BlessingAction.NONE: "No action required; effects apply automatically",
}

# Base value of each action on the 0-5 rating scale
ACTION_RATINGS = {
    BlessingAction.CHOOSE_CARD: 2.5,
    BlessingAction.CHOOSE_RARE_CARD: 3.5,
    BlessingAction.CHOOSE_COLORLESS_CARD: 2.5,
    BlessingAction.CHOOSE_POTIONS: 2.0,
    BlessingAction.CHOOSE_RARE_RELIC: 4.0,
    BlessingAction.CHOOSE_COMMON_RELIC: 3.0,
    BlessingAction.BOSS_SWAP: 4.0,
    BlessingAction.REMOVE_CARD: 3.0,
    BlessingAction.REMOVE_2_CARDS: 3.5,
    BlessingAction.UPGRADE_CARD: 2.5,
    BlessingAction.TRANSFORM_CARD: 2.5,
    BlessingAction.TRANSFORM_2_CARDS: 3.0,
    BlessingAction.GAIN_GOLD: 2.0,
    BlessingAction.MAX_HP: 2.0,
    BlessingAction.NONE: 2.5,
}

CARD_CHOICES = 3
RELIC_CHOICES = 3
LARGE_GOLD = 200
LARGE_GOLD_BONUS = 1.0
LARGE_MAX_HP_PERCENT = 20
LARGE_MAX_HP_BONUS = 0.5
CURSE_PENALTY = 1.0
MAX_HP_LOSS_PENALTY = 0.5
LOSE_GOLD_PENALTY = 0.5
CURSE_REMOVAL_BONUS = 1.0


@dataclass(frozen=True)
class BlessingAdvice:
    blessing_id: str
    name: str
    action: BlessingAction
    rating: float
    priority: Priority
    reasons: Tuple[str, ...] = ()


def _text(blessing: Blessing) -> str:
    return " ".join(filter(None, [blessing.description, blessing.drawback])).lower()


def adds_curse(blessing: Blessing) -> bool:
    text = _text(blessing)
    return "obtain a curse" in text or "gain a curse" in text or "curse." in text


def classify_blessing(blessing: Blessing) -> BlessingAction:
    """The action a blessing needs, from its description."""
    desc = blessing.description.lower()

    if "choose a rare card" in desc:
        return BlessingAction.CHOOSE_RARE_CARD
    if "choose a" in desc and "colorless" in desc:
        return BlessingAction.CHOOSE_COLORLESS_CARD
    if "choose a card" in desc:
        return BlessingAction.CHOOSE_CARD
    if "random potions" in desc:
        return BlessingAction.CHOOSE_POTIONS
    if "boss relic" in desc:
        return BlessingAction.BOSS_SWAP
    if "rare relic" in desc:
        return BlessingAction.CHOOSE_RARE_RELIC
    if "common relic" in desc:
        return BlessingAction.CHOOSE_COMMON_RELIC
    if "remove 2 cards" in desc:
        return BlessingAction.REMOVE_2_CARDS
    if "remove a card" in desc:
        return BlessingAction.REMOVE_CARD
    if "upgrade any card" in desc or "upgrade a card" in desc:
        return BlessingAction.UPGRADE_CARD
    if "transform 2 cards" in desc:
        return BlessingAction.TRANSFORM_2_CARDS
    if "transform a card" in desc:
        return BlessingAction.TRANSFORM_CARD
    if "gold" in desc and "obtain" in desc:
        return BlessingAction.GAIN_GOLD
    if "max hp" in desc:
        return BlessingAction.MAX_HP
    return BlessingAction.NONE


def action_description(action: BlessingAction) -> str:
    return ACTION_DESCRIPTIONS[action]


def card_choice_count(action: BlessingAction) -> int:
    if action in (BlessingAction.CHOOSE_CARD, BlessingAction.CHOOSE_RARE_CARD,
                  BlessingAction.CHOOSE_COLORLESS_CARD):
        return CARD_CHOICES
    return 0


def relic_choice_count(action: BlessingAction) -> int:
    if action in (BlessingAction.CHOOSE_RARE_RELIC, BlessingAction.CHOOSE_COMMON_RELIC):
        return RELIC_CHOICES
    return 0


def removal_count(action: BlessingAction) -> int:
    if action == BlessingAction.REMOVE_2_CARDS:
        return 2
    if action == BlessingAction.REMOVE_CARD:
        return 1
    return 0


def _first_number(text: str) -> Optional[int]:
    match = re.search(r"\d+", text)
    return int(match.group()) if match else None


def evaluate_blessing(blessing_id: str, state: RunState, data: ReferenceData) -> BlessingAdvice:
    blessing = data.blessing(blessing_id)
    if blessing is None:
        logger.debug("Blessing %s not in catalog; using neutral rating", blessing_id)
        return BlessingAdvice(
            blessing_id=blessing_id, name=blessing_id, action=BlessingAction.NONE,
            rating=NEUTRAL_RATING, priority=priority_for_rating(NEUTRAL_RATING),
            reasons=("Unknown blessing; no rating data",),
        )

    action = classify_blessing(blessing)
    rating = ACTION_RATINGS[action]
    reasons = [action_description(action)]
    desc = blessing.description.lower()
    drawback = (blessing.drawback or "").lower()

    if action == BlessingAction.GAIN_GOLD:
        amount = _first_number(desc) or 0
        if amount >= LARGE_GOLD:
            rating += LARGE_GOLD_BONUS
            reasons.append(f"{amount} gold buys an early relic or removal")
    elif action == BlessingAction.MAX_HP:
        percent = _first_number(desc) or 0
        if percent >= LARGE_MAX_HP_PERCENT:
            rating += LARGE_MAX_HP_BONUS
    elif removal_count(action):
        curses = _dead_instances(state, data)
        if curses:
            rating += CURSE_REMOVAL_BONUS
            reasons.append(f"Removes {len(curses)} curse(s) or status card(s)")
        else:
            reasons.append("Thins Strikes/Defends out of the starter deck")
    elif action == BlessingAction.BOSS_SWAP:
        reasons.append("High variance: the boss relic may not fit your deck")

    if adds_curse(blessing):
        rating -= CURSE_PENALTY
        reasons.append("Adds a curse to your deck")
    if "max hp" in drawback and "lose" in drawback:
        rating -= MAX_HP_LOSS_PENALTY
        reasons.append("Costs max HP")
    if "lose all gold" in drawback and state.gold > 0:
        rating -= LOSE_GOLD_PENALTY
        reasons.append(f"Costs your {state.gold} gold")

    rating = round(clamp(rating, RATING_MIN, RATING_MAX), 2)
    return BlessingAdvice(
        blessing_id=blessing.id, name=blessing.name, action=action, rating=rating,
        priority=priority_for_rating(rating), reasons=tuple(reasons),
    )


def _dead_instances(state: RunState, data: ReferenceData) -> List[str]:
    dead = []
    for instance in state.deck:
        card = data.card(instance.card_id)
        if card is not None and card.is_dead:
            dead.append(instance.instance_id)
    return dead


def rank_blessings(blessing_ids: Sequence[str], state: RunState,
                   data: ReferenceData) -> List[BlessingAdvice]:
    """Offered blessings, best first; ties keep the offered order."""
    advice = [evaluate_blessing(b, state, data) for b in blessing_ids]
    advice.sort(key=lambda a: -a.rating)
    return advice


def blessing_removal_targets(blessing_id: str, state: RunState,
                             data: ReferenceData) -> List[RemovalAdvice]:
    """Cards a "remove N cards" blessing should take, from the shop removal ranking."""
    blessing = data.blessing(blessing_id)
    if blessing is None:
        return []
    return removal_candidates(state, data, removal_count(classify_blessing(blessing)))
