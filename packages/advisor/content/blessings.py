"""
Blessing Reference Catalog - start-of-run (Neow) bonuses.

Descriptions are the in-game text; handlers/blessing.py classifies the
action a blessing needs from that text, so external catalogs only have to
supply id, name and description.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Blessing:
    id: str
    name: str
    description: str
    drawback: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Blessing":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            description=data.get("description", ""),
            drawback=data.get("drawback"),
        )


ALL_BLESSINGS: Dict[str, Blessing] = {b.id: b for b in [
    # Free bonuses
    Blessing("three_cards", "Choose a Card", "Choose a card to obtain."),
    Blessing("one_random_rare_card", "Random Rare Card", "Choose a rare card to obtain."),
    Blessing("colorless_card", "Colorless Card", "Choose a colorless card to obtain."),
    Blessing("remove_card", "Remove a Card", "Remove a card from your deck."),
    Blessing("upgrade_card", "Upgrade a Card", "Upgrade any card in your deck."),
    Blessing("transform_card", "Transform a Card", "Transform a card in your deck."),
    Blessing("random_common_relic", "Common Relic", "Obtain a random common relic."),
    Blessing("hundred_gold", "Gold", "Obtain 100 gold."),
    Blessing("ten_percent_hp_bonus", "Max HP", "Raise your max HP by 10%."),
    Blessing("three_enemy_kill", "Neow's Lament", "Enemies in your next three combats have 1 HP."),
    Blessing("three_small_potions", "Potions", "Obtain 3 random potions."),
    # Trades
    Blessing("remove_two", "Remove Two Cards", "Remove 2 cards from your deck.",
             drawback="Lose some max HP."),
    Blessing("transform_two_cards", "Transform Two Cards", "Transform 2 cards in your deck.",
             drawback="Lose some max HP."),
    Blessing("three_rare_cards", "Rare Card Pick", "Choose a rare card to obtain.",
             drawback="Obtain a curse."),
    Blessing("one_rare_relic", "Rare Relic", "Obtain a random rare relic.",
             drawback="Lose all gold."),
    Blessing("two_fifty_gold", "Large Gold", "Obtain 250 gold.", drawback="Lose some max HP."),
    Blessing("twenty_percent_hp_bonus", "Large Max HP", "Raise your max HP by 20%.",
             drawback="Obtain a curse."),
    Blessing("boss_relic", "Boss Swap", "Lose your starting relic. Obtain a random boss relic."),
]}


def get_blessing(blessing_id: str) -> Blessing:
    """Get a blessing by id."""
    if blessing_id not in ALL_BLESSINGS:
        raise ValueError(f"Unknown blessing: {blessing_id}")
    return ALL_BLESSINGS[blessing_id]
