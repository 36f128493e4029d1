"""
Relic combat buffs - static start-of-combat bonuses granted by relics.

Each relic that grants a buff is registered with a small handler that adds
to a RelicBuffs accumulator. Most of them follow the same "gain N of X at
battle start" pattern and are built with simple_buff(); conditional ones
(Red Skull) register their own handler.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from ..config import HP_HALF


@dataclass
class RelicBuffs:
    """Buffs active at the start of a combat."""
    strength: int = 0
    dexterity: int = 0
    starting_block: int = 0
    thorns: int = 0
    vigor: int = 0
    first_turn_energy: int = 0
    enemy_vulnerable: int = 0
    notes: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.notes

    def summary(self) -> str:
        parts = []
        for label, amount in (
            ("Strength", self.strength),
            ("Dexterity", self.dexterity),
            ("Block", self.starting_block),
            ("Thorns", self.thorns),
            ("Vigor", self.vigor),
            ("Energy (turn 1)", self.first_turn_energy),
        ):
            if amount > 0:
                parts.append(f"+{amount} {label}")
        if self.enemy_vulnerable > 0:
            parts.append(f"{self.enemy_vulnerable} Vulnerable on enemies")
        return ", ".join(parts) if parts else "None"


BuffHandler = Callable[[RelicBuffs, int, int], None]

BUFF_RULES: Dict[str, BuffHandler] = {}


def buff_rule(relic_id: str):
    """Register a buff handler: handler(buffs, current_hp, max_hp)."""
    def decorator(func: BuffHandler) -> BuffHandler:
        BUFF_RULES[relic_id] = func
        return func
    return decorator


def simple_buff(relic_id: str, attribute: str, amount: int, note: str,
                condition: Optional[Callable[[int, int], bool]] = None) -> BuffHandler:
    """Factory for relics that add a flat amount of one buff."""
    @buff_rule(relic_id)
    def handler(buffs: RelicBuffs, current_hp: int, max_hp: int) -> None:
        if condition is None or condition(current_hp, max_hp):
            setattr(buffs, attribute, getattr(buffs, attribute) + amount)
            buffs.notes.append(note)

    return handler


simple_buff("vajra", "strength", 1, "Vajra: +1 Strength")
simple_buff("oddly_smooth_stone", "dexterity", 1, "Oddly Smooth Stone: +1 Dexterity")
simple_buff("anchor", "starting_block", 10, "Anchor: +10 Block")
simple_buff("bronze_scales", "thorns", 3, "Bronze Scales: 3 Thorns")
simple_buff("lantern", "first_turn_energy", 1, "Lantern: +1 Energy on turn 1")
simple_buff("bag_of_marbles", "enemy_vulnerable", 1, "Bag of Marbles: 1 Vulnerable to ALL enemies")
simple_buff("akabeko", "vigor", 8, "Akabeko: 8 Vigor")
simple_buff(
    "red_skull", "strength", 3, "Red Skull: +3 Strength (HP at or below 50%)",
    condition=lambda current_hp, max_hp: current_hp <= max_hp * HP_HALF,
)


def calculate_relic_buffs(relics: Iterable[str], current_hp: int, max_hp: int) -> RelicBuffs:
    """Accumulate the start-of-combat buffs of the given relics."""
    buffs = RelicBuffs()
    for relic_id in relics:
        handler = BUFF_RULES.get(relic_id)
        if handler is not None:
            handler(buffs, current_hp, max_hp)
    return buffs
