"""
Run State Snapshot - the read-only view of a run the advisor evaluates.

Tracks everything the evaluators need:
1. Deck as card instances (duplicates are separate instances)
2. Relics, potions, gold, HP, ascension
3. Floor, from which act and floors-until-boss are derived

The advisor never mutates a RunState; callers build a new snapshot after
every change (card added, relic gained, floor climbed) and re-run the
evaluators.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from ..config import ACT_BOSS_FLOORS, FINAL_ACT
from ..content.cards import Character, STARTER_DECKS, normalize_card_id
from ..content.relics import STARTER_RELIC_FOR


KEYS = ("emerald", "ruby", "sapphire")

BASE_HP: Dict[Character, int] = {
    Character.IRONCLAD: 80,
    Character.SILENT: 70,
    Character.DEFECT: 75,
    Character.WATCHER: 72,
}
BASE_STARTING_GOLD = 99


# ============================================================================
# ACT / FLOOR ARITHMETIC
# ============================================================================

def act_for_floor(floor: int) -> int:
    """Act a floor belongs to; the boss floor closes its act."""
    for act in sorted(ACT_BOSS_FLOORS):
        if floor <= ACT_BOSS_FLOORS[act]:
            return act
    return FINAL_ACT


def boss_floor_for_act(act: int) -> int:
    act = min(max(act, 1), FINAL_ACT)
    return ACT_BOSS_FLOORS[act]


def floors_until_boss(floor: int) -> int:
    """Floors left before the current act's boss (0 on the boss floor)."""
    return max(0, boss_floor_for_act(act_for_floor(floor)) - floor)


# ============================================================================
# SNAPSHOT
# ============================================================================

@dataclass(frozen=True)
class CardInstance:
    """
    A card in the deck (may be upgraded).

    Cards are tracked by instance, not just id, because removal and upgrades
    target one specific copy.
    """
    instance_id: str
    card_id: str
    upgraded: bool = False

    def __repr__(self) -> str:
        suffix = "+" if self.upgraded else ""
        return f"{self.card_id}{suffix}"

    def to_dict(self) -> Dict[str, Any]:
        return {"instance_id": self.instance_id, "id": self.card_id, "upgraded": self.upgraded}


def make_deck(card_ids: List[str], prefix: str = "card") -> Tuple[CardInstance, ...]:
    """Build instances from snapshot ids ("bash+" marks an upgrade)."""
    instances = []
    for index, raw_id in enumerate(card_ids):
        card_id, upgraded = normalize_card_id(raw_id)
        instances.append(CardInstance(f"{prefix}-{index}", card_id, upgraded))
    return tuple(instances)


@dataclass(frozen=True)
class RunState:
    """
    Snapshot of a run in progress.

    act, floors_until_boss and boss_floor are derived from floor using the
    fixed act boundaries (16 / 33 / 52, Heart at 56).
    """
    character: Character
    deck: Tuple[CardInstance, ...] = ()
    relics: Tuple[str, ...] = ()
    potions: Tuple[str, ...] = ()
    floor: int = 1
    ascension: int = 0
    current_hp: int = 80
    max_hp: int = 80
    gold: int = BASE_STARTING_GOLD

    # Ascension keys already obtained
    keys: Tuple[str, ...] = ()

    # Act boss, when the map has revealed it
    boss: Optional[str] = None

    # Card removals bought so far (shop removal price grows per purchase)
    cards_removed: int = 0

    def __post_init__(self):
        object.__setattr__(self, "deck", tuple(self.deck))
        object.__setattr__(self, "relics", tuple(self.relics))
        object.__setattr__(self, "potions", tuple(self.potions))
        object.__setattr__(self, "keys", tuple(self.keys))

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def act(self) -> int:
        return act_for_floor(self.floor)

    @property
    def boss_floor(self) -> int:
        return boss_floor_for_act(self.act)

    @property
    def floors_until_boss(self) -> int:
        return floors_until_boss(self.floor)

    @property
    def hp_ratio(self) -> float:
        return self.current_hp / max(self.max_hp, 1)

    @property
    def card_ids(self) -> List[str]:
        return [card.card_id for card in self.deck]

    def count_card(self, card_id: str) -> int:
        return sum(1 for card in self.deck if card.card_id == card_id)

    def has_relic(self, relic_id: str) -> bool:
        return relic_id in self.relics

    def has_key(self, key: str) -> bool:
        return key in self.keys

    def with_changes(self, **changes) -> "RunState":
        """New snapshot with some fields replaced."""
        return replace(self, **changes)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "character": self.character.value,
            "deck": [card.to_dict() for card in self.deck],
            "relics": list(self.relics),
            "potions": list(self.potions),
            "floor": self.floor,
            "ascension": self.ascension,
            "current_hp": self.current_hp,
            "max_hp": self.max_hp,
            "gold": self.gold,
            "keys": list(self.keys),
            "cards_removed": self.cards_removed,
        }
        if self.boss is not None:
            data["boss"] = self.boss
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunState":
        """
        Parse a JSON run snapshot.

        Deck entries are either ids ("bash", "bash+") or objects with
        id / upgraded / instance_id. Raises KeyError when character is
        missing and ValueError for unknown characters or keys.
        """
        character = Character(str(data["character"]).lower())
        deck = []
        for index, entry in enumerate(data.get("deck", ())):
            if isinstance(entry, str):
                card_id, upgraded = normalize_card_id(entry)
                instance_id = f"card-{index}"
            else:
                card_id, upgraded = normalize_card_id(entry["id"])
                upgraded = bool(entry.get("upgraded", upgraded))
                instance_id = str(entry.get("instance_id", f"card-{index}"))
            deck.append(CardInstance(instance_id, card_id, upgraded))

        keys = tuple(data.get("keys", ()))
        for key in keys:
            if key not in KEYS:
                raise ValueError(f"Unknown key: {key}")

        max_hp = int(data.get("max_hp", BASE_HP.get(character, 80)))
        return cls(
            character=character,
            deck=tuple(deck),
            relics=tuple(data.get("relics", ())),
            potions=tuple(data.get("potions", ())),
            floor=int(data.get("floor", 1)),
            ascension=int(data.get("ascension", 0)),
            current_hp=int(data.get("current_hp", max_hp)),
            max_hp=max_hp,
            gold=int(data.get("gold", BASE_STARTING_GOLD)),
            keys=keys,
            boss=data.get("boss"),
            cards_removed=int(data.get("cards_removed", 0)),
        )


def create_starter_run(character: Character, ascension: int = 0) -> RunState:
    """
    Floor-1 run with the character's starter deck, relic and HP.

    Applies the ascension starting penalties: A6+ starts at 90% HP, A10+
    adds Ascender's Bane, A14+ lowers max HP by 4.
    """
    max_hp = BASE_HP[character]
    if ascension >= 14:
        max_hp -= 4
    current_hp = round(max_hp * 0.9) if ascension >= 6 else max_hp

    card_ids = list(STARTER_DECKS[character])
    if ascension >= 10:
        card_ids.append("ascenders_bane")

    return RunState(
        character=character,
        deck=make_deck(card_ids),
        relics=(STARTER_RELIC_FOR[character],),
        floor=1,
        ascension=ascension,
        current_hp=current_hp,
        max_hp=max_hp,
        gold=BASE_STARTING_GOLD,
    )
