"""
Event Reference Catalog - "?" room events and their choices.

Choice costs are what the player pays up front:
- gold_cost: gold spent; ALL_GOLD (-1) means "give everything"
- hp_cost: current HP lost
- max_hp_cost / max_hp_fraction: permanent max HP lost (flat or fraction)
- required_relic: relic that must be owned for the choice to exist

The per-choice advice lives in handlers/event_handler.py.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


ALL_GOLD = -1


@dataclass(frozen=True)
class EventChoice:
    id: str
    label: str
    outcome: str = ""
    gold_cost: int = 0
    hp_cost: int = 0
    max_hp_cost: int = 0
    max_hp_fraction: float = 0.0
    required_relic: Optional[str] = None

    @property
    def costs_all_gold(self) -> bool:
        return self.gold_cost == ALL_GOLD

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventChoice":
        return cls(
            id=data["id"],
            label=data.get("label", data.get("description", data["id"])),
            outcome=data.get("outcome", ""),
            gold_cost=int(data.get("gold_cost", 0)),
            hp_cost=int(data.get("hp_cost", 0)),
            max_hp_cost=int(data.get("max_hp_cost", 0)),
            max_hp_fraction=float(data.get("max_hp_fraction", 0.0)),
            required_relic=data.get("required_relic"),
        )


@dataclass(frozen=True)
class Event:
    """An event reference record."""
    id: str
    name: str
    description: str
    choices: Tuple[EventChoice, ...]
    acts: Tuple[int, ...] = (1, 2, 3)

    def choice(self, choice_id: str) -> Optional[EventChoice]:
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """Build an event from a JSON catalog entry."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            description=data.get("description", ""),
            choices=tuple(EventChoice.from_dict(c) for c in data.get("choices", ())),
            acts=tuple(data.get("acts", (1, 2, 3))),
        )


LEAVE = EventChoice("leave", "Leave", "Nothing happens")


def _event(event_id: str, name: str, description: str, *choices: EventChoice,
           acts: Tuple[int, ...] = (1, 2, 3)) -> Event:
    return Event(id=event_id, name=name, description=description, choices=choices, acts=acts)


ALL_EVENTS: Dict[str, Event] = {e.id: e for e in [
    _event(
        "golden_shrine", "Golden Shrine",
        "A shrine radiates golden light. You may make an offering.",
        EventChoice("pray", "Pray", "Gain 100 gold"),
        EventChoice("desecrate", "Desecrate", "Lose 50 gold, gain 275 gold", gold_cost=50),
        LEAVE,
    ),
    _event(
        "wing_statue", "Wing Statue",
        "A statue with outstretched wings. You may pray for removal.",
        EventChoice("remove", "Remove a card", "Lose 7 HP, remove 1 card from your deck", hp_cost=7),
        LEAVE,
        acts=(1,),
    ),
    _event(
        "shining_light", "Shining Light",
        "Two beams of light illuminate cards in your deck.",
        EventChoice("upgrade_two", "Enter the light", "Take damage, upgrade 2 random cards",
                    hp_cost=10),
        LEAVE,
        acts=(1,),
    ),
    _event(
        "world_of_goop", "World of Goop",
        "Everything is covered in slime. A strange portal beckons.",
        EventChoice("gold", "Take gold", "Gain 75 gold", hp_cost=11),
        EventChoice("curse", "Take curse for relic", "Gain 1 curse, gain 1 random relic"),
        LEAVE,
        acts=(1,),
    ),
    _event(
        "big_fish", "Big Fish",
        "A massive fish offers you a choice.",
        EventChoice("banana", "Banana (Max HP)", "Gain 5 Max HP"),
        EventChoice("donut", "Donut (Heal)", "Heal 33% of Max HP"),
        EventChoice("box", "Box (Relic)", "Gain 1 random relic and a curse"),
        acts=(1,),
    ),
    _event(
        "scrap_ooze", "Scrap Ooze",
        "A pile of scrap and ooze. You can dig through it.",
        EventChoice("dig", "Dig", "Lose 3 HP, chance to gain 1 random relic", hp_cost=3),
        LEAVE,
        acts=(1,),
    ),
    _event(
        "golden_idol", "Golden Idol",
        "A golden idol sits on a pedestal. Obtain it?",
        EventChoice("take", "Take the idol", "Gain the Golden Idol, then escape the trap"),
        LEAVE,
        acts=(1,),
    ),
    _event(
        "wheel_of_change", "Wheel of Change",
        "Spin the wheel for a random transformation.",
        EventChoice("spin", "Spin the wheel", "Random reward: gold, relic, heal, curse or removal"),
        LEAVE,
    ),
    _event(
        "match_and_keep", "Match and Keep!",
        "A strange game show! Match cards to win prizes.",
        EventChoice("play", "Play the game", "Matching game, keep the cards you match"),
        LEAVE,
    ),
    _event(
        "mushrooms", "Mushrooms",
        "Colorful mushrooms grow here. Eat one?",
        EventChoice("stomp", "Stomp", "Fight three Fungi Beasts, gain Odd Mushroom"),
        EventChoice("eat", "Eat a mushroom", "Heal 25% of Max HP, become cursed with Parasite"),
        acts=(1,),
    ),
    _event(
        "old_beggar", "Old Beggar",
        "An old beggar asks for gold.",
        EventChoice("give_75", "Give 75 gold", "Remove 1 card from your deck", gold_cost=75),
        EventChoice("give_all", "Give all gold", "Remove 2 cards from your deck", gold_cost=ALL_GOLD),
        EventChoice("refuse", "Refuse", "Obtain a curse"),
        acts=(2,),
    ),
    _event(
        "lab", "The Laboratory",
        "A mysterious laboratory with strange apparatus.",
        EventChoice("search", "Search", "Gain 2-3 random potions"),
        acts=(2,),
    ),
    _event(
        "nest", "Nest",
        "A bird nest with a golden egg.",
        EventChoice("smash", "Smash and grab", "Gain 99 gold"),
        EventChoice("stay", "Stay in line", "Lose 6 HP, gain Ritual Dagger", hp_cost=6),
        acts=(2,),
    ),
    _event(
        "cursed_tome", "Cursed Tome",
        "A book emanates dark energy.",
        EventChoice("read", "Read the book", "Lose 21 HP over several pages, obtain a book relic",
                    hp_cost=21),
        LEAVE,
        acts=(2,),
    ),
    _event(
        "face_trader", "Face Trader",
        "A mysterious figure offers to trade faces.",
        EventChoice("touch", "Touch", "Lose 10% Max HP as damage, gain 75 gold", hp_cost=8),
        EventChoice("trade", "Trade", "Gain a random face relic"),
        LEAVE,
        acts=(1, 2),
    ),
    _event(
        "vampire", "Vampires",
        "Mysterious vampires offer power at a price.",
        EventChoice("accept", "Accept their gift", "Lose 30% Max HP, remove all Strikes, gain 5 Bites",
                    max_hp_fraction=0.3),
        EventChoice("offer_vial", "Offer Blood Vial", "Lose Blood Vial, remove all Strikes, gain 5 Bites",
                    required_relic="blood_vial"),
        EventChoice("refuse", "Refuse", "Nothing happens"),
        acts=(2,),
    ),
    _event(
        "the_moai_head", "The Moai Head",
        "A giant stone head with a gaping mouth.",
        EventChoice("jump_in", "Jump inside", "Lose 12.5% Max HP, heal to full",
                    max_hp_fraction=0.125),
        EventChoice("offer_idol", "Offer Golden Idol", "Lose Golden Idol, gain 333 gold",
                    required_relic="golden_idol"),
        LEAVE,
        acts=(3,),
    ),
    _event(
        "knowing_skull", "Knowing Skull",
        "A skull offers riches in exchange for your blood.",
        EventChoice("potion", "Ask for a potion", "Lose 6 HP, gain a potion", hp_cost=6),
        EventChoice("gold", "Ask for gold", "Lose 6 HP, gain 90 gold", hp_cost=6),
        EventChoice("card", "Ask for a card", "Lose 6 HP, gain a colorless card", hp_cost=6),
        EventChoice("leave", "Leave", "Lose 6 HP", hp_cost=6),
        acts=(2,),
    ),
    _event(
        "purifier", "Purifier",
        "A quiet shrine offers cleansing.",
        EventChoice("pray", "Pray", "Remove 1 card from your deck"),
        LEAVE,
    ),
    _event(
        "upgrade_shrine", "Upgrade Shrine",
        "A shrine hums with power.",
        EventChoice("pray", "Pray", "Upgrade 1 card"),
        LEAVE,
    ),
    _event(
        "council_of_ghosts", "Council of Ghosts",
        "Ghosts offer to share their incorporeal form.",
        EventChoice("accept", "Accept", "Lose 50% Max HP, gain 5 Apparitions", max_hp_fraction=0.5),
        EventChoice("refuse", "Refuse", "Nothing happens"),
        acts=(2,),
    ),
]}


def get_event(event_id: str) -> Event:
    """Get an event by id."""
    if event_id not in ALL_EVENTS:
        raise ValueError(f"Unknown event: {event_id}")
    return ALL_EVENTS[event_id]
