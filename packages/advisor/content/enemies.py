"""
Monster Reference Catalog - stat blocks the combat readiness analyzer reads.

Each record summarizes a fight rather than simulating it:
- hp: display range ("40-44"); bosses use a single value
- attacks: named attacks with base damage, hit count and optional debuff
- abilities: ability keys (enrage, split, artifact, card_limit, ...) that
  trigger hard-coded strategy notes in handlers/combat.py
- requirements: what the deck needs on each axis (damage / block / scaling)
  on a low / medium / high scale
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Difficulty(Enum):
    """Fight difficulty class."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    ELITE = "elite"
    BOSS = "boss"


class RequirementLevel(Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def parse(cls, value: Any) -> "RequirementLevel":
        if isinstance(value, RequirementLevel):
            return value
        return cls[str(value).upper()]


@dataclass(frozen=True)
class MonsterAttack:
    name: str
    damage: int
    hits: int = 1
    effect: Optional[str] = None

    @property
    def total_damage(self) -> int:
        return self.damage * self.hits


@dataclass(frozen=True)
class DeckRequirements:
    """What a deck should bring to this fight."""
    damage: RequirementLevel = RequirementLevel.MEDIUM
    block: RequirementLevel = RequirementLevel.MEDIUM
    scaling: RequirementLevel = RequirementLevel.LOW


@dataclass(frozen=True)
class Monster:
    """A monster reference record."""
    id: str
    name: str
    act: int
    hp: str
    difficulty: Difficulty
    attacks: Tuple[MonsterAttack, ...] = ()
    abilities: Tuple[str, ...] = ()
    strategy: str = ""
    weaknesses: Tuple[str, ...] = ()
    dangers: Tuple[str, ...] = ()
    requirements: DeckRequirements = field(default_factory=DeckRequirements)

    @property
    def is_boss(self) -> bool:
        return self.difficulty == Difficulty.BOSS

    @property
    def is_elite(self) -> bool:
        return self.difficulty == Difficulty.ELITE

    @property
    def biggest_attack(self) -> Optional[MonsterAttack]:
        """The listed attack with the most total damage, if any."""
        return max(self.attacks, key=lambda attack: attack.total_damage, default=None)

    @property
    def max_hit(self) -> int:
        """Largest single-turn damage among listed attacks."""
        biggest = self.biggest_attack
        return biggest.total_damage if biggest is not None else 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Monster":
        """Build a monster from a JSON catalog entry."""
        requirements = data.get("requirements", data.get("deck_requirements", {}))
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            act=int(data.get("act", 1)),
            hp=str(data.get("hp", "")),
            difficulty=Difficulty(data.get("difficulty", "normal")),
            attacks=tuple(
                MonsterAttack(
                    name=a["name"], damage=int(a.get("damage", 0)),
                    hits=int(a.get("hits", 1)), effect=a.get("effect"),
                )
                for a in data.get("attacks", ())
            ),
            abilities=tuple(data.get("abilities", ())),
            strategy=data.get("strategy", ""),
            weaknesses=tuple(data.get("weaknesses", ())),
            dangers=tuple(data.get("dangers", ())),
            requirements=DeckRequirements(
                damage=RequirementLevel.parse(requirements.get("damage", "medium")),
                block=RequirementLevel.parse(requirements.get("block", "medium")),
                scaling=RequirementLevel.parse(requirements.get("scaling", "low")),
            ),
        )


LOW = RequirementLevel.LOW
MEDIUM = RequirementLevel.MEDIUM
HIGH = RequirementLevel.HIGH


def _needs(damage: RequirementLevel, block: RequirementLevel,
           scaling: RequirementLevel) -> DeckRequirements:
    return DeckRequirements(damage=damage, block=block, scaling=scaling)


# ============================================================================
# ACT 1 - EXORDIUM
# ============================================================================

CULTIST = Monster(
    id="cultist", name="Cultist", act=1, hp="48-54", difficulty=Difficulty.EASY,
    attacks=(MonsterAttack("Dark Strike", 6),),
    abilities=("strength_gain",),
    strategy="Gains Ritual on turn one; the fight gets harder every turn it lives.",
    weaknesses=("Does nothing on turn one",), dangers=("Damage ramps every turn",),
    requirements=_needs(MEDIUM, LOW, LOW),
)
JAW_WORM = Monster(
    id="jaw_worm", name="Jaw Worm", act=1, hp="40-44", difficulty=Difficulty.EASY,
    attacks=(MonsterAttack("Chomp", 11), MonsterAttack("Thrash", 7)),
    abilities=("strength_gain", "block_gain"),
    strategy="Bellow grants Strength and Block; push damage before it stacks.",
    weaknesses=("Low HP",), dangers=("Chomp hits hard for an early fight",),
    requirements=_needs(MEDIUM, LOW, LOW),
)
ACID_SLIME_L = Monster(
    id="acid_slime_l", name="Acid Slime (L)", act=1, hp="65-69", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Corrosive Spit", 11, effect="slimed"),
             MonsterAttack("Lick", 0, effect="weak")),
    abilities=("split", "status_cards"),
    strategy="Splits at half HP; bring it to just above half, then burst it down.",
    weaknesses=("Splits into smaller slimes with its current HP",),
    dangers=("Slimed cards clog your draw",),
    requirements=_needs(MEDIUM, LOW, LOW),
)
FUNGI_BEAST = Monster(
    id="fungi_beast", name="Fungi Beast", act=1, hp="22-28", difficulty=Difficulty.EASY,
    attacks=(MonsterAttack("Bite", 6),),
    abilities=("spore_cloud",),
    strategy="Applies Vulnerable to you when it dies; finish the fight without taking big hits.",
    requirements=_needs(LOW, LOW, LOW),
)
GREMLIN_GANG = Monster(
    id="gremlin_gang", name="Gremlin Gang", act=1, hp="10-25 each", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Scratch", 5), MonsterAttack("Smash", 9)),
    abilities=("multiple_enemies",),
    strategy="Four small enemies; kill the Gremlin Wizard and Fat Gremlin first.",
    dangers=("Many attacks at once",),
    requirements=_needs(MEDIUM, MEDIUM, LOW),
)
LOOTER = Monster(
    id="looter", name="Looter", act=1, hp="44-48", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Mug", 10),),
    abilities=("escape",),
    strategy="Steals gold each hit and escapes after a few turns; burst it early.",
    requirements=_needs(MEDIUM, LOW, LOW),
)
GREMLIN_NOB = Monster(
    id="gremlin_nob", name="Gremlin Nob", act=1, hp="82-86", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Rush", 14), MonsterAttack("Skull Bash", 6, effect="vulnerable")),
    abilities=("enrage",),
    strategy="Gains Strength whenever you play a Skill. Attack fast and skip blocking skills.",
    weaknesses=("Only punishes Skills",), dangers=("Enrage snowballs in long fights",),
    requirements=_needs(HIGH, LOW, LOW),
)
LAGAVULIN = Monster(
    id="lagavulin", name="Lagavulin", act=1, hp="109-111", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Attack", 18), MonsterAttack("Siphon Soul", 0, effect="strength_down")),
    abilities=("sleep", "siphon"),
    strategy="Sleeps for three turns; set up powers, then kill it before Siphon Soul stacks.",
    weaknesses=("Free setup turns while asleep",),
    dangers=("Siphon Soul drains Strength and Dexterity",),
    requirements=_needs(HIGH, MEDIUM, MEDIUM),
)
SENTRIES = Monster(
    id="sentries", name="Sentries", act=1, hp="38-42 each", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Beam", 9), MonsterAttack("Bolt", 0, effect="dazed")),
    abilities=("artifact", "status_cards", "multiple_enemies"),
    strategy="Three sentries alternate attacks and Dazed. Kill one flank first.",
    weaknesses=("Low individual HP",), dangers=("Dazed clogs draw",),
    requirements=_needs(MEDIUM, MEDIUM, LOW),
)
SLIME_BOSS = Monster(
    id="slime_boss", name="Slime Boss", act=1, hp="140", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Slam", 35), MonsterAttack("Goop Spray", 0, effect="slimed")),
    abilities=("split", "status_cards"),
    strategy="Splits at half HP. Deal big damage right before Slam and save AoE for the split.",
    weaknesses=("Telegraphs Slam two turns ahead",),
    dangers=("Slam hits for 35", "Split slimes overwhelm low-AoE decks"),
    requirements=_needs(HIGH, MEDIUM, LOW),
)
THE_GUARDIAN = Monster(
    id="the_guardian", name="The Guardian", act=1, hp="240", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Fierce Bash", 32), MonsterAttack("Whirlwind", 5, hits=4),
             MonsterAttack("Roll Attack", 9)),
    abilities=("mode_shift", "thorns"),
    strategy="Shifts into Defensive Mode after taking damage; stop attacking into Sharp Hide.",
    weaknesses=("Predictable cycle",), dangers=("Sharp Hide punishes attacks",),
    requirements=_needs(HIGH, MEDIUM, MEDIUM),
)
HEXAGHOST = Monster(
    id="hexaghost", name="Hexaghost", act=1, hp="250", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Divider", 6, hits=6), MonsterAttack("Sear", 6, effect="burn"),
             MonsterAttack("Inferno", 2, hits=6, effect="burn")),
    abilities=("multi_hit", "status_cards"),
    strategy="Divider scales with your HP; Inferno upgrades Burns. Block the big turns.",
    weaknesses=("Slow start",), dangers=("Divider at high HP", "Burns pile up"),
    requirements=_needs(HIGH, HIGH, MEDIUM),
)


# ============================================================================
# ACT 2 - THE CITY
# ============================================================================

CHOSEN = Monster(
    id="chosen", name="Chosen", act=2, hp="95-99", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Poke", 5, hits=2), MonsterAttack("Zap", 18)),
    abilities=("hex",),
    strategy="Hex adds Dazed whenever you play a non-Attack card; kill it fast.",
    requirements=_needs(HIGH, MEDIUM, LOW),
)
SNAKE_PLANT = Monster(
    id="snake_plant", name="Snake Plant", act=2, hp="75-79", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Chomp", 7, hits=3),),
    abilities=("malleable", "frail"),
    strategy="Malleable punishes multi-hit attacks; use big single hits.",
    requirements=_needs(MEDIUM, MEDIUM, LOW),
)
BYRDS = Monster(
    id="byrds", name="Byrds", act=2, hp="25-31 each", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Peck", 1, hits=5),),
    abilities=("flight", "multiple_enemies", "multi_hit"),
    strategy="Flight halves damage until broken by multiple hits; AoE and multi-hit shine.",
    requirements=_needs(MEDIUM, MEDIUM, LOW),
)
BOOK_OF_STABBING = Monster(
    id="book_of_stabbing", name="Book of Stabbing", act=2, hp="160-164",
    difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Multi-Stab", 6, hits=3), MonsterAttack("Single Stab", 21)),
    abilities=("multi_hit", "status_cards"),
    strategy="Stab count grows every turn and adds Wounds; bring heavy damage.",
    dangers=("Escalating multi-hit",),
    requirements=_needs(HIGH, HIGH, MEDIUM),
)
GREMLIN_LEADER = Monster(
    id="gremlin_leader", name="Gremlin Leader", act=2, hp="140-148",
    difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Stab", 6, hits=3),),
    abilities=("summon", "strength_gain", "multiple_enemies"),
    strategy="Summons gremlins and buffs them; focus the Leader unless gremlins swarm.",
    requirements=_needs(HIGH, MEDIUM, LOW),
)
SLAVERS = Monster(
    id="slavers", name="Slavers", act=2, hp="46-55 each", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Rake", 7, effect="weak"), MonsterAttack("Scrape", 8, effect="vulnerable")),
    abilities=("multiple_enemies", "entangle"),
    strategy="Taskmaster adds Wounds and the red Slaver can Entangle; kill the red one first.",
    requirements=_needs(HIGH, MEDIUM, LOW),
)
BRONZE_AUTOMATON = Monster(
    id="bronze_automaton", name="Bronze Automaton", act=2, hp="300", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Flail", 7, hits=2), MonsterAttack("Hyper Beam", 45)),
    abilities=("artifact", "summon"),
    strategy="Kill the Bronze Orbs before they Stasis your best card; block Hyper Beam.",
    dangers=("Hyper Beam hits for 45",),
    requirements=_needs(HIGH, HIGH, MEDIUM),
)
THE_CHAMP = Monster(
    id="the_champ", name="The Champ", act=2, hp="420", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Heavy Slash", 16), MonsterAttack("Execute", 10, hits=2),
             MonsterAttack("Face Slap", 12, effect="frail")),
    abilities=("strength_gain", "enrage_at_half"),
    strategy="Below half HP it cleanses debuffs, gains Strength and Executes every other turn.",
    weaknesses=("Weak blunts Execute",), dangers=("Execute phase",),
    requirements=_needs(HIGH, HIGH, MEDIUM),
)
THE_COLLECTOR = Monster(
    id="the_collector", name="The Collector", act=2, hp="282", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Fireball", 18),),
    abilities=("summon", "strength_gain", "multiple_enemies"),
    strategy="Summons Torch Heads and buffs everything; AoE keeps the board clear.",
    dangers=("Mega Debuff on turn four",),
    requirements=_needs(HIGH, MEDIUM, MEDIUM),
)


# ============================================================================
# ACT 3 - THE BEYOND
# ============================================================================

DARKLINGS = Monster(
    id="darklings", name="Darklings", act=3, hp="48-56 each", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Nip", 9), MonsterAttack("Chomp", 8, hits=2)),
    abilities=("revive", "multiple_enemies"),
    strategy="Darklings revive unless all die on the same turn; spread damage then AoE.",
    requirements=_needs(HIGH, MEDIUM, LOW),
)
ORB_WALKER = Monster(
    id="orb_walker", name="Orb Walker", act=3, hp="90-96", difficulty=Difficulty.NORMAL,
    attacks=(MonsterAttack("Laser", 10, effect="burn"), MonsterAttack("Claw", 15)),
    abilities=("strength_gain", "status_cards"),
    strategy="Gains Strength every turn; end it quickly.",
    requirements=_needs(HIGH, MEDIUM, LOW),
)
WRITHING_MASS = Monster(
    id="writhing_mass", name="Writhing Mass", act=3, hp="160", difficulty=Difficulty.HARD,
    attacks=(MonsterAttack("Multi-Strike", 7, hits=3), MonsterAttack("Implant", 0, effect="parasite")),
    abilities=("reactive", "malleable", "curse_cards"),
    strategy="Changes intent when hit and can implant Parasite; big single hits work best.",
    requirements=_needs(HIGH, MEDIUM, LOW),
)
GIANT_HEAD = Monster(
    id="giant_head", name="Giant Head", act=3, hp="500", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Count", 13), MonsterAttack("It Is Time", 30)),
    abilities=("slow",),
    strategy="Slow makes it take more damage per card played; play many cards before It Is Time.",
    requirements=_needs(HIGH, MEDIUM, MEDIUM),
)
NEMESIS = Monster(
    id="nemesis", name="Nemesis", act=3, hp="185", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Scythe", 45), MonsterAttack("Attack", 6, hits=3)),
    abilities=("intangible", "status_cards"),
    strategy="Intangible every other turn; spend those turns blocking and setting up.",
    requirements=_needs(HIGH, HIGH, MEDIUM),
)
REPTOMANCER = Monster(
    id="reptomancer", name="Reptomancer", act=3, hp="180-190", difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Snake Strike", 13, hits=2, effect="weak"), MonsterAttack("Big Bite", 30)),
    abilities=("summon", "multiple_enemies"),
    strategy="Summons daggers that hit hard; AoE or kill the Reptomancer quickly.",
    requirements=_needs(HIGH, HIGH, LOW),
)
AWAKENED_ONE = Monster(
    id="awakened_one", name="Awakened One", act=3, hp="300", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Slash", 20), MonsterAttack("Soul Strike", 6, hits=4),
             MonsterAttack("Dark Echo", 40)),
    abilities=("power_punish", "revive", "strength_gain"),
    strategy="Curiosity grants Strength whenever you play a Power; it revives with full HP.",
    dangers=("Two full health bars", "Power-heavy decks feed its Strength"),
    requirements=_needs(HIGH, HIGH, MEDIUM),
)
TIME_EATER = Monster(
    id="time_eater", name="Time Eater", act=3, hp="456", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Reverberate", 7, hits=3), MonsterAttack("Head Slam", 26, effect="slimed")),
    abilities=("card_limit",),
    strategy="Every 12 cards played ends your turn; favor high-impact cards over cheap filler.",
    dangers=("Zero-cost spam ends turns early",),
    requirements=_needs(HIGH, HIGH, MEDIUM),
)
DONU_AND_DECA = Monster(
    id="donu_and_deca", name="Donu and Deca", act=3, hp="250 each", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Beam", 10, hits=2, effect="dazed"),),
    abilities=("strength_gain", "artifact", "status_cards", "multiple_enemies"),
    strategy="Donu buffs Strength while Deca adds Dazed and Plated Armor; kill Donu first.",
    requirements=_needs(HIGH, HIGH, HIGH),
)


# ============================================================================
# ACT 4 - THE ENDING
# ============================================================================

SPIRE_SHIELD_AND_SPEAR = Monster(
    id="spire_shield_and_spear", name="Spire Shield and Spear", act=4, hp="110 / 160",
    difficulty=Difficulty.ELITE,
    attacks=(MonsterAttack("Skewer", 10, hits=3), MonsterAttack("Bash", 12, effect="strength_down")),
    abilities=("surrounded", "artifact", "multiple_enemies"),
    strategy="You are Surrounded; kill the Spear first and turn to face your target.",
    requirements=_needs(HIGH, HIGH, HIGH),
)
CORRUPT_HEART = Monster(
    id="corrupt_heart", name="Corrupt Heart", act=4, hp="750", difficulty=Difficulty.BOSS,
    attacks=(MonsterAttack("Blood Shots", 2, hits=12), MonsterAttack("Echo", 40)),
    abilities=("beat_of_death", "invincible", "strength_gain", "status_cards"),
    strategy="Beat of Death punishes every card played; Invincible caps damage per turn.",
    dangers=("Blood Shots through weak block", "Beat of Death on card spam"),
    requirements=_needs(HIGH, HIGH, HIGH),
)


# ============================================================================
# REGISTRY
# ============================================================================

ALL_MONSTERS: Dict[str, Monster] = {m.id: m for m in [
    CULTIST, JAW_WORM, ACID_SLIME_L, FUNGI_BEAST, GREMLIN_GANG, LOOTER, GREMLIN_NOB,
    LAGAVULIN, SENTRIES, SLIME_BOSS, THE_GUARDIAN, HEXAGHOST,
    CHOSEN, SNAKE_PLANT, BYRDS, BOOK_OF_STABBING, GREMLIN_LEADER, SLAVERS,
    BRONZE_AUTOMATON, THE_CHAMP, THE_COLLECTOR,
    DARKLINGS, ORB_WALKER, WRITHING_MASS, GIANT_HEAD, NEMESIS, REPTOMANCER,
    AWAKENED_ONE, TIME_EATER, DONU_AND_DECA,
    SPIRE_SHIELD_AND_SPEAR, CORRUPT_HEART,
]}

# Boss pool per act
ACT_BOSSES: Dict[int, Tuple[str, ...]] = {
    1: ("slime_boss", "the_guardian", "hexaghost"),
    2: ("bronze_automaton", "the_champ", "the_collector"),
    3: ("awakened_one", "time_eater", "donu_and_deca"),
    4: ("corrupt_heart",),
}


def get_monster(monster_id: str) -> Monster:
    """Get a monster by id."""
    if monster_id not in ALL_MONSTERS:
        raise ValueError(f"Unknown monster: {monster_id}")
    return ALL_MONSTERS[monster_id]


def get_monsters_for_act(act: int) -> List[Monster]:
    return [m for m in ALL_MONSTERS.values() if m.act == act]
