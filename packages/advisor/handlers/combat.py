"""
Combat Readiness Handler - deck-vs-monster matchup before a fight.

Compares what the deck brings on each axis (damage / block / scaling)
against the monster's declared requirements, then escalates for fight
difficulty, ascension and low HP:

    score = 100 - 25 per requirement level missing
                - 10 (heavy hit) / 25 (lethal hit)
                - 5 (elite) / 10 (boss) - 0.5 x ascension

    READY >= 75 > CAUTION >= 50 > DANGER

The attack pattern is read through its biggest hit: damage left after the
block the deck can muster (0/5/10/15 by block level) is heavy at half the
current HP and lethal at all of it. A lethal hit forces DANGER.

HP at or below 30% forces DANGER; below 50% drops the verdict one step.
A deck with nothing at all on an axis the monster rates HIGH is never
READY. The monster's listed dangers join the weaknesses and its own
weaknesses become "Exploit" recommendations.

Monster-specific strategy notes come from a rule table keyed by monster id;
unmapped monsters fall back to the catalog strategy text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..calc.composition import DeckComposition, analyze_deck
from ..calc.relic_buffs import RelicBuffs, calculate_relic_buffs
from ..config import (
    BLOCK_CAPABILITY_COUNTS,
    BOSS_READINESS_PENALTY,
    CAUTION_SCORE,
    DAMAGE_CAPABILITY_COUNTS,
    ELITE_READINESS_PENALTY,
    EXPECTED_BLOCK_BY_LEVEL,
    HEAVY_HIT_HP_SHARE,
    HEAVY_HIT_PENALTY,
    HP_CRITICAL,
    HP_HALF,
    HP_HEALTHY,
    HP_LOW,
    LETHAL_HIT_PENALTY,
    READINESS_ASCENSION_PENALTY,
    READY_SCORE,
    REQUIREMENT_DEFICIT_PENALTY,
    SCALING_CAPABILITY_COUNTS,
    SCORE_MAX,
    SCORE_MIN,
    URGENT_FLOORS,
)
from ..content.cards import Character
from ..content.catalog import ReferenceData
from ..content.enemies import Difficulty, Monster, MonsterAttack, RequirementLevel
from ..content.potions import DEFENSE, EMERGENCY, HEAL, OFFENSE
from ..recommendations import Readiness, clamp
from ..state.run import RunState

logger = logging.getLogger(__name__)

GENERIC_STRATEGY = "No specific notes for this fight; play to your deck's strengths."


@dataclass(frozen=True)
class CombatReadiness:
    """Readiness advice for one upcoming fight."""
    monster_id: str
    monster_name: str
    readiness: Readiness
    score: float
    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    potion_suggestions: Tuple[str, ...] = ()
    strategy: Tuple[str, ...] = ()
    tips: Tuple[str, ...] = ()
    buffs: RelicBuffs = field(default_factory=RelicBuffs)


# ============================================================================
# DECK CAPABILITY
# ============================================================================

def _level(count: int, thresholds: Sequence[int]) -> int:
    """0 (nothing) up to 3 (HIGH) from (low, medium, high) thresholds."""
    level = 0
    for needed in thresholds:
        if count >= needed:
            level += 1
    return level


def damage_sources(composition: DeckComposition) -> int:
    """Attack count weighted up for frontload/multi-hit/AoE, down for Strikes."""
    return (
        composition.attack_count + composition.frontload_count
        + composition.multi_hit_count + composition.aoe_count
        - composition.basic_strike_count // 2
    )


def deck_capability(composition: DeckComposition) -> Dict[str, int]:
    """Capability level (0-3) per requirement axis."""
    return {
        "damage": _level(damage_sources(composition), DAMAGE_CAPABILITY_COUNTS),
        "block": _level(composition.block_count, BLOCK_CAPABILITY_COUNTS),
        "scaling": _level(composition.scaling_count, SCALING_CAPABILITY_COUNTS),
    }


def _attack_text(attack: MonsterAttack) -> str:
    if attack.hits > 1:
        return f"{attack.name}, {attack.damage}x{attack.hits}"
    return f"{attack.name}, {attack.damage}"


def hit_through_block(attack: MonsterAttack, block_level: int) -> int:
    """Damage one attack deals after the block a deck of this level can muster."""
    return max(0, attack.total_damage - EXPECTED_BLOCK_BY_LEVEL[block_level])


def _requirement_levels(monster: Monster) -> Dict[str, RequirementLevel]:
    return {
        "damage": monster.requirements.damage,
        "block": monster.requirements.block,
        "scaling": monster.requirements.scaling,
    }


# ============================================================================
# STRATEGY RULES
# ============================================================================

StrategyRule = Callable[[Monster, DeckComposition, RunState], List[str]]

STRATEGY_RULES: Dict[str, StrategyRule] = {}


def strategy_rule(*monster_ids: str):
    """Register strategy notes for one or more monsters."""
    def decorator(func: StrategyRule) -> StrategyRule:
        for monster_id in monster_ids:
            STRATEGY_RULES[monster_id] = func
        return func
    return decorator


@strategy_rule("gremlin_nob")
def _gremlin_nob(monster, comp, state):
    notes = ["Skills give Nob Strength: open with attacks and save skills for emergencies."]
    if comp.skill_count > comp.attack_count:
        notes.append("Your deck is skill-heavy; expect Nob to snowball. Consider skipping this elite.")
    return notes


@strategy_rule("lagavulin")
def _lagavulin(monster, comp, state):
    notes = ["Lagavulin sleeps for 3 turns: play powers and set up before it wakes."]
    if comp.scaling_count == 0:
        notes.append("Siphon Soul drains Strength/Dexterity; without scaling, burst it down fast.")
    return notes


@strategy_rule("sentries")
def _sentries(monster, comp, state):
    notes = ["Kill one of the outer Sentries first to break the Dazed rhythm."]
    if comp.aoe_count:
        notes.append("Your AoE hits all three; line it up on the turn they all attack.")
    return notes


@strategy_rule("cultist")
def _cultist(monster, comp, state):
    return ["Kill it quickly: Ritual adds Strength every turn."]


@strategy_rule("slime_boss", "acid_slime_l")
def _slimes(monster, comp, state):
    notes = ["Splits at half HP: burst it down to just above 50% then finish with a big hit."]
    if comp.aoe_count == 0:
        notes.append("No AoE: the split slimes must be killed one at a time.")
    return notes


@strategy_rule("the_guardian")
def _guardian(monster, comp, state):
    return ["Count damage toward Mode Shift; in Defensive Mode stop multi-hit attacks (Thorns)."]


@strategy_rule("hexaghost")
def _hexaghost(monster, comp, state):
    notes = ["Inferno on turn 7 hits hard: have block ready and exhaust Burns when possible."]
    if state.hp_ratio > HP_HEALTHY:
        notes.append("Divider scales with your HP; high HP means a bigger turn-two hit.")
    return notes


@strategy_rule("book_of_stabbing")
def _book_of_stabbing(monster, comp, state):
    return ["Stab count grows each turn: Weak and burst damage shorten the fight."]


@strategy_rule("the_champ")
def _champ(monster, comp, state):
    notes = ["Below half HP Champ removes debuffs and executes: save burst for that phase."]
    if comp.weak_count == 0:
        notes.append("No Weak sources: Champ's hits will land at full power.")
    return notes


@strategy_rule("bronze_automaton")
def _automaton(monster, comp, state):
    return ["Hyper Beam lands on the turn after the orbs charge: block big or kill the orbs."]


@strategy_rule("the_collector", "gremlin_leader", "reptomancer")
def _summoner(monster, comp, state):
    return ["Summons keep coming; focus the summoner unless the adds threaten lethal."]


@strategy_rule("awakened_one")
def _awakened_one(monster, comp, state):
    notes = ["Every Power you play gives Awakened One Strength in phase one."]
    if comp.power_count > 3:
        notes.append(f"{comp.power_count} powers in deck: play only the essential ones.")
    return notes


@strategy_rule("time_eater")
def _time_eater(monster, comp, state):
    notes = ["Every 12th card ends your turn: favor fewer, bigger plays."]
    if comp.zero_cost_count > 5:
        notes.append("Many 0-cost cards: count plays carefully.")
    return notes


@strategy_rule("donu_and_deca")
def _donu_and_deca(monster, comp, state):
    return ["Kill Donu first; Deca's Dazed and block only matter while Donu buffs."]


@strategy_rule("corrupt_heart")
def _heart(monster, comp, state):
    notes = ["Beat of Death punishes every card played; Invincible caps damage per turn."]
    if comp.multi_hit_count > 8:
        notes.append("Heavy multi-hit deck: the damage cap wastes most hits.")
    return notes


@strategy_rule("nemesis")
def _nemesis(monster, comp, state):
    return ["Nemesis is Intangible every other turn: hit hard on the vulnerable turns."]


@strategy_rule("giant_head")
def _giant_head(monster, comp, state):
    return ["Slow makes each card you play amplify your damage; damage ramps late, so race it."]


ABILITY_NOTES: Dict[str, str] = {
    "artifact": "Artifact blocks your first debuffs; apply a cheap debuff before the important one.",
    "split": "Splits at half HP; plan damage around the split.",
    "status_cards": "Shuffles status cards into your deck; exhaust and draw help.",
    "multiple_enemies": "Multiple enemies: AoE damage pays off.",
    "thorns": "Thorns punish multi-hit attacks.",
    "enrage": "Skills make it stronger.",
    "strength_gain": "Gains Strength over time; end the fight quickly.",
    "escape": "Escapes with your gold if the fight drags on.",
    "curse_cards": "Can add curses to your deck.",
    "card_limit": "Limits how many cards you can play per turn.",
    "power_punish": "Punishes playing Powers.",
    "intangible": "Intangible turns reduce all damage to 1.",
}


def get_strategy_notes(monster: Monster, composition: DeckComposition,
                       state: RunState) -> List[str]:
    """Rule-table notes for a monster, or its catalog strategy text."""
    rule = STRATEGY_RULES.get(monster.id)
    if rule is not None:
        return rule(monster, composition, state)
    logger.debug("No strategy rule for %s; using catalog text", monster.id)
    return [monster.strategy or GENERIC_STRATEGY]


# ============================================================================
# TIPS
# ============================================================================

MONSTER_TIPS: Dict[str, str] = {
    "cultist": "PRIORITY: kill Cultist before its buffs stack.",
    "lagavulin": "Lagavulin sleeps for 3 turns; use the time to set up.",
    "gremlin_nob": "Gremlin Nob: avoid playing Skills, attack instead.",
    "sentries": "Sentries add Dazed; keep the deck lean and kill them quickly.",
}

CHARACTER_TIPS: Dict[Character, Tuple[Tuple[str, str], ...]] = {
    Character.IRONCLAD: (
        ("bash", "Use Bash early for Vulnerable (50% more damage)."),
        ("strength", "Stack Strength for big damage."),
        ("", "Build Strength for scaling damage."),
    ),
    Character.SILENT: (
        ("poison", "Apply Poison early, then block and let it tick."),
        ("shiv", "Play Shivs to trigger effects and deal chip damage."),
        ("", "Front-load damage early or build Poison for scaling."),
    ),
    Character.DEFECT: (
        ("frost", "Channel Frost orbs for passive block."),
        ("lightning", "Channel Lightning for passive damage each turn."),
        ("", "Channel orbs early to start scaling."),
    ),
    Character.WATCHER: (
        ("eruption", "Enter Wrath for double damage, then exit to Calm for energy."),
        ("", "Use stances: Wrath doubles damage, leaving Calm gives 2 energy."),
    ),
}


def _character_tip(character: Character, composition: DeckComposition) -> Optional[str]:
    for marker, tip in CHARACTER_TIPS.get(character, ()):
        if not marker or composition.has_card(marker) or composition.has_flag(marker):
            return tip
    return None


def combat_tips(monster: Monster, state: RunState, composition: DeckComposition) -> List[str]:
    """Tutorial tips by monster, HP band, floor band and character."""
    tips = []
    if monster.id in MONSTER_TIPS:
        tips.append(MONSTER_TIPS[monster.id])

    if "multiple_enemies" in monster.abilities or "split" in monster.abilities:
        tips.append("Multiple enemies: use AoE damage if you have it.")
    else:
        tips.append("Single target: focus all damage on the enemy.")

    if state.hp_ratio < HP_LOW:
        tips.append("LOW HP: play defensively and prioritize blocking over damage.")
    elif state.hp_ratio < HP_HEALTHY:
        tips.append("MODERATE HP: balance offense and defense.")
    else:
        tips.append("GOOD HP: you can afford to be aggressive.")

    if state.floor <= 3:
        tips.append("Early game: focus on efficient damage and save HP for later.")
    elif state.floors_until_boss <= URGENT_FLOORS:
        tips.append("The boss is close: win this fight efficiently.")
    else:
        tips.append("Mid act: your deck should be taking shape now.")

    character_tip = _character_tip(state.character, composition)
    if character_tip:
        tips.append(character_tip)
    return tips


# ============================================================================
# POTIONS
# ============================================================================

def potion_suggestions(monster: Monster, state: RunState, data: ReferenceData,
                       readiness: Readiness) -> List[str]:
    """Which held potions to use in this fight."""
    suggestions = []
    hard_fight = monster.is_boss or monster.is_elite
    for potion_id in state.potions:
        potion = data.potion(potion_id)
        if potion is None:
            logger.debug("Potion %s not in catalog", potion_id)
            continue
        if potion.id == "smoke_bomb":
            if readiness == Readiness.DANGER and not monster.is_boss:
                suggestions.append(f"{potion.name}: escape if the fight turns against you.")
            continue
        if potion.id == "explosive_potion" and "multiple_enemies" in monster.abilities:
            suggestions.append(f"{potion.name}: {potion.usage}")
        elif hard_fight and (OFFENSE in potion.tags or EMERGENCY in potion.tags):
            suggestions.append(f"{potion.name}: {potion.usage}")
        elif state.hp_ratio < HP_LOW and (HEAL in potion.tags or DEFENSE in potion.tags):
            suggestions.append(f"{potion.name}: drink early, HP is low.")
        elif readiness == Readiness.DANGER and DEFENSE in potion.tags:
            suggestions.append(f"{potion.name}: {potion.usage}")
    return suggestions


# ============================================================================
# READINESS
# ============================================================================

def readiness_for_score(score: float) -> Readiness:
    if score >= READY_SCORE:
        return Readiness.READY
    if score >= CAUTION_SCORE:
        return Readiness.CAUTION
    return Readiness.DANGER


def _worsen(readiness: Readiness) -> Readiness:
    members = list(Readiness)
    return members[min(readiness.rank + 1, len(members) - 1)]


def escalate_for_hp(readiness: Readiness, hp_ratio: float) -> Readiness:
    """Critical HP forces DANGER; low HP drops the verdict one step."""
    if hp_ratio <= HP_CRITICAL:
        return Readiness.DANGER
    if hp_ratio < HP_HALF:
        return _worsen(readiness)
    return readiness


def _placeholder_monster(monster_id: str, act: int) -> Monster:
    return Monster(id=monster_id, name=monster_id, act=act, hp="?", difficulty=Difficulty.NORMAL)


def evaluate_combat_readiness(
    monster_id: str,
    state: RunState,
    data: ReferenceData,
    composition: Optional[DeckComposition] = None,
) -> CombatReadiness:
    """
    Readiness verdict for fighting one monster.

    Unknown monster ids are assessed against default (medium) requirements
    with generic strategy text.
    """
    if composition is None:
        composition = analyze_deck(state.deck, data)
    monster = data.monster(monster_id)
    if monster is None:
        logger.debug("Monster %s not in catalog; using default requirements", monster_id)
        monster = _placeholder_monster(monster_id, state.act)

    capability = deck_capability(composition)
    strengths: List[str] = []
    weaknesses: List[str] = []
    recommendations: List[str] = []

    score = SCORE_MAX
    lacks_high_axis = False
    for axis, required in _requirement_levels(monster).items():
        have = capability[axis]
        deficit = required.value - have
        if deficit > 0:
            score -= deficit * REQUIREMENT_DEFICIT_PENALTY
            weaknesses.append(
                f"{axis.title()} is below what {monster.name} demands "
                f"({required.name.lower()} needed)"
            )
            recommendations.append(f"Add {axis} before this fight if you can")
            if required == RequirementLevel.HIGH and have == 0:
                lacks_high_axis = True
        else:
            strengths.append(f"{axis.title()} meets the {required.name.lower()} requirement")

    lethal_hit = False
    biggest = monster.biggest_attack
    if monster.max_hit > 0:
        through = hit_through_block(biggest, capability["block"])
        if through >= state.current_hp:
            lethal_hit = True
            score -= LETHAL_HIT_PENALTY
            weaknesses.append(f"{_attack_text(biggest)} can kill you at {state.current_hp} HP")
            recommendations.append(f"Save block or a defensive potion for {biggest.name}")
        elif through >= state.current_hp * HEAVY_HIT_HP_SHARE:
            score -= HEAVY_HIT_PENALTY
            weaknesses.append(f"{_attack_text(biggest)} takes half your HP or more")

    if monster.difficulty == Difficulty.ELITE:
        score -= ELITE_READINESS_PENALTY
    elif monster.difficulty == Difficulty.BOSS:
        score -= BOSS_READINESS_PENALTY
    score -= state.ascension * READINESS_ASCENSION_PENALTY
    score = round(clamp(score, SCORE_MIN, SCORE_MAX), 1)

    for ability in monster.abilities:
        note = ABILITY_NOTES.get(ability)
        if note and _ability_hurts(ability, composition):
            weaknesses.append(note)
    if "multiple_enemies" in monster.abilities and composition.aoe_count == 0:
        recommendations.append("Pick up AoE damage for multi-enemy fights")
    weaknesses.extend(monster.dangers)
    recommendations.extend(f"Exploit: {weakness}" for weakness in monster.weaknesses)

    buffs = calculate_relic_buffs(state.relics, state.current_hp, state.max_hp)
    strengths.extend(buffs.notes)

    readiness = escalate_for_hp(readiness_for_score(score), state.hp_ratio)
    if state.hp_ratio <= HP_CRITICAL:
        weaknesses.append(f"HP is critical ({state.current_hp}/{state.max_hp})")
        recommendations.append("Heal before this fight if at all possible")
    elif state.hp_ratio < HP_HALF:
        weaknesses.append(f"HP is low ({state.current_hp}/{state.max_hp})")
    if lethal_hit:
        readiness = Readiness.DANGER
    if lacks_high_axis and readiness == Readiness.READY:
        readiness = Readiness.CAUTION

    return CombatReadiness(
        monster_id=monster.id,
        monster_name=monster.name,
        readiness=readiness,
        score=score,
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        recommendations=tuple(recommendations),
        potion_suggestions=tuple(potion_suggestions(monster, state, data, readiness)),
        strategy=tuple(get_strategy_notes(monster, composition, state)),
        tips=tuple(combat_tips(monster, state, composition)),
        buffs=buffs,
    )


def _ability_hurts(ability: str, composition: DeckComposition) -> bool:
    """Whether a monster ability is a problem for this particular deck."""
    if ability == "multiple_enemies":
        return composition.aoe_count == 0
    if ability == "thorns":
        return composition.multi_hit_count >= 2
    if ability == "enrage":
        return composition.skill_count >= composition.attack_count
    if ability == "power_punish":
        return composition.power_count > 3
    if ability == "card_limit":
        return composition.zero_cost_count > 5
    if ability == "status_cards":
        return composition.draw_count < 2 and composition.exhaust_count == 0
    return True
