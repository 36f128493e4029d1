"""
Tests for fight preparation:
- combat readiness for a single monster
- boss preparation checklists
"""

import pytest

from packages.advisor.handlers.boss import BOSS_RULES, analyze_boss_preparation
from packages.advisor.handlers.combat import (
    GENERIC_STRATEGY,
    deck_capability,
    evaluate_combat_readiness,
)
from packages.advisor.calc.composition import analyze_deck
from packages.advisor.content.catalog import ReferenceData
from packages.advisor.content.enemies import RequirementLevel
from packages.advisor.recommendations import Readiness


ALL_ATTACKS = ["heavy_blade"] * 4 + ["whirlwind"] * 3 + ["inflame"] * 3
SYNTHETIC_STRONG = ["cleave_wave"] * 8 + ["guard"] * 8 + ["grow"] * 4


def attacker(monster_id, name, attack):
    return {"id": monster_id, "name": name, "act": 1, "hp": "40", "difficulty": "normal",
            "attacks": [attack]}


def catalog_with_attackers(catalog):
    """Four plain monsters with the same requirements and different attacks."""
    monsters = list(catalog["monsters"]) + [
        attacker("tapper", "Tapper", {"name": "Tap", "damage": 1}),
        attacker("slammer", "Slammer", {"name": "Slam", "damage": 40}),
        attacker("thumper", "Thumper", {"name": "Thump", "damage": 35}),
        attacker("crusher", "Crusher", {"name": "Obliterate", "damage": 60, "hits": 3}),
    ]
    return ReferenceData.from_dict(dict(catalog, monsters=monsters))


# =============================================================================
# Combat Readiness
# =============================================================================


class TestCombatReadiness:
    def test_ready_against_matching_requirements(self, synthetic_data, make_run):
        run = make_run(SYNTHETIC_STRONG)
        readiness = evaluate_combat_readiness("brute", run, synthetic_data)
        assert readiness.score == pytest.approx(95.0)
        assert readiness.readiness == Readiness.READY
        assert not readiness.weaknesses

    def test_missing_requirements_cost_score(self, synthetic_data, make_run):
        run = make_run(["jab"] * 5)
        readiness = evaluate_combat_readiness("brute", run, synthetic_data)
        assert readiness.readiness == Readiness.DANGER
        assert readiness.recommendations

    @pytest.mark.parametrize("current_hp", [80, 60, 40, 20, 5])
    def test_high_block_monster_never_ready_without_block(self, data, make_run, current_hp):
        run = make_run(ALL_ATTACKS, current_hp=current_hp, max_hp=80)
        monster = data.monster("hexaghost")
        assert monster.requirements.block == RequirementLevel.HIGH
        assert deck_capability(analyze_deck(run.deck, data))["block"] == 0
        readiness = evaluate_combat_readiness("hexaghost", run, data)
        assert readiness.readiness != Readiness.READY

    def test_synthetic_high_block_never_ready_without_block(self, synthetic_data, make_run):
        run = make_run(["cleave_wave"] * 10 + ["grow"] * 4)
        readiness = evaluate_combat_readiness("brute", run, synthetic_data)
        assert readiness.readiness != Readiness.READY

    def test_critical_hp_forces_danger(self, synthetic_data, make_run):
        run = make_run(SYNTHETIC_STRONG, current_hp=20, max_hp=80)
        readiness = evaluate_combat_readiness("brute", run, synthetic_data)
        assert readiness.readiness == Readiness.DANGER
        assert any("critical" in w for w in readiness.weaknesses)

    def test_low_hp_drops_one_step(self, synthetic_data, make_run):
        run = make_run(SYNTHETIC_STRONG, current_hp=35, max_hp=80)
        readiness = evaluate_combat_readiness("brute", run, synthetic_data)
        assert readiness.readiness == Readiness.CAUTION

    def test_unknown_monster_uses_default_requirements(self, ironclad_run, data):
        readiness = evaluate_combat_readiness("mystery_beast", ironclad_run, data)
        assert readiness.monster_name == "mystery_beast"
        assert readiness.strategy == (GENERIC_STRATEGY,)
        assert 0.0 <= readiness.score <= 100.0

    def test_strategy_rule_for_known_monster(self, ironclad_run, data):
        readiness = evaluate_combat_readiness("gremlin_nob", ironclad_run, data)
        assert readiness.strategy
        assert readiness.strategy != (GENERIC_STRATEGY,)

    def test_relic_buffs_are_strengths(self, ironclad_run, data):
        run = ironclad_run.with_changes(relics=("burning_blood", "vajra"))
        readiness = evaluate_combat_readiness("jaw_worm", run, data)
        assert readiness.buffs.strength == 1
        assert "Vajra: +1 Strength" in readiness.strengths

    def test_offensive_potion_suggested_for_elite(self, ironclad_run, data):
        run = ironclad_run.with_changes(potions=("fire_potion",))
        readiness = evaluate_combat_readiness("gremlin_nob", run, data)
        assert any(s.startswith("Fire Potion") for s in readiness.potion_suggestions)

    def test_tips(self, ironclad_run, data):
        readiness = evaluate_combat_readiness("cultist", ironclad_run, data)
        assert readiness.tips[0].startswith("PRIORITY")
        assert "Early game: focus on efficient damage and save HP for later." in readiness.tips

    def test_monster_dangers_and_weaknesses_reach_the_advice(self, ironclad_run, data):
        readiness = evaluate_combat_readiness("jaw_worm", ironclad_run, data)
        assert "Chomp hits hard for an early fight" in readiness.weaknesses
        assert "Exploit: Low HP" in readiness.recommendations


class TestAttackPattern:
    """Monsters that differ only in what they hit for."""

    def test_lethal_hit_forces_danger(self, synthetic_catalog, make_run):
        data = catalog_with_attackers(synthetic_catalog)
        run = make_run(SYNTHETIC_STRONG, current_hp=45, max_hp=80)
        tapper = evaluate_combat_readiness("tapper", run, data)
        crusher = evaluate_combat_readiness("crusher", run, data)
        assert tapper.readiness == Readiness.READY
        assert crusher.readiness == Readiness.DANGER
        assert crusher.score < tapper.score
        assert any(w.startswith("Obliterate, 60x3 can kill you") for w in crusher.weaknesses)
        assert not any("Tap" in w for w in tapper.weaknesses)

    def test_heavy_hit_costs_score(self, synthetic_catalog, make_run):
        data = catalog_with_attackers(synthetic_catalog)
        run = make_run(SYNTHETIC_STRONG, current_hp=45, max_hp=80)
        tapper = evaluate_combat_readiness("tapper", run, data)
        slammer = evaluate_combat_readiness("slammer", run, data)
        assert slammer.score == pytest.approx(tapper.score - 10.0)
        assert "Slam, 40 takes half your HP or more" in slammer.weaknesses

    def test_block_absorbs_part_of_the_hit(self, synthetic_catalog, make_run):
        data = catalog_with_attackers(synthetic_catalog)
        blocking = make_run(SYNTHETIC_STRONG, current_hp=45, max_hp=80)
        open_deck = make_run(["cleave_wave"] * 10 + ["grow"] * 4, current_hp=45, max_hp=80)
        assert deck_capability(analyze_deck(blocking.deck, data))["block"] == 3
        assert deck_capability(analyze_deck(open_deck.deck, data))["block"] == 0
        guarded = evaluate_combat_readiness("thumper", blocking, data)
        exposed = evaluate_combat_readiness("thumper", open_deck, data)
        assert not any(w.startswith("Thump, 35") for w in guarded.weaknesses)
        assert any(w.startswith("Thump, 35") for w in exposed.weaknesses)

    def test_biggest_attack(self, data):
        hexaghost = data.monster("hexaghost")
        assert hexaghost.biggest_attack.name == "Divider"
        assert hexaghost.max_hit == 36


# =============================================================================
# Boss Preparation
# =============================================================================


class TestBossPreparation:
    def test_unrevealed_boss_prepares_for_the_whole_act(self, ironclad_run, data):
        prep = analyze_boss_preparation(ironclad_run, data)
        assert prep.boss_id is None
        assert prep.boss_name == "Act 1 Boss"
        assert prep.floors_until_boss == 15
        names = {r.name for r in prep.requirements}
        assert "Basic Defense" in names
        assert {"AoE Damage (Slime Boss)", "Scaling Damage (Hexaghost)"} <= names
        assert all(boss in BOSS_RULES for boss in data.bosses_for_act(1))

    def test_revealed_boss(self, ironclad_run, data):
        prep = analyze_boss_preparation(ironclad_run.with_changes(boss="hexaghost"), data)
        assert prep.boss_id == "hexaghost"
        assert prep.boss_name == "Hexaghost"
        assert prep.strategy

    def test_unknown_boss_falls_back_to_act(self, ironclad_run, data):
        prep = analyze_boss_preparation(ironclad_run.with_changes(boss="bigger_slime"), data)
        assert prep.boss_id is None

    def test_score_is_bounded(self, data, make_run):
        for run in (make_run([]), make_run(ALL_ATTACKS, floor=50, ascension=20, current_hp=1)):
            prep = analyze_boss_preparation(run, data)
            assert 0.0 <= prep.score <= 100.0

    def test_heart(self, data, make_run):
        prep = analyze_boss_preparation(make_run(ALL_ATTACKS, floor=54), data)
        assert prep.act == 4
        assert prep.boss_name == "The Heart"

    def test_urgent_priority_near_the_boss(self, data, make_run):
        prep = analyze_boss_preparation(make_run(["strike_r"] * 10, floor=14), data)
        assert prep.top_priorities[0].startswith("URGENT")
        assert prep.readiness == Readiness.DANGER
        assert prep.warnings

    def test_unmapped_boss_uses_monster_requirements(self, synthetic_data, make_run):
        prep = analyze_boss_preparation(make_run(SYNTHETIC_STRONG), synthetic_data)
        assert prep.boss_id is None
        names = [r.name for r in prep.requirements]
        assert "Damage (Big Boss)" in names
        assert "Scaling (Big Boss)" in names

    def test_unmet_property(self, data, make_run):
        prep = analyze_boss_preparation(make_run(["strike_r"] * 10), data)
        assert all(not r.met for r in prep.unmet)
        assert prep.unmet

    @pytest.mark.parametrize("current_hp, expected", [
        (80, Readiness.READY),
        (35, Readiness.CAUTION),
        (20, Readiness.DANGER),
        (4, Readiness.DANGER),
    ])
    def test_low_hp_escalates_a_prepared_deck(self, synthetic_data, make_run, current_hp, expected):
        prep = analyze_boss_preparation(
            make_run(SYNTHETIC_STRONG, current_hp=current_hp, max_hp=80), synthetic_data)
        assert not prep.unmet
        assert prep.readiness == expected

    def test_critical_hp_warning(self, synthetic_data, make_run):
        prep = analyze_boss_preparation(
            make_run(SYNTHETIC_STRONG, current_hp=10, max_hp=80), synthetic_data)
        assert prep.warnings[0] == "HP is critical (10/80): rest before the boss"
        assert not any(w.startswith("DECK NOT READY") for w in prep.warnings)
