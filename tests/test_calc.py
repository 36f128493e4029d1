"""
Tests for the deck calculations:
- composition summary
- archetype detection
- deck health report card
- relic start-of-combat buffs
"""

import pytest

from packages.advisor.calc.archetypes import detect_archetypes, top_archetype
from packages.advisor.calc.composition import analyze_deck
from packages.advisor.calc.deck_health import CATEGORY_ORDER, analyze_deck_health, estimate_win_rate
from packages.advisor.calc.relic_buffs import calculate_relic_buffs
from packages.advisor.content.cards import COST_X, Character
from packages.advisor.recommendations import Grade, grade_for_score
from packages.advisor.state.run import create_starter_run


# =============================================================================
# Composition
# =============================================================================


class TestComposition:
    def test_starter_counts(self, ironclad_run, data):
        comp = analyze_deck(ironclad_run.deck, data)
        assert comp.size == 10
        assert comp.attack_count == 6
        assert comp.skill_count == 4
        assert comp.basic_strike_count == 5
        assert comp.basic_defend_count == 4
        assert comp.basic_count == 9
        assert comp.block_count == 4
        assert comp.cost_distribution == {1: 9, 2: 1}
        assert comp.average_cost == pytest.approx(1.1)
        assert comp.low_cost_ratio == pytest.approx(0.9)

    def test_empty_deck_is_all_zero(self, data):
        comp = analyze_deck([], data)
        assert comp.size == 0
        assert comp.average_cost == 0.0
        assert comp.attack_ratio == 0.0
        assert comp.card_ids == frozenset()

    def test_accepts_snapshot_ids(self, data):
        comp = analyze_deck(["bash+", "bash"], data)
        assert comp.copies("bash") == 2
        assert comp.upgraded_count == 1

    def test_unknown_cards_count_by_size_only(self, data):
        comp = analyze_deck(["bash", "mystery_card"], data)
        assert comp.size == 2
        assert comp.unknown_count == 1
        assert comp.has_card("mystery_card")
        assert comp.attack_count == 1

    def test_unplayable_cards_skip_the_cost_curve(self, data):
        comp = analyze_deck(["regret", "wound", "bash"], data)
        assert comp.curse_count == 1
        assert comp.status_count == 1
        assert comp.dead_count == 2
        assert comp.cost_distribution == {2: 1}

    def test_x_cost_cards_are_bucketed_but_not_averaged(self, data):
        comp = analyze_deck(["whirlwind", "bash"], data)
        assert comp.cost_distribution.get(COST_X) == 1
        assert comp.average_cost == pytest.approx(2.0)

    def test_build_flags(self, data):
        comp = analyze_deck(["barricade", "entrench"], data)
        assert comp.has_flag("barricade")


# =============================================================================
# Archetypes
# =============================================================================


class TestArchetypes:
    @pytest.mark.parametrize("character", [
        Character.IRONCLAD, Character.SILENT, Character.DEFECT, Character.WATCHER,
    ])
    def test_empty_deck_detects_nothing(self, data, character):
        assert detect_archetypes([], data, character) == []

    def test_starter_has_no_build(self, ironclad_run, data):
        assert top_archetype(ironclad_run.deck, data, Character.IRONCLAD) is None

    def test_strength_build_strength(self, data):
        deck = ["inflame", "limit_break", "heavy_blade", "twin_strike", "strike_r"]
        detected = detect_archetypes(deck, data, Character.IRONCLAD)
        assert [a.id for a in detected] == ["strength_scaling"]
        build = detected[0]
        assert build.strength == 75
        assert set(build.key_cards_present) == {"inflame", "limit_break"}
        assert "demon_form" in build.missing_key_cards

    def test_strength_is_capped(self, data):
        deck = ["inflame"] * 6 + ["heavy_blade"] * 6
        assert detect_archetypes(deck, data, Character.IRONCLAD)[0].strength == 100

    def test_other_characters_archetypes_are_ignored(self, data):
        deck = ["inflame", "limit_break"]
        assert detect_archetypes(deck, data, Character.SILENT) == []

    def test_synthetic_definition(self, synthetic_data):
        detected = detect_archetypes(["grow", "cleave_wave"], synthetic_data, Character.IRONCLAD)
        assert len(detected) == 1
        assert detected[0].strength == 75

    def test_support_cards_alone_do_not_qualify(self, synthetic_data):
        assert detect_archetypes(["cleave_wave"] * 3, synthetic_data, Character.IRONCLAD) == []


# =============================================================================
# Deck Health
# =============================================================================


class TestDeckHealth:
    def test_categories_in_fixed_order(self, ironclad_run, data):
        report = analyze_deck_health(ironclad_run, data)
        assert tuple(c.name for c in report.categories) == CATEGORY_ORDER

    def test_scores_are_bounded(self, data, make_run):
        runs = [
            create_starter_run(Character.IRONCLAD),
            create_starter_run(Character.WATCHER, ascension=20),
            make_run([]),
            make_run(["regret"] * 12, floor=45, ascension=20),
            make_run(["demon_form", "limit_break", "heavy_blade", "shrug_it_off"] * 5, floor=40),
        ]
        for run in runs:
            report = analyze_deck_health(run, data)
            assert 0.0 <= report.overall_score <= 100.0
            for category in report.categories:
                assert 0.0 <= category.score <= 100.0
            assert report.grade == grade_for_score(report.overall_score)

    def test_two_top_recommendations(self, ironclad_run, data):
        report = analyze_deck_health(ironclad_run, data)
        assert len(report.top_recommendations) == 2

    def test_curse_pile_has_critical_issues(self, data, make_run):
        report = analyze_deck_health(make_run(["regret"] * 10 + ["strike_r"] * 5, floor=30), data)
        assert report.critical_issues
        assert report.grade in (Grade.D, Grade.F)

    def test_category_lookup(self, ironclad_run, data):
        report = analyze_deck_health(ironclad_run, data)
        assert report.category("defense").name == "defense"
        with pytest.raises(KeyError):
            report.category("luck")

    def test_ascension_raises_the_bar(self, data):
        easy = analyze_deck_health(create_starter_run(Character.SILENT), data)
        hard = analyze_deck_health(create_starter_run(Character.SILENT).with_changes(ascension=20), data)
        assert hard.overall_score < easy.overall_score

    def test_win_rate_is_monotonic_in_score(self):
        rates = [estimate_win_rate(score, 0, 1) for score in range(0, 101, 5)]
        assert rates == sorted(rates)
        assert min(rates) >= 5 and max(rates) <= 70


class TestGradeBreakpoints:
    @pytest.mark.parametrize("score,grade", [
        (100.0, Grade.S), (90.0, Grade.S), (89.9, Grade.A), (80.0, Grade.A),
        (70.0, Grade.B), (60.0, Grade.C), (50.0, Grade.D), (49.9, Grade.F), (0.0, Grade.F),
    ])
    def test_breakpoints(self, score, grade):
        assert grade_for_score(score) == grade

    def test_grade_never_improves_as_score_drops(self):
        grades = [grade_for_score(tenths / 10) for tenths in range(1000, -1, -1)]
        assert all(a >= b for a, b in zip(grades, grades[1:]))


# =============================================================================
# Relic Buffs
# =============================================================================


class TestRelicBuffs:
    def test_no_relics(self):
        buffs = calculate_relic_buffs([], 80, 80)
        assert buffs.is_empty
        assert buffs.summary() == "None"

    def test_flat_buffs_accumulate(self):
        buffs = calculate_relic_buffs(["vajra", "anchor", "bag_of_marbles", "burning_blood"], 80, 80)
        assert buffs.strength == 1
        assert buffs.starting_block == 10
        assert buffs.enemy_vulnerable == 1
        assert len(buffs.notes) == 3
        assert "+1 Strength" in buffs.summary()

    def test_red_skull_needs_low_hp(self):
        assert calculate_relic_buffs(["red_skull"], 60, 80).strength == 0
        assert calculate_relic_buffs(["red_skull"], 40, 80).strength == 3
