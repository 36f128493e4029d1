"""
Tests for the reward evaluators:
- card rewards (rating, bucket, explanation, ordering)
- relic rewards and boss relic rules
- synergy monotonicity across the whole card catalog
"""

import pytest

from packages.advisor.calc.composition import analyze_deck
from packages.advisor.content.cards import Character
from packages.advisor.handlers.card_reward import evaluate_card, rank_card_rewards, score_card
from packages.advisor.handlers.relic_reward import (
    BOSS_RELIC_RULES,
    evaluate_boss_relic,
    evaluate_relic,
    rank_boss_relics,
)
from packages.advisor.recommendations import Priority, RelicPriority
from packages.advisor.state.run import make_deck


# =============================================================================
# Card Rewards
# =============================================================================


class TestCardEvaluation:
    def test_inflame_on_starter_is_at_least_good_pick(self, ironclad_run, data):
        advice = evaluate_card("inflame", ironclad_run.deck, data,
                               ironclad_run.relics, ironclad_run.character)
        assert advice.priority >= Priority.GOOD_PICK
        assert advice.priority == Priority.MUST_PICK
        assert advice.rating == pytest.approx(4.0)
        assert advice.anti_synergies == ()

    def test_factors_explain_the_rating(self, ironclad_run, data):
        advice = evaluate_card("inflame", ironclad_run.deck, data, character=Character.IRONCLAD)
        names = {factor.name for factor in advice.factors}
        assert {"small_deck_power", "scaling_need"} <= names
        assert advice.reasons[0] == "Base tier 3.0"

    @pytest.mark.parametrize("card_id", [
        "inflame", "footwork", "heavy_blade", "whirlwind", "shrug_it_off", "regret",
    ])
    def test_reason_is_the_dominant_factor(self, card_id, data, make_run):
        run = make_run(["inflame", "strike_r", "strike_r", "defend_r", "bash"])
        advice = evaluate_card(card_id, run.deck, data, character=Character.IRONCLAD)
        assert advice.factors
        dominant = max(advice.factors, key=lambda f: abs(f.delta))
        assert advice.reason == dominant.reason

    def test_reason_without_factors_is_the_base_tier(self, synthetic_data):
        advice = evaluate_card("jab", [], synthetic_data)
        assert advice.factors == ()
        assert advice.reason == "Base tier 1.0"
        assert advice.reasons == ("Base tier 1.0",)

    def test_penalty_can_be_the_dominant_factor(self, ironclad_run, data):
        advice = evaluate_card("footwork", ironclad_run.deck, data, character=Character.IRONCLAD)
        dominant = max(advice.factors, key=lambda f: abs(f.delta))
        assert dominant.name == "off_class"
        assert dominant.delta < 0
        assert advice.reason == "Silent card"

    def test_curses_are_always_skipped(self, ironclad_run, data):
        advice = evaluate_card("regret", ironclad_run.deck, data)
        assert advice.rating == 0.0
        assert advice.priority == Priority.SKIP

    def test_unknown_card_is_neutral(self, ironclad_run, data):
        advice = evaluate_card("homebrew_card", ironclad_run.deck, data)
        assert advice.rating == 2.5
        assert advice.priority == Priority.SITUATIONAL
        assert "Unknown" in advice.reason

    def test_off_class_penalty(self, ironclad_run, data):
        neutral = evaluate_card("footwork", ironclad_run.deck, data)
        off_class = evaluate_card("footwork", ironclad_run.deck, data, character=Character.IRONCLAD)
        assert off_class.rating < neutral.rating
        assert any(f.name == "off_class" for f in off_class.factors)

    def test_synergy_is_reported(self, data, make_run):
        run = make_run(["inflame", "strike_r", "defend_r"])
        advice = evaluate_card("heavy_blade", run.deck, data, character=Character.IRONCLAD)
        assert "inflame" in advice.synergies
        assert any(f.name == "synergy" for f in advice.factors)

    def test_rating_is_clamped(self, data, make_run):
        run = make_run(["inflame", "spot_weakness", "limit_break", "demon_form", "heavy_blade"])
        advice = evaluate_card("whirlwind", run.deck, data, character=Character.IRONCLAD)
        assert 0.0 <= advice.rating <= 5.0

    def test_rank_orders_best_first(self, ironclad_run, data):
        ranked = rank_card_rewards(["regret", "strike_r", "inflame"], ironclad_run.deck, data,
                                   ironclad_run.relics, ironclad_run.character)
        assert ranked[0].card_id == "inflame"
        assert ranked[-1].card_id == "regret"

    def test_rank_breaks_ties_by_name(self, ironclad_run, data):
        ranked = rank_card_rewards(["zz_unknown", "aa_unknown"], ironclad_run.deck, data)
        assert [e.card_id for e in ranked] == ["aa_unknown", "zz_unknown"]

    def test_synthetic_catalog(self, synthetic_data):
        advice = evaluate_card("grow", ["cleave_wave", "jab"], synthetic_data)
        assert advice.synergies == ("cleave_wave",)


STARTER_IRONCLAD = ["strike_r"] * 5 + ["defend_r"] * 4 + ["bash"]
# One card short of a 15-card deck, so any addition crosses the small-deck line
FOURTEEN_CARDS = STARTER_IRONCLAD + ["true_grit", "shrug_it_off", "pommel_strike", "anger"]


class TestSynergyMonotonicity:
    @pytest.mark.parametrize("deck_ids", [STARTER_IRONCLAD, FOURTEEN_CARDS])
    def test_adding_a_synergy_partner_never_lowers_the_rating(self, data, make_run, deck_ids):
        deck = make_run(deck_ids).deck
        for card in data.cards.values():
            before = evaluate_card(card.id, deck, data, character=Character.IRONCLAD)
            for partner in card.synergies:
                if partner in card.anti_synergies or data.card(partner) is None:
                    continue
                grown = deck + make_deck([partner], prefix="added")
                after = evaluate_card(card.id, grown, data, character=Character.IRONCLAD)
                assert after.rating >= before.rating, (card.id, partner)

    def test_partner_that_grows_the_deck_past_small(self, data, make_run):
        deck = make_run(FOURTEEN_CARDS).deck
        before = evaluate_card("dark_embrace", deck, data, character=Character.IRONCLAD)
        grown = deck + make_deck(["burning_pact"], prefix="added")
        after = evaluate_card("dark_embrace", grown, data, character=Character.IRONCLAD)
        assert analyze_deck(grown, data).size == 15
        assert after.rating >= before.rating
        assert "burning_pact" in after.synergies

    def test_ranking_matches_single_evaluation(self, data, make_run):
        deck = make_run(FOURTEEN_CARDS).deck
        ranked = rank_card_rewards(["dark_embrace"], deck, data, character=Character.IRONCLAD)
        single = evaluate_card("dark_embrace", deck, data, character=Character.IRONCLAD)
        assert ranked == [single]

    def test_owned_synergy_relic_never_lowers_the_rating(self, ironclad_run, data):
        base = analyze_deck(ironclad_run.deck, data)
        card = data.card("body_slam")
        without = score_card(card, base, ())
        with_relic = score_card(card, base, ("calipers",))
        assert with_relic.rating >= without.rating


# =============================================================================
# Relic Rewards
# =============================================================================


class TestRelicEvaluation:
    def test_grade_is_the_base_rating(self, ironclad_run, data):
        advice = evaluate_relic("pen_nib", ironclad_run.deck, data, ironclad_run.relics)
        assert advice.rating == pytest.approx(3.0)
        assert advice.priority == RelicPriority.GOOD_TAKE

    def test_rule_adjusts_the_rating(self, data, make_run):
        run = make_run(["strike_r"] * 8 + ["bash"])
        advice = evaluate_relic("pen_nib", run.deck, data)
        assert advice.rating == pytest.approx(4.0)
        assert advice.priority == RelicPriority.MUST_TAKE
        assert "attacks" in advice.reason

    def test_owned_relic_is_skipped(self, ironclad_run, data):
        advice = evaluate_relic("burning_blood", ironclad_run.deck, data, ironclad_run.relics)
        assert advice.priority == RelicPriority.SKIP

    def test_unknown_relic_is_neutral(self, ironclad_run, data):
        advice = evaluate_relic("mystery_relic", ironclad_run.deck, data)
        assert advice.rating == 2.5
        assert advice.priority == RelicPriority.SITUATIONAL

    def test_sozu_spoils_potion_belt(self, ironclad_run, data):
        plain = evaluate_relic("potion_belt", ironclad_run.deck, data)
        spoiled = evaluate_relic("potion_belt", ironclad_run.deck, data, ("sozu",))
        assert spoiled.rating < plain.rating


class TestBossRelics:
    def test_velvet_choker_skipped_for_cheap_deck(self, ironclad_run, data):
        assert analyze_deck(ironclad_run.deck, data).low_cost_ratio > 0.6
        advice = evaluate_boss_relic("velvet_choker", ironclad_run, data)
        assert advice.priority == RelicPriority.SKIP

    def test_velvet_choker_for_expensive_deck(self, data, make_run):
        run = make_run(["bludgeon", "bludgeon", "bash", "bash", "inflame"])
        advice = evaluate_boss_relic("velvet_choker", run, data)
        assert advice.priority == RelicPriority.GOOD_TAKE

    def test_unmapped_boss_relic_uses_default(self, ironclad_run, data):
        assert "sacred_bark" not in BOSS_RELIC_RULES
        advice = evaluate_boss_relic("sacred_bark", ironclad_run, data)
        assert advice.priority == RelicPriority.SITUATIONAL

    def test_unknown_boss_relic_is_neutral(self, ironclad_run, data):
        advice = evaluate_boss_relic("made_up_relic", ironclad_run, data)
        assert advice.rating == 2.5
        assert advice.priority == RelicPriority.SITUATIONAL

    def test_other_characters_relic_is_skipped(self, data):
        from packages.advisor.state.run import create_starter_run
        run = create_starter_run(Character.SILENT)
        advice = evaluate_boss_relic("black_blood", run, data)
        assert advice.priority == RelicPriority.SKIP
        assert "Ironclad" in advice.reason

    def test_coffee_dripper_depends_on_hp(self, ironclad_run, data):
        healthy = evaluate_boss_relic("coffee_dripper", ironclad_run, data)
        hurt = evaluate_boss_relic("coffee_dripper", ironclad_run.with_changes(current_hp=30), data)
        assert healthy.priority == RelicPriority.GOOD_TAKE
        assert hurt.priority == RelicPriority.SITUATIONAL

    def test_rank_boss_relics(self, ironclad_run, data):
        ranked = rank_boss_relics(["velvet_choker", "black_blood", "sacred_bark"], ironclad_run, data)
        assert [e.relic_id for e in ranked] == ["black_blood", "sacred_bark", "velvet_choker"]
