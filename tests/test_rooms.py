"""
Tests for the map-room handlers:
- events
- shop removal and purchases
- rest sites
- pathing
- ascension keys
- start-of-run blessings
"""

import pytest

from packages.advisor.calc.deck_health import CATEGORY_ORDER, DeckHealthReport, HealthCategory
from packages.advisor.content.cards import CardType, Character
from packages.advisor.handlers.blessing import (
    BlessingAction,
    blessing_removal_targets,
    classify_blessing,
    evaluate_blessing,
    rank_blessings,
)
from packages.advisor.handlers.event_handler import EVENT_RULES, evaluate_event
from packages.advisor.handlers.keys import evaluate_key, evaluate_keys
from packages.advisor.handlers.path import NodeType, PathStrategy, generate_path_strategy
from packages.advisor.handlers.rest import RestAction, evaluate_rest_site, is_hp_critical
from packages.advisor.handlers.shop_handler import (
    ShopItem,
    evaluate_shop,
    potion_slots,
    rank_removals,
    removal_cost,
    should_remove_at_shop,
)
from packages.advisor.recommendations import (
    CategoryStatus,
    EventRating,
    KeyPriority,
    NodePriority,
    Priority,
    RemovalPriority,
    RestPriority,
    RiskLevel,
    ShopPriority,
    Urgency,
    grade_for_score,
)
from packages.advisor.state.run import CardInstance, create_starter_run


def health_report(score, **statuses):
    """Deck health with a fixed overall score; categories default to adequate."""
    categories = tuple(
        HealthCategory(name, score, grade_for_score(score), statuses.get(name, CategoryStatus.ADEQUATE))
        for name in CATEGORY_ORDER
    )
    return DeckHealthReport(overall_score=score, grade=grade_for_score(score),
                            status=CategoryStatus.ADEQUATE, categories=categories)


# =============================================================================
# Events
# =============================================================================


class TestEvents:
    def test_golden_shrine_with_gold(self, ironclad_run, data):
        advice = evaluate_event("golden_shrine", ironclad_run, data)
        assert advice.advice_for("desecrate").rating == EventRating.HIGHLY_RECOMMENDED
        assert advice.advice_for("pray").rating == EventRating.RECOMMENDED
        assert advice.advice_for("leave").rating == EventRating.AVOID
        assert advice.recommended_choice == "desecrate"

    def test_golden_shrine_without_gold(self, ironclad_run, data):
        advice = evaluate_event("golden_shrine", ironclad_run.with_changes(gold=20), data)
        desecrate = advice.advice_for("desecrate")
        assert desecrate.disabled
        assert desecrate.disabled_reason == "Need 50 gold (have 20)"
        assert advice.recommended_choice == "pray"

    def test_required_relic_disables_choice(self, ironclad_run, data):
        advice = evaluate_event("vampire", ironclad_run.with_changes(floor=20), data)
        assert advice.advice_for("offer_vial").disabled_reason == "Requires blood_vial"
        assert advice.recommended_choice == "accept"

    def test_hp_cost_disables_choice(self, ironclad_run, data):
        advice = evaluate_event("scrap_ooze", ironclad_run.with_changes(current_hp=3), data)
        assert advice.advice_for("dig").disabled
        assert advice.advice_for("dig").rating == EventRating.AVOID

    def test_unknown_event(self, ironclad_run, data):
        advice = evaluate_event("mystery_room", ironclad_run, data)
        assert advice.choices == ()
        assert advice.recommended_choice is None
        assert advice.advice_for("leave") is None

    def test_unmapped_event_uses_default(self, ironclad_run, synthetic_data):
        assert "fountain" not in EVENT_RULES
        advice = evaluate_event("fountain", ironclad_run, synthetic_data)
        assert all(c.rating == EventRating.SITUATIONAL for c in advice.choices)
        assert advice.advice_for("toss").disabled
        assert advice.recommended_choice == "drink"

    def test_recommended_choice_is_never_disabled(self, data, make_run):
        runs = [make_run(["strike_r"] * 5, gold=0, current_hp=2), create_starter_run(Character.SILENT)]
        for run in runs:
            for event_id in data.events:
                advice = evaluate_event(event_id, run, data)
                if advice.recommended_choice is not None:
                    assert not advice.advice_for(advice.recommended_choice).disabled


# =============================================================================
# Shop
# =============================================================================


class TestRemoval:
    def test_starter_removal_order(self, ironclad_run, data):
        ranked = rank_removals(ironclad_run, data)
        assert ranked[0].card_id == "strike_r"
        assert ranked[0].priority == RemovalPriority.SHOULD_REMOVE
        assert ranked[0].score == 5
        assert ranked[0].urgency == Urgency.MEDIUM
        bash = next(a for a in ranked if a.card_id == "bash")
        assert bash.priority == RemovalPriority.KEEP
        assert ranked[-1].card_id == "bash"

    def test_every_curse_is_must_remove(self, ironclad_run, data):
        curses = [c for c in data.cards.values() if c.card_type == CardType.CURSE]
        assert curses
        for curse in curses:
            deck = ironclad_run.deck + (CardInstance("curse-0", curse.id),)
            run = ironclad_run.with_changes(deck=deck)
            advice = next(a for a in rank_removals(run, data) if a.card_id == curse.id)
            assert advice.priority == RemovalPriority.MUST_REMOVE, curse.id

    def test_unremovable_curse_is_listed_but_flagged(self, data):
        run = create_starter_run(Character.IRONCLAD, ascension=10)
        ranked = rank_removals(run, data)
        assert ranked[0].card_id == "ascenders_bane"
        assert ranked[0].priority == RemovalPriority.MUST_REMOVE
        assert ranked[0].removable is False
        decision = should_remove_at_shop(run, data)
        assert decision.target.card_id == "strike_r"

    def test_removal_cost_grows(self):
        assert removal_cost(0) == 75
        assert removal_cost(2) == 125

    def test_poor_shopper_is_told_to_wait(self, ironclad_run, data):
        decision = should_remove_at_shop(ironclad_run, data)
        assert decision.recommend is False
        assert decision.cost == 75
        assert decision.target.card_id == "strike_r"

    def test_cannot_afford_removal(self, ironclad_run, data):
        decision = should_remove_at_shop(ironclad_run.with_changes(gold=50, cards_removed=1), data)
        assert decision.recommend is False
        assert decision.reason == "Removal costs 100 gold (have 50)"

    def test_curse_removal_is_recommended(self, data, make_run):
        run = make_run(["strike_r", "defend_r", "regret"], gold=100)
        decision = should_remove_at_shop(run, data)
        assert decision.recommend
        assert decision.target.card_id == "regret"


class TestShopPurchases:
    def test_unknown_kind_raises(self, ironclad_run, data):
        with pytest.raises(ValueError):
            evaluate_shop(ironclad_run, data, [ShopItem("hat", "top_hat", 10)])

    def test_recommendations_sorted_by_value(self, ironclad_run, data):
        items = [ShopItem("card", "inflame", 50), ShopItem("card", "regret", 50),
                 ShopItem("potion", "fire_potion", 50)]
        advice = evaluate_shop(ironclad_run.with_changes(gold=300), data, items)
        keys = [(-r.value, r.name) for r in advice.recommendations]
        assert keys == sorted(keys)
        assert advice.strategy

    def test_unaffordable_items_are_skipped(self, ironclad_run, data):
        advice = evaluate_shop(ironclad_run, data, [ShopItem("relic", "pen_nib", 300)])
        relic = next(r for r in advice.recommendations if r.item_id == "pen_nib")
        assert relic.affordable is False
        assert relic.priority == ShopPriority.SKIP

    def test_strong_card_is_a_buy(self, ironclad_run, data):
        advice = evaluate_shop(ironclad_run.with_changes(gold=300), data, [ShopItem("card", "inflame", 60)])
        card = next(r for r in advice.recommendations if r.item_id == "inflame")
        assert card.priority == ShopPriority.MUST_BUY

    def test_potion_slots(self, ironclad_run):
        assert potion_slots(ironclad_run) == 3
        assert potion_slots(ironclad_run.with_changes(ascension=11)) == 2
        assert potion_slots(ironclad_run.with_changes(relics=("potion_belt",))) == 5

    def test_sozu_blocks_potions(self, ironclad_run, data):
        run = ironclad_run.with_changes(relics=("sozu",), gold=300)
        advice = evaluate_shop(run, data, [ShopItem("potion", "fire_potion", 20)])
        potion = next(r for r in advice.recommendations if r.item_id == "fire_potion")
        assert potion.priority == ShopPriority.SKIP


# =============================================================================
# Rest Sites
# =============================================================================


class TestRestSite:
    def test_full_hp_starter_smiths_bash(self, ironclad_run, data):
        advice = evaluate_rest_site(ironclad_run, data)
        assert advice.best.action == RestAction.SMITH
        assert advice.best.priority == RestPriority.MUST_DO
        assert advice.best.target == "bash"
        assert advice.option_for(RestAction.REST).priority == RestPriority.AVOID
        assert advice.strategy.startswith("PRIORITY: SMITH bash")

    def test_critical_hp_rests(self, ironclad_run, data):
        advice = evaluate_rest_site(ironclad_run.with_changes(current_hp=30), data)
        assert advice.hp_critical
        assert advice.best.action == RestAction.REST
        assert advice.best.hp_gain == 24
        assert advice.option_for(RestAction.SMITH).priority == RestPriority.AVOID

    def test_heal_is_capped_at_missing_hp(self, ironclad_run, data):
        advice = evaluate_rest_site(ironclad_run.with_changes(current_hp=60), data)
        assert advice.option_for(RestAction.REST).hp_gain == 20

    def test_threshold_follows_act(self, ironclad_run):
        hurt = ironclad_run.with_changes(current_hp=52)
        assert not is_hp_critical(hurt)
        assert is_hp_critical(hurt.with_changes(floor=40))

    def test_coffee_dripper_forbids_rest(self, ironclad_run, data):
        run = ironclad_run.with_changes(current_hp=20, relics=("coffee_dripper",))
        assert evaluate_rest_site(run, data).option_for(RestAction.REST).priority == RestPriority.AVOID

    def test_fusion_hammer_forbids_smith(self, ironclad_run, data):
        run = ironclad_run.with_changes(relics=("fusion_hammer",))
        assert evaluate_rest_site(run, data).option_for(RestAction.SMITH).priority == RestPriority.AVOID

    def test_relic_actions(self, ironclad_run, data):
        run = ironclad_run.with_changes(relics=("girya", "peace_pipe", "shovel"))
        advice = evaluate_rest_site(run, data)
        actions = {o.action for o in advice.options}
        assert actions == set(RestAction)
        ranks = [o.priority.rank for o in advice.options]
        assert ranks == sorted(ranks)

    def test_peace_pipe_targets_curse(self, data, make_run):
        run = make_run(["strike_r", "bash", "regret"], relics=("peace_pipe",))
        toke = evaluate_rest_site(run, data).option_for(RestAction.TOKE)
        assert toke.priority == RestPriority.MUST_DO
        assert toke.target == "regret"

    def test_no_girya_no_lift(self, ironclad_run, data):
        assert evaluate_rest_site(ironclad_run, data).option_for(RestAction.LIFT) is None


# =============================================================================
# Path
# =============================================================================


class TestPathStrategy:
    def test_every_node_type_is_covered(self, ironclad_run, data):
        strategy = generate_path_strategy(ironclad_run, data)
        assert tuple(r.node for r in strategy.recommendations) == tuple(NodeType)
        assert 1 <= len(strategy.goals) <= 4

    def test_strong_deck_seeks_elites(self, ironclad_run, data):
        strategy = generate_path_strategy(ironclad_run.with_changes(floor=5), data,
                                          health=health_report(80.0))
        elite = strategy.recommendation_for(NodeType.ELITE)
        assert elite.priority == NodePriority.HIGH
        assert strategy.recommendation_for(NodeType.EVENT).priority == NodePriority.HIGH
        assert strategy.general_strategy.startswith("AGGRESSIVE")

    def test_weak_deck_avoids_elites(self, ironclad_run, data):
        strategy = generate_path_strategy(ironclad_run, data, health=health_report(40.0))
        elite = strategy.recommendation_for(NodeType.ELITE)
        assert elite.priority == NodePriority.AVOID
        assert elite.risk == RiskLevel.DANGEROUS
        assert strategy.general_strategy.startswith("DECK BUILDING")

    def test_critical_hp_survival_mode(self, ironclad_run, data):
        run = ironclad_run.with_changes(current_hp=20)
        strategy = generate_path_strategy(run, data, health=health_report(80.0))
        assert strategy.recommendation_for(NodeType.REST).priority == NodePriority.CRITICAL
        assert strategy.recommendation_for(NodeType.ELITE).priority == NodePriority.AVOID
        assert strategy.recommendation_for(NodeType.EVENT).priority == NodePriority.AVOID
        assert strategy.recommendation_for(NodeType.MONSTER).priority == NodePriority.AVOID
        assert strategy.general_strategy.startswith("SURVIVAL")

    def test_rest_before_boss(self, ironclad_run, data):
        run = ironclad_run.with_changes(floor=14, current_hp=50)
        strategy = generate_path_strategy(run, data, health=health_report(65.0))
        assert strategy.recommendation_for(NodeType.REST).priority == NodePriority.CRITICAL
        assert strategy.general_strategy.startswith("BOSS PREP")

    def test_rich_player_visits_shop(self, ironclad_run, data):
        strategy = generate_path_strategy(ironclad_run.with_changes(gold=300), data,
                                          health=health_report(65.0))
        assert strategy.recommendation_for(NodeType.SHOP).priority == NodePriority.CRITICAL

    def test_fixed_nodes(self, ironclad_run, data):
        for score in (20.0, 60.0, 95.0):
            strategy = generate_path_strategy(ironclad_run, data, health=health_report(score))
            assert strategy.recommendation_for(NodeType.TREASURE).priority == NodePriority.HIGH
            assert strategy.recommendation_for(NodeType.BOSS).priority == NodePriority.CRITICAL

    def test_critical_categories_become_goals_and_warnings(self, ironclad_run, data):
        health = health_report(55.0, damage=CategoryStatus.CRITICAL, defense=CategoryStatus.CRITICAL)
        strategy = generate_path_strategy(ironclad_run.with_changes(floor=5), data, health=health)
        assert "Get 2-3 high-damage attack cards" in strategy.goals
        assert "Add 3-4 block cards immediately" in strategy.goals
        assert len(strategy.warnings) == 2

    def test_recommendation_for_missing_node(self):
        strategy = PathStrategy(floor=1, act=1, floors_until_boss=15, recommendations=(),
                                general_strategy="")
        with pytest.raises(KeyError):
            strategy.recommendation_for(NodeType.SHOP)


# =============================================================================
# Keys
# =============================================================================


class TestKeys:
    def test_unknown_key_raises(self, ironclad_run, data):
        with pytest.raises(ValueError):
            evaluate_key("topaz", ironclad_run, data)

    def test_last_key_is_high(self, ironclad_run, data):
        run = ironclad_run.with_changes(keys=("ruby", "sapphire"))
        advice = evaluate_key("emerald", run, data, health_report(20.0))
        assert advice.priority == KeyPriority.HIGH

    def test_act_one_emerald_is_low(self, ironclad_run, data):
        advice = evaluate_key("emerald", ironclad_run, data, health_report(80.0))
        assert advice.priority == KeyPriority.LOW

    def test_weak_deck_steps_down(self, ironclad_run, data):
        run = ironclad_run.with_changes(floor=40)
        assert evaluate_key("sapphire", run, data, health_report(80.0)).priority == KeyPriority.HIGH
        weak = evaluate_key("sapphire", run, data, health_report(40.0))
        assert weak.priority == KeyPriority.MEDIUM
        assert "deck health" in weak.reason

    def test_low_hp_avoids_sapphire(self, ironclad_run, data):
        run = ironclad_run.with_changes(floor=40, current_hp=10)
        assert evaluate_key("sapphire", run, data, health_report(80.0)).priority == KeyPriority.AVOID

    def test_obtained_keys_are_omitted(self, ironclad_run, data):
        advice = evaluate_keys(ironclad_run.with_changes(keys=("ruby",)), data, health_report(60.0))
        assert [a.key for a in advice] == ["emerald", "sapphire"]
        assert evaluate_keys(ironclad_run.with_changes(keys=("emerald", "ruby", "sapphire")), data) == ()


# =============================================================================
# Blessings
# =============================================================================


class TestBlessings:
    @pytest.mark.parametrize("blessing_id,rating", [
        ("boss_relic", 4.0),
        ("one_rare_relic", 3.5),
        ("remove_two", 3.0),
        ("three_rare_cards", 2.5),
        ("hundred_gold", 2.0),
        ("two_fifty_gold", 2.5),
        ("twenty_percent_hp_bonus", 1.5),
    ])
    def test_ratings_on_the_starter(self, ironclad_run, data, blessing_id, rating):
        assert evaluate_blessing(blessing_id, ironclad_run, data).rating == pytest.approx(rating)

    def test_buckets(self, ironclad_run, data):
        assert evaluate_blessing("boss_relic", ironclad_run, data).priority == Priority.MUST_PICK
        assert evaluate_blessing("twenty_percent_hp_bonus", ironclad_run, data).priority == Priority.SKIP

    def test_removal_is_worth_more_with_a_curse(self, data):
        run = create_starter_run(Character.IRONCLAD, ascension=10)
        assert evaluate_blessing("remove_two", run, data).rating == pytest.approx(4.0)

    def test_action_is_read_from_description(self, data, synthetic_data):
        assert classify_blessing(data.blessing("three_enemy_kill")) == BlessingAction.NONE
        assert classify_blessing(synthetic_data.blessing("pocket_money")) == BlessingAction.GAIN_GOLD
        assert classify_blessing(synthetic_data.blessing("spring_clean")) == BlessingAction.REMOVE_CARD

    def test_unknown_blessing_is_neutral(self, ironclad_run, data):
        advice = evaluate_blessing("wishing_well", ironclad_run, data)
        assert advice.rating == 2.5
        assert advice.action == BlessingAction.NONE

    def test_rank_blessings(self, ironclad_run, data):
        ranked = rank_blessings(["hundred_gold", "boss_relic", "one_rare_relic"], ironclad_run, data)
        assert [a.blessing_id for a in ranked] == ["boss_relic", "one_rare_relic", "hundred_gold"]

    def test_removal_targets_skip_unremovable(self, data):
        run = create_starter_run(Character.IRONCLAD, ascension=10)
        targets = blessing_removal_targets("remove_two", run, data)
        assert [t.instance_id for t in targets] == ["card-0", "card-1"]
        assert all(t.card_id == "strike_r" for t in targets)

    def test_non_removal_blessing_has_no_targets(self, ironclad_run, data):
        assert blessing_removal_targets("hundred_gold", ironclad_run, data) == []
        assert blessing_removal_targets("wishing_well", ironclad_run, data) == []
