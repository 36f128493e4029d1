"""
Tests for the public surface:
- run summary and the api exports
- repeatability of every evaluator
- settings from the environment
- the command line interface (exit codes, text and JSON output)
"""

import json

import pytest

import cli
from packages.advisor import api
from packages.advisor.api import (
    Character,
    ShopItem,
    analyze_boss_preparation,
    analyze_deck_health,
    create_starter_run,
    detect_archetypes,
    evaluate_combat_readiness,
    evaluate_event,
    evaluate_keys,
    evaluate_relic,
    evaluate_rest_site,
    evaluate_shop,
    generate_path_strategy,
    rank_blessings,
    rank_boss_relics,
    rank_card_rewards,
    rank_removals,
    summarize_run,
    to_jsonable,
)
from packages.advisor.config import load_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("ADVISOR_LOG_LEVEL", "ADVISOR_CATALOG", "ADVISOR_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# API
# =============================================================================


class TestApi:
    def test_exports_resolve(self):
        for name in api.__all__:
            assert hasattr(api, name), name

    def test_summarize_starter(self, ironclad_run, data):
        summary = summarize_run(ironclad_run, data)
        assert summary.character == Character.IRONCLAD
        assert summary.act == 1
        assert summary.floors_until_boss == 15
        assert summary.build is None
        assert summary.archetypes == ()
        assert summary.boss.boss_name == "Act 1 Boss"
        assert len(summary.path.recommendations) == 7

    def test_summary_shares_one_health_report(self, data, make_run):
        run = make_run(["inflame", "limit_break", "heavy_blade", "twin_strike", "strike_r"], floor=8)
        summary = summarize_run(run, data)
        assert summary.health == analyze_deck_health(run, data)
        assert summary.build.id == "strength_scaling"

    def test_summary_is_json_ready(self, ironclad_run, data):
        document = to_jsonable(summarize_run(ironclad_run, data))
        assert json.loads(json.dumps(document)) == document
        assert document["character"] == "ironclad"


class TestRepeatability:
    """Same snapshot and catalog in, same advice out."""

    EVALUATORS = {
        "health": lambda run, data: analyze_deck_health(run, data),
        "archetypes": lambda run, data: detect_archetypes(run.deck, data, run.character),
        "cards": lambda run, data: rank_card_rewards(
            ["inflame", "pommel_strike", "regret"], run.deck, data, run.relics, run.character),
        "relic": lambda run, data: evaluate_relic("pen_nib", run.deck, data, run.relics),
        "boss_relics": lambda run, data: rank_boss_relics(
            ["velvet_choker", "black_blood", "sozu"], run, data),
        "combat": lambda run, data: evaluate_combat_readiness("gremlin_nob", run, data),
        "boss": lambda run, data: analyze_boss_preparation(run, data),
        "event": lambda run, data: evaluate_event("big_fish", run, data),
        "removals": lambda run, data: rank_removals(run, data),
        "shop": lambda run, data: evaluate_shop(run, data, [
            ShopItem("card", "inflame", 50), ShopItem("relic", "vajra", 150),
            ShopItem("potion", "fire_potion", 50)]),
        "path": lambda run, data: generate_path_strategy(run, data),
        "rest": lambda run, data: evaluate_rest_site(run, data),
        "keys": lambda run, data: evaluate_keys(run, data),
        "blessings": lambda run, data: rank_blessings(["remove_two", "boss_relic"], run, data),
        "summary": lambda run, data: summarize_run(run, data),
    }

    @pytest.mark.parametrize("name", sorted(EVALUATORS))
    def test_repeated_calls_agree(self, name, data):
        evaluator = self.EVALUATORS[name]
        run = create_starter_run(Character.IRONCLAD, ascension=10).with_changes(
            floor=20, current_hp=40, gold=250, potions=("fire_potion",))
        first = to_jsonable(evaluator(run, data))
        second = to_jsonable(evaluator(run, data))
        assert first == second

    def test_inputs_are_not_modified(self, ironclad_run, data):
        before = ironclad_run.to_dict()
        for evaluator in self.EVALUATORS.values():
            evaluator(ironclad_run, data)
        assert ironclad_run.to_dict() == before


# =============================================================================
# Settings
# =============================================================================


class TestSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.log_level == "INFO"
        assert settings.catalog_path is None
        assert settings.output == "text"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ADVISOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("ADVISOR_CATALOG", "/tmp/catalog.json")
        monkeypatch.setenv("ADVISOR_OUTPUT", "json")
        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.catalog_path == "/tmp/catalog.json"
        assert settings.output == "json"


# =============================================================================
# CLI
# =============================================================================


class TestCli:
    @pytest.mark.parametrize("argv", [
        ["summary"],
        ["health"],
        ["archetypes"],
        ["card", "inflame", "regret"],
        ["relic", "vajra"],
        ["boss-relic", "velvet_choker", "sozu"],
        ["combat", "cultist"],
        ["boss"],
        ["event", "golden_shrine"],
        ["remove"],
        ["shop", "--card", "inflame:50", "--relic", "vajra:150", "--potion", "fire_potion:50"],
        ["path"],
        ["rest"],
        ["keys"],
        ["blessing", "remove_two", "hundred_gold"],
    ])
    def test_every_command_succeeds(self, argv, capsys):
        assert cli.main(argv) == 0
        assert capsys.readouterr().out.strip()

    def test_no_command(self, capsys):
        assert cli.main([]) == 1

    def test_json_output(self, capsys):
        assert cli.main(["card", "inflame", "regret", "--json"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert [e["card_id"] for e in document] == ["inflame", "regret"]
        assert document[0]["priority"] == "must-pick"

    def test_json_output_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("ADVISOR_OUTPUT", "json")
        assert cli.main(["keys"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert [a["key"] for a in document] == ["emerald", "ruby", "sapphire"]

    def test_state_file(self, tmp_path, capsys):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({
            "character": "silent", "deck": ["strike_g", "defend_g", "neutralize"],
            "floor": 20, "current_hp": 30, "max_hp": 70, "gold": 300,
        }))
        assert cli.main(["summary", "--state", str(path), "--json"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["character"] == "silent"
        assert document["act"] == 2

    def test_missing_state_file(self, tmp_path, capsys):
        assert cli.main(["summary", "--state", str(tmp_path / "missing.json")]) == 2
        assert "error" in capsys.readouterr().err

    def test_state_must_be_an_object(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text("[]")
        assert cli.main(["health", "--state", str(path)]) == 2

    def test_state_without_character(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"deck": ["bash"]}))
        assert cli.main(["health", "--state", str(path)]) == 2

    def test_bad_shop_item(self):
        assert cli.main(["shop", "--card", "inflame"]) == 2
        assert cli.main(["shop", "--card", "inflame:cheap"]) == 2
        assert cli.main(["shop", "--relic", "vajra:"]) == 2

    def test_evaluator_bug_is_not_reported_as_bad_input(self, monkeypatch):
        def broken(args, state, data):
            raise KeyError("missing_table_entry")

        monkeypatch.setitem(cli.COMMANDS, "health", broken)
        with pytest.raises(KeyError):
            cli.main(["health"])

    def test_external_catalog(self, tmp_path, synthetic_catalog, capsys):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(synthetic_catalog))
        assert cli.main(["card", "grow", "--catalog", str(path), "--json"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document[0]["name"] == "Grow"

    def test_unknown_character_is_rejected(self):
        with pytest.raises(SystemExit):
            cli.main(["health", "--starter", "necromancer"])

    def test_parse_shop_item(self):
        item = cli.parse_shop_item("card", "bash+:80")
        assert item == ShopItem(kind="card", item_id="bash", cost=80, upgraded=True)
