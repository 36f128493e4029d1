"""
Tests for the run snapshot and the reference data handle:
- act / floor arithmetic
- starter runs and ascension penalties
- snapshot JSON parsing
- catalog loading from dicts and files
"""

import json

import pytest

from packages.advisor.content.blessings import get_blessing
from packages.advisor.content.cards import Character, get_card
from packages.advisor.content.enemies import get_monster
from packages.advisor.content.events import get_event
from packages.advisor.content.potions import get_potion
from packages.advisor.content.relics import get_relic
from packages.advisor.content.catalog import ReferenceData, default_reference_data
from packages.advisor.state.run import (
    RunState,
    act_for_floor,
    create_starter_run,
    floors_until_boss,
    make_deck,
)


# =============================================================================
# Act / Floor Arithmetic
# =============================================================================


class TestFloorArithmetic:
    @pytest.mark.parametrize("floor,act", [
        (1, 1), (16, 1), (17, 2), (33, 2), (34, 3), (52, 3), (53, 4), (56, 4),
    ])
    def test_act_for_floor(self, floor, act):
        assert act_for_floor(floor) == act

    def test_boss_floor_has_zero_floors_left(self):
        assert floors_until_boss(16) == 0
        assert floors_until_boss(33) == 0

    def test_floors_until_boss_counts_down(self):
        assert floors_until_boss(1) == 15
        assert floors_until_boss(30) == 3
        assert floors_until_boss(50) == 2

    def test_derived_properties(self):
        run = RunState(character=Character.SILENT, floor=20, current_hp=35, max_hp=70)
        assert run.act == 2
        assert run.boss_floor == 33
        assert run.floors_until_boss == 13
        assert run.hp_ratio == pytest.approx(0.5)


# =============================================================================
# Starter Runs
# =============================================================================


class TestStarterRun:
    def test_ironclad_starter_deck(self, ironclad_run):
        assert ironclad_run.count_card("strike_r") == 5
        assert ironclad_run.count_card("defend_r") == 4
        assert ironclad_run.count_card("bash") == 1
        assert ironclad_run.relics == ("burning_blood",)
        assert ironclad_run.current_hp == ironclad_run.max_hp == 80
        assert ironclad_run.gold == 99

    def test_instances_are_distinct(self, ironclad_run):
        ids = [card.instance_id for card in ironclad_run.deck]
        assert len(ids) == len(set(ids))

    def test_ascension_ten_adds_ascenders_bane(self):
        run = create_starter_run(Character.IRONCLAD, ascension=10)
        assert run.count_card("ascenders_bane") == 1
        assert run.current_hp == 72

    def test_ascension_fourteen_lowers_max_hp(self):
        run = create_starter_run(Character.DEFECT, ascension=14)
        assert run.max_hp == 71

    @pytest.mark.parametrize("character", [
        Character.IRONCLAD, Character.SILENT, Character.DEFECT, Character.WATCHER,
    ])
    def test_every_character_has_a_starter(self, character):
        run = create_starter_run(character)
        assert len(run.deck) >= 10
        assert run.relics


# =============================================================================
# Snapshot Parsing
# =============================================================================


class TestSnapshotParsing:
    def test_from_dict_with_string_deck(self):
        run = RunState.from_dict({
            "character": "Silent", "deck": ["strike_g", "neutralize+"],
            "floor": 12, "current_hp": 40, "max_hp": 70, "gold": 150,
        })
        assert run.character == Character.SILENT
        assert run.deck[1].card_id == "neutralize"
        assert run.deck[1].upgraded is True
        assert run.deck[1].instance_id == "card-1"
        assert run.gold == 150

    def test_from_dict_with_object_deck(self):
        run = RunState.from_dict({
            "character": "defect",
            "deck": [{"id": "zap", "upgraded": True, "instance_id": "z1"}],
            "keys": ["ruby"], "boss": "hexaghost",
        })
        assert run.deck[0].instance_id == "z1"
        assert run.deck[0].upgraded
        assert run.has_key("ruby")
        assert run.boss == "hexaghost"

    def test_current_hp_defaults_to_max(self):
        run = RunState.from_dict({"character": "watcher", "max_hp": 60})
        assert run.current_hp == 60

    def test_missing_character_raises_key_error(self):
        with pytest.raises(KeyError):
            RunState.from_dict({"deck": []})

    def test_unknown_character_raises_value_error(self):
        with pytest.raises(ValueError):
            RunState.from_dict({"character": "necromancer"})

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="Unknown key"):
            RunState.from_dict({"character": "ironclad", "keys": ["topaz"]})

    def test_to_dict_round_trips(self, ironclad_run):
        again = RunState.from_dict(ironclad_run.to_dict())
        assert again == ironclad_run

    def test_with_changes_leaves_original(self, ironclad_run):
        later = ironclad_run.with_changes(floor=10, gold=10)
        assert later.floor == 10
        assert ironclad_run.floor == 1

    def test_make_deck_marks_upgrades(self):
        deck = make_deck(["bash+", "inflame"], prefix="x")
        assert deck[0].upgraded and deck[0].card_id == "bash"
        assert deck[1].instance_id == "x-1"
        assert repr(deck[0]) == "bash+"


# =============================================================================
# Reference Data
# =============================================================================


class TestReferenceData:
    def test_default_data_is_cached(self):
        assert default_reference_data() is default_reference_data()

    def test_unknown_lookups_return_none(self, data):
        assert data.card("not_a_card") is None
        assert data.relic("not_a_relic") is None
        assert data.monster("not_a_monster") is None
        assert data.event("not_an_event") is None
        assert data.blessing("not_a_blessing") is None

    def test_catalog_views_are_read_only(self, data):
        with pytest.raises(TypeError):
            data.cards["bash"] = None

    def test_bosses_for_act(self, data):
        assert data.bosses_for_act(1) == ("slime_boss", "the_guardian", "hexaghost")
        assert data.bosses_for_act(4) == ("corrupt_heart",)
        assert data.bosses_for_act(9) == ()

    def test_every_boss_is_in_the_catalog(self, data):
        for act in (1, 2, 3, 4):
            for boss_id in data.bosses_for_act(act):
                assert data.monster(boss_id) is not None, boss_id

    def test_starter_cards_are_in_the_catalog(self, data):
        for character in (Character.IRONCLAD, Character.SILENT, Character.DEFECT, Character.WATCHER):
            for card in create_starter_run(character).deck:
                assert data.card(card.card_id) is not None, card.card_id

    def test_from_dict(self, synthetic_data):
        assert set(synthetic_data.cards) == {"jab", "guard", "cleave_wave", "grow", "gloom"}
        assert synthetic_data.card("gloom").is_dead
        assert synthetic_data.bosses_for_act(1) == ("big_boss",)
        assert len(synthetic_data.archetypes_for(Character.IRONCLAD)) == 1
        assert synthetic_data.archetypes_for(Character.SILENT) == ()

    def test_missing_sections_are_empty(self):
        reference = ReferenceData.from_dict({})
        assert len(reference.cards) == 0
        assert reference.bosses_for_act(1) == ()

    def test_from_json(self, tmp_path, synthetic_catalog):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(synthetic_catalog))
        reference = ReferenceData.from_json(str(path))
        assert reference.relic("heavy_crown").name == "Heavy Crown"

    def test_from_json_rejects_non_object(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError):
            ReferenceData.from_json(str(path))

    @pytest.mark.parametrize("getter", [get_card, get_relic, get_potion, get_monster, get_event, get_blessing])
    def test_catalog_helpers_raise_for_unknown_ids(self, getter):
        with pytest.raises(ValueError):
            getter("no_such_thing")
