#!/usr/bin/env python3
"""
Slay the Spire Advisor - Command Line Interface

Reads a run snapshot (or builds a starter run) and prints advice for one
decision point.

Usage:
    python cli.py summary --state run.json
    python cli.py card inflame pommel_strike --starter ironclad
    python cli.py boss-relic velvet_choker runic_pyramid --state run.json --json
    python cli.py combat gremlin_nob --state run.json
    python cli.py shop --card shrug_it_off:75 --relic vajra:150 --state run.json

Settings come from the environment (or a .env file):
    ADVISOR_LOG_LEVEL  logging level (default INFO)
    ADVISOR_CATALOG    external catalog JSON used instead of the bundled one
    ADVISOR_OUTPUT     "json" to always print JSON

Exit status is 2 when the snapshot, catalog or arguments are invalid.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Tuple

from dotenv import load_dotenv

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from packages.advisor.api import (
    Character,
    ReferenceData,
    RunState,
    ShopItem,
    analyze_boss_preparation,
    analyze_deck_health,
    blessing_removal_targets,
    create_starter_run,
    default_reference_data,
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
    should_remove_at_shop,
    summarize_run,
    to_jsonable,
)
from packages.advisor.config import load_settings
from packages.advisor.content.cards import PLAYABLE_CHARACTERS

logger = logging.getLogger("cli")


# =============================================================================
# INPUT
# =============================================================================

def load_state(args) -> RunState:
    """Run snapshot from --state, or a starter run for --starter."""
    if args.state:
        with open(args.state) as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError(f"Run snapshot {args.state} must contain a JSON object")
        return RunState.from_dict(document)
    return create_starter_run(Character(args.starter), ascension=args.ascension)


def load_data(args, catalog_path) -> ReferenceData:
    path = args.catalog or catalog_path
    if path:
        return ReferenceData.from_json(path)
    return default_reference_data()


class InputError(ValueError):
    """Command arguments that cannot be turned into advisor inputs."""


def parse_shop_item(kind: str, value: str) -> ShopItem:
    """ITEM_ID:COST, with a trailing + on cards for upgraded."""
    item_id, sep, cost = value.rpartition(":")
    if not sep or not item_id:
        raise InputError(f"Shop {kind} must look like ID:COST, got {value!r}")
    try:
        price = int(cost)
    except ValueError:
        raise InputError(f"Shop {kind} cost must be a whole number, got {cost!r}") from None
    upgraded = kind == "card" and item_id.endswith("+")
    return ShopItem(kind=kind, item_id=item_id.rstrip("+"), cost=price, upgraded=upgraded)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_run_header(state: RunState) -> str:
    return (f"{state.character.value.title()} - floor {state.floor} (act {state.act}), "
            f"HP {state.current_hp}/{state.max_hp}, {state.gold} gold, A{state.ascension}")


def format_health(report) -> List[str]:
    lines = [f"Deck health: {report.overall_score:g}/100 ({report.grade.value}, {report.status.value}), "
             f"projected win rate {report.projected_win_rate}%"]
    for category in report.categories:
        lines.append(f"  {category.name:<12} {category.score:5.1f}  {category.grade.value}  "
                     f"{category.status.value}")
    for issue in report.critical_issues:
        lines.append(f"  ! {issue}")
    for recommendation in report.top_recommendations:
        lines.append(f"  > {recommendation}")
    return lines


def format_archetypes(archetypes) -> List[str]:
    if not archetypes:
        return ["No archetype detected yet"]
    lines = []
    for archetype in archetypes:
        lines.append(f"{archetype.name}: {archetype.strength}% "
                     f"(key cards: {', '.join(archetype.key_cards_present)})")
        if archetype.missing_key_cards:
            lines.append(f"  missing: {', '.join(archetype.missing_key_cards)}")
    return lines


def format_boss(prep) -> List[str]:
    lines = [f"{prep.boss_name}: {prep.readiness.value} ({prep.score:g}/100), "
             f"{prep.floors_until_boss} floors away"]
    for requirement in prep.requirements:
        mark = "x" if requirement.met else " "
        lines.append(f"  [{mark}] {requirement.name} ({requirement.importance.value}): "
                     f"{requirement.description}")
    lines.extend(f"  > {p}" for p in prep.top_priorities)
    lines.extend(f"  ! {w}" for w in prep.warnings)
    if prep.strategy:
        lines.append(f"  {prep.strategy}")
    return lines


def format_path(strategy) -> List[str]:
    lines = [strategy.general_strategy]
    for rec in strategy.recommendations:
        lines.append(f"  {rec.node.value:<9} {rec.priority.value:<8} {rec.risk.value:<9} {rec.reason}")
    lines.extend(f"  goal: {g}" for g in strategy.goals)
    lines.extend(f"  ! {w}" for w in strategy.warnings)
    return lines


def format_rating_list(evaluations) -> List[str]:
    return [f"{e.name}: {e.priority.value} ({e.rating:g}) - {e.reason}" for e in evaluations]


def format_removals(removals) -> List[str]:
    lines = []
    for advice in removals:
        suffix = "" if advice.removable else " [unremovable]"
        lines.append(f"{advice.name}: {advice.priority.value}, {advice.urgency.value} "
                     f"({advice.score}/10){suffix} - {advice.reason}")
    return lines


def emit(result: Any, text_lines: List[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(to_jsonable(result), indent=2))
    else:
        print("\n".join(text_lines))


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_summary(args, state, data) -> Tuple[Any, List[str]]:
    summary = summarize_run(state, data)
    lines = [format_run_header(state), ""]
    lines.extend(format_health(summary.health))
    lines.append("")
    lines.append(f"Detected build: {summary.build.name if summary.build else 'none'}")
    lines.append("")
    lines.extend(format_boss(summary.boss))
    lines.append("")
    lines.extend(format_path(summary.path))
    return summary, lines


def cmd_health(args, state, data):
    report = analyze_deck_health(state, data)
    return report, format_health(report)


def cmd_archetypes(args, state, data):
    archetypes = detect_archetypes(state.deck, data, state.character)
    return archetypes, format_archetypes(archetypes)


def cmd_card(args, state, data):
    evaluations = rank_card_rewards(args.ids, state.deck, data, state.relics, state.character)
    return evaluations, format_rating_list(evaluations)


def cmd_relic(args, state, data):
    evaluations = [evaluate_relic(r, state.deck, data, state.relics, state.character, state)
                   for r in args.ids]
    return evaluations, format_rating_list(evaluations)


def cmd_boss_relic(args, state, data):
    evaluations = rank_boss_relics(args.ids, state, data)
    return evaluations, format_rating_list(evaluations)


def cmd_combat(args, state, data):
    readiness = evaluate_combat_readiness(args.monster, state, data)
    lines = [f"{readiness.monster_name}: {readiness.readiness.value} ({readiness.score:g}/100)"]
    lines.extend(f"  + {s}" for s in readiness.strengths)
    lines.extend(f"  - {w}" for w in readiness.weaknesses)
    lines.extend(f"  > {r}" for r in readiness.recommendations)
    lines.extend(f"  strategy: {s}" for s in readiness.strategy)
    lines.extend(f"  potion: {p}" for p in readiness.potion_suggestions)
    lines.extend(f"  tip: {t}" for t in readiness.tips)
    return readiness, lines


def cmd_boss(args, state, data):
    prep = analyze_boss_preparation(state, data)
    return prep, format_boss(prep)


def cmd_event(args, state, data):
    advice = evaluate_event(args.event, state, data)
    lines = [f"{advice.event_name}: recommended {advice.recommended_choice or 'nothing'}"]
    for choice in advice.choices:
        status = f" (disabled: {choice.disabled_reason})" if choice.disabled else ""
        lines.append(f"  {choice.label}: {choice.rating.value}{status} - {choice.reason}")
    return advice, lines


def cmd_remove(args, state, data):
    removals = rank_removals(state, data)
    decision = should_remove_at_shop(state, data, removals)
    lines = format_removals(removals)
    verdict = "buy" if decision.recommend else "skip"
    lines.append(f"Shop removal ({decision.cost}g): {verdict} - {decision.reason}")
    return {"removals": removals, "decision": decision}, lines


def cmd_shop(args, state, data):
    items = ([parse_shop_item("card", s) for s in args.card]
             + [parse_shop_item("relic", s) for s in args.relic]
             + [parse_shop_item("potion", s) for s in args.potion])
    advice = evaluate_shop(state, data, items)
    lines = []
    for rec in advice.recommendations:
        lines.append(f"{rec.name} ({rec.cost}g): {rec.priority.value}, value {rec.value:g} - "
                     f"{'; '.join(rec.reasons[1:]) or rec.reasons[0]}")
    lines.extend(advice.strategy)
    return advice, lines


def cmd_path(args, state, data):
    strategy = generate_path_strategy(state, data)
    return strategy, format_path(strategy)


def cmd_rest(args, state, data):
    advice = evaluate_rest_site(state, data)
    lines = [advice.strategy, ""]
    for option in advice.options:
        target = f" -> {option.target}" if option.target else ""
        lines.append(f"  {option.action.value}: {option.priority.value}{target} - {'; '.join(option.reasons)}")
    return advice, lines


def cmd_keys(args, state, data):
    advice = evaluate_keys(state, data)
    lines = [f"{a.key}: {a.priority.value} - {a.reason}" for a in advice] or ["All keys obtained"]
    return advice, lines


def cmd_blessing(args, state, data):
    ranked = rank_blessings(args.ids, state, data)
    lines = []
    for advice in ranked:
        lines.append(f"{advice.name}: {advice.priority.value} ({advice.rating:g}) - "
                     f"{'; '.join(advice.reasons)}")
        for target in blessing_removal_targets(advice.blessing_id, state, data):
            lines.append(f"  remove: {target.name}")
    return ranked, lines


COMMANDS = {
    "summary": cmd_summary,
    "health": cmd_health,
    "archetypes": cmd_archetypes,
    "card": cmd_card,
    "relic": cmd_relic,
    "boss-relic": cmd_boss_relic,
    "combat": cmd_combat,
    "boss": cmd_boss,
    "event": cmd_event,
    "remove": cmd_remove,
    "shop": cmd_shop,
    "path": cmd_path,
    "rest": cmd_rest,
    "keys": cmd_keys,
    "blessing": cmd_blessing,
}


# =============================================================================
# MAIN
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    source = common.add_mutually_exclusive_group()
    source.add_argument("--state", help="Run snapshot JSON file")
    source.add_argument("--starter", default="ironclad",
                        choices=[c.value for c in PLAYABLE_CHARACTERS],
                        help="Use a floor-1 starter run for this character")
    common.add_argument("--ascension", "-a", type=int, default=0, help="Ascension level for --starter")
    common.add_argument("--catalog", help="External catalog JSON file")
    common.add_argument("--json", "-j", action="store_true", help="Output in JSON format")

    parser = argparse.ArgumentParser(
        description="Slay the Spire Advisor - rule-based run advice",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s summary --state run.json
  %(prog)s card inflame shrug_it_off --starter ironclad
  %(prog)s event golden_idol --state run.json --json
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("summary", parents=[common], help="Health, build, boss and path overview")
    subparsers.add_parser("health", parents=[common], help="Deck health report card")
    subparsers.add_parser("archetypes", parents=[common], help="Detected archetypes")

    card_parser = subparsers.add_parser("card", parents=[common], help="Rate card reward choices")
    card_parser.add_argument("ids", nargs="+", help="Offered card ids")
    relic_parser = subparsers.add_parser("relic", parents=[common], help="Rate relics")
    relic_parser.add_argument("ids", nargs="+", help="Relic ids")
    boss_relic_parser = subparsers.add_parser("boss-relic", parents=[common], help="Rate a boss chest")
    boss_relic_parser.add_argument("ids", nargs="+", help="Offered boss relic ids")

    combat_parser = subparsers.add_parser("combat", parents=[common], help="Readiness for a fight")
    combat_parser.add_argument("monster", help="Monster id")
    subparsers.add_parser("boss", parents=[common], help="Boss preparation checklist")

    event_parser = subparsers.add_parser("event", parents=[common], help="Rate event choices")
    event_parser.add_argument("event", help="Event id")

    subparsers.add_parser("remove", parents=[common], help="Card removal ranking")
    shop_parser = subparsers.add_parser("shop", parents=[common], help="Rate shop purchases")
    shop_parser.add_argument("--card", action="append", default=[], metavar="ID:COST")
    shop_parser.add_argument("--relic", action="append", default=[], metavar="ID:COST")
    shop_parser.add_argument("--potion", action="append", default=[], metavar="ID:COST")

    subparsers.add_parser("path", parents=[common], help="Map node priorities")
    subparsers.add_parser("rest", parents=[common], help="Rest site options")
    subparsers.add_parser("keys", parents=[common], help="Ascension key advice")
    blessing_parser = subparsers.add_parser("blessing", parents=[common], help="Rank offered blessings")
    blessing_parser.add_argument("ids", nargs="+", help="Offered blessing ids")
    return parser


def input_error(command: str, error: Exception) -> int:
    logger.debug("Command %s rejected its input", command, exc_info=True)
    print(f"error: {error}", file=sys.stderr)
    return 2


def main(argv=None) -> int:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        data = load_data(args, settings.catalog_path)
        state = load_state(args)
    except (OSError, ValueError, KeyError) as e:
        return input_error(args.command, e)

    try:
        result, lines = COMMANDS[args.command](args, state, data)
    except InputError as e:
        return input_error(args.command, e)

    emit(result, lines, args.json or settings.output == "json")
    return 0


if __name__ == "__main__":
    sys.exit(main())
