"""
Slay the Spire Advisor

A deterministic, rule-based advisory engine: it turns a snapshot of an
in-progress run into ranked, explainable recommendations. Every evaluator
is a pure function of its inputs and an explicit reference data handle.

Core subsystems:
- content: reference catalogs (cards, relics, potions, monsters, events,
  blessings, archetypes) and the ReferenceData handle
- state: run snapshot and act/floor arithmetic
- calc: deck composition, archetypes, deck health, relic buffs
- handlers: one advisor per decision point (rewards, fights, rooms, map)

Usage:
    from packages.advisor import default_reference_data, create_starter_run, summarize_run
    from packages.advisor import Character

    data = default_reference_data()
    run = create_starter_run(Character.SILENT, ascension=10)
    summary = summarize_run(run, data)
"""

__version__ = "0.1.0"

from .content.catalog import ReferenceData, default_reference_data
from .content.cards import Character
from .state.run import CardInstance, RunState, create_starter_run
from .api import RunSummary, summarize_run
