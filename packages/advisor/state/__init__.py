"""
State module - run snapshots and act/floor arithmetic.
"""

from .run import (
    CardInstance,
    RunState,
    KEYS,
    BASE_HP,
    act_for_floor,
    boss_floor_for_act,
    floors_until_boss,
    make_deck,
    create_starter_run,
)
