"""Phase sequencing: map a whole number of weeks onto the periodization template.

Every plan has the same skeleton:

    Test, Test, [Filler], [bridge], (Recovery, Build 1, Build 2, Key) x N, Taper, Race

The optional Filler week and the bridge absorb whatever the 4-week main
blocks cannot.  Both are chosen from ``total_weeks % 8`` through a single
lookup table so every residue is handled in one place:

    remainder  filler  bridge
    0, 4       0       -
    1, 5       1       -
    2, 6       0       Build 2, Key
    3, 7       0       Build 1, Build 2, Key

For every ``total_weeks >= MIN_PLAN_WEEKS`` the pieces add up exactly:
``TEST_WEEKS + filler + len(bridge) + 4 * cycles + TAPER_WEEKS + RACE_WEEKS``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

from training_plan.exceptions import InsufficientWeeksError
from training_plan.models.enums import (
    DAYS_PER_WEEK,
    FIXED_WEEKS,
    MAIN_BLOCK_WEEKS,
    MIN_PLAN_WEEKS,
    RACE_WEEKS,
    SUPER_CYCLE_WEEKS,
    TAPER_WEEKS,
    TEST_WEEKS,
    PhaseLabel,
)

logger = logging.getLogger(__name__)


MAIN_BLOCK: tuple[PhaseLabel, ...] = (
    PhaseLabel.RECOVERY,
    PhaseLabel.BUILD_1,
    PhaseLabel.BUILD_2,
    PhaseLabel.KEY,
)

_SHORT_BRIDGE = (PhaseLabel.BUILD_2, PhaseLabel.KEY)
_LONG_BRIDGE = (PhaseLabel.BUILD_1, PhaseLabel.BUILD_2, PhaseLabel.KEY)


@dataclass(frozen=True)
class RemainderRule:
    """Extra weeks inserted ahead of the main blocks for one residue."""

    filler_weeks: int
    bridge: tuple[PhaseLabel, ...] = ()


REMAINDER_RULES: MappingProxyType[int, RemainderRule] = MappingProxyType({
    0: RemainderRule(filler_weeks=0),
    1: RemainderRule(filler_weeks=1),
    2: RemainderRule(filler_weeks=0, bridge=_SHORT_BRIDGE),
    3: RemainderRule(filler_weeks=0, bridge=_LONG_BRIDGE),
    4: RemainderRule(filler_weeks=0),
    5: RemainderRule(filler_weeks=1),
    6: RemainderRule(filler_weeks=0, bridge=_SHORT_BRIDGE),
    7: RemainderRule(filler_weeks=0, bridge=_LONG_BRIDGE),
})


def remainder_rule(total_weeks: int) -> RemainderRule:
    """Look up the filler/bridge rule for *total_weeks*."""
    return REMAINDER_RULES[total_weeks % SUPER_CYCLE_WEEKS]


def count_filler_weeks(total_weeks: int) -> int:
    """Number of Filler weeks (0 or 1)."""
    return remainder_rule(total_weeks).filler_weeks


def bridge_for(total_weeks: int) -> tuple[PhaseLabel, ...]:
    """Partial main block inserted before the repeating cycles (0, 2 or 3 weeks)."""
    return remainder_rule(total_weeks).bridge


def count_main_block_cycles(total_weeks: int, filler_weeks: int) -> int:
    """Number of full Recovery/Build 1/Build 2/Key repetitions.

    Floor division: the bridge weeks are what the floor leaves over.
    """
    return (total_weeks - filler_weeks - FIXED_WEEKS) // MAIN_BLOCK_WEEKS


def sequence_phases(total_weeks: int) -> tuple[PhaseLabel, ...]:
    """Produce the ordered phase label for every week of the plan.

    Args:
        total_weeks: Number of complete weeks between start and race.

    Returns:
        Tuple of PhaseLabel, one per week, in chronological order.

    Raises:
        InsufficientWeeksError: If total_weeks < MIN_PLAN_WEEKS.
    """
    if total_weeks < MIN_PLAN_WEEKS:
        raise InsufficientWeeksError(total_weeks, MIN_PLAN_WEEKS)

    rule = remainder_rule(total_weeks)
    cycles = count_main_block_cycles(total_weeks, rule.filler_weeks)

    phases = (
        (PhaseLabel.TEST,) * TEST_WEEKS
        + (PhaseLabel.FILLER,) * rule.filler_weeks
        + rule.bridge
        + MAIN_BLOCK * cycles
        + (PhaseLabel.TAPER,) * TAPER_WEEKS
        + (PhaseLabel.RACE,) * RACE_WEEKS
    )

    logger.debug(
        "Sequenced %d weeks: filler=%d bridge=%d cycles=%d",
        total_weeks,
        rule.filler_weeks,
        len(rule.bridge),
        cycles,
    )
    return phases


# ---------------------------------------------------------------------------
# Date-driven utilities
# ---------------------------------------------------------------------------


def compute_plan_weeks(start_date: date, race_date: date) -> int:
    """Count the complete weeks in the inclusive span [start_date, race_date].

    A trailing partial week is dropped.  A race date before the start date
    yields 0.

    Args:
        start_date: First day of training.
        race_date: Race day (counted as a training day).

    Returns:
        Number of complete 7-day weeks.
    """
    total_days = (race_date - start_date).days + 1
    return max(0, total_days) // DAYS_PER_WEEK
