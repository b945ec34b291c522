"""Phase labels and the structural constants of the periodization template.

The template is: two Test weeks, an optional Filler week, an optional bridge
of 2-3 main-block weeks, repeated 4-week main blocks, then Taper and Race.
"""

from __future__ import annotations

from enum import IntEnum, auto


class PhaseLabel(IntEnum):
    """Training phase of a single week, ordered by training progression."""

    TEST = auto()
    FILLER = auto()
    RECOVERY = auto()
    BUILD_1 = auto()
    BUILD_2 = auto()
    KEY = auto()
    TAPER = auto()
    RACE = auto()

    @property
    def label(self) -> str:
        """Display text, e.g. ``"Build 1"``."""
        return _LABELS[self]

    @classmethod
    def from_label(cls, text: str) -> PhaseLabel:
        """Parse display text back into a PhaseLabel.

        Raises:
            ValueError: If *text* is not a known phase label.
        """
        for phase, label in _LABELS.items():
            if label == text:
                return phase
        raise ValueError(f"Unknown phase label: {text!r}")


_LABELS: dict[PhaseLabel, str] = {
    PhaseLabel.TEST: "Test",
    PhaseLabel.FILLER: "Filler",
    PhaseLabel.RECOVERY: "Recovery",
    PhaseLabel.BUILD_1: "Build 1",
    PhaseLabel.BUILD_2: "Build 2",
    PhaseLabel.KEY: "Key",
    PhaseLabel.TAPER: "Taper",
    PhaseLabel.RACE: "Race",
}


# ---------------------------------------------------------------------------
# Template constants
# ---------------------------------------------------------------------------

DAYS_PER_WEEK = 7

# Fixed weeks present in every plan
TEST_WEEKS = 2
TAPER_WEEKS = 1
RACE_WEEKS = 1
FIXED_WEEKS = TEST_WEEKS + TAPER_WEEKS + RACE_WEEKS

MAIN_BLOCK_WEEKS = 4  # Recovery, Build 1, Build 2, Key
SUPER_CYCLE_WEEKS = 2 * MAIN_BLOCK_WEEKS  # remainder table period

# Shortest plan: the fixed weeks plus one full main block
MIN_PLAN_WEEKS = FIXED_WEEKS + MAIN_BLOCK_WEEKS
