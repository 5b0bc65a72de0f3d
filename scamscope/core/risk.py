"""
Score -> label mapping
----------------------
Every analyzer produces an integer score in [0, 100]. These helpers turn that
score into the labels shown to users. Two taxonomies exist on purpose:

- risk level (5 tiers, with a display color)
- verdict/status (3 tiers)

They are kept as separate functions; neither is derived from the other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

MIN_SCORE = 0
MAX_SCORE = 100

# (threshold, level, color), evaluated highest-first
RISK_BANDS = (
    (90, "Critical Scam", "#b00020"),
    (70, "High Risk", "#ff4500"),
    (45, "Moderate Risk", "#ff8c00"),
    (20, "Low Risk", "#f2c94c"),
)
CLEAN_LEVEL = ("Clean / Safe", "#32a852")

VERDICT_BANDS = (
    (80, "POTENTIAL FRAUD"),
    (40, "UNSAFE"),
)
SAFE_VERDICT = "SAFE"


@dataclass(frozen=True)
class RiskAssessment:
    level: str
    color: str
    verdict: str
    status: str
    small_score: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round a raw analyzer total and bound it to [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(value)))


def classify_risk(score: float) -> Tuple[str, str]:
    for threshold, level, color in RISK_BANDS:
        if score >= threshold:
            return level, color
    return CLEAN_LEVEL


def verdict_status(score: float) -> Tuple[str, str]:
    for threshold, label in VERDICT_BANDS:
        if score >= threshold:
            return label, label
    return SAFE_VERDICT, SAFE_VERDICT


def small_score(score: float) -> int:
    return round_half_up(score / 10)


def assess(score: int) -> RiskAssessment:
    level, color = classify_risk(score)
    verdict, status = verdict_status(score)
    return RiskAssessment(
        level=level,
        color=color,
        verdict=verdict,
        status=status,
        small_score=small_score(score),
    )
