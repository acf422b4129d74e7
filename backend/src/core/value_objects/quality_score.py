"""QualityScore value object - weighted 0-100 assessment of generated code."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @classmethod
    def from_score(cls, score: float) -> Grade:
        if score >= 90:
            return cls.A
        if score >= 80:
            return cls.B
        if score >= 70:
            return cls.C
        if score >= 60:
            return cls.D
        return cls.F


# Sub-score weights, in analyzer run order.
QUALITY_WEIGHTS: dict[str, float] = {
    "semantics": 0.25,
    "structure": 0.20,
    "styling": 0.20,
    "responsiveness": 0.15,
    "accessibility": 0.10,
    "best_practices": 0.10,
}

_GRADE_COLORS = {
    Grade.A: "text-green-600",
    Grade.B: "text-blue-600",
    Grade.C: "text-yellow-600",
    Grade.D: "text-orange-600",
    Grade.F: "text-red-600",
}

_GRADE_DESCRIPTIONS = {
    Grade.A: "Excellent - Production ready code",
    Grade.B: "Good - Minor improvements needed",
    Grade.C: "Fair - Several improvements needed",
    Grade.D: "Poor - Significant improvements needed",
    Grade.F: "Fail - Major issues present",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class QualityBreakdown:
    """Six independent sub-scores, each clamped to [0, 100]."""

    semantics: int = 0
    structure: int = 0
    styling: int = 0
    responsiveness: int = 0
    accessibility: int = 0
    best_practices: int = 0

    def __post_init__(self) -> None:
        for name in QUALITY_WEIGHTS:
            clamped = max(0, min(100, int(getattr(self, name))))
            object.__setattr__(self, name, clamped)

    def weighted_total(self) -> int:
        return round_half_up(
            self.semantics * QUALITY_WEIGHTS["semantics"]
            + self.structure * QUALITY_WEIGHTS["structure"]
            + self.styling * QUALITY_WEIGHTS["styling"]
            + self.responsiveness * QUALITY_WEIGHTS["responsiveness"]
            + self.accessibility * QUALITY_WEIGHTS["accessibility"]
            + self.best_practices * QUALITY_WEIGHTS["best_practices"]
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "semantics": self.semantics,
            "structure": self.structure,
            "styling": self.styling,
            "responsiveness": self.responsiveness,
            "accessibility": self.accessibility,
            "bestPractices": self.best_practices,
        }


@dataclass(frozen=True)
class QualityScore:
    """Immutable result of one code quality analysis."""

    overall: int
    breakdown: QualityBreakdown
    issues: tuple[str, ...] = field(default_factory=tuple)
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "overall", max(0, min(100, int(self.overall))))
        object.__setattr__(self, "issues", tuple(self.issues))
        object.__setattr__(self, "suggestions", tuple(self.suggestions))

    @property
    def grade(self) -> Grade:
        return Grade.from_score(self.overall)

    @property
    def is_acceptable(self) -> bool:
        return self.overall >= 70

    @classmethod
    def from_breakdown(
        cls,
        breakdown: QualityBreakdown,
        issues: list[str] | tuple[str, ...] = (),
        suggestions: list[str] | tuple[str, ...] = (),
    ) -> QualityScore:
        return cls(
            overall=breakdown.weighted_total(),
            breakdown=breakdown,
            issues=tuple(issues),
            suggestions=tuple(suggestions),
        )

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "breakdown": self.breakdown.to_dict(),
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
            "grade": self.grade.value,
        }


def grade_color(grade: Union[Grade, str, None]) -> str:
    """Display colour token for a grade; neutral grey for anything unrecognised."""
    try:
        return _GRADE_COLORS[Grade(grade)]
    except (ValueError, KeyError, TypeError):
        return "text-gray-600"


def grade_description(grade: Union[Grade, str, None]) -> str:
    try:
        return _GRADE_DESCRIPTIONS[Grade(grade)]
    except (ValueError, KeyError, TypeError):
        return "Unknown quality"
