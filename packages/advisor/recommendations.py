"""
Recommendation vocabulary shared by every evaluator.

Each enum is closed and totally ordered by declaration: the first member is
the strongest recommendation. Comparison operators follow that order so
`Priority.GOOD_PICK <= evaluation.priority` reads "at least good-pick" and
`max()` returns the best bucket.

Also holds the rating -> bucket mappings and the JSON conversion used by
the CLI.
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Sequence, Tuple

from .config import (
    MUST_PICK_THRESHOLD,
    GOOD_PICK_THRESHOLD,
    SITUATIONAL_THRESHOLD,
    GRADE_BREAKPOINTS,
    STATUS_BREAKPOINTS,
)


class RankedEnum(Enum):
    """Enum ordered by declaration; earlier members rank higher."""

    @property
    def rank(self) -> int:
        """0 for the strongest member."""
        return type(self)._member_names_.index(self.name)

    def _check(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return other.rank

    def __lt__(self, other):
        other_rank = self._check(other)
        if other_rank is NotImplemented:
            return NotImplemented
        return self.rank > other_rank

    def __le__(self, other):
        other_rank = self._check(other)
        if other_rank is NotImplemented:
            return NotImplemented
        return self.rank >= other_rank

    def __gt__(self, other):
        other_rank = self._check(other)
        if other_rank is NotImplemented:
            return NotImplemented
        return self.rank < other_rank

    def __ge__(self, other):
        other_rank = self._check(other)
        if other_rank is NotImplemented:
            return NotImplemented
        return self.rank <= other_rank

    def __hash__(self):
        return hash(self.name)


# ============================================================================
# PRIORITY BUCKETS
# ============================================================================

class Priority(RankedEnum):
    """Card pick priority."""
    MUST_PICK = "must-pick"
    GOOD_PICK = "good-pick"
    SITUATIONAL = "situational"
    SKIP = "skip"


class RelicPriority(RankedEnum):
    """Relic take priority."""
    MUST_TAKE = "must-take"
    GOOD_TAKE = "good-take"
    SITUATIONAL = "situational"
    SKIP = "skip"


class RemovalPriority(RankedEnum):
    MUST_REMOVE = "must-remove"
    SHOULD_REMOVE = "should-remove"
    KEEP = "keep"


class ShopPriority(RankedEnum):
    MUST_BUY = "must-buy"
    STRONG_BUY = "strong-buy"
    CONSIDER = "consider"
    SKIP = "skip"


class Urgency(RankedEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EventRating(RankedEnum):
    HIGHLY_RECOMMENDED = "highly-recommended"
    RECOMMENDED = "recommended"
    SITUATIONAL = "situational"
    AVOID = "avoid"


class Readiness(RankedEnum):
    """Combat / boss readiness verdict."""
    READY = "ready"
    CAUTION = "caution"
    DANGER = "danger"


class Importance(RankedEnum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"


class NodePriority(RankedEnum):
    """How strongly to path toward a map node type."""
    CRITICAL = "critical"
    HIGH = "high"
    NEUTRAL = "neutral"
    LOW = "low"
    AVOID = "avoid"


class RiskLevel(RankedEnum):
    SAFE = "safe"
    MODERATE = "moderate"
    RISKY = "risky"
    DANGEROUS = "dangerous"


class KeyPriority(RankedEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    AVOID = "avoid"


class RestPriority(RankedEnum):
    """Rest site action priority."""
    MUST_DO = "must-do"
    STRONG = "strong"
    CONSIDER = "consider"
    AVOID = "avoid"


class Grade(RankedEnum):
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class CategoryStatus(RankedEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ADEQUATE = "adequate"
    WEAK = "weak"
    CRITICAL = "critical"


# ============================================================================
# RATING -> BUCKET
# ============================================================================

def priority_for_rating(rating: float) -> Priority:
    """Map a 0-5 card rating to its pick bucket."""
    if rating >= MUST_PICK_THRESHOLD:
        return Priority.MUST_PICK
    if rating >= GOOD_PICK_THRESHOLD:
        return Priority.GOOD_PICK
    if rating >= SITUATIONAL_THRESHOLD:
        return Priority.SITUATIONAL
    return Priority.SKIP


def relic_priority_for_rating(rating: float) -> RelicPriority:
    """Same breakpoints as cards, relic vocabulary."""
    return relic_priority_for(priority_for_rating(rating))


def relic_priority_for(priority: Priority) -> RelicPriority:
    return list(RelicPriority)[priority.rank]


def grade_for_score(score: float) -> Grade:
    """Letter grade for a 0-100 score. Total: anything under D is F."""
    for lower_bound, letter in GRADE_BREAKPOINTS:
        if score >= lower_bound:
            return Grade(letter)
    return Grade.F


def status_for_score(score: float) -> CategoryStatus:
    for lower_bound, status in STATUS_BREAKPOINTS:
        if score >= lower_bound:
            return CategoryStatus(status)
    return CategoryStatus.CRITICAL


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def best(members: Sequence[RankedEnum]) -> RankedEnum:
    """Strongest member of a non-empty sequence."""
    return max(members)


def rank_key(priority: RankedEnum, rating: float, name: str) -> Tuple[int, float, str]:
    """Sort key: bucket first, then rating (desc), then name."""
    return (priority.rank, -rating, name)


# ============================================================================
# SERIALIZATION
# ============================================================================

def to_jsonable(value: Any) -> Any:
    """Convert result dataclasses/enums into plain JSON-ready structures."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(to_jsonable(k)): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(to_jsonable(v) for v in value)
    return value
