# fundraising/domain/campaign/services.py
#
# Pure domain service that turns a CampaignRecord plus a reference instant into
# CampaignProgress, performance metrics, a health label and advisory texts.
#
# Design decisions:
#   - CampaignProgressCalculator never reads the clock. Every public method
#     takes `now`; the application layer decides what "now" is.
#   - Day counts are whole days (timedelta.days on a non-negative delta). A
#     campaign without both dates counts as a one-day campaign at day 0.
#   - Money-like results (velocity, projection) are Decimal rounded half-up to
#     2 places; percentages are floats rounded to 2 places.
#   - Naive record dates are read in the timezone of `now`. An aware record
#     compared with a naive `now` is a caller error (ValueError).
#
# Invariants:
#   - 0 <= days_elapsed <= total_days and days_remaining >= 0.
#   - performance_score is in [0, 100] for every input the record allows.
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import cast

from .entities import CampaignRecord
from .progress import CampaignProgress

_ZERO = Decimal("0")
_CENT = Decimal("0.01")

# ADR: tolerances and weights as module constants, not hardcoded in methods.
ON_TRACK_TOLERANCE = 0.9
LIKELY_TO_SUCCEED_RATIO = Decimal("0.9")
EXCELLENT_DAILY_AVERAGE = Decimal("100")
SHORT_DEADLINE_DAYS = 7
LOW_VELOCITY = Decimal("10")

WEIGHT_EFFICIENCY = 0.4
WEIGHT_MOMENTUM = 0.4
WEIGHT_SAFETY = 0.2

HEALTH_BANDS: tuple[tuple[float, str], ...] = (
    (80, "excellent"),
    (60, "good"),
    (40, "fair"),
    (20, "poor"),
)

RECOMMENDATION_BEHIND_SCHEDULE = (
    "Campaign is behind schedule. Consider increasing marketing efforts or adjusting the goal."
)
RECOMMENDATION_DEADLINE_RISK = (
    "Campaign is approaching deadline with low likelihood of success. "
    "Consider extending the deadline or intensive promotion."
)
RECOMMENDATION_LOW_VELOCITY = (
    "Low donation velocity detected. Review campaign messaging and promotion strategy."
)
RECOMMENDATION_NO_DONATIONS = (
    "No donations received yet. Verify campaign visibility and share with initial supporters."
)
RECOMMENDATION_EXCELLENT = (
    "Campaign is performing excellently! Consider promoting success story to encourage final push."
)


@dataclass(frozen=True)
class PerformanceMetrics:
    """All values on a 0-100 scale. risk_score is "higher is worse"."""

    efficiency: float
    momentum: float
    risk_score: float
    performance_score: float

    def to_dict(self) -> dict[str, float]:
        return {
            "efficiency": self.efficiency,
            "momentum": self.momentum,
            "risk_score": self.risk_score,
            "performance_score": self.performance_score,
        }


def _money_round(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def _align(value: datetime | None, now: datetime) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None and now.tzinfo is not None:
        return value.replace(tzinfo=now.tzinfo)
    if value.tzinfo is not None and now.tzinfo is None:
        raise ValueError("Reference instant must be timezone-aware when campaign dates are")
    return value


def _whole_days(start: datetime, end: datetime) -> int:
    return abs(end - start).days


class CampaignProgressCalculator:
    """Stateless. Instances exist so services can receive one by injection."""

    # ------------------------------------------------------------------
    # Day counters
    # ------------------------------------------------------------------

    @staticmethod
    def total_days(record: CampaignRecord) -> int:
        if record.start_date is None or record.end_date is None:
            return 1
        end = cast(datetime, _align(record.end_date, record.start_date))
        return max(1, _whole_days(record.start_date, end))

    def days_elapsed(self, record: CampaignRecord, now: datetime) -> int:
        start = _align(record.start_date, now)
        end = _align(record.end_date, now)
        if start is None or end is None:
            return 0
        if now < start:
            return 0
        if now > end:
            return self.total_days(record)
        return _whole_days(start, now)

    @staticmethod
    def days_active(record: CampaignRecord, now: datetime) -> int:
        """Whole days since the start. Not capped at the end date; 0 without a start."""
        start = _align(record.start_date, now)
        if start is None or now < start:
            return 0
        return _whole_days(start, now)

    @staticmethod
    def days_remaining(record: CampaignRecord, now: datetime) -> int:
        end = _align(record.end_date, now)
        if end is None or now > end:
            return 0
        return _whole_days(now, end)

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    def calculate(self, record: CampaignRecord, now: datetime) -> CampaignProgress:
        goal = record.goal_amount
        current = record.current_amount
        total = self.total_days(record)
        elapsed = self.days_elapsed(record, now)
        remaining = self.days_remaining(record, now)

        expected = round(elapsed / total * 100, 2)
        velocity = _money_round(current / elapsed) if elapsed > 0 else _ZERO
        projected = _money_round(velocity * total)
        percentage = round(float(current / goal * 100), 2) if goal > _ZERO else 0.0

        return CampaignProgress(
            campaign_id=record.id,
            goal_amount=goal,
            current_amount=current,
            total_days=total,
            days_elapsed=elapsed,
            days_remaining=remaining,
            expected_progress=expected,
            velocity=velocity,
            projected_final_amount=projected,
            is_on_track=percentage >= expected * ON_TRACK_TOLERANCE,
            is_likely_to_succeed=projected >= goal * LIKELY_TO_SUCCEED_RATIO,
            donations_count=record.donations_count,
        )

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def performance_metrics(self, record: CampaignRecord, now: datetime) -> PerformanceMetrics:
        return self.metrics_for(self.calculate(record, now))

    def metrics_for(self, progress: CampaignProgress) -> PerformanceMetrics:
        efficiency = self._efficiency(progress)
        momentum = self._momentum(progress)
        risk = self._risk_score(progress)
        score = efficiency * WEIGHT_EFFICIENCY + momentum * WEIGHT_MOMENTUM + (100 - risk) * WEIGHT_SAFETY
        return PerformanceMetrics(
            efficiency=efficiency,
            momentum=momentum,
            risk_score=risk,
            performance_score=round(score, 2),
        )

    @staticmethod
    def _efficiency(progress: CampaignProgress) -> float:
        """Daily average against a 100-per-day benchmark."""
        if progress.days_elapsed <= 0:
            return 0.0
        daily_average = progress.current_amount / progress.days_elapsed
        return min(100.0, round(float(daily_average / EXCELLENT_DAILY_AVERAGE * 100), 2))

    @staticmethod
    def _momentum(progress: CampaignProgress) -> float:
        """Current velocity against the velocity still needed to close the gap."""
        if progress.days_remaining > 0:
            needed = progress.remaining_amount / progress.days_remaining
        else:
            needed = _ZERO
        if needed <= _ZERO:
            return 100.0
        return min(100.0, round(float(progress.velocity / needed * 100), 2))

    @staticmethod
    def _risk_score(progress: CampaignProgress) -> float:
        risk = 0.0
        if progress.days_remaining < SHORT_DEADLINE_DAYS:
            risk += 30
        if progress.percentage < progress.expected_progress:
            gap = progress.expected_progress - progress.percentage
            risk += min(40.0, gap * 2)
        if not progress.is_likely_to_succeed:
            risk += 30
        return min(100.0, risk)

    def health_status(self, record: CampaignRecord, now: datetime) -> str:
        return self.health_for(self.performance_metrics(record, now))

    @staticmethod
    def health_for(metrics: PerformanceMetrics) -> str:
        for threshold, label in HEALTH_BANDS:
            if metrics.performance_score >= threshold:
                return label
        return "critical"

    # ------------------------------------------------------------------
    # Recommendations
    # ------------------------------------------------------------------

    def recommendations(self, record: CampaignRecord, now: datetime) -> list[str]:
        return self.recommendations_for(self.calculate(record, now))

    @staticmethod
    def recommendations_for(progress: CampaignProgress) -> list[str]:
        advice: list[str] = []
        if progress.is_behind_schedule:
            advice.append(RECOMMENDATION_BEHIND_SCHEDULE)
        if progress.days_remaining <= SHORT_DEADLINE_DAYS and not progress.is_likely_to_succeed:
            advice.append(RECOMMENDATION_DEADLINE_RISK)
        if progress.velocity < LOW_VELOCITY and progress.days_elapsed > 3:
            advice.append(RECOMMENDATION_LOW_VELOCITY)
        if progress.donations_count == 0 and progress.days_elapsed > 2:
            advice.append(RECOMMENDATION_NO_DONATIONS)
        if progress.percentage > 90:
            advice.append(RECOMMENDATION_EXCELLENT)
        return advice
