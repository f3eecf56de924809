# fundraising/domain/campaign/enums.py
from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class CampaignStatus(StrEnum):
    """Campaign lifecycle. The domain only validates transitions; persisting
    the new status is the caller's job."""

    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    REJECTED = "rejected"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_string(cls, raw: str) -> CampaignStatus:
        """Case-insensitive, whitespace-trimmed. Raises ValueError on unknown input."""
        status = cls.try_from_string(raw)
        if status is None:
            raise ValueError(f"{raw!r} is not a valid CampaignStatus")
        return status

    @classmethod
    def try_from_string(cls, raw: str | None) -> CampaignStatus | None:
        if raw is None:
            return None
        normalized = raw.strip().lower()
        if not normalized:
            return None
        try:
            return cls(normalized)
        except ValueError:
            return None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    @property
    def valid_transitions(self) -> tuple[CampaignStatus, ...]:
        return TRANSITIONS[self]

    def can_transition_to(self, target: CampaignStatus) -> bool:
        """Self-transitions are never allowed; terminal states allow nothing."""
        if target is self:
            return False
        return target in TRANSITIONS[self]

    def transition_error_message(self, target: CampaignStatus) -> str:
        return f"Cannot transition from {self.label} to {target.label} status"

    def ensure_transition(self, target: CampaignStatus) -> CampaignStatus:
        """Return `target` if the move is legal, else raise ValueError with the reason."""
        if not self.can_transition_to(target):
            raise ValueError(self.transition_error_message(target))
        return target

    # ------------------------------------------------------------------
    # Classification (derived from the state, never stored)
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self is CampaignStatus.ACTIVE

    @property
    def can_accept_donations(self) -> bool:
        return self is CampaignStatus.ACTIVE

    @property
    def is_final(self) -> bool:
        return self in _FINAL

    @property
    def requires_approval(self) -> bool:
        return self is CampaignStatus.PENDING_APPROVAL

    @property
    def is_rejected(self) -> bool:
        return self is CampaignStatus.REJECTED

    def is_one_of(self, statuses: Iterable[CampaignStatus]) -> bool:
        return self in tuple(statuses)

    # ------------------------------------------------------------------
    # Display lookups
    # ------------------------------------------------------------------

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    @classmethod
    def active_statuses(cls) -> tuple[CampaignStatus, ...]:
        return (cls.ACTIVE,)

    @classmethod
    def final_statuses(cls) -> tuple[CampaignStatus, ...]:
        return _FINAL

    @classmethod
    def donation_accepting_statuses(cls) -> tuple[CampaignStatus, ...]:
        return (cls.ACTIVE,)


# ADR: transition table as a module constant, in a stable order.
TRANSITIONS: dict[CampaignStatus, tuple[CampaignStatus, ...]] = {
    CampaignStatus.DRAFT: (CampaignStatus.PENDING_APPROVAL, CampaignStatus.CANCELLED),
    CampaignStatus.PENDING_APPROVAL: (CampaignStatus.ACTIVE, CampaignStatus.REJECTED),
    CampaignStatus.REJECTED: (
        CampaignStatus.DRAFT,
        CampaignStatus.PENDING_APPROVAL,
        CampaignStatus.CANCELLED,
    ),
    CampaignStatus.ACTIVE: (
        CampaignStatus.PAUSED,
        CampaignStatus.COMPLETED,
        CampaignStatus.CANCELLED,
        CampaignStatus.EXPIRED,
    ),
    CampaignStatus.PAUSED: (
        CampaignStatus.ACTIVE,
        CampaignStatus.CANCELLED,
        CampaignStatus.EXPIRED,
    ),
    CampaignStatus.COMPLETED: (),
    CampaignStatus.CANCELLED: (),
    CampaignStatus.EXPIRED: (),
}

_FINAL: tuple[CampaignStatus, ...] = (
    CampaignStatus.COMPLETED,
    CampaignStatus.CANCELLED,
    CampaignStatus.EXPIRED,
)

_LABELS: dict[CampaignStatus, str] = {
    CampaignStatus.DRAFT: "Draft",
    CampaignStatus.PENDING_APPROVAL: "Pending Approval",
    CampaignStatus.REJECTED: "Rejected",
    CampaignStatus.ACTIVE: "Active",
    CampaignStatus.PAUSED: "Paused",
    CampaignStatus.COMPLETED: "Completed",
    CampaignStatus.CANCELLED: "Cancelled",
    CampaignStatus.EXPIRED: "Expired",
}

# Semantic tags only; the presentation layer maps them to real colors.
_COLORS: dict[CampaignStatus, str] = {
    CampaignStatus.DRAFT: "secondary",
    CampaignStatus.PENDING_APPROVAL: "info",
    CampaignStatus.REJECTED: "danger",
    CampaignStatus.ACTIVE: "success",
    CampaignStatus.PAUSED: "warning",
    CampaignStatus.COMPLETED: "primary",
    CampaignStatus.CANCELLED: "danger",
    CampaignStatus.EXPIRED: "warning",
}

_DESCRIPTIONS: dict[CampaignStatus, str] = {
    CampaignStatus.DRAFT: "Campaign is not yet published and is not visible to donors",
    CampaignStatus.PENDING_APPROVAL: "Campaign is awaiting approval from administrators",
    CampaignStatus.REJECTED: "Campaign was rejected and needs revisions before resubmission",
    CampaignStatus.ACTIVE: "Campaign is live and accepting donations from supporters",
    CampaignStatus.PAUSED: "Campaign is temporarily paused and not accepting donations",
    CampaignStatus.COMPLETED: "Campaign has successfully reached its goal",
    CampaignStatus.CANCELLED: "Campaign has been cancelled by the organizer",
    CampaignStatus.EXPIRED: "Campaign has expired and is no longer accepting donations",
}
