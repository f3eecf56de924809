# fundraising/application/services/target_service.py
from __future__ import annotations

from decimal import Decimal

from fundraising.domain.campaign.value_objects import FundraisingTarget
from fundraising.domain.shared.money import Money

from ..dtos.target_dto import MilestoneDTO, TargetEvaluationDTO
from .dto_mapping import money_dto


class TargetService:
    def __init__(self, default_currency: str = "EUR") -> None:
        self._default_currency = default_currency

    def evaluate(
        self,
        amount: Decimal,
        raised: Decimal = Decimal("0"),
        currency: str | None = None,
    ) -> TargetEvaluationDTO:
        target = FundraisingTarget.from_amount(amount, currency or self._default_currency)
        return self.describe(target, Money(raised, target.currency))

    @staticmethod
    def describe(target: FundraisingTarget, raised: Money) -> TargetEvaluationDTO:
        milestones = [
            MilestoneDTO(
                percentage=pct,
                amount=money_dto(money),
                reached=target.has_milestone_been_reached(raised, pct),
            )
            for pct, money in target.milestones().items()
        ]
        return TargetEvaluationDTO(
            target=money_dto(target.money),
            raised=money_dto(raised),
            remaining=money_dto(target.calculate_remaining(raised)),
            progress=target.calculate_progress(raised),
            is_achievable=target.is_achievable,
            is_mega_campaign=target.is_mega_campaign,
            requires_approval=target.requires_approval,
            is_reached=target.is_reached(raised),
            is_exceeded=target.is_exceeded(raised),
            milestones=milestones,
        )
