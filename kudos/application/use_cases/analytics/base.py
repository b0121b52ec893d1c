"""
Analytics Use Case Base
=======================

Limit and period checks shared by every analytics use case.
"""
from typing import Optional, Tuple

from kudos.application.dto.analytics_dto import AnalyticsRequest
from kudos.domain.exceptions import AnalyticsValidationError, InvalidPeriodError
from kudos.domain.models.analytics import Period
from kudos.domain.repositories.analytics_repository import AnalyticsRepository

DEFAULT_LIMIT = 10


class AnalyticsUseCase:
    """
    Base for the ranked analytics queries.

    The period is matched case-insensitively but handed to the repository
    exactly as the caller spelled it.
    """

    def __init__(self, analytics_repository: AnalyticsRepository):
        self._repository = analytics_repository

    @staticmethod
    def _validate(request: AnalyticsRequest) -> Tuple[int, Optional[str]]:
        """
        Resolve the effective limit and check the period.

        Returns:
            (limit, period) to pass to the repository

        Raises:
            AnalyticsValidationError: If the limit is not positive
            InvalidPeriodError: If the period is not a known name
        """
        limit = DEFAULT_LIMIT if request.limit is None else request.limit
        if limit <= 0:
            raise AnalyticsValidationError("Limit must be greater than 0")

        period = request.period or None
        if period is not None and not Period.is_valid(period):
            raise InvalidPeriodError(period, [p.value for p in Period])

        return limit, period
