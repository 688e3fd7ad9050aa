"""BaseService — shared foundation for penalcalc services.

Every service receives the frozen :class:`PenalSettings` at construction
time, which supplies defaults (mode, fractions) for omitted arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from penalcalc.domain.durations import Duration
from penalcalc.domain.parsing import parse_duration
from penalcalc.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from penalcalc.config.settings import PenalSettings

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ExecutionService(BaseService):
            def execution(self, bases: list[str], ...) -> ServiceResult:
                ...
    """

    def __init__(self, settings: PenalSettings) -> None:
        self._settings = settings

    @staticmethod
    def _duration(value: str | Duration) -> Duration:
        """Accept a parsed Duration or its compact text form."""
        if isinstance(value, Duration):
            return value
        return parse_duration(value)

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("service.failed", op=op, code=code, message=message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
