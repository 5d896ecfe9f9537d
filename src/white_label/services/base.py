"""BaseService — shared foundation for white-label services.

Every service receives the frozen :class:`WhiteLabelSettings` at
construction time. Services never raise domain errors to their callers:
each :class:`BrandError` becomes a failed :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from white_label.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from white_label.config.settings import WhiteLabelSettings
    from white_label.domain.errors import BrandError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BrandService(BaseService):
            def resolve(self, text: str) -> ServiceResult:
                try:
                    ...
                except BrandError as exc:
                    return self._fail("resolve", exc)
    """

    def __init__(self, settings: WhiteLabelSettings) -> None:
        self._settings = settings

    @property
    def brand(self) -> str | None:
        return self._settings.brand

    def _fail(self, op: str, exc: BrandError, **extra: object) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.code,
                message=str(exc),
                detail={**exc.detail(), **extra},
            ),
        )

    @staticmethod
    def _error(op: str, code: str, message: str, **detail: object) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
