"""DRF exception handling shared by every API module.

Failures of the backing store (``django.db.DatabaseError`` and its
subclasses) become ``503 Service Unavailable``; everything else is left
to DRF's default handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception(
            "store.unavailable",
            view=type(view).__name__ if view is not None else None,
            error=str(exc),
        )
        return Response(
            {"detail": "Store unavailable."},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return exception_handler(exc, context)
