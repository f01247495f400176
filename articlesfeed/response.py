"""JSON envelopes for successful and failed responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import CustomError, get_error_code


@dataclass
class Meta:
    """Paging details; zero values are left out of the JSON."""

    page: int = 0
    page_size: int = 0
    total_items: int = 0

    def to_dict(self) -> dict[str, int]:
        pairs = {"page": self.page, "pageSize": self.page_size, "totalItems": self.total_items}
        return {key: value for key, value in pairs.items() if value}


@dataclass
class ErrorInfo:
    """Error details; ``details`` is never serialised."""

    code: int
    message: str
    details: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass
class Response:
    success: bool
    data: Any = None
    error: ErrorInfo | None = None
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            body["data"] = self.data.to_dict() if hasattr(self.data, "to_dict") else self.data
        if self.error is not None:
            body["error"] = self.error.to_dict()
        if self.meta is not None:
            body["meta"] = self.meta.to_dict()
        return body


def success_body(data: Any, meta: Meta | None = None) -> dict[str, Any]:
    """Return the JSON body of a successful response."""
    return Response(success=True, data=data, meta=meta or Meta()).to_dict()


def error_body(err: BaseException, debug: bool = False) -> tuple[int, dict[str, Any]]:
    """Return the status code and JSON body that report ``err``."""
    code = get_error_code(err)
    message = str(err)
    details = f"{type(err).__name__}: {err}" if debug else ""

    http_code = getattr(err, "code", None)
    if (
        not isinstance(err, CustomError)
        and isinstance(http_code, int)
        and not isinstance(http_code, bool)
    ):
        code = http_code
        name = getattr(err, "name", None)
        message = name if isinstance(name, str) else str(err)

    info = ErrorInfo(code=code, message=message, details=details)
    return code, Response(success=False, error=info).to_dict()