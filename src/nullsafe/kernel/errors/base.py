"""Root error class for the nullsafe error hierarchy."""

from __future__ import annotations

import json
from typing import Any, Self


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description (defaults to ``default_message``).
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"
    default_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        message = message if message is not None else self.default_message
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / transport)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Self:
        """Rebuild an error from :meth:`to_dict` output.

        The cause only travels as its ``repr`` and is not revived.
        """
        return cls(
            payload.get("message"),
            code=payload.get("code"),
            detail=dict(payload.get("detail") or {}),
        )


__all__ = ["BaseError"]
