"""Root error class for the fluenthook error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error the library raises.

    Each error has a machine-readable ``code`` and a ``detail`` mapping of
    structured context (collector address, tag, setting name, …).
    :meth:`to_dict` flattens both into log-friendly fields, so an error can
    be attached to a log entry as is.
    """

    default_code: str = "fluenthook_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message, **self.detail}
        if self.cause is not None:
            fields["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return fields


__all__ = ["BaseError"]
