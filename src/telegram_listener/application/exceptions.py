from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotConnectedError(AppError):
    """Operation requires an established upstream connection."""

    def __init__(self, detail: str = "Client is not connected. Call connect() first.") -> None:
        super().__init__(detail)
