"""Fault raised when a caller hands out-of-contract indices to a query."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

from text_coords.runtime import telemetry


class CoordinateError(RuntimeError):
    """Raised for indices, rows or columns outside the text they address.

    These are caller bugs, not recoverable conditions: queries never clamp.
    """

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        position: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.position = position


def fail(
    message: str, *, index: Optional[int] = None, position: Optional[Any] = None
) -> NoReturn:
    """Log the violation and raise ``CoordinateError``."""

    data: dict[str, Any] = {"message": message}
    if index is not None:
        data["index"] = index
    if position is not None:
        data["position"] = position
    telemetry.record_event("coords::contract_violation", level="warning", data=data)
    raise CoordinateError(message, index=index, position=position)
