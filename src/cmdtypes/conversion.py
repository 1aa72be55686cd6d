"""Result object returned by ``Type.from_string``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from cmdtypes.status import Status


@dataclass(frozen=True, init=False)
class Conversion:
    """Structured outcome of parsing a string.

    A typo is not exceptional, so parse failures are reported here as data
    instead of being raised.

    Parameters
    ----------
    value : Any
        Converted value. Treat as absent unless ``status`` is ``VALID``.
    status : Status | None, default=None
        Outcome of the conversion. Falsy values mean ``Status.VALID``.
    message : str | None, default=None
        Explanation to show the user. May accompany any status, including
        ``VALID`` when there is a warning to report.
    predictions : Iterable[str] | None, default=None
        Better inputs than the one given, most likely first. Around 7 entries
        is typical and about 20 is the practical ceiling; the producer decides
        the cut-off, e.g. 4 strong matches rather than 4 strong plus 4 weak.
    """

    value: Any
    status: Status
    message: str | None
    predictions: tuple[str, ...]

    def __init__(
        self,
        value: Any,
        status: Status | None = None,
        message: str | None = None,
        predictions: Iterable[str] | None = None,
    ) -> None:
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "status", status or Status.VALID)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "predictions", tuple(predictions or ()))

    @property
    def is_valid(self) -> bool:
        """Return ``True`` only for ``Status.VALID``."""
        return self.status is Status.VALID
