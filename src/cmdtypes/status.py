"""Outcome tags for string-to-value conversions."""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    """Validity of a conversion.

    Notes
    -----
    There is more than one failure state, so callers should test for failure
    with ``status is not Status.VALID`` rather than matching a single tag.
    The tags are independent outcomes, not a severity scale.
    """

    VALID = "valid"
    """The conversion worked and the value is usable."""

    INVALID = "invalid"
    """The conversion failed; the value is ``None`` and a message says why."""

    INCOMPLETE = "incomplete"
    """The input is not valid yet, but could become valid with more characters."""
