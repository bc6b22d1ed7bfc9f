from enum import Enum
from typing import Optional

import structlog

from semverlite.core.version import Version

logger = structlog.get_logger(__name__)


class RangeResult(Enum):
    """Outcome of :func:`in_range`.

    UNKNOWN is not falsy: using it as a bool raises TypeError, so a missing
    lower bound can't be mistaken for "out of range".
    """

    IN_RANGE = "true"
    OUT_OF_RANGE = "false"
    UNKNOWN = "unknown"

    @classmethod
    def from_bool(cls, value: bool):
        return cls.IN_RANGE if value else cls.OUT_OF_RANGE

    @property
    def known(self) -> bool:
        return self is not RangeResult.UNKNOWN

    def as_optional(self) -> Optional[bool]:
        """True, False or None for UNKNOWN."""
        if self is RangeResult.UNKNOWN:
            return None
        return self is RangeResult.IN_RANGE

    def __bool__(self):
        if self is RangeResult.UNKNOWN:
            raise TypeError("RangeResult.UNKNOWN has no truth value")
        return self is RangeResult.IN_RANGE


def _bound(text: Optional[str], name: str) -> Optional[Version]:
    if text is None:
        return None
    bound = Version.try_parse(text)
    if bound is None:
        logger.debug("version.range.unusable_bound", bound=name, text=text)
    return bound


def in_range(candidate: Version, lower: str = None, upper: str = None) -> RangeResult:
    """
    Tests whether candidate lies between the inclusive lower and upper bounds.

    Bounds are version strings. A bound that is None or doesn't parse counts as
    absent. A lower bound is required to decide anything; without an upper
    bound only the lower bound is checked.

    .. code-block:: python

        in_range(version, "3.0.0")             # IN_RANGE if version >= 3.0.0
        in_range(version, "3.27.83", "7.5.55") # IN_RANGE if within the limits
        in_range(version, None, "7.5.55")      # UNKNOWN

    :param candidate: an already parsed Version
    :param lower: inclusive lower bound, e.g. "1.0.0"
    :param upper: inclusive upper bound, e.g. "2.0.0"
    :return: RangeResult
    """
    if not isinstance(candidate, Version):
        raise TypeError(f"candidate must be a Version, not {type(candidate).__name__}")

    low = _bound(lower, "lower")
    high = _bound(upper, "upper")

    if low is None:
        return RangeResult.UNKNOWN
    if high is None:
        return RangeResult.from_bool(candidate.value >= low.value)
    return RangeResult.from_bool(low.value <= candidate.value <= high.value)
