import structlog

from semverlite.core.part import Part
from semverlite.core.version import UINT32_MAX, Version

logger = structlog.get_logger(__name__)


def _bumped(value: int, part: Part) -> int:
    if value >= UINT32_MAX:
        raise OverflowError(f"{part.fullname} value {value} cannot be incremented")
    return value + 1


def increment(version: Version, part: Part, comment: str = None) -> Version:
    """
    Record a change by returning the next version for the given part.

    Incrementing a part zeroes every less significant part, so building a
    version history in startup code documents itself:

    .. code-block:: python

        version = Version()
        version = increment(version, Part.MINOR, "Added Db Cleanup")      # 0.1.0
        version = increment(version, Part.PATCH, "Added Version to Views") # 0.1.1
        version = increment(version, Part.MINOR, "Integrated logging")     # 0.2.0
        version = increment(version, Part.MAJOR, "Released to QA")         # 1.0.0
        version = increment(version, Part.PATCH, "Fixed search bug")       # 1.0.1

    :param version: the version being changed; it is never modified
    :param part: which part to increment
    :param comment: optional description of the change. It is logged, not stored.
    :return: a new Version
    """
    if part is Part.MAJOR:
        new_version = Version(_bumped(version.major, part), 0, 0)
    elif part is Part.MINOR:
        new_version = Version(version.major, _bumped(version.minor, part), 0)
    elif part is Part.PATCH:
        new_version = Version(version.major, version.minor, _bumped(version.patch, part))
    else:
        raise ValueError(f"Expected a Part, got {part!r}")

    logger.info(
        "version.changelog",
        part=part.value,
        old=str(version),
        new=str(new_version),
        comment=comment,
    )
    return new_version
