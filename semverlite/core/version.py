import re
from typing import Optional, Tuple

from semverlite.core.errors import (
    EmptyInputError,
    InvalidComponentError,
    MalformedFormatError,
    ParseError,
)
from semverlite.core.part import Part

# supporting up to 999.999.999:
MAJOR_VALUE_SCALE = 1_000_000
MINOR_VALUE_SCALE = 1_000

UINT32_MAX = 2 ** 32 - 1

_DIGITS = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(UINT32_MAX))


def _check_component(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} must be between 0 and {UINT32_MAX}, got {value}")
    return value


class Version:
    """Three-part version number: major.minor.patch.

    Versions are immutable. They compare, hash and test equal through their
    scalar :attr:`value` (``major * 1_000_000 + minor * 1_000 + patch``), which
    is exact as long as every component stays below 1000.

    Examples:

        .. code-block:: python

            from semverlite import Version, Part, increment

            version = Version.parse("1.2.3")
            version.value                   # 1002003
            increment(version, Part.MINOR)  # Version(major=1, minor=3, patch=0)
    """

    __slots__ = ("_major", "_minor", "_patch")

    def __init__(self, major: int = 0, minor: int = 0, patch: int = 0):
        object.__setattr__(self, "_major", _check_component("major", major))
        object.__setattr__(self, "_minor", _check_component("minor", minor))
        object.__setattr__(self, "_patch", _check_component("patch", patch))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def default(cls):
        """The 0.0.0 version."""
        return cls()

    @classmethod
    def parse(cls, text: Optional[str]):
        """
        Parse a string of the form "1.2.3" into a Version.

        Whitespace around each segment is ignored. Each segment must be made of
        decimal digits only and fit in an unsigned 32-bit integer.

        :param text: the version string
        :return: the parsed Version
        :raises EmptyInputError: text is None or blank
        :raises MalformedFormatError: text does not have exactly 3 segments
        :raises InvalidComponentError: a segment is not a valid component
        """
        if text is None or not text.strip():
            raise EmptyInputError(text)

        segments = [segment.strip() for segment in text.split(".")]
        if len(segments) != 3:
            raise MalformedFormatError(text, len(segments))

        components = []
        for part, segment in zip(Part, segments):
            if not _DIGITS.fullmatch(segment):
                raise InvalidComponentError(text, part, segment)
            # bound the length before int(), which refuses very long strings
            digits = segment.lstrip("0") or "0"
            if len(digits) > _MAX_DIGITS or int(digits) > UINT32_MAX:
                raise InvalidComponentError(text, part, segment)
            components.append(int(digits))

        return cls(*components)

    @classmethod
    def try_parse(cls, text: Optional[str]):
        """Like :meth:`parse` but returns None instead of raising."""
        try:
            return cls.parse(text)
        except ParseError:
            return None

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def value(self) -> int:
        """Scalar encoding used for equality, ordering and hashing."""
        return (
            self._major * MAJOR_VALUE_SCALE
            + self._minor * MINOR_VALUE_SCALE
            + self._patch
        )

    def as_tuple(self) -> Tuple[int, int, int]:
        return self._major, self._minor, self._patch

    def change_log(self, part: Part, comment: str = None):
        """Shortcut for :func:`semverlite.core.changelog.increment`."""
        from semverlite.core.changelog import increment

        return increment(self, part, comment)

    # None sorts below every Version; other types are not comparable.

    def __eq__(self, other):
        if other is None:
            return False
        if not isinstance(other, Version):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        if other is None:
            return False
        if not isinstance(other, Version):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if other is None:
            return False
        if not isinstance(other, Version):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if other is None:
            return True
        if not isinstance(other, Version):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if other is None:
            return True
        if not isinstance(other, Version):
            return NotImplemented
        return self.value >= other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return f"{self._major}.{self._minor}.{self._patch}"

    def __repr__(self):
        return (
            f"Version(major={self._major}, minor={self._minor}, "
            f"patch={self._patch})"
        )

    def __reduce__(self):
        return type(self), self.as_tuple()


def compare(a: Optional[Version], b: Optional[Version]) -> int:
    """
    Three-way comparison of two versions, either of which may be None.

    :return: -1 if a sorts before b, 0 if they are equal, 1 if a sorts after b.
        None is equal to None and sorts before any Version.
    """
    for operand in (a, b):
        if operand is not None and not isinstance(operand, Version):
            raise TypeError(
                f"cannot compare {type(operand).__name__} with Version"
            )
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return (a.value > b.value) - (a.value < b.value)
