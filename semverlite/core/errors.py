from semverlite.core.part import Part


class VersionError(ValueError):
    """Base class for everything that can go wrong building a Version."""


class ParseError(VersionError):
    """Raised when text cannot be parsed into a Version.

    :param text: the text that failed to parse (may be None)
    """

    def __init__(self, text, message: str):
        super().__init__(message)
        self.text = text


class EmptyInputError(ParseError):
    def __init__(self, text=None):
        super().__init__(text, "No Version created, cannot parse empty input string.")


class MalformedFormatError(ParseError):
    """The text does not split into exactly three dot-separated segments."""

    def __init__(self, text: str, segments: int):
        super().__init__(
            text,
            f"No Version created, unable to parse a Version from '{text}' "
            f"(expected 3 segments, found {segments})",
        )
        self.segments = segments


class InvalidComponentError(ParseError):
    """One segment is not a non-negative integer that fits in 32 bits."""

    def __init__(self, text: str, component: Part, segment: str):
        super().__init__(
            text,
            f"No Version created, the {component.fullname} value must resolve "
            f"to a non-negative integer (got '{segment}')",
        )
        self.component = component
        self.segment = segment
