from enum import Enum

_full_forms = {
    "major": "Major",
    "minor": "Minor",
    "patch": "Patch",
}


class Part(Enum):
    """The three components of a version, most to least significant."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @property
    def fullname(self):
        return _full_forms[self.value]

    @classmethod
    def from_name(cls, name: str):
        """Look up a part by case-insensitive name, e.g. 'minor' or 'MINOR'."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown version part '{name}', expected one of "
                f"{', '.join(p.value for p in cls)}"
            ) from None
