"""Domain value objects for the entity registry.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

# National identification numbers: ASCII letters, digits, and inner hyphens (e.g. 4WA3X6E21T).
_ID_NUMBER_RE = re.compile(r"^[A-Za-z0-9]+(-[A-Za-z0-9]+)*$")


@dataclass(frozen=True)
class IdentificationNumber:
    """Value object for an identification number.

    Surrounding whitespace is stripped; the result must be 1-32 characters
    of letters, digits and inner hyphens. Case is preserved.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 32

    def __post_init__(self) -> None:
        """Normalize and validate.

        Raises:
            ValueError: If empty, too long, or containing other characters.
        """
        if not isinstance(self.value, str):
            raise ValueError("Identification number must be a string")
        object.__setattr__(self, "value", self.value.strip())
        if not self.value:
            raise ValueError("Identification number must be a non-empty string")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"Identification number must not exceed {self.MAX_LENGTH} characters"
            )
        if not _ID_NUMBER_RE.match(self.value):
            raise ValueError(
                "Identification number must contain only letters, digits and inner hyphens"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RecordName:
    """Value object for a business or person name (stripped, 1-255 characters)."""

    value: str

    MAX_LENGTH: ClassVar[int] = 255

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError("Name must be a string")
        object.__setattr__(self, "value", self.value.strip())
        if not self.value:
            raise ValueError("Name must be a non-empty string")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(f"Name must not exceed {self.MAX_LENGTH} characters")

    def __str__(self) -> str:
        return self.value
