"""Domain enumerations for the entity registry.

Enums represent fixed sets of domain values (e.g. the entitable variant tag).
"""

from enum import Enum


class EntitableType(str, Enum):
    """Variant tag stored on an Entity (which concrete record it delegates to)."""

    BUSINESS = "business"
    PERSON = "person"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid tag values as strings.

        Returns:
            List of enum value strings (e.g. for check constraints or validation).
        """
        return [member.value for member in cls]
