"""Record id generators (CUID2).

Domain objects and ORM rows share one id format so a record keeps its id
from construction through persistence.
"""

from cuid2 import cuid_wrapper

_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant record id (CUID2).

    Raises:
        TypeError: If the underlying generator returns a non-string.
    """
    value = _cuid()
    if not isinstance(value, str):
        raise TypeError(f"Expected str from cuid generator, got {type(value).__name__}")
    return value
