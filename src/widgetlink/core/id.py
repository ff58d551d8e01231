"""ID Generation.

ULID-based identifiers for correlating log lines of one dispatch.

- ULIDs: Lexicographically sortable, timestamp-based
- Prefixed: Type-specific prefixes for debugging (dsp_*)
"""

from typing import NewType
from ulid import ULID

DispatchID = NewType("DispatchID", str)
"""Trigger dispatch identifier"""


class Prefix:
    """ID prefix constants."""

    DISPATCH = "dsp"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


# Singleton instance
_generator = Generator()


def new_dispatch_id() -> DispatchID:
    """Generate new dispatch ID."""
    return DispatchID(_generator.generate_with_prefix(Prefix.DISPATCH))


def is_valid(id_str: str) -> bool:
    """Check if string is a valid (optionally prefixed) ULID."""
    try:
        ulid_part = id_str.split("_")[1] if "_" in id_str else id_str
        if len(ulid_part) != 26:
            return False
        ULID.from_str(ulid_part)
        return True
    except (ValueError, IndexError):
        return False


def is_dispatch_id(id_str: str) -> bool:
    """Check if ID is a dispatch ID."""
    return id_str.startswith(f"{Prefix.DISPATCH}_") and is_valid(id_str)

