"""Key extracted from one line of a resource file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceEntry:
    """A key with its surrounding quotes, as it appears in the resource file."""

    key: str
    has_empty_value: bool = False
