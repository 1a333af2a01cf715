"""Extract a ResourceEntry from a resource file line."""

from .is_key_value_line import _split_on_equals, is_key_value_line
from .ResourceEntry import ResourceEntry

EMPTY_QUOTED_VALUE = '""'


def extract_entry(line: str, detect_empty_value: bool = False) -> ResourceEntry | None:
    """Return the entry held by ``line``, or None if it is not a key and value line.

    The key keeps its quotes: ``  "home.title" = "Welcome";`` gives ``"home.title"``.

    Args:
        line: Raw line of the resource file
        detect_empty_value: Flag entries whose value is ``""``
    """
    if not is_key_value_line(line):
        return None

    left, right = _split_on_equals(line.strip())

    key = left.strip()
    if not (key.startswith('"') and key.endswith('"')):
        return None

    has_empty_value = False
    if detect_empty_value:
        value = right.strip()
        if value.endswith(";"):
            value = value[:-1].strip()
            has_empty_value = value == EMPTY_QUOTED_VALUE

    return ResourceEntry(key=key, has_empty_value=has_empty_value)
