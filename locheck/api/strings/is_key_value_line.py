"""Classify resource file lines."""


def is_key_value_line(line: str) -> bool:
    """Check if a line is a key and value line.

    Example: ``"key" = "value";``

    The line must start with a double quote and end with a semicolon once
    trimmed, and splitting it on ``=`` must give exactly two parts. A value
    holding a ``=`` is therefore rejected.
    """
    line = line.strip()

    if not (line.startswith('"') and line.endswith(";")):
        return False

    return len(_split_on_equals(line)) == 2


def _split_on_equals(line: str) -> list[str]:
    # Empty parts are dropped, so "a == b" and "=a=b" split like a single "=".
    return [part for part in line.split("=") if part]
