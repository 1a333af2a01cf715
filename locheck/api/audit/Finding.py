"""One report line of an audit."""

from dataclasses import dataclass

from .FindingKind import FindingKind


def _times(count: int) -> str:
    return "times" if count > 1 else "time"


@dataclass(frozen=True)
class Finding:
    """Something found about a key: an empty value, or its usage verdict."""

    kind: FindingKind
    key: str
    count: int = 0

    @property
    def message(self) -> str:
        if self.kind is FindingKind.EMPTY_VALUE:
            return f"warning, key '{self.key}' has an empty value."
        if self.kind is FindingKind.UNUSED:
            return f"key '{self.key}' is unused (found {self.count} {_times(self.count)})."
        return f"key '{self.key}' is used {self.count} {_times(self.count)}."
