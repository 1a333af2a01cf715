"""Configuration of one audit run."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ScanConfig(BaseModel):
    """Immutable settings for one audit of a resource file against a project tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_file_path: Path = Field(..., description="Resource file holding the keys to check")
    project_path: Path = Field(..., description="Directory in which each key is searched")
    min_occurrence_threshold: int = Field(
        ...,
        ge=0,
        description="A key found this many times or fewer is reported as unused",
    )
    allowed_extensions: frozenset[str] = Field(
        default_factory=frozenset,
        description="Lowercase extensions without dot; empty means all files",
    )
    report_empty_values: bool = Field(False, description="Warn about keys whose value is an empty string")
    verbose: bool = Field(False, description="Also report keys that are used, with their count")
    recursive: bool = Field(True, description="Descend into subdirectories of the project path")
    use_index: bool = Field(False, description="Read the project tree once instead of once per key")

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Any) -> frozenset[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        extensions: set[str] = set()
        for item in value:
            for part in str(item).split(","):
                part = part.strip().lower()
                if part.startswith("."):
                    part = part[1:]
                if part:
                    extensions.add(part)
        return frozenset(extensions)

    @classmethod
    def load(cls, path: Path) -> "ScanConfig":
        """Load and validate an audit description from a JSON file.

        Raises:
            ValueError: If file not found, invalid JSON, or validation error
        """
        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {path} must hold a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data = self.model_dump(mode="json")
        data["allowed_extensions"] = sorted(self.allowed_extensions)
        return data
