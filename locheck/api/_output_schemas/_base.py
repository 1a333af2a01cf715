"""Base output schema shared by the structured summaries of locheck commands."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Fields every command summary carries.

    ``errors`` holds the diagnostic that stopped a run (missing input,
    unreadable directory, invalid configuration); ``warnings`` holds
    non-fatal report lines such as empty-value warnings.
    """

    errors: list[str] = Field(default_factory=list, description="Diagnostics that stopped the run, empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal report lines, e.g. empty-value warnings")
