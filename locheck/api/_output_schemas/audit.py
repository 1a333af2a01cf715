"""Output schemas for audit commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class AuditCheckOutput(BaseOutputSchema):
    """Output schema for the check and run commands.

    Output structure:
    - errors: list[str] - fatal diagnostics, empty list when the audit completed
    - warnings: list[str] - one entry per key with an empty value
    - source_file_path: str - resource file the keys were read from
    - project_path: str - directory that was scanned
    - keys_checked: int - number of keys extracted from the resource file
    - unused_keys: dict[str, int] - unused key -> number of lines it was found on
    - empty_value_keys: list[str] - keys whose value is an empty string
    - used_keys: dict[str, int] - used key -> count, only filled in verbose mode
    """

    source_file_path: str = Field(..., description="Resource file the keys were read from")
    project_path: str = Field(..., description="Directory that was scanned")
    keys_checked: int = Field(0, description="Number of keys extracted from the resource file")
    unused_keys: dict[str, int] = Field(default_factory=dict, description="Unused key -> occurrence count")
    empty_value_keys: list[str] = Field(default_factory=list, description="Keys whose value is empty")
    used_keys: dict[str, int] = Field(
        default_factory=dict, description="Used key -> occurrence count, filled in verbose mode only"
    )
