"""Audit of resource file keys against a project tree."""

from .cmd_check import cmd_check
from .cmd_run import cmd_run
from .describe_config import describe_config
from .Finding import Finding
from .FindingKind import FindingKind
from .iter_findings import iter_findings
from .run_audit import run_audit

__all__ = [
    "Finding",
    "FindingKind",
    "cmd_check",
    "cmd_run",
    "describe_config",
    "iter_findings",
    "run_audit",
]
