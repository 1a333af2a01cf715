"""Banner describing an audit before it runs."""

from ..config.ScanConfig import ScanConfig


def describe_config(config: ScanConfig) -> list[str]:
    """Return the banner lines for ``config``."""
    lines = [
        "Checking keys from file...",
        f"\t{config.source_file_path}",
        f"{_describe_extensions(sorted(config.allowed_extensions))} from directory...",
        f"\t{config.project_path}",
    ]
    if config.report_empty_values:
        lines.append("Empty values will be logged.")
    if config.verbose:
        lines.append("Anxious mode is enabled. Every key found in the project will be printed.")
    lines.append("Running... (it may take quite long, enable anxious mode to see each key as it is checked)")
    return lines


def _describe_extensions(extensions: list[str]) -> str:
    if not extensions:
        return "in all files"
    if len(extensions) == 1:
        return f"in files with extension {extensions[0]}"
    return f"in files with extensions {', '.join(extensions)}"
