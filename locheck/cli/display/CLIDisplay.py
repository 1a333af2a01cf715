"""CLI display implementation using Rich library."""

import json
import sys
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from .Display import Display


class CLIDisplay(Display):
    """Line-oriented report on stdout using Rich library.

    Messages are escaped, so keys holding ``[...]`` are printed verbatim.
    """

    def __init__(self):
        self.console = Console(file=sys.stdout, soft_wrap=True, highlight=False, emoji=False)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        for line in message.splitlines():
            self.console.print(f"[blue]{escape(line)}[/blue]")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.console.print(f"[red]✗[/red] {escape(message)}")
        if details:
            self.console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(escape(message))

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
        # Plain write: structured output must stay parseable, without markup or wrapping
        self.console.file.write(text)
        self.console.file.flush()
