"""Create the main Typer CLI app."""

import typer

from ..api.audit.cmd_check import cmd_check
from ..api.audit.cmd_run import cmd_run
from ..api.config.cmd_version import cmd_version
from ..constants import DISPLAY_FORMATS
from ._handle_stage_result import _handle_stage_result


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Find keys of a Localizable.strings file that are unused in a project.",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(2)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        source_file_path: str = typer.Argument(
            ..., help="Path to file where are the keys to check (including filename and its extension)."
        ),
        project_path: str = typer.Argument(
            ..., help="Path to your project or directory in which each key will be checked."
        ),
        allow_nb_times: int = typer.Argument(
            ...,
            min=0,
            help=(
                "Number of times each key will be found at least. If your project contains two "
                "Localizable.strings files (one per language) and you search in all files, set 2: "
                "a key found two times or less only appears in those files and is unused. "
                "If you only search in .swift files, set 0."
            ),
        ),
        extensions: list[str] = typer.Option(
            [],
            "--extensions",
            "-e",
            help="Extensions of files in which to search for keys, without dot, separated by a comma. "
            "All files are searched if not set.",
        ),
        log_empty_values: bool = typer.Option(
            False,
            "--log-empty-values",
            help='Also check if a key has an empty value, e.g. "mv.help.text" = "";',
        ),
        anxious_mode: bool = typer.Option(
            False,
            "--anxious-mode",
            "--verbose",
            help="Print each key found in the project, with its count.",
        ),
        recursive: bool = typer.Option(True, "--recursive/--no-recursive", help="Search subdirectories."),
        index: bool = typer.Option(
            False, "--index", help="Read the project once and keep its lines in memory (faster on big projects)."
        ),
    ) -> None:
        """Check which keys of a resource file are unused in a project."""
        _handle_stage_result(cmd_check)(
            source_file_path,
            project_path,
            allow_nb_times,
            extensions=extensions,
            log_empty_values=log_empty_values,
            anxious_mode=anxious_mode,
            recursive=recursive,
            use_index=index,
        )

    @app.command(name="run")
    def run_cmd(
        config_path: str = typer.Argument(..., help="JSON file describing the audit (ScanConfig fields)."),
    ) -> None:
        """Run the audit described by a JSON configuration file."""
        _handle_stage_result(cmd_run)(config_path)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show locheck version information."""
        _handle_stage_result(cmd_version)()

    return app
