"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from ..api.config.get_package_version import get_package_version
    from ..utils.logger import configure_logging
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        print(f"locheck {get_package_version()}")
        return 0

    configure_logging()

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
    except SystemExit as e:
        # Commands exit through sys.exit once their result is displayed
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
