"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from ..api.config.OrgitConfig import OrgitConfig
    from ..utils.configure_logging import configure_logging

    try:
        config = OrgitConfig.load()
    except ValueError:
        # Commands report the broken config themselves
        configure_logging(OrgitConfig.get_home_dir())
        return
    configure_logging(OrgitConfig.get_home_dir(), level=config.log.level, log_file=config.log.file)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from ..utils.get_package_version import get_package_version

        print(f"orgit {get_package_version()}")
        return 0

    _configure_logging()
    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        # Typer exits with 2 on usage errors and 1 on abort
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
