"""Config Typer app factory."""

import typer

from ..api.config.cmd_show import cmd_show
from ._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        section: str | None = typer.Argument(
            None,
            help="Configuration section name (e.g., 'remote', 'patterns', 'log'). Omit to list all sections.",
        ),
    ) -> None:
        """Show configuration sections or a specific section.

        Usage:
            orgit config              # List all section names
            orgit config <section>    # Show config for a specific section
        """
        _handle_stage_result(cmd_show, ctx)(section or "")

    return app
