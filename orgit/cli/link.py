"""Link Typer app factory."""

import typer

from ..api.link.cmd_export import cmd_export
from ..api.link.cmd_parse import cmd_parse
from ..api.link.cmd_resolve import cmd_resolve
from ..api.link.cmd_store import cmd_store
from ._handle_stage_result import _handle_stage_result


def _print_text(field: str):
    def printer(output: dict) -> None:
        typer.echo(output[field])

    return printer


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Store, parse, resolve and export orgit links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        ctx: typer.Context,
        link_text: str = typer.Argument(..., metavar="LINK", help="Link text, e.g. orgit-rev:~/src/proj::deadbeef"),
        format: str = typer.Option("text", "--format", "-f", help="Output format: html, latex, text or other"),
        description: str | None = typer.Option(None, "--description", help="Visible link text for html/latex"),
        raw: bool = typer.Option(False, "--raw", help="Print only the URL"),
    ) -> None:
        """Resolve a link to its public URL."""
        printer = _print_text("url") if raw else None
        _handle_stage_result(cmd_resolve, ctx, result_printer=printer)(link_text, format=format, description=description)

    @app.command(name="parse")
    def parse_cmd(
        ctx: typer.Context,
        link_text: str = typer.Argument(..., metavar="LINK", help="Link text to parse"),
    ) -> None:
        """Show the kind, repository path and revision of a link."""
        _handle_stage_result(cmd_parse, ctx)(link_text)

    @app.command(name="store")
    def store_cmd(
        ctx: typer.Context,
        view: str = typer.Argument(..., help="View kind: status, log or commit"),
        path: str = typer.Argument(..., help="Repository working directory"),
        revisions: list[str] | None = typer.Option(None, "--rev", "-r", help="Revision shown by the view (repeatable)"),
        raw: bool = typer.Option(False, "--raw", help="Print only the link text"),
    ) -> None:
        """Build the link text for a repository view."""
        printer = _print_text("link") if raw else None
        _handle_stage_result(cmd_store, ctx, result_printer=printer)(view, path, revisions=revisions)

    @app.command(name="export")
    def export_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Document containing [[orgit...]] links"),
        format: str = typer.Option("text", "--format", "-f", help="Output format: html, latex, text or other"),
        output: str | None = typer.Option(None, "--output", "-o", help="Write the exported document here"),
    ) -> None:
        """Rewrite the orgit links of a document into public URLs."""
        printer = None if output else _print_text("text")
        _handle_stage_result(cmd_export, ctx, result_printer=printer)(path, format=format, output_path=output)

    return app
