"""Docs Typer app factory."""

import typer

from doccheck.api.docs.cmd_check import cmd_check
from doccheck.cli._handle_stage_result import _handle_stage_result


def docs() -> typer.Typer:
    """Create and configure the docs Typer app."""
    app = typer.Typer(
        name="docs",
        help="Validate links in markdown documentation",
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

    @app.command(name="check")
    def check_cmd(
        root: str | None = typer.Argument(None, help="Directory or markdown file to crawl (default: docs)"),
        source_root: str | None = typer.Option(
            None,
            "--source-root",
            help="Source checkout used to verify that line-anchor links still point at their expected code",
        ),
    ) -> None:
        """Check every markdown link under ROOT."""
        _handle_stage_result(cmd_check)(root=root, source_root=source_root)

    return app
