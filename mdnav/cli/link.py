"""Link Typer app factory."""

import typer

from mdnav.api.link.cmd_classify import cmd_classify
from mdnav.api.link.cmd_follow import cmd_follow
from mdnav.api.link.cmd_resolve import cmd_resolve
from mdnav.cli._handle_stage_result import _handle_stage_result

_PERSPECTIVE_HELP = "Override perspective priority: current, first or root"


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Classify, resolve and follow link targets",
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

    @app.command(name="classify")
    def classify_cmd(
        target: str = typer.Argument(..., help="Link target as written in the document"),
    ) -> None:
        """Show what kind of link a target is."""
        _handle_stage_result(cmd_classify)(link=target)

    @app.command(name="resolve")
    def resolve_cmd(
        target: str = typer.Argument(..., help="Link target as written in the document"),
        document: str = typer.Option(..., "--from", "-f", help="Document containing the link"),
        perspective: str | None = typer.Option(None, "--perspective", "-p", help=_PERSPECTIVE_HELP),
        root_tell: str | None = typer.Option(None, "--root-tell", help="Marker file identifying a root"),
        initial_dir: str | None = typer.Option(None, "--initial-dir", help="Directory of the first-opened file"),
    ) -> None:
        """Resolve a link to a path without opening anything."""
        _handle_stage_result(cmd_resolve)(
            link=target,
            document=document,
            perspective=perspective,
            root_tell=root_tell,
            initial_dir=initial_dir,
        )

    @app.command(name="follow")
    def follow_cmd(
        target: str = typer.Argument(..., help="Link target as written in the document"),
        document: str = typer.Option(..., "--from", "-f", help="Document containing the link"),
        perspective: str | None = typer.Option(None, "--perspective", "-p", help=_PERSPECTIVE_HELP),
        root_tell: str | None = typer.Option(None, "--root-tell", help="Marker file identifying a root"),
        initial_dir: str | None = typer.Option(None, "--initial-dir", help="Directory of the first-opened file"),
    ) -> None:
        """Follow a link: open it in $EDITOR or the default application."""
        _handle_stage_result(cmd_follow)(
            link=target,
            document=document,
            perspective=perspective,
            root_tell=root_tell,
            initial_dir=initial_dir,
        )

    return app
