"""Thin CLI wrapper: Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
Exit statuses: 0 success, 1 problems found or generic failure, 2 file not
found, 13 permission denied, 21 not a regular file, 22 invalid arguments.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Annotated, Optional

import click
import typer

from docaudit import __version__
from docaudit.domain.errors import (
    EXIT_FAILURE,
    EXIT_INVALID_ARGUMENT,
    EXIT_OK,
    DocAuditError,
)
from docaudit.presentation.cli.formatters import (
    configure_logging,
    console,
    error_message,
    json_panel,
    print_line,
    print_link,
    success_panel,
)

_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="docaudit",
    help="Audit modular AsciiDoc and DocBook sources: house style and external links.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=False,
    context_settings=_CONTEXT_SETTINGS,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="Show or create the house-style configuration.",
    no_args_is_help=True,
    context_settings=_CONTEXT_SETTINGS,
)
app.add_typer(config_app, name="config")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"docaudit {__version__}", markup=False)
        raise typer.Exit()


def _container(ctx: typer.Context):
    from docaudit.bootstrap import Container

    if not isinstance(ctx.obj, Container):
        ctx.obj = Container()
    return ctx.obj


def _fail(ctx: typer.Context, exc: DocAuditError) -> typer.Exit:
    error_message(ctx.find_root().info_name or "docaudit", str(exc))
    return typer.Exit(code=exc.exit_code)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Path to a house-style JSON configuration file."),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log diagnostics to stderr.")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Display version and exit.",
        ),
    ] = False,
) -> None:
    """Audit modular AsciiDoc and DocBook sources."""
    from docaudit.bootstrap import Container

    configure_logging(debug=debug)
    ctx.obj = Container(config)


# ---------------------------------------------------------------------------
# docaudit test
# ---------------------------------------------------------------------------


@app.command("test", context_settings=_CONTEXT_SETTINGS)
def test_files(
    ctx: typer.Context,
    files: Annotated[list[Path], typer.Argument(help="AsciiDoc files to test.")],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Include successful test results in the report."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Display version and exit.",
        ),
    ] = False,
) -> None:
    """Test AsciiDoc files against the house style and report possible issues."""
    from docaudit.application.preconditions import ASCIIDOC_SUFFIXES, require_file
    from docaudit.domain.models.report import Report

    try:
        paths = [require_file(f, ASCIIDOC_SUFFIXES) for f in files]
        use_case = _container(ctx).validate_documents()
    except DocAuditError as exc:
        raise _fail(ctx, exc)

    report = use_case.execute(paths, Report(verbose=verbose, sink=print_line))
    raise typer.Exit(code=EXIT_OK if report.succeeded else EXIT_FAILURE)


# ---------------------------------------------------------------------------
# docaudit links
# ---------------------------------------------------------------------------


@app.command("links", context_settings=_CONTEXT_SETTINGS)
def check_links(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="AsciiDoc (.adoc) or DocBook (.xml) file.")],
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Print the status of all links.")
    ] = False,
    color: Annotated[bool, typer.Option("--color", "-c", help="Enable colored output.")] = False,
    xinclude: Annotated[
        bool, typer.Option("--xinclude", "-i", help="Perform XInclude processing (DocBook).")
    ] = False,
    list_only: Annotated[
        bool, typer.Option("--list", "-l", help="List all links without checking their status.")
    ] = False,
    parallel: Annotated[
        bool, typer.Option("--parallel", "-p", help="Check links in parallel.")
    ] = False,
    workers: Annotated[
        Optional[int],
        typer.Option(
            "--workers",
            "-w",
            min=1,
            help="Worker pool size; implies --parallel (default: one per link).",
        ),
    ] = None,
) -> None:
    """List broken external links in an AsciiDoc or DocBook file."""
    from docaudit.application.preconditions import require_file
    from docaudit.domain.models.enums import Verdict
    from docaudit.links.extractor import DOCBOOK_SUFFIXES

    try:
        path = require_file(
            file, {".adoc", *DOCBOOK_SUFFIXES}, kind="an AsciiDoc or DocBook XML"
        )
        use_case = _container(ctx).check_links(pool_size=workers or 10)
        if list_only:
            for url in use_case.list_links(path, xinclude=xinclude):
                print_line(url)
            raise typer.Exit(code=EXIT_OK)

        def on_result(result) -> None:
            if show_all or result.verdict is Verdict.UNREACHABLE:
                print_link(result, color=color)

        use_case.execute(
            path,
            xinclude=xinclude,
            workers=workers if parallel or workers else 1,
            on_result=on_result,
        )
    except DocAuditError as exc:
        raise _fail(ctx, exc)

    raise typer.Exit(code=EXIT_OK)


# ---------------------------------------------------------------------------
# docaudit config
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Print the active configuration as JSON."""
    try:
        cfg = _container(ctx).config
    except DocAuditError as exc:
        raise _fail(ctx, exc)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Destination file name.")
    ] = Path("house_style.json"),
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file.")] = False,
) -> None:
    """Copy the default configuration into a file for customisation."""
    from docaudit.config.loader import DEFAULT_CONFIG_PATH

    if output.exists() and not force:
        overwrite = typer.confirm(f"{output} already exists. Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(DEFAULT_CONFIG_PATH, output)
    success_panel(f"Configuration written to {output}")


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def run(args: Optional[list[str]] = None, prog_name: Optional[str] = None) -> int:
    """Invoke the CLI and return its exit status.

    Usage errors (unknown options, missing arguments) exit with 22 instead
    of Click's default 2, which is reserved for missing files.
    """
    try:
        result = app(args=args, prog_name=prog_name, standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        return EXIT_INVALID_ARGUMENT
    except click.Abort:
        error_message(prog_name or "docaudit", "Aborted!")
        return EXIT_FAILURE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return result if isinstance(result, int) else EXIT_OK


def main() -> None:
    sys.exit(run())


def test_adoc_main() -> None:
    """``test-adoc FILE...``: shortcut for ``docaudit test``."""
    sys.exit(run(["test", *sys.argv[1:]], prog_name="test-adoc"))


def check_links_main() -> None:
    """``check-ad-links`` / ``check-db-links``: shortcut for ``docaudit links``."""
    prog = Path(sys.argv[0]).name or "check-links"
    sys.exit(run(["links", *sys.argv[1:]], prog_name=prog))
