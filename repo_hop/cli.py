"""Typer-based CLI for repo-hop."""

from __future__ import annotations

import typer

from . import __version__, render
from .config import load_settings
from .exceptions import NotFoundError, RepoHopError, UserAbort
from .finder import RepoFinder
from .interactive import fuzzy_select_entry, select_entry
from .launchers import open_in_editor, open_in_explorer

app = typer.Typer(
    help="Find local git repositories by name, report stale ones, and jump to or open them.",
    add_completion=False,
    no_args_is_help=True,
)

TERM_HELP = "Case-insensitive part of the directory name. Wildcards * and ? are allowed."

SHELL_SNIPPETS = {
    "bash": """rcd() {
    if [ "$#" -eq 0 ]; then
        command repo-hop cd
        return
    fi
    local target
    target="$(command repo-hop cd "$@")" || return
    [ -n "$target" ] && cd "$target"
}
""",
    "fish": """function rcd
    if test (count $argv) -eq 0
        command repo-hop cd
        return
    end
    set -l target (command repo-hop cd $argv); or return
    test -n "$target"; and cd $target
end
""",
    "powershell": """function rcd {
    if ($args.Count -eq 0) { repo-hop cd; return }
    $target = repo-hop cd @args
    if ($LASTEXITCODE -eq 0 -and $target) { Set-Location $target }
}
""",
}
SHELL_SNIPPETS["zsh"] = SHELL_SNIPPETS["bash"]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"repo-hop {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show git invocations and other debug output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the repo-hop version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    render.set_verbose(verbose)


@app.command(help="Fetch matching repositories and list the ones behind their upstream")
def stale(
    term: str = typer.Argument("", help=TERM_HELP),
    show_all: bool = typer.Option(False, "--all", help="List every checked repository, not only stale ones."),
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    finder = _build_finder()
    try:
        reports = finder.status_reports(term)
    except NotFoundError as exc:
        if as_json:
            typer.echo(render.reports_json([]))
        else:
            render.info(str(exc))
        return
    except RepoHopError as err:
        _fail(str(err))
    stale_reports = [report for report in reports if report.is_stale]
    shown = reports if show_all else stale_reports
    if as_json:
        typer.echo(render.reports_json(shown))
        return
    unconfirmed = sum(1 for report in reports if report.fetch_failed)
    if unconfirmed:
        render.warning(f"Fetch failed for {unconfirmed} repositor{'y' if unconfirmed == 1 else 'ies'}; results may be outdated.")
    if show_all and reports:
        render.show_reports(reports, title="Repositories")
    if not stale_reports:
        render.info("No stale repositories")
        return
    if not show_all:
        render.show_reports(stale_reports)


@app.command(help="Open a matching directory in the platform file browser")
def explore(
    term: str = typer.Argument("", help=TERM_HELP + " Empty means the current directory."),
    fuzzy: bool = typer.Option(False, "--fuzzy", help="Pick among several matches with a fuzzy finder."),
) -> None:
    finder = _build_finder()
    try:
        target = finder.resolve_directory(term, fuzzy_select_entry if fuzzy else select_entry)
        open_in_explorer(target, finder.settings)
    except RepoHopError as err:
        _fail_for(err)
    render.success(f"Opened {render.literal(target)}")


@app.command(help="Print the path of a matching repository for the shell to cd into (see shell-init)")
def cd(term: str = typer.Argument("", help=TERM_HELP + " Empty lists every repository.")) -> None:
    finder = _build_finder()
    try:
        if not term.strip():
            repos = finder.repositories()
            if not repos:
                render.info(f"No git repositories under {render.literal(finder.settings.root)}")
            for entry in repos:
                typer.echo(entry.name)
            return
        target = finder.resolve_repository(term)
    except RepoHopError as err:
        _fail_for(err)
    typer.echo(str(target))


@app.command(help="Open a matching directory in the configured editor")
def edit(
    term: str = typer.Argument("", help=TERM_HELP + " Empty means the current directory."),
    fuzzy: bool = typer.Option(False, "--fuzzy", help="Pick among several matches with a fuzzy finder."),
) -> None:
    finder = _build_finder()
    try:
        target = finder.resolve_directory(term, fuzzy_select_entry if fuzzy else select_entry)
        open_in_editor(target, finder.settings)
    except RepoHopError as err:
        _fail_for(err)
    render.success(f"Opened {render.literal(target)} in {render.literal(finder.settings.editor)}")


@app.command("shell-init", help="Print a shell function `rcd` that changes directory via `repo-hop cd`")
def shell_init(shell: str = typer.Argument("bash", help="One of: bash, zsh, fish, powershell.")) -> None:
    snippet = SHELL_SNIPPETS.get(shell.lower())
    if snippet is None:
        _fail(f"Unsupported shell: {shell}. Choose from: {', '.join(sorted(SHELL_SNIPPETS))}")
    typer.echo(snippet, nl=False)


def _build_finder() -> RepoFinder:
    try:
        return RepoFinder(load_settings())
    except RepoHopError as err:
        _fail(str(err))


def _fail_for(err: RepoHopError) -> None:
    _fail(str(err), code=130 if isinstance(err, UserAbort) else 1)


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
