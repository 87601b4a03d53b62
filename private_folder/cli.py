"""private-folder CLI — set up a repository's private, never-committed folder."""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from private_folder import __version__
from private_folder.errors import PrivateFolderError
from private_folder.models import StepStatus

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="private-folder")
@click.option(
    "--directory",
    "-C",
    default=".",
    type=click.Path(file_okay=False),
    help="Look for the repository starting from this directory",
)
@click.pass_context
def main(ctx: click.Context, directory: str):
    """private-folder — keep local-only files out of git.

    Creates .private/files inside the repository as a symlink to a
    randomly named folder under your user config directory.
    """
    ctx.obj = {"directory": directory}


# ── Init ─────────────────────────────────────────────────────────────


@main.command()
@click.pass_obj
def init(obj: dict):
    """Create (or verify) the private folder of the current repository.

    Safe to run again: existing entries are left untouched.
    """
    from private_folder.provisioner import PrivateFolderProvisioner

    try:
        provisioner = PrivateFolderProvisioner.discover(obj["directory"])
        report = provisioner.init()
    except (PrivateFolderError, OSError) as e:
        err_console.print(f"[red]error:[/] {escape(str(e))}", highlight=False)
        sys.exit(1)

    root = provisioner.context.root
    console.print(f"\n[bold blue]private-folder[/] — {report.summary()}\n", highlight=False)

    table = Table(show_header=False, box=None)
    table.add_column("Status", width=8)
    table.add_column("Path")
    for step in report.steps:
        status = "[green]created[/]" if step.status is StepStatus.CREATED else "[dim]exists[/]"
        table.add_row(status, str(step.path.relative_to(root)))
    table.add_row("[cyan]target[/]", str(report.target))

    console.print(table)


if __name__ == "__main__":
    main()
