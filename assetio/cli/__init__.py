"""
Command-Line Interface

CLI commands for inspecting and editing a project's Assets folder.

Commands:
    assetio ls              - List folders and files
    assetio mkdir           - Create a (nested) folder
    assetio rm              - Delete a folder or file
    assetio exists          - Check whether a path exists
    assetio to-asset-path   - Convert a system path to an asset path
    assetio to-system-path  - Convert an asset path to a system path
    assetio info            - Display project information

Usage:
    # List the textures folder recursively
    assetio ls Assets/Art --recursive --project ./MyGame

    # Create nested folders
    assetio mkdir Assets/Art/Textures/Bears -p ./MyGame

    # Delete a folder only if nothing is in it
    assetio rm Assets/Old --if-empty -p ./MyGame

Settings are read from ASSETIO_* environment variables and a .env file in the
working directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from assetio.api.asset_io import AssetIO
from assetio.errors import AssetIOError, InvalidOperationError
from assetio.paths import PATH_SPLITTER, ROOT_FOLDER_NAME

__all__ = ["main", "app"]

app = typer.Typer(
    name="assetio",
    help="Browse and edit a project's asset folders",
    no_args_is_help=True,
)
console = Console()

PROJECT_HELP = "Project directory containing the Assets folder"


@contextmanager
def _report_errors() -> Iterator[None]:
    """Print assetio errors and exit with status 1 instead of a traceback."""
    try:
        yield
    except AssetIOError as e:
        console.print(f"[red]{e}[/]", soft_wrap=True)
        raise typer.Exit(code=1) from e


def _open(project: Optional[Path], create: bool = False) -> AssetIO:
    return AssetIO(project_path=project, create=create)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log every database operation",
    ),
) -> None:
    """Browse and edit a project's asset folders."""
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def ls(
    path: str = typer.Argument(
        ROOT_FOLDER_NAME,
        help="Asset path of the folder to list",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive", "-r",
        help="Include files in sub folders",
    ),
    pattern: Optional[str] = typer.Option(
        None,
        "--filter", "-f",
        help="Shell-style file name pattern (e.g. '*.png')",
    ),
    asset_type: Optional[str] = typer.Option(
        None,
        "--type", "-t",
        help="Only list assets of this type (e.g. TextAsset)",
    ),
) -> None:
    """List folders and files."""
    with _report_errors():
        io = _open(project)
        directory = io.get_directory(path)

        table = Table(title=directory.path)
        table.add_column("Name", style="cyan")
        table.add_column("Kind", style="dim")
        table.add_column("Type", style="green")

        if pattern is None and asset_type is None:
            for child in directory.get_directories():
                table.add_row(child.name + PATH_SPLITTER, "folder", "")

        for file in directory.get_files(filter=pattern, recursive=recursive, asset_type=asset_type):
            record = file.info()
            table.add_row(
                file.path[len(directory.path) + 1:],
                "file",
                record.asset_type,
            )

        console.print(table)


@app.command()
def mkdir(
    path: str = typer.Argument(
        ...,
        help="Asset path of the folder to create (e.g. Assets/Art/Textures)",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
) -> None:
    """Create a folder, including any missing parents."""
    with _report_errors():
        io = _open(project, create=True)
        io.validate_path(path)
        if path == ROOT_FOLDER_NAME:
            directory = io.root
        elif path.startswith(ROOT_FOLDER_NAME + PATH_SPLITTER):
            directory = io.root.create_directory(path[len(ROOT_FOLDER_NAME) + 1:])
        else:
            raise InvalidOperationError(f"'{path}' must start with '{ROOT_FOLDER_NAME}/'")

        console.print(f"[green]{directory.path}[/]")


@app.command()
def rm(
    path: str = typer.Argument(
        ...,
        help="Asset path of the folder or file to delete",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
    if_empty: bool = typer.Option(
        False,
        "--if-empty",
        help="Only delete a folder that is empty",
    ),
    assets_only: bool = typer.Option(
        False,
        "--assets-only",
        help="With --if-empty, ignore empty sub folders",
    ),
) -> None:
    """Delete a folder (with everything in it) or a file."""
    with _report_errors():
        io = _open(project)

        if path == ROOT_FOLDER_NAME:
            raise InvalidOperationError(f"The asset root '{ROOT_FOLDER_NAME}' can not be deleted")

        file = io.if_file_exists(path)
        if file:
            file.delete()
            console.print(f"Deleted {path}")
            return

        directory = io.get_directory(path)
        if if_empty:
            directory = directory.if_empty(assets_only)
            if not directory:
                console.print(f"[yellow]{path} is not empty, nothing deleted[/]")
                return

        directory.delete()
        console.print(f"Deleted {path}")


@app.command()
def exists(
    path: str = typer.Argument(
        ...,
        help="Asset path to check",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
) -> None:
    """Check whether a folder or file exists. Exits with 1 if it does not."""
    with _report_errors():
        io = _open(project)
        if io.if_directory_exists(path):
            console.print("directory")
        elif io.if_file_exists(path):
            console.print("file")
        else:
            console.print("[yellow]missing[/]")
            raise typer.Exit(code=1)


@app.command("to-asset-path")
def to_asset_path(
    system_path: str = typer.Argument(
        ...,
        help="Absolute path inside the project's Assets folder",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
) -> None:
    """Convert a system path to an asset path."""
    with _report_errors():
        io = _open(project)
        console.print(io.system_to_asset_path(system_path), soft_wrap=True)


@app.command("to-system-path")
def to_system_path(
    asset_path: str = typer.Argument(
        ...,
        help="Asset path starting with Assets/",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
) -> None:
    """Convert an asset path to a system path."""
    with _report_errors():
        io = _open(project)
        console.print(io.asset_path_to_system_path(asset_path), soft_wrap=True)


@app.command()
def info(
    project: Optional[Path] = typer.Option(
        None,
        "--project", "-p",
        help=PROJECT_HELP,
    ),
) -> None:
    """Display project information."""
    with _report_errors():
        io = _open(project)
        root = io.root

        folder_count = 0
        pending = root.get_directories()
        while pending:
            folder_count += 1
            pending.extend(pending.pop().get_directories())

        asset_count = len(root.get_files(recursive=True))

        table = Table(title=f"Project: {io.config.project_path}")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")

        table.add_row("Data path", io.data_path)
        table.add_row("Folders", str(folder_count))
        table.add_row("Assets", str(asset_count))

        console.print(table)
        if root.is_empty():
            console.print(Panel("The Assets folder is empty", border_style="yellow"))


def main() -> None:
    """Entry point for the CLI."""
    app()
