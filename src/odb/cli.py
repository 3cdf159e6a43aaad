# src/odb/cli.py
"""odb Command Line Interface.

Entry point for the odb CLI tool.
"""

from pathlib import Path

import typer
from pydantic import ValidationError

from odb import __version__
from odb.contracts import ObjectKind, ObjectStoreError
from odb.core.config import OdbSettings, load_settings
from odb.core.logging import configure_logging
from odb.core.object_store import FilesystemObjectStore

app = typer.Typer(
    name="odb",
    help="odb: content-addressed loose-object store.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"odb version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """odb: content-addressed loose-object store."""
    pass


def _open_store(config: str | None, root: str | None) -> FilesystemObjectStore:
    """Load settings, apply the --root override and configure logging."""
    if config is None:
        settings = OdbSettings()
    else:
        try:
            settings = load_settings(Path(config))
        except FileNotFoundError:
            typer.echo(f"Error: Settings file not found: {config}", err=True)
            raise typer.Exit(1) from None
        except ValidationError as e:
            typer.echo("Configuration errors:", err=True)
            for error in e.errors():
                loc = ".".join(str(x) for x in error["loc"])
                typer.echo(f"  - {loc}: {error['msg']}", err=True)
            raise typer.Exit(1) from None

    configure_logging(settings.logging.level, json_output=settings.logging.json_output)

    store_settings = settings.store
    if root is not None:
        store_settings = store_settings.model_copy(update={"root": Path(root)})
    return FilesystemObjectStore.from_settings(store_settings)


@app.command("hash-object")
def hash_object(
    file: Path = typer.Argument(
        ...,
        help="File whose contents become the object payload.",
    ),
    kind: str = typer.Option(
        ObjectKind.BLOB.value,
        "--type",
        "-t",
        help="Object kind (blob, tree, commit, tag).",
    ),
    write: bool = typer.Option(
        False,
        "--write",
        "-w",
        help="Write the object into the store.",
    ),
    root: str | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Store root (overrides settings).",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Compute an object's address and optionally store it."""
    try:
        object_kind = ObjectKind.parse(kind)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--type") from None

    store = _open_store(config, root)

    try:
        payload = file.read_bytes()
    except OSError as e:
        typer.echo(f"Error: Cannot read {file}: {e.strerror or e}", err=True)
        raise typer.Exit(1) from None

    try:
        if write:
            address = store.write_object(object_kind, payload)
        else:
            address = store.hash_object(object_kind, payload)
    except ObjectStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(address)


@app.command("cat-file")
def cat_file(
    address: str = typer.Argument(
        ...,
        help="40-character object address.",
    ),
    show_type: bool = typer.Option(
        False,
        "-t",
        help="Show the object kind.",
    ),
    show_size: bool = typer.Option(
        False,
        "-s",
        help="Show the recorded size.",
    ),
    pretty: bool = typer.Option(
        False,
        "-p",
        help="Write the payload to stdout.",
    ),
    root: str | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Store root (overrides settings).",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Show the kind, size or payload of a stored object."""
    if sum((show_type, show_size, pretty)) != 1:
        typer.echo("Error: Exactly one of -t, -s or -p is required.", err=True)
        raise typer.Exit(2)

    store = _open_store(config, root)

    try:
        obj = store.read(address)
    except ObjectStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if show_type:
        typer.echo(obj.kind)
    elif show_size:
        typer.echo(obj.size)
    else:
        typer.echo(obj.payload, nl=False)


if __name__ == "__main__":
    app()
