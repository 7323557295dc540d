"""Interactive command-line shell for the photo gallery."""

import logging
from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from photo_gallery.album_store import AlbumStore
from photo_gallery.catalog import PhotoCatalog
from photo_gallery.config import GalleryConfig
from photo_gallery.errors import (
    AlbumNotFoundError,
    EmptyNameError,
    GalleryError,
    StorageError,
)
from photo_gallery.models import Album

app = typer.Typer(
    name="photo-gallery",
    help="Manage photo albums stored in flat text files",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def ask(prompt: str) -> str:
    """Prompt for a line of text, returning it stripped (empty if nothing was typed)."""
    return Prompt.ask(prompt, console=console, default="", show_default=False).strip()


def print_header() -> None:
    """Print the main menu."""
    console.print("\n[bold]========== Photo Gallery System ==========[/bold]")
    for number, (title, _) in MENU.items():
        console.print(f"{number} - {title}")
    console.print("0 - Exit")
    console.print("[bold]============================================[/bold]")


def display_photos(store: AlbumStore) -> None:
    table = Table(title="Available Photos")
    table.add_column("Photo Name", style="green")
    table.add_column("Size (KB)", justify="right")
    for photo in store.catalog.list_all():
        table.add_row(escape(photo.name), str(photo.size_kb))
    console.print(table)


def display_albums(store: AlbumStore) -> None:
    table = Table()
    table.add_column("Album Name", style="blue")
    table.add_column("Photos")
    table.add_column("Total Size (KB)", style="red", justify="right")
    for album in store.list_all():
        photos = ";".join(album.photos) if album.photos else "None"
        table.add_row(escape(album.name), escape(photos), str(album.total_size_kb))
    console.print(table)


def create_album(store: AlbumStore) -> None:
    name = ask("Enter new album name")
    store.create(name)
    console.print(f"[green]Album '{escape(name)}' created.[/green]")


def ask_existing_album(store: AlbumStore, prompt: str) -> Album:
    """Prompt for an album name and make sure the album exists.

    Args:
        store: Album store to look the name up in
        prompt: Prompt text shown to the user

    Returns:
        The first album with the entered name

    Raises:
        EmptyNameError: If nothing was entered
        AlbumNotFoundError: If no album has that name
    """
    name = ask(prompt)
    if not name:
        raise EmptyNameError()
    album = store.get(name)
    if album is None:
        raise AlbumNotFoundError(name)
    return album


def add_photo(store: AlbumStore) -> None:
    album_name = ask_existing_album(store, "Enter album name to modify").name
    display_photos(store)
    photo_name = ask("Enter photo name to add")
    store.add_photo(album_name, photo_name)
    console.print(
        f"[green]Added photo '{escape(photo_name)}' to album '{escape(album_name)}'.[/green]"
    )


def remove_photo(store: AlbumStore) -> None:
    album = ask_existing_album(store, "Enter album name to modify")
    album_name = album.name
    current = ";".join(album.photos) if album.photos else "None"
    console.print(f"Current photos: {escape(current)}")
    photo_name = ask("Enter photo name to remove")
    removed = store.remove_photo(album_name, photo_name)
    if removed:
        console.print(
            f"[green]Removed photo '{escape(photo_name)}' from album '{escape(album_name)}'.[/green]"
        )
    else:
        console.print(
            f"Photo '{escape(photo_name)}' is not in album '{escape(album_name)}'."
        )


def delete_album(store: AlbumStore) -> None:
    name = ask("Enter album name to delete")
    if not name:
        raise EmptyNameError()
    store.delete_album(name)
    console.print(f"[green]Album '{escape(name)}' deleted.[/green]")


def rename_album(store: AlbumStore) -> None:
    old_name = ask_existing_album(store, "Enter album name to update").name
    new_name = ask("Enter new album name")
    store.rename(old_name, new_name)
    console.print(
        f"[green]Album '{escape(old_name)}' renamed to '{escape(new_name)}'.[/green]"
    )


MENU: dict[int, tuple[str, Callable[[AlbumStore], None]]] = {
    1: ("Create Album", create_album),
    2: ("Display Albums", display_albums),
    3: ("Add Photo to Album", add_photo),
    4: ("Remove Photo from Album", remove_photo),
    5: ("Delete Album", delete_album),
    6: ("Rename Album", rename_album),
    7: ("Display Available Photos", display_photos),
}


def run_menu(store: AlbumStore) -> None:
    """Show the menu and dispatch choices until the user exits.

    Args:
        store: Album store the menu actions operate on
    """
    while True:
        print_header()
        try:
            option = IntPrompt.ask("Enter option (0-7)", console=console)
        except EOFError:
            logger.debug("Input closed, leaving menu")
            return

        if option == 0:
            return
        if option not in MENU:
            console.print(
                "[red]Invalid option. Please enter a number between 0 and 7.[/red]"
            )
            continue

        _, action = MENU[option]
        try:
            action(store)
        except EOFError:
            return
        except GalleryError as e:
            console.print(f"[red]{escape(str(e))}[/red]")


@app.command()
def run(
    data_dir: Path = typer.Option(
        Path("."),
        "--data-dir",
        "-d",
        envvar="PHOTO_GALLERY_DIR",
        help="Directory holding photos.txt and albums.txt",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Manage photo albums interactively.

    Creates the photo catalog with sample photos and an empty album file in
    DATA_DIR when they are missing, then shows the main menu.
    """
    setup_logging(verbose)

    config = GalleryConfig.from_directory(data_dir)
    catalog = PhotoCatalog(config)
    store = AlbumStore(config, catalog)

    try:
        if catalog.ensure_seeded():
            console.print(
                f"'{config.catalog_path.name}' not found. Prepopulated with sample photos."
            )
        if store.ensure_initialized():
            console.print(
                f"'{config.albums_path.name}' not found. Created empty albums file."
            )
    except StorageError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print("Photo Gallery System initialized.")
    run_menu(store)
    console.print("Exiting the Photo Gallery System.")


if __name__ == "__main__":
    app()
