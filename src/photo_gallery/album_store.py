"""Album storage backed by a flat text file rewritten on every change."""

import logging
from collections.abc import Callable
from pathlib import Path

from photo_gallery.catalog import PhotoCatalog
from photo_gallery.config import GalleryConfig
from photo_gallery.errors import (
    AlbumExistsError,
    AlbumNotFoundError,
    EmptyNameError,
    EmptyNewNameError,
    EmptyPhotoNameError,
    GalleryError,
    InvalidNameError,
    PhotoNotInCatalogError,
    StorageError,
)
from photo_gallery.models import Album

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
PHOTO_SEPARATOR = ";"

# Characters that would split a field when the record is read back
RESERVED_IN_ALBUM_NAME = (FIELD_SEPARATOR, "\n", "\r")
RESERVED_IN_PHOTO_NAME = (FIELD_SEPARATOR, PHOTO_SEPARATOR, "\n", "\r")

# Receives the matched record's name and photos, returns the replacement
# line or None to drop the record
RecordTransform = Callable[[str, tuple[str, ...]], str | None]


def format_record(name: str, photos: tuple[str, ...] | list[str] = ()) -> str:
    """Serialize an album as ``name,photo1;photo2;...`` plus newline."""
    return f"{name}{FIELD_SEPARATOR}{PHOTO_SEPARATOR.join(photos)}\n"


def parse_record(line: str) -> tuple[str, tuple[str, ...]] | None:
    """Parse one album line into its name and photo tokens.

    Empty tokens between separators are ignored. A line without a name
    field cannot be parsed.

    Args:
        line: Raw line read from the album file

    Returns:
        Tuple of (album name, photo names), or None if the line has no name
    """
    name, _, photo_field = line.rstrip("\r\n").partition(FIELD_SEPARATOR)
    if not name:
        return None
    photos = tuple(token for token in photo_field.split(PHOTO_SEPARATOR) if token)
    return name, photos


def check_name(name: str, reserved: tuple[str, ...]) -> None:
    """Reject a name that cannot be stored in a record unchanged.

    Args:
        name: Album or photo name to check
        reserved: Characters the name must not contain

    Raises:
        InvalidNameError: If name contains a reserved character
    """
    for character in reserved:
        if character in name:
            raise InvalidNameError(name, character)


class AlbumStore:
    """Creates, lists and mutates albums stored one record per line.

    Every mutation streams the whole album file into a scratch file,
    changing at most the first record whose name matches, then swaps the
    scratch file into place. A failed mutation leaves the album file
    untouched.
    """

    def __init__(self, config: GalleryConfig, catalog: PhotoCatalog) -> None:
        """Initialize album store.

        Args:
            config: Gallery configuration naming the album and scratch files
            catalog: Photo catalog used to validate photos and compute sizes
        """
        self.config = config
        self.catalog = catalog

    @property
    def path(self) -> Path:
        return self.config.albums_path

    def ensure_initialized(self) -> bool:
        """Create an empty album file if it does not exist.

        Returns:
            True if the file was created, False if it already existed

        Raises:
            StorageError: If the file cannot be created
        """
        if self.path.exists():
            return False
        try:
            self.path.touch()
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e
        logger.info(f"Created empty album file {self.path}")
        return True

    def _read_lines(self) -> list[str]:
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                return fp.readlines()
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise StorageError(self.path, f"not valid UTF-8 ({e.reason})") from e

    def _records(self) -> list[tuple[str, tuple[str, ...]]]:
        records = (parse_record(line) for line in self._read_lines())
        return [record for record in records if record is not None]

    def create(self, name: str) -> None:
        """Create an empty album.

        Args:
            name: Name of the new album

        Raises:
            EmptyNameError: If name is empty
            InvalidNameError: If name contains a comma or line break
            AlbumExistsError: If an album with this name already exists
            StorageError: If the album file cannot be read or written
        """
        if not name:
            raise EmptyNameError()
        check_name(name, RESERVED_IN_ALBUM_NAME)

        last_line = ""
        if self.path.exists():
            for line in self._read_lines():
                last_line = line
                record = parse_record(line)
                if record is not None and record[0] == name:
                    raise AlbumExistsError(name)

        # Keep the new record on its own line if the file was hand-edited
        prefix = "" if not last_line or last_line.endswith("\n") else "\n"
        try:
            with self.path.open("a", encoding="utf-8") as fp:
                fp.write(prefix + format_record(name))
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e

        logger.info(f"Created album '{name}'")

    def list_all(self) -> list[Album]:
        """Read all albums in file order with their total sizes.

        Photos missing from the catalog count as 0 KB.

        Returns:
            List of Album objects

        Raises:
            StorageError: If the album or catalog file cannot be read
        """
        records = self._records()
        if not records:
            return []

        sizes = self.catalog.sizes()
        return [
            Album(
                name=name,
                photos=photos,
                total_size_kb=sum(sizes.get(photo, 0) for photo in photos),
            )
            for name, photos in records
        ]

    def get(self, name: str) -> Album | None:
        """Get the first album with the given name, or None."""
        for album in self.list_all():
            if album.name == name:
                return album
        return None

    def add_photo(self, album_name: str, photo_name: str) -> None:
        """Append a catalog photo to an album.

        Args:
            album_name: Album to modify
            photo_name: Photo to append

        Raises:
            AlbumNotFoundError: If no album has this name
            EmptyPhotoNameError: If photo_name is empty
            InvalidNameError: If photo_name contains a separator or line break
            PhotoNotInCatalogError: If the catalog has no such photo
            StorageError: If a storage file cannot be read or written
        """

        def append(name: str, photos: tuple[str, ...]) -> str:
            if not photo_name:
                raise EmptyPhotoNameError()
            check_name(photo_name, RESERVED_IN_PHOTO_NAME)
            if self.catalog.size_of(photo_name) is None:
                raise PhotoNotInCatalogError(photo_name)
            return format_record(name, photos + (photo_name,))

        self._rewrite(album_name, append)
        logger.info(f"Added photo '{photo_name}' to album '{album_name}'")

    def remove_photo(self, album_name: str, photo_name: str) -> int:
        """Remove every occurrence of a photo from an album.

        Removing a photo the album does not contain is not an error.

        Args:
            album_name: Album to modify
            photo_name: Photo to remove

        Returns:
            Number of occurrences removed

        Raises:
            AlbumNotFoundError: If no album has this name
            StorageError: If the album file cannot be read or written
        """
        removed = 0

        def exclude(name: str, photos: tuple[str, ...]) -> str:
            nonlocal removed
            kept = [photo for photo in photos if photo != photo_name]
            removed = len(photos) - len(kept)
            return format_record(name, kept)

        self._rewrite(album_name, exclude)
        logger.info(
            f"Removed {removed} occurrence(s) of '{photo_name}' from album '{album_name}'"
        )
        return removed

    def delete_album(self, name: str) -> None:
        """Delete an album record.

        Raises:
            AlbumNotFoundError: If no album has this name
            StorageError: If the album file cannot be read or written
        """
        self._rewrite(name, lambda _name, _photos: None)
        logger.info(f"Deleted album '{name}'")

    def rename(self, old_name: str, new_name: str) -> None:
        """Rename an album, keeping its photos.

        The new name is not checked against existing albums, so a rename
        can produce two records with the same name. Later mutations only
        reach the first of them.

        Args:
            old_name: Current album name
            new_name: Name to give the album

        Raises:
            AlbumNotFoundError: If no album has old_name
            EmptyNewNameError: If new_name is empty
            InvalidNameError: If new_name contains a comma or line break
            StorageError: If the album file cannot be read or written
        """

        def replace_name(name: str, photos: tuple[str, ...]) -> str:
            if not new_name:
                raise EmptyNewNameError()
            check_name(new_name, RESERVED_IN_ALBUM_NAME)
            return format_record(new_name, photos)

        if new_name and new_name != old_name:
            if any(name == new_name for name, _ in self._records()):
                logger.warning(
                    f"Renaming '{old_name}' to existing album name '{new_name}'"
                )

        self._rewrite(old_name, replace_name)
        logger.info(f"Renamed album '{old_name}' to '{new_name}'")

    def _rewrite(self, album_name: str, transform: RecordTransform) -> None:
        """Rewrite the album file, transforming the first matching record.

        Args:
            album_name: Name of the record to transform
            transform: Produces the replacement line, or None to drop it

        Raises:
            AlbumNotFoundError: If no record matches album_name
            GalleryError: Whatever the transform raises
            StorageError: If a file cannot be read, written or replaced
        """
        scratch = self.config.scratch_path
        found = False

        try:
            with self.path.open("r", encoding="utf-8") as src, scratch.open(
                "w", encoding="utf-8"
            ) as dst:
                for line in src:
                    if not line.endswith("\n"):
                        line += "\n"
                    record = None if found else parse_record(line)
                    if record is None or record[0] != album_name:
                        dst.write(line)
                        continue

                    found = True
                    replacement = transform(*record)
                    if replacement is not None:
                        dst.write(replacement)

            if not found:
                raise AlbumNotFoundError(album_name)

            scratch.replace(self.path)
        except OSError as e:
            self._discard(scratch)
            raise StorageError(self.path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            self._discard(scratch)
            raise StorageError(self.path, f"not valid UTF-8 ({e.reason})") from e
        except GalleryError:
            self._discard(scratch)
            raise

    def _discard(self, scratch: Path) -> None:
        try:
            scratch.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove scratch file {scratch}: {e}")
        else:
            logger.debug(f"Discarded rewrite of {self.path}")
