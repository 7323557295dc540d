"""Read-only catalog of available photos."""

import logging
import re
from pathlib import Path

from photo_gallery.config import GalleryConfig
from photo_gallery.errors import StorageError
from photo_gallery.models import Photo

logger = logging.getLogger(__name__)

# Records written when the catalog file does not exist yet
SAMPLE_PHOTOS = (
    Photo("Sunset.jpg", 512),
    Photo("Mountains.png", 1024),
    Photo("Beach.bmp", 750),
    Photo("Cityscape.jpg", 640),
    Photo("Forest.png", 860),
)

_RECORD_RE = re.compile(r"^([^,\n]+),\s*([+-]?\d+)")


def parse_photo(line: str) -> Photo | None:
    """Parse one catalog line of the form ``name,size``.

    Args:
        line: Raw line read from the catalog file

    Returns:
        The parsed photo, or None if the line is malformed
    """
    match = _RECORD_RE.match(line)
    if match is None:
        return None
    try:
        return Photo(name=match.group(1), size_kb=int(match.group(2)))
    except ValueError:
        return None


class PhotoCatalog:
    """Looks up photos and their sizes from the catalog file."""

    def __init__(self, config: GalleryConfig) -> None:
        """Initialize photo catalog.

        Args:
            config: Gallery configuration naming the catalog file
        """
        self.config = config

    @property
    def path(self) -> Path:
        return self.config.catalog_path

    def ensure_seeded(self) -> bool:
        """Create the catalog file with sample photos if it does not exist.

        Returns:
            True if the file was created, False if it already existed

        Raises:
            StorageError: If the file cannot be created
        """
        if self.path.exists():
            return False

        try:
            with self.path.open("w", encoding="utf-8") as fp:
                for photo in SAMPLE_PHOTOS:
                    fp.write(f"{photo.name},{photo.size_kb}\n")
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e

        logger.info(f"Seeded {self.path} with {len(SAMPLE_PHOTOS)} sample photo(s)")
        return True

    def list_all(self) -> list[Photo]:
        """Read every well-formed photo record in file order.

        Returns:
            List of Photo objects

        Raises:
            StorageError: If the catalog file cannot be read
        """
        photos: list[Photo] = []
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                for line in fp:
                    photo = parse_photo(line)
                    if photo is None:
                        logger.debug(f"Skipping malformed catalog line: {line!r}")
                        continue
                    photos.append(photo)
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise StorageError(self.path, f"not valid UTF-8 ({e.reason})") from e
        return photos

    def sizes(self) -> dict[str, int]:
        """Map each photo name to the size of its first record."""
        table: dict[str, int] = {}
        for photo in self.list_all():
            table.setdefault(photo.name, photo.size_kb)
        return table

    def get(self, name: str) -> Photo | None:
        for photo in self.list_all():
            if photo.name == name:
                return photo
        return None

    def size_of(self, name: str) -> int | None:
        """Get the size of a photo.

        Args:
            name: Photo name to look up

        Returns:
            Size in KB of the first matching record, or None if absent
        """
        photo = self.get(name)
        return photo.size_kb if photo is not None else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None
