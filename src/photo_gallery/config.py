"""Storage locations for the photo gallery."""

from dataclasses import dataclass
from pathlib import Path

PHOTOS_FILENAME = "photos.txt"
ALBUMS_FILENAME = "albums.txt"


@dataclass(frozen=True)
class GalleryConfig:
    """Paths of the photo catalog and album files."""

    catalog_path: Path
    albums_path: Path

    @classmethod
    def from_directory(cls, data_dir: Path) -> "GalleryConfig":
        """Build the default file layout inside a data directory.

        Args:
            data_dir: Directory holding both storage files

        Returns:
            Configuration pointing at photos.txt and albums.txt in data_dir
        """
        return cls(
            catalog_path=data_dir / PHOTOS_FILENAME,
            albums_path=data_dir / ALBUMS_FILENAME,
        )

    @property
    def scratch_path(self) -> Path:
        """Get the temporary file used to rewrite the album file."""
        return self.albums_path.with_name(self.albums_path.name + ".tmp")
