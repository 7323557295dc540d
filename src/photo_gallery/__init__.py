"""Photo Gallery - Manage photo albums stored in flat text files."""

__version__ = "0.1.0"

from photo_gallery.album_store import AlbumStore
from photo_gallery.catalog import PhotoCatalog
from photo_gallery.config import GalleryConfig
from photo_gallery.errors import GalleryError
from photo_gallery.models import Album, Photo

__all__ = [
    "AlbumStore",
    "PhotoCatalog",
    "GalleryConfig",
    "GalleryError",
    "Album",
    "Photo",
]
