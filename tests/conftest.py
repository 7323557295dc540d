"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from photo_gallery.album_store import AlbumStore
from photo_gallery.catalog import PhotoCatalog
from photo_gallery.config import GalleryConfig


@pytest.fixture
def gallery_config(tmp_path: Path) -> GalleryConfig:
    """Return a configuration rooted in a temporary directory."""
    return GalleryConfig.from_directory(tmp_path)


@pytest.fixture
def catalog(gallery_config: GalleryConfig) -> PhotoCatalog:
    """Return a catalog seeded with the sample photos.

    Contents:
        Sunset.jpg,512
        Mountains.png,1024
        Beach.bmp,750
        Cityscape.jpg,640
        Forest.png,860
    """
    catalog = PhotoCatalog(gallery_config)
    catalog.ensure_seeded()
    return catalog


@pytest.fixture
def store(gallery_config: GalleryConfig, catalog: PhotoCatalog) -> AlbumStore:
    """Return an album store backed by an empty album file."""
    store = AlbumStore(gallery_config, catalog)
    store.ensure_initialized()
    return store


@pytest.fixture
def albums_file(gallery_config: GalleryConfig) -> Path:
    """Return the path of the album file."""
    return gallery_config.albums_path
