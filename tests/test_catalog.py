"""Tests for the photo catalog."""

import pytest
from pathlib import Path

from photo_gallery.catalog import SAMPLE_PHOTOS, PhotoCatalog, parse_photo
from photo_gallery.config import GalleryConfig
from photo_gallery.errors import StorageError
from photo_gallery.models import Photo


class TestParsePhoto:
    """Test catalog line parsing."""

    def test_valid_line(self) -> None:
        """Test parsing a well-formed record."""
        assert parse_photo("Sunset.jpg,512\n") == Photo("Sunset.jpg", 512)

    def test_leading_integer_is_read(self) -> None:
        """Test that trailing garbage after the size is ignored."""
        assert parse_photo("a.jpg,12kb\n") == Photo("a.jpg", 12)

    @pytest.mark.parametrize(
        "line",
        ["\n", "no-comma\n", ",512\n", "a.jpg,\n", "a.jpg,big\n", "a.jpg,-5\n"],
    )
    def test_malformed_lines(self, line: str) -> None:
        """Test that malformed records are rejected."""
        assert parse_photo(line) is None


class TestEnsureSeeded:
    """Test catalog seeding."""

    def test_seeds_missing_file(self, gallery_config: GalleryConfig) -> None:
        """Test that a missing catalog is created with sample photos."""
        catalog = PhotoCatalog(gallery_config)

        assert catalog.ensure_seeded() is True
        assert gallery_config.catalog_path.read_text().splitlines() == [
            "Sunset.jpg,512",
            "Mountains.png,1024",
            "Beach.bmp,750",
            "Cityscape.jpg,640",
            "Forest.png,860",
        ]

    def test_existing_file_untouched(self, gallery_config: GalleryConfig) -> None:
        """Test that seeding is a no-op when the catalog exists."""
        gallery_config.catalog_path.write_text("Mine.jpg,1\n")
        catalog = PhotoCatalog(gallery_config)

        assert catalog.ensure_seeded() is False
        assert gallery_config.catalog_path.read_text() == "Mine.jpg,1\n"

    def test_unwritable_location(self, tmp_path: Path) -> None:
        """Test that failing to create the catalog raises StorageError."""
        config = GalleryConfig.from_directory(tmp_path / "missing")

        with pytest.raises(StorageError):
            PhotoCatalog(config).ensure_seeded()


class TestLookup:
    """Test photo listing and size lookup."""

    def test_list_all_seeded(self, catalog: PhotoCatalog) -> None:
        """Test listing the sample photos in file order."""
        assert catalog.list_all() == list(SAMPLE_PHOTOS)

    def test_list_all_skips_malformed(self, gallery_config: GalleryConfig) -> None:
        """Test that malformed lines are skipped silently."""
        gallery_config.catalog_path.write_text("a.jpg,1\ngarbage\n\nb.png,2\n")

        photos = PhotoCatalog(gallery_config).list_all()

        assert [p.name for p in photos] == ["a.jpg", "b.png"]

    def test_size_of_known_photo(self, catalog: PhotoCatalog) -> None:
        """Test size lookup of a catalog photo."""
        assert catalog.size_of("Mountains.png") == 1024

    def test_size_of_unknown_photo(self, catalog: PhotoCatalog) -> None:
        """Test that an unknown photo has no size."""
        assert catalog.size_of("Nope.jpg") is None

    def test_zero_size_distinct_from_missing(
        self, gallery_config: GalleryConfig
    ) -> None:
        """Test that a 0 KB photo is found."""
        gallery_config.catalog_path.write_text("blank.png,0\n")
        catalog = PhotoCatalog(gallery_config)

        assert catalog.size_of("blank.png") == 0
        assert "blank.png" in catalog

    def test_first_record_wins(self, gallery_config: GalleryConfig) -> None:
        """Test that duplicate names resolve to the first record."""
        gallery_config.catalog_path.write_text("a.jpg,1\na.jpg,2\n")
        catalog = PhotoCatalog(gallery_config)

        assert catalog.size_of("a.jpg") == 1
        assert catalog.sizes() == {"a.jpg": 1}

    def test_invalid_utf8_catalog(self, gallery_config: GalleryConfig) -> None:
        """Test that an undecodable catalog raises StorageError."""
        gallery_config.catalog_path.write_bytes(b"Caf\xe9.jpg,5\n")

        with pytest.raises(StorageError, match="UTF-8"):
            PhotoCatalog(gallery_config).list_all()

    def test_missing_catalog_raises(self, gallery_config: GalleryConfig) -> None:
        """Test that reading a missing catalog raises StorageError."""
        with pytest.raises(StorageError):
            PhotoCatalog(gallery_config).list_all()
