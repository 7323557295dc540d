"""Enables 'python -m photo_gallery' execution."""

from photo_gallery.cli import app

if __name__ == "__main__":
    app()
