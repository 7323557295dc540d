"""Exceptions raised by the photo gallery storage layer."""


class GalleryError(Exception):
    """Base exception for photo gallery errors."""

    pass


class StorageError(GalleryError):
    """Exception raised when a storage file cannot be read or written."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot access {path}: {reason}")


class EmptyNameError(GalleryError):
    """Exception raised when an album name is empty."""

    def __init__(self) -> None:
        super().__init__("Album name cannot be empty.")


class AlbumExistsError(GalleryError):
    """Exception raised when creating an album whose name is taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"An album with name '{name}' already exists.")


class AlbumNotFoundError(GalleryError):
    """Exception raised when no album record matches the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Album '{name}' not found.")


class EmptyPhotoNameError(GalleryError):
    """Exception raised when a photo name is empty."""

    def __init__(self) -> None:
        super().__init__("Photo name cannot be empty.")


class PhotoNotInCatalogError(GalleryError):
    """Exception raised when adding a photo the catalog does not know."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Photo '{name}' not found in available photos.")


class EmptyNewNameError(GalleryError):
    """Exception raised when renaming an album to an empty name."""

    def __init__(self) -> None:
        super().__init__("New name cannot be empty. Keeping album unchanged.")


class InvalidNameError(GalleryError):
    """Exception raised when a name contains a character the file format reserves."""

    def __init__(self, name: str, character: str) -> None:
        self.name = name
        self.character = character
        super().__init__(f"Name {name!r} cannot contain {character!r}.")
