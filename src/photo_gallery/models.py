"""Data models for the photo gallery."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Photo:
    """Represents a catalog photo and its size in kilobytes."""

    name: str
    size_kb: int

    def __post_init__(self) -> None:
        """Validate photo data."""
        if not self.name:
            raise ValueError("Photo name cannot be empty")
        if self.size_kb < 0:
            raise ValueError("Photo size cannot be negative")


@dataclass(frozen=True)
class Album:
    """Represents a stored album and its ordered photo names."""

    name: str
    photos: tuple[str, ...] = ()
    total_size_kb: int = 0

    def __post_init__(self) -> None:
        """Validate album data."""
        if not self.name:
            raise ValueError("Album name cannot be empty")
