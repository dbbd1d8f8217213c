"""Conversion settings."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ConversionConfig:
    """Configuration for a Markdown to Bloom conversion."""

    validate_images: bool = True
    base_path: Path | None = None  # directory images are resolved against
