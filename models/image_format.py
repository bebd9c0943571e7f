"""Supported image formats."""

from enum import Enum


class ImageFormat(str, Enum):
    """Encoded formats the engine can read and write."""

    PNG = 'png'
    JPEG = 'jpeg'
    WEBP = 'webp'
    BMP = 'bmp'
    GIF = 'gif'

    @classmethod
    def parse(cls, value) -> 'ImageFormat':
        """Parse a user tag such as 'PNG', 'jpg' or '.webp'.

        Raises ValueError for anything outside the enumerated set.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Format must be a string, got {type(value).__name__}")
        tag = value.strip().lower().lstrip('.')
        tag = _ALIASES.get(tag, tag)
        try:
            return cls(tag)
        except ValueError:
            raise ValueError(f"Unknown image format: {value!r}") from None

    @property
    def pil_name(self) -> str:
        """Format name as understood by Pillow."""
        return self.value.upper()

    @property
    def supports_alpha(self) -> bool:
        return self in (ImageFormat.PNG, ImageFormat.WEBP, ImageFormat.GIF)

    @property
    def is_lossy(self) -> bool:
        return self in (ImageFormat.JPEG, ImageFormat.WEBP)

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"


_ALIASES = {
    'jpg': 'jpeg',
    'jpe': 'jpeg',
    'jfif': 'jpeg',
}
