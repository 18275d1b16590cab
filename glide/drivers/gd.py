"""
Pillow 驅動

預設驅動，識別名稱為 "gd"
"""

import io
from typing import ClassVar

from PIL import Image, UnidentifiedImageError

from glide.core.exceptions import ImageDecodeError

from .image import FORMATS, normalize_mode
from .registry import DriverRegistry


@DriverRegistry.register("gd")
class PillowDriver:
    """以 Pillow 進行解碼與編碼"""

    name: ClassVar[str] = "gd"
    description: ClassVar[str] = "Pillow - 預設驅動，支援 jpg/png/gif/webp"
    output_formats: ClassVar[tuple[str, ...]] = ("jpg", "png", "gif", "webp")

    def decode(self, data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageDecodeError(f"Unable to decode image: {exc}") from exc
        return normalize_mode(image)

    def encode(self, image: Image.Image, fmt: str, quality: int) -> bytes:
        pil_format = FORMATS[fmt][0]
        buffer = io.BytesIO()

        if fmt == "jpg":
            # JPEG 不支援 alpha
            image.convert("RGB").save(buffer, pil_format, quality=quality)
        elif fmt == "webp":
            image.save(buffer, pil_format, quality=quality)
        else:
            image.save(buffer, pil_format)

        return buffer.getvalue()
