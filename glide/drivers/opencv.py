"""
OpenCV 驅動

以 cv2.imdecode / cv2.imencode 處理編解碼，管線內仍以 Pillow 影像傳遞
注意：IMREAD_UNCHANGED 不套用 EXIF 方向
"""

import logging
from typing import ClassVar

import cv2
import numpy as np
from PIL import Image

from glide.core.exceptions import GlideError, ImageDecodeError

from .image import normalize_mode
from .registry import DriverRegistry


logger = logging.getLogger(__name__)

# 16-bit -> 8-bit 換算
UINT16_SCALE: int = 257


@DriverRegistry.register("opencv")
class OpenCVDriver:
    """以 OpenCV 進行解碼與編碼"""

    name: ClassVar[str] = "opencv"
    description: ClassVar[str] = "OpenCV - 替代驅動，支援 jpg/png/webp"
    output_formats: ClassVar[tuple[str, ...]] = ("jpg", "png", "webp")

    def decode(self, data: bytes) -> Image.Image:
        if not data:
            raise ImageDecodeError("Empty image data")

        mat = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
        if mat is None:
            raise ImageDecodeError("Unable to decode image with OpenCV")

        if mat.dtype == np.uint16:
            mat = (mat // UINT16_SCALE).astype(np.uint8)

        if mat.ndim == 2:  # noqa: PLR2004
            rgb = cv2.cvtColor(mat, cv2.COLOR_GRAY2RGB)
        elif mat.shape[2] == 4:  # noqa: PLR2004
            rgb = cv2.cvtColor(mat, cv2.COLOR_BGRA2RGBA)
        else:
            rgb = cv2.cvtColor(mat, cv2.COLOR_BGR2RGB)

        return normalize_mode(Image.fromarray(rgb))

    def encode(self, image: Image.Image, fmt: str, quality: int) -> bytes:
        if fmt == "jpg":
            mat = cv2.cvtColor(np.array(image.convert("RGB")), cv2.COLOR_RGB2BGR)
            params = [cv2.IMWRITE_JPEG_QUALITY, quality]
        else:
            if image.mode == "RGBA":
                mat = cv2.cvtColor(np.array(image), cv2.COLOR_RGBA2BGRA)
            else:
                mat = cv2.cvtColor(np.array(image.convert("RGB")), cv2.COLOR_RGB2BGR)
            params = [cv2.IMWRITE_WEBP_QUALITY, max(1, quality)] if fmt == "webp" else []

        ok, buffer = cv2.imencode(f".{fmt}", mat, params)
        if not ok:
            raise GlideError(f"Unable to encode image as {fmt!r} with OpenCV")

        logger.debug("Encoded %s (%d bytes)", fmt, buffer.size)
        return buffer.tobytes()
