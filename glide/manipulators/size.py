"""
尺寸調整

參數：
- w / h: 目標寬高（缺一時依原比例推算）
- fit: contain / max / stretch / crop
- crop: 裁切對齊位置（fit=crop 時使用）

max_image_size 限制輸出的總像素數，超過時等比縮小
"""

import logging
import math
from typing import ClassVar

from PIL import Image, ImageOps

from glide.common import CropPosition, FitMode, parse_choice, parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


logger = logging.getLogger(__name__)

MAX_DIMENSION: int = 16384


class Size(BaseManipulator):
    """尺寸調整階段"""

    stage: ClassVar[ManipulationStage] = ManipulationStage.SIZE

    def __init__(self, max_image_size: int | float | None = None):
        """
        初始化尺寸調整

        Args:
            max_image_size: 最大像素數（寬 x 高），None 表示不限制
        """
        self.max_image_size = max_image_size

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        width = parse_int(params, "w", 1, MAX_DIMENSION)
        height = parse_int(params, "h", 1, MAX_DIMENSION)
        fit = parse_choice(params, "fit", FitMode) or FitMode.CONTAIN
        crop = parse_choice(params, "crop", CropPosition) or CropPosition.CENTER

        width, height = self.resolve_missing_dimensions(image, width, height)
        width, height = self.limit_image_size(width, height)

        if (width, height) == image.core.size:
            return image

        return image.replace(self.run_resize(image.core, fit, width, height, crop))

    @staticmethod
    def resolve_missing_dimensions(
        image: ManagedImage, width: int | None, height: int | None
    ) -> tuple[int, int]:
        """依原始比例補齊缺少的寬或高"""
        if width is not None and height is not None:
            return width, height
        if width is not None:
            return width, max(1, round(width * image.height / image.width))
        if height is not None:
            return max(1, round(height * image.width / image.height)), height
        return image.width, image.height

    def limit_image_size(self, width: int, height: int) -> tuple[int, int]:
        """總像素數超過上限時等比縮小"""
        if self.max_image_size is None or width * height <= self.max_image_size:
            return width, height

        scale = math.sqrt(self.max_image_size / (width * height))
        limited = max(1, int(width * scale)), max(1, int(height * scale))
        logger.debug("Limited %dx%d to %dx%d", width, height, *limited)
        return limited

    @staticmethod
    def run_resize(
        core: Image.Image,
        fit: FitMode,
        width: int,
        height: int,
        crop: CropPosition = CropPosition.CENTER,
    ) -> Image.Image:
        """
        依縮放模式調整尺寸

        Args:
            core: 原始影像
            fit: 縮放模式
            width: 目標寬度
            height: 目標高度
            crop: 裁切對齊位置

        Returns:
            調整後的影像
        """
        if fit == FitMode.STRETCH:
            return core.resize((width, height), Image.Resampling.LANCZOS)

        if fit == FitMode.CROP:
            return ImageOps.fit(
                core, (width, height), Image.Resampling.LANCZOS, centering=crop.offsets
            )

        ratio = min(width / core.width, height / core.height)
        if fit == FitMode.MAX:
            ratio = min(ratio, 1.0)

        target = max(1, round(core.width * ratio)), max(1, round(core.height * ratio))
        if target == core.size:
            return core
        return core.resize(target, Image.Resampling.LANCZOS)

    def __repr__(self) -> str:
        return f"Size(max_image_size={self.max_image_size!r})"
