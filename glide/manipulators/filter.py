"""
色彩濾鏡

filt=greyscale 或 filt=sepia，保留 alpha 通道
"""

from typing import ClassVar

import numpy as np
from PIL import Image, ImageEnhance, ImageOps

from glide.common import FilterName, parse_choice
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


# 棕褐色調（RGB 疊加值）
SEPIA_TINT: tuple[int, int, int] = (97, 69, 31)
SEPIA_BRIGHTNESS: float = 0.85
SEPIA_CONTRAST: float = 1.05


class Filter(BaseManipulator):
    """色彩濾鏡階段"""

    stage: ClassVar[ManipulationStage] = ManipulationStage.FILTER

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        name = parse_choice(params, "filt", FilterName)
        if name is None:
            return image

        alpha = image.core.getchannel("A") if image.core.mode == "RGBA" else None
        grey = ImageOps.grayscale(image.core)

        if name == FilterName.GREYSCALE:
            result = grey.convert("RGB")
        else:
            result = self.run_sepia(grey)

        if alpha is not None:
            result.putalpha(alpha)
        return image.replace(result)

    @staticmethod
    def run_sepia(grey: Image.Image) -> Image.Image:
        """將灰階影像著上棕褐色調"""
        grey = ImageEnhance.Brightness(grey).enhance(SEPIA_BRIGHTNESS)
        grey = ImageEnhance.Contrast(grey).enhance(SEPIA_CONTRAST)

        levels = np.asarray(grey, dtype=np.int16)
        rgb = np.stack([levels] * 3, axis=-1) + np.array(SEPIA_TINT, dtype=np.int16)
        return Image.fromarray(np.clip(rgb, 0, 255).astype(np.uint8), "RGB")
