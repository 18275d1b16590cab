"""模糊：blur=0..100"""

from typing import ClassVar

from PIL import ImageFilter

from glide.common import parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


# 高斯模糊半徑倍率（blur=100 -> 25px）
RADIUS_SCALE: float = 0.25


class Blur(BaseManipulator):
    stage: ClassVar[ManipulationStage] = ManipulationStage.BLUR

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        amount = parse_int(params, "blur", 0, 100)
        if not amount:
            return image
        return image.replace(image.core.filter(ImageFilter.GaussianBlur(amount * RADIUS_SCALE)))
