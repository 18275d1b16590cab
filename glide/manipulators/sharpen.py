"""銳利化：sharp=0..100"""

from typing import ClassVar

from PIL import ImageFilter

from glide.common import parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


# UnsharpMask 強度倍率（sharp=100 -> 300%）
PERCENT_SCALE: int = 3


class Sharpen(BaseManipulator):
    stage: ClassVar[ManipulationStage] = ManipulationStage.SHARPEN

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        amount = parse_int(params, "sharp", 0, 100)
        if not amount:
            return image
        unsharp = ImageFilter.UnsharpMask(radius=2, percent=amount * PERCENT_SCALE, threshold=0)
        return image.replace(image.core.filter(unsharp))
