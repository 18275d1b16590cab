"""亮度調整：bri=-100..100"""

from typing import ClassVar

from PIL import ImageEnhance

from glide.common import parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


class Brightness(BaseManipulator):
    stage: ClassVar[ManipulationStage] = ManipulationStage.BRIGHTNESS

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        brightness = parse_int(params, "bri", -100, 100)
        if not brightness:
            return image
        enhancer = ImageEnhance.Brightness(image.core)
        return image.replace(enhancer.enhance(1 + brightness / 100))
