"""對比調整：con=-100..100"""

from typing import ClassVar

from PIL import ImageEnhance

from glide.common import parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


class Contrast(BaseManipulator):
    stage: ClassVar[ManipulationStage] = ManipulationStage.CONTRAST

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        contrast = parse_int(params, "con", -100, 100)
        if not contrast:
            return image
        enhancer = ImageEnhance.Contrast(image.core)
        return image.replace(enhancer.enhance(1 + contrast / 100))
