"""
像素化

pixel=0..1000 為像素區塊邊長；先縮小再以最近鄰放大回原尺寸
"""

from typing import ClassVar

from PIL import Image

from glide.common import parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


class Pixelate(BaseManipulator):
    stage: ClassVar[ManipulationStage] = ManipulationStage.PIXELATE

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        block = parse_int(params, "pixel", 0, 1000)
        if block is None or block <= 1:
            return image

        core = image.core
        small = core.resize(
            (max(1, core.width // block), max(1, core.height // block)),
            Image.Resampling.BOX,
        )
        return image.replace(small.resize(core.size, Image.Resampling.NEAREST))
