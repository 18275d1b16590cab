"""
Gamma 校正

gam=0.1..9.99，僅作用於色彩通道，alpha 不變
"""

from typing import ClassVar

import numpy as np

from glide.common import parse_float
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


class Gamma(BaseManipulator):
    """Gamma 校正階段"""

    stage: ClassVar[ManipulationStage] = ManipulationStage.GAMMA

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        gamma = parse_float(params, "gam", 0.1, 9.99)
        if gamma is None or gamma == 1.0:
            return image

        table = self.build_table(gamma) * 3
        if image.core.mode == "RGBA":
            table += list(range(256))

        return image.replace(image.core.point(table))

    @staticmethod
    def build_table(gamma: float) -> list[int]:
        """建立 256 階查找表：255 * (v / 255) ^ (1 / gamma)"""
        levels = np.arange(256, dtype=np.float64) / 255.0
        corrected = np.clip(np.rint(255.0 * levels ** (1.0 / gamma)), 0, 255)
        return corrected.astype(np.uint8).tolist()
