"""
區域裁切

rect=width,height,x,y；超出影像的部分會被截斷
"""

from typing import ClassVar

from glide.common import get_param
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


class Rectangle(BaseManipulator):
    """區域裁切階段"""

    stage: ClassVar[ManipulationStage] = ManipulationStage.RECTANGLE

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        box = self.resolve_box(image, get_param(params, "rect"))
        if box is None:
            return image
        return image.replace(image.core.crop(box))

    @staticmethod
    def resolve_box(
        image: ManagedImage, value: str | None
    ) -> tuple[int, int, int, int] | None:
        """
        解析裁切範圍

        Args:
            image: 目前的影像
            value: rect 參數值

        Returns:
            Pillow crop 所需的 (left, upper, right, lower)，無效時為 None
        """
        if value is None:
            return None

        parts = value.split(",")
        if len(parts) != 4:  # noqa: PLR2004
            return None

        try:
            width, height, x, y = (int(part) for part in parts)
        except ValueError:
            return None

        if width <= 0 or height <= 0 or x < 0 or y < 0:
            return None
        if x >= image.width or y >= image.height:
            return None

        return x, y, min(x + width, image.width), min(y + height, image.height)
