"""
方向校正

or=auto 依 EXIF 方向轉正；or=0/90/180/270 逆時針旋轉
"""

from typing import ClassVar

from PIL import ExifTags, ImageOps

from glide.common import get_param
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import ManagedImage


AUTO: str = "auto"


class Orientation(BaseManipulator):
    """方向校正階段"""

    stage: ClassVar[ManipulationStage] = ManipulationStage.ORIENTATION

    ANGLES: ClassVar[tuple[str, ...]] = ("0", "90", "180", "270")

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        orientation = get_param(params, "or") or AUTO

        if orientation == AUTO:
            exif_orientation = image.core.getexif().get(ExifTags.Base.Orientation, 1)
            if exif_orientation == 1:
                return image
            return image.replace(ImageOps.exif_transpose(image.core))

        if orientation not in self.ANGLES or orientation == "0":
            return image

        return image.replace(image.core.rotate(int(orientation), expand=True))
