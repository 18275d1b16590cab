"""
影像處理階段模組

MANIPULATORS 依 ManipulationStage 對應各階段的實作類別
"""

from glide.core.interfaces import BaseManipulator
from glide.data_model import ManipulationStage

from .blur import Blur
from .brightness import Brightness
from .contrast import Contrast
from .filter import Filter
from .gamma import Gamma
from .orientation import Orientation
from .output import Output
from .pixelate import Pixelate
from .rectangle import Rectangle
from .sharpen import Sharpen
from .size import Size


MANIPULATORS: dict[ManipulationStage, type[BaseManipulator]] = {
    ManipulationStage.ORIENTATION: Orientation,
    ManipulationStage.RECTANGLE: Rectangle,
    ManipulationStage.SIZE: Size,
    ManipulationStage.BRIGHTNESS: Brightness,
    ManipulationStage.CONTRAST: Contrast,
    ManipulationStage.GAMMA: Gamma,
    ManipulationStage.SHARPEN: Sharpen,
    ManipulationStage.FILTER: Filter,
    ManipulationStage.BLUR: Blur,
    ManipulationStage.PIXELATE: Pixelate,
    ManipulationStage.OUTPUT: Output,
}


__all__ = [
    "MANIPULATORS",
    "Blur",
    "Brightness",
    "Contrast",
    "Filter",
    "Gamma",
    "Orientation",
    "Output",
    "Pixelate",
    "Rectangle",
    "Sharpen",
    "Size",
]
