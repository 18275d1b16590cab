"""
輸出編碼

fm=jpg/png/gif/webp，q=0..100（預設 90）
驅動不支援指定格式時依序退回來源格式、jpg
"""

import logging
from typing import ClassVar

from glide.common import get_param, parse_int
from glide.core.interfaces import BaseManipulator, Params
from glide.data_model import ManipulationStage
from glide.drivers.image import DEFAULT_FORMAT, DEFAULT_QUALITY, ManagedImage


logger = logging.getLogger(__name__)

FORMAT_ALIASES: dict[str, str] = {"jpeg": "jpg"}


class Output(BaseManipulator):
    """輸出編碼階段，永遠位於管線最後"""

    stage: ClassVar[ManipulationStage] = ManipulationStage.OUTPUT

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        fmt = self.resolve_format(image, get_param(params, "fm"))
        quality = parse_int(params, "q", 0, 100)
        if quality is None:
            quality = DEFAULT_QUALITY

        logger.debug("Encoding %s (quality=%d)", fmt, quality)
        return image.encode(fmt, quality)

    @staticmethod
    def resolve_format(image: ManagedImage, requested: str | None) -> str:
        """
        決定輸出格式

        Args:
            image: 目前的影像
            requested: fm 參數值

        Returns:
            驅動可輸出的格式名稱
        """
        supported = image.driver.output_formats

        if requested is not None:
            requested = requested.lower()
            requested = FORMAT_ALIASES.get(requested, requested)
            if requested in supported:
                return requested

        if image.source_format in supported:
            return image.source_format

        return DEFAULT_FORMAT
