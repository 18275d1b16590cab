"""
影像處理 API

依序執行各處理階段，將來源位元組轉為輸出位元組
"""

import logging
from collections.abc import Sequence

from glide.drivers.manager import ImageManager

from .exceptions import GlideError
from .interfaces import ManipulatorProtocol, Params


logger = logging.getLogger(__name__)


class Api:
    """
    影像處理 API

    管線順序在建構時固定，執行期間不再變動
    """

    def __init__(
        self,
        image_manager: ImageManager,
        manipulators: Sequence[ManipulatorProtocol],
    ):
        """
        初始化 API

        Args:
            image_manager: 影像管理器
            manipulators: 依序執行的處理階段

        Raises:
            ValueError: 處理階段為空時
        """
        if not manipulators:
            raise ValueError("At least one manipulator is required")

        self._image_manager = image_manager
        self._manipulators: tuple[ManipulatorProtocol, ...] = tuple(manipulators)

    @property
    def image_manager(self) -> ImageManager:
        return self._image_manager

    @property
    def manipulators(self) -> tuple[ManipulatorProtocol, ...]:
        return self._manipulators

    def run(self, source: bytes, params: Params) -> bytes:
        """
        處理影像

        Args:
            source: 來源影像位元組
            params: 請求參數

        Returns:
            編碼後的影像位元組
        """
        image = self._image_manager.make(source)

        for manipulator in self._manipulators:
            image = manipulator.run(image, params)

        if image.encoded is None:
            # 管線未包含輸出階段時以預設格式編碼
            from glide.manipulators.output import Output  # noqa: PLC0415

            image = Output().run(image, params)

        if image.encoded is None:
            raise GlideError("Pipeline produced no encoded output")

        logger.debug("Encoded %s: %d bytes", image.output_format, len(image.encoded))
        return image.encoded
