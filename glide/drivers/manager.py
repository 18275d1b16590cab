"""
影像管理器

依驅動識別名稱取得驅動，負責將原始位元組轉為 ManagedImage
"""

import logging

from glide.core.interfaces import DriverProtocol
from glide.data_model import DEFAULT_DRIVER

from .image import ManagedImage, sniff_format
from .registry import DriverRegistry


logger = logging.getLogger(__name__)


class ImageManager:
    """影像管理器"""

    def __init__(self, driver: object = DEFAULT_DRIVER):
        """
        初始化影像管理器

        Args:
            driver: 驅動識別名稱（"gd" 或 "opencv"）

        Raises:
            DriverNotSupportedError: 驅動未註冊時
        """
        self._driver = DriverRegistry.create(driver)
        self._driver_name: str = self._driver.name

    @property
    def driver(self) -> DriverProtocol:
        return self._driver

    @property
    def driver_name(self) -> str:
        return self._driver_name

    def make(self, data: bytes) -> ManagedImage:
        """
        解碼影像

        Args:
            data: 原始位元組

        Returns:
            影像狀態

        Raises:
            ImageDecodeError: 無法解碼時
        """
        core = self._driver.decode(data)
        image = ManagedImage(core=core, driver=self._driver, source_format=sniff_format(data))
        logger.debug(
            "Decoded %s image (%dx%d) with %s",
            image.source_format or "unknown",
            image.width,
            image.height,
            self._driver_name,
        )
        return image

    def __repr__(self) -> str:
        return f"ImageManager(driver={self._driver_name!r})"
