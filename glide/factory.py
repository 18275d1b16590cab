"""
伺服器工廠

依設定的型態（路徑字串或既有物件）選擇並建立協作元件，組裝為 Server
工廠本身不處理影像、快取或協定，只負責依賴組裝
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from glide.core.api import Api
from glide.core.interfaces import BaseManipulator, FilesystemProtocol
from glide.core.server import Server
from glide.data_model import (
    DEFAULT_DRIVER,
    LocalStoreSpec,
    ManipulationStage,
    parse_max_image_size,
    parse_sign_key,
    parse_store_spec,
)
from glide.drivers import ImageManager
from glide.filesystem import LocalFilesystem
from glide.manipulators import MANIPULATORS, Size
from glide.security import SignKey


if TYPE_CHECKING:
    from glide.settings import AppSettings


logger = logging.getLogger(__name__)


class ServerFactory:
    """
    伺服器工廠

    每次呼叫 build_server() 皆獨立組裝；工廠不持有可變的共享狀態
    """

    def __init__(self, config: Mapping[str, object] | None = None):
        """
        初始化工廠

        Args:
            config: 設定（source, cache, driver, max_image_size, sign_key）
        """
        self._config: Mapping[str, object] = MappingProxyType(dict(config or {}))

    @property
    def config(self) -> Mapping[str, object]:
        """唯讀設定"""
        return self._config

    @classmethod
    def from_settings(cls, app_settings: "AppSettings") -> "ServerFactory":
        """由 AppSettings 建立工廠"""
        return cls(app_settings.to_server_config())

    def build_server(self) -> Server:
        """
        組裝伺服器

        所有設定錯誤皆於建立 Server 之前拋出

        Returns:
            組裝完成的伺服器

        Raises:
            ConfigurationError: 任一設定無效時
        """
        server = Server(
            source=self.resolve_source(),
            cache=self.resolve_cache(),
            api=self.resolve_api(),
            sign_key=self.resolve_sign_key(),
        )
        logger.debug("Built %r", server)
        return server

    def resolve_source(self) -> FilesystemProtocol:
        """
        取得來源儲存

        Raises:
            ConfigurationError: source 不是路徑也不是儲存物件時
        """
        return self._resolve_store("source")

    def resolve_cache(self) -> FilesystemProtocol:
        """
        取得快取儲存

        Raises:
            ConfigurationError: cache 不是路徑也不是儲存物件時
        """
        return self._resolve_store("cache")

    def _resolve_store(self, field: str) -> FilesystemProtocol:
        spec = parse_store_spec(self._config.get(field), field)

        if isinstance(spec, LocalStoreSpec):
            logger.debug("Using local %s at %s", field, spec.root)
            return LocalFilesystem(spec.root)

        logger.debug("Using supplied %s: %r", field, spec.handle)
        handle: FilesystemProtocol = spec.handle
        return handle

    def resolve_api(self) -> Api:
        """取得影像處理 API"""
        return Api(self.resolve_image_manager(), self.resolve_manipulators())

    def resolve_image_manager(self) -> ImageManager:
        """
        取得影像管理器

        Raises:
            DriverNotSupportedError: driver 未註冊時
        """
        driver = self._config.get("driver")
        return ImageManager(driver=DEFAULT_DRIVER if driver is None else driver)

    def resolve_manipulators(self) -> list[BaseManipulator]:
        """
        取得處理階段

        順序固定為 ManipulationStage 的成員順序，最後一個永遠是輸出編碼

        Raises:
            ConfigurationError: max_image_size 無效時
        """
        max_image_size = parse_max_image_size(self._config.get("max_image_size"))

        manipulators: list[BaseManipulator] = []
        for stage in ManipulationStage:
            if stage == ManipulationStage.SIZE:
                manipulators.append(Size(max_image_size))
            else:
                manipulators.append(MANIPULATORS[stage]())
        return manipulators

    def resolve_sign_key(self) -> SignKey | None:
        """
        取得簽章金鑰

        Returns:
            未設定或為空字串時回傳 None（停用簽章驗證）
        """
        key = parse_sign_key(self._config.get("sign_key"))
        return SignKey(key) if key is not None else None

    @classmethod
    def create(cls, config: Mapping[str, object] | None = None) -> Server:
        """建立工廠並組裝伺服器"""
        return cls(config).build_server()


def create_server(config: Mapping[str, object] | None = None) -> Server:
    """
    依設定建立伺服器

    Args:
        config: 設定

    Returns:
        組裝完成的伺服器
    """
    return ServerFactory.create(config)
