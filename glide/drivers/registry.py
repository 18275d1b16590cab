"""
驅動註冊表

以裝飾器註冊驅動類別，並依識別名稱建立實例（工廠模式）
"""

import importlib
import logging
from collections.abc import Callable
from typing import ClassVar, TypeVar

from glide.core.exceptions import DriverNotSupportedError
from glide.core.interfaces import DriverProtocol
from glide.data_model import DriverInfo


logger = logging.getLogger(__name__)

DriverT = TypeVar("DriverT", bound=type)


class DriverRegistry:
    """
    驅動註冊表

    內建驅動採延遲載入，第一次查詢時才導入對應模組
    """

    _drivers: ClassVar[dict[str, type]] = {}

    BUILTIN_MODULES: ClassVar[tuple[str, ...]] = (
        "glide.drivers.gd",
        "glide.drivers.opencv",
    )

    @classmethod
    def register(cls, name: str) -> Callable[[DriverT], DriverT]:
        """
        註冊驅動類別

        Args:
            name: 驅動識別名稱

        Returns:
            類別裝飾器
        """

        def decorator(driver_cls: DriverT) -> DriverT:
            if name in cls._drivers and cls._drivers[name] is not driver_cls:
                raise ValueError(f"Driver {name!r} is already registered")
            cls._drivers[name] = driver_cls
            return driver_cls

        return decorator

    @classmethod
    def _load_builtins(cls) -> None:
        for module in cls.BUILTIN_MODULES:
            importlib.import_module(module)

    @classmethod
    def has_driver(cls, name: object) -> bool:
        """檢查驅動是否已註冊"""
        cls._load_builtins()
        return isinstance(name, str) and name in cls._drivers

    @classmethod
    def create(cls, name: object) -> DriverProtocol:
        """
        建立驅動實例

        Args:
            name: 驅動識別名稱

        Returns:
            驅動實例

        Raises:
            DriverNotSupportedError: 名稱未註冊時
        """
        if not cls.has_driver(name):
            raise DriverNotSupportedError(name)

        driver: DriverProtocol = cls._drivers[name]()  # type: ignore[index]
        logger.debug("Created driver: %s", name)
        return driver

    @classmethod
    def list_drivers(cls) -> list[DriverInfo]:
        """列出所有已註冊的驅動"""
        cls._load_builtins()
        return [
            DriverInfo(
                name=name,
                description=getattr(driver_cls, "description", ""),
                output_formats=tuple(getattr(driver_cls, "output_formats", ())),
            )
            for name, driver_cls in sorted(cls._drivers.items())
        ]
