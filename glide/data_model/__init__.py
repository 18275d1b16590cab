"""
資料模型模組

提供設定解析後的核心資料結構，使用 Pydantic 進行驗證
"""

from .core import (
    DEFAULT_DRIVER,
    DriverInfo,
    LocalStoreSpec,
    ManipulationStage,
    StoreSpec,
    SuppliedStoreSpec,
    parse_max_image_size,
    parse_sign_key,
    parse_store_spec,
)

__all__ = [
    "DEFAULT_DRIVER",
    "DriverInfo",
    "LocalStoreSpec",
    "ManipulationStage",
    "StoreSpec",
    "SuppliedStoreSpec",
    "parse_max_image_size",
    "parse_sign_key",
    "parse_store_spec",
]
