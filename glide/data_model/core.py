"""
核心資料模型

使用 Pydantic 將設定值在邊界處解析為明確型別，後續流程不再重複檢查

型別不符的設定一律拒絕而非強制轉型：sign_key 只接受字串或 SecretStr，數值等其他型別為設定錯誤
"""

import math
import os
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from glide.core.exceptions import ConfigurationError
from glide.core.interfaces import FilesystemProtocol


# 預設影像驅動
DEFAULT_DRIVER: str = "gd"


class ManipulationStage(StrEnum):
    """
    影像處理階段

    成員順序即為處理管線的固定執行順序：
    方向校正必須早於裁切，裁切早於縮放，尺寸限制早於像素濾鏡，輸出編碼永遠最後
    """

    ORIENTATION = "orientation"
    RECTANGLE = "rectangle"
    SIZE = "size"
    BRIGHTNESS = "brightness"
    CONTRAST = "contrast"
    GAMMA = "gamma"
    SHARPEN = "sharpen"
    FILTER = "filter"
    BLUR = "blur"
    PIXELATE = "pixelate"
    OUTPUT = "output"


class LocalStoreSpec(BaseModel):
    """
    本機檔案系統儲存設定

    Attributes:
        root: 根目錄路徑
    """

    model_config = ConfigDict(frozen=True)

    root: Path


class SuppliedStoreSpec(BaseModel):
    """
    由呼叫端提供的既有儲存物件

    Attributes:
        handle: 實作 FilesystemProtocol 的物件（不會被包裝或複製）
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    handle: Any


StoreSpec = LocalStoreSpec | SuppliedStoreSpec


class DriverInfo(BaseModel):
    """
    驅動資訊

    Attributes:
        name: 驅動識別名稱
        description: 驅動描述
        output_formats: 可輸出的格式
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    output_formats: tuple[str, ...] = Field(default_factory=tuple)


def parse_store_spec(value: object, field: str) -> StoreSpec:
    """
    解析 source / cache 設定值

    Args:
        value: 設定值（路徑字串或儲存物件）
        field: 設定鍵名，用於錯誤訊息

    Returns:
        LocalStoreSpec 或 SuppliedStoreSpec

    Raises:
        ConfigurationError: 值不存在、為空字串或型別不符時
    """
    if isinstance(value, str | os.PathLike):
        path = os.fspath(value)
        if isinstance(path, str) and path.strip():
            return LocalStoreSpec(root=Path(path))
        raise ConfigurationError(field)

    # 類別本身也具備協定方法，須為實例
    if isinstance(value, FilesystemProtocol) and not isinstance(value, type):
        return SuppliedStoreSpec(handle=value)

    raise ConfigurationError(field)


def parse_max_image_size(value: object) -> int | float | None:
    """
    解析最大像素數限制

    Returns:
        正數上限，未設定時為 None（不限制）
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigurationError("max_image_size")
    if value <= 0 or (isinstance(value, float) and not math.isfinite(value)):
        raise ConfigurationError("max_image_size")
    return value


def parse_sign_key(value: object) -> SecretStr | None:
    """
    解析簽章金鑰

    None 與空字串皆視為未設定；其他型別不會以 str() 轉換

    Raises:
        ConfigurationError: 值不是字串或 SecretStr 時
    """
    if value is None:
        return None
    if isinstance(value, SecretStr):
        return value if value.get_secret_value() else None
    if isinstance(value, str):
        return SecretStr(value) if value else None
    raise ConfigurationError("sign_key")
