"""
請求參數工具

提供各處理階段共用的參數列舉與解析函數；解析失敗一律回傳 None，由呼叫端決定略過
"""

from enum import StrEnum
from typing import TypeVar

from glide.core.interfaces import Params


E = TypeVar("E", bound=StrEnum)


class FitMode(StrEnum):
    """縮放模式"""

    CONTAIN = "contain"  # 等比縮放至框內（可放大）
    MAX = "max"  # 等比縮放至框內（不放大）
    STRETCH = "stretch"  # 忽略比例，拉伸至指定尺寸
    CROP = "crop"  # 等比填滿後裁切


class CropPosition(StrEnum):
    """裁切對齊位置"""

    TOP_LEFT = "top-left"
    TOP = "top"
    TOP_RIGHT = "top-right"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM = "bottom"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def offsets(self) -> tuple[float, float]:
        """水平與垂直對齊比例 (0.0-1.0)"""
        horizontal = 0.0 if "left" in self.value else 1.0 if "right" in self.value else 0.5
        vertical = 0.0 if "top" in self.value else 1.0 if "bottom" in self.value else 0.5
        return horizontal, vertical


class FilterName(StrEnum):
    """色彩濾鏡"""

    GREYSCALE = "greyscale"
    SEPIA = "sepia"


def get_param(params: Params, name: str) -> str | None:
    """取得參數字串值，空值視為未設定"""
    value = params.get(name)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_int(params: Params, name: str, low: int, high: int) -> int | None:
    """
    解析整數參數

    Args:
        params: 請求參數
        name: 參數名稱
        low: 最小值（含）
        high: 最大值（含）

    Returns:
        範圍內的整數，否則 None
    """
    text = get_param(params, name)
    if text is None:
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    return value if low <= value <= high else None


def parse_float(params: Params, name: str, low: float, high: float) -> float | None:
    """解析浮點數參數，範圍外或格式錯誤時回傳 None"""
    text = get_param(params, name)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if low <= value <= high else None


def parse_choice(params: Params, name: str, choices: type[E]) -> E | None:
    """解析列舉參數，不在選項內時回傳 None"""
    text = get_param(params, name)
    if text is None:
        return None
    try:
        return choices(text.lower())
    except ValueError:
        return None
