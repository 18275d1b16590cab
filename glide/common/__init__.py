"""
共用模組

提供在多個處理階段間共用的參數定義與工具
"""

from .logging_setup import configure_logging
from .params import (
    CropPosition,
    FilterName,
    FitMode,
    get_param,
    parse_choice,
    parse_float,
    parse_int,
)


__all__ = [
    "CropPosition",
    "FilterName",
    "FitMode",
    "configure_logging",
    "get_param",
    "parse_choice",
    "parse_float",
    "parse_int",
]
