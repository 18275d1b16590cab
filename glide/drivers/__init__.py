"""
驅動模組

提供影像編解碼驅動與影像管理器

注意：內建驅動由 DriverRegistry 延遲載入
"""

from .image import ManagedImage, sniff_format
from .manager import ImageManager
from .registry import DriverRegistry


__all__ = ["DriverRegistry", "ImageManager", "ManagedImage", "sniff_format"]
