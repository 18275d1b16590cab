"""
儲存模組

提供 FilesystemProtocol 的內建實作
"""

from glide.core.interfaces import FilesystemProtocol

from .local import LocalFilesystem
from .memory import MemoryFilesystem


__all__ = ["FilesystemProtocol", "LocalFilesystem", "MemoryFilesystem"]
