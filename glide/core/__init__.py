"""
核心模組 - 定義介面、例外與伺服器組裝後的執行期物件

注意：Api 與 Server 請由子模組直接導入，避免循環依賴
"""

from .exceptions import (
    ConfigurationError,
    DriverNotSupportedError,
    FilesystemError,
    GlideError,
    ImageDecodeError,
    ImageNotFoundError,
    SignatureError,
)
from .interfaces import (
    BaseManipulator,
    DriverProtocol,
    FilesystemProtocol,
    ManipulatorProtocol,
    Params,
)


__all__ = [
    "BaseManipulator",
    "ConfigurationError",
    "DriverNotSupportedError",
    "DriverProtocol",
    "FilesystemError",
    "FilesystemProtocol",
    "GlideError",
    "ImageDecodeError",
    "ImageNotFoundError",
    "ManipulatorProtocol",
    "Params",
    "SignatureError",
]
