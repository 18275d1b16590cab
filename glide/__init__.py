"""
Glide - 影像伺服器組裝

依設定建立包含來源儲存、快取儲存、影像處理管線與簽章金鑰的影像伺服器
"""

from glide.core.api import Api
from glide.core.exceptions import ConfigurationError, GlideError
from glide.core.server import Server
from glide.factory import ServerFactory, create_server


__all__ = [
    "Api",
    "ConfigurationError",
    "GlideError",
    "Server",
    "ServerFactory",
    "create_server",
]

__version__ = "0.1.0"
