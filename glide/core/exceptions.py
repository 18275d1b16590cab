"""
例外定義

所有錯誤皆繼承 GlideError，呼叫端可一次攔截
"""


class GlideError(Exception):
    """Glide 基底例外"""


class ConfigurationError(GlideError, ValueError):
    """
    設定錯誤

    Attributes:
        field: 無效的設定鍵名 (source / cache / driver ...)
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Invalid `{field}` parameter.")


class DriverNotSupportedError(ConfigurationError):
    """不支援的影像驅動"""

    def __init__(self, driver: object) -> None:
        self.driver = driver
        super().__init__("driver", f"Driver {driver!r} is not supported.")


class FilesystemError(GlideError):
    """檔案系統存取錯誤"""


class ImageDecodeError(GlideError):
    """無法解碼的影像資料"""


class ImageNotFoundError(GlideError):
    """來源影像不存在"""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Image not found: {path!r}")


class SignatureError(GlideError):
    """URL 簽章驗證失敗"""
