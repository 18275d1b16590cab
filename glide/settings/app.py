"""
應用程式設定

使用 Pydantic BaseSettings 管理環境變數和配置
"""

from pydantic import PositiveInt, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from glide.data_model import DEFAULT_DRIVER


class AppSettings(BaseSettings):
    """
    應用程式設定

    從環境變數和 .env 文件讀取設定

    Attributes:
        source: 來源影像目錄
        cache: 快取目錄
        driver: 影像驅動名稱 (gd / opencv)
        max_image_size: 最大像素數（寬 x 高）
        sign_key: URL 簽章金鑰
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GLIDE_",
        case_sensitive=False,
        extra="ignore",
    )

    # 儲存設定
    source: str | None = None
    cache: str | None = None

    # 影像處理設定
    driver: str = DEFAULT_DRIVER
    max_image_size: PositiveInt | None = None

    # 安全設定
    sign_key: SecretStr | None = None

    # 日誌設定
    log_level: str = "INFO"

    def to_server_config(self) -> dict[str, object]:
        """
        轉換為 ServerFactory 使用的設定

        Returns:
            未設定的欄位不會出現在結果中
        """
        config = self.model_dump(exclude={"log_level"}, exclude_none=True)
        return dict(config)


# 創建全局設定實例
settings = AppSettings()
