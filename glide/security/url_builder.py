"""
URL 產生器

組合影像網址，設定簽章金鑰時自動附加 s 參數
"""

from collections.abc import Mapping

from .sign_key import SIGNATURE_PARAM, SignKey, build_query


class UrlBuilder:
    """影像 URL 產生器"""

    def __init__(self, base_url: str = "", sign_key: SignKey | None = None):
        """
        初始化 URL 產生器

        Args:
            base_url: 基底網址（例如 https://img.example.com/img）
            sign_key: 簽章金鑰，None 表示不簽章
        """
        self.base_url = base_url.rstrip("/")
        self.sign_key = sign_key

    def get_url(self, path: str, params: Mapping[str, object] | None = None) -> str:
        """
        產生影像網址

        Args:
            path: 影像路徑
            params: 處理參數

        Returns:
            完整網址
        """
        params = {k: v for k, v in (params or {}).items() if k != SIGNATURE_PARAM}
        query = build_query(params)

        if self.sign_key is not None:
            # 簽章為十六進位字串，不需 URL 編碼
            signature = f"{SIGNATURE_PARAM}={self.sign_key.sign(path, params)}"
            query = f"{query}&{signature}" if query else signature

        url = f"{self.base_url}/{path.lstrip('/')}"
        return f"{url}?{query}" if query else url
