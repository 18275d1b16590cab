"""
URL 簽章

簽章為 md5("{key}:{path}?{query}")，query 依鍵名排序且不含 s 參數
"""

import hashlib
import hmac
from collections.abc import Mapping
from urllib.parse import urlencode

from pydantic import SecretStr

from glide.core.exceptions import SignatureError


# 簽章參數名稱
SIGNATURE_PARAM: str = "s"


def build_query(params: Mapping[str, object]) -> str:
    """
    將參數編碼為排序後的 query 字串

    Args:
        params: 請求參數（s 參數會被排除）

    Returns:
        URL 編碼後的 query 字串
    """
    items = sorted(
        (str(key), str(value))
        for key, value in params.items()
        if key != SIGNATURE_PARAM and value is not None
    )
    return urlencode(items)


class SignKey:
    """
    簽章金鑰

    金鑰以 SecretStr 保存，repr 不會洩漏內容
    """

    def __init__(self, key: str | SecretStr):
        """
        初始化簽章金鑰

        Args:
            key: 金鑰字串
        """
        self._key = key if isinstance(key, SecretStr) else SecretStr(key)

    @property
    def key(self) -> SecretStr:
        return self._key

    def sign(self, path: str, params: Mapping[str, object]) -> str:
        """
        產生簽章

        Args:
            path: 影像路徑
            params: 請求參數

        Returns:
            32 字元的十六進位簽章
        """
        payload = f"{self._key.get_secret_value()}:{path.lstrip('/')}?{build_query(params)}"
        return hashlib.md5(payload.encode("utf-8"), usedforsecurity=False).hexdigest()

    def verify(self, path: str, params: Mapping[str, object], token: str) -> bool:
        """以固定時間比對簽章"""
        return hmac.compare_digest(self.sign(path, params), str(token))

    def validate_request(self, path: str, params: Mapping[str, object]) -> None:
        """
        驗證請求簽章

        Args:
            path: 影像路徑
            params: 請求參數（須包含 s）

        Raises:
            SignatureError: 缺少或簽章不符時
        """
        token = params.get(SIGNATURE_PARAM)
        if not token:
            raise SignatureError("Sign token missing.")
        if not self.verify(path, params, str(token)):
            raise SignatureError("Sign token invalid.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignKey):
            return NotImplemented
        return hmac.compare_digest(
            self._key.get_secret_value(), other._key.get_secret_value()
        )

    def __hash__(self) -> int:
        return hash(self._key.get_secret_value())

    def __repr__(self) -> str:
        return f"SignKey({self._key!r})"
