"""
安全模組

提供 URL 簽章與簽章網址產生
"""

from .sign_key import SIGNATURE_PARAM, SignKey, build_query
from .url_builder import UrlBuilder


__all__ = ["SIGNATURE_PARAM", "SignKey", "UrlBuilder", "build_query"]
