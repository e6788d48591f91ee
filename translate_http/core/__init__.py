"""
コアモジュール
"""
from translate_http.core.logging import configure_logging

__all__ = [
    "configure_logging",
]
