"""
cli/i18n/messages - 메시지 레지스트리

네임스페이스별 모듈의 메시지를 "<namespace>.<key>" 키 하나의 dict로 합칩니다.
"""

from __future__ import annotations

from typing import TypedDict

from .clean import CLEAN_MESSAGES
from .cli_commands import CLI_MESSAGES


class MessageDict(TypedDict):
    ko: str
    en: str


NAMESPACES: dict[str, dict[str, MessageDict]] = {
    "cli": CLI_MESSAGES,
    "clean": CLEAN_MESSAGES,
}

MESSAGES: dict[str, MessageDict] = {
    f"{namespace}.{key}": message for namespace, messages in NAMESPACES.items() for key, message in messages.items()
}

__all__ = ["MESSAGES", "NAMESPACES", "MessageDict"]
