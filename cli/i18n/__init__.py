"""
cli/i18n - CLI 메시지 다국어 처리

기본 언어는 한국어(ko)이고 루트 --lang 옵션으로 영어(en)를 선택합니다.
메시지 키는 "<namespace>.<key>" 형식입니다 (예: "clean.title").

Usage:
    from cli.i18n import set_lang, t

    set_lang("en")
    t("clean.no_functions", region="us-east-1")  # "No Lambda functions to clean up in us-east-1"
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def _normalize(lang: str | None) -> str:
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """현재 언어 설정 (지원하지 않는 코드는 기본 언어로)"""
    _current_lang.set(_normalize(lang))


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 번역

    Args:
        key: "<namespace>.<key>" 형식의 메시지 키
        lang: 언어 지정 (None이면 현재 언어)
        **kwargs: 메시지 템플릿 치환 값

    Returns:
        번역된 문자열. 등록되지 않은 키는 키 그대로,
        치환에 실패하면 치환 전 템플릿을 반환합니다.
    """
    from cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        return key

    text = entry.get(_normalize(lang or get_lang())) or entry[DEFAULT_LANG]
    if not kwargs:
        return text

    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return text


__all__ = ["t", "get_lang", "set_lang", "SUPPORTED_LANGS", "DEFAULT_LANG"]
