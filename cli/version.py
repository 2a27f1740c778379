"""
cli/version.py - 새 릴리스 확인

GitHub 최신 릴리스 정보를 조회하여 현재 버전과 비교합니다.

Usage:
    from cli.version import check_for_new_release

    ok, message = check_for_new_release("2.1.0", "lambda-cleanup/2.1.0")
"""

from __future__ import annotations

import logging
from typing import Any

import requests
import semver

from core.exceptions import ReleaseCheckError

logger = logging.getLogger(__name__)

RELEASE_URL = "https://api.github.com/repos/karl-cardenas-coding/go-lambda-cleanup/releases/latest"
REQUEST_TIMEOUT = 10  # 초


def _parse_version(value: str) -> semver.Version:
    try:
        return semver.Version.parse(value.strip().removeprefix("v"))
    except (TypeError, ValueError) as e:
        raise ReleaseCheckError(f"error comparing versions: {value!r}", e) from e


def check_for_new_release(
    current_version: str,
    user_agent: str,
    session: Any | None = None,
) -> tuple[bool, str]:
    """최신 릴리스와 현재 버전 비교

    Args:
        current_version: 현재 버전 (예: "2.1.0")
        user_agent: User-Agent 헤더 값
        session: requests.Session 등 get()을 제공하는 객체 (None이면 requests 모듈)

    Returns:
        (확인 성공 여부, 사용자 메시지)

    Raises:
        ReleaseCheckError: 네트워크 오류, 응답 디코딩 실패, 버전 파싱 실패
    """
    http = session or requests

    logger.info("Checking for new releases")

    try:
        response = http.get(
            RELEASE_URL,
            headers={
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": user_agent,
            },
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        release: dict[str, Any] = response.json()
    except requests.RequestException as e:
        logger.debug(f"릴리스 정보 조회 실패: {e}")
        raise ReleaseCheckError("unable to check for new releases", e) from e
    except ValueError as e:
        logger.debug(f"릴리스 응답 디코딩 실패: {e}")
        raise ReleaseCheckError("unable to decode the release response", e) from e

    tag_name = str(release.get("tag_name") or "")
    html_url = str(release.get("html_url") or "")
    if not tag_name:
        raise ReleaseCheckError("release response did not contain a tag_name")

    latest = _parse_version(tag_name)
    current = _parse_version(current_version)

    result = current.compare(latest)
    if result < 0:
        return True, f"There is a new release available: {tag_name} \n Download it here - {html_url}"
    if result == 0:
        return True, "No new version available"
    return True, "You are running a pre-release version"
