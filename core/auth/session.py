"""
core/auth/session.py - boto3 Session 생성 및 자격 증명 확인

AWS 호출 전에 세션을 만들고 자격 증명을 조회할 수 있는지, 만료되지 않았는지 확인합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.credentials import RefreshableCredentials
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from core.exceptions import AuthError

if TYPE_CHECKING:
    from core.config import CleanupConfig

logger = logging.getLogger(__name__)


def get_session(profile: str | None, region: str) -> boto3.Session:
    """프로파일/리전으로 boto3 Session 생성

    Args:
        profile: AWS 프로파일 이름 (None 또는 빈 문자열이면 기본 자격 증명 체인)
        region: AWS 리전

    Returns:
        boto3.Session

    Raises:
        AuthError: 프로파일을 찾을 수 없을 때
    """
    try:
        return boto3.Session(profile_name=profile or None, region_name=region)
    except ProfileNotFound as e:
        raise AuthError("ERROR ESTABLISHING AWS SESSION", profile=profile, cause=e) from e


def verify_credentials(session: boto3.Session, profile: str | None = None) -> None:
    """세션의 자격 증명 조회 가능 여부와 만료 여부 확인

    Args:
        session: boto3 Session
        profile: 에러 메시지용 프로파일 이름

    Raises:
        AuthError: 자격 증명이 없거나, 조회에 실패했거나, 만료되었을 때
    """
    try:
        credentials = session.get_credentials()
        if credentials is None:
            raise AuthError("ERROR RETRIEVING AWS CREDENTIALS", profile=profile)
        frozen = credentials.get_frozen_credentials()
    except (BotoCoreError, ClientError) as e:
        raise AuthError("ERROR RETRIEVING AWS CREDENTIALS", profile=profile, cause=e) from e

    if not frozen.access_key:
        raise AuthError("ERROR RETRIEVING AWS CREDENTIALS", profile=profile)

    # refresh_in=0: 만료 시각이 이미 지났는지만 확인
    if isinstance(credentials, RefreshableCredentials) and credentials.refresh_needed(0):
        raise AuthError("AWS CREDENTIALS EXPIRED", profile=profile)

    logger.debug(f"자격 증명 확인 완료 (method={getattr(credentials, 'method', 'unknown')})")


def create_lambda_client(config: CleanupConfig) -> Any:
    """clean 명령용 Lambda client 생성

    세션 생성과 자격 증명 확인을 거친 뒤, 병렬 삭제 워커 수에 맞춘
    연결 풀과 User-Agent가 설정된 client를 반환합니다.

    Args:
        config: resolve()가 완료된 CleanupConfig

    Returns:
        boto3 Lambda client
    """
    from core.config import get_user_agent
    from core.parallel import get_client

    session = get_session(config.profile, config.region)
    verify_credentials(session, config.profile)

    return get_client(
        session,
        "lambda",
        region_name=config.region,
        max_pool_connections=max(config.max_workers, 10),
        user_agent_extra=get_user_agent(),
    )
