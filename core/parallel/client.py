"""
core/parallel/client.py - boto3 client 생성 헬퍼

병렬 삭제에 맞춘 botocore 전송 설정(재시도, 타임아웃, 연결 풀, User-Agent)으로
boto3 client를 만듭니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from botocore.config import Config

if TYPE_CHECKING:
    import boto3

RETRIES = {"max_attempts": 3, "mode": "standard"}
CONNECT_TIMEOUT = 10  # 초
READ_TIMEOUT = 60  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 25  # 기본 워커 수(20)보다 크게


def client_config(
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    user_agent_extra: str | None = None,
    base: Config | None = None,
) -> Config:
    """전송 설정 Config 생성

    Args:
        max_pool_connections: HTTP 연결 풀 크기
        user_agent_extra: User-Agent에 덧붙일 값 (예: "lambda-cleanup/2.1.0")
        base: 우선 적용할 Config (지정한 값이 기본값을 덮어씀)
    """
    config = Config(
        retries=cast(Any, dict(RETRIES)),
        connect_timeout=CONNECT_TIMEOUT,
        read_timeout=READ_TIMEOUT,
        max_pool_connections=max_pool_connections,
        user_agent_extra=user_agent_extra,
    )
    return config.merge(base) if base is not None else config


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    user_agent_extra: str | None = None,
    config: Config | None = None,
) -> Any:
    """client_config()가 적용된 boto3 client

    region_name이 None이면 세션 기본 리전을 사용합니다.
    """
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=client_config(max_pool_connections, user_agent_extra, base=config),
    )
