"""
core/region/validate.py - 리전 입력 검증

CLI 플래그 또는 환경 변수로 전달된 리전을 내장 리전 목록과 대조합니다.
모든 검증은 AWS 호출 이전에 수행됩니다.
"""

from __future__ import annotations

from core.exceptions import ConfigError, RegionValidationError

from .data import ALL_REGIONS, REGION_NAMES


def validate_region(region: str) -> str:
    """리전 이름 검증

    Args:
        region: 사용자 입력 리전 (대소문자, 앞뒤 공백 무시)

    Returns:
        정식 리전 코드 (소문자)

    Raises:
        RegionValidationError: 목록에 없는 리전
    """
    normalized = region.strip().lower()
    if normalized and normalized in ALL_REGIONS:
        return normalized

    raise RegionValidationError(region)


def resolve_region(flag_value: str | None, env_value: str | None) -> str:
    """플래그 > AWS_DEFAULT_REGION 순서로 리전을 결정하고 검증

    Args:
        flag_value: --region 플래그 값
        env_value: AWS_DEFAULT_REGION 환경 변수 값

    Returns:
        검증된 리전 코드

    Raises:
        ConfigError: 두 값이 모두 비어 있을 때
        RegionValidationError: 지원하지 않는 리전일 때
    """
    if flag_value:
        return validate_region(flag_value)
    if env_value:
        return validate_region(env_value)

    raise ConfigError(
        "region",
        "missing region flag and AWS_DEFAULT_REGION env variable. Please use -r and provide a valid AWS region",
    )


def describe_region(region: str) -> str:
    """로그용 리전 표기 (예: "us-east-1 (US East (N. Virginia))")"""
    name = REGION_NAMES.get(region)
    return f"{region} ({name})" if name else region
