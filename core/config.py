"""
core/config.py - 중앙 설정 관리

버전 정보와 clean 명령 실행 설정(CleanupConfig)을 제공합니다.

Usage:
    from core.config import CleanupConfig, get_version

    config = CleanupConfig(region="", retain=3, dry_run=True).resolve()
    print(config.region)  # 플래그가 비어 있으면 AWS_DEFAULT_REGION
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_NAME = "lambda-cleanup"
PROJECT_ROOT = Path(__file__).resolve().parent.parent
VERSION_FILE = PROJECT_ROOT / "version.txt"

# 환경 변수
ENV_REGION = "AWS_DEFAULT_REGION"
ENV_PROFILE = "AWS_PROFILE"

# 기본값
DEFAULT_RETAIN = 1
DEFAULT_MAX_WORKERS = 20
MAX_WORKERS_LIMIT = 100


def get_version() -> str:
    """버전 문자열 반환

    프로젝트 루트의 version.txt를 우선 사용하고, 없으면 설치된 배포판 메타데이터를 사용합니다.
    """
    try:
        version = VERSION_FILE.read_text(encoding="utf-8").strip()
        if version:
            return version
    except OSError:
        pass

    from importlib.metadata import PackageNotFoundError, version as dist_version

    try:
        return dist_version(PROJECT_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def get_user_agent() -> str:
    """AWS API 및 릴리스 확인 요청에 사용하는 User-Agent 값"""
    return f"{PROJECT_NAME}/{get_version()}"


@dataclass
class CleanupConfig:
    """clean 명령 실행 설정

    Attributes:
        region: 대상 AWS 리전 (빈 문자열이면 AWS_DEFAULT_REGION 사용)
        profile: AWS 프로파일 (빈 문자열이면 AWS_PROFILE 사용)
        retain: $LATEST를 제외하고 유지할 최신 버전 수
        verbose: 디버그 로그 및 botocore 요청 로그 출력
        dry_run: 삭제 없이 결과만 미리 보기
        list_file: 정리 대상 함수 목록 파일 (JSON/YAML)
        more_details: 함수별 삭제 대상 버전 수 출력
        size_iec: 용량을 IEC 단위(KiB, MiB)로 표시
        skip_aliases: Alias가 가리키는 버전은 삭제 대상에서 제외
        max_workers: 병렬 삭제 스레드 수 (1~100)
    """

    region: str = ""
    profile: str = ""
    retain: int = DEFAULT_RETAIN
    verbose: bool = False
    dry_run: bool = False
    list_file: str | None = None
    more_details: bool = False
    size_iec: bool = False
    skip_aliases: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.max_workers > MAX_WORKERS_LIMIT:
            self.max_workers = MAX_WORKERS_LIMIT

    def resolve(self, environ: Mapping[str, str] | None = None) -> CleanupConfig:
        """환경 변수를 반영하고 리전을 검증한 설정을 반환

        Args:
            environ: 환경 변수 매핑 (None이면 os.environ)

        Returns:
            region은 검증된 정식 이름, profile은 플래그 또는 AWS_PROFILE 값인 새 설정

        Raises:
            ConfigError: 리전 플래그와 AWS_DEFAULT_REGION이 모두 없을 때
            RegionValidationError: 지원하지 않는 리전일 때
        """
        from core.region import describe_region, resolve_region

        env = os.environ if environ is None else environ

        region = resolve_region(self.region, env.get(ENV_REGION, ""))
        logger.debug(f"대상 리전: {describe_region(region)}")

        profile = self.profile
        if profile:
            logger.info(f'The AWS Profile flag "{profile}" was passed in')
        elif env.get(ENV_PROFILE):
            profile = env[ENV_PROFILE]
            logger.info(f'AWS_PROFILE set to "{profile}"')

        return replace(self, region=region, profile=profile)
