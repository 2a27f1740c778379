"""
shared/aws/lambda_/cleanup.py - Lambda 버전 정리 실행

함수 조회 -> 버전 조회/정렬 -> 삭제 대상 계산 -> (드라이런 보고 | 병렬 삭제 후 재집계)
순서로 한 리전의 정리 작업을 수행합니다.

Usage:
    from shared.aws.lambda_.cleanup import execute_clean

    summary = execute_clean(client, config)
    print(summary.bytes_freed)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from core.exceptions import LambdaDeleteError
from shared.io.size import format_size

from .collector import FunctionConfiguration, list_function_versions, list_functions
from .deleter import delete_versions
from .retention import (
    build_delete_requests,
    calculate_space_removal,
    count_delete_versions,
    get_storage_size,
    select_versions_to_delete,
)

if TYPE_CHECKING:
    from cli.ui.progress import ParallelTracker
    from core.config import CleanupConfig

logger = logging.getLogger(__name__)

SEPARATOR = "............"


@dataclass
class CleanupSummary:
    """정리 작업 결과

    Attributes:
        region: 대상 리전
        function_count: 조회된 함수 수
        storage_before: 정리 전 코드 저장 용량 (바이트)
        storage_after: 정리 후 코드 저장 용량 (드라이런이면 None)
        versions_deleted: 삭제된(드라이런이면 삭제 예정) 버전 수
        bytes_freed: 확보된(드라이런이면 확보 예정) 용량 (바이트)
        dry_run: 드라이런 여부
        duration_seconds: 소요 시간 (초)
    """

    region: str
    function_count: int = 0
    storage_before: int = 0
    storage_after: int | None = None
    versions_deleted: int = 0
    bytes_freed: int = 0
    dry_run: bool = False
    duration_seconds: float = 0.0


def format_duration(seconds: float) -> str:
    """소요 시간 문자열 ("2.500000m" 또는 "12.345678s")

    1분을 초과하면 분 단위, 그 외에는 초 단위로 표시합니다.
    """
    if seconds / 60 > 1:
        return f"{seconds / 60:f}m"
    return f"{seconds:f}s"


def _collect_versions(
    client: Any,
    functions: Sequence[FunctionConfiguration],
    skip_aliases: bool,
) -> tuple[list[list[FunctionConfiguration]], int]:
    """함수별 정렬된 버전 목록과 전체 저장 용량"""
    versions_per_function: list[list[FunctionConfiguration]] = []
    total = 0

    for function in functions:
        versions = list_function_versions(client, function, skip_aliases=skip_aliases)
        versions_per_function.append(versions)
        total += get_storage_size(versions)

    return versions_per_function, total


def execute_clean(
    client: Any,
    config: CleanupConfig,
    custom_list: list[str] | None = None,
    progress: Callable[[], AbstractContextManager[ParallelTracker]] | None = None,
) -> CleanupSummary:
    """한 리전의 Lambda 버전 정리

    Args:
        client: boto3 Lambda client
        config: 검증된 실행 설정 (region, retain, dry_run 등)
        custom_list: 정리 대상 함수 이름 목록 (None이면 전체 함수)
        progress: 삭제 진행 표시를 여는 함수 (선택사항). 삭제할 버전이 있을 때만 삭제 구간에서 호출

    Returns:
        CleanupSummary

    Raises:
        APICallError: 함수/버전/Alias 목록 조회 실패
        LambdaDeleteError: 하나 이상의 버전 삭제 실패
    """
    start_time = time.monotonic()
    summary = CleanupSummary(region=config.region, dry_run=config.dry_run)

    logger.info(f"Scanning AWS environment in {config.region}")
    functions = list_functions(client, custom_list)
    logger.info(SEPARATOR)

    if not functions:
        logger.info(f"No lambdas found in {config.region}")
        return _finish(summary, start_time)

    versions_per_function, storage_before = _collect_versions(client, functions, config.skip_aliases)
    summary.function_count = len(functions)
    summary.storage_before = storage_before

    logger.info(f"{len(functions)} Lambdas identified")
    logger.info(f"Current storage size: {format_size(storage_before, config.size_iec)}")
    logger.info("**************************")
    logger.info("Initiating clean-up process. This may take a few minutes....")

    delete_lists = [select_versions_to_delete(versions, config.retain) for versions in versions_per_function]
    logger.info(SEPARATOR)

    request_lists = build_delete_requests(delete_lists, details=config.more_details)
    logger.info(SEPARATOR)

    summary.versions_deleted = count_delete_versions(request_lists)

    if config.dry_run:
        summary.bytes_freed = calculate_space_removal(delete_lists)
        logger.info(f"{summary.versions_deleted} unique versions will be removed in an actual execution.")
        logger.info(
            f"{format_size(summary.bytes_freed, config.size_iec)} of storage space "
            "will be removed in an actual execution."
        )
        return _finish(summary, start_time)

    scope = progress() if progress is not None and summary.versions_deleted else nullcontext(None)
    with scope as tracker:
        error = delete_versions(client, *request_lists, max_workers=config.max_workers, progress_tracker=tracker)
    if error is not None:
        raise LambdaDeleteError(error)

    # 삭제 후 재집계
    updated_functions = list_functions(client, custom_list)
    logger.info(SEPARATOR)
    _, storage_after = _collect_versions(client, updated_functions, config.skip_aliases)
    logger.info(SEPARATOR)

    summary.storage_after = storage_after
    summary.bytes_freed = max(storage_before - storage_after, 0)

    logger.info(f"Total space freed up: {format_size(summary.bytes_freed, config.size_iec)}")
    logger.info(f"Post clean-up storage size: {format_size(storage_after, config.size_iec)}")
    logger.info("*********************************************")

    return _finish(summary, start_time)


def _finish(summary: CleanupSummary, start_time: float) -> CleanupSummary:
    summary.duration_seconds = time.monotonic() - start_time
    logger.info(f"Job Duration Time: {format_duration(summary.duration_seconds)}")
    return summary
