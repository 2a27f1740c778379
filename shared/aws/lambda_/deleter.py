"""
shared/aws/lambda_/deleter.py - Lambda 버전 일괄 삭제

DeleteRequest마다 delete_function을 한 번씩 병렬로 호출합니다.
개별 삭제 실패는 ErrorCollector에 수집되고 로깅될 뿐 다른 요청을 중단시키지 않으며,
모든 요청이 끝난 뒤 마지막으로 수집된 예외(없으면 None)를 반환합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import DEFAULT_MAX_WORKERS
from core.parallel import ErrorCollector, ErrorSeverity, run_parallel

from .retention import DeleteRequest

if TYPE_CHECKING:
    from cli.ui.progress import ParallelTracker

logger = logging.getLogger(__name__)


def delete_versions(
    client: Any,
    *request_lists: Sequence[DeleteRequest],
    max_workers: int = DEFAULT_MAX_WORKERS,
    progress_tracker: ParallelTracker | None = None,
) -> BaseException | None:
    """Lambda 버전 일괄 삭제

    주의: 전달된 모든 버전이 삭제됩니다.

    Args:
        client: boto3 Lambda client
        *request_lists: 함수별 DeleteRequest 목록 (가변 인자)
        max_workers: 동시 삭제 요청 수 상한
        progress_tracker: 진행 상황 추적기 (선택사항)

    Returns:
        마지막으로 수집된 삭제 예외. 모두 성공하면 None.
    """
    pending = [request for requests in request_lists for request in requests]
    if not pending:
        return None

    collector = ErrorCollector("lambda", region=getattr(getattr(client, "meta", None), "region_name", "") or "")

    def _delete(request: DeleteRequest) -> None:
        try:
            client.delete_function(**request.to_kwargs())
        except (ClientError, BotoCoreError) as e:
            collector.collect(e, "delete_function", ErrorSeverity.CRITICAL, resource_id=str(request))
            raise

    result = run_parallel(
        _delete,
        pending,
        max_workers=max_workers,
        identifier=str,
        progress_tracker=progress_tracker,
    )

    logger.debug(f"버전 삭제 완료: 성공 {result.success_count}, 실패 {result.error_count}")

    if collector.has_errors:
        logger.debug(collector.get_summary())
        return collector.last_exception

    # botocore 외 예외는 실행기 결과에만 남음
    errors = result.get_errors()
    if errors:
        logger.error(result.get_error_summary())
        return errors[-1].original_exception

    return None
