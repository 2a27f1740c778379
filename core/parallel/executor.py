"""
core/parallel/executor.py - 병렬 작업 실행기

항목마다 같은 작업 함수를 스레드 풀에서 실행합니다.
작업에서 난 예외는 TaskResult로 바뀌어 남은 작업을 막지 않고,
execute()는 모든 작업이 끝난 뒤에만 반환합니다.

Example:
    from core.parallel import run_parallel

    result = run_parallel(lambda r: client.delete_function(**r.to_kwargs()), requests, identifier=str)
    if result.error_count:
        logger.error(result.get_error_summary())
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from core.config import DEFAULT_MAX_WORKERS, MAX_WORKERS_LIMIT

from .errors import categorize_error, get_error_code
from .types import ErrorCategory, ParallelExecutionResult, TaskError, TaskResult

if TYPE_CHECKING:
    from cli.ui.progress import ParallelTracker

logger = logging.getLogger(__name__)

I = TypeVar("I")  # noqa: E741
T = TypeVar("T")


def _task_error(task_id: str, error: BaseException, category: ErrorCategory | None = None, code: str = "") -> TaskError:
    return TaskError(
        identifier=task_id,
        category=category or categorize_error(error),
        error_code=code or get_error_code(error),
        message=str(error),
        original_exception=error,
    )


def _run_task(func: Callable[[I], T], item: I, task_id: str) -> TaskResult[T]:
    """워커 스레드에서 작업 하나를 실행하고 결과로 감쌈"""
    started = time.monotonic()
    try:
        data = func(item)
    except Exception as e:
        elapsed = (time.monotonic() - started) * 1000
        return TaskResult(task_id, success=False, error=_task_error(task_id, e), duration_ms=elapsed)

    return TaskResult(task_id, success=True, data=data, duration_ms=(time.monotonic() - started) * 1000)


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    max_workers는 1 이상이어야 하며 MAX_WORKERS_LIMIT을 넘으면 잘립니다.
    """

    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        self.max_workers = min(self.max_workers, MAX_WORKERS_LIMIT)


class ParallelExecutor:
    """항목별 작업 병렬 실행기

    동시에 실행되는 작업 수는 config.max_workers를 넘지 않습니다.
    """

    def __init__(self, config: ParallelConfig | None = None):
        self.config = config or ParallelConfig()

    def execute(
        self,
        func: Callable[[I], T],
        items: Iterable[I],
        identifier: Callable[[I], str] = str,
        progress_tracker: ParallelTracker | None = None,
    ) -> ParallelExecutionResult[T]:
        """모든 항목에 작업 함수 실행

        Args:
            func: item -> T 작업 함수
            items: 작업 항목
            identifier: 항목을 로그/에러용 식별자로 바꾸는 함수
            progress_tracker: set_total()과 작업별 on_complete(success)를 받을 추적기

        Returns:
            완료 순서대로 담긴 ParallelExecutionResult
        """
        pending = [(identifier(item), item) for item in items]
        if not pending:
            logger.debug("실행할 작업이 없습니다")
            return ParallelExecutionResult()

        workers = min(self.config.max_workers, len(pending))
        logger.debug(f"병렬 실행 시작: {len(pending)}개 작업, max_workers={workers}")

        if progress_tracker:
            progress_tracker.set_total(len(pending))

        results: list[TaskResult[T]] = []
        started = time.monotonic()

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lc-worker") as pool:
            futures = {pool.submit(_run_task, func, item, task_id): task_id for task_id, item in pending}

            for future in as_completed(futures):
                task_id = futures[future]
                try:
                    result = future.result()
                except Exception as e:
                    # _run_task 밖에서 난 예외 (스레드 생성 실패 등)
                    logger.error(f"작업 실행 중 예외 [{task_id}]: {e}")
                    error = _task_error(task_id, e, ErrorCategory.UNKNOWN, "ExecutorError")
                    result = TaskResult(task_id, success=False, error=error)

                results.append(result)
                if progress_tracker:
                    progress_tracker.on_complete(result.success)

        outcome = ParallelExecutionResult(results=tuple(results))
        logger.debug(
            f"병렬 실행 완료: 성공 {outcome.success_count}, 실패 {outcome.error_count}, "
            f"총 {(time.monotonic() - started) * 1000:.0f}ms"
        )
        return outcome


def run_parallel(
    func: Callable[[I], T],
    items: Iterable[I],
    max_workers: int = DEFAULT_MAX_WORKERS,
    identifier: Callable[[I], str] = str,
    progress_tracker: ParallelTracker | None = None,
) -> ParallelExecutionResult[T]:
    """ParallelExecutor(ParallelConfig(max_workers)).execute() 단축 함수"""
    executor = ParallelExecutor(ParallelConfig(max_workers=max_workers))
    return executor.execute(func, items, identifier=identifier, progress_tracker=progress_tracker)
