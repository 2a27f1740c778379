"""
core/parallel/types.py - 병렬 실행 결과 타입

개별 작업 결과(TaskResult)와 전체 결과(ParallelExecutionResult)를
불변 데이터클래스로 정의합니다.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCategory(Enum):
    """에러 카테고리"""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    THROTTLING = "throttling"
    TIMEOUT = "timeout"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    EXPIRED_TOKEN = "expired_token"
    NETWORK = "network"
    UNKNOWN = "unknown"


def summarize_error_codes(codes: Iterable[str]) -> str:
    """에러 코드별 건수 요약

    Returns:
        "에러 없음" 또는 "에러 3건 (AccessDenied: 1건, ThrottlingException: 2건)"
    """
    counts = Counter(codes)
    if not counts:
        return "에러 없음"

    parts = ", ".join(f"{code}: {count}건" for code, count in sorted(counts.items()))
    return f"에러 {sum(counts.values())}건 ({parts})"


@dataclass(frozen=True)
class TaskError:
    """작업 실패 정보

    Attributes:
        identifier: 작업 식별자 (예: "order-api:3")
        category: 에러 카테고리
        error_code: AWS 에러 코드 또는 예외 클래스명
        message: 에러 메시지
        original_exception: 원본 예외
    """

    identifier: str
    category: ErrorCategory
    error_code: str
    message: str
    original_exception: BaseException | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"[{self.identifier}] {self.error_code}: {self.message}"


@dataclass(frozen=True)
class TaskResult(Generic[T]):
    identifier: str
    success: bool
    data: T | None = None
    error: TaskError | None = None
    duration_ms: float = 0.0


@dataclass(frozen=True)
class ParallelExecutionResult(Generic[T]):
    """전체 실행 결과 (완료 순서)"""

    results: tuple[TaskResult[T], ...] = ()

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def error_count(self) -> int:
        return len(self.results) - self.success_count

    def get_errors(self) -> list[TaskError]:
        """실패한 작업의 에러 목록"""
        return [r.error for r in self.results if r.error is not None]

    def get_error_summary(self) -> str:
        return summarize_error_codes(e.error_code for e in self.get_errors())
