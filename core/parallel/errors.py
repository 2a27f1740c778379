"""
core/parallel/errors.py - 병렬 작업 에러 분류 및 수집

여러 워커 스레드에서 난 실패를 잠금으로 보호된 목록에 모읍니다.
공유 변수 하나를 덮어쓰지 않고 모든 에러를 보존하며,
호출자에게는 대표 에러(last_exception) 하나만 넘길 수 있습니다.

Example:
    collector = ErrorCollector("lambda", region="us-east-1")

    try:
        client.delete_function(FunctionName="order-api", Qualifier="3")
    except ClientError as e:
        collector.collect(e, "delete_function", ErrorSeverity.CRITICAL, resource_id="order-api:3")

    if collector.has_errors:
        logger.error(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum

from core.exceptions import aws_error_code, aws_error_info

from .types import ErrorCategory, summarize_error_codes

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """수집된 에러의 심각도 (로그 레벨 결정)"""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


_LOG_LEVELS = {
    ErrorSeverity.CRITICAL: logging.ERROR,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.DEBUG: logging.DEBUG,
}

# 에러 코드(소문자)에 포함된 키워드로 분류, 위에서부터 먼저 일치하는 항목 사용
_CATEGORY_KEYWORDS: tuple[tuple[ErrorCategory, tuple[str, ...]], ...] = (
    (ErrorCategory.ACCESS_DENIED, ("accessdenied", "unauthorized", "forbidden")),
    (ErrorCategory.NOT_FOUND, ("notfound", "nosuch", "doesnotexist")),
    (ErrorCategory.THROTTLING, ("throttl", "ratelimit", "rateexceeded", "requestlimit", "toomanyrequests")),
    (ErrorCategory.TIMEOUT, ("timeout", "timedout")),
    (ErrorCategory.EXPIRED_TOKEN, ("expiredtoken",)),
    (ErrorCategory.INVALID_REQUEST, ("invalid", "validation", "malformed")),
    (ErrorCategory.SERVICE_ERROR, ("internal", "serviceunavailable", "serviceexception")),
)


def categorize_error_code(error_code: str) -> ErrorCategory:
    """AWS 에러 코드 문자열 분류 (일치하는 키워드가 없으면 UNKNOWN)"""
    code = error_code.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(k in code for k in keywords):
            return category
    return ErrorCategory.UNKNOWN


def categorize_error(error: BaseException) -> ErrorCategory:
    """예외 분류

    AWS 에러는 에러 코드로, 그 외 OSError 계열은 NETWORK로 분류합니다.
    """
    code = aws_error_code(error)
    if code:
        return categorize_error_code(code)
    if isinstance(error, OSError):
        return ErrorCategory.NETWORK
    return ErrorCategory.UNKNOWN


def get_error_code(error: BaseException) -> str:
    """AWS 에러 코드, 없으면 예외 클래스명"""
    return aws_error_code(error) or type(error).__name__


@dataclass(frozen=True)
class CollectedError:
    """수집된 에러

    Attributes:
        service: AWS 서비스 (예: "lambda")
        operation: API 작업 (예: "delete_function")
        error_code: AWS 에러 코드 또는 예외 클래스명
        error_message: 에러 메시지
        severity: 심각도
        category: 분류
        region: AWS 리전
        resource_id: 대상 리소스 (예: "order-api:3")
        exception: 원본 예외
    """

    service: str
    operation: str
    error_code: str
    error_message: str
    severity: ErrorSeverity
    category: ErrorCategory
    region: str = ""
    resource_id: str | None = None
    exception: BaseException | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        target = f" {self.resource_id}" if self.resource_id else ""
        return f"[{self.severity.value.upper()}] {self.service}.{self.operation}{target}: {self.error_code}"


class ErrorCollector:
    """스레드 세이프 에러 수집기

    수집 순서가 보존되므로 last_exception은 가장 마지막에 수집된 예외입니다.
    """

    def __init__(self, service: str, region: str = ""):
        self.service = service
        self.region = region
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: BaseException,
        operation: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        resource_id: str | None = None,
    ) -> CollectedError:
        """에러를 수집하고 심각도에 맞는 레벨로 로깅

        Args:
            error: botocore ClientError 또는 기타 예외
            operation: API 작업 이름
            severity: 심각도 (기본: WARNING)
            resource_id: 대상 리소스

        Returns:
            수집된 CollectedError
        """
        collected = CollectedError(
            service=self.service,
            operation=operation,
            error_code=get_error_code(error),
            error_message=aws_error_info(error).get("Message") or str(error),
            severity=severity,
            category=categorize_error(error),
            region=self.region,
            resource_id=resource_id,
            exception=error,
        )

        with self._lock:
            self._errors.append(collected)

        logger.log(_LOG_LEVELS[severity], f"{collected} - {collected.error_message}")
        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 에러 복사본"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        with self._lock:
            return bool(self._errors)

    @property
    def error_count(self) -> int:
        with self._lock:
            return len(self._errors)

    @property
    def last_exception(self) -> BaseException | None:
        """마지막으로 수집된 원본 예외 (없으면 None)"""
        with self._lock:
            return self._errors[-1].exception if self._errors else None

    def get_summary(self) -> str:
        with self._lock:
            return summarize_error_codes(e.error_code for e in self._errors)
