"""
core/parallel - 스레드 풀 기반 병렬 실행

    executor.py  ParallelExecutor, run_parallel
    errors.py    ErrorCollector, 에러 분류
    types.py     TaskResult, ParallelExecutionResult
    client.py    전송 설정이 적용된 boto3 client
"""

from .client import client_config, get_client
from .errors import (
    CollectedError,
    ErrorCollector,
    ErrorSeverity,
    categorize_error,
    categorize_error_code,
    get_error_code,
)
from .executor import ParallelConfig, ParallelExecutor, run_parallel
from .types import ErrorCategory, ParallelExecutionResult, TaskError, TaskResult, summarize_error_codes

__all__: list[str] = [
    "ParallelExecutor",
    "ParallelConfig",
    "run_parallel",
    "client_config",
    "get_client",
    "ErrorCollector",
    "ErrorSeverity",
    "CollectedError",
    "categorize_error",
    "categorize_error_code",
    "get_error_code",
    "ErrorCategory",
    "TaskError",
    "TaskResult",
    "ParallelExecutionResult",
    "summarize_error_codes",
]
