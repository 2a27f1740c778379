"""
shared/aws/lambda_ - Lambda 버전 정리 모듈

함수/버전 수집, 보존 정책 계산, 병렬 삭제, 정리 실행 로직
"""

from .cleanup import CleanupSummary, execute_clean, format_duration
from .collector import (
    REQUIRED_PERMISSIONS,
    FunctionConfiguration,
    LambdaAlias,
    filter_aliased_versions,
    list_aliases,
    list_function_versions,
    list_functions,
)
from .deleter import delete_versions
from .retention import (
    LATEST,
    DeleteRequest,
    build_delete_requests,
    calculate_space_removal,
    count_delete_versions,
    get_storage_size,
    select_versions_to_delete,
    sort_versions,
)

__all__: list[str] = [
    # cleanup
    "CleanupSummary",
    "execute_clean",
    "format_duration",
    # collector
    "REQUIRED_PERMISSIONS",
    "FunctionConfiguration",
    "LambdaAlias",
    "list_functions",
    "list_function_versions",
    "list_aliases",
    "filter_aliased_versions",
    # deleter
    "delete_versions",
    # retention
    "LATEST",
    "DeleteRequest",
    "sort_versions",
    "select_versions_to_delete",
    "build_delete_requests",
    "calculate_space_removal",
    "count_delete_versions",
    "get_storage_size",
]
