"""
shared/aws/lambda_/retention.py - 버전 정렬 및 보존 정책

함수 버전 목록을 최신순으로 정렬하고, 보존 개수(retain)를 기준으로
삭제 대상 버전과 DeleteFunction 요청을 계산합니다.
AWS API를 호출하지 않는 순수 함수만 포함합니다.

정렬 규칙:
    - 버전 번호(정수) 내림차순
    - 정수로 해석할 수 없는 라벨("$LATEST" 포함)은 0으로 취급하여 마지막에 위치
    - 동일한 값끼리는 입력 순서 유지 (stable)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .collector import FunctionConfiguration

logger = logging.getLogger(__name__)

LATEST = "$LATEST"


def _version_number(version: str) -> int:
    try:
        return int(version)
    except (TypeError, ValueError):
        return 0


def sort_versions(versions: Iterable[FunctionConfiguration]) -> list[FunctionConfiguration]:
    """버전 번호 내림차순 정렬

    Args:
        versions: 함수 버전 목록

    Returns:
        정렬된 새 목록 (입력은 변경하지 않음)
    """
    return sorted(versions, key=lambda v: _version_number(v.version), reverse=True)


def select_versions_to_delete(
    sorted_versions: Sequence[FunctionConfiguration],
    retain: int,
) -> list[FunctionConfiguration]:
    """보존 개수를 제외한 삭제 대상 버전 선택

    목록은 sort_versions()로 정렬되어 있어야 합니다.
    retain이 1 미만이면 1로 보정합니다.

    Args:
        sorted_versions: 최신순 정렬된 버전 목록
        retain: 보존할 버전 개수

    Returns:
        삭제 대상 버전 목록. 항목이 1개 이하이거나 retain 이상 남지 않으면 빈 목록.
        "$LATEST"가 포함될 수 있으며 요청 생성 단계에서 제외됩니다.
    """
    retain = max(retain, 1)

    if len(sorted_versions) <= 1 or retain >= len(sorted_versions):
        return []

    return list(sorted_versions[retain:])


@dataclass(frozen=True)
class DeleteRequest:
    """DeleteFunction 호출 단위

    Attributes:
        function_name: Lambda 함수 이름
        qualifier: 삭제할 버전 번호
    """

    function_name: str
    qualifier: str

    def to_kwargs(self) -> dict[str, Any]:
        """boto3 delete_function 호출 인자로 변환"""
        return {"FunctionName": self.function_name, "Qualifier": self.qualifier}

    def __str__(self) -> str:
        return f"{self.function_name}:{self.qualifier}"


def build_delete_requests(
    delete_lists: Iterable[Sequence[FunctionConfiguration]],
    details: bool = False,
) -> list[list[DeleteRequest]]:
    """함수별 삭제 대상 목록을 DeleteRequest 목록으로 변환

    "$LATEST"는 항상 제외됩니다.

    Args:
        delete_lists: 함수별 삭제 대상 버전 목록
        details: True이면 함수별 삭제 예정 버전 수를 로깅

    Returns:
        함수별 DeleteRequest 목록 (입력과 같은 순서, 같은 개수)
    """
    output: list[list[DeleteRequest]] = []

    for versions in delete_lists:
        requests_: list[DeleteRequest] = []
        function_name = ""

        for entry in versions:
            if entry.version == LATEST:
                continue
            if not function_name:
                function_name = entry.function_name
            requests_.append(DeleteRequest(function_name=entry.function_name, qualifier=entry.version))

        if details and function_name:
            logger.info("%5d versions of %s to be removed", len(requests_), function_name)

        output.append(requests_)

    return output


def calculate_space_removal(delete_lists: Iterable[Sequence[FunctionConfiguration]]) -> int:
    """삭제 대상 버전의 코드 크기 합계 (바이트, "$LATEST" 제외)"""
    return sum(v.code_size for versions in delete_lists for v in versions if v.version != LATEST)


def count_delete_versions(request_lists: Iterable[Sequence[DeleteRequest]]) -> int:
    """전체 DeleteRequest 개수"""
    return sum(len(requests_) for requests_ in request_lists)


def get_storage_size(versions: Iterable[FunctionConfiguration]) -> int:
    """버전 목록의 코드 크기 합계 (바이트)"""
    return sum(v.code_size for v in versions)
