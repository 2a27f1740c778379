"""
shared/aws/lambda_/collector.py - Lambda 함수/버전/Alias 수집

ListFunctions(또는 GetFunction) -> ListVersionsByFunction -> ListAliases 순서로
AWS API를 호출하여 정리 대상 판단에 필요한 정보를 수집합니다.
목록 조회 실패는 APICallError로 전파되며 호출자(CLI)에서 치명적 오류로 처리됩니다.
"""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from botocore.exceptions import ClientError

from core.exceptions import APICallError, is_not_found

from .retention import LATEST, sort_versions

logger = logging.getLogger(__name__)

# list_* 페이지 크기 (AWS 최대값)
PAGE_SIZE = 10000

# 정리에 필요한 IAM 권한 (접근 거부 시 안내)
REQUIRED_PERMISSIONS = {
    "read": [
        "lambda:ListFunctions",
        "lambda:GetFunction",
        "lambda:ListVersionsByFunction",
        "lambda:ListAliases",
    ],
    "delete": [
        "lambda:DeleteFunction",
    ],
}


@dataclass
class FunctionConfiguration:
    """Lambda 함수 버전 정보

    Attributes:
        function_name: Lambda 함수 이름
        function_arn: 함수(또는 버전) ARN
        version: 버전 번호 문자열 또는 "$LATEST"
        code_size: 코드 패키지 크기 (바이트)
        description: 버전 설명
        runtime: 런타임 식별자 (컨테이너 이미지 함수는 빈 문자열)
        last_modified: 마지막 수정 시각
    """

    function_name: str
    function_arn: str = ""
    version: str = LATEST
    code_size: int = 0
    description: str = ""
    runtime: str = ""
    last_modified: datetime | None = None

    @property
    def is_latest(self) -> bool:
        return self.version == LATEST

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FunctionConfiguration:
        """boto3 FunctionConfiguration 응답 딕셔너리로부터 생성"""
        last_modified = None
        lm_str = data.get("LastModified")
        if lm_str:
            with contextlib.suppress(ValueError):
                # 예: 2024-01-01T00:00:00.000+0000
                last_modified = datetime.strptime(lm_str, "%Y-%m-%dT%H:%M:%S.%f%z")

        return cls(
            function_name=data.get("FunctionName", ""),
            function_arn=data.get("FunctionArn", ""),
            version=data.get("Version", LATEST),
            code_size=int(data.get("CodeSize", 0) or 0),
            description=data.get("Description", ""),
            runtime=data.get("Runtime", ""),
            last_modified=last_modified,
        )


@dataclass
class LambdaAlias:
    """Lambda Alias 정보

    Attributes:
        name: Alias 이름
        function_version: Alias가 가리키는 버전 번호
        alias_arn: Alias ARN
    """

    name: str
    function_version: str
    alias_arn: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LambdaAlias:
        return cls(
            name=data.get("Name", ""),
            function_version=data.get("FunctionVersion", ""),
            alias_arn=data.get("AliasArn", ""),
        )


# =============================================================================
# 함수 목록
# =============================================================================


def list_functions(client: Any, custom_names: list[str] | None = None) -> list[FunctionConfiguration]:
    """정리 대상 Lambda 함수 목록 조회

    custom_names가 None이면 리전의 모든 함수를 페이지네이션으로 조회하고,
    있으면 GetFunction으로 지정된 함수만 조회합니다.
    존재하지 않는 함수는 경고 후 건너뜁니다.

    Args:
        client: boto3 Lambda client
        custom_names: 사용자 지정 함수 이름 목록 (선택)

    Returns:
        함수 설정 목록 ($LATEST 기준)

    Raises:
        APICallError: 목록 조회 또는 GetFunction 호출 실패
    """
    functions: list[FunctionConfiguration] = []

    if custom_names is None:
        try:
            paginator = client.get_paginator("list_functions")
            for page in paginator.paginate(PaginationConfig={"PageSize": PAGE_SIZE}):
                for fn in page.get("Functions", []):
                    functions.append(FunctionConfiguration.from_dict(fn))
        except ClientError as e:
            raise APICallError.from_client_error("lambda", "list_functions", e) from e
        return functions

    last_error: ClientError | None = None

    for name in custom_names:
        try:
            response = client.get_function(FunctionName=name)
        except ClientError as e:
            if is_not_found(e):
                logger.warning(
                    f"The lambda function {name} does not exist. "
                    "Ensure you specified the correct name and that function exists and try again."
                )
                logger.warning(f"Skipping {name}")
                continue
            logger.error(f"GetFunction 실패 [{name}]: {e}")
            last_error = e
            continue

        configuration = response.get("Configuration")
        if configuration:
            functions.append(FunctionConfiguration.from_dict(configuration))

    if last_error is not None:
        raise APICallError.from_client_error("lambda", "get_function", last_error) from last_error

    return functions


# =============================================================================
# 버전 / Alias
# =============================================================================


def list_aliases(client: Any, function_name: str) -> list[LambdaAlias]:
    """함수의 Alias 목록 조회

    Args:
        client: boto3 Lambda client
        function_name: 함수 이름 또는 ARN

    Returns:
        Alias 목록

    Raises:
        APICallError: ListAliases 호출 실패
    """
    aliases: list[LambdaAlias] = []
    try:
        paginator = client.get_paginator("list_aliases")
        for page in paginator.paginate(FunctionName=function_name):
            for a in page.get("Aliases", []):
                aliases.append(LambdaAlias.from_dict(a))
    except ClientError as e:
        raise APICallError.from_client_error("lambda", "list_aliases", e) from e

    return aliases


def filter_aliased_versions(
    versions: list[FunctionConfiguration],
    aliases: list[LambdaAlias],
) -> list[FunctionConfiguration]:
    """Alias가 가리키는 버전을 제외한 목록 반환

    Args:
        versions: 함수 버전 목록
        aliases: 함수 Alias 목록

    Returns:
        어떤 Alias도 가리키지 않는 버전 목록 (입력 순서 유지)
    """
    result: list[FunctionConfiguration] = []

    for version in versions:
        is_alias = False
        for alias in aliases:
            if alias.function_version and alias.function_version == version.version:
                is_alias = True
                break

        if not is_alias:
            result.append(version)

    return result


def list_function_versions(
    client: Any,
    function: FunctionConfiguration,
    skip_aliases: bool = False,
) -> list[FunctionConfiguration]:
    """함수의 모든 버전을 조회하여 최신순으로 정렬

    Args:
        client: boto3 Lambda client
        function: 대상 함수
        skip_aliases: True이면 Alias가 가리키는 버전 제외

    Returns:
        버전 번호 내림차순 목록 ($LATEST는 마지막)

    Raises:
        APICallError: ListVersionsByFunction 또는 ListAliases 호출 실패
    """
    versions: list[FunctionConfiguration] = []

    try:
        paginator = client.get_paginator("list_versions_by_function")
        for page in paginator.paginate(
            FunctionName=function.function_name,
            PaginationConfig={"PageSize": PAGE_SIZE},
        ):
            for v in page.get("Versions", []):
                versions.append(FunctionConfiguration.from_dict(v))
    except ClientError as e:
        raise APICallError.from_client_error("lambda", "list_versions_by_function", e) from e

    if skip_aliases:
        aliases = list_aliases(client, function.function_arn or function.function_name)
        before = len(versions)
        versions = filter_aliased_versions(versions, aliases)
        if before != len(versions):
            logger.debug(f"{function.function_name}: Alias 대상 버전 {before - len(versions)}개 제외")

    return sort_versions(versions)
