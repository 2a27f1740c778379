"""
core/exceptions.py - Lambda Cleanup 예외 정의

CLI(cli/clean.py)는 아래 예외를 잡아 메시지를 출력하고 종료 코드를 정합니다.

    LambdaCleanupError
    ├── ConfigError            AWS 호출 전에 발견되는 설정 오류
    │   ├── RegionValidationError
    │   └── ListFileError
    ├── AuthError              세션 생성, 자격 증명 조회/만료
    ├── APICallError           목록 조회 등 AWS API 실패 (ClientError 래핑)
    ├── LambdaDeleteError      병렬 삭제 중 하나 이상 실패
    └── ReleaseCheckError      릴리스 피드 확인 실패

Usage:
    from core.exceptions import APICallError

    try:
        paginator.paginate()
    except ClientError as e:
        raise APICallError.from_client_error("lambda", "list_functions", e) from e
"""

from __future__ import annotations

from typing import Any

NOT_FOUND_CODES = frozenset({"ResourceNotFoundException", "NotFoundException"})

# 그대로 보여주기보다 안내 문구로 바꾸는 AWS 에러 코드
FRIENDLY_MESSAGES = {
    "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
    "AccessDeniedException": "권한이 없습니다. IAM 정책을 확인하세요.",
    "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
    "ExpiredTokenException": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
    "InvalidClientTokenId": "잘못된 자격 증명입니다.",
    "UnrecognizedClientException": "잘못된 자격 증명입니다.",
}


class LambdaCleanupError(Exception):
    """lambda-cleanup 예외 베이스

    Attributes:
        message: 사용자에게 보여줄 메시지
        cause: 원인 예외
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


# =============================================================================
# 설정
# =============================================================================


class ConfigError(LambdaCleanupError):
    """리전, 목록 파일 등 클라우드 호출 전에 확인되는 설정 오류"""

    def __init__(self, key: str, message: str, cause: BaseException | None = None):
        super().__init__(message, cause)
        self.config_key = key


class RegionValidationError(ConfigError):
    def __init__(self, region: str):
        super().__init__("region", f"{region} is an invalid AWS region. If this is an error please report it")
        self.region = region


class ListFileError(ConfigError):
    """함수 목록 파일을 읽거나 해석할 수 없음"""

    def __init__(self, path: str, message: str, cause: BaseException | None = None):
        super().__init__("list_file", message, cause)
        self.path = path


# =============================================================================
# AWS
# =============================================================================


class AuthError(LambdaCleanupError):
    """세션 생성 또는 자격 증명 확인 실패"""

    def __init__(self, message: str, profile: str | None = None, cause: BaseException | None = None):
        super().__init__(message, cause)
        self.profile = profile


class APICallError(LambdaCleanupError):
    """AWS API 호출 실패

    메시지 형식: "<service>.<operation> 실패 (<code>): <aws message>"
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: BaseException | None = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message += f" 실패 ({error_code})"
        if error_message:
            message += f": {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message

    def __str__(self) -> str:
        # 에러 코드가 있으면 원인 메시지가 이미 포함되어 있음
        if self.error_code:
            return self.message
        return super().__str__()

    @classmethod
    def from_client_error(cls, service: str, operation: str, error: BaseException) -> APICallError:
        """botocore ClientError에서 에러 코드/메시지를 꺼내 생성"""
        info = aws_error_info(error)
        return cls(
            service,
            operation,
            error_code=info.get("Code"),
            error_message=info.get("Message"),
            cause=error,
        )


class LambdaDeleteError(LambdaCleanupError):
    """버전 삭제 실패 (병렬 삭제에서 수집된 대표 에러를 cause로 가짐)"""

    def __init__(self, cause: BaseException | None = None):
        super().__init__("Lambda 버전 삭제 실패", cause)


class ReleaseCheckError(LambdaCleanupError):
    """릴리스 피드 확인 실패"""


# =============================================================================
# 유틸리티
# =============================================================================


def aws_error_info(error: BaseException) -> dict[str, Any]:
    """botocore 응답의 Error 블록 (AWS 에러가 아니면 빈 dict)"""
    if isinstance(error, APICallError):
        return {"Code": error.error_code, "Message": error.error_message}
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return {}
    return response.get("Error", {})


def aws_error_code(error: BaseException) -> str:
    return aws_error_info(error).get("Code") or ""


def is_not_found(error: BaseException) -> bool:
    """리소스가 존재하지 않는다는 AWS 에러인지 확인"""
    return aws_error_code(error) in NOT_FOUND_CODES


def format_error_for_user(error: BaseException) -> str:
    """사용자에게 표시할 에러 메시지

    Args:
        error: 예외

    Returns:
        lambda-cleanup 예외는 그대로, AWS 에러는 안내 문구 또는 "<code>: <message>"
    """
    if isinstance(error, LambdaCleanupError):
        return str(error)

    info = aws_error_info(error)
    if not info:
        return str(error)

    code = info.get("Code") or "UnknownError"
    return FRIENDLY_MESSAGES.get(code, f"{code}: {info.get('Message') or error}")
