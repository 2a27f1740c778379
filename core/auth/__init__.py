# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

프로파일/환경 변수 기반 boto3 Session을 만들고 자격 증명을 확인합니다.
Assume Role 프로파일의 MFA 토큰은 botocore 기본 동작대로 표준 입력에서 받습니다.

사용 예시:
    from core.auth import get_session, verify_credentials

    session = get_session("my-profile", "ap-northeast-2")
    verify_credentials(session)
"""

from .session import create_lambda_client, get_session, verify_credentials

__all__: list[str] = [
    "get_session",
    "verify_credentials",
    "create_lambda_client",
]
