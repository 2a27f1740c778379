"""
core - lambda-cleanup 기반 패키지

    auth/          boto3 세션, 자격 증명 확인, Lambda client
    parallel/      스레드 풀 실행기, 에러 수집기, client 전송 설정
    region/        내장 리전 목록과 검증
    config.py      버전, CleanupConfig
    exceptions.py  LambdaCleanupError 계층

Example:
    from core.config import CleanupConfig
    from core.exceptions import LambdaCleanupError, format_error_for_user

    try:
        config = CleanupConfig(retain=2).resolve()
    except LambdaCleanupError as e:
        print(format_error_for_user(e))
"""

from core import auth, config, exceptions, parallel, region

__all__: list[str] = ["auth", "config", "exceptions", "parallel", "region"]
