"""AWS 관련 공유 유틸리티.

하위 모듈:
- lambda_: Lambda 함수 버전 수집, 보존 정책, 일괄 삭제
"""

from . import lambda_

__all__ = ["lambda_"]
