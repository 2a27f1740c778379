"""
shared - CLI 명령이 사용하는 Lambda 정리 로직과 입출력 헬퍼

    aws/lambda_/  함수/버전 수집, 보존 계산, 병렬 삭제, 정리 실행
    io/           용량 표기, 함수 목록 파일

core에만 의존하며 cli를 import하지 않습니다 (타입 힌트 제외).
"""

from . import aws, io

__all__ = ["aws", "io"]
