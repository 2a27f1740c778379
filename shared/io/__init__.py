"""입출력 유틸리티.

하위 모듈:
- size: 바이트 크기 포맷팅 (SI/IEC)
- list_file: 정리 대상 함수 목록 파일 로드 (JSON/YAML)
"""

from . import list_file, size
from .list_file import load_function_list
from .size import format_size

__all__: list[str] = [
    # 하위 모듈
    "size",
    "list_file",
    # 고수준 API
    "format_size",
    "load_function_list",
]
