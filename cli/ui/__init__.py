"""
cli/ui - rich 기반 콘솔 출력, 로깅 설정, 병렬 삭제 진행 표시

공유 Console 인스턴스는 cli.ui.console.console로 사용합니다.
"""

from .console import (
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)
from .progress import ParallelTracker, parallel_progress

__all__: list[str] = [
    "setup_logging",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_header",
    "ParallelTracker",
    "parallel_progress",
]
