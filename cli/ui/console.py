"""
cli/ui/console.py - 콘솔 출력과 로깅 설정

모든 출력은 전역 console 하나를 거칩니다.
로그도 같은 console에 RichHandler로 기록되므로 진행 표시줄과 섞이지 않습니다.
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# verbose가 아니면 WARNING 이상만 출력
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")

SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"
SYMBOL_INFO = "•"

console = Console(soft_wrap=True, emoji=platform.system() != "Windows")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """루트 logger를 console용 RichHandler 하나로 설정

    다시 호출하면 기존 RichHandler를 교체합니다.

    Args:
        verbose: DEBUG 레벨과 botocore 요청/응답 로그 출력 여부

    Returns:
        루트 logger
    """
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)

    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if verbose else logging.WARNING)

    return root


def _status(symbol: str, style: str, message: str) -> None:
    console.print(f"[{style}]{symbol} {escape(message)}[/{style}]")


def print_success(message: str) -> None:
    _status(SYMBOL_SUCCESS, "green", message)


def print_error(message: str) -> None:
    _status(SYMBOL_ERROR, "red", message)


def print_warning(message: str) -> None:
    _status(SYMBOL_WARNING, "yellow", message)


def print_info(message: str) -> None:
    _status(SYMBOL_INFO, "blue", message)


def print_header(title: str) -> None:
    """구분선이 있는 섹션 헤더"""
    console.print()
    console.rule(f"[bold cyan]{escape(title)}[/bold cyan]", align="left")
