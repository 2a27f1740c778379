"""
cli/ui/progress.py - 병렬 삭제 진행 표시

ParallelExecutor가 set_total()과 on_complete()로 ParallelTracker를 갱신하고,
parallel_progress()가 그 값을 rich Progress 한 줄로 보여줍니다.

    ⠋ Lambda 버전 삭제 40✓ 1✗ / 41/50 ━━━━━━━━━━━━━━━━━━ 0:00:15
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from .console import SYMBOL_ERROR, SYMBOL_SUCCESS
from .console import console as default_console

if TYPE_CHECKING:
    from rich.console import Console


class ParallelTracker:
    """성공/실패 건수 추적기

    워커 스레드에서 동시에 on_complete()를 호출해도 됩니다.
    Progress에 연결되지 않은 상태에서는 건수만 셉니다.
    """

    def __init__(self, progress: Progress | None = None, task_id: TaskID | None = None, description: str = ""):
        self.description = description
        self._progress = progress
        self._task_id = task_id
        self._lock = threading.Lock()
        self._success = 0
        self._failed = 0
        self._total = 0

    def attach(self, progress: Progress, task_id: TaskID) -> None:
        with self._lock:
            self._progress = progress
            self._task_id = task_id

    def _refresh(self, **fields: Any) -> None:
        # 호출자가 잠금을 잡고 있어야 함
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, **fields)

    def set_total(self, total: int) -> None:
        with self._lock:
            self._total = total
            self._refresh(total=total)

    def on_complete(self, success: bool) -> None:
        with self._lock:
            if success:
                self._success += 1
            else:
                self._failed += 1
            self._refresh(completed=self._success + self._failed)

    @property
    def stats(self) -> tuple[int, int, int]:
        """(성공, 실패, 전체)"""
        with self._lock:
            return self._success, self._failed, self._total


class SuccessFailColumn(ProgressColumn):
    """'40✓ 1✗' 형태의 성공/실패 건수 열"""

    def __init__(self, tracker: ParallelTracker):
        super().__init__()
        self._tracker = tracker

    def render(self, task: Task) -> Text:
        success, failed, _ = self._tracker.stats
        return Text.assemble((f"{success}{SYMBOL_SUCCESS} ", "green"), (f"{failed}{SYMBOL_ERROR}", "red"))


@contextmanager
def parallel_progress(description: str, console: Console | None = None) -> Iterator[ParallelTracker]:
    """진행 표시줄을 띄우고 연결된 ParallelTracker를 넘겨줌

    표시줄은 블록을 벗어나면 지워집니다 (transient).

    Args:
        description: 표시줄 앞에 붙는 설명
        console: 출력할 console (기본: cli.ui.console.console)
    """
    tracker = ParallelTracker(description=description)
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        SuccessFailColumn(tracker),
        TextColumn("/"),
        MofNCompleteColumn(),
        BarColumn(bar_width=40),
        TimeElapsedColumn(),
        console=console or default_console,
        transient=True,
    )

    with progress:
        tracker.attach(progress, progress.add_task(f"[cyan]{description}", total=None))
        yield tracker
