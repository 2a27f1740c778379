"""
tests/cli/test_cli_progress.py - 병렬 진행 추적기 테스트
"""

import io
import threading

from rich.console import Console

from cli.ui.progress import ParallelTracker, parallel_progress


class TestParallelTracker:
    """ParallelTracker 테스트"""

    def test_stats(self):
        tracker = ParallelTracker(description="삭제")

        tracker.set_total(3)
        tracker.on_complete(True)
        tracker.on_complete(False)

        assert tracker.stats == (1, 1, 3)

    def test_thread_safe(self):
        tracker = ParallelTracker(description="삭제")

        def worker():
            for i in range(100):
                tracker.on_complete(i % 2 == 0)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert tracker.stats == (200, 200, 0)


class TestParallelProgress:
    """parallel_progress 테스트"""

    def test_yields_tracker(self):
        console = Console(file=io.StringIO(), force_terminal=False)

        with parallel_progress("Lambda 버전 삭제", console=console) as tracker:
            tracker.set_total(2)
            tracker.on_complete(True)
            tracker.on_complete(True)

        assert tracker.stats == (2, 0, 2)

    def test_updates_progress_task(self):
        console = Console(file=io.StringIO(), force_terminal=False)

        with parallel_progress("삭제", console=console) as tracker:
            tracker.set_total(4)
            tracker.on_complete(False)
            task = tracker._progress.tasks[0]

            assert task.total == 4
            assert task.completed == 1

    def test_column_renders_counts(self):
        console = Console(file=io.StringIO(), force_terminal=False)

        with parallel_progress("삭제", console=console) as tracker:
            tracker.on_complete(True)
            tracker.on_complete(True)
            tracker.on_complete(False)
            column = tracker._progress.columns[2]
            text = column.render(tracker._progress.tasks[0])

        assert text.plain == "2✓ 1✗"
