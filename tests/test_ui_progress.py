from __future__ import annotations

from landing_specgen.ui.progress import ProgressReporter


def test_progress_pages_flow() -> None:
    with ProgressReporter(disable=True) as pr:
        pr.emit("registry:loaded", {"pages": 2})
        assert "pages" in pr._tasks
        assert pr.progress.tasks[0].total == 2
        task = pr._tasks["pages"]
        pr.emit("page:start", {"key": "a", "name": "A"})
        pr.emit("page:written", {"key": "a", "path": "a.cy.js"})
        pr.emit("page:written", {"key": "b", "path": "b.cy.js"})
        assert pr.progress.tasks[0].completed == 2
        assert pr.progress.tasks[0].id == task
        pr.emit("generation:finalized", {"pages": 2})
        # pages task finalized and removed
        assert "pages" not in pr._tasks


def test_progress_ignores_page_events_without_task() -> None:
    with ProgressReporter(disable=True) as pr:
        pr.emit("page:written", {"key": "a"})
        pr.emit("generation:finalized", {"pages": 0})
        assert pr._tasks == {}
