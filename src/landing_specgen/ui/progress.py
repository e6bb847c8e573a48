"""Rich progress display driven by generator events."""

from __future__ import annotations

from types import TracebackType

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressReporter:
    """Maps ``emit(event, payload)`` calls onto rich progress tasks.

    Events:
        ``registry:loaded``      {"pages": int}   opens the page task
        ``page:start``           {"key": str}     updates the description
        ``page:written``         {"key": str, "path": str}
        ``generation:finalized`` {"pages": int}   closes the page task
    """

    def __init__(self, *, disable: bool = False) -> None:
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            transient=True,
            disable=disable,
        )
        self._tasks: dict[str, TaskID] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def add_step(self, description: str, total: int | None = None) -> TaskID:
        return self.progress.add_task(description, total=total)

    def finish_task(self, task_id: TaskID) -> None:
        self.progress.remove_task(task_id)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "registry:loaded":
            total = int(payload.get("pages", 0))
            self._tasks["pages"] = self.add_step("Generating page specs", total=total)
        elif event == "page:start":
            task = self._tasks.get("pages")
            if task is not None:
                self.progress.update(task, description=f"Generating {payload.get('key', '')}")
        elif event == "page:written":
            task = self._tasks.get("pages")
            if task is not None:
                self.progress.advance(task)
        elif event == "generation:finalized":
            task = self._tasks.pop("pages", None)
            if task is not None:
                self.finish_task(task)
