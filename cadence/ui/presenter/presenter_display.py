# cadence/ui/presenter/presenter_display.py
# Interactive presenter session: Live display + key loop driving the schedule engine

from __future__ import annotations

from typing import Callable

from ...cadence_io.console import console
from ...core.schedule import ScheduleEngine
from ...core.scheduler import CooperativeScheduler
from ...core.tracker import Clock, monotonic_ms
from ...core.types import PresentationPlan, TimingReport, TimingSnapshot
from ...core.verbose import vlog_session
from ..core.rich_components import Live, RenderableType
from .presenter_input import KeyReader, PresenterInputHandler
from .presenter_renderer import PresenterRenderer


# * Orchestrates one presenting-mode run
# * Main loop is the single mutator: pop key -> dispatch -> run scheduler frame -> redraw
class InteractivePresenter:
    def __init__(
        self,
        plan: PresentationPlan,
        refresh_per_second: int = 30,
        show_next_section: bool = True,
        clock: Clock = monotonic_ms,
        key_reader: KeyReader | None = None,
    ):
        self._scheduler = CooperativeScheduler()
        self.engine = ScheduleEngine(plan, scheduler=self._scheduler, clock=clock)
        self.refresh_per_second = refresh_per_second
        self._renderer = PresenterRenderer(show_next_section=show_next_section)
        self._input_handler = PresenterInputHandler(self.engine)
        self._reader = key_reader or KeyReader()
        self._latest: TimingSnapshot | None = None
        self._dirty = True
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def renderer(self) -> PresenterRenderer:
        return self._renderer

    @property
    def input_handler(self) -> PresenterInputHandler:
        return self._input_handler

    def render_screen(self) -> RenderableType:
        snapshot = self._latest or self.engine.snapshot()
        return self._renderer.render_screen(self.engine, snapshot)

    def handle_key(self, k: str) -> bool:
        # any key may change state; take a fresh snapshot on the next draw
        self._latest = None
        self._dirty = True
        return self._input_handler.handle_key(k)

    # repeating tracker refresh publishes a snapshot each frame while running
    def _on_refresh(self, snapshot: TimingSnapshot) -> None:
        self._latest = snapshot
        self._dirty = True

    # one loop iteration; returns False when the session should end
    def step(self, live: Live | None = None) -> bool:
        k = self._reader.get(timeout=1.0 / self.refresh_per_second)
        if k is not None and not self.handle_key(k):
            return False

        self._scheduler.run_frame()

        if self._dirty and live is not None:
            live.update(self.render_screen(), refresh=True)
            self._dirty = False
        return not self.engine.is_finished

    # * Run until finished or quit; returns the report when the presentation was finished
    def run(self) -> TimingReport | None:
        self.engine.enter_presentation_mode()
        self._unsubscribe = self.engine.subscribe(self._on_refresh)
        report: TimingReport | None = None
        self._reader.start()
        try:
            with Live(
                self.render_screen(),
                console=console,
                screen=True,
                auto_refresh=False,
                transient=True,
            ) as live:
                while self.step(live):
                    pass
            if self.engine.is_finished:
                report = self.engine.report()
        finally:
            self._reader.stop()
            if self._unsubscribe is not None:
                self._unsubscribe()
            self.engine.exit_presentation_mode()
            self._scheduler.close()
            vlog_session("Presenter closed", "finished" if report else "quit before finishing")
        return report


def run_presenter(
    plan: PresentationPlan,
    refresh_per_second: int = 30,
    show_next_section: bool = True,
) -> TimingReport | None:
    presenter = InteractivePresenter(
        plan,
        refresh_per_second=refresh_per_second,
        show_next_section=show_next_section,
    )
    return presenter.run()
