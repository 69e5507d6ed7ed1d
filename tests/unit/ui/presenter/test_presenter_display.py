# tests/unit/ui/presenter/test_presenter_display.py
# Unit tests for the presenter loop & screen rendering

from unittest.mock import MagicMock, patch

import pytest
from readchar import key
from rich.console import Console

from cadence.ui.presenter.presenter_display import InteractivePresenter
from cadence.ui.presenter.presenter_renderer import PresenterRenderer


# scripted stand-in for KeyReader; quits once the script runs out
class ScriptedKeys:
    def __init__(self, keys, clock=None, step_seconds=0.0):
        self._keys = list(keys)
        self._clock = clock
        self._step = step_seconds
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def get(self, timeout):
        if self._clock is not None:
            self._clock.advance(self._step)
        if not self._keys:
            return "q"
        return self._keys.pop(0)


def _render_text(renderable, width=100):
    console = Console(record=True, width=width, force_terminal=False)
    console.print(renderable)
    return console.export_text()


class TestStep:

    def test_space_starts_and_redraws(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan, clock=fake_clock, key_reader=ScriptedKeys([key.SPACE])
        )
        presenter.engine.enter_presentation_mode()
        live = MagicMock()

        assert presenter.step(live) is True
        assert presenter.engine.is_running
        live.update.assert_called_once()

    def test_quit_key_ends_loop(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan, clock=fake_clock, key_reader=ScriptedKeys([])
        )
        presenter.engine.enter_presentation_mode()
        assert presenter.step() is False

    # * a navigation resume lands on the frame right after the key
    def test_next_resumes_within_same_step(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan, clock=fake_clock, key_reader=ScriptedKeys([key.SPACE, "n"])
        )
        presenter.engine.enter_presentation_mode()
        presenter.step()
        fake_clock.advance(30)
        presenter.step()

        assert presenter.engine.current_index == 1
        assert presenter.engine.is_running
        assert presenter.engine.history[0] == pytest.approx(30)


class TestRun:

    @patch("cadence.ui.presenter.presenter_display.Live")
    def test_finish_returns_report(self, mock_live, three_section_plan, fake_clock):
        keys = ScriptedKeys([key.SPACE, None, "n", None, "f"], clock=fake_clock, step_seconds=10)
        presenter = InteractivePresenter(three_section_plan, clock=fake_clock, key_reader=keys)

        report = presenter.run()

        assert report is not None
        assert [r.actual_sec for r in report.rows] == [
            pytest.approx(20),
            pytest.approx(20),
            0,
        ]
        assert keys.started and keys.stopped
        assert not presenter.engine.is_presenting

    @patch("cadence.ui.presenter.presenter_display.Live")
    def test_quit_returns_none(self, mock_live, three_section_plan, fake_clock):
        keys = ScriptedKeys([key.SPACE])
        presenter = InteractivePresenter(three_section_plan, clock=fake_clock, key_reader=keys)

        assert presenter.run() is None
        assert keys.stopped
        assert not presenter.engine.is_presenting


class TestRenderer:

    def test_screen_contents(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan, clock=fake_clock, key_reader=ScriptedKeys([])
        )
        presenter.engine.enter_presentation_mode()

        text = _render_text(presenter.render_screen())

        assert "SECTION 1 / 3" in text
        assert "Intro" in text
        assert "03:00" in text
        assert "Next" in text and "Demo" in text
        assert "Ahead" in text
        assert "+00:00" in text
        assert "paused" in text

    def test_overtime_and_behind(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan, clock=fake_clock, key_reader=ScriptedKeys([])
        )
        engine = presenter.engine
        engine.enter_presentation_mode()
        engine.toggle_play_pause()
        fake_clock.advance(200)
        engine.go_next()
        engine.scheduler.run_frame()
        fake_clock.advance(310)

        text = _render_text(presenter.render_screen())

        assert "-00:10" in text
        assert "Behind" in text

    def test_hide_next_section(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan,
            show_next_section=False,
            clock=fake_clock,
            key_reader=ScriptedKeys([]),
        )
        presenter.engine.enter_presentation_mode()
        assert "Demo" not in _render_text(presenter.render_screen())

    def test_last_section_hint_says_finish(self, three_section_plan, fake_clock):
        presenter = InteractivePresenter(
            three_section_plan, clock=fake_clock, key_reader=ScriptedKeys([])
        )
        presenter.engine.enter_presentation_mode()
        presenter.engine.go_to_section(2)

        hints = PresenterRenderer().render_key_hints(presenter.engine.snapshot())
        assert "→ Finish" in hints.plain
