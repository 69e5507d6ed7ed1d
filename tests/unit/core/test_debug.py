# tests/unit/core/test_debug.py
# Unit tests for debug & verbose logging helpers routed through the output registry

from unittest.mock import MagicMock

import pytest

from cadence.core.debug import debug_error
from cadence.core.output import OutputLevel, get_output_manager, set_output_manager
from cadence.core.verbose import (
    init_verbose,
    vlog,
    vlog_config,
    vlog_session,
    vlog_transition,
)
from cadence.cli.output_manager import OutputManager


@pytest.fixture
def mock_manager():
    manager = MagicMock()
    set_output_manager(manager)
    return manager


# * context is prefixed & the exception type is named
def test_debug_error_message(mock_manager):
    debug_error(ValueError("bad"), "present")
    mock_manager.debug.assert_called_once_with("present: ValueError: bad", "ERROR")


def test_debug_error_without_context(mock_manager):
    debug_error(KeyError("k"))
    msg, _ = mock_manager.debug.call_args.args
    assert msg == "KeyError: 'k'"


def test_verbose_categories(mock_manager):
    vlog("PLAN", "loaded", "3 sections")
    vlog_transition("Play", "section 1/3")
    vlog_session("Presentation started")
    vlog_config("theme", "deep_blue")

    calls = [c.args for c in mock_manager.verbose.call_args_list]
    assert calls == [
        ("loaded", "PLAN", "3 sections"),
        ("Play", "TIMER", "section 1/3"),
        ("Presentation started", "SESSION", None),
        ("theme = deep_blue", "CONFIG"),
    ]


class TestInitVerbose:

    def test_registers_output_manager(self):
        init_verbose(enabled=True)
        manager = get_output_manager()
        assert isinstance(manager, OutputManager)
        assert manager.get_level() == OutputLevel.VERBOSE

    # * DEBUG only when verbose & dev_mode are both on
    def test_dev_mode_enables_debug(self):
        init_verbose(enabled=True, dev_mode=True)
        assert get_output_manager().get_level() == OutputLevel.DEBUG

        init_verbose(enabled=False, dev_mode=True)
        assert get_output_manager().get_level() == OutputLevel.NORMAL
