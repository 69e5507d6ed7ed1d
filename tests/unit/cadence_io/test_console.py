# tests/unit/cadence_io/test_console.py
# Unit tests for the shared console proxy

from rich.console import Console

from cadence.cadence_io.console import console, reset_console


# * swapping the target keeps module-level references valid
def test_swap_and_reset():
    recorder = Console(record=True, width=42)
    console._set_console(recorder)
    try:
        assert console.width == 42
        console.print("hello")
        assert "hello" in recorder.export_text()
    finally:
        fresh = reset_console()

    assert console._get_console() is fresh
    assert fresh is not recorder
    assert isinstance(fresh, Console)
