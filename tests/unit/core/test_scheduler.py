# tests/unit/core/test_scheduler.py
# Unit tests for the cooperative frame scheduler

from cadence.core.scheduler import CooperativeScheduler, FrameScheduler


def test_implements_protocol():
    assert isinstance(CooperativeScheduler(), FrameScheduler)


# * deferred callbacks run FIFO before repeating ones
def test_frame_order():
    scheduler = CooperativeScheduler()
    calls = []
    scheduler.schedule_repeating(lambda: calls.append("tick"))
    scheduler.call_soon(lambda: calls.append("a"))
    scheduler.call_soon(lambda: calls.append("b"))

    scheduler.run_frame()

    assert calls == ["a", "b", "tick"]
    assert scheduler.frame_count == 1


# * a callback queued from inside a drain waits for the next frame
def test_nested_call_soon_deferred_to_next_frame():
    scheduler = CooperativeScheduler()
    calls = []

    def outer():
        calls.append("outer")
        scheduler.call_soon(lambda: calls.append("inner"))

    scheduler.call_soon(outer)
    scheduler.run_frame()
    assert calls == ["outer"]
    assert scheduler.pending_count == 1

    scheduler.run_frame()
    assert calls == ["outer", "inner"]


def test_cancelled_one_shot_is_skipped():
    scheduler = CooperativeScheduler()
    calls = []
    handle = scheduler.call_soon(lambda: calls.append("x"))
    scheduler.cancel(handle)

    assert scheduler.pending_count == 0
    scheduler.run_frame()
    assert calls == []
    assert not handle.active


def test_one_shot_runs_once():
    scheduler = CooperativeScheduler()
    calls = []
    handle = scheduler.call_soon(lambda: calls.append("x"))
    scheduler.run_frame()
    scheduler.run_frame()

    assert calls == ["x"]
    assert handle.done


def test_cancel_repeating_and_none():
    scheduler = CooperativeScheduler()
    calls = []
    handle = scheduler.schedule_repeating(lambda: calls.append("tick"))
    scheduler.run_frame()
    scheduler.cancel(handle)
    scheduler.cancel(None)
    scheduler.run_frame()

    assert calls == ["tick"]
    assert scheduler.repeating_count == 0


def test_run_until_idle():
    scheduler = CooperativeScheduler()
    calls = []
    scheduler.call_soon(lambda: scheduler.call_soon(lambda: calls.append("second")))

    frames = scheduler.run_until_idle()

    assert frames == 2
    assert calls == ["second"]


def test_close_cancels_everything():
    scheduler = CooperativeScheduler()
    soon = scheduler.call_soon(lambda: None)
    repeating = scheduler.schedule_repeating(lambda: None)
    scheduler.close()

    assert soon.cancelled and repeating.cancelled
    assert scheduler.pending_count == 0
    assert scheduler.repeating_count == 0
