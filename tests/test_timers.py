from burstvis.timers import ManualClock


def test_manual_clock():
    clock = ManualClock(1.5)
    assert clock() == 1.5
    clock.advance(0.5)
    assert clock() == 2.0
    clock.set(10)
    assert clock() == 10


def test_call_later_fires_once_when_due(clock, scheduler):
    fired = []
    timer = scheduler.call_later(0.5, fired.append, "x")

    scheduler.run_pending()
    assert fired == []

    clock.advance(0.5)
    scheduler.run_pending()
    assert fired == ["x"]
    assert not timer.active

    clock.advance(5)
    scheduler.run_pending()
    assert fired == ["x"]


def test_call_every_repeats(clock, scheduler):
    fired = []
    scheduler.call_every(0.5, lambda: fired.append(clock()))

    for _ in range(10):
        clock.advance(0.25)
        scheduler.run_pending()

    assert len(fired) == 5


def test_cancel_prevents_further_firing(clock, scheduler):
    fired = []
    timer = scheduler.call_every(0.8, fired.append, 1)

    clock.advance(0.8)
    scheduler.run_pending()
    assert fired == [1]

    timer.cancel()
    assert scheduler.pending == 0

    clock.advance(10)
    scheduler.run_pending()
    assert fired == [1]


def test_cancel_is_idempotent(scheduler):
    timer = scheduler.call_later(1, lambda: None)
    timer.cancel()
    timer.cancel()
    assert scheduler.pending == 0


def test_cancel_only_removes_its_own_event(clock, scheduler):
    fired = []
    first = scheduler.call_later(0.8, fired.append, "first")
    scheduler.call_later(0.8, fired.append, "second")

    first.cancel()
    clock.advance(1)
    scheduler.run_pending()

    assert fired == ["second"]


def test_zero_delay_timer_added_while_running_fires_in_same_pass(clock, scheduler):
    fired = []

    def chain():
        fired.append("outer")
        scheduler.call_later(0, fired.append, "inner")

    scheduler.call_later(0.1, chain)
    clock.advance(0.1)
    scheduler.run_pending()

    assert fired == ["outer", "inner"]


def test_cancel_after_one_shot_fired_leaves_others_queued(clock, scheduler):
    fired = []
    done = scheduler.call_later(0.1, fired.append, "done")
    scheduler.call_later(1.0, fired.append, "later")

    clock.advance(0.1)
    scheduler.run_pending()
    done.cancel()

    assert scheduler.pending == 1
    clock.advance(1.0)
    scheduler.run_pending()
    assert fired == ["done", "later"]
