from procworld.timers import Scheduler


def test_timers_fire_in_due_order():
    scheduler = Scheduler()
    fired = []
    scheduler.schedule("a", 2.0, lambda: fired.append("a2"))
    scheduler.schedule("b", 1.0, lambda: fired.append("b1"))
    scheduler.schedule("a", 1.0, lambda: fired.append("a1"))
    assert scheduler.tick(0.5) == 0
    assert scheduler.tick(1.0) == 2
    assert fired == ["b1", "a1"]
    assert scheduler.tick(1.0) == 1
    assert fired == ["b1", "a1", "a2"]
    assert scheduler.pending() == 0


def test_cancel_owner_only_touches_that_owner():
    scheduler = Scheduler()
    fired = []
    scheduler.schedule("a", 1.0, lambda: fired.append("a"))
    scheduler.schedule("a", 2.0, lambda: fired.append("a"))
    scheduler.schedule("b", 1.0, lambda: fired.append("b"))
    assert scheduler.pending("a") == 2
    assert scheduler.cancel_owner("a") == 2
    assert scheduler.cancel_owner("a") == 0
    scheduler.tick(5.0)
    assert fired == ["b"]


def test_single_timer_cancel():
    scheduler = Scheduler()
    fired = []
    timer = scheduler.schedule("x", 1.0, lambda: fired.append(1))
    timer.cancel()
    assert not timer.active
    assert scheduler.pending() == 0
    scheduler.tick(2.0)
    assert fired == []


def test_timer_scheduled_from_callback_waits_for_its_delay():
    scheduler = Scheduler()
    fired = []

    def first():
        fired.append("first")
        scheduler.schedule("x", 1.0, lambda: fired.append("second"))

    scheduler.schedule("x", 1.0, first)
    scheduler.tick(1.0)
    assert fired == ["first"]
    scheduler.tick(1.0)
    assert fired == ["first", "second"]
