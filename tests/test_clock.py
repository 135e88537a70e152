from core.clock import SceneClock


def test_step_accumulates():
    clock = SceneClock()
    clock.step(0.5)
    assert clock.step(0.25) == 0.75
    assert clock.frames == 2


def test_pause_freezes_time():
    clock = SceneClock()
    clock.step(1.0)
    clock.toggle_pause()
    assert clock.step(1.0) == 1.0
    clock.toggle_pause()
    assert clock.step(1.0) == 2.0


def test_negative_dt_ignored():
    clock = SceneClock(start=3.0)
    assert clock.step(-1.0) == 3.0
    clock.reset()
    assert clock.elapsed == 0.0
