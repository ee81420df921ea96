import math
from datetime import datetime, timedelta, timezone

import pytest

from switchyard.ramp import CommandDelay, Ramp

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_command_delay_zero_arms_immediately():
    cd = CommandDelay(timedelta(0))
    cd.set_target(datetime.now(timezone.utc), 5000.0)
    assert cd.armed == 5000.0


def test_command_delay_blocks_until_due():
    cd = CommandDelay(timedelta(seconds=2))
    cd.set_target(T0, 5000.0)
    assert cd.poll(T0 + timedelta(seconds=1)) is None
    assert cd.poll(T0 + timedelta(seconds=2)) == 5000.0


def test_command_delay_keeps_armed_value_until_reset():
    cd = CommandDelay(timedelta(seconds=1))
    cd.set_target(T0, 100.0)
    assert cd.armed is None
    assert cd.poll(T0 + timedelta(seconds=5)) == 100.0
    cd.set_target(T0 + timedelta(seconds=5), 200.0)
    assert cd.poll(T0 + timedelta(seconds=5)) == 100.0
    cd.reset()
    assert cd.poll(T0 + timedelta(seconds=10)) is None
    assert cd.armed is None


def test_ramp_step_limit():
    r = Ramp(1000.0, 0.0)
    r.set_target(5000.0)
    assert r.advance(timedelta(seconds=1)) == 1000.0
    assert r.advance(timedelta(seconds=1)) == 2000.0
    assert r.advance(timedelta(seconds=2)) == 4000.0


def test_ramp_pass_through_when_infinite():
    r = Ramp(math.inf, 0.0)
    r.set_target(5000.0)
    assert r.advance(timedelta(milliseconds=1)) == 5000.0


def test_ramp_ignores_nan_target():
    r = Ramp(1000.0, 0.0)
    r.set_target(5000.0)
    r.advance(timedelta(seconds=1))
    r.set_target(math.nan)
    v = r.advance(timedelta(seconds=1))
    assert math.isfinite(v)
    assert v == pytest.approx(2000.0, abs=1e-3)
    assert r.target == 5000.0


def test_ramp_moves_downward_and_settles():
    r = Ramp(1000.0, 0.0)
    r.set_target(-2500.0)
    assert r.advance(timedelta(seconds=1)) == -1000.0
    assert r.advance(timedelta(seconds=2)) == -2500.0
    assert r.actual == -2500.0


def test_snap_to_sets_both():
    r = Ramp(10.0, 0.0)
    r.set_target(500.0)
    r.snap_to(42.0)
    assert (r.actual, r.target) == (42.0, 42.0)
    assert r.advance(timedelta(seconds=1)) == 42.0