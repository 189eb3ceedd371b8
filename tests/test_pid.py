import pytest

from thermokernel.pid import PID, PIDConstants, PIDLimits, PIDState


def default_limits():
    return PIDLimits(output_min=-100.0, output_max=100.0)


def make_pid(kp, ki, kd, limits=None):
    return PID(PIDConstants(kp=kp, ki=ki, kd=kd), limits or default_limits())


def test_zero_error():
    pid = make_pid(1.0, 0.0, 0.0)
    assert pid.update(1.0, 10.0, 10.0) == 0.0


def test_proportional():
    pid = make_pid(2.0, 0.0, 0.0)
    assert pid.update(1.0, 10.0, 8.0) == 4.0


def test_integral():
    pid = make_pid(0.0, 1.0, 0.0)
    assert pid.update(1.0, 10.0, 8.0) == 2.0
    assert pid.update(1.0, 10.0, 8.0) == 4.0


def test_derivative():
    pid = make_pid(0.0, 0.0, 1.0)
    pid.update(1.0, 10.0, 8.0)
    assert pid.update(1.0, 10.0, 9.0) == -1.0


def test_clamping():
    pid = make_pid(100.0, 0.0, 0.0, PIDLimits(output_min=-10.0, output_max=10.0))
    assert pid.update(1.0, 10.0, 0.0) == 10.0


def test_reset():
    pid = make_pid(1.0, 1.0, 1.0)
    pid.update(1.0, 10.0, 8.0)
    pid.reset()
    assert pid.state.prev_error == 0.0
    assert pid.state.integral == 0.0


def test_setpoint_change():
    pid = make_pid(1.0, 0.0, 0.0)
    assert pid.update(1.0, 10.0, 8.0) == 2.0
    assert pid.update(1.0, 20.0, 8.0) == 12.0


def test_integral_windup():
    pid = make_pid(0.0, 1.0, 0.0, PIDLimits(output_min=-5.0, output_max=5.0))
    for _ in range(20):
        pid.update(1.0, 10.0, 0.0)
    assert pid.state.integral == 5.0
    assert pid.update(1.0, 10.0, 0.0) == 5.0


def test_zero_dt_has_no_derivative():
    pid = make_pid(0.0, 0.0, 1.0)
    assert pid.update(0.0, 10.0, 8.0) == 0.0
    assert pid.state.prev_error == 2.0


def test_initial_state_is_zero():
    pid = make_pid(1.0, 1.0, 1.0)
    assert pid.state == PIDState(prev_error=0.0, integral=0.0)


def test_negative_output_clamped():
    pid = make_pid(100.0, 0.0, 0.0, PIDLimits(output_min=-10.0, output_max=10.0))
    assert pid.update(1.0, 0.0, 10.0) == -10.0


@pytest.mark.parametrize("low, high", [(5.0, -5.0), (float("nan"), 1.0), (0.0, float("nan"))])
def test_invalid_limits(low, high):
    with pytest.raises(ValueError):
        PIDLimits(output_min=low, output_max=high)