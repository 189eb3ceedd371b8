"""PID controller with output clamping and integral anti-windup."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class PIDConstants:
    """Proportional, integral and derivative gains."""

    kp: float
    ki: float
    kd: float


@dataclass
class PIDState:
    """Values carried between controller updates."""

    prev_error: float = 0.0
    integral: float = 0.0


@dataclass
class PIDLimits:
    """Bounds applied to both the integral term and the controller output."""

    output_min: float
    output_max: float

    def __post_init__(self) -> None:
        if math.isnan(self.output_min) or math.isnan(self.output_max):
            raise ValueError("output limits must not be NaN")
        if self.output_min > self.output_max:
            raise ValueError(
                f"output_min ({self.output_min}) is greater than output_max ({self.output_max})"
            )

    def clamp(self, value: float) -> float:
        """Return ``value`` restricted to ``[output_min, output_max]``."""
        return min(max(value, self.output_min), self.output_max)


@dataclass
class PID:
    """A discrete PID controller."""

    constants: PIDConstants
    limits: PIDLimits
    state: PIDState = field(default_factory=PIDState)

    def update(self, dt: float, desired: float, measurement: float) -> float:
        """Advance the controller by ``dt`` and return the clamped output."""
        error = desired - measurement
        # Anti-windup: the accumulated integral never leaves the output range.
        self.state.integral = self.limits.clamp(self.state.integral + error * dt)
        derivative = (error - self.state.prev_error) / dt if dt > 0.0 else 0.0
        output = (
            self.constants.kp * error
            + self.constants.ki * self.state.integral
            + self.constants.kd * derivative
        )
        self.state.prev_error = error
        return self.limits.clamp(output)

    def reset(self) -> None:
        """Forget the accumulated integral and the previous error."""
        self.state.prev_error = 0.0
        self.state.integral = 0.0