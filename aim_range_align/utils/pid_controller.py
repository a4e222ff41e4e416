"""
PID Controller implementation
"""
import math
import time
import numpy as np

from aim_range_align.utils.helpers import input_modulus


class PID:
    """
    PID Controller with optional continuous (wrapping) input

    The previous error starts at zero, so the first step after reset() includes
    a derivative term of kd * error / dt. The integral contribution ki * i is
    held within +/- i_limit. Output is unbounded unless out_limit is set.
    """
    def __init__(self, kp=0.0, ki=0.0, kd=0.0, i_limit=1.0, out_limit=math.inf,
                 period=None, clock=time.time):
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.i_limit = abs(i_limit)
        self.out_limit = abs(out_limit)
        self.period = period
        self.clock = clock
        self.continuous = False
        self.min_input = 0.0
        self.max_input = 0.0
        self.i = 0.0
        self.prev_e = 0.0
        self.prev_t = None

    def enable_continuous_input(self, min_input: float, max_input: float):
        """Treat errors as the shortest signed distance on [min_input, max_input]."""
        self.continuous = True
        self.min_input = min_input
        self.max_input = max_input

    def reset(self):
        self.i = 0.0
        self.prev_e = 0.0
        self.prev_t = None

    def wrap_error(self, e: float) -> float:
        if not self.continuous:
            return e
        bound = (self.max_input - self.min_input) / 2.0
        return input_modulus(e, -bound, bound)

    def _dt(self) -> float:
        if self.period is not None:
            return self.period
        t = self.clock()
        dt = 0.0 if self.prev_t is None else max(1e-3, t - self.prev_t)
        self.prev_t = t
        return dt

    def step(self, e: float) -> float:
        e = self.wrap_error(e)
        dt = self._dt()
        p = self.kp * e
        if self.ki != 0.0:
            i_bound = self.i_limit / abs(self.ki)
            self.i = float(np.clip(self.i + e * dt, -i_bound, i_bound))
        # Measured-dt mode has no interval on its first step
        d = 0.0 if dt <= 0.0 else self.kd * (e - self.prev_e) / dt
        self.prev_e = e
        u = p + self.ki * self.i + d
        return float(np.clip(u, -self.out_limit, self.out_limit))

    def calculate(self, measurement: float, setpoint: float = 0.0) -> float:
        """Drive measurement toward setpoint."""
        return self.step(setpoint - measurement)
