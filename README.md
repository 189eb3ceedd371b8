# thermokernel

Building blocks for thermal process control:

- `thermokernel.pid`: a PID controller with output clamping and an anti-windup limit on the integral term.
- `thermokernel.curve` and `thermokernel.polyline`: time-temperature curves built by linear interpolation between points.
- `thermokernel.kv_store`: an in-memory key-value store that hands out string keys of the form `prefix_id`.

The package depends only on the standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

## PID control

```python
from thermokernel.pid import PID, PIDConstants, PIDLimits

pid = PID(PIDConstants(kp=2.0, ki=0.5, kd=0.1), PIDLimits(output_min=-100.0, output_max=100.0))
output = pid.update(1.0, 200.0, 185.0)   # dt, desired, measurement
pid.reset()
```

`update` adds `error * dt` to the integral, clamps the integral to the limits, and returns `kp * error + ki * integral + kd * derivative` clamped to the limits. The derivative term is zero when `dt` is not positive. The controller's `state` (a `PIDState` with `prev_error` and `integral`) can be inspected; `reset` sets both back to `0.0`.

`PIDLimits` raises `ValueError` if either limit is NaN or if `output_min` is greater than `output_max`. Its `clamp(value)` method restricts a value to the range.

## Time-temperature curves

```python
from thermokernel.polyline import Polyline, FixedPolyline

curve = Polyline([(0.0, 20.0), (10.0, 100.0), (20.0, 50.0)])
curve.temperature_at(5.0)    # 60.0
curve.temperature_at(-5.0)   # 20.0, held at the first point
curve.temperature_at(25.0)   # 50.0, held at the last point

profile = FixedPolyline.from_array([(0.0, 10.0), (5.0, 20.0), (10.0, 30.0)])
profile.temperature_at(7.5)  # 25.0
```

Both classes are immutable and keep their points as a tuple in `points`. Errors are subclasses of `TimeTemperatureCurveError` (itself a `ValueError`) from `thermokernel.curve`:

- `EmptyPointsError`: `Polyline` was given no points.
- `DuplicateTimeError`: two neighbouring points (after sorting, for `Polyline`) have times closer than single-precision machine epsilon.
- `InvalidValueError`: a time or temperature is NaN or infinite. `temperature_at` raises it too when the time asked for is not finite.

`Polyline` sorts its points by time. `FixedPolyline.from_array` takes the points in the order given: it does not sort them and only compares each point's time with the one before it, so points must already be in ascending time order. It accepts an empty sequence, in which case `temperature_at` returns `0.0`.

To interpolate over a sorted sequence of points without building a curve, use `thermokernel.curve.polyline_temperature_at(points, time)`. New curve strategies can subclass `thermokernel.curve.TimeTemperatureCurve` and implement `temperature_at`.

## Key-value store

```python
from thermokernel.kv_store import PrefixedKvStore

store = PrefixedKvStore("curve")
key = store.insert({"name": "bisque"})   # "curve_0"
store.get("curve_0")                     # {"name": "bisque"}
store.get("other_0")                     # None, wrong prefix
store.remove("curve_0")                  # True
store.remove("curve_0")                  # False
len(store)                               # 0
```

Keys are numbered from 0 in insertion order and numbers are never reused after removal. `get` returns `None` and `remove` returns `False` for keys with the wrong prefix or a malformed number. `KvStore` is the abstract base class for other implementations.

## What the package does not do

It is a library only: there is no command-line tool, no connection to temperature sensors or heating hardware, and no control loop that runs on its own. `PrefixedKvStore` keeps everything in memory and does not save to disk.

## Running the tests

```
pip install .[test]
pytest
```