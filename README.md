# switchyard

Building blocks for simulating how electrical devices in a microgrid
respond to control: power envelopes that can be narrowed for a while,
smooth derating near state-of-charge limits, command latency, slew-rate
limited tracking, scalar inputs driven by callables, and three-phase
splitting of totals.

## Modules

- `switchyard.bounds`
  - `Bounds(lower, upper)`: a closed interval; `None` on a side means
    unbounded. Has `contains`, `intersect` and `is_empty`.
  - `VecBounds(bounds)`: a list of intervals sorted by lower edge.
    `VecBounds.single(lower, upper)` builds a one-interval container.
    `contains(value)`, `clamp(value)` (pulls a value to the nearest edge;
    ties go to the lower edge), `intersect(other)` (merges overlapping
    results) and `VecBounds.sum_single(items)` (sums the first interval
    of each container, skipping empty ones).
  - `ComponentBounds(rated)` / `ComponentBounds.from_rated(lower, upper)`:
    rated bounds plus a queue of augmentations. `add_augmentation(create_ts,
    bounds, lifetime)` narrows the envelope, `drop_expired(now)` removes
    augmentations whose lifetime has passed, `effective()` returns the
    rated bounds intersected with every live augmentation, and
    `contains` / `clamp` work on that effective envelope. `set_rated`,
    `rated_lower` and `rated_upper` read and replace the rated pair.
- `switchyard.decay`
  - `bounded_exp_decay(start, stop, val, base=1.2, min_val=0.3)`: a
    multiplier that is 1 before `start`, tapers towards about `min_val`
    and snaps to 0 at and beyond `stop`.
  - `SocProtect(soc_lower_pct, soc_upper_pct, margin_pct)` and
    `soc_protected_bounds(rated_lower, rated_upper, soc, protect)`: taper
    the charge limit near the upper SoC limit and the discharge limit
    near the lower one. A margin of 0 returns the rated pair unchanged.
- `switchyard.ramp`
  - `CommandDelay(delay)`: `set_target(now, value)` holds a value that
    `poll(now)` arms once `delay` has elapsed; a zero delay arms at once.
    `armed` reads the armed value, `reset()` clears it.
  - `Ramp(rate_w_per_s, initial)`: `set_target` (NaN is ignored),
    `snap_to`, and `advance(dt)`, which moves `actual` towards `target`
    by at most `rate * dt`. An infinite rate passes the target straight
    through.
- `switchyard.dynamic_scalar`
  - `DynamicScalar`: `DynamicScalar.constant(value)` or
    `DynamicScalar.from_callable(source, fallback)`. `refresh()` calls the
    source and caches its result; exceptions, non-numeric and non-finite
    results are logged and the previous value is kept. `get`, `set` and
    `is_dynamic` read and override the cache.
- `switchyard.meter`
  - `split_per_phase(total_w, voltage)`: voltage-weighted split of a total
    over three phases (zeros when the voltages sum to zero).
  - `per_phase_apparent_current(p, q, v)`: `sqrt(P^2 + Q^2) / V` per phase,
    zero where the voltage is zero.

Durations (`lifetime`, `delay`, `dt`) may be given as `datetime.timedelta`
or as a number of seconds.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## A short example

```python
from datetime import datetime, timedelta, timezone

from switchyard.bounds import ComponentBounds, VecBounds
from switchyard.decay import SocProtect, soc_protected_bounds
from switchyard.ramp import Ramp

bounds = ComponentBounds.from_rated(-100.0, 100.0)
bounds.add_augmentation(
    datetime.now(timezone.utc),
    VecBounds.single(-50.0, 50.0),
    timedelta(seconds=60),
)
print(bounds.effective())   # [-50, 50]
print(bounds.clamp(80.0))   # 50.0

ramp = Ramp(1000.0, 0.0)
ramp.set_target(5000.0)
print(ramp.advance(timedelta(seconds=1)))  # 1000.0

protect = SocProtect(soc_lower_pct=10.0, soc_upper_pct=90.0, margin_pct=10.0)
print(soc_protected_bounds(-30000.0, 30000.0, 50.0, protect))  # (-30000.0, 30000.0)
```

## What this package does not do

It provides the primitives only. There are no device models (batteries,
inverters, EV chargers, grid connection points, meters that aggregate
their children), no component registry or topology, no physics tick loop,
no telemetry history or event stream, and no network service or
command-line tool. Those are left to the code that uses these building
blocks.