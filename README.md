# aimdtools

Small building blocks for ab initio molecular dynamics codes.

## Contents

- `aimdtools.constants`: CODATA 2018 physical constants and atomic-unit
  conversion factors, such as `BOLTZMANN_CONSTANT_K`, `ENERGY_J_TO_ATOMIC_UNIT`
  and `DALTON_TO_AU`. It also holds a few mathematical constants and the
  `ErrorCode` enum (`FAILURE`, `SUCCESS`, `ERROR`, `WARNING`).
- `aimdtools.vec3d`: `Vec3d`, a mutable three-component vector.
  `subtract(other)` returns a new vector and `norm_squared()` returns the
  squared length.
- `aimdtools.standard_grid`: the SG-2 and SG-3 standard integration grids
  for atomic numbers 0 to 118. Atomic number 0 is a placeholder entry.
  - `GridScheme.SG2` and `GridScheme.SG3` select the grid.
  - `standard_grid_shells(z, scheme)` returns the `(n_radial, n_angular)`
    shells.
  - `standard_grid_point_num` gives the total number of points.
  - `standard_grid_radial_point_num` gives the number of radial points.
  - `standard_grid_angular_point_num(z, scheme, radial_point_idx)` gives the
    angular grid size at a radial point, or 0 past the last one.
  - An atomic number outside the range raises `ValueError`.
- `aimdtools.thread_pool`: `ThreadPool(threadpool_size=0, task_queue_size=4096)`.
  Each worker thread has its own bounded FIFO queue, and a size of 0 starts one
  worker per CPU.
  - `add_task(worker_id, func, argument)` blocks while that worker's queue is
    full.
  - `wait_job_done()` blocks until all submitted tasks have finished. It then
    re-raises the first exception a task raised.
  - `close()`, or leaving a `with` block, stops the workers and discards tasks
    that have not started.
  - `n_workers` and `n_active_tasks` report the pool's state.
- `aimdtools.time_util`: timers, short sleeps and a timestamp string.
  - `cpu_time()` and `wall_time()` return readings in seconds.
  - `diff_time_ms(t1, t2)` returns the difference in milliseconds.
  - `sleep_ms(ms)`, `sleep_1ms()` and `sleep_5ms()` sleep for the given time.
  - `current_time_str()` returns the local time as `YYYY-MM-DD HH:MM:SS`.
- `aimdtools.utf8`: UTF-8 decoding and encoding, plus helpers that work on
  code point lists.
  - `utf8_len(data)` and `utf8_codepoints(data, max_count)` stop at a
    truncated final sequence and raise `ValueError` on an invalid lead byte.
  - `utf8_encode(codepoint)` returns the encoded bytes.
  - `codepoints_to_str` keeps the low 8 bits of each code point.
  - `str_to_codepoints` turns a string into its code points.
  - `codepoints_equal` and `codepoints_equal_str` compare sequences.
  - `codepoints_to_int`, `codepoints_to_uint` and `codepoints_to_float` parse a
    leading number in the manner of `strtoll`, `strtoull` and `strtod`. They
    return 0 when there is no number.
  - `print_utf8_codepoints(codepoints, end)` writes the code points to standard
    output.

## Installation

```
pip install .
```

## Examples

```python
from aimdtools.standard_grid import (
    GridScheme,
    standard_grid_angular_point_num,
    standard_grid_point_num,
    standard_grid_radial_point_num,
)

print(standard_grid_point_num(1, GridScheme.SG2))             # 7094
print(standard_grid_radial_point_num(1, GridScheme.SG2))      # 75
print(standard_grid_angular_point_num(1, GridScheme.SG2, 0))  # 6
```

```python
from aimdtools.utf8 import utf8_codepoints, utf8_encode

print(utf8_codepoints("$£€".encode()))  # [36, 163, 8364]
print(utf8_encode(0x20AC))              # b'\xe2\x82\xac'
```

The thread pool can be used as a context manager:

```python
from aimdtools.thread_pool import ThreadPool

with ThreadPool(4, 64) as pool:
    for i in range(100):
        pool.add_task(i % 4, print, i)
    pool.wait_job_done()
```

## What this package does not do

The package has no thermostats and no velocity initialisation. It has no
integrator and no way to run a dynamics simulation. There is no command-line
program.

## Running the tests

```
pip install .[test]
pytest
```