# corekit

A handful of small, independent helpers, one per module. Only the standard library is used; Python 3.10 or later.

| Module | What it offers |
| --- | --- |
| `corekit.hashing` | `format_value`: plain text form of a value (`true`/`false`, `3.14`, `(1+2i)`, `[1 2]`, `map[a:1]`, `<nil>`). `process_variables`: join formatted values, each followed by a space, and return that string with the hex SHA-256 of a salted form of it |
| `corekit.slices` | `generate_random_slice` (integers 0 to 99; a negative size raises `ValueError`), `even_numbers`, `add_element`, `copy_slice`, `remove_element` (an out-of-range index returns the list unchanged) |
| `corekit.stringintmap` | `StringIntMap` with `add`, `remove`, `copy`, `exists`, `get`, and support for `in`, `len()` and iteration |
| `corekit.difference` | `find_difference`: items of the first list absent from the second, order and duplicates kept |
| `corekit.intersection` | `find_intersection`: `(has_common, common)`, the shared values once each, in order of first appearance in the second list |
| `corekit.randomgen` | `random_generator`: yields random integers 0 to 99 until a `threading.Event` is set (forever without one) |
| `corekit.merge` | `merge`: read several iterables in threads and yield their items as they arrive; ends when all are exhausted and re-raises an error from any source |
| `corekit.waitgroup` | `WaitGroup` with `add`, `done`, `wait` and a `count` property |
| `corekit.pipeline` | `pipeline`: lazily yield the cube of each integer 0 to 255 as a float; other values raise `ValueError` |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from corekit.hashing import process_variables
from corekit.difference import find_difference
from corekit.intersection import find_intersection
from corekit.stringintmap import StringIntMap
from corekit.pipeline import pipeline

combined, digest = process_variables([42, "test", 3.14])
# combined == "42 test 3.14 "; digest is a 64-character hex string

find_difference(["a", "b", "a", "c"], ["b"])               # ["a", "a", "c"]
find_intersection([65, 3, 58, 678, 64], [64, 2, 3, 43])   # (True, [64, 3])

counts = StringIntMap()
counts.add("one", 1)
counts.exists("one")   # True
counts.get("two")      # None

list(pipeline([1, 2, 3]))   # [1.0, 8.0, 27.0]
```

`StringIntMap.add` raises `TypeError` for a key that is not a `str` or a value that is not an `int`; `remove` ignores missing keys; `copy` returns an independent `dict`.

`WaitGroup` counts outstanding work. `add` raises `ValueError` if the counter would drop below zero. `wait` blocks until the counter is zero and returns `True`, or returns `False` if the optional timeout passes first:

```python
import threading
from corekit.waitgroup import WaitGroup

group = WaitGroup()
group.add(3)
for _ in range(3):
    threading.Thread(target=group.done).start()
group.wait()        # True
```

Stopping the random stream:

```python
import threading
from corekit.randomgen import random_generator

stop = threading.Event()
for n, value in enumerate(random_generator(stop)):
    if n == 4:
        stop.set()
```

## Command-line demos

Each module has a short demonstration:

```
corekit-hash
corekit-slices
corekit-map
corekit-difference
corekit-intersection
corekit-random [--seconds N]     # print random numbers for N seconds (default 5)
corekit-merge
corekit-waitgroup [--unit N]     # worker k sleeps k*N seconds (default 1)
corekit-pipeline
```

## What it does not do

These are in-process helpers only: nothing is stored, nothing is sent over a network, and the commands are fixed demonstrations rather than tools that take your own data.