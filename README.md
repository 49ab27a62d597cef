# gcommon

A small toolkit of everyday building blocks:

- `gcommon.log`: one-line console logging with a message kind (`log`, `echo`).
- `gcommon.timeutil`: the current time as text (`time_now`) and a blocking `delay`.
- `gcommon.pool`: `ObjectPool`, a pool that builds objects in batches from a factory.
- `gcommon.jsonformat`: compact JSON output (`FastWriter`, `value_to_string`,
  `value_to_quoted_string`).
- `gcommon.styled`: human-friendly JSON output (`StyledWriter`, `StyledStreamWriter`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Logging, which writes `type=<kind>,msg=<msg>` lines to standard output:

```python
from gcommon.log import log

log("service started", "boot")
```

Time helpers:

```python
from gcommon.timeutil import delay, time_now

print(time_now(), end="")   # ctime form, ends with a newline
delay(1.5)                  # blocks for 1.5 seconds
```

Object pool:

```python
from gcommon.pool import ObjectPool

pool = ObjectPool(dict, 30)
item = pool.acquire()
# ... use item ...
pool.release(item)
```

When the pool runs empty, `acquire` builds another batch of the configured size.
A size of zero or less raises `ValueError`. `len(pool)` gives the number of free
objects.

JSON output:

```python
import sys
from gcommon.jsonformat import FastWriter
from gcommon.styled import StyledWriter, StyledStreamWriter

document = {"name": "demo", "values": [1, 2, 3]}

print(FastWriter().write(document), end="")
print(StyledWriter().write(document), end="")
StyledStreamWriter("\t").write(sys.stdout, document)
```

Values are plain Python objects: `None`, `bool`, `int`, `float`, `str`, lists or
tuples, and dicts with string keys. Object members are written in sorted key order.
`FastWriter` produces a single line (`enable_yaml_compatibility` adds a space after
each colon); the styled writers put short arrays of plain values on one line and
break objects and longer arrays over several lines.

## What it does not do

The package has no networking: it offers no socket helpers and no server, and it
installs no command-line program. It also has no integer/string conversion module;
use Python's `int` and `str` for that.