# zappygui

Building blocks for a graphical client of the Zappy game:

- `zappygui.buffer.CommunicationBuffer` collects raw text from the server
  and splits it into complete newline-terminated messages
  (`append_data`, `has_complete_message`, `extract_next_message`,
  `extract_all_messages`, `clear`, `empty`, `raw_buffer`, `len()`).
- `zappygui.core` describes server messages (`msz`, `bct`, `tna`, `pnw`,
  `ppo`, `plv`, `pin`, `pex`, `pbc`, `pic`, `pie`, `pfk`, `pdr`, `pgt`,
  `pdi`, `enw`, `ebo`, `edi`, `sgt`, `seg`, `smg`, `suc`, `sbp`) with
  `describe_message`, and keeps client state in the `Core` class
  (host, port, time unit, map size, whether the grid is ready).
  `CoreError` is raised for bad or missing arguments.
- `zappygui.vector3.Vector3`, `zappygui.matrix.Matrix`,
  `zappygui.rectangle.Rectangle`, `zappygui.ray.Ray` /
  `zappygui.ray.RayCollision` and `zappygui.camera2d.Camera2D` provide
  immutable vector, matrix, rectangle, ray-collision and 2D-camera math.
- `zappygui.text` and `zappygui.files` hold small string and file/path
  helpers (`text_split`, `text_to_pascal`, `get_file_extension`,
  `get_directory_path`, `FileData`, `FileText`, and more).
- `zappygui.errors.RaylibError` is a `RuntimeError` whose `trace_log`
  method writes its message to the `zappygui` logger.

## Installation

```
pip install .
```

## Command line

```
zappygui -p PORT -h MACHINE
```

Both `-p` and `-h` are required, in either order. With any other shape
of arguments the command prints its usage line and exits with status 84.
If the port is not a number, is out of range, or the port or host ends up
missing (for example `-p 0`), it prints `Core error: ...` on standard
error and exits with status 1. Otherwise it exits with status 0.

## Library use

Splitting a stream of server data into messages:

```python
from zappygui.buffer import CommunicationBuffer

buf = CommunicationBuffer()
buf.append_data("msz 10 10\nsgt 10")
buf.extract_all_messages()   # ["msz 10 10"]
buf.append_data("0\n")
buf.extract_all_messages()   # ["sgt 100"]
```

Describing a server message:

```python
from zappygui.core import describe_message

describe_message("msz 10 12")
# ["Received: msz 10 12", "Map size: 10x12"]
```

Feeding data into a client state (arguments are given without the
program name, as on the command line):

```python
from zappygui.core import Core

core = Core(["-p", "4242", "-h", "localhost"])
core.feed("msz 20 15\nsgt 100\n")   # prints the reports, returns both messages
core.map_width, core.map_height     # (20, 15)
core.time_unit                      # 100
```

Vector math:

```python
from zappygui.vector3 import Vector3

a = Vector3(1.0, 0.0, 0.0)
b = Vector3(0.0, 1.0, 0.0)
str(a.cross_product(b))      # "Vector3(0.000000, 0.000000, 1.000000)"
```

## What it does not do

The package does not open a network connection to a Zappy server, send
commands, or open a window and draw the map. The `zappygui` command only
checks its arguments and sets up a `Core`; data has to be handed to
`Core.feed` by the caller.

## Running the tests

```
pip install .[test]
pytest
```