# carcinusdb

The start of a small SQL database engine. At the moment it has:

- a command-line entry point that checks the server settings and logs them,
- a pager (`carcinusdb.pager.Pager`) that reads and writes 4096-byte pages in
  an exclusively locked database file, with synchronous writes, reading whole
  file-system blocks when pages are smaller than a block,
- page layouts (`carcinusdb.storage`) for the configuration page, page headers,
  slotted B-tree pages and cells,
- `carcinusdb.database.Database`, which opens a file and reads its
  configuration page,
- `carcinusdb.server.TcpServer`, which binds a listening socket,
- byte helpers: big-endian readers (`carcinusdb.binary`), struct
  reinterpretation (`carcinusdb.cast`) and header/content buffers
  (`carcinusdb.buffer`).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
carcinusdb run --database-file-path data.db --hostname 127.0.0.1 --port 5432
```

The same works as `python -m carcinusdb.cli run ...`. Short options: `-D`,
`-H` and `-P`; `--version` (or `-V`) prints `0.1.0`.

- `--hostname` must be four numbers from 0 to 255 separated by dots.
- `--port` must be between 1024 and 49151.

An invalid value stops the command with an error message. With valid values
the command logs the file path, hostname and port and exits with status 0.

## Library use

Pages and the configuration page:

```python
from carcinusdb.pager import Pager
from carcinusdb.storage import ConfigPage

with Pager("data.db") as pager:
    pager.write(0, ConfigPage(version=1, page_size=4096).to_bytes().ljust(4096, b"\0"))
    pager.flush()
    pager.sync()
    page = pager.read(0)

config = ConfigPage.from_bytes(page)
print(config.version, config.page_size)   # 1 4096
```

`Pager` creates the file if needed and holds an exclusive lock on it until
`close()` (or the end of the `with` block); opening a file that is already
locked raises `OSError`.

Opening a database whose first page holds a configuration record:

```python
from carcinusdb.database import Database

with Database.init("data.db") as db:
    print(db.config)   # Config(version=1, page_size=4096)
```

A file with no configuration record raises `carcinusdb.errors.InvalidBytes`.

Page structures:

```python
from carcinusdb.storage import Cell, Page

cell = Cell(b"abc")
cell.total_size()     # 16: 8-byte header plus content padded to 8 bytes
cell.storage_size()   # 18: plus a 2-byte slot

page = Page()         # 4096 bytes, 6-byte header
len(page), page.is_empty(), page.header().free_space   # 0, True, 4090
```

Binding the server socket:

```python
import asyncio
from carcinusdb.server import start

print(asyncio.run(start("127.0.0.1", 0)))   # ('127.0.0.1', <bound port>)
```

## Errors

Every error the package raises itself is a subclass of
`carcinusdb.errors.DatabaseError`: `InvalidBytes` (input ran out before a
value could be read), `InvalidHostname`, `InvalidFilePath`, `InvalidPort`, and
under `UtilsError` the byte-helper errors `InvalidAlignment`, `SizeMismatch`
and `InvalidAllocation`. File-system failures come through as `OSError`.

## What it does not do yet

- There is no SQL: no parser, no query execution and no B-tree operations on
  pages; cells and pages can be built and measured but not inserted or
  searched.
- The `run` command only validates and logs its settings; it neither opens the
  database nor starts the server.
- `TcpServer.run()` binds the socket, logs the address and closes it again; it
  does not accept clients or answer requests.