# utilkit

Small, self-contained helpers built on the Python standard library only.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `utilkit.params`: query strings to user records

`serialize_query_params(raw_query)` turns a query string such as

```
user_id=123&name=JohnDoe&age=30&address[city]=NewYork&address[state]=NY
&address[coordinates][lat]=40.7128&address[coordinates][lng]=-74.0060
&tags[]=go&tags[]=backend&metadata[key1]=value1
```

into a `User` dataclass. The `User` holds an `Address` with its `Coordinates`, a list of `tags` and a `metadata` dict. Unknown keys are ignored.

Fields that are absent keep their defaults:

| Field           | Default           |
|-----------------|-------------------|
| `name`          | `"Default Name"`  |
| `age`           | `20`              |
| `address.city`  | `"Default City"`  |
| `address.state` | `"Default State"` |

A malformed number, a bad `%` escape or a `;` separator raises `QueryParamError`.

`validate_user(user)` strips whitespace from the tags in place. It raises `ValidationError` in any of these cases:

- the name is blank,
- the age is not positive,
- a tag is empty,
- the city or state is blank.

`Coordinates.to_db_value()` encodes the coordinates as a `"lat,lng"` string. `Coordinates.from_db_value(value)` decodes that string back.

```python
from utilkit.params import serialize_query_params, validate_user

user = serialize_query_params("name=Jane&age=31&address[city]=Oslo&address[state]=OS")
validate_user(user)
print(user.address.city)  # Oslo
```

### `utilkit.config_loader`: layered `key=value` files

`load_config(files)` reads the files in order and returns a thread-safe `Config`. Values from later files override earlier ones.

`parse_config_file(filename)` reads a single file into a dict. It skips blank lines, lines starting with `#` and lines without `=`. `split_line(line)` splits at the first `=` and trims both sides.

`Config` offers these members:

- `get(key)` returns the value, or `None` when the key is absent.
- `merge(values)` adds more values.
- `data` is a snapshot dict.
- `in` and `len()` work as usual.

A file that cannot be opened or read raises `ConfigError`.

### `utilkit.calculator`

`add`, `subtract` and `multiply` work on integers. `divide` truncates toward zero and raises `ZeroDivisionError` when the divisor is zero.

### `utilkit.counter` and `utilkit.cmap`: thread-safe state

- `Counter` has `increment()` and `value()`.
- `KeyedCounter` keeps a count per key, with `increment(key)`, `decrement(key)` and `get_count(key)`. It raises `CounterError` in three cases:
  - the key is empty,
  - `get_count` is asked for a key that was never seen,
  - `decrement` would go below zero.
- `ConcurrentMap` has `set(key, value)` and `get(key)`. A missing key raises `KeyNotFoundError`, which is a `KeyError`.

### `utilkit.users`

`UserService` is an abstract class with `get_user(user_id)`. It has two implementations:

- `RealUserService` answers every id with a user named `"John Doe"`.
- `MockUserService(mock_data)` answers from a dict and returns `None` for an unknown id.

`new_user_service()` returns an empty `MockUserService`.

`UserProcessor(service).process_user_title(user_id)` returns `"Mr. <name>"`. It raises `LookupError` when the user is unknown.

### `utilkit.streams`

- `CustomReader(data).read(size)` serves bytes from memory and returns `b""` once the data is used up.
- `CustomWriter(filename)` creates or truncates a file. It can be used as a context manager.
- `copy_stream(reader, writer, buffer_size=8)` copies in chunks and returns the number of bytes copied.

### `utilkit.fileprocessor`

`FileProcessor(handler).process_file(filename)` works through a `FileHandler`. If the file is missing, it first creates it with the content `b"Hello, World!"`. It then opens the file, prints a line and returns the file name.

Two handlers are provided:

- `OSFileHandler` works on the real file system.
- `MemoryFileHandler` keeps its files in the dict `files`.

### `utilkit.fileops`

`open_and_process_file(file_path, opener=None)` opens a file, writes `b"some data"` to it and always closes it. A failure to open or to write raises `FileProcessError`.

The default opener opens the file read-only, so with the default opener the write step fails. Pass an opener that returns a writable object to actually write.

### `utilkit.transactions`

`execute_in_transaction(connection, callback)` begins a transaction on a `sqlite3.Connection` and calls `callback(cursor)`. It commits when the callback returns. If the callback raises, it rolls back and re-raises.

`insert_user(cursor, username)` and `user_exists(connection, username)` work on a `users` table that has a `username` column.

### `utilkit.structgen`

`go_type(value)`, `generate_go_struct(prefix, obj)` and `generate_config_source(obj)` render struct declarations, with `json` tags, describing a decoded JSON object.

`Preferences` and `UserPreferences` model a preferences document. `UserPreferences.from_dict` builds one from a dict and `to_dict` converts it back.

## Commands

| Command             | Arguments                                 | Defaults                                                         |
|---------------------|-------------------------------------------|------------------------------------------------------------------|
| `utilkit-params`    | `[query]`                                 | `query` is a built-in sample                                     |
| `utilkit-config`    | `[files ...] [--key KEY]`                 | `config1.txt config2.txt`, key `app_name`                        |
| `utilkit-copy`      | `[--text TEXT] [--output PATH] [--buffer-size N]` | `--output` is `output.txt`                               |
| `utilkit-structgen` | `[--input PATH] [--output PATH]`          | `../config/user_preferences.json` and `../config/auto_generated.go` |

What each command does:

- `utilkit-params` parses and validates a query string, then prints the resulting user.
- `utilkit-config` loads configuration files and prints the value of one key.
- `utilkit-copy` copies text into a file in small chunks.
- `utilkit-structgen` writes struct source generated from a JSON sample.

Each command exits with status 1 on error.

## What it does not do

- The user records from `utilkit.params` are not stored anywhere. There is no database model or persistence for them.
- There is no web server or request routing.
- `utilkit.transactions` only provides helpers around a connection you open yourself.