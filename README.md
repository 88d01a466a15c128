# frogkit

A grab bag of small helpers for POSIX programs: string handling, small file
operations, single-value files under `/proc` and `/sys`, a local directory
sync, `$PATH` lookup, running shell commands, a telnet expect client and
terminal progress bars. It has no dependencies outside the standard library.

## Modules

### `frogkit.strutil`

- `strtonum(numstr, minval, maxval)` parses a base-10 integer (leading
  whitespace and one sign allowed, nothing trailing) and checks it against the
  bounds. It raises `NumberError` (a `ValueError`) with the message
  `"invalid"`, `"too small"` or `"too large"`.
- `atonum(string)` parses a natural number from 0 to 2147483647 and returns
  `None` on any error.
- `strnmatch(string, candidates, num)` and `strmatch(string, candidates)`
  return the index of the first candidate that `string` is a case-insensitive
  prefix of. `strmatch` stops at the first `None` in the list. Both raise
  `ValueError` for a missing argument and `LookupError` when nothing matches.
- `strtrim(string)` strips leading and trailing whitespace.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return the string that
  fits in a buffer of `size` characters (terminator included) together with the
  length the full result would have had; truncation happened when that length
  is `>= size`.
- `strnlen(string, limit)` returns the length up to a NUL character, at most
  `limit`.
- `string_valid`, `string_match` (case-insensitive, over the shorter length),
  `string_compare` and `string_case_compare`.

### `frogkit.fileops`

- `touch(path)` and `touchf(fmt, *args)` update timestamps, creating the file
  if needed.
- `makedir(path, mode)` and `makefifo(path, mode)` ignore an existing entry;
  `erase(path)` ignores a missing one.
- `truncatef(length, fmt, *args)` truncates a file.
- `tempfile()` opens an anonymous read/write text file in `/tmp` that vanishes
  when closed.
- `chardev` and `blkdev` create device nodes.
- `fisslashdir(path)`, `is_exec(mode)` and the bit helpers `is_set`,
  `is_clear`, `is_other`, `set_bit`, `clear_bit`.

### `frogkit.procval`

- `readsnf(fmt, *args)` returns the first line of a file without its newline;
  it raises `EOFError` for an empty file.
- `readllf` reads an integer (decimal, `0x` hex or leading-`0` octal);
  `readdf` does the same but raises `OverflowError` for values outside a
  32-bit int.
- `writesf(text, mode, fmt, *args)`, `writellf` and `writedf` write a value
  and a newline, opening the file with the given mode.

### `frogkit.rsync`

`rsync(src, dst, options, filter)` copies a file or a directory tree. A source
directory without a trailing slash is recreated inside `dst`; with a trailing
slash only its contents are copied. `SyncOption.DELETE` removes destination
entries missing from the source, `SyncOption.KEEP_MTIME` keeps modification
times. `filter`, if given, is called with each entry name and skips the entry
when it returns false. The return value is the number of entries that could
not be copied; a missing source raises `FileNotFoundError`.

### `frogkit.which`

`which(cmd)` returns the path of an executable, searching `$PATH` unless `cmd`
is absolute, or `None`. Anything after the first whitespace is ignored, so
`which("ls -l")` looks for `ls`. `whichp(cmd)` is the boolean form.

### `frogkit.process`

- `systemf(fmt, *args)` runs a shell command and returns its exit status; it
  raises `InterruptedError` when the command is killed by a signal.
- `popenf(mode, fmt, *args)` opens a pipe (`"r"` or `"w"`) to or from a shell
  command.
- `runbg(cmd, delay)` runs an argument list detached in a new session after
  `delay` microseconds; its result cannot be collected.

### `frogkit.telnet`

`Telnet(addr, port)` connects (retrying while the connection times out) and is
a context manager. `Telnet.expect(script, output)` runs pairs of expected
string and response, then writes the output of the last command, up to the
returning prompt and less the echoed first line, to `output`.
`telnet_session(addr, port, script, output)` does all three steps at once.
Timeouts raise `TimeoutError`, a closed connection `ConnectionError`.

### `frogkit.progress`

- `ProgressBar(max_width, stream).update(percent)` redraws a bar with a
  spinner in place, hiding the cursor at 0 and showing it again at 100.
- `SimpleProgress(stream).update(percent)` prints a 40-character bar that only
  appends, for terminals without control characters.
- `Spinner(style)` cycles through a spinner style; `SPINNER_DEFAULT`,
  `SPINNER_THROB`, `SPINNER_PULSAR`, `SPINNER_ARROW` and `SPINNER_STAR` are
  provided.
- `progress(percent, max_width)` and `progress_simple(percent)` drive shared
  bars on stderr.

### `frogkit.yorn`

`yorn(fmt, *args)` prints a question on stderr, reads a single key (without
waiting for Enter on a terminal) and returns `True` for `y` or `Y`.

## Examples

```python
from frogkit.strutil import strtonum, strmatch
from frogkit.which import which
from frogkit.process import systemf
from frogkit.rsync import rsync, SyncOption

strtonum("42", 0, 100)                          # 42
strmatch("warn", ["none", "debug", "warning"])  # 2
which("ls")                                     # e.g. "/usr/bin/ls"
systemf("test -d %s", "/tmp")                   # 0
rsync("/srv/data/", "/backup/data/", SyncOption.DELETE | SyncOption.KEEP_MTIME, None)
```

Functions that take a format string and arguments build the path or command
with `%`-style formatting, as in `touchf("%s-bar", "/tmp/foo")`.

## What it does not do

- It is a library only; it installs no command-line programs.
- It targets POSIX systems. `runbg`, `yorn` on a terminal, `makefifo`,
  `chardev` and `blkdev` rely on POSIX-only calls.
- The telnet client sends and reads plain text; it does not negotiate telnet
  options.

## Install

```
pip install frogkit
```

## Tests

```
pip install "frogkit[test]"
python -m pytest
```