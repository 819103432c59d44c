# ftkit

A small toolkit of everyday helpers:

- `ftkit.ascii`: ASCII character tests and case conversion (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`). Each takes an int code or a one-character string.
- `ftkit.memory`: byte-buffer operations on `bytearray` and bytes-like objects (`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`).
- `ftkit.convert`: lenient integer parsing and 32-bit integer formatting (`atoi`, `itoa`).
- `ftkit.strings`: searching, comparison, bounded copying, slicing, trimming, splitting and mapping (`strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`). Positions come back as indices, or `None` when nothing is found.
- `ftkit.linked`: a singly linked list (`Node`, `LinkedList` with `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration).
- `ftkit.output`: writing characters, strings and numbers to a file descriptor (`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`).
- `ftkit.printf`: a compact formatter supporting `%c %s %p %d %i %u %x %X %%` (`sprintf`, `printf`, `format_hex`, `format_pointer`, `format_number`, `format_unsigned`). Integers are taken with C widths: 32-bit for `%d %i %u %x %X`, 64-bit for `%p`, wrapping outside those ranges.
- `ftkit.nextline`: reading a file descriptor or binary file one line at a time through a fixed-size read buffer (`LineReader`, `get_next_line`). Lines are `bytes` and keep their trailing newline.
- `ftkit.chunks`: reading a file in fixed-size chunks (`read_chunks`).
- `ftkit.pipex`: running `< infile cmd1 | cmd2 > outfile` without a shell (`run_pipeline`, `find_command_path`, `has_path`, `PipexError`).

No third-party dependencies. Python 3.10 or later.

## Install

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.strings import split, strlcpy
from ftkit.printf import sprintf
from ftkit.linked import LinkedList

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strlcpy("hello", 3)            # ("he", 5)
sprintf("%s has %d items (%x)", "box", 255, 255)  # "box has 255 items (ff)"

items = LinkedList([1, 2, 3])
len(items)                     # 3
list(items.map(lambda x: x * 2))  # [2, 4, 6]
```

Reading lines from an open file descriptor:

```python
import os
from ftkit.nextline import LineReader

fd = os.open("example.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 42):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

`get_next_line(fd, buffer_size)` does the same one call at a time, keeping
unread text per descriptor between calls and returning `None` at the end.

## Commands

Print a demonstration of every `printf` conversion, each followed by the
number of characters it wrote:

```
ft-printf-demo
```

Print a file line by line, numbering the lines (default file `example.txt`,
read buffer set with `--buffer-size`):

```
ft-nextline example.txt
```

Print a file in fixed-size chunks, each preceded by its byte count
(default file `example02.txt`, chunk size 5; `--size` changes it and
`--no-count` leaves the counts out):

```
ft-chunks example.txt
```

Run two commands as a pipeline between two files, like
`< infile cmd1 | cmd2 > outfile` in a shell:

```
pipex infile "grep foo" "wc -l" outfile
```

Commands are split on spaces (no quoting) and looked up in the directories
of `PATH`. `pipex` exits with status 1 when `PATH` is missing or too short,
on a wrong number of arguments, or when the output file cannot be opened or
the second command cannot be found or started. A missing input file or a
first command that cannot be found is reported on stderr, and the second
command then runs on empty input; otherwise the exit status is that of the
second command.

## What it does not do

- `printf` has no flags, field widths, precisions or length modifiers; an
  unknown conversion character is printed as itself.
- `pipex` runs exactly two commands; it has no here-documents, no appending
  to the output file and no shell syntax in the commands.