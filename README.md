# pypipex

`pypipex` is a small library of helpers that follow C conventions. It has ASCII
character tests, 32-bit integer parsing, NUL-terminated string operations, a
singly linked list, and a `printf`-style formatter with its own rules for flags,
width and precision.

## Installation

```
pip install .
```

## Modules

### `pypipex.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `isupper` and `islower`
take a one-character string or an integer code and return a bool. `tolower` and
`toupper` change only ASCII letters. They return a string when given a string
and an integer when given an integer.

### `pypipex.numbers`

- `atoi(text)` skips leading whitespace and one sign, then reads decimal digits
  up to the first non-digit. The result wraps as a 32-bit signed integer:
  `atoi("  -42abc") == -42`.
- `atoi_base(text, base)` reads `text` using the digits of `base`, so
  `atoi_base("ff", "0123456789abcdef") == 255`. Any run of leading signs is
  skipped, and each `-` flips the sign. It returns 0 when the base is invalid
  or `text` holds a character that is neither a digit nor a sign.
- `itoa(n)` gives the decimal text of `n` taken as a 32-bit signed integer.
- `count_bits(number)` gives the number of significant bits. Zero counts as one bit.

### `pypipex.output`

`putchar`, `putstr`, `putendl` and `putnbr` write to `file`. That can be a text
stream, a raw file descriptor (an `int`), or `None` for standard output. Each
returns the number of characters written.

### `pypipex.strings`

These functions treat text as ending at its first NUL character:

- `split(text, sep)` splits on `sep` and drops empty pieces:
  `split("ls  -l -a", " ") == ["ls", "-l", "-a"]`.
- `strchr`, `strrchr` and `strnstr` return an index, or `None` when nothing is
  found. Searching for NUL gives the length of the string.
- `strncmp(s1, s2, n)` and `memcmp(a, b, n)` return the difference between the
  first pair of characters or bytes that differ, or 0.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple. It holds
  the resulting text and the length the result would have had without
  truncation.
- `strjoin`, `strtrim`, `substr`, `strmapi` and `memchr` complete the set.

### `pypipex.lists`

`LinkedList` is a chain of `Node` objects (`content`, `next`) that starts at
`head`. It has these methods:

- `add_front` and `add_back`
- `last`
- `clear(delete)`, which passes each content to `delete`
- `for_each(f)`
- `map(f, delete)`, which raises `ValueError` if `f` returns `None`

It also supports `len()` and iteration.

### `pypipex.printf_numbers`

`Flags` holds `left_align`, `sign_plus`, `space`, `hashtag`, `zero`, `width`
and `precision`. A `precision` of `None` means no `.` was given. Three functions
turn a value and its `Flags` into the text of one conversion:

- `format_integer(number, flags)` for `%d` and `%i`; values wrap to a signed 32-bit integer.
- `format_unsigned(number, flags)` for `%u`; values wrap to an unsigned 32-bit integer.
- `format_hex(number, flags, token)` for `%x` or `%X`.

### `pypipex.printf`

- `sprintf(fmt, *args)` returns the formatted text. It handles
  `%c %s %p %d %i %u %x %X %%` with the flags `-`, `+`, space, `#`, `0`, a
  width and a `.precision`. Unknown conversion characters produce no output.
- `printf(fmt, *args)` writes the same text to standard output and returns its
  length.

```python
>>> from pypipex.printf import sprintf
>>> sprintf("%5d|%-4s|%#x", 42, "ab", 255)
'   42|ab  |0xff'
```

`sprintf` raises `ValueError` for a `None` format or a format that is only
`"%"`. It raises `TypeError` when there are too few arguments.

The lower-level pieces are also available:

- `parse_flags(fmt, pos)` returns the `Flags` and the index of the conversion character.
- `format_char` handles `%c`.
- `format_str` handles `%s`. `None` prints as `(null)`.
- `format_pointer` handles `%p`. A null address prints as `(nil)`.

## What this package does not do

The package has no command to run. It cannot start processes, connect commands
with pipes, redirect files into a pipeline, or read here-document input. It has
no line reader for file descriptors. It is a library of the helpers listed
above and nothing more.

## Running the tests

```
pip install ".[test]"
pytest
```