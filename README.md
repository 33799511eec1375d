# ftkit

`ftkit` is a small pure-Python library of C-style helpers. It provides ASCII character tests, byte-buffer operations, string utilities, a line reader that reads through a fixed-size buffer, and a compact printf-style formatter. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower` cover the ASCII range only. Each one takes a one-character string or an integer code. The case converters return the same kind of value they were given: `to_upper("a") == "A"` and `to_upper(97) == 65`.

### `ftkit.memory`

These functions work on `bytes` and `bytearray` objects:

- `bzero(buffer, n)` zeroes the first `n` bytes in place.
- `calloc(count, size)` returns a zero-filled `bytearray`. It raises `MemoryError` when `count * size` would overflow the platform size.
- `memchr(buffer, c, n)` returns the index of the first matching byte within `n` bytes, or `None` if there is none.
- `memcmp(first, second, n)` returns the difference of the first unequal bytes, or `0` if they all match.
- `memcpy(dest, src, n)` copies `n` bytes into `dest` and returns `dest`.
- `memmove(buffer, dst, src, length)` copies between two offsets of the same buffer. The regions may overlap.
- `memset(buffer, c, n)` fills the first `n` bytes with the low byte of `c`.

A negative count raises `ValueError`. A count longer than the buffer raises `IndexError`.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to any text stream. They write to standard output by default. `put_str(None)` and `put_endl(None)` write nothing.

### `ftkit.strings`

- `strlen` returns the length of a string.
- `strchr` and `strrchr` return the index of the first or the last occurrence of a character, or `None`. Searching for `"\0"` returns the string's length.
- `strncmp(first, second, n)` compares at most `n` characters.
- `strnstr(haystack, needle, max_len)` finds `needle` only where it lies wholly within the first `max_len` characters.
- `strdup` returns a string equal to its argument.

### `ftkit.text`

- `atoi` parses a leading decimal integer. It skips leading whitespace, accepts one sign and stops at the first non-digit. The result wraps to the 32-bit signed range.
- `itoa` returns the decimal form of an integer.
- `split(s, sep)` splits `s` on a single character and drops empty pieces.
- `strjoin` concatenates two strings.
- `strtrim(s, charset)` strips the characters in `charset` from both ends of `s`.
- `substr(s, start, length)` returns a slice of `s`. The result is empty when `start` lies past the end of `s`.

### `ftkit.strops`

- `striteri(chars, func)` replaces each element of a mutable sequence with `func(index, char)`.
- `strmapi(s, func)` builds a new string from `func(index, char)`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`. It copies at most `size - 1` characters.
- `strlcat(dst, src, size)` returns `(result, attempted_length)`. It works within a buffer of `size` characters, terminator included.

### `ftkit.lines`

`LineReader(stream, buffer_size=5)` reads a text or binary stream in chunks of `buffer_size`. Lines keep their trailing newline. `next_line()` returns `None` once the stream is exhausted, and iterating over the reader yields the lines.

```python
import io
from ftkit.lines import LineReader

reader = LineReader(io.StringIO("one\ntwo\n"), 5)
for line in reader:
    print(repr(line))   # 'one\n', then 'two\n'
```

### `ftkit.flags`, `ftkit.numbers`, `ftkit.render`

These modules are the building blocks of the formatter:

- `flags` holds `FormatFlags` and `parse_flags(fmt, pos, args)`, along with `is_spec`, `is_type` and `is_flag`.
- `numbers` holds `num_len`, `format_signed`, `format_unsigned` and `format_hex`.
- `render` holds `pad` and one renderer per conversion: `render_char`, `render_str`, `render_int`, `render_unsigned`, `render_hex` and `render_ptr`. Each renderer returns text and leaves the flags it is given unchanged.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args, file=None)` writes that text to `file`, or to standard output by default, and returns its length. `render_arg(conversion, args, flags)` renders a single conversion.

```python
from ftkit.printf import sprintf, printf

sprintf("%5d|%-4s|%#x", 42, "ab", 255)   # '   42|ab  |0xff'
printf("%p\n", 0)                         # writes '(nil)\n' and returns 6
```

Supported conversions are `c s d i u x X p %`. Supported flags are `-`, `0`, `.`, `*`, `#`, space and `+`, along with a decimal field width. The formatter behaves as follows:

- Integers are treated as 32-bit values. Pointers are treated as 64-bit values, and `%p` of a non-integer object formats its `id()`.
- `%s` of `None` prints `(null)`.
- A directive that does not end in a conversion character is written out as it stands.
- The format ends at its first NUL character.
- Too few arguments raise `TypeError`.

## What it does not do

`ftkit` is a library only and installs no command-line program. The formatter has no length modifiers and no floating-point, octal or `%n` conversions.