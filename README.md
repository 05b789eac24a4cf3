# miniprintf

A small, dependency-free library built around a minimal `printf`, together
with a set of character, byte and string helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting

`miniprintf.printf` supports a deliberately small set of conversions:

| Spec | Meaning                                                  |
|------|----------------------------------------------------------|
| `%c` | one character (a one-char `str`, or an int code mod 256) |
| `%s` | a string up to any NUL (`None` prints as `(null)`)       |
| `%d` | signed decimal, wrapped to 32 bits                       |
| `%i` | same as `%d`                                             |
| `%u` | unsigned decimal, wrapped to 32 bits                     |
| `%x` | lower-case hexadecimal, wrapped to 32 bits               |
| `%X` | upper-case hexadecimal, wrapped to 32 bits               |
| `%p` | `0x`-prefixed hex address (64 bits), or `(nil)` for 0/`None` |
| `%%` | a literal percent sign                                   |

Any other character after `%` prints nothing and takes no argument. A `%`
at the very end of the format is printed as-is. The format itself stops at
the first NUL character. Missing arguments raise `TypeError`, as do
arguments of the wrong type.

```python
from miniprintf.printf import sprintf, printf

sprintf("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

sprintf("%u", -1)
# '4294967295'

count = printf("%p\n", 0)   # writes "(nil)\n" to standard output
# count == 6
```

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args,
file=None)` writes it to `file` (standard output by default) and returns
the number of characters written.

The individual conversions are available as well: `format_signed`,
`format_unsigned`, `format_hex(num, spec="x")`, `format_pointer`,
`format_str`, and `convert(spec, args)`, which renders one conversion and
takes its value from a shared iterator.

## Helpers

- `miniprintf.chars`: ASCII classification and case mapping. Each function
  takes an int code or a one-character string; the predicates (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`) return a `bool`, and
  `to_upper` / `to_lower` return a value of the same kind they were given.
- `miniprintf.memory`: operations on `bytes` and `bytearray`: `memset`,
  `bzero`, `calloc`, `memcpy`, `memmove(buffer, dest, src, n)` (offsets
  within one buffer, overlap allowed), `memchr` (an offset or `None`) and
  `memcmp`. Counts that reach past the end of a buffer raise `ValueError`.
- `miniprintf.search`: `strlen`, `strdup`, `strchr`, `strrchr`, `strnstr`
  and `strncmp`. Searches return an index or `None`; searching for `"\0"`
  finds the end of the string. `strlcpy(src, size)` and
  `strlcat(dst, src, size)` return the resulting text together with the
  length it would have had without truncation.
- `miniprintf.strings`: `atoi`, `itoa`, `split` (empty pieces dropped),
  `substr`, `strjoin`, `strtrim`, `strmapi` (returns a new string) and
  `striteri` (edits a mutable sequence of characters in place).
- `miniprintf.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd` write to a text stream, standard output by default; a `None`
  string writes nothing.

```python
from miniprintf.strings import split, strtrim, itoa

split("  a  bb ccc ", " ")       # ['a', 'bb', 'ccc']
strtrim("***hello***", "*")      # 'hello'
itoa(-2147483648)                # '-2147483648'
```

## What it does not do

The formatter has no flags, field widths, precision or length modifiers,
and no floating-point conversions. The package is a library only; it
installs no command.