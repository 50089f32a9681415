# minitools

A collection of small command-line tools and the library functions behind
them: echoing arguments, finding duplicate lines, fetching URLs, converting
units, counting bits, formatting text, running tiny HTTP servers, and drawing
Lissajous GIFs, Mandelbrot PNGs and SVG surface plots.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Text and arguments

| Command       | What it does |
|---------------|--------------|
| `mt-hello`    | Prints `Hello, World!` |
| `mt-echo`     | Prints its arguments joined by a separator; `-s SEP` sets the separator (default a space), `-n` omits the trailing newline |
| `mt-args`     | Prints each argument as `idx: N, arg: A`; `--with-program` instead echoes the program name and the arguments; `--timing` joins them three ways and prints how long each took |
| `mt-basename` | Reads paths from standard input and prints each without its directory and last suffix |
| `mt-comma`    | Prints each decimal integer argument with commas every three digits |
| `mt-anagram`  | Tells whether its first two arguments are anagrams |

### Numbers and units

| Command       | What it does |
|---------------|--------------|
| `mt-popcount` | Prints the set-bit counts of 15, 1 and 7, each computed four ways |
| `mt-netflag`  | Prints the network flag values and demonstrates setting and testing them |
| `mt-cf`       | Reads each argument as both Fahrenheit and Celsius and converts it |
| `mt-convert`  | Converts each number (from the arguments, or from standard input if there are none) between °F/°C, ft/m and lbs/kg |
| `mt-boiling`  | Prints the boiling point of water |
| `mt-ftoc`     | Prints the freezing and boiling points of water in °F and °C |
| `mt-kelvin`   | Prints two Kelvin/Celsius conversions |
| `mt-bytesize` | Prints the decimal byte-size units from KB to YB |

### Files and network

| Command       | What it does |
|---------------|--------------|
| `mt-dup`      | Prints the count and text of lines seen more than once in the named files or standard input; `--whole` reads each file at once and splits it on newlines; `--by-source` reports which files each repeated line came from |
| `mt-fetch`    | Writes the body of each URL to standard output and stops with status 1 at the first error; `--prefix` adds `http://` where it is missing, `--status` prints the HTTP status first, `--stream` copies the body as it arrives |
| `mt-fetchall` | Fetches URLs in parallel and prints the time and byte count of each, then the total time; `--save` writes each body to a file |
| `mt-server`   | Runs an HTTP server, by default on `localhost:8000` (`--address host:port`) |

`mt-server --mode` chooses what the server answers:

- `echo` (default): the request path.
- `count`: the request path, counting requests; `/count` returns the count.
- `inspect`: the request line, headers, host, peer address and form values, counting requests; `/count` returns the count.
- `lissajous`: an animated Lissajous GIF.
- `cycles`: a Lissajous GIF with the number of cycles taken from `?cycles=N`; `/count` returns the count.

### Graphics

| Command         | What it does |
|-----------------|--------------|
| `mt-lissajous`  | Writes an animated Lissajous GIF to standard output; `--variant classic\|green\|rainbow`, `--cycles N` |
| `mt-mandelbrot` | Writes a PNG of the Mandelbrot set to standard output; `--width`, `--height` (default 1024) |
| `mt-surface`    | Writes an SVG rendering of `surface` (default) or `eggbox` to standard output; `--keep-nan` keeps cells with undefined points |

Examples:

```
mt-echo hello there
mt-echo -s , -n a b c
mt-comma 1234567
mt-anagram listen silent
mt-cf 100
mt-dup notes.txt todo.txt
mt-server --mode inspect
mt-lissajous --variant green > out.gif
mt-mandelbrot > mandelbrot.png
mt-surface eggbox > eggbox.svg
```

## Library use

Everything the commands do is also available from Python:

```python
from minitools.popcount import pop_count, pop_count_clear_nonzero
from minitools.units import Fahrenheit, f_to_c, format_conversions
from minitools.text import basename, comma, is_anagram, ints_to_string
from minitools.netflag import Flags, is_up, turn_down
from minitools.dup import count_text, duplicates

pop_count(2**64 - 1)            # 64
print(f_to_c(Fahrenheit(212)))  # 100°C
comma("1234567")                # '1,234,567'
basename("a/b.c.go")            # 'b.c'
is_anagram("listen", "silent")  # True
ints_to_string([1, 2, 3])       # '[1, 2, 3]'
is_up(turn_down(Flags.UP | Flags.MULTICAST))  # False

counts = count_text("a\nb\na\n")
list(duplicates(counts))        # [('a', 2)]
```

The unit classes (`Celsius`, `Fahrenheit`, `Kelvin`, `Feet`, `Meters`,
`Pounds`, `Kilograms`) are floats that print with their symbol. The conversion
functions refuse a value of the wrong unit with `TypeError`, and the popcount
functions refuse anything outside the unsigned 64-bit range with `ValueError`.

Graphics come from `minitools.lissajous.lissajous` (or `render_frames` for
the frames as Pillow images), `minitools.mandelbrot.render` (a Pillow image)
and `minitools.surface.render_svg` (an SVG string). The HTTP handlers are
built with `minitools.server.make_handler` and served with
`minitools.server.serve`.

## Limits

- The servers speak plain HTTP only and keep their request count in memory.
- `mt-fetch` and `mt-fetchall` send plain GET requests with no custom headers,
  authentication or retries.
- Files read by `mt-dup` are decoded as UTF-8.