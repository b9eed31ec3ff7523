# fractview

A small interactive viewer for the Mandelbrot set and Julia sets. It opens an
800 × 800 window and draws the chosen fractal with escape-time colouring.
You can then explore it from the keyboard and mouse.

## Installation

```
pip install .
```

The package needs only the Python standard library. The window is drawn with
Tk (`tkinter`), so your Python must have Tk support.

## Running

Draw the Mandelbrot set:

```
fractview mandelbrot
```

Draw a Julia set, giving the real and imaginary parts of its constant:

```
fractview julia -0.8 0.156
```

The first argument is matched by its start. Anything beginning with
`mandelbrot` selects the Mandelbrot set, and anything beginning with `julia`
selects a Julia set. The numbers are read leniently: leading whitespace is
skipped, a run of `+`/`-` signs is folded into one sign, and the remaining
characters are taken as digits without checking, so malformed input yields
some number rather than an error.

Exit status:

- With no arguments at all, `Error message` is written to standard error and
  the exit status is 1.
- Any other combination exits quietly with status 0 and opens no window. This
  covers an unknown name, `mandelbrot` with extra arguments, or `julia`
  without exactly two numbers.
- If the window cannot be opened, for example when Tk is missing or there is
  no display, an `Error: ...` line is printed and the exit status is 1.

## Controls

| Input              | Effect                                     |
|--------------------|--------------------------------------------|
| Arrow keys         | Pan; the step is half the current zoom     |
| `m`                | Raise the iteration limit by 10            |
| `h`                | Lower the iteration limit by 10            |
| Scroll wheel down  | Zoom in (zoom × 0.95)                      |
| Scroll wheel up    | Zoom out (zoom × 1.05)                     |
| `Esc` or closing   | Quit                                       |

Every key press and scroll redraws the image. When a Julia set is shown, moving
the pointer also redraws it.

Every view starts with these settings:

- no shift
- a zoom of 1.0
- an iteration limit of 42
- an escape threshold of 4 on the squared magnitude

## Colouring

Each pixel's point is iterated as `z = z*z + c`. For the Mandelbrot set, `c`
is the pixel's own point. For a Julia set, `c` is the constant given on the
command line.

- A point that never passes the escape threshold within the iteration limit
  is drawn white (`0xFFFFFF`).
- A point that escapes at step `i` gets the colour `i / limit` of the way from
  `0x000000` to `0xFFFFFF`, taken as a 24-bit RGB value.

## Using it from Python

The computation lives in `fractview.fractal` and does not need a window:

```python
from fractview.fractal import Fractal, Image, Key

fractal = Fractal("julia", julia_x=-0.8, julia_y=0.156)
image = Image()              # 800 × 800 by default
fractal.render(image)
fractal.handle_key(Key.RIGHT)
fractal.render(image)
print(image.get_pixel(400, 400))
```

The main pieces of `fractview.fractal`:

- **`Fractal`** holds the view settings: `zoom`, `shift_x`, `shift_y`,
  `iteration`, `escaped_val`, `julia_x` and `julia_y`. It provides these
  methods:
  - `reset()` restores the starting settings.
  - `is_julia()` tells whether the fractal is a Julia set.
  - `starting_constant(z)` returns the `c` used in each step.
  - `pixel_color(x, y)` returns the colour of one pixel.
  - `render(image)` colours every pixel of the image and returns it.
  - `handle_key(key)` applies a key press. It returns `False` for Escape.
  - `handle_scroll(button)` applies a scroll step.
- **`Image`** is a grid of RGB integers. It has `put_pixel(x, y, color)` and
  `get_pixel(x, y)`, and both raise `IndexError` outside the image.
- **`Key`** and **`Button`** name the keys (X11 keysyms) and the scroll
  buttons (4 and 5).

`fractview.mathutils` provides two functions:

- `scale(value, new_min, new_max, old_min, old_max)` is the linear mapping
  from pixel to plane coordinates.
- `parse_double(text)` is the lenient number reader used for the Julia
  constant.

`fractview.viewer` holds the command-line side:

- `parse_args(argv)` returns a `Fractal` or `None`. It raises `UsageError`
  when `argv` is empty.
- `Viewer(fractal)` is the Tk window, with `run()`, `redraw()` and `close()`.
- `main(argv=None)` is the `fractview` command.

## What it does not do

- fractview only shows fractals on screen. It does not save or export images.
- The Julia constant is fixed by the command line. Moving the pointer redraws
  the view but does not change the constant.

## Running the tests

```
pip install ".[test]"
pytest
```