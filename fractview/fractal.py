"""Fractal state, escape-time colouring and input handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .mathutils import scale

WIDTH = 800
HEIGHT = 800

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF

DEFAULT_ESCAPE = 4.0
DEFAULT_ITERATIONS = 42
ITERATION_STEP = 10
PAN_FACTOR = 0.5
ZOOM_IN = 0.95
ZOOM_OUT = 1.05


class Key(IntEnum):
    """Keyboard keys the viewer reacts to, as X11 keysyms."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    H = 0x0068
    M = 0x006D


class Button(IntEnum):
    """Mouse buttons the viewer reacts to."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


@dataclass
class Image:
    """A width x height grid of 24-bit RGB colours."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        self.pixels = [BLACK] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x``, row ``y``."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]


@dataclass
class Fractal:
    """View parameters of a Mandelbrot or Julia set."""

    name: str
    julia_x: float = 0.0
    julia_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT
    escaped_val: float = DEFAULT_ESCAPE
    iteration: int = DEFAULT_ITERATIONS
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0

    def reset(self) -> None:
        """Restore the default escape radius, iteration count, pan and zoom."""
        self.escaped_val = DEFAULT_ESCAPE
        self.iteration = DEFAULT_ITERATIONS
        self.shift_x = 0.0
        self.shift_y = 0.0
        self.zoom = 1.0

    def is_julia(self) -> bool:
        """True when the fractal is a Julia set."""
        return self.name[:5] == "julia"

    def starting_constant(self, z: complex) -> complex:
        """Return the constant added each step: fixed for Julia, ``z`` otherwise."""
        if self.is_julia():
            return complex(self.julia_x, self.julia_y)
        return z

    def _point(self, x: int, y: int) -> complex:
        real = scale(x, -2, 2, 0, self.width) * self.zoom + self.shift_x
        imag = scale(y, 2, -2, 0, self.height) * self.zoom + self.shift_y
        return complex(real, imag)

    def pixel_color(self, x: int, y: int) -> int:
        """Escape-time colour of the pixel at column ``x``, row ``y``."""
        z = self._point(x, y)
        c = self.starting_constant(z)
        for i in range(max(self.iteration, 0)):
            z = z * z + c
            if z.real * z.real + z.imag * z.imag > self.escaped_val:
                return int(scale(i, BLACK, WHITE, 0, self.iteration))
        return WHITE

    def render(self, image: Image) -> Image:
        """Colour every pixel of ``image`` and return it."""
        for y in range(image.height):
            for x in range(image.width):
                image.put_pixel(x, y, self.pixel_color(x, y))
        return image

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return False when the viewer should close."""
        if key == Key.ESCAPE:
            return False
        step = PAN_FACTOR * self.zoom
        if key == Key.LEFT:
            self.shift_x -= step
        elif key == Key.RIGHT:
            self.shift_x += step
        elif key == Key.UP:
            self.shift_y += step
        elif key == Key.DOWN:
            self.shift_y -= step
        elif key == Key.M:
            self.iteration += ITERATION_STEP
        elif key == Key.H:
            self.iteration -= ITERATION_STEP
        return True

    def handle_scroll(self, button: int) -> None:
        """Zoom in on scroll down, out on scroll up."""
        if button == Button.SCROLL_DOWN:
            self.zoom *= ZOOM_IN
        elif button == Button.SCROLL_UP:
            self.zoom *= ZOOM_OUT