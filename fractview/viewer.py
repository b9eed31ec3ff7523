"""Command-line entry point and interactive window for the fractal viewer."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .fractal import Button, Fractal, Image
from .mathutils import parse_double

USAGE_MESSAGE = "Error message"


class UsageError(Exception):
    """Raised when the command line names no fractal at all."""


def parse_args(argv: Sequence[str]) -> Fractal | None:
    """Build a fractal from command-line arguments (without the program name).

    ``mandelbrot`` takes no further arguments; ``julia`` takes the real and
    imaginary parts of its constant. Any other combination gives ``None``.
    Raises ``UsageError`` when no argument is given.
    """
    if not argv:
        raise UsageError(USAGE_MESSAGE)
    name = argv[0]
    if name.startswith("julia") and len(argv) == 3:
        return Fractal(name, julia_x=parse_double(argv[1]),
                       julia_y=parse_double(argv[2]))
    if name.startswith("mandelbrot") and len(argv) == 1:
        return Fractal(name)
    return None


def _ppm_bytes(image: Image) -> bytes:
    header = f"P6\n{image.width} {image.height}\n255\n".encode("ascii")
    body = bytearray()
    for color in image.pixels:
        body += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return header + bytes(body)


class Viewer:
    """An interactive window showing one fractal."""

    def __init__(self, fractal: Fractal) -> None:
        self.fractal = fractal
        self.image = Image(fractal.width, fractal.height)
        self.closed = False
        self._root = None
        self._label = None
        self._photo = None

    def redraw(self) -> None:
        """Render the fractal into the image and refresh the window if open."""
        self.fractal.render(self.image)
        if self._root is not None and self._label is not None:
            import tkinter

            self._photo = tkinter.PhotoImage(master=self._root,
                                             data=_ppm_bytes(self.image),
                                             format="PPM")
            self._label.configure(image=self._photo)

    def close(self) -> None:
        """Destroy the window and mark the viewer closed."""
        if self._root is not None:
            root, self._root = self._root, None
            self._label = None
            self._photo = None
            root.destroy()
        self.closed = True

    def handle_key(self, key: int) -> None:
        """React to a key press: close on Escape, otherwise update and redraw."""
        if not self.fractal.handle_key(key):
            self.close()
            return
        self.redraw()

    def handle_button(self, button: int) -> None:
        """React to a mouse button press by zooming and redrawing."""
        self.fractal.handle_scroll(button)
        self.redraw()

    def handle_motion(self) -> None:
        """Redraw on pointer motion when showing a Julia set."""
        if self.fractal.is_julia():
            self.redraw()

    def run(self) -> None:
        """Open the window, draw the fractal and process events until closed."""
        import tkinter

        root = tkinter.Tk()
        root.title(self.fractal.name)
        root.resizable(False, False)
        self._root = root
        self._label = tkinter.Label(root, borderwidth=0, highlightthickness=0)
        self._label.pack()

        root.bind("<KeyPress>", lambda event: self.handle_key(event.keysym_num))
        root.bind("<ButtonPress>", lambda event: self.handle_button(event.num))
        root.bind(
            "<MouseWheel>",
            lambda event: self.handle_button(
                Button.SCROLL_UP if event.delta > 0 else Button.SCROLL_DOWN
            ),
        )
        root.bind("<Motion>", lambda event: self.handle_motion())
        root.protocol("WM_DELETE_WINDOW", self.close)

        self.redraw()
        root.mainloop()
        self.closed = True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer from the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError as exc:
        sys.stderr.write(str(exc))
        return 1
    if fractal is None:
        return 0
    try:
        Viewer(fractal).run()
    except (ImportError, RuntimeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # tkinter.TclError when no display is available
        if type(exc).__name__ == "TclError":
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        raise
    return 0