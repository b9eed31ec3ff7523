"""Interactive Mandelbrot and Julia set viewer: computation, numeric helpers and a Tk window."""

__version__ = "0.1.0"
__all__ = ["fractal", "mathutils", "viewer"]