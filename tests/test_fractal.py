import pytest

from fractview.fractal import (
    BLACK,
    WHITE,
    Button,
    Fractal,
    Image,
    Key,
)


def small(name="mandelbrot", **kwargs):
    return Fractal(name, width=8, height=8, **kwargs)


def test_defaults():
    f = Fractal("mandelbrot")
    assert f.escaped_val == 4
    assert f.iteration == 42
    assert f.zoom == 1.0
    assert (f.shift_x, f.shift_y) == (0.0, 0.0)


def test_reset_restores_defaults():
    f = Fractal("mandelbrot")
    f.handle_key(Key.LEFT)
    f.handle_key(Key.M)
    f.handle_scroll(Button.SCROLL_UP)
    f.reset()
    assert f.iteration == 42
    assert f.zoom == 1.0
    assert f.shift_x == 0.0


def test_raw_keysyms_are_handled():
    f = Fractal("mandelbrot")
    assert f.handle_key(0xFF1B) is False
    assert f.handle_key(0xFF51) is True
    assert f.shift_x == pytest.approx(-0.5)


@pytest.mark.parametrize("name,expected", [
    ("julia", True), ("juliaset", True), ("mandelbrot", False), ("jul", False),
])
def test_is_julia(name, expected):
    assert Fractal(name).is_julia() is expected


def test_starting_constant():
    z = complex(0.3, -0.4)
    assert Fractal("mandelbrot").starting_constant(z) == z
    julia = Fractal("julia", julia_x=-0.8, julia_y=0.156)
    assert julia.starting_constant(z) == complex(-0.8, 0.156)


def test_mandelbrot_center_never_escapes():
    f = small()
    assert f.pixel_color(4, 4) == WHITE


def test_mandelbrot_corner_escapes_immediately():
    f = small()
    assert f.pixel_color(0, 0) == BLACK


def test_julia_large_constant_escapes_immediately():
    f = small("julia", julia_x=10.0, julia_y=0.0)
    assert f.pixel_color(4, 4) == BLACK


def test_no_iterations_gives_white():
    f = small()
    f.iteration = 0
    assert f.pixel_color(0, 0) == WHITE


def test_colors_within_range():
    f = small()
    for y in range(8):
        for x in range(8):
            assert BLACK <= f.pixel_color(x, y) <= WHITE


def test_render_fills_image():
    f = small()
    image = f.render(Image(8, 8))
    assert image.get_pixel(4, 4) == WHITE
    assert image.get_pixel(0, 0) == BLACK
    assert len(image.pixels) == 64
    assert all(image.get_pixel(x, y) == f.pixel_color(x, y)
               for y in range(8) for x in range(8))


def test_image_round_trip_and_bounds():
    image = Image(3, 2)
    image.put_pixel(2, 1, 0x123456)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(0, 0) == BLACK
    with pytest.raises(IndexError):
        image.put_pixel(3, 0, WHITE)
    with pytest.raises(IndexError):
        image.get_pixel(0, 2)


def test_image_rejects_bad_size():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_pan_keys_scale_with_zoom():
    f = Fractal("mandelbrot")
    f.zoom = 2.0
    assert f.handle_key(Key.LEFT) is True
    assert f.shift_x == pytest.approx(-1.0)
    f.handle_key(Key.RIGHT)
    f.handle_key(Key.RIGHT)
    assert f.shift_x == pytest.approx(1.0)
    f.handle_key(Key.UP)
    assert f.shift_y == pytest.approx(1.0)
    f.handle_key(Key.DOWN)
    assert f.shift_y == pytest.approx(0.0)


def test_iteration_keys():
    f = Fractal("mandelbrot")
    f.handle_key(Key.M)
    assert f.iteration == 52
    f.handle_key(Key.H)
    f.handle_key(Key.H)
    assert f.iteration == 32


def test_escape_requests_close():
    f = Fractal("mandelbrot")
    assert f.handle_key(Key.ESCAPE) is False


def test_unknown_key_changes_nothing():
    f = Fractal("mandelbrot")
    assert f.handle_key(0x61) is True
    assert f == Fractal("mandelbrot")


def test_scroll_zoom():
    f = Fractal("mandelbrot")
    f.handle_scroll(Button.SCROLL_DOWN)
    assert f.zoom == pytest.approx(0.95)
    f.handle_scroll(Button.SCROLL_UP)
    assert f.zoom == pytest.approx(0.95 * 1.05)
    f.handle_scroll(1)
    assert f.zoom == pytest.approx(0.95 * 1.05)