import math

import pygame
import pytest

from gamekit.components import Color, ComponentTypeError, Vector2


def test_defaults() -> None:
    c = Color()
    assert (c.r, c.g, c.b, c.alpha) == (0, 0, 0, 1)


def test_to_string() -> None:
    assert str(Color({"r": 255, "g": 0, "b": 0})) == "rgba(255,0,0,1)"
    assert Color(r=10, g=20, b=30, alpha=0.5).to_string() == "rgba(10,20,30,0.5)"


def test_to_string_clamps() -> None:
    assert str(Color(r=300, g=-4, b=127.5, alpha=2)) == "rgba(255,0,128,1)"


def test_arithmetic_is_unclamped_and_keeps_alpha() -> None:
    c = Color(r=200, g=100, b=50, alpha=0.25)
    out = c.add(100)
    assert (out.r, out.g, out.b) == (300, 200, 150)
    assert out.alpha == 0.25
    assert c.r == 200


def test_channel_wise_ops() -> None:
    a = Color(r=10, g=20, b=30)
    b = Color(r=2, g=4, b=5)
    assert a.multiply(b).equal(Color(r=20, g=80, b=150))
    assert a.divide(b).equal(Color(r=5, g=5, b=6))
    assert a.subtract(b).equal(Color(r=8, g=16, b=25))
    assert a.add(b).subtract(b).equal(a)


def test_scalar_broadcast_matches_color_operand() -> None:
    c = Color(r=1, g=2, b=3)
    assert c.add(5).equal(c.add(Color(r=5, g=5, b=5)))


def test_type_mismatch_leaves_color_untouched() -> None:
    c = Color()
    with pytest.raises(ComponentTypeError):
        c.add("not a color or number")
    with pytest.raises(ComponentTypeError):
        c.multiply(Vector2())
    assert (c.r, c.g, c.b, c.alpha) == (0, 0, 0, 1)


def test_clamp_rounds_half_up_and_is_idempotent() -> None:
    c = Color(r=0.5, g=254.5, b=-3, alpha=-1)
    once = c.clamp()
    assert (once.r, once.g, once.b, once.alpha) == (1, 255, 0, 0)
    assert once.clamp().clamp().equal(once)
    assert c.r == 0.5


def test_equal_ignores_alpha() -> None:
    assert Color(r=1, alpha=0).equal(Color(r=1, alpha=1))
    with pytest.raises(ComponentTypeError):
        Color().equal("rgba(0,0,0,1)")


def test_invert() -> None:
    c = Color(r=10, g=0, b=255, alpha=0)
    inv = c.invert()
    assert (inv.r, inv.g, inv.b, inv.alpha) == (245, 255, 0, 0)
    assert c.invert(True).alpha == 1


def test_lerp() -> None:
    out = Color.lerp(Color(r=0, g=100, b=200), Color(r=100, g=100, b=0), 0.5)
    assert (out.r, out.g, out.b) == (50, 0, -100)
    with pytest.raises(ComponentTypeError):
        Color.lerp(Color(), Vector2(), 0.5)


@pytest.mark.parametrize(
    "name, rgb",
    [
        ("red", (255, 0, 0)),
        ("green", (0, 255, 0)),
        ("blue", (0, 0, 255)),
        ("black", (0, 0, 0)),
        ("white", (255, 255, 255)),
        ("cyan", (0, 255, 255)),
        ("magenta", (255, 0, 255)),
        ("yellow", (255, 255, 0)),
        ("grey", (128, 128, 128)),
    ],
)
def test_named_colors(name: str, rgb: tuple[int, int, int]) -> None:
    c = getattr(Color, name)()
    assert (c.r, c.g, c.b) == rgb
    # también desde una instancia, ignorando sus valores
    assert getattr(Color(r=7), name)().equal(c)
    assert getattr(Color, name)() is not c


def test_to_pygame() -> None:
    assert Color(r=300, g=10, b=20, alpha=0.5).to_pygame() == pygame.Color(255, 10, 20, 128)


def test_divide_by_zero_does_not_raise() -> None:
    out = Color(r=10, g=0, b=10, alpha=0.5).divide(Color.black())
    assert out.r == math.inf and math.isnan(out.g)
    assert out.alpha == 0.5
    assert str(out) == "rgba(255,0,255,0.5)"


def test_nan_channels_clamp_to_zero() -> None:
    assert str(Color(r=float("nan"))) == "rgba(0,0,0,1)"
    c = Color(r=0, g=5, b=0).divide(0).clamp()
    assert (c.r, c.g, c.b) == (0, 255, 0)
    assert Color(alpha=float("nan")).clamp().alpha == 0
    assert Color(g=float("nan")).to_pygame() == pygame.Color(0, 0, 0, 255)
