import math

import pytest

from gamekit.components import ComponentTypeError, Transform, Vector2


def test_rotation_normalized_on_construction() -> None:
    assert Transform(rotation=370).rotation == 10
    assert Transform(rotation=720).rotation == 0
    # módulo truncado: los negativos se quedan negativos
    assert Transform(rotation=-10).rotation == -10
    assert Transform(rotation=-370).rotation == -10


def test_position_is_owned() -> None:
    t = Transform()
    assert t.position.parent is t
    assert tuple(t.position) == (0, 0)


def test_translate_with_vector_mutates_position() -> None:
    t = Transform(position=Vector2(x=1, y=1))
    pos = t.position
    out = t.translate(Vector2(x=2, y=3))
    assert out is pos
    assert tuple(pos) == (3, 4)


def test_translate_with_transform_wraps_rotation() -> None:
    t = Transform(rotation=350)
    out = t.translate(Transform(position=Vector2(x=5, y=-5), rotation=20))
    assert out is None
    assert tuple(t.position) == (5, -5)
    assert t.rotation == pytest.approx(10)


def test_translate_validates_before_mutating() -> None:
    t = Transform(position=Vector2(x=1, y=2), rotation=5)
    with pytest.raises(ComponentTypeError):
        t.translate((1, 1))
    assert tuple(t.position) == (1, 2)
    assert t.rotation == 5


def test_arithmetic_returns_new_transform() -> None:
    a = Transform(position=Vector2(x=4, y=6), rotation=90)
    b = Transform(position=Vector2(x=2, y=3), rotation=45)
    assert a.add(b).equal(Transform(position=Vector2(x=6, y=9), rotation=135))
    assert a.subtract(b).equal(Transform(position=Vector2(x=2, y=3), rotation=45))
    assert a.multiply(b).equal(Transform(position=Vector2(x=8, y=18), rotation=4050))
    assert a.divide(b).equal(Transform(position=Vector2(x=2, y=2), rotation=2))
    assert a.add(b).subtract(b).equal(a)
    assert tuple(a.position) == (4, 6)


def test_results_are_renormalized() -> None:
    a = Transform(rotation=300)
    assert a.add(Transform(rotation=100)).rotation == 40


@pytest.mark.parametrize("bad", [Vector2(), 3, "t"])
def test_arithmetic_requires_transform(bad: object) -> None:
    with pytest.raises(ComponentTypeError):
        Transform().add(bad)
    with pytest.raises(ComponentTypeError):
        Transform().equal(bad)


def test_equal_needs_exact_rotation() -> None:
    assert not Transform(rotation=10).equal(Transform(rotation=10.0001))


def test_lerp() -> None:
    a = Transform(position=Vector2(x=0, y=10), rotation=0)
    b = Transform(position=Vector2(x=10, y=20), rotation=90)
    out = Transform.lerp(a, b, 0.5)
    assert tuple(out.position) == (5, 5)
    assert out.rotation == 45
    with pytest.raises(ComponentTypeError):
        Transform.lerp(a, b, None)


def test_divide_by_zero_rotation_does_not_raise() -> None:
    out = Transform().divide(Transform())
    assert math.isnan(out.rotation)
    assert math.isnan(out.position.x) and math.isnan(out.position.y)
    # inf % 360 no está definido
    assert math.isnan(Transform(rotation=10).divide(Transform()).rotation)


def test_position_from_another_transform_is_copied() -> None:
    a = Transform(position=Vector2(x=1, y=2))
    b = Transform(position=a.position)
    assert b.position is not a.position
    assert b.position.parent is b
    assert a.position.parent is a
    b.translate(Vector2(x=1, y=1))
    assert tuple(a.position) == (1, 2)
