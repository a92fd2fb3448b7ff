import pytest

from raytracer.color import Color


def test_from_rgb_is_opaque():
    assert Color.from_rgb(0.1, 0.2, 0.3) == Color(1.0, 0.1, 0.2, 0.3)


def test_addition_is_commutative_and_associative():
    c1 = Color.from_argb(0.5, 0.25, 0.5, 0.75)
    c2 = Color.from_argb(0.25, 0.5, 0.125, 1.0)
    c3 = Color.from_argb(1.0, 2.0, 0.0, 0.5)

    assert c1 + c2 == c2 + c1
    assert (c1 + c2) + c3 == c1 + (c2 + c3)


def test_zero_is_additive_identity():
    color = Color.from_argb(0.3, 1.5, -0.5, 0.0)
    assert Color.zero() == Color.from_argb(0.0, 0.0, 0.0, 0.0)
    assert color + Color.zero() == color


def test_sum_of_nothing_is_zero():
    assert Color.sum([]) == Color.zero()


def test_multiplication():
    color = Color.from_argb(1.0, 0.5, 0.25, 2.0)
    assert color * 2.0 == Color(2.0, 1.0, 0.5, 4.0)
    assert 2.0 * color == color * 2.0
    assert color * Color.from_argb(0.5, 2.0, 4.0, 0.0) == Color(0.5, 1.0, 1.0, 0.0)


def test_clamped():
    assert Color.from_argb(2.0, -1.0, 0.5, 1.0).clamped() == Color(1.0, 0.0, 0.5, 1.0)


def test_u8_conversion_truncates():
    assert Color.from_argb(1.0, 0.5, 0.999, 0.0).as_argb_u8s() == (255, 127, 254, 0)
    assert Color.from_rgb(1.0, 0.0, 0.5).as_rgb_u8s() == (255, 0, 127)


def test_u8_conversion_requires_clamping():
    with pytest.raises(ValueError):
        Color.from_rgb(1.5, 0.0, 0.0).as_rgb_u8s()

    assert Color.from_rgb(1.5, 0.0, 0.0).clamped().as_rgb_u8s() == (255, 0, 0)


def test_from_u8s():
    assert Color.from_rgb_u8s(255, 0, 51) == Color(1.0, 1.0, 0.0, 0.2)
    assert Color.from_argb_u8s(0, 255, 255, 0) == Color(0.0, 1.0, 1.0, 0.0)
    with pytest.raises(ValueError):
        Color.from_rgb_u8s(256, 0, 0)


def test_mix_colors():
    mixed = Color.mix_colors(
        [Color.from_rgb(1.0, 0.0, 0.0), Color.from_rgb(0.0, 1.0, 0.0)],
        [0.25, 0.75],
    )
    assert mixed == Color(1.0, 0.25, 0.75, 0.0)


def test_multiply_many_colors():
    product = Color.multiply_many_colors([
        Color.from_rgb(0.5, 1.0, 1.0),
        Color.from_rgb(0.5, 0.5, 1.0),
    ])
    assert product == Color(1.0, 0.25, 0.5, 1.0)
    assert Color.multiply_many_colors([]) == Color.from_rgb(1.0, 1.0, 1.0)
