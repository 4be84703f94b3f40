import pytest

from moonlander.vector2d import Vector2D


@pytest.fixture
def vector():
    return Vector2D(1.0, 1.0)


@pytest.fixture
def other():
    return Vector2D(2.0, 3.0)


def test_constructor():
    created = Vector2D(0.0, 0.0)
    assert created.x == 0.0
    assert created.y == 0.0


def test_get_x(vector):
    assert vector.x == 1.0


def test_get_y(vector):
    assert vector.y == 1.0


def test_set_x(vector):
    vector.x = 5.5
    assert vector.x == 5.5


def test_set_y(vector):
    vector.y = -3.2
    assert vector.y == -3.2


def test_in_place_add(vector, other):
    vector += other
    assert vector.x == 3.0
    assert vector.y == 4.0


def test_in_place_subtract(vector, other):
    vector -= other
    assert vector.x == -1.0
    assert vector.y == -2.0


def test_in_place_add_chained(vector, other):
    other += other
    vector += other
    assert vector.x == 5.0
    assert vector.y == 7.0


def test_in_place_add_keeps_identity(vector, other):
    original = vector
    vector += other
    assert original.x == 3.0
    assert original.y == 4.0
    assert vector is original


def test_add(vector, other):
    result = vector + other
    assert result.x == 3.0
    assert result.y == 4.0
    assert vector == Vector2D(1.0, 1.0)


def test_subtract(vector, other):
    result = vector - other
    assert result.x == -1.0
    assert result.y == -2.0


def test_get_magnitude():
    assert Vector2D(3.0, 4.0).magnitude == pytest.approx(5.0, abs=0.001)


def test_get_magnitude_zero():
    assert Vector2D(0.0, 0.0).magnitude == pytest.approx(0.0, abs=0.001)


def test_set_magnitude():
    v = Vector2D(3.0, 4.0)
    v.set_magnitude(10.0)
    assert v.magnitude == pytest.approx(10.0, abs=0.001)
    assert v.x == pytest.approx(6.0, abs=0.001)
    assert v.y == pytest.approx(8.0, abs=0.001)


def test_set_magnitude_zero_vector():
    v = Vector2D(0.0, 0.0)
    v.set_magnitude(5.0)
    assert v.x == pytest.approx(0.0, abs=0.001)
    assert v.y == pytest.approx(-5.0, abs=0.001)


def test_set_magnitude_negative_raises():
    v = Vector2D(3.0, 4.0)
    with pytest.raises(ValueError):
        v.set_magnitude(-1.0)


def test_rotate_to_0_degrees():
    v = Vector2D(5.0, 0.0)
    v.rotate_to(0.0)
    assert v.x == pytest.approx(0.0, abs=0.001)
    assert v.y == pytest.approx(-5.0, abs=0.001)
    assert v.angle_degrees == pytest.approx(0.0, abs=0.001)


def test_rotate_to_90_degrees():
    v = Vector2D(0.0, -3.0)
    v.rotate_to(90.0)
    assert v.x == pytest.approx(3.0, abs=0.001)
    assert v.y == pytest.approx(0.0, abs=0.001)
    assert v.angle_degrees == pytest.approx(90.0, abs=0.001)


def test_rotate_to_180_degrees():
    v = Vector2D(0.0, -4.0)
    v.rotate_to(180.0)
    assert v.x == pytest.approx(0.0, abs=0.001)
    assert v.y == pytest.approx(4.0, abs=0.001)
    assert v.angle_degrees == pytest.approx(180.0, abs=0.001)


def test_rotate_to_270_degrees():
    v = Vector2D(2.0, 0.0)
    v.rotate_to(270.0)
    assert v.x == pytest.approx(-2.0, abs=0.001)
    assert v.y == pytest.approx(0.0, abs=0.001)
    assert v.angle_degrees == pytest.approx(270.0, abs=0.001)


def test_rotate_to_preserves_magnitude():
    v = Vector2D(3.0, 4.0)
    original_magnitude = v.magnitude
    v.rotate_to(45.0)
    assert v.magnitude == pytest.approx(original_magnitude, abs=0.001)
    assert v.angle_degrees == pytest.approx(45.0, abs=0.001)


def test_rotate_to_60_degrees():
    v = Vector2D(0.0, -2.0)
    v.rotate_to(60.0)
    assert v.x == pytest.approx(1.732, abs=0.001)
    assert v.y == pytest.approx(-1.0, abs=0.001)
    assert v.angle_degrees == pytest.approx(60.0, abs=0.001)


@pytest.mark.parametrize(
    ("x", "y", "expected"),
    [(0.0, -1.0, 0.0), (1.0, 0.0, 90.0), (0.0, 1.0, 180.0), (-1.0, 0.0, 270.0)],
)
def test_get_angle_degrees(x, y, expected):
    assert Vector2D(x, y).angle_degrees == pytest.approx(expected, abs=0.001)


def test_get_angle_degrees_round_trip():
    v = Vector2D(3.0, 4.0)
    original_angle = v.angle_degrees
    v.rotate_to(original_angle)
    assert v.angle_degrees == pytest.approx(original_angle, abs=0.001)


def test_set_magnitude_preserves_angle():
    v = Vector2D(3.0, 4.0)
    original_angle = v.angle_degrees
    v.set_magnitude(10.0)
    assert v.angle_degrees == pytest.approx(original_angle, abs=0.001)


def test_multiply_by_float(vector):
    result = vector * 2.5
    assert result.x == pytest.approx(2.5, abs=0.001)
    assert result.y == pytest.approx(2.5, abs=0.001)


def test_in_place_multiply_by_float(vector):
    vector *= 3.0
    assert vector.x == pytest.approx(3.0, abs=0.001)
    assert vector.y == pytest.approx(3.0, abs=0.001)


def test_divide_by_float(other):
    result = other / 2.0
    assert result.x == pytest.approx(1.0, abs=0.001)
    assert result.y == pytest.approx(1.5, abs=0.001)


def test_in_place_divide_by_float(other):
    other /= 2.0
    assert other.x == pytest.approx(1.0, abs=0.001)
    assert other.y == pytest.approx(1.5, abs=0.001)