import math

import numpy as np
import pytest

from shifted_grid import (
    IDENTITY,
    ORIGIN,
    EdgeFadeEffect,
    EffectStack,
    InvalidArgumentError,
    ItemStyleEffect,
    MagnificationEffect,
    Point2D,
    Transform,
    create_edge_fade_effect,
    create_magnification_effect,
)


@pytest.fixture
def magnify() -> MagnificationEffect:
    return MagnificationEffect(100.0, 1.5)


def test_scale_peaks_at_focus(magnify):
    assert magnify.axis_scale(40.0, 40.0) == pytest.approx(2.5)
    assert magnify.axis_scale(90.0, 40.0) == pytest.approx(1.75)


def test_scale_is_one_outside_radius(magnify):
    for t in (-60.0, -200.0, 140.0, 1000.0):
        assert magnify.axis_scale(t, 40.0) == 1.0


@pytest.mark.parametrize("edge", [-1.0, 1.0])
def test_displacement_is_continuous_at_radius(magnify, edge):
    p = 40.0
    boundary = p + edge * magnify.effect_radius
    inside = magnify.axis_displacement(boundary - edge * 1e-9, p)
    outside = magnify.axis_displacement(boundary + edge * 1e-9, p)
    assert inside == pytest.approx(outside, abs=1e-6)
    assert magnify.axis_scale(boundary - edge * 1e-9, p) == pytest.approx(1.0, abs=1e-6)


def test_displacement_keeps_focus_fixed(magnify):
    assert magnify.axis_displacement(40.0, 40.0) == pytest.approx(40.0)


def test_displacement_is_monotonic(magnify):
    ts = np.linspace(-400.0, 400.0, 801)
    displaced = [magnify.axis_displacement(float(t), 12.0) for t in ts]
    assert all(b > a for a, b in zip(displaced, displaced[1:]))


def test_far_items_shift_by_constant(magnify):
    # r * (a - 1) with a = (2 + s) / 2
    shift = 75.0
    assert magnify.axis_displacement(500.0, 0.0) == pytest.approx(500.0 + shift)
    assert magnify.axis_displacement(-500.0, 0.0) == pytest.approx(-500.0 - shift)


def test_zone_of_effect_is_a_cross(magnify):
    focus = Point2D(0.0, 0.0)
    # on the horizontal arm but far away vertically
    assert magnify.scale_at(Point2D(0.0, 250.0), focus) == 1.0
    assert magnify.scale_at(Point2D(50.0, 0.0), focus) == pytest.approx(1.75)
    assert magnify.scale_at(Point2D(50.0, 50.0), focus) == pytest.approx(1.75)


def test_magnification_without_focus_is_passthrough(magnify):
    item = Point2D(3.0, 4.0)
    assert magnify.get_style(item) == Transform(translate=item)


def test_magnification_style(magnify):
    style = magnify.get_style(Point2D(0.0, 0.0), Point2D(0.0, 0.0))
    assert style.scale == pytest.approx(2.5)
    assert style.translate.x == pytest.approx(0.0)
    assert style.opacity == 1.0


@pytest.mark.parametrize(("radius", "scale"), [(0.0, 1.0), (-5.0, 1.0), (10.0, -0.1)])
def test_magnification_rejects_bad_parameters(radius, scale):
    with pytest.raises(InvalidArgumentError):
        create_magnification_effect(radius, scale)


@pytest.mark.parametrize(
    ("distance", "opacity"),
    [(0.0, 1.0), (300.0, 1.0), (350.0, 0.5), (400.0, 0.0), (1000.0, 0.0)],
)
def test_edge_fade_opacity(distance, opacity):
    fade = EdgeFadeEffect(300.0, 100.0)
    assert fade.opacity_at(distance) == pytest.approx(opacity)


def test_edge_fade_measures_from_center():
    fade = create_edge_fade_effect(10.0, 10.0)
    assert fade.get_style(Point2D(0.0, 15.0)).opacity == pytest.approx(0.5)
    assert fade.get_style(Point2D(0.0, 15.0), center_position=Point2D(0.0, 10.0)).opacity == 1.0
    assert fade.get_style(Point2D(0.0, 15.0)).translate == ORIGIN


@pytest.mark.parametrize(("start", "drop"), [(-1.0, 10.0), (10.0, 0.0)])
def test_edge_fade_rejects_bad_parameters(start, drop):
    with pytest.raises(InvalidArgumentError):
        EdgeFadeEffect(start, drop)


def test_transform_composition():
    a = Transform(Point2D(1.0, 2.0), 2.0, 0.5)
    b = Transform(Point2D(3.0, 4.0), 3.0, 0.5)
    assert a @ b == Transform(Point2D(4.0, 6.0), 6.0, 0.25)
    assert a @ IDENTITY == a


def test_transform_to_css():
    style = Transform(Point2D(1.0, 2.0), 1.5, 0.5).to_css()
    assert style == {"transform": "translate(1.0px, 2.0px) scale(1.5, 1.5)", "opacity": 0.5}


def test_stack_composes_instead_of_overwriting():
    stack = EffectStack([MagnificationEffect(100.0, 1.0)])
    stack.register(EdgeFadeEffect(10.0, 100.0))
    assert len(stack) == 2

    item = Point2D(0.0, 60.0)
    style = stack.apply(item, Point2D(0.0, 0.0))
    assert style.scale == pytest.approx(1.0 + 0.5 * (math.cos(0.6 * math.pi) + 1.0))
    assert style.opacity == pytest.approx(0.5)


def test_empty_stack_is_identity():
    assert EffectStack().apply(Point2D(5.0, 5.0)) == IDENTITY


def test_vectorised_frame_matches_per_item():
    rng = np.random.default_rng(0)
    items = rng.uniform(-400.0, 400.0, size=(200, 2))
    focus = Point2D(10.0, -20.0)
    center = Point2D(-5.0, 5.0)
    stack = EffectStack([MagnificationEffect(120.0, 2.0), EdgeFadeEffect(150.0, 200.0)])

    translations, scales, opacities = stack.apply_many(items, focus, center)

    expected = [stack.apply(Point2D(float(x), float(y)), focus, center) for x, y in items]
    np.testing.assert_allclose(translations, [(t.translate.x, t.translate.y) for t in expected])
    np.testing.assert_allclose(scales, [t.scale for t in expected])
    np.testing.assert_allclose(opacities, [t.opacity for t in expected])


def test_vectorised_frame_without_focus():
    items = np.array([[1.0, 2.0], [3.0, 4.0]])
    translations, scales, opacities = MagnificationEffect(10.0, 1.0).get_styles(items)
    np.testing.assert_array_equal(translations, items)
    np.testing.assert_array_equal(scales, [1.0, 1.0])
    np.testing.assert_array_equal(opacities, [1.0, 1.0])


def test_base_class_evaluates_frames_item_by_item():
    class HalfOpacity(ItemStyleEffect):
        def get_style(self, item_position, focus_position=None, center_position=None):
            return Transform(translate=item_position, opacity=0.5)

    translations, scales, opacities = HalfOpacity().get_styles([[1.0, 2.0], [3.0, 4.0]])
    assert translations.shape == (2, 2)
    np.testing.assert_array_equal(translations, [[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_array_equal(scales, [1.0, 1.0])
    np.testing.assert_array_equal(opacities, [0.5, 0.5])


def test_frames_must_be_point_arrays():
    with pytest.raises(InvalidArgumentError):
        EffectStack([EdgeFadeEffect(1.0, 1.0)]).apply_many([[1.0, 2.0, 3.0]])


def test_empty_frame_yields_empty_arrays():
    stack = EffectStack([MagnificationEffect(10.0, 1.0), EdgeFadeEffect(1.0, 1.0)])

    translations, scales, opacities = stack.apply_many([], Point2D(0.0, 0.0))

    assert translations.shape == (0, 2)
    assert scales.shape == (0,)
    assert opacities.shape == (0,)
    assert MagnificationEffect(10.0, 1.0).get_styles(np.empty((0, 2)))[0].shape == (0, 2)
