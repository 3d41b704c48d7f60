import pytest

from lottiescene.keyframes import (
    BlendMode,
    EasingHandle,
    MatteMode,
    blend_mode_for,
    collect_tangents,
    keyframe_handle,
    matte_blend,
    spline_points,
)


def test_collect_tangents_pairs_two_arrays():
    handles = collect_tangents([0.1, 0.2], [0.3, 0.4])
    assert handles == [EasingHandle(0.1, 0.3), EasingHandle(0.2, 0.4)]


def test_collect_tangents_stops_at_shorter_array():
    handles = collect_tangents([0.1, 0.2, 0.5], [0.3])
    assert handles == [EasingHandle(0.1, 0.3)]


def test_collect_tangents_broadcasts_scalar_y():
    handles = collect_tangents([0.1, 0.2], 0.7)
    assert handles == [EasingHandle(0.1, 0.7), EasingHandle(0.2, 0.7)]


def test_collect_tangents_broadcasts_scalar_x():
    handles = collect_tangents(0.6, [0.1, 0.2, 0.3])
    assert [h.x for h in handles] == [0.6, 0.6, 0.6]
    assert [h.y for h in handles] == [0.1, 0.2, 0.3]


def test_collect_tangents_two_scalars():
    assert collect_tangents(0.25, 0.75) == [EasingHandle(0.25, 0.75)]


def test_collect_tangents_empty_array():
    assert collect_tangents([], 0.5) == []


def test_keyframe_handle_accepts_single_element_arrays():
    assert keyframe_handle([0.4], [0.9]) == EasingHandle(0.4, 0.9)


def test_keyframe_handle_accepts_scalars():
    assert keyframe_handle(0.4, 0.9) == EasingHandle(0.4, 0.9)


@pytest.mark.parametrize(
    "x, y",
    [([0.1, 0.2], 0.5), (0.5, [0.1, 0.2]), ([], 0.5)],
)
def test_keyframe_handle_rejects_multi_value_arrays(x, y):
    with pytest.raises(ValueError):
        keyframe_handle(x, y)


def test_spline_points_interleaves_vertex_and_tangents():
    vertices = [[1.0, 2.0], [3.0, 4.0]]
    ins = [[5.0, 6.0], [7.0, 8.0]]
    outs = [[9.0, 10.0], [11.0, 12.0]]
    points, closed = spline_points(vertices, ins, outs, True)
    assert points == [
        (1.0, 2.0),
        (5.0, 6.0),
        (9.0, 10.0),
        (3.0, 4.0),
        (7.0, 8.0),
        (11.0, 12.0),
    ]
    assert closed is True


def test_spline_points_pads_missing_tangents_with_zero():
    points, _ = spline_points([[1.0, 2.0], [3.0, 4.0]], [[5.0, 6.0]], [], False)
    assert points[4] == (0.0, 0.0)
    assert points[2] == (0.0, 0.0)
    assert points[5] == (0.0, 0.0)
    assert points[1] == (5.0, 6.0)


def test_spline_points_ignores_surplus_tangents():
    points, _ = spline_points([[1.0, 2.0]], [[5.0, 6.0], [7.0, 8.0]], [[9.0, 10.0], [1.0, 1.0]], False)
    assert len(points) == 3


def test_spline_points_closed_none_means_open():
    points, closed = spline_points([], [], [], None)
    assert points == []
    assert closed is False


def test_blend_mode_normal_needs_no_layer():
    assert blend_mode_for(BlendMode.NORMAL) is None
    assert blend_mode_for("normal") is None


def test_blend_mode_multiply():
    assert blend_mode_for(BlendMode.MULTIPLY) == "multiply"


@pytest.mark.parametrize("mode", list(BlendMode))
def test_blend_mode_lookup_by_int_and_name_agree(mode):
    if mode in (BlendMode.ADD, BlendMode.HARD_MIX):
        with pytest.raises(ValueError):
            blend_mode_for(mode.value)
    else:
        assert blend_mode_for(mode.value) == blend_mode_for(mode.name) == blend_mode_for(mode)


def test_blend_mode_name_spelling_is_flexible():
    assert blend_mode_for("Color-Dodge") == blend_mode_for("colordodge") == blend_mode_for(
        BlendMode.COLOR_DODGE
    )


@pytest.mark.parametrize("mode", [BlendMode.ADD, BlendMode.HARD_MIX, "add"])
def test_blend_mode_unsupported_raises(mode):
    with pytest.raises(ValueError):
        blend_mode_for(mode)


@pytest.mark.parametrize("mode", ["sparkle", 99, True])
def test_blend_mode_unknown_raises(mode):
    with pytest.raises(ValueError):
        blend_mode_for(mode)


def test_matte_normal_mixes_normally():
    assert matte_blend(MatteMode.NORMAL) == "normal"


def test_matte_alpha_and_luma_keep_inside():
    assert matte_blend(MatteMode.ALPHA) == "src_in"
    assert matte_blend(MatteMode.LUMA) == matte_blend(MatteMode.ALPHA)


def test_matte_inverted_modes_keep_outside():
    assert matte_blend(MatteMode.INVERTED_ALPHA) == "src_out"
    assert matte_blend(MatteMode.INVERTED_LUMA) == matte_blend(MatteMode.INVERTED_ALPHA)


def test_matte_lookup_by_int_and_name():
    assert matte_blend(MatteMode.INVERTED_LUMA.value) == matte_blend("inverted_luma")
    assert matte_blend(MatteMode.ALPHA.value) == matte_blend("Alpha")


def test_matte_unknown_raises():
    with pytest.raises(ValueError):
        matte_blend("glow")