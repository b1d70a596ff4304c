import numpy as np
import pytest

from src.pathsvg.config import CanvasConfig
from src.pathsvg.errors import DegenerateCanvas
from src.pathsvg.randomness import LocalRandomness
from src.pathsvg.waypoints import plan, plan_padding_bounds


class ScriptedPort:
    """Fixed step count; every other draw returns its lower or upper bound."""

    def __init__(self, step_count: int, use_max: bool = False) -> None:
        self.step_count = step_count
        self.use_max = use_max

    def ranged_draw(
        self, seed: int, label: str, occurrence: int, min_value: int, max_value: int
    ) -> int:
        if label == "STEP_COUNT":
            return self.step_count
        return max_value if self.use_max else min_value


class RecordingPort:
    def __init__(self) -> None:
        self.inner = LocalRandomness()
        self.calls: list[tuple[str, int]] = []

    def ranged_draw(
        self, seed: int, label: str, occurrence: int, min_value: int, max_value: int
    ) -> int:
        self.calls.append((label, occurrence))
        return self.inner.ranged_draw(seed, label, occurrence, min_value, max_value)


CANVAS = CanvasConfig(1024, 1024)


@pytest.mark.parametrize("step_count", range(1, 51))
def test_skeleton_length_for_every_step_count(step_count: int) -> None:
    skeleton = plan(0, ScriptedPort(step_count), CANVAS)
    assert skeleton.step_count == step_count
    assert skeleton.vertices.shape == (step_count + 2, 2)
    assert skeleton.vertices.dtype == np.int64


def test_seed_42_scenario() -> None:
    skeleton = plan(42, LocalRandomness(), CANVAS)
    k = skeleton.step_count
    assert 1 <= k <= 50
    assert len(skeleton.vertices) == k + 2
    assert tuple(skeleton.vertices[0]) == (-50, 512)
    assert tuple(skeleton.vertices[-1]) == (1074, 512)


def test_waypoints_stay_inside_padded_box() -> None:
    lo, hi = plan_padding_bounds(CANVAS.width)
    assert (lo, hi) == (102, 341)
    for seed in range(40):
        skeleton = plan(seed, LocalRandomness(), CANVAS)
        assert lo <= skeleton.padding <= hi
        inner = skeleton.vertices[1:-1]
        assert bool(np.all(inner >= skeleton.padding))
        assert bool(np.all(inner <= CANVAS.width - skeleton.padding))


def test_waypoints_reach_both_corners_of_inner_box() -> None:
    low = plan(0, ScriptedPort(2), CANVAS)
    assert low.padding == 102
    np.testing.assert_array_equal(low.vertices[1:-1], [[102, 102], [102, 102]])

    high = plan(0, ScriptedPort(1, use_max=True), CANVAS)
    assert high.padding == 341
    np.testing.assert_array_equal(high.vertices[1], [1024 - 341, 1024 - 341])


def test_draw_order_and_occurrences() -> None:
    port = RecordingPort()
    skeleton = plan(7, port, CANVAS)
    expected = [("STEP_COUNT", 0), ("PADDING", 0)]
    for i in range(skeleton.step_count):
        expected += [("TARGET_X", i), ("TARGET_Y", i)]
    assert port.calls == expected


def test_plan_is_deterministic_and_read_only() -> None:
    a = plan(99, LocalRandomness(), CANVAS)
    b = plan(99, LocalRandomness(), CANVAS)
    assert a.step_count == b.step_count
    np.testing.assert_array_equal(a.vertices, b.vertices)
    assert not a.vertices.flags.writeable
    with pytest.raises(ValueError):
        a.vertices[0, 0] = 1


def test_degenerate_canvas() -> None:
    # Padding is at least width/10 = 100, which swallows a 100px tall canvas.
    with pytest.raises(DegenerateCanvas):
        plan(0, ScriptedPort(3), CanvasConfig(1000, 100))


def test_canvas_config_rejects_non_positive_sizes() -> None:
    with pytest.raises(ValueError):
        CanvasConfig(0, 100)
    with pytest.raises(ValueError):
        CanvasConfig(100, -1)
