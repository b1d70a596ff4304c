import numpy as np

from src.pathsvg.config import CanvasConfig
from src.pathsvg.jitter import jitter
from src.pathsvg.labels import AWA, THOUGHT, WILL
from src.pathsvg.randomness import LocalRandomness
from src.pathsvg.waypoints import plan


class BoundPort:
    def __init__(self, use_max: bool) -> None:
        self.use_max = use_max
        self.calls: list[tuple[str, int]] = []

    def ranged_draw(
        self, seed: int, label: str, occurrence: int, min_value: int, max_value: int
    ) -> int:
        self.calls.append((label, occurrence))
        return max_value if self.use_max else min_value


CANVAS = CanvasConfig(1024, 1024)


def test_max_offsets_are_clamped_to_canvas() -> None:
    V = np.array([[-50, 512], [1020, 1020], [500, 3], [1074, 512]], dtype=np.int64)
    out = jitter(0, BoundPort(use_max=True), V, THOUGHT, CANVAS)
    expected = np.array([[0, 522], [1024, 1024], [510, 13], [1024, 522]])
    np.testing.assert_array_equal(out, expected)


def test_zero_offsets_only_clamp() -> None:
    V = np.array([[-50, 512], [10, 20], [1074, 512]], dtype=np.int64)
    out = jitter(0, BoundPort(use_max=False), V, WILL, CANVAS)
    np.testing.assert_array_equal(out, [[0, 512], [10, 20], [1024, 512]])


def test_jitter_uses_strand_labels_per_vertex() -> None:
    V = np.array([[1, 1], [2, 2], [3, 3]], dtype=np.int64)
    port = BoundPort(use_max=False)
    jitter(0, port, V, AWA, CANVAS)
    assert port.calls == [
        ("AWA_DX", 0),
        ("AWA_DY", 0),
        ("AWA_DX", 1),
        ("AWA_DY", 1),
        ("AWA_DX", 2),
        ("AWA_DY", 2),
    ]


def test_real_jitter_is_bounded_and_one_directional() -> None:
    port = LocalRandomness()
    for seed in range(25):
        skeleton = plan(seed, port, CANVAS)
        for strand in (THOUGHT, WILL, AWA):
            out = jitter(seed, port, skeleton.vertices, strand, CANVAS)
            assert out.shape == skeleton.vertices.shape
            assert bool(np.all(out >= 0))
            assert bool(np.all(out <= 1024))
            # Interior waypoints never need clamping on a 1024 canvas.
            delta = out[1:-1] - skeleton.vertices[1:-1]
            assert bool(np.all(delta >= 0))
            assert bool(np.all(delta <= 10))


def test_strands_jitter_independently() -> None:
    port = LocalRandomness()
    skeleton = plan(42, port, CANVAS)
    before = skeleton.vertices.copy()
    outs = [jitter(42, port, skeleton.vertices, s, CANVAS) for s in (THOUGHT, WILL, AWA)]
    np.testing.assert_array_equal(skeleton.vertices, before)
    assert not np.array_equal(outs[0], outs[1])
    assert not np.array_equal(outs[1], outs[2])
