from __future__ import annotations

import numpy as np

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def is_verbose() -> bool:
    return _verbose


def log(message: str) -> None:
    if _verbose:
        print(message)


def log_draw(
    label: str, occurrence: int, min_value: int, max_value: int, value: int
) -> None:
    log(f"draw {label}[{occurrence}] in [{min_value},{max_value}] -> {value}")


def log_vertices(name: str, vertices: np.ndarray) -> None:
    if not _verbose:
        return
    if vertices.size == 0:
        log(f"{name}: shape={vertices.shape} empty")
        return
    lo = vertices.reshape(-1, 2).min(axis=0)
    hi = vertices.reshape(-1, 2).max(axis=0)
    log(
        f"{name}: shape={vertices.shape} dtype={vertices.dtype} "
        f"x=[{int(lo[0])},{int(hi[0])}] y=[{int(lo[1])},{int(hi[1])}]"
    )
