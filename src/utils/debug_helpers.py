from __future__ import annotations

import numpy as np

from . import debug

_seen: set[str] = set()


def log_once(key: str, message: str) -> None:
    if debug.is_verbose() and key not in _seen:
        _seen.add(key)
        debug.log(message)


def log_array(name: str, arr: np.ndarray) -> None:
    """Log shape and per-column ranges of a (N,K) array, e.g. a spine."""
    if not debug.is_verbose():
        return
    if arr.size == 0:
        debug.log(f"{name}: shape={arr.shape} empty")
        return
    cols = arr.reshape(arr.shape[0], -1)
    finite_all = bool(np.isfinite(cols).all())
    ranges = " ".join(
        f"[{float(np.nanmin(cols[:, k])):.6g},{float(np.nanmax(cols[:, k])):.6g}]"
        for k in range(cols.shape[1])
    )
    debug.log(f"{name}: shape={arr.shape} finite_all={finite_all} ranges={ranges}")
