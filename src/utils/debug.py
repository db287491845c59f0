from __future__ import annotations

_verbose = False
_prefix = "penstroke"


def set_verbose(enabled: bool) -> bool:
    """Toggle debug output. Returns the previous setting."""
    global _verbose
    previous = _verbose
    _verbose = enabled
    return previous


def is_verbose() -> bool:
    return _verbose


def log(message: str) -> None:
    if _verbose:
        print(f"[{_prefix}] {message}")
