"""Call-stack helpers for pointing diagnostics at user code."""

import sys
from types import FrameType

_PACKAGE = "veneer"


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(f"{_PACKAGE}.")


def external_caller(skip: int = 1) -> tuple[str, int, int]:
    """Return ``(filename, lineno, stacklevel)`` for the first frame outside veneer.

    ``stacklevel`` is relative to the caller of this function and is suitable
    for passing straight to :func:`warnings.warn` from that caller.
    """
    frame: FrameType | None = sys._getframe(skip)
    level = 1
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
        level += 1
    if frame is None:
        return "<unknown>", 0, level
    return frame.f_code.co_filename, frame.f_lineno, level
