"""Taichi runtime initialization.

The canvas and the preview window keep their pixels in Taichi fields, so the
Taichi runtime must be up before the first :class:`~tracy.preview.canvas.Canvas`
is created. :func:`init_backend` initializes it exactly once per process;
calling ``ti.init`` again would invalidate every field allocated so far.
"""

import logging
import threading

import taichi as ti

from tracy import config

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_initialized = False


def init_backend(arch: str | None = None, **kwargs) -> None:
    """Initialize Taichi if it has not been initialized by Tracy yet.

    Args:
        arch: ``"cpu"`` or ``"gpu"``. Defaults to ``TRACY_ARCH``.
        **kwargs: Forwarded to ``ti.init`` (e.g. ``random_seed``).
    """
    global _initialized

    with _lock:
        if _initialized:
            return

        name = (arch or config.ARCH).lower()
        ti_arch = ti.gpu if name == "gpu" else ti.cpu
        ti.init(arch=ti_arch, **kwargs)
        _initialized = True
        logger.info("Taichi backend initialized (arch=%s)", name)


def is_backend_initialized() -> bool:
    return _initialized
