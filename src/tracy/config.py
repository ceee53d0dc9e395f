"""Environment-driven defaults for Tracy.

Values are read once at import time. Command-line scripts override them per
run; library code only falls back to them when the caller passes nothing.
"""

import os

# Logging settings
LOG_LEVEL = os.getenv("TRACY_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("TRACY_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Rendering settings
WORKERS = int(os.getenv("TRACY_WORKERS", "0")) or (os.cpu_count() or 1)

# Taichi backend used for the canvas and the preview window ("cpu" or "gpu")
ARCH = os.getenv("TRACY_ARCH", "cpu").lower()
