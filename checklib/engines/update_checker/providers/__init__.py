"""Registry clients — auto-registered on import."""

from checklib.engines.update_checker.providers import (
    cdnjs,  # noqa: F401
    jsdelivr,  # noqa: F401
    unpkg,  # noqa: F401
)
