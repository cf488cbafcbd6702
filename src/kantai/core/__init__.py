"""Core package initializer for Kantai.

Downstream code imports from the submodules directly, e.g.:
    from kantai.core.settings import settings, load_settings, Settings, get_logger
    from kantai.core.engine import position_at, track_up_to, time_bounds
"""

from __future__ import annotations

__all__ = ["__doc__"]
