"""Public runtime orchestration entry points.

This package groups the interactive session bootstrap (`run_session`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_session(*args, **kwargs):
    """Lazily import session entrypoint to avoid runtime bootstrap on import."""
    from .app import run_session as _run_session

    return _run_session(*args, **kwargs)


def render_snapshot(*args, **kwargs):
    """Lazily import the one-shot frame renderer."""
    from .app import render_snapshot as _render_snapshot

    return _render_snapshot(*args, **kwargs)


__all__ = [
    "run_session",
    "render_snapshot",
]
