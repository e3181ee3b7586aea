"""Application layer: resolving schemas declared in user code."""

from .resolve import load_target, resolve_schema

__all__ = ["load_target", "resolve_schema"]
