"""Resolve a ``module.path:attribute`` target to a finished schema definition.

The attribute may be:

- a ``SchemaDefinition`` (a dict of nodes / nested dicts);
- a ``SchemaBuilder``, whose ``build()`` is called;
- a zero-argument callable returning either of the above.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from config_guard.builder import SchemaBuilder
from config_guard.domain import SchemaDefinition, SchemaTargetError, is_definition

logger = logging.getLogger(__name__)


def load_target(dotted_path: str) -> Any:
    """Import and return the object named by ``'module.path:attribute'``."""
    if ":" not in dotted_path:
        raise SchemaTargetError(
            f"Invalid schema target {dotted_path!r}: expected 'module.path:attribute'"
        )
    module_path, attr_name = dotted_path.rsplit(":", 1)
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise SchemaTargetError(
            f"Cannot import schema module {module_path!r}: {exc}"
        ) from exc
    except Exception as exc:
        # The module itself failed while running (bad builder code, NameError, ...).
        raise SchemaTargetError(
            f"Error while importing schema module {module_path!r}: "
            f"{type(exc).__name__}: {exc}"
        ) from exc
    try:
        return getattr(module, attr_name)
    except AttributeError as exc:
        raise SchemaTargetError(
            f"Module {module_path!r} has no attribute {attr_name!r}"
        ) from exc


def _to_definition(obj: Any, dotted_path: str) -> SchemaDefinition:
    if isinstance(obj, SchemaBuilder):
        return obj.build()
    if is_definition(obj):
        return obj
    raise SchemaTargetError(
        f"Schema target {dotted_path!r} resolved to {type(obj).__name__}, "
        "expected a schema definition or SchemaBuilder"
    )


def resolve_schema(dotted_path: str) -> SchemaDefinition:
    """Load *dotted_path* and return the schema definition it describes."""
    obj = load_target(dotted_path)
    if callable(obj) and not isinstance(obj, SchemaBuilder):
        logger.debug("Calling schema factory %s", dotted_path)
        try:
            obj = obj()
        except Exception as exc:
            raise SchemaTargetError(
                f"Schema factory {dotted_path!r} failed: {type(exc).__name__}: {exc}"
            ) from exc
    schema = _to_definition(obj, dotted_path)
    logger.debug("Resolved %s to a schema with %d top-level key(s)", dotted_path, len(schema))
    return schema
