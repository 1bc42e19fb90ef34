# topmark:header:start
#
#   project      : envexport
#   file         : introspection.py
#   file_relpath : src/envexport/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Import and describe objects referenced by ``module:qualname`` specs."""

from __future__ import annotations

import importlib
from inspect import getmodule
from typing import Any

from envexport.config.logging import EnvExportLogger, get_logger

logger: EnvExportLogger = get_logger(__name__)


class ObjectSpecError(ValueError):
    """An object spec is malformed or does not resolve to an object."""


def format_qualified_name(obj: Any) -> str:
    """Return a human-friendly ``module.qualname`` for a class or callable.

    Falls back to the object's class name when it has no qualified name, and
    uses ``inspect.getmodule`` as a last resort to resolve the module name.

    Args:
        obj (Any): The class or callable to describe.

    Returns:
        str: A string like ``"package.module.QualifiedName"`` or ``"QualifiedName"``
            if the module cannot be resolved.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    qual_name: str | None = getattr(obj, "__qualname__", None)

    if qual_name is None:
        qual_name = getattr(obj, "__name__", None)
    if qual_name is None:
        qual_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"{mod_name}.{qual_name}" if mod_name else qual_name


def import_object(spec: str) -> Any:
    """Import the object named by ``spec``.

    Args:
        spec (str): ``package.module:QualifiedName``; the qualified name may be
            dotted to reach nested classes (``module:Outer.Inner``).

    Returns:
        Any: The resolved object.

    Raises:
        ObjectSpecError: If the spec is malformed, the module cannot be imported,
            or the attribute path does not exist.
    """
    module_name, sep, qual_name = spec.partition(":")
    if not sep or not module_name or not qual_name:
        raise ObjectSpecError(f"Expected 'module:QualifiedName', got {spec!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ObjectSpecError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in qual_name.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ObjectSpecError(f"{module_name!r} has no attribute {qual_name!r}") from exc

    logger.debug("Resolved %s to %s", spec, format_qualified_name(obj))
    return obj
