"""Constructor introspection shared by the metadata extractor and the resolver."""

import builtins
import inspect
import typing
from typing import Any, List, Tuple, Type, get_type_hints


def injectable_parameters(cls: Type) -> List[Tuple[str, Any]]:
    """List the constructor parameters that take part in injection.

    ``self``, ``*args``, ``**kwargs`` and parameters with a default value are left out.
    Annotations are resolved through ``get_type_hints``; when a forward reference
    cannot be resolved the raw annotations are used, so such parameters carry a
    string. Parameters without annotation carry ``inspect.Parameter.empty``.

    Args:
        cls: The class whose ``__init__`` is inspected.

    Returns:
        Ordered ``(parameter name, annotation)`` pairs.
    """
    init = cls.__init__
    try:
        signature = inspect.signature(init)
    except (TypeError, ValueError):
        return []

    try:
        type_hints = get_type_hints(init)
    except Exception:
        type_hints = dict(getattr(init, "__annotations__", {}))

    parameters = []
    for param_name, param in signature.parameters.items():
        if param_name == "self":
            continue
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if param.default is not inspect.Parameter.empty:
            continue
        parameters.append((param_name, type_hints.get(param_name, inspect.Parameter.empty)))
    return parameters


def is_injectable_type(annotation: Any) -> bool:
    """Whether an annotation names a class the container could provide.

    Builtins such as ``object``, ``int`` or ``str`` and typing constructs are
    placeholders, not dependencies.
    """
    return inspect.isclass(annotation) and annotation.__module__ not in (builtins.__name__, typing.__name__)


def is_forward_reference(annotation: Any) -> bool:
    """Whether an annotation is an unresolved string naming a class, possibly dotted."""
    if not isinstance(annotation, str):
        return False
    name = annotation.strip("'\"")
    if name in vars(builtins):
        return False
    return all(part.isidentifier() for part in name.split("."))


def annotation_name(annotation: Any) -> str:
    """Bare class name of a class or string annotation."""
    if isinstance(annotation, str):
        return annotation.strip("'\"").rsplit(".", 1)[-1]
    return annotation.__name__
