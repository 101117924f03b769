"""
Type-name introspection for debug output.

Names are obtained through a TypeNameResolver supplied by the host, so
hosts that keep their own type registry (scripted entities, proxies,
names using "::" package separators) can report the names they expect.
PythonTypeNameResolver is used when no resolver is given.
"""

import logging
from typing import Any, Mapping, Optional, Protocol

logger = logging.getLogger(__name__)

PACKAGE_SEPARATOR = "::"


class TypeNameResolver(Protocol):
    """Capability returning the fully-qualified type name of an object, or None."""

    def type_name_of(self, obj: Any) -> Optional[str]:
        ...


class PythonTypeNameResolver:
    """
    Resolve names from Python's own type information.

    Accepts instances as well as classes; both report "module.QualName".
    Built-in types report their module too, e.g. "builtins.int".
    """

    def type_name_of(self, obj: Any) -> Optional[str]:
        if obj is None:
            return None
        cls = obj if isinstance(obj, type) else type(obj)
        return f"{cls.__module__}.{cls.__qualname__}"


class RegistryTypeNameResolver:
    """
    Resolve names from a host-provided mapping of type to name.

    Lookup walks the MRO, so subclasses of a registered type resolve to the
    registered name unless registered themselves. Unregistered types are
    passed to `fallback` when one is given.

    Example:
        >>> resolver = RegistryTypeNameResolver({Player: "game::entities::Player"})
        >>> get_class_name(Player(), resolver=resolver)
        'game.entities.Player'
    """

    def __init__(
        self,
        names: Mapping[type, str],
        fallback: Optional[TypeNameResolver] = None
    ) -> None:
        self.names = dict(names)
        self.fallback = fallback

    def type_name_of(self, obj: Any) -> Optional[str]:
        if obj is None:
            return None
        cls = obj if isinstance(obj, type) else type(obj)
        for base in cls.__mro__:
            if base in self.names:
                return self.names[base]
        if self.fallback is not None:
            return self.fallback.type_name_of(obj)
        return None


DEFAULT_RESOLVER = PythonTypeNameResolver()


def get_class_name(
    obj: Any,
    simple: bool = False,
    resolver: Optional[TypeNameResolver] = None
) -> Optional[str]:
    """
    Get the class name of an object or class.

    "::" package separators are replaced with ".". With simple=True only
    the part after the last "." is returned.

    Args:
        obj: Instance or class to name
        simple: Return only the unqualified name
        resolver: Name source (default: PythonTypeNameResolver)

    Returns:
        Class name, or None if the resolver cannot name `obj`

    Example:
        >>> get_class_name(OrderedDict())
        'collections.OrderedDict'
        >>> get_class_name(OrderedDict, simple=True)
        'OrderedDict'
    """
    resolver = resolver if resolver is not None else DEFAULT_RESOLVER
    name = resolver.type_name_of(obj)
    if name is None:
        logger.debug(f"Type name of {type(obj).__name__} object could not be resolved")
        return None

    name = name.replace(PACKAGE_SEPARATOR, ".")
    if simple:
        name = name[name.rfind(".") + 1:]
    return name


def same_class_name(
    obj1: Any,
    obj2: Any,
    simple: bool = True,
    resolver: Optional[TypeNameResolver] = None
) -> bool:
    """Check whether two objects (or classes) report the same class name."""
    return get_class_name(obj1, simple, resolver) == get_class_name(obj2, simple, resolver)
