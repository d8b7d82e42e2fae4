import re
from typing import Any, NoReturn, Tuple
from typeguard import typechecked

from AvroPy.Structures.NameErrors import NamingError

NAMESPACE_SEPARATOR = "."
NULL_NAMESPACE = ""

# compiled once, read-only afterwards
NAMESPACE_SPLITTER = re.compile(r"\.")

@typechecked
def split_namespace(s : str) -> Tuple[str, str]:
    """ Splits at the final separator into (namespace, local name); the namespace is empty when there is no separator. """
    parts = NAMESPACE_SPLITTER.split(s)
    return NAMESPACE_SEPARATOR.join(parts[:-1]), parts[-1]

@typechecked
def qualify(raw_name : str, raw_namespace : str, raw_enclosing_namespace : str) -> str:
    # a dotted name already carries its namespace, so both namespace fields are ignored
    if NAMESPACE_SEPARATOR in raw_name:
        return raw_name
    if raw_namespace != NULL_NAMESPACE:
        return raw_namespace + NAMESPACE_SEPARATOR + raw_name
    if raw_enclosing_namespace != NULL_NAMESPACE:
        return raw_enclosing_namespace + NAMESPACE_SEPARATOR + raw_name
    return raw_name

class Name:
    """
    A fully qualified name of a record, enum or fixed type (or a field name
    or enum symbol). Instances are created by build_name and never change.

    The namespace and enclosing_namespace attributes keep the raw fragments
    the name was built from; derived_namespace() is computed from the
    qualified string and may differ from both.
    """
    __slots__ = ('_qualified', '_namespace', '_enclosing_namespace')

    @typechecked
    def __init__(self, qualified : str, namespace : str = NULL_NAMESPACE, enclosing_namespace : str = NULL_NAMESPACE):
        if len(qualified) == 0:
            raise NamingError("ought to have a name")
        object.__setattr__(self, '_qualified', qualified)
        object.__setattr__(self, '_namespace', namespace)
        object.__setattr__(self, '_enclosing_namespace', enclosing_namespace)

    def __setattr__(self, key : str, value : Any) -> NoReturn:
        raise AttributeError(f"Name is immutable, cannot set {key}")

    def __delattr__(self, key : str) -> NoReturn:
        raise AttributeError(f"Name is immutable, cannot delete {key}")

    @property
    def qualified(self) -> str:
        return self._qualified

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def enclosing_namespace(self) -> str:
        return self._enclosing_namespace

    def canonical_string(self) -> str:
        return self._qualified

    def derived_namespace(self) -> str:
        return split_namespace(self._qualified)[0]

    def local_name(self) -> str:
        return split_namespace(self._qualified)[1]

    @typechecked
    def equals(self, other : 'Name') -> bool:
        return self._qualified == other._qualified

    def __eq__(self, other : object) -> bool:
        if self is other: return True
        if not isinstance(other, Name): return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._qualified)

    def __str__(self) -> str:
        return self._qualified

    def __repr__(self) -> str:
        return f"Name({self._qualified!r})"

__all__ = ['Name', 'qualify', 'split_namespace', 'NAMESPACE_SEPARATOR', 'NULL_NAMESPACE', 'NAMESPACE_SPLITTER']
