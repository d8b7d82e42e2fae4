import logging
from typing import Any, Dict, Iterator, List

from AvroPy.Structures.Name import NULL_NAMESPACE, Name
from AvroPy.Structures.NameBuilder import string_to_name
from AvroPy.Structures.NameErrors import DuplicateNameError, UnknownNameError

logger = logging.getLogger(__name__)

class NameRegistry:
    """
    Named types seen so far in a schema document, keyed by qualified name.
    References are resolved against the namespace they appear in.
    """
    def __init__(self):
        self.name_dict : Dict[Name, Any] = {}

    def register(self, name : Name, value : Any):
        if name in self.name_dict:
            raise DuplicateNameError(name.canonical_string())
        logger.debug("registered %s", name)
        self.name_dict[name] = value

    def lookup(self, reference : str, enclosing_namespace : str = NULL_NAMESPACE) -> Any:
        name = string_to_name(reference, enclosing_namespace)
        if name not in self.name_dict:
            raise UnknownNameError(name.canonical_string())
        return self.name_dict[name]

    def names(self) -> List[Name]:
        return list(self.name_dict.keys())

    def __contains__(self, name : object) -> bool:
        return name in self.name_dict

    def __iter__(self) -> Iterator[Name]:
        return iter(self.name_dict)

    def __len__(self) -> int:
        return len(self.name_dict)

__all__ = ['NameRegistry']
