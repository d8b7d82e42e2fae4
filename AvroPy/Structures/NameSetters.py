from abc import abstractmethod
from typing import Any, Mapping
from typeguard import typechecked
from typing_extensions import override

from AvroPy.Structures.Name import NULL_NAMESPACE
from AvroPy.Structures.NameErrors import NamingError, SchemaFieldError
from AvroPy.Structures.NameValidation import check_local_name

class NameUnderConstruction:
    """ Raw fragments collected by the setters before qualification. """
    def __init__(self):
        self.name = ""
        self.namespace = NULL_NAMESPACE
        self.enclosing_namespace = NULL_NAMESPACE

class NameSetter:
    @abstractmethod
    def apply(self, target : NameUnderConstruction) -> None:
        raise NotImplementedError("Method apply not implemented for abstract class NameSetter")

class FromSchemaFields(NameSetter):
    @typechecked
    def __init__(self, schema : Mapping[str, Any]):
        self.schema = schema

    @override
    def apply(self, target : NameUnderConstruction) -> None:
        if "name" not in self.schema:
            raise NamingError("ought to have name key")
        name = self.schema["name"]
        if not isinstance(name, str) or len(name) == 0:
            raise SchemaFieldError("name ought to be non-empty string", name)
        target.name = name

        if "namespace" in self.schema:
            namespace = self.schema["namespace"]
            if not isinstance(namespace, str):
                raise SchemaFieldError("namespace ought to be a string", namespace)
            target.namespace = namespace

class FromLiteralName(NameSetter):
    @typechecked
    def __init__(self, candidate : str):
        self.candidate = candidate

    @override
    def apply(self, target : NameUnderConstruction) -> None:
        check_local_name(self.candidate)
        target.name = self.candidate

class FromNamespace(NameSetter):
    @typechecked
    def __init__(self, namespace : str):
        self.namespace = namespace

    @override
    def apply(self, target : NameUnderConstruction) -> None:
        target.namespace = self.namespace

class FromEnclosingNamespace(NameSetter):
    @typechecked
    def __init__(self, namespace : str):
        self.namespace = namespace

    @override
    def apply(self, target : NameUnderConstruction) -> None:
        target.enclosing_namespace = self.namespace

__all__ = ['NameUnderConstruction', 'NameSetter', 'FromSchemaFields', 'FromLiteralName', 'FromNamespace', 'FromEnclosingNamespace']
