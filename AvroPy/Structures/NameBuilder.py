import logging
from typing import Any, Mapping
from typeguard import typechecked

from AvroPy.Structures.Name import NULL_NAMESPACE, Name, qualify
from AvroPy.Structures.NameErrors import NamingError
from AvroPy.Structures.NameSetters import FromEnclosingNamespace, FromLiteralName, FromSchemaFields, NameSetter, NameUnderConstruction

logger = logging.getLogger(__name__)

@typechecked
def build_name(*setters : NameSetter) -> Name:
    """
    Applies the setters in order and qualifies the result. The first setter
    that raises aborts the build; no Name is created in that case.
    """
    raw = NameUnderConstruction()
    for setter in setters:
        setter.apply(raw)

    if len(raw.name) == 0:
        raise NamingError("ought to have a name")
    qualified = qualify(raw.name, raw.namespace, raw.enclosing_namespace)

    logger.debug("resolved name %s (namespace=%r, enclosing=%r)", qualified, raw.namespace, raw.enclosing_namespace)
    return Name(qualified, raw.namespace, raw.enclosing_namespace)

@typechecked
def string_to_name(s : str, enclosing_namespace : str = NULL_NAMESPACE) -> Name:
    return build_name(FromLiteralName(s), FromEnclosingNamespace(enclosing_namespace))

@typechecked
def name_from_schema(schema : Mapping[str, Any], enclosing_namespace : str = NULL_NAMESPACE) -> Name:
    """ The usual call while descending a schema: fields of the node plus the parent's namespace. """
    return build_name(FromSchemaFields(schema), FromEnclosingNamespace(enclosing_namespace))

__all__ = ['build_name', 'string_to_name', 'name_from_schema']
