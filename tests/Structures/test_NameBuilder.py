import pytest
from typeguard import TypeCheckError
from typing_extensions import override

from AvroPy.Structures.NameBuilder import build_name, name_from_schema, string_to_name
from AvroPy.Structures.NameErrors import InvalidNameError, NamingError, SchemaFieldError
from AvroPy.Structures.NameSetters import FromEnclosingNamespace, FromLiteralName, FromNamespace, FromSchemaFields, NameSetter, NameUnderConstruction

def test_explicit_namespace():
    n = build_name(FromLiteralName("Foo"), FromNamespace("com.example"))
    assert n.qualified == "com.example.Foo"
    assert n.derived_namespace() == "com.example"

def test_enclosing_namespace_used_when_no_namespace():
    n = build_name(FromLiteralName("Foo"), FromNamespace(""), FromEnclosingNamespace("com.example"))
    assert n.qualified == "com.example.Foo"

def test_namespace_beats_enclosing_namespace():
    n = build_name(FromEnclosingNamespace("outer"), FromLiteralName("Foo"), FromNamespace("inner"))
    assert n.qualified == "inner.Foo"
    assert n.namespace == "inner"
    assert n.enclosing_namespace == "outer"

def test_dotted_name_ignores_namespace():
    n = build_name(FromLiteralName("com.example.Foo"), FromNamespace("ignored.ns"), FromEnclosingNamespace("outer"))
    assert n.qualified == "com.example.Foo"

def test_no_namespace():
    assert build_name(FromLiteralName("Foo")).qualified == "Foo"

def test_embedded_namespace_not_validated():
    assert string_to_name("1x.$y.Foo").qualified == "1x.$y.Foo"

def test_empty_literal_name():
    with pytest.raises(InvalidNameError) as e:
        build_name(FromLiteralName(""))
    assert "not be empty" in str(e.value)

def test_bad_first_character():
    with pytest.raises(NamingError) as e:
        string_to_name("1abc")
    assert "start with [A-Za-z_]" in str(e.value)

def test_bad_other_character():
    with pytest.raises(NamingError) as e:
        string_to_name("ab$c")
    assert "have second and remaining characters contain only [A-Za-z0-9_]" in str(e.value)

def test_no_name_set():
    with pytest.raises(NamingError) as e:
        build_name(FromNamespace("com.example"))
    assert e.value.reason == "ought to have a name"

class RecordingSetter(NameSetter):
    def __init__(self):
        self.applied = False

    @override
    def apply(self, target : NameUnderConstruction) -> None:
        self.applied = True

def test_first_failure_stops_the_build():
    later = RecordingSetter()
    with pytest.raises(InvalidNameError):
        build_name(FromLiteralName("1abc"), later)
    assert not later.applied

def test_schema_fields():
    n = build_name(FromSchemaFields({"name": "Foo", "namespace": "com.example", "type": "record"}))
    assert n.qualified == "com.example.Foo"

def test_schema_fields_with_enclosing_namespace():
    assert name_from_schema({"name": "Foo"}, "com.example").qualified == "com.example.Foo"
    assert name_from_schema({"name": "Foo", "namespace": ""}, "com.example").qualified == "com.example.Foo"
    assert name_from_schema({"name": "a.Foo", "namespace": "b"}, "c").qualified == "a.Foo"

def test_schema_fields_name_is_not_character_checked():
    assert name_from_schema({"name": "ab$c"}).qualified == "ab$c"

def test_schema_fields_missing_name():
    with pytest.raises(NamingError) as e:
        name_from_schema({"namespace": "com.example"})
    assert e.value.reason == "ought to have name key"

@pytest.mark.parametrize("value", ["", 3, None, ["Foo"]])
def test_schema_fields_bad_name(value):
    with pytest.raises(SchemaFieldError) as e:
        name_from_schema({"name": value})
    assert e.value.reason == "name ought to be non-empty string"

def test_schema_fields_bad_namespace():
    with pytest.raises(SchemaFieldError) as e:
        name_from_schema({"name": "Foo", "namespace": 12})
    assert e.value.reason == "namespace ought to be a string"
    assert str(e.value) == "namespace ought to be a string: int"

def test_setter_arguments_are_type_checked():
    with pytest.raises(TypeCheckError):
        FromLiteralName(3) # type: ignore
    with pytest.raises(TypeCheckError):
        FromSchemaFields(["name"]) # type: ignore
