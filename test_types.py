import pytest

from strictshape.types import TypeTag, kind_of, resolve_tag, default_value_for
from strictshape.errors import UnsupportedDefaultError

class Point(object):
    pass

@pytest.mark.parametrize('value, tag', [
    (None, TypeTag.null),
    (True, TypeTag.boolean),
    (False, TypeTag.boolean),
    (0, TypeTag.integer),
    (102, TypeTag.integer),
    (1.5, TypeTag.float),
    ('', TypeTag.string),
    ([10, 'x'], TypeTag.list),
    ((1, 2), TypeTag.list),
    ({}, TypeTag.object),
    (Point(), TypeTag.object),
])
def test_kind_of(value, tag):
    assert kind_of(value) is tag

def test_bool_is_not_an_integer():
    assert kind_of(True) is not TypeTag.integer
    assert kind_of(1) is not TypeTag.boolean

def test_resolve_tag_accepts_tags_names_and_builtins():
    assert resolve_tag(TypeTag.float) is TypeTag.float
    assert resolve_tag('string') is TypeTag.string
    assert resolve_tag(int) is TypeTag.integer
    assert resolve_tag(bool) is TypeTag.boolean
    assert resolve_tag(tuple) is TypeTag.list
    assert resolve_tag(dict) is TypeTag.object
    assert resolve_tag(None) is TypeTag.null
    assert resolve_tag(type(None)) is TypeTag.null

@pytest.mark.parametrize('declared', ['double', 'int', set, bytes, 3, ['integer']])
def test_resolve_tag_rejects_unknown(declared):
    with pytest.raises(ValueError):
        resolve_tag(declared)

def test_default_values():
    assert default_value_for(TypeTag.string) == ''
    assert default_value_for(TypeTag.integer) == 0
    assert kind_of(default_value_for(TypeTag.float)) is TypeTag.float
    assert default_value_for(TypeTag.boolean) is False
    assert default_value_for(TypeTag.list) == []
    assert default_value_for(TypeTag.object) == {}
    assert default_value_for(TypeTag.null) is None

def test_default_containers_are_fresh():
    assert default_value_for(TypeTag.list) is not default_value_for(TypeTag.list)
    assert default_value_for(TypeTag.object) is not default_value_for(TypeTag.object)

def test_default_for_unknown_tag():
    with pytest.raises(UnsupportedDefaultError) as e:
        default_value_for('integer')
    assert e.value.tag == 'integer'
