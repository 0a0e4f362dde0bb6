from enum import Enum

from strictshape.errors import UnsupportedDefaultError

class TypeTag(Enum):
    integer = 'integer'
    float = 'float'
    boolean = 'boolean'
    string = 'string'
    list = 'list'
    object = 'object'
    null = 'null'

    def __repr__(self):
        return 'TypeTag.%s' % (self.value, )

# builtin classes accepted in place of a tag
_BUILTINS = {
    int: TypeTag.integer,
    float: TypeTag.float,
    bool: TypeTag.boolean,
    str: TypeTag.string,
    list: TypeTag.list,
    tuple: TypeTag.list,
    dict: TypeTag.object,
    object: TypeTag.object,
    type(None): TypeTag.null,
}

def kind_of(value):
    '''
    Classifies a value into one of the seven tags. Only the container
    itself is inspected, never its elements.
    '''
    if value is None:
        return TypeTag.null
    # bool before int, bool is an int subclass
    elif isinstance(value, bool):
        return TypeTag.boolean
    elif isinstance(value, int):
        return TypeTag.integer
    elif isinstance(value, float):
        return TypeTag.float
    elif isinstance(value, str):
        return TypeTag.string
    elif isinstance(value, (list, tuple)):
        return TypeTag.list
    else:
        return TypeTag.object

def resolve_tag(declared):
    '''
    Turns a declared field type into a TypeTag. Accepts tags, tag names
    and the builtin classes in _BUILTINS (None stands for null).
    '''
    if isinstance(declared, TypeTag):
        return declared
    elif declared is None:
        return TypeTag.null
    elif type(declared) is str:
        try:
            return TypeTag(declared)
        except ValueError:
            raise ValueError('Unknown type name %r.' % (declared, ))
    elif isinstance(declared, type) and declared in _BUILTINS:
        return _BUILTINS[declared]
    raise ValueError('Unsupported type %r.' % (declared, ))

def default_value_for(tag):
    if tag is TypeTag.string:
        return ''
    elif tag is TypeTag.integer:
        return 0
    elif tag is TypeTag.float:
        return 0.0
    elif tag is TypeTag.boolean:
        return False
    elif tag is TypeTag.list:
        return []
    elif tag is TypeTag.object:
        return {}
    elif tag is TypeTag.null:
        return None
    raise UnsupportedDefaultError(tag)
