from strictshape.types import TypeTag, kind_of, resolve_tag, default_value_for
from strictshape.errors import ShapeError, SchemaError, UndefinedFieldError, \
                               TypeMismatchError, UnsupportedOperationError, \
                               UnsupportedDefaultError
from strictshape.schema import Attribute, Schema
from strictshape.record import Record, undefined_fields_message

__version__ = '0.1.0'

__all__ = [
    '__version__',
    'TypeTag', 'kind_of', 'resolve_tag', 'default_value_for',
    'ShapeError', 'SchemaError', 'UndefinedFieldError', 'TypeMismatchError',
    'UnsupportedOperationError', 'UnsupportedDefaultError',
    'Attribute', 'Schema', 'Record', 'undefined_fields_message',
]
