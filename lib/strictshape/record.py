import logging

from strictshape.errors import SchemaError, UndefinedFieldError, \
                               TypeMismatchError, UnsupportedOperationError
from strictshape.schema import Schema
from strictshape.types import kind_of, default_value_for

log = logging.getLogger(__name__)

def undefined_fields_message(names):
    return 'fields: %s are not defined in the meta.' % (
        ','.join(str(n) for n in names),
    )

class Record(object):
    '''
    A strict associative container bound to a schema. Every declared
    field is always present and every assignment is type-checked. Fields
    outside the schema can neither be read nor created, and no field can
    ever be deleted.

    The schema is either passed per instance or bound on a subclass:

        class Customer(Record):
            meta = {
                'id': TypeTag.integer,
                'name': TypeTag.string,
                'categories': TypeTag.list,
            }

        customer = Customer({'id': 102, 'name': 'jimmy'})
        customer['id'] = 103      # customer['id'] = '103' raises

    Input keys outside the schema are dropped and reported once through
    ``reporter``, a callable taking the message. By default the message
    is logged as a warning.
    '''
    meta = None

    def __init__(self, data = None, schema = None, reporter = None):
        if schema is None:
            schema = self.__class__._bound_schema()
        elif not isinstance(schema, Schema):
            schema = Schema(schema)
        if data is None:
            data = {}
        elif not hasattr(data, 'keys'):
            raise TypeError('Record data must be a mapping, got %s.' % (
                type(data).__name__,
            ))
        if reporter is None:
            reporter = log.warning

        self._schema = schema
        self._values = {}
        consumed = set()
        for name, tag in schema:
            if name in data:
                consumed.add(name)
                value = data[name]
                actual = kind_of(value)
                if actual is not tag:
                    raise TypeMismatchError(name, tag, actual)
                self._values[name] = value
            else:
                self._values[name] = default_value_for(tag)

        unknown = [k for k in data.keys() if k not in consumed]
        if unknown:
            message = undefined_fields_message(unknown)
            self._diagnostics = (message, )
            reporter(message)
        else:
            self._diagnostics = ()
        log.debug('%s created with %d fields (%d dropped).',
                  self.__class__.__name__, len(self._values), len(unknown))

    @classmethod
    def create(cls, schema, data = None, reporter = None):
        return cls(data, schema = schema, reporter = reporter)

    @classmethod
    def _bound_schema(cls):
        meta = cls.meta
        if meta is None:
            raise SchemaError('missing')
        if not isinstance(meta, Schema):
            meta = Schema(meta)
            cls.meta = meta
        return meta

    def schema(self):
        return self._schema

    def diagnostics(self):
        return self._diagnostics

    def get(self, name):
        if not self._schema.has_field(name):
            raise UndefinedFieldError(name)
        return self._values[name]

    def set(self, name, value):
        expected = self._schema.type_of(name)
        actual = kind_of(value)
        if actual is not expected:
            raise TypeMismatchError(name, expected, actual)
        self._values[name] = value

    def delete(self, name):
        raise UnsupportedOperationError('delete', name)

    def exists(self, name):
        return self._schema.has_field(name)

    def count(self):
        return len(self._schema)

    def iterate(self):
        '''
        Yields the schema's attributes, (name, tag) pairs, in declaration
        order. Use items() or values() to walk the data.
        '''
        for attribute in self._schema:
            yield attribute

    def export(self):
        return dict(self._values)

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other._schema = self._schema
        other._values = dict(self._values)
        other._diagnostics = ()
        return other

    def keys(self):
        return self._values.keys()

    def values(self):
        return self._values.values()

    def items(self):
        return self._values.items()

    __getitem__ = get
    __setitem__ = set
    __delitem__ = delete
    __contains__ = exists
    __len__ = count
    __iter__ = iterate

    def __eq__(self, other):
        if isinstance(other, Record):
            return self._schema == other._schema and \
                   self._values == other._values
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return '%s(%s)' % (
            self.__class__.__name__,
            ', '.join('%s=%r' % (k, v) for k, v in self._values.items()),
        )
