import logging
from types import MappingProxyType

from strictshape.errors import SchemaError, UndefinedFieldError
from strictshape.types import TypeTag, resolve_tag, default_value_for

log = logging.getLogger(__name__)

class Attribute(tuple):
    '''
    A declared field: a (name, tag) pair.
    '''
    def __new__(cls, name, type):
        return tuple.__new__(cls, (name, type))

    def __getnewargs__(self):
        return (self[0], self[1])

    def __eq__(self, other):
        if isinstance(other, Attribute):
            return tuple.__eq__(self, other)
        elif isinstance(other, str):
            return other == self[0]
        else:
            return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self[0])

    def __repr__(self):
        return 'Attribute(name = %s, type = %s)' % (self[0], self[1].value)

    def name(self):
        return self[0]

    def type(self):
        return self[1]

class Schema(tuple):
    '''
    Immutable, ordered sequence of attributes. Built from a mapping of
    field name to type, or from (name, type) pairs.

        Schema({'id': TypeTag.integer, 'name': 'string', 'tags': list})
    '''
    def __new__(cls, field_types):
        if isinstance(field_types, Schema):
            return field_types
        if hasattr(field_types, 'items'):
            pairs = list(field_types.items())
        else:
            pairs = list(field_types)
        if not pairs:
            raise SchemaError('empty')

        attributes = []
        seen = set()
        for pair in pairs:
            try:
                name, declared = pair
            except (TypeError, ValueError):
                raise SchemaError('invalid-declaration', pair)
            if not isinstance(name, str) or not name:
                raise SchemaError('invalid-name', name)
            if name in seen:
                raise SchemaError('duplicate-field', name)
            try:
                tag = resolve_tag(declared)
            except ValueError:
                raise SchemaError('unsupported-type', name, declared)
            seen.add(name)
            attributes.append(Attribute(name, tag))

        self = tuple.__new__(cls, attributes)
        object.__setattr__(self, '_map', MappingProxyType(
            dict((a.name(), i) for i, a in enumerate(attributes))
        ))
        if log.isEnabledFor(logging.DEBUG):
            log.debug('Schema created: %s', ', '.join(
                '%s:%s' % (a.name(), a.type().value) for a in attributes
            ))
        return self

    def __setattr__(self, name, value):
        raise AttributeError('Schema is immutable.')

    def __delattr__(self, name):
        raise AttributeError('Schema is immutable.')

    def __reduce__(self):
        return (self.__class__, (tuple(self), ))

    @classmethod
    def create(cls, field_types):
        return cls(field_types)

    def __eq__(self, other):
        if isinstance(other, Schema):
            return tuple.__eq__(self, other)
        return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return tuple.__hash__(self)

    def __repr__(self):
        return 'Schema(%s)' % (', '.join(
            '%s: %s' % (a.name(), a.type().value) for a in self
        ))

    def __contains__(self, other):
        '''
        Tests if other is included in the schema. If other is a list or
        a tuple (but not an Attribute) the method only returns True if
        all elements of the sequence are included in the schema.
        '''
        if isinstance(other, Attribute):
            return other.name() in self._map and \
                   self[self._map[other.name()]] == other
        elif isinstance(other, (list, tuple)):
            for i in other:
                if i not in self:
                    return False
            return True
        else:
            return self.has_field(other)

    def has_field(self, name):
        return isinstance(name, str) and name in self._map

    def type_of(self, name):
        if not self.has_field(name):
            raise UndefinedFieldError(name)
        return self[self._map[name]].type()

    def index(self, name):
        if isinstance(name, Attribute):
            name = name.name()
        if not self.has_field(name):
            raise UndefinedFieldError(name)
        return self._map[name]

    def fields(self):
        return tuple(a.name() for a in self)

    def as_dict(self):
        return dict((a.name(), a.type()) for a in self)

    @staticmethod
    def default_value_for(tag):
        return default_value_for(tag)
