class ShapeError(Exception):
    pass

class SchemaError(ShapeError, ValueError):
    '''
    Raised while building a schema. ``reason`` is one of ``empty``,
    ``unsupported-type``, ``invalid-declaration``, ``invalid-name``,
    ``duplicate-field`` or ``missing``.
    '''
    def __init__(self, reason, field = None, type = None):
        self.reason = reason
        self.field = field
        self.type = type
        if reason == 'empty':
            message = 'meta is empty.'
        elif reason == 'unsupported-type':
            message = 'type %r for %s is not supported.' % (type, field)
        elif reason == 'invalid-declaration':
            message = 'declaration %r is not a (name, type) pair.' % (field, )
        elif reason == 'invalid-name':
            message = 'field name %r is not a non-empty string.' % (field, )
        elif reason == 'duplicate-field':
            message = 'field %s is declared more than once.' % (field, )
        elif reason == 'missing':
            message = 'no meta bound to the record.'
        else:
            message = reason
        ShapeError.__init__(self, message)

class UndefinedFieldError(ShapeError, KeyError):
    def __init__(self, field):
        self.field = field
        ShapeError.__init__(self, '%s not defined.' % (field, ))

    # KeyError would quote the message
    def __str__(self):
        return self.args[0]

class TypeMismatchError(ShapeError, TypeError):
    def __init__(self, field, expected, actual):
        self.field = field
        self.expected = expected
        self.actual = actual
        ShapeError.__init__(self, 'type of value for %s not matched: expected %s, got %s.' % (
            field,
            expected.value,
            actual.value,
        ))

class UnsupportedOperationError(ShapeError, TypeError):
    def __init__(self, operation, field = None):
        self.operation = operation
        self.field = field
        ShapeError.__init__(self, 'operation %s is forbidden.' % (operation, ))

class UnsupportedDefaultError(ShapeError, ValueError):
    def __init__(self, tag):
        self.tag = tag
        ShapeError.__init__(self, 'default value for %r is not supported.' % (tag, ))
