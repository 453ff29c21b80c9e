""" Exceptions raised while turning operator-supplied JSON into RSCP
    messages. Every exception here is a :class:`ValueError`, so callers
    that do not care about the distinction can catch that alone.
"""

__all__ = [
    "DecodeError",
    "InvalidShape",
    "ParseError",
    "UnknownDataType",
    "UnknownTag",
    "ValueCoercionError",
]


class DecodeError(ValueError):
    """ Base exception class for request decoding errors.
    """

    pass


class ParseError(DecodeError):
    """ The input is not well-formed JSON, is empty, or is not the
        top-level array a batch requires.
    """

    pass


class InvalidShape(DecodeError):
    """ The JSON is well-formed but not one of the accepted request shapes.
    """

    pass


class UnknownTag(DecodeError):
    """ A tag name is not known to the registry.
    """

    def __init__(self, name):
        self.name = name
        DecodeError.__init__(self, 'unknown tag: ' + repr(name))


class UnknownDataType(DecodeError):
    """ An explicit datatype name is not known to the registry.
    """

    def __init__(self, name):
        self.name = name
        DecodeError.__init__(self, 'unknown data type: ' + repr(name))


class ValueCoercionError(DecodeError):
    """ A raw JSON value cannot be represented as the native value of
        *datatype*. The decoder treats this as "no value specified", so
        this exception never escapes a decode call.
    """

    def __init__(self, datatype, raw, reason=None):
        self.datatype = datatype
        self.raw = raw

        text = 'cannot coerce %r to %s' % (raw, datatype)
        if reason:
            text = text + ': ' + reason

        DecodeError.__init__(self, text)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
