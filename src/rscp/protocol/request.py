""" Decoding of human-authored JSON into RSCP request messages.

    Operators describe a message in one of three shapes, whichever is the
    least typing for the job at hand::

        "INFO_REQ_UTC_TIME"
        ["BAT_INDEX", 0]
        ["BAT_INDEX", "UInt16", 0]
        {"Tag": "BAT_INDEX", "DataType": "UInt16", "Value": 0}

    Container values nest: the value of a container-typed message is a JSON
    array whose elements are themselves messages in any of the three shapes.

    Tags and shapes are strict: anything the decoder cannot identify raises
    an exception. Values are lenient: a value that cannot be represented as
    its datatype is dropped with a warning, and the message falls back to
    the default datatype of its tag with no value at all.
"""

import enum
import logging

from .. import json
from . import registry as _registry
from .datatypes import DataType
from .errors import InvalidShape, ParseError, UnknownDataType, ValueCoercionError
from .message import Message

logger = logging.getLogger(__name__)

_missing = object()


class Kind(enum.Enum):
    """ The kinds of value a generic JSON document can contain.
    """

    NULL = 'null'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    SEQUENCE = 'array'
    MAPPING = 'object'


def kind(raw):
    """ Classify a value produced by :func:`rscp.json.loads`. Booleans are
        checked before numbers, since a Python bool is also an int.
    """

    if raw is None:
        return Kind.NULL
    if raw is True or raw is False:
        return Kind.BOOLEAN
    if isinstance(raw, (int, float)):
        return Kind.NUMBER
    if isinstance(raw, str):
        return Kind.STRING
    if isinstance(raw, list):
        return Kind.SEQUENCE
    if isinstance(raw, dict):
        return Kind.MAPPING

    raise TypeError('not a JSON value: ' + repr(raw))



class Decoder:
    """ Turn raw JSON bytes into :class:`rscp.protocol.message.Message`
        instances. Tag and datatype names are resolved, and values coerced,
        via the supplied *registry*; if none is supplied the process-wide
        registry from :func:`rscp.protocol.registry.get` is used.

        A :class:`Decoder` holds no state beyond its registry, and can be
        used from multiple threads at once.
    """

    max_depth = 32

    def __init__(self, registry=None):

        if registry is None:
            registry = _registry.get()

        self.registry = registry

        self.shapes = {
            Kind.STRING: self._from_string,
            Kind.SEQUENCE: self._from_sequence,
            Kind.MAPPING: self._from_mapping,
        }


    def one(self, raw):
        """ Decode *raw*, the bytes of one JSON document, as a single
            message.
        """

        parsed = self.parse(raw)
        return self.message(parsed)


    def many(self, raw):
        """ Decode *raw*, the bytes of one JSON document containing an
            array, as a list of messages; each element of the array can be
            any of the accepted message shapes. The first element that fails
            to decode aborts the entire batch.
        """

        parsed = self.parse(raw)

        if kind(parsed) != Kind.SEQUENCE:
            raise ParseError('a batch of messages must be a JSON array, not ' + kind(parsed).value)

        messages = list()

        for element in parsed:
            messages.append(self.message(element))

        return messages


    def decode(self, raw):
        """ Decode *raw* as either a single message or a batch, returning a
            list of messages in both cases.

            A top-level array is taken to be a batch if its first element is
            itself an array or an object. Anything else is a single message,
            so ``["RSCP_AUTHENTICATION_USER", "INFO_REQ_UTC_TIME"]`` is one
            message carrying a string value, exactly as :meth:`one` reads it.
        """

        parsed = self.parse(raw)

        if self.is_batch(parsed):
            return [self.message(element) for element in parsed]

        return [self.message(parsed)]


    def is_batch(self, parsed):

        if kind(parsed) != Kind.SEQUENCE or len(parsed) == 0:
            return False

        first = kind(parsed[0])
        return first == Kind.SEQUENCE or first == Kind.MAPPING


    def parse(self, raw):
        """ Parse *raw* as JSON and return the generic Python representation.
            Raises :class:`ParseError` for empty or malformed input.
        """

        if isinstance(raw, str):
            raw = raw.encode()
        elif isinstance(raw, (bytearray, memoryview)):
            raw = bytes(raw)

        if raw is None or raw.strip() == b'':
            raise ParseError('empty input')

        try:
            return json.loads(raw)
        except json.errors as e:
            raise ParseError('malformed JSON: ' + str(e)) from e


    def message(self, parsed, depth=0):
        """ Build a single message from an already-parsed JSON value,
            dispatching on its shape. *depth* counts the containers that
            enclose this message; past :attr:`max_depth` the message is
            rejected with :class:`InvalidShape`.
        """

        if depth > self.max_depth:
            raise InvalidShape('containers nested more than %d deep' % (self.max_depth))

        shape = kind(parsed)

        try:
            handler = self.shapes[shape]
        except KeyError:
            raise InvalidShape("expected a tag name, array, or object, not %s: %r" % (shape.value, parsed)) from None

        return handler(parsed, depth)


    def _from_string(self, name, depth):
        tag = self.registry.resolve_tag(name)
        return Message(tag, tag.datatype)


    def _from_sequence(self, sequence, depth):
        """ Positional forms: [tag], [tag, datatype], [tag, value], and
            [tag, datatype, value].
        """

        length = len(sequence)

        if length < 1 or length > 3:
            raise InvalidShape("expected 1 to 3 array elements, not %d: %r" % (length, sequence))

        tag = self._tag(sequence[0])

        if length == 1:
            return Message(tag, tag.datatype)

        if length == 3:
            datatype = self._datatype(tag, sequence[1])
            return self._valued(tag, datatype, sequence[2], depth)

        # Two elements: the second is either a datatype name or a value.
        # A string that happens to be a valid datatype name is always taken
        # as the datatype; a CString value spelled 'UInt16' has to be given
        # in the three-element form.

        second = sequence[1]

        if kind(second) == Kind.STRING:
            try:
                datatype = self._datatype(tag, second)
            except UnknownDataType:
                pass
            else:
                logger.debug("%s: %r taken as the data type", tag.name, second)
                return Message(tag, datatype)

        return self._valued(tag, tag.datatype, second, depth)


    def _from_mapping(self, mapping, depth):
        """ Keyed form: {"Tag": ..., "DataType": ..., "Value": ...}, where
            only the tag is required.
        """

        tag = _field(mapping, 'Tag')

        if tag is _missing:
            raise InvalidShape('object has no Tag: ' + repr(mapping))

        tag = self._tag(tag)

        datatype = _field(mapping, 'DataType')

        if datatype is _missing or datatype is None:
            datatype = tag.datatype
        else:
            datatype = self._datatype(tag, datatype)

        value = _field(mapping, 'Value')

        if value is _missing:
            value = None

        return self._valued(tag, datatype, value, depth)


    def _tag(self, name):

        if kind(name) != Kind.STRING:
            raise InvalidShape('tag must be given by name, not ' + repr(name))

        return self.registry.resolve_tag(name)


    def _datatype(self, tag, name):
        """ Resolve an explicit datatype *name*. The sentinel 'None' means
            "no particular type", which selects the default of *tag*.
        """

        if kind(name) != Kind.STRING:
            raise UnknownDataType(name)

        datatype = self.registry.resolve_datatype(name)

        if datatype == DataType.NONE:
            datatype = tag.datatype

        return datatype


    def _valued(self, tag, datatype, raw, depth):
        """ Build a message of type *datatype* carrying the coerced form of
            *raw*. A JSON null means no value. A value that cannot be coerced
            is discarded, and the message reverts to the tag's default
            datatype.
        """

        if raw is None:
            return Message(tag, datatype)

        if datatype == DataType.CONTAINER:
            if kind(raw) == Kind.SEQUENCE:
                children = [self.message(element, depth + 1) for element in raw]
                return Message(tag, datatype, children)

            error = ValueCoercionError(datatype, raw, 'expected an array of messages')
            return self._discard(tag, error)

        try:
            value = self.registry.coerce(datatype, raw)
        except ValueCoercionError as e:
            return self._discard(tag, e)

        return Message(tag, datatype, value)


    def _discard(self, tag, error):
        logger.warning("%s: value discarded, %s", tag.name, error)
        return Message(tag, tag.datatype)


# end of class Decoder



def _field(mapping, key):
    """ Return *mapping[key]*, falling back to a case-insensitive match of
        the key; return the module-level _missing sentinel if neither finds
        anything.
    """

    try:
        return mapping[key]
    except KeyError:
        pass

    lowered = key.lower()

    for candidate, value in mapping.items():
        if candidate.lower() == lowered:
            return value

    return _missing



def decode_one(raw, registry=None):
    """ Decode *raw*, the bytes of one JSON document, as a single
        :class:`rscp.protocol.message.Message`. See :meth:`Decoder.one`.
    """

    return Decoder(registry).one(raw)



def decode_many(raw, registry=None):
    """ Decode *raw*, the bytes of a JSON array, as a list of
        :class:`rscp.protocol.message.Message`. See :meth:`Decoder.many`.
    """

    return Decoder(registry).many(raw)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
