""" A class representation of an RSCP message: the (tag, datatype, value)
    triple that the request decoder produces and the wire layer consumes.
"""

import datetime

from .datatypes import DataType, format_timestamp


class Message:
    """ The :class:`Message` provides a very thin encapsulation of what it
        means to be a message in an RSCP context. The fields are in the
        order they are represented on the wire: the *tag*, a
        :class:`rscp.protocol.tags.Tag` instance; the *datatype*, a
        :class:`rscp.protocol.datatypes.DataType`; and the *value*.

        If no *datatype* is specified the default datatype of the tag is
        used. A *value* of None means the message carries no value; for a
        :attr:`DataType.CONTAINER` message any other value is a sequence
        of :class:`Message` instances, stored as a tuple.

        Instances are immutable once constructed.
    """

    __slots__ = ('tag', 'datatype', 'value')

    def __init__(self, tag, datatype=None, value=None):

        if datatype is None:
            datatype = tag.datatype
        else:
            datatype = DataType(datatype)

        if datatype == DataType.CONTAINER and value is not None:
            value = tuple(value)
            for child in value:
                if isinstance(child, Message):
                    pass
                else:
                    raise TypeError('container values must be Message instances, not ' + repr(child))

        elif datatype == DataType.NONE and value is not None:
            raise ValueError('a message of type None cannot carry a value')

        object.__setattr__(self, 'tag', tag)
        object.__setattr__(self, 'datatype', datatype)
        object.__setattr__(self, 'value', value)


    def __setattr__(self, name, value):
        raise AttributeError('Message instances are immutable')


    def __delattr__(self, name):
        raise AttributeError('Message instances are immutable')


    def __eq__(self, other):
        if isinstance(other, Message):
            pass
        else:
            return NotImplemented

        if self.tag != other.tag or self.datatype != other.datatype:
            return False

        return self.value == other.value


    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


    __hash__ = None


    def __repr__(self):
        if self.value is None:
            return "Message(%s, %s)" % (self.tag.name, self.datatype)

        return "Message(%s, %s, %r)" % (self.tag.name, self.datatype, self.value)


    def __iter__(self):
        """ Iterate over the sub-messages of a container; any other message
            has none.
        """

        if self.datatype == DataType.CONTAINER and self.value is not None:
            return iter(self.value)

        return iter(())


    def __len__(self):
        if self.datatype == DataType.CONTAINER and self.value is not None:
            return len(self.value)

        return 0


    def __bool__(self):
        # A message is never false, even when __len__() says zero.
        return True


    def canonical(self):
        """ Return the keyed-object form of this message as a dictionary
            containing only JSON-compatible values, suitable for passing to
            :func:`rscp.json.dumps`. Decoding the resulting JSON yields a
            message equal to this one.
        """

        canonical = dict()
        canonical['Tag'] = self.tag.name
        canonical['DataType'] = self.datatype.label

        value = self.value

        if value is None:
            return canonical

        if self.datatype == DataType.CONTAINER:
            value = [child.canonical() for child in value]
        elif isinstance(value, datetime.datetime):
            value = format_timestamp(value)
        elif isinstance(value, bytes):
            value = list(value)
        elif self.datatype == DataType.ERROR:
            value = int(value)

        canonical['Value'] = value
        return canonical


# end of class Message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
