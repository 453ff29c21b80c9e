""" The closed set of RSCP datatypes, and the rules for turning a generic
    JSON value into the native Python value each datatype carries.

    A coercion function receives the raw value exactly as the JSON library
    produced it and either returns the native value or raises
    :class:`ValueCoercionError`. JSON null never reaches these functions;
    the decoder treats it as "no value" before coercion is attempted.
"""

import base64
import binascii
import datetime
import enum
import math
import re

from .errors import ValueCoercionError


class DataType(enum.IntEnum):
    """ RSCP datatype identifiers, as they appear in the one-byte datatype
        field on the wire. The RSCP spelling of each name, which is what
        operators write in JSON, is available as :attr:`label`.
    """

    NONE = 0x00
    BOOL = 0x01
    CHAR8 = 0x02
    UCHAR8 = 0x03
    INT16 = 0x04
    UINT16 = 0x05
    INT32 = 0x06
    UINT32 = 0x07
    INT64 = 0x08
    UINT64 = 0x09
    FLOAT32 = 0x0A
    DOUBLE64 = 0x0B
    BITFIELD = 0x0C
    CSTRING = 0x0D
    CONTAINER = 0x0E
    TIMESTAMP = 0x0F
    BYTEARRAY = 0x10
    ERROR = 0xFF

    @property
    def label(self):
        return _labels[self]

    def __str__(self):
        return _labels[self]

    @classmethod
    def from_label(cls, label):
        """ Return the :class:`DataType` for the RSCP spelling *label*, for
            example 'UInt16'. Raises KeyError if there is no such datatype.
        """

        return _by_label[label]


_labels = {
    DataType.NONE: 'None',
    DataType.BOOL: 'Bool',
    DataType.CHAR8: 'Char8',
    DataType.UCHAR8: 'UChar8',
    DataType.INT16: 'Int16',
    DataType.UINT16: 'UInt16',
    DataType.INT32: 'Int32',
    DataType.UINT32: 'UInt32',
    DataType.INT64: 'Int64',
    DataType.UINT64: 'UInt64',
    DataType.FLOAT32: 'Float32',
    DataType.DOUBLE64: 'Double64',
    DataType.BITFIELD: 'Bitfield',
    DataType.CSTRING: 'CString',
    DataType.CONTAINER: 'Container',
    DataType.TIMESTAMP: 'Timestamp',
    DataType.BYTEARRAY: 'ByteArray',
    DataType.ERROR: 'Error',
}

_by_label = dict((label, datatype) for datatype, label in _labels.items())


class ErrorCode(enum.IntEnum):
    """ Error codes carried by a message of type :attr:`DataType.ERROR`.
    """

    ERR_NOT_HANDLED = 0x01
    ERR_ACCESS_DENIED = 0x02
    ERR_FORMAT = 0x03
    ERR_AGAIN = 0x04
    ERR_OUT_OF_BOUNDS = 0x05
    ERR_NOT_AVAILABLE = 0x06
    ERR_UNKNOWN_TAG = 0x07
    ERR_ALREADY_IN_USE = 0x08


# Inclusive integer ranges, keyed by datatype.

integer_ranges = {
    DataType.CHAR8: (-0x80, 0x7F),
    DataType.UCHAR8: (0, 0xFF),
    DataType.INT16: (-0x8000, 0x7FFF),
    DataType.UINT16: (0, 0xFFFF),
    DataType.INT32: (-0x80000000, 0x7FFFFFFF),
    DataType.UINT32: (0, 0xFFFFFFFF),
    DataType.INT64: (-0x8000000000000000, 0x7FFFFFFFFFFFFFFF),
    DataType.UINT64: (0, 0xFFFFFFFFFFFFFFFF),
    DataType.BITFIELD: (0, 0xFF),
}

float32_max = 3.4028234663852886e+38

timestamp_format = '%Y-%m-%dT%H:%M:%S.%fZ'
timestamp_pattern = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{1,6}Z', re.ASCII)


def coerce_none(datatype, raw):
    raise ValueCoercionError(datatype, raw, 'this data type carries no value')


def coerce_bool(datatype, raw):
    if raw is True or raw is False:
        return raw

    raise ValueCoercionError(datatype, raw, 'expected a boolean')


def coerce_integer(datatype, raw):
    """ JSON integers, or floats with no fractional part such as 1.0,
        which become the equivalent int. Booleans are rejected even though
        Python would happily treat them as numbers, as is any value outside
        the fixed width of the target type.
    """

    value = raw

    if isinstance(raw, float) and raw.is_integer():
        value = int(raw)

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueCoercionError(datatype, raw, 'expected an integer')

    minimum, maximum = integer_ranges[datatype]

    if value < minimum or value > maximum:
        raise ValueCoercionError(datatype, raw, 'out of range')

    return value


def coerce_float(datatype, raw):

    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueCoercionError(datatype, raw, 'expected a number')

    try:
        value = float(raw)
    except OverflowError:
        raise ValueCoercionError(datatype, raw, 'out of range')

    if math.isfinite(value):
        pass
    else:
        raise ValueCoercionError(datatype, raw, 'not a finite number')

    if datatype == DataType.FLOAT32 and abs(value) > float32_max:
        raise ValueCoercionError(datatype, raw, 'out of range')

    return value


def coerce_string(datatype, raw):
    if isinstance(raw, str):
        return raw

    raise ValueCoercionError(datatype, raw, 'expected a string')


def coerce_timestamp(datatype, raw):
    if not isinstance(raw, str):
        raise ValueCoercionError(datatype, raw, 'expected a timestamp string')

    # strptime() alone accepts fields without zero padding.
    if timestamp_pattern.fullmatch(raw) is None:
        raise ValueCoercionError(datatype, raw, 'expected YYYY-MM-DDTHH:MM:SS.ffffffZ')

    try:
        parsed = datetime.datetime.strptime(raw, timestamp_format)
    except ValueError as e:
        raise ValueCoercionError(datatype, raw, str(e))

    return parsed.replace(tzinfo=datetime.timezone.utc)


def coerce_bytearray(datatype, raw):
    """ A byte array is either a base64 string, which is how byte arrays
        are conventionally spelled in JSON, or a list of integers 0-255.
        An empty string is not accepted; there is no such thing as an
        intentionally empty hardware address or key.
    """

    if isinstance(raw, str):
        if raw == '':
            raise ValueCoercionError(datatype, raw, 'empty byte array')

        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueCoercionError(datatype, raw, str(e))

    if isinstance(raw, list):
        for byte in raw:
            if isinstance(byte, bool) or not isinstance(byte, int):
                raise ValueCoercionError(datatype, raw, 'expected a list of integers')
            if byte < 0 or byte > 0xFF:
                raise ValueCoercionError(datatype, raw, 'byte out of range')

        return bytes(raw)

    raise ValueCoercionError(datatype, raw, 'expected a base64 string or a list of bytes')


def coerce_error(datatype, raw):

    if isinstance(raw, str):
        try:
            return ErrorCode[raw]
        except KeyError:
            raise ValueCoercionError(datatype, raw, 'unknown error code')

    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueCoercionError(datatype, raw, 'expected an error code')

    try:
        return ErrorCode(raw)
    except ValueError:
        raise ValueCoercionError(datatype, raw, 'unknown error code')


coercers = {
    DataType.NONE: coerce_none,
    DataType.BOOL: coerce_bool,
    DataType.CHAR8: coerce_integer,
    DataType.UCHAR8: coerce_integer,
    DataType.INT16: coerce_integer,
    DataType.UINT16: coerce_integer,
    DataType.INT32: coerce_integer,
    DataType.UINT32: coerce_integer,
    DataType.INT64: coerce_integer,
    DataType.UINT64: coerce_integer,
    DataType.FLOAT32: coerce_float,
    DataType.DOUBLE64: coerce_float,
    DataType.BITFIELD: coerce_integer,
    DataType.CSTRING: coerce_string,
    DataType.TIMESTAMP: coerce_timestamp,
    DataType.BYTEARRAY: coerce_bytearray,
    DataType.ERROR: coerce_error,
}


def format_timestamp(value):
    """ Inverse of :func:`coerce_timestamp`: render an aware datetime in
        the accepted input format. Naive datetimes are assumed to be UTC.
    """

    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)

    # strftime() does not zero-pad years before 1000 on every platform.

    text = '%04d-%02d-%02dT%02d:%02d:%02d.%06dZ'
    text = text % (value.year, value.month, value.day, value.hour, value.minute, value.second, value.microsecond)
    return text


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
