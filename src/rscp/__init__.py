""" Python implementation of JSON request decoding for RSCP, the protocol
    spoken by E3/DC home power stations. Operators describe requests in
    terse JSON; this package turns that JSON into typed messages ready to
    be handed to a wire encoder.
"""

# Utility components.

from . import json
from . import config

# Protocol components.

from . import protocol

# Primary public-facing interfaces.

from .protocol.datatypes import DataType, ErrorCode
from .protocol.errors import DecodeError, InvalidShape, ParseError, UnknownDataType, UnknownTag, ValueCoercionError
from .protocol.message import Message
from .protocol.registry import Registry
from .protocol.request import Decoder, decode_many, decode_one
from .protocol.tags import Tag

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
