"""
RSCP Protocol Layer
===================

This package defines the semantic model of RSCP messages, and the decoding
of operator-authored JSON into that model. It does not know how to put a
message on the wire, nor how to talk to a device.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Request Decoder (request.py)
    JSON shape dispatch
    - decode_one()
    - decode_many()
    - Decoder

    │
    ▼
Protocol Registry (registry.py)
    Immutable lookup service
    - tag name -> Tag
    - datatype name -> DataType
    - raw JSON value -> native value

    │
    ▼
Message Model (message.py)
    Immutable (tag, datatype, value) triples

    │
    ▼
Vocabulary (tags.py, datatypes.py, errors.py)
    Tag catalogue, datatype identifiers and coercion rules,
    exception hierarchy

---------------------------------------------------------------------
"""

from . import errors
from . import datatypes
from . import tags
from . import message
from . import registry
from . import request


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
