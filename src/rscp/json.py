''' Wrapper module to select the most performant available library for
    parsing operator-supplied JSON, and for writing canonical messages back
    out. The selected library is named by :data:`library`.

    :func:`loads` accepts bytes or str. :func:`dumps` always returns bytes.
    Malformed input raises one of the exception types in :data:`errors`.
'''

# Preference order is msgspec, then orjson, then the standard library.
# Only the first one found gets imported.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


def json_dumps(*args, **kwargs):
    return json.dumps(*args, **kwargs).encode()


# UnicodeDecodeError is listed for every library: input that is not valid
# UTF-8 fails before, or instead of, the JSON syntax check.

if msgspec is not None:
    library = 'msgspec'
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    errors = (msgspec.DecodeError, UnicodeDecodeError)
elif orjson is not None:
    library = 'orjson'
    dumps = orjson.dumps
    loads = orjson.loads
    errors = (orjson.JSONDecodeError, UnicodeDecodeError)
else:
    library = 'json'
    dumps = json_dumps
    loads = json.loads
    errors = (json.JSONDecodeError, UnicodeDecodeError)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
