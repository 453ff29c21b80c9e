""" The protocol registry: name to tag lookup, name to datatype lookup, and
    coercion of raw JSON values into native datatype values.

    A :class:`Registry` is built once, frozen, and thereafter only read; a
    frozen registry can be shared between any number of threads without
    locking. Most callers use the process-wide instance returned by
    :func:`get`.
"""

import logging
import threading

from .. import config
from .. import json
from . import tags
from .datatypes import DataType, coercers
from .errors import UnknownDataType, UnknownTag, ValueCoercionError

logger = logging.getLogger(__name__)

_registry = None
_registry_lock = threading.Lock()


class Registry:
    """ A set of :class:`rscp.protocol.tags.Tag` definitions, indexed by
        name and by numeric id. The optional *definitions* argument is an
        iterable of (name, id, datatype) triples to add immediately.
    """

    def __init__(self, definitions=()):

        self._by_name = dict()
        self._by_id = dict()
        self.frozen = False

        for name, id, datatype in definitions:
            self.add(name, id, datatype)


    def __contains__(self, name):
        return name in self._by_name


    def __iter__(self):
        return iter(self._by_name.values())


    def __len__(self):
        return len(self._by_name)


    def __repr__(self):
        return "Registry(%d tags%s)" % (len(self), ', frozen' if self.frozen else '')


    def add(self, name, id, datatype):
        """ Add a single tag definition. Re-adding an identical definition
            is harmless; a conflicting definition for an existing name or id
            raises ValueError. Raises RuntimeError if the registry has been
            frozen.
        """

        if self.frozen:
            raise RuntimeError('cannot add tags to a frozen registry')

        id = int(id)
        datatype = DataType(datatype)
        tag = tags.Tag(name, id, datatype)

        try:
            existing = self._by_name[name]
        except KeyError:
            pass
        else:
            if existing == tag:
                return existing
            raise ValueError("conflicting definition for %s: %r vs. %r" % (name, existing, tag))

        try:
            existing = self._by_id[id]
        except KeyError:
            pass
        else:
            raise ValueError("tag id 0x%08X already assigned to %s" % (id, existing.name))

        self._by_name[name] = tag
        self._by_id[id] = tag
        return tag


    def freeze(self):
        """ Prevent any further additions. Returns the registry itself, so
            that construction and freezing can be chained.
        """

        self.frozen = True
        return self


    def load(self, filename):
        """ Add the tag definitions found in the JSON file *filename*. The
            file contains a single object mapping tag names to a two-element
            [id, datatype] array, where the id is an integer or a hexadecimal
            string, and the datatype is the RSCP spelling of a datatype name::

                {"BAT_REQ_SPECIFICATION": ["0x03000043", "None"]}

            Malformed content raises ValueError.
        """

        with open(filename, 'rb') as file:
            raw = file.read()

        try:
            definitions = json.loads(raw)
        except json.errors as e:
            raise ValueError("%s: not valid JSON: %s" % (filename, e)) from e

        if isinstance(definitions, dict):
            pass
        else:
            raise ValueError(filename + ': expected a JSON object of tag definitions')

        count = 0

        for name, definition in definitions.items():
            try:
                id, datatype = definition
            except (TypeError, ValueError):
                raise ValueError("%s: %s: expected [id, datatype]" % (filename, name))

            id = _parse_id(filename, name, id)

            try:
                datatype = DataType.from_label(datatype)
            except (KeyError, TypeError):
                raise ValueError("%s: %s: unknown data type %r" % (filename, name, datatype))

            self.add(name, id, datatype)
            count += 1

        logger.debug("loaded %d tag definitions from %s", count, filename)
        return count


    def resolve_tag(self, name):
        """ Return the :class:`rscp.protocol.tags.Tag` for *name*, raising
            :class:`UnknownTag` if there is no such tag.
        """

        try:
            return self._by_name[name]
        except (KeyError, TypeError):
            raise UnknownTag(name) from None


    def resolve_datatype(self, name):
        """ Return the :class:`DataType` for *name*, the RSCP spelling of a
            datatype such as 'UInt16'. The sentinel 'None' resolves to
            :attr:`DataType.NONE`. Raises :class:`UnknownDataType` if there
            is no such datatype.
        """

        try:
            return DataType.from_label(name)
        except (KeyError, TypeError):
            raise UnknownDataType(name) from None


    def tag_by_id(self, id):
        """ Return the :class:`rscp.protocol.tags.Tag` with numeric *id*,
            raising :class:`UnknownTag` if there is no such tag.
        """

        try:
            return self._by_id[id]
        except (KeyError, TypeError):
            raise UnknownTag(id) from None


    def coerce(self, datatype, raw):
        """ Convert the generic JSON value *raw* to the native value for
            *datatype*. Raises :class:`ValueCoercionError` if that cannot be
            done. Containers are not handled here; their elements are full
            messages, which is the decoder's business.
        """

        try:
            coercer = coercers[datatype]
        except KeyError:
            raise ValueCoercionError(datatype, raw, 'no scalar coercion for this data type') from None

        return coercer(datatype, raw)


# end of class Registry



def _parse_id(filename, name, id):

    if isinstance(id, bool):
        pass
    elif isinstance(id, int):
        return id
    elif isinstance(id, str):
        try:
            return int(id, 0)
        except ValueError:
            pass

    raise ValueError("%s: %s: invalid tag id %r" % (filename, name, id))



def builtin():
    """ Return a new, unfrozen :class:`Registry` populated with the built-in
        tag catalogue.
    """

    return Registry(tags.builtin)



def get():
    """ Return the process-wide :class:`Registry`. It is built on first
        use from the built-in catalogue plus any tag files found via
        :func:`rscp.config.tag_files`, and frozen before it is returned.
    """

    global _registry

    registry = _registry

    if registry is not None:
        return registry

    _registry_lock.acquire()

    try:
        registry = _registry
        if registry is None:
            registry = builtin()
            for filename in config.tag_files():
                registry.load(filename)
            registry.freeze()
            _registry = registry
    finally:
        _registry_lock.release()

    return registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
