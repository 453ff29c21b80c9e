import datetime
import pytest
import rscp

from rscp import DataType


def test_basics(registry):

    tag = registry.resolve_tag('BAT_INDEX')

    message = rscp.Message(tag)
    assert message.tag is tag
    assert message.datatype is DataType.UINT16
    assert message.value is None

    message = rscp.Message(tag, DataType.INT32, -4)
    assert message.datatype is DataType.INT32
    assert message.value == -4

    message = rscp.Message(tag, 0x03, 4)
    assert message.datatype is DataType.UCHAR8


def test_immutable(registry):

    message = rscp.Message(registry.resolve_tag('BAT_INDEX'), None, 1)

    with pytest.raises(AttributeError):
        message.value = 2

    with pytest.raises(AttributeError):
        message.tag = None

    with pytest.raises(AttributeError):
        del message.datatype

    with pytest.raises(AttributeError):
        message.extra = True

    assert message.value == 1


def test_container(registry):

    index = rscp.Message(registry.resolve_tag('BAT_INDEX'), None, 0)
    state = rscp.Message(registry.resolve_tag('BAT_REQ_DEVICE_STATE'))
    container = rscp.Message(registry.resolve_tag('BAT_REQ_DATA'), None, [index, state])

    assert container.datatype is DataType.CONTAINER
    assert isinstance(container.value, tuple)
    assert list(container) == [index, state]
    assert len(container) == 2

    assert bool(state)
    assert len(state) == 0
    assert list(state) == []

    with pytest.raises(TypeError):
        rscp.Message(registry.resolve_tag('BAT_REQ_DATA'), None, [index, 'BAT_REQ_RSOC'])


def test_none_carries_no_value(registry):

    with pytest.raises(ValueError):
        rscp.Message(registry.resolve_tag('INFO_REQ_UTC_TIME'), DataType.NONE, '')


def test_equality(registry):

    tag = registry.resolve_tag('BAT_INDEX')

    assert rscp.Message(tag, None, 1) == rscp.Message(tag, DataType.UINT16, 1)
    assert rscp.Message(tag, None, 1) != rscp.Message(tag, None, 2)
    assert rscp.Message(tag, None, 1) != rscp.Message(tag, DataType.UINT32, 1)
    assert rscp.Message(tag) != rscp.Message(registry.resolve_tag('PM_INDEX'))
    assert rscp.Message(tag) != 'BAT_INDEX'

    with pytest.raises(TypeError):
        hash(rscp.Message(tag))


def test_repr(registry):

    tag = registry.resolve_tag('BAT_INDEX')

    assert repr(rscp.Message(tag)) == 'Message(BAT_INDEX, UInt16)'
    assert repr(rscp.Message(tag, None, 3)) == 'Message(BAT_INDEX, UInt16, 3)'


def test_canonical(registry):

    utc = datetime.timezone.utc

    index = rscp.Message(registry.resolve_tag('BAT_INDEX'), None, 0)
    state = rscp.Message(registry.resolve_tag('BAT_REQ_DEVICE_STATE'))
    container = rscp.Message(registry.resolve_tag('BAT_REQ_DATA'), None, (index, state))

    assert state.canonical() == {'Tag': 'BAT_REQ_DEVICE_STATE', 'DataType': 'None'}
    assert index.canonical() == {'Tag': 'BAT_INDEX', 'DataType': 'UInt16', 'Value': 0}
    assert container.canonical() == {
        'Tag': 'BAT_REQ_DATA',
        'DataType': 'Container',
        'Value': [index.canonical(), state.canonical()],
    }

    when = datetime.datetime(1234, 5, 6, 7, 8, 9, 123456, tzinfo=utc)
    timestamp = rscp.Message(registry.resolve_tag('INFO_SET_TIME'), None, when)
    assert timestamp.canonical()['Value'] == '1234-05-06T07:08:09.123456Z'

    blob = rscp.Message(registry.resolve_tag('WB_EXTERN_DATA'), None, b'\x01\x02')
    assert blob.canonical()['Value'] == [1, 2]

    error = rscp.Message(registry.resolve_tag('RSCP_GENERAL_ERROR'), None, rscp.ErrorCode.ERR_FORMAT)
    assert error.canonical()['Value'] == 3
    assert type(error.canonical()['Value']) is int

    encoded = rscp.json.dumps(container.canonical())
    assert isinstance(encoded, bytes)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
