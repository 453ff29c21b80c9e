""" Tag definitions. A :class:`Tag` pairs the symbolic name operators use
    with the numeric identifier that goes on the wire, and the datatype a
    message carrying that tag uses when nothing else is specified.

    The built-in catalogue is a subset of the RSCP tag list covering the
    requests most commonly issued by hand; deployments needing more can
    supply tag definition files, see :func:`rscp.config.tag_files`.
"""

from collections import namedtuple

from .datatypes import DataType


class Tag(namedtuple('Tag', ('name', 'id', 'datatype'))):
    """ An immutable tag definition: *name*, numeric *id*, and the default
        *datatype*.
    """

    __slots__ = ()

    def __repr__(self):
        return "Tag(%s, 0x%08X, %s)" % (self.name, self.id, self.datatype)

    def __str__(self):
        return self.name

    @property
    def namespace(self):
        """ The high byte of the tag id identifies the namespace (EMS, BAT,
            INFO, ...) the tag belongs to.
        """

        return (self.id >> 24) & 0xFF

    @property
    def is_response(self):
        """ Response tags have bit 23 set; requests have it cleared.
        """

        return bool(self.id & 0x00800000)


# The catalogue is listed per namespace, requests first, each followed by
# the matching response tag(s) where one exists.

builtin = (

    # RSCP: authentication and session.

    ('RSCP_REQ_AUTHENTICATION', 0x00000001, DataType.CONTAINER),
    ('RSCP_AUTHENTICATION_USER', 0x00000002, DataType.CSTRING),
    ('RSCP_AUTHENTICATION_PASSWORD', 0x00000003, DataType.CSTRING),
    ('RSCP_REQ_USER_LEVEL', 0x00000004, DataType.NONE),
    ('RSCP_REQ_SET_ENCRYPTION_PASSPHRASE', 0x00000005, DataType.CSTRING),
    ('RSCP_AUTHENTICATION', 0x00800001, DataType.UCHAR8),
    ('RSCP_USER_LEVEL', 0x00800004, DataType.UCHAR8),
    ('RSCP_SET_ENCRYPTION_PASSPHRASE', 0x00800005, DataType.BOOL),
    ('RSCP_GENERAL_ERROR', 0x00FFFFFF, DataType.ERROR),

    # EMS: energy management system.

    ('EMS_REQ_POWER_PV', 0x01000001, DataType.NONE),
    ('EMS_REQ_POWER_BAT', 0x01000002, DataType.NONE),
    ('EMS_REQ_POWER_HOME', 0x01000003, DataType.NONE),
    ('EMS_REQ_POWER_GRID', 0x01000004, DataType.NONE),
    ('EMS_REQ_POWER_ADD', 0x01000005, DataType.NONE),
    ('EMS_REQ_AUTARKY', 0x01000006, DataType.NONE),
    ('EMS_REQ_SELF_CONSUMPTION', 0x01000007, DataType.NONE),
    ('EMS_REQ_BAT_SOC', 0x01000008, DataType.NONE),
    ('EMS_REQ_COUPLING_MODE', 0x01000009, DataType.NONE),
    ('EMS_REQ_MODE', 0x01000011, DataType.NONE),
    ('EMS_REQ_STATUS', 0x01000015, DataType.NONE),
    ('EMS_REQ_SET_POWER', 0x01000030, DataType.CONTAINER),
    ('EMS_REQ_SET_POWER_MODE', 0x01000031, DataType.UCHAR8),
    ('EMS_REQ_SET_POWER_VALUE', 0x01000032, DataType.INT32),
    ('EMS_REQ_GET_POWER_SETTINGS', 0x0100008B, DataType.NONE),
    ('EMS_REQ_SET_POWER_SETTINGS', 0x0100008C, DataType.CONTAINER),
    ('EMS_POWER_LIMITS_USED', 0x01000100, DataType.BOOL),
    ('EMS_MAX_CHARGE_POWER', 0x01000101, DataType.UINT32),
    ('EMS_MAX_DISCHARGE_POWER', 0x01000102, DataType.UINT32),
    ('EMS_DISCHARGE_START_POWER', 0x01000103, DataType.UINT32),
    ('EMS_POWERSAVE_ENABLED', 0x01000104, DataType.UCHAR8),
    ('EMS_WEATHER_REGULATED_CHARGE_ENABLED', 0x01000105, DataType.UCHAR8),
    ('EMS_POWER_PV', 0x01800001, DataType.INT32),
    ('EMS_POWER_BAT', 0x01800002, DataType.INT32),
    ('EMS_POWER_HOME', 0x01800003, DataType.INT32),
    ('EMS_POWER_GRID', 0x01800004, DataType.INT32),
    ('EMS_POWER_ADD', 0x01800005, DataType.INT32),
    ('EMS_AUTARKY', 0x01800006, DataType.FLOAT32),
    ('EMS_SELF_CONSUMPTION', 0x01800007, DataType.FLOAT32),
    ('EMS_BAT_SOC', 0x01800008, DataType.UCHAR8),
    ('EMS_COUPLING_MODE', 0x01800009, DataType.UCHAR8),
    ('EMS_MODE', 0x01800011, DataType.UCHAR8),
    ('EMS_STATUS', 0x01800015, DataType.UINT32),
    ('EMS_SET_POWER', 0x01800030, DataType.INT32),
    ('EMS_GET_POWER_SETTINGS', 0x0180008B, DataType.CONTAINER),
    ('EMS_SET_POWER_SETTINGS', 0x0180008C, DataType.CONTAINER),

    # PVI: photovoltaic inverter.

    ('PVI_REQ_DATA', 0x02040000, DataType.CONTAINER),
    ('PVI_INDEX', 0x02040001, DataType.UINT16),
    ('PVI_VALUE', 0x02040005, DataType.FLOAT32),
    ('PVI_REQ_ON_GRID', 0x02000001, DataType.NONE),
    ('PVI_REQ_AC_POWER', 0x02060001, DataType.UINT16),
    ('PVI_REQ_AC_VOLTAGE', 0x02060002, DataType.UINT16),
    ('PVI_REQ_AC_CURRENT', 0x02060003, DataType.UINT16),
    ('PVI_REQ_DC_POWER', 0x02080001, DataType.UINT16),
    ('PVI_REQ_DC_VOLTAGE', 0x02080002, DataType.UINT16),
    ('PVI_REQ_DC_CURRENT', 0x02080003, DataType.UINT16),
    ('PVI_DATA', 0x02840000, DataType.CONTAINER),
    ('PVI_ON_GRID', 0x02800001, DataType.BOOL),
    ('PVI_AC_POWER', 0x02860001, DataType.CONTAINER),
    ('PVI_DC_POWER', 0x02880001, DataType.CONTAINER),

    # BAT: battery.

    ('BAT_REQ_DATA', 0x03040000, DataType.CONTAINER),
    ('BAT_INDEX', 0x03040001, DataType.UINT16),
    ('BAT_REQ_RSOC', 0x03000001, DataType.NONE),
    ('BAT_REQ_MODULE_VOLTAGE', 0x03000002, DataType.NONE),
    ('BAT_REQ_CURRENT', 0x03000003, DataType.NONE),
    ('BAT_REQ_MAX_BAT_VOLTAGE', 0x03000004, DataType.NONE),
    ('BAT_REQ_CHARGE_CYCLES', 0x03000008, DataType.NONE),
    ('BAT_REQ_STATUS_CODE', 0x03000009, DataType.NONE),
    ('BAT_REQ_ERROR_CODE', 0x0300000A, DataType.NONE),
    ('BAT_REQ_DEVICE_NAME', 0x0300000B, DataType.NONE),
    ('BAT_REQ_DCB_COUNT', 0x0300000C, DataType.NONE),
    ('BAT_REQ_DEVICE_STATE', 0x03000060, DataType.NONE),
    ('BAT_DATA', 0x03840000, DataType.CONTAINER),
    ('BAT_RSOC', 0x03800001, DataType.FLOAT32),
    ('BAT_MODULE_VOLTAGE', 0x03800002, DataType.FLOAT32),
    ('BAT_CURRENT', 0x03800003, DataType.FLOAT32),
    ('BAT_MAX_BAT_VOLTAGE', 0x03800004, DataType.FLOAT32),
    ('BAT_CHARGE_CYCLES', 0x03800008, DataType.UINT32),
    ('BAT_STATUS_CODE', 0x03800009, DataType.UINT32),
    ('BAT_ERROR_CODE', 0x0380000A, DataType.UINT32),
    ('BAT_DEVICE_NAME', 0x0380000B, DataType.CSTRING),
    ('BAT_DCB_COUNT', 0x0380000C, DataType.UCHAR8),
    ('BAT_DEVICE_STATE', 0x03800060, DataType.CONTAINER),
    ('BAT_DEVICE_CONNECTED', 0x03800061, DataType.BOOL),
    ('BAT_DEVICE_WORKING', 0x03800062, DataType.BOOL),
    ('BAT_DEVICE_IN_SERVICE', 0x03800063, DataType.BOOL),

    # PM: power meter.

    ('PM_REQ_DATA', 0x05040000, DataType.CONTAINER),
    ('PM_INDEX', 0x05040001, DataType.UINT16),
    ('PM_REQ_POWER_L1', 0x05000001, DataType.NONE),
    ('PM_REQ_POWER_L2', 0x05000002, DataType.NONE),
    ('PM_REQ_POWER_L3', 0x05000003, DataType.NONE),
    ('PM_REQ_ACTIVE_PHASES', 0x05000004, DataType.NONE),
    ('PM_REQ_ENERGY_L1', 0x05000006, DataType.NONE),
    ('PM_REQ_ENERGY_L2', 0x05000007, DataType.NONE),
    ('PM_REQ_ENERGY_L3', 0x05000008, DataType.NONE),
    ('PM_DATA', 0x05840000, DataType.CONTAINER),
    ('PM_POWER_L1', 0x05800001, DataType.DOUBLE64),
    ('PM_POWER_L2', 0x05800002, DataType.DOUBLE64),
    ('PM_POWER_L3', 0x05800003, DataType.DOUBLE64),
    ('PM_ACTIVE_PHASES', 0x05800004, DataType.BITFIELD),
    ('PM_ENERGY_L1', 0x05800006, DataType.DOUBLE64),
    ('PM_ENERGY_L2', 0x05800007, DataType.DOUBLE64),
    ('PM_ENERGY_L3', 0x05800008, DataType.DOUBLE64),

    # DB: history database.

    ('DB_REQ_HISTORY_DATA_DAY', 0x06000100, DataType.CONTAINER),
    ('DB_REQ_HISTORY_TIME_START', 0x06000101, DataType.TIMESTAMP),
    ('DB_REQ_HISTORY_TIME_INTERVAL', 0x06000102, DataType.TIMESTAMP),
    ('DB_REQ_HISTORY_TIME_SPAN', 0x06000103, DataType.TIMESTAMP),
    ('DB_REQ_HISTORY_DATA_WEEK', 0x06000200, DataType.CONTAINER),
    ('DB_REQ_HISTORY_DATA_MONTH', 0x06000300, DataType.CONTAINER),
    ('DB_REQ_HISTORY_DATA_YEAR', 0x06000400, DataType.CONTAINER),
    ('DB_HISTORY_DATA_DAY', 0x06800100, DataType.CONTAINER),

    # INFO: system information.

    ('INFO_REQ_SERIAL_NUMBER', 0x0A000001, DataType.NONE),
    ('INFO_REQ_PRODUCTION_DATE', 0x0A000002, DataType.NONE),
    ('INFO_REQ_MODULES_SW_VERSIONS', 0x0A000003, DataType.NONE),
    ('INFO_REQ_A35_SERIAL_NUMBER', 0x0A000007, DataType.NONE),
    ('INFO_REQ_IP_ADDRESS', 0x0A000008, DataType.NONE),
    ('INFO_REQ_SUBNET_MASK', 0x0A000009, DataType.NONE),
    ('INFO_REQ_MAC_ADDRESS', 0x0A00000A, DataType.NONE),
    ('INFO_REQ_GATEWAY', 0x0A00000B, DataType.NONE),
    ('INFO_REQ_DNS', 0x0A00000C, DataType.NONE),
    ('INFO_REQ_DHCP_STATUS', 0x0A00000D, DataType.NONE),
    ('INFO_REQ_TIME', 0x0A00000E, DataType.NONE),
    ('INFO_REQ_UTC_TIME', 0x0A00000F, DataType.NONE),
    ('INFO_REQ_TIME_ZONE', 0x0A000010, DataType.NONE),
    ('INFO_REQ_INFO', 0x0A000011, DataType.NONE),
    ('INFO_SET_IP_ADDRESS', 0x0A000012, DataType.CSTRING),
    ('INFO_SET_SUBNET_MASK', 0x0A000013, DataType.CSTRING),
    ('INFO_SET_DHCP_STATUS', 0x0A000014, DataType.BOOL),
    ('INFO_SET_GATEWAY', 0x0A000015, DataType.CSTRING),
    ('INFO_SET_DNS', 0x0A000016, DataType.CSTRING),
    ('INFO_SET_TIME', 0x0A000017, DataType.TIMESTAMP),
    ('INFO_SET_TIME_ZONE', 0x0A000018, DataType.CSTRING),
    ('INFO_REQ_SW_RELEASE', 0x0A00001A, DataType.NONE),
    ('INFO_SERIAL_NUMBER', 0x0A800001, DataType.CSTRING),
    ('INFO_PRODUCTION_DATE', 0x0A800002, DataType.CSTRING),
    ('INFO_MODULES_SW_VERSIONS', 0x0A800003, DataType.CONTAINER),
    ('INFO_A35_SERIAL_NUMBER', 0x0A800007, DataType.CSTRING),
    ('INFO_IP_ADDRESS', 0x0A800008, DataType.CSTRING),
    ('INFO_SUBNET_MASK', 0x0A800009, DataType.CSTRING),
    ('INFO_MAC_ADDRESS', 0x0A80000A, DataType.CSTRING),
    ('INFO_GATEWAY', 0x0A80000B, DataType.CSTRING),
    ('INFO_DNS', 0x0A80000C, DataType.CSTRING),
    ('INFO_DHCP_STATUS', 0x0A80000D, DataType.BOOL),
    ('INFO_TIME', 0x0A80000E, DataType.TIMESTAMP),
    ('INFO_UTC_TIME', 0x0A80000F, DataType.TIMESTAMP),
    ('INFO_TIME_ZONE', 0x0A800010, DataType.CSTRING),
    ('INFO_SW_RELEASE', 0x0A80001A, DataType.CSTRING),

    # EP: emergency power.

    ('EP_REQ_SWITCH_TO_GRID', 0x0B000001, DataType.NONE),
    ('EP_REQ_SWITCH_TO_ISLAND', 0x0B000002, DataType.NONE),
    ('EP_REQ_IS_READY_FOR_SWITCH', 0x0B000003, DataType.NONE),
    ('EP_REQ_IS_GRID_CONNECTED', 0x0B000004, DataType.NONE),
    ('EP_REQ_IS_ISLAND_GRID', 0x0B000005, DataType.NONE),
    ('EP_IS_READY_FOR_SWITCH', 0x0B800003, DataType.BOOL),
    ('EP_IS_GRID_CONNECTED', 0x0B800004, DataType.BOOL),
    ('EP_IS_ISLAND_GRID', 0x0B800005, DataType.BOOL),

    # WB: wallbox.

    ('WB_REQ_DATA', 0x0E040000, DataType.CONTAINER),
    ('WB_INDEX', 0x0E040001, DataType.UCHAR8),
    ('WB_REQ_ENERGY_ALL', 0x0E000001, DataType.NONE),
    ('WB_REQ_ENERGY_SOLAR', 0x0E000002, DataType.NONE),
    ('WB_REQ_SOC', 0x0E000003, DataType.NONE),
    ('WB_REQ_STATUS', 0x0E000004, DataType.NONE),
    ('WB_REQ_EXTERN_DATA_ALG', 0x0E000011, DataType.NONE),
    ('WB_DATA', 0x0E840000, DataType.CONTAINER),
    ('WB_ENERGY_ALL', 0x0E800001, DataType.DOUBLE64),
    ('WB_ENERGY_SOLAR', 0x0E800002, DataType.DOUBLE64),
    ('WB_SOC', 0x0E800003, DataType.DOUBLE64),
    ('WB_STATUS', 0x0E800004, DataType.UCHAR8),
    ('WB_EXTERN_DATA', 0x0E800010, DataType.BYTEARRAY),
    ('WB_EXTERN_DATA_LEN', 0x0E800011, DataType.UCHAR8),

    # SYS: system control.

    ('SYS_REQ_SYSTEM_REBOOT', 0x24000001, DataType.NONE),
    ('SYS_REQ_IS_SYSTEM_REBOOTING', 0x24000002, DataType.NONE),
    ('SYS_REQ_RESTART_APPLICATION', 0x24000003, DataType.NONE),
    ('SYS_SYSTEM_REBOOT', 0x24800001, DataType.UCHAR8),
    ('SYS_IS_SYSTEM_REBOOTING', 0x24800002, DataType.BOOL),
    ('SYS_RESTART_APPLICATION', 0x24800003, DataType.BOOL),
)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
