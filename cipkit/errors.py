"""CIP general status codes and connection manager extended status codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["CipError", "ConnMgrStatus", "ext_status_str"]


class CipError(IntEnum):
    """General status codes of a message router response (one byte)."""

    SUCCESS = 0x00
    CONNECTION_FAILURE = 0x01
    RESOURCE_UNAVAILABLE = 0x02
    INVALID_PARAMETER_VALUE = 0x03
    PATH_SEGMENT_ERROR = 0x04
    PATH_DESTINATION_UNKNOWN = 0x05
    PARTIAL_TRANSFER = 0x06
    CONNECTION_LOST = 0x07
    SERVICE_NOT_SUPPORTED = 0x08
    INVALID_ATTRIBUTE_VALUE = 0x09
    ATTRIBUTE_LIST_ERROR = 0x0A
    ALREADY_IN_REQUESTED_MODE = 0x0B
    OBJECT_STATE_CONFLICT = 0x0C
    OBJECT_ALREADY_EXISTS = 0x0D
    ATTRIBUTE_NOT_SETABLE = 0x0E
    PRIVILEGE_VIOLATION = 0x0F
    DEVICE_STATE_CONFLICT = 0x10
    REPLY_DATA_TOO_LARGE = 0x11
    FRAGMENTATION_OF_A_PRIMITIVE_VALUE = 0x12
    NOT_ENOUGH_DATA = 0x13
    ATTRIBUTE_NOT_SUPPORTED = 0x14
    TOO_MUCH_DATA = 0x15
    OBJECT_DOES_NOT_EXIST = 0x16
    SERVICE_FRAGMENTATION_SEQUENCE_NOT_IN_PROGRESS = 0x17
    NO_STORED_ATTRIBUTE_DATA = 0x18
    STORE_OPERATION_FAILURE = 0x19
    ROUTING_FAILURE_REQUEST_PACKET_TOO_LARGE = 0x1A
    ROUTING_FAILURE_RESPONSE_PACKET_TOO_LARGE = 0x1B
    MISSING_ATTRIBUTE_LIST_ENTRY = 0x1C
    INVALID_ATTRIBUTE_VALUE_LIST = 0x1D
    EMBEDDED_SERVICE_ERROR = 0x1E
    VENDOR_SPECIFIC_ERROR = 0x1F
    INVALID_PARAMETER = 0x20
    WRITE_ONCE_VALUE_OR_MEDIUM_ALREADY_WRITTEN = 0x21
    INVALID_REPLY_RECEIVED = 0x22
    KEY_FAILURE_IN_PATH = 0x25
    PATH_SIZE_INVALID = 0x26
    UNEXPECTED_ATTRIBUTE_IN_LIST = 0x27
    INVALID_MEMBER_ID = 0x28
    MEMBER_NOT_SETABLE = 0x29
    GROUP2_ONLY_SERVER_GENERAL_FAILURE = 0x2A
    ATTRIBUTE_NOT_GETTABLE = 0x2C
    GENERAL_ERROR = 0xFF


class ConnMgrStatus(IntEnum):
    """Connection manager status codes, also called extended status values."""

    SUCCESS = 0x0000
    CONNECTION_IN_USE = 0x0100
    TRANSPORT_TRIGGER_NOT_SUPPORTED = 0x0103
    OWNERSHIP_CONFLICT = 0x0106
    CONNECTION_NOT_FOUND_AT_TARGET_APPLICATION = 0x0107
    INVALID_NETWORK_CONNECTION_PARAMETER = 0x0108
    INVALID_CONNECTION_SIZE = 0x0109
    RPI_NOT_SUPPORTED = 0x0111
    RPI_VALUES_NOT_ACCEPTABLE = 0x0112
    NO_MORE_CONNECTIONS_AVAILABLE = 0x0113
    VENDOR_ID_OR_PRODUCT_CODE_ERROR = 0x0114
    DEVICE_TYPE_ERROR = 0x0115
    REVISION_MISMATCH = 0x0116
    NON_LISTEN_ONLY_CONNECTION_NOT_OPENED = 0x0119
    TARGET_OBJECT_OUT_OF_CONNECTIONS = 0x011A
    PIT_GREATER_THAN_RPI = 0x011B
    INVALID_O_TO_T_CONNECTION_TYPE = 0x0123
    INVALID_T_TO_O_CONNECTION_TYPE = 0x0124
    INVALID_O_TO_T_CONNECTION_SIZE = 0x0127
    INVALID_T_TO_O_CONNECTION_SIZE = 0x0128
    INVALID_CONFIGURATION_APPLICATION_PATH = 0x0129
    INVALID_CONSUMING_APPLICATION_PATH = 0x012A
    INVALID_PRODUCING_APPLICATION_PATH = 0x012B
    INCONSISTENT_APPLICATION_PATH_COMBO = 0x012F
    NULL_FORWARD_OPEN_FUNCTION_NOT_SUPPORTED = 0x0132
    CONNECTION_TIMEOUT_MULTIPLIER_NOT_ACCEPTABLE = 0x0133
    PARAMETER_ERROR_IN_UNCONNECTED_SEND_SERVICE = 0x0205
    INVALID_SEGMENT_TYPE_IN_PATH = 0x0315
    IN_FORWARD_CLOSE_PATH_MISMATCH = 0x0316


_EXT_STATUS_TEXT: dict[ConnMgrStatus, str] = {
    ConnMgrStatus.SUCCESS: "success",
    ConnMgrStatus.CONNECTION_IN_USE: "connection in use",
    ConnMgrStatus.TRANSPORT_TRIGGER_NOT_SUPPORTED: "transport trigger not supported",
    ConnMgrStatus.OWNERSHIP_CONFLICT: "ownership conflict",
    ConnMgrStatus.CONNECTION_NOT_FOUND_AT_TARGET_APPLICATION: "connection not found at target application",
    ConnMgrStatus.INVALID_NETWORK_CONNECTION_PARAMETER: "invalid network connection parameter",
    ConnMgrStatus.INVALID_CONNECTION_SIZE: "invalid connection size",
    ConnMgrStatus.RPI_NOT_SUPPORTED: "RPI not supported",
    ConnMgrStatus.RPI_VALUES_NOT_ACCEPTABLE: "RPI value not acceptable",
    ConnMgrStatus.NO_MORE_CONNECTIONS_AVAILABLE: "no more connections available",
    ConnMgrStatus.VENDOR_ID_OR_PRODUCT_CODE_ERROR: "vendor id or product code error",
    ConnMgrStatus.DEVICE_TYPE_ERROR: "device type error",
    ConnMgrStatus.REVISION_MISMATCH: "revision mismatch",
    ConnMgrStatus.NON_LISTEN_ONLY_CONNECTION_NOT_OPENED: "non-listen only connection not opened",
    ConnMgrStatus.TARGET_OBJECT_OUT_OF_CONNECTIONS: "target out of connections",
    ConnMgrStatus.PIT_GREATER_THAN_RPI: "PIT greater than RPI",
    ConnMgrStatus.INVALID_O_TO_T_CONNECTION_TYPE: "invalid O->T connection type",
    ConnMgrStatus.INVALID_T_TO_O_CONNECTION_TYPE: "invalid T->O connection type",
    ConnMgrStatus.INVALID_O_TO_T_CONNECTION_SIZE: "invalid O->T connection size",
    ConnMgrStatus.INVALID_T_TO_O_CONNECTION_SIZE: "invalid T->O connection size",
    ConnMgrStatus.INVALID_CONFIGURATION_APPLICATION_PATH: "invalid configuration app_path",
    ConnMgrStatus.INVALID_CONSUMING_APPLICATION_PATH: "invalid consuming app_path",
    ConnMgrStatus.INVALID_PRODUCING_APPLICATION_PATH: "invalid producing app_path",
    ConnMgrStatus.INCONSISTENT_APPLICATION_PATH_COMBO: "inconsisten app_path combo",
    ConnMgrStatus.NULL_FORWARD_OPEN_FUNCTION_NOT_SUPPORTED: "null forward open function not supported",
    ConnMgrStatus.CONNECTION_TIMEOUT_MULTIPLIER_NOT_ACCEPTABLE: "connection timeout multiplier not acceptable",
    ConnMgrStatus.PARAMETER_ERROR_IN_UNCONNECTED_SEND_SERVICE: "parameter error in unconnected send service",
    ConnMgrStatus.INVALID_SEGMENT_TYPE_IN_PATH: "invalid segment type in path",
    ConnMgrStatus.IN_FORWARD_CLOSE_PATH_MISMATCH: "forward close path mismatch",
}


def ext_status_str(status: int) -> str:
    """Return a short description of an extended status, or "?" if unknown."""
    try:
        return _EXT_STATUS_TEXT[ConnMgrStatus(status)]
    except ValueError:
        return "?"