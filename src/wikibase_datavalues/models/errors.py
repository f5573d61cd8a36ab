from enum import Enum


class DecodeErrorType(str, Enum):
    """Machine-readable decode error types"""
    NULL_PAYLOAD = "null_payload"
    SHAPE_MISMATCH = "shape_mismatch"
    MALFORMED_IDENTIFIER = "malformed_identifier"
    UNKNOWN_VALUE_KIND = "unknown_value_kind"


class DecodeError(ValueError):
    """Base class for every failure raised while decoding a data value"""
    error_type: DecodeErrorType

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NullPayloadError(DecodeError):
    error_type = DecodeErrorType.NULL_PAYLOAD


class ShapeMismatchError(DecodeError):
    error_type = DecodeErrorType.SHAPE_MISMATCH


class UnknownValueKindError(ShapeMismatchError):
    error_type = DecodeErrorType.UNKNOWN_VALUE_KIND


class MalformedIdentifierError(DecodeError):
    error_type = DecodeErrorType.MALFORMED_IDENTIFIER
