from decimal import Decimal
import enum
import msgspec
import typing
from f4cmp.Exceptions import DecodeError, ParseError
from f4cmp.Locales import get_default_locale, parse_decimal_bytes
from f4cmp.Messages import ByteArrayComparableMessage, ComparatorMessage, DecimalComparatorMessage
from f4cmp.Utilities import *

class CompareResult(enum.IntEnum):
    """
    The position of a comparator's reference value relative to a candidate value.
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a, b):
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL

@typing.runtime_checkable
class ByteArrayComparable(typing.Protocol):
    """
    Anything that holds a raw byte value and can order candidate byte values against it.
    """
    @property
    def raw_bytes(self) -> bytes: ...

    def compare(self, candidate, offset=0, length=None): ...

    def convert(self) -> ByteArrayComparableMessage: ...

    def serialize(self) -> bytes: ...

def comparable_fields_equal(a, b):
    if a is b:
        return True

    if not isinstance(b, ByteArrayComparable):
        return False

    return compare_bytes(a.convert().value, b.convert().value) == 0

class DecimalByteComparator:
    """
    Compares byte values that hold locale-formatted decimal numbers against a reference number.

    Candidate values that cannot be parsed compare as though the reference were greater,
    so a "less than" predicate built on this comparator skips non-numeric cells.

    Args:
        value (int or bytes): A signed 64-bit integer, or the text of a decimal number.
        locale (NumberLocale): The number format to parse with. The process default is used when None.

    Attributes:
        reference_value (Decimal): The number that candidate values are compared against.
        raw_bytes (bytes): The bytes this comparator was built from.
        locale (NumberLocale): The number format used for all parsing.
    """
    __slots__ = ("_reference_value", "_raw_bytes", "_locale")

    def __init__(self, value, locale=None):
        if isinstance(value, int) and not isinstance(value, bool):
            self.__init_from_integer(value, locale)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self.__init_from_bytes(bytes(value), locale)
        else:
            raise TypeError(f"An int or bytes value is required for the value argument of the {type(self).__name__} class, but the type was {type(value).__name__}.")

    @classmethod
    def construct_from_integer(cls, value, locale=None):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"A variable of int type is required for the value argument of {cls.__name__}.construct_from_integer, but the type was {type(value).__name__}.")

        return cls(value, locale)

    @classmethod
    def construct_from_bytes(cls, value, locale=None):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"A bytes-like value is required for the value argument of {cls.__name__}.construct_from_bytes, but the type was {type(value).__name__}.")

        return cls(value, locale)

    @classmethod
    def deserialize(cls, data, locale=None):
        """
        Rebuild a comparator from the output of serialize().

        The locale is not part of the serialized form, so the value is parsed again using
        the locale argument or, when None, the current process default.

        An 8-byte value that is not decimal text is the binary form written by an
        integer comparator, and an integer comparator is rebuilt from it.

        Raises:
            DecodeError: If data is not a serialized comparator.
            ParseError: If the embedded value is not a decimal number.
        """
        try:
            message = deserialize(data, DecimalComparatorMessage)
        except (msgspec.DecodeError, TypeError) as e:
            raise DecodeError(f"Unable to decode a {cls.__name__}: {e}") from e

        value = message.comparable.value
        if locale is None:
            locale = get_default_locale()

        if len(value) == LONG_SIZE and parse_decimal_bytes(value, locale) is None:
            return cls.construct_from_integer(convert_bytes_to_long(value), locale)

        return cls.construct_from_bytes(value, locale)

    @property
    def reference_value(self):
        return self._reference_value

    @property
    def raw_bytes(self):
        return self._raw_bytes

    @property
    def locale(self):
        return self._locale

    def compare(self, candidate, offset=0, length=None):
        value = slice_bytes(candidate, offset, length)

        if value == self._raw_bytes:
            return CompareResult.EQUAL

        that = self.__parse(value)

        if that is None:
            return CompareResult.GREATER

        return CompareResult.of(self._reference_value, that)

    def convert(self):
        return ByteArrayComparableMessage(self._raw_bytes)

    def serialize(self):
        return serialize(DecimalComparatorMessage(self.convert()))

    def serialized_fields_equal(self, other):
        return comparable_fields_equal(self, other)

    def __repr__(self):
        return f"{type(self).__name__}({self._reference_value}, locale={self._locale.name})"

    ##############################################
    # Non-public functions
    ##############################################

    def __init_from_integer(self, value, locale):
        if value < LONG_MIN or value > LONG_MAX:
            raise ValueError(f"The value {value} is outside the signed 64-bit range supported by {type(self).__name__}.")

        self._raw_bytes = convert_long_to_bytes(value)
        self._reference_value = Decimal(value)
        self._locale = locale if locale is not None else get_default_locale()

    def __init_from_bytes(self, value, locale):
        self._raw_bytes = value
        self._locale = locale if locale is not None else get_default_locale()
        self._reference_value = self.__parse(value)

        if self._reference_value is None:
            raise ParseError(value, self._locale.name)

    def __parse(self, value):
        number = parse_decimal_bytes(value, self._locale)

        # Integer comparators store their value in binary. Only bytes that cannot be text are read that way.
        if number is None and len(value) == LONG_SIZE and not is_text(value):
            number = Decimal(convert_bytes_to_long(value))

        return number

_comparator_types = {}

def register_comparator(cls):
    _comparator_types[cls.__name__] = cls
    return cls

register_comparator(DecimalByteComparator)

def serialize_comparator(comparator, verbose=False):
    name = type(comparator).__name__

    if name not in _comparator_types:
        raise ValueError(f"{name} has not been registered as a comparator type.")

    print_message(f"Serializing a {name}", verbose)

    return serialize(ComparatorMessage(name, comparator.serialize()))

def deserialize_comparator(data, verbose=False):
    try:
        message = deserialize(data, ComparatorMessage)
    except (msgspec.DecodeError, TypeError) as e:
        raise DecodeError(f"Unable to decode a comparator: {e}") from e

    if message.name not in _comparator_types:
        raise DecodeError(f"No comparator type named {message.name} has been registered.")

    print_message(f"Deserializing a {message.name}", verbose)

    return _comparator_types[message.name].deserialize(message.serialized_comparator)
