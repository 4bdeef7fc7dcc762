import msgspec

# Messages are encoded as msgpack arrays, so field order is part of the wire format.

class ByteArrayComparableMessage(msgspec.Struct, array_like=True, frozen=True):
    value: bytes

class DecimalComparatorMessage(msgspec.Struct, array_like=True, frozen=True):
    comparable: ByteArrayComparableMessage

class ComparatorMessage(msgspec.Struct, array_like=True, frozen=True):
    name: str
    serialized_comparator: bytes
