import datetime
import msgspec

LONG_SIZE = 8
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

def print_message(message, verbose=False):
    if verbose:
        print(f"{message} - {datetime.datetime.now().strftime('%d/%m/%Y %H:%M:%S.%f')}")

def convert_long_to_bytes(value):
    return value.to_bytes(LONG_SIZE, byteorder="big", signed=True)

def convert_bytes_to_long(b):
    return int.from_bytes(b, byteorder="big", signed=True)

def is_text(b):
    # Strict UTF-8 with no C0 control characters or DEL.
    try:
        text = bytes(b).decode("utf-8")
    except UnicodeDecodeError:
        return False

    return all(x >= " " and x != "\x7f" for x in text)

def slice_bytes(value, offset=0, length=None):
    if length is None:
        length = len(value) - offset

    if offset < 0 or length < 0 or offset + length > len(value):
        raise IndexError(f"The range [{offset}, {offset + length}) is outside a buffer of length {len(value)}.")

    return bytes(value[offset:(offset + length)])

def compare_bytes(a, b):
    # Unsigned, lexicographic; a shorter prefix sorts first.
    if a == b:
        return 0
    return -1 if a < b else 1

def serialize(obj):
    return msgspec.msgpack.encode(obj)

def deserialize(msg, msg_type):
    return msgspec.msgpack.decode(msg, type=msg_type)
