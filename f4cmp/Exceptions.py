class ParseError(ValueError):
    """
    Raised when a byte value cannot be read as a decimal number under a NumberLocale.

    Attributes:
        value (bytes): The value that could not be parsed.
        locale_name (str): The name of the locale that was used.
    """
    def __init__(self, value, locale_name):
        self.value = value
        self.locale_name = locale_name

        super().__init__(f"The value {value!r} is not a valid decimal number for the {locale_name} locale.")

class DecodeError(Exception):
    """
    Raised when serialized comparator bytes do not match the expected message shape.
    """
    pass
