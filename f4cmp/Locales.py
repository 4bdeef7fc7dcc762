import decimal
from decimal import Decimal
import fastnumbers
import functools
import locale
import msgspec
import re

class NumberLocale(msgspec.Struct, frozen=True):
    """
    Describes how decimal numbers are written for a given locale.

    Attributes:
        name (str): An identifier such as en_US.
        decimal_separator (str): Separates the integer and fractional parts.
        grouping_separator (str): Separates digit groups in the integer part. An empty string disables grouping.
        minus_sign (str): Prefix for negative numbers.
        plus_sign (str): Optional prefix for positive numbers.
    """
    name: str
    decimal_separator: str = "."
    grouping_separator: str = ","
    minus_sign: str = "-"
    plus_sign: str = "+"

KNOWN_LOCALES = {
    "C": NumberLocale("C", ".", ""),
    "en_US": NumberLocale("en_US", ".", ","),
    "en_GB": NumberLocale("en_GB", ".", ","),
    "de_DE": NumberLocale("de_DE", ",", "."),
    "fr_FR": NumberLocale("fr_FR", ",", "\u202f"),
    "de_CH": NumberLocale("de_CH", ".", "\u2019"),
}

def get_locale(name):
    if name not in KNOWN_LOCALES:
        raise KeyError(f"No number format is defined for a locale named {name}.")

    return KNOWN_LOCALES[name]

def get_default_locale():
    # Passing no locale only queries LC_NUMERIC; it does not change it.
    name = locale.setlocale(locale.LC_NUMERIC)

    if name.split(".")[0] in ("C", "POSIX"):
        return KNOWN_LOCALES["en_US"]

    conv = locale.localeconv()

    # localeconv() only reports signs for LC_MONETARY.
    return NumberLocale(name, conv["decimal_point"] or ".", conv["thousands_sep"], "-", "+")

def parse_decimal(text, number_locale):
    """
    Parse a string that contains a single decimal number written for a NumberLocale.

    The whole string must match; whitespace, exponents, and special values such as NaN are not accepted.

    Args:
        text (str): The text to parse.
        number_locale (NumberLocale): The format to parse with.

    Returns:
        A Decimal, or None if the text is not a valid number.
    """
    match = _get_number_pattern(number_locale).fullmatch(text)

    if not match:
        return None

    integer_digits = match.group("integer") or ""
    fraction_digits = match.group("fraction") or match.group("bare_fraction") or ""

    if number_locale.grouping_separator:
        integer_digits = integer_digits.replace(number_locale.grouping_separator, "")

    negative = match.group("sign") in (number_locale.minus_sign, "-")

    # The digits are read as one unscaled integer, then shifted. The context is
    # wide enough that scaleb never rounds.
    digits = integer_digits + fraction_digits
    value = Decimal(fastnumbers.try_int(digits)).scaleb(-len(fraction_digits), decimal.Context(prec=len(digits)))

    return value.copy_negate() if negative else value

def parse_decimal_bytes(value, number_locale):
    try:
        text = value.decode("utf-8")
    except UnicodeDecodeError:
        return None

    return parse_decimal(text, number_locale)

@functools.lru_cache(maxsize=None)
def _get_number_pattern(number_locale):
    signs = sorted({number_locale.minus_sign, number_locale.plus_sign, "-", "+"} - {""}, key=len, reverse=True)
    sign_pattern = "|".join(re.escape(x) for x in signs)
    decimal_pattern = re.escape(number_locale.decimal_separator)

    if number_locale.grouping_separator:
        integer_pattern = f"[0-9]+(?:{re.escape(number_locale.grouping_separator)}[0-9]+)*"
    else:
        integer_pattern = "[0-9]+"

    return re.compile(f"(?P<sign>{sign_pattern})?(?:(?P<integer>{integer_pattern})(?:{decimal_pattern}(?P<fraction>[0-9]*))?|{decimal_pattern}(?P<bare_fraction>[0-9]+))")
