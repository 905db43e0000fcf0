# phone.py - national-format display of stored phone numbers
import phonenumbers

DEFAULT_REGION = "US"


def format_phone_number(raw: str, region: str = DEFAULT_REGION) -> str:
    """Render ``raw`` in national format, or return it untouched.

    A number is formatted when it parses for ``region`` and has a possible
    length and shape there. Directory data uses fictional 555 exchanges, which
    libphonenumber does not consider assigned, so full validity is not required.
    """
    if not raw:
        return raw
    try:
        number = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException:
        return raw
    if not phonenumbers.is_possible_number(number):
        return raw
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.NATIONAL)
