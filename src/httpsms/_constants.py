"""Internal constants shared across the library."""

BASE_URL = "https://api.httpsms.com"

# Preference keys written by the settings store.
KEY_API_KEY = "KEY_API_KEY"
KEY_ACTIVE_STATUS_PREFIX = "KEY_ACTIVE_STATUS_"
KEY_OWNER_PREFIX = "KEY_OWNER_"

# ------------------------------------------------------------------
# Message API limits
# ------------------------------------------------------------------

#: E.164: a leading ``+``, a non-zero ASCII digit, then 1 to 14 more ASCII digits.
PHONE_NUMBER_PATTERN = r"^\+[1-9][0-9]{1,14}$"
E164_REFERENCE_URL = "https://en.wikipedia.org/wiki/E.164"

CONTENT_MIN_LENGTH = 1
CONTENT_MAX_LENGTH = 500
LIMIT_MIN = 1
LIMIT_MAX = 20
QUERY_MAX_LENGTH = 100


def phone_number_message(field: str) -> str:
    """Error text for a phone field that is not a valid E.164 number."""
    return f"The '{field}' field must be a valid E.164 phone number: {E164_REFERENCE_URL}"
