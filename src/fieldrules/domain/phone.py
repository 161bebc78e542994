"""Mobile number validation in E.164 format via the phonenumbers library.

``mobile_e164`` accepts any country's mobile number; ``mobile_e164=TH``
additionally requires the number to belong to that region.  Numbers
typed FIXED_LINE_OR_MOBILE count as mobile (common for US numbers).
"""

from __future__ import annotations

import re

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberType

# Cheap format gate before handing off to phonenumbers.
E164_PATTERN = re.compile(r"\+[1-9]?[0-9]{7,14}")

MOBILE_TYPES = frozenset({PhoneNumberType.MOBILE, PhoneNumberType.FIXED_LINE_OR_MOBILE})


def is_mobile_e164(number: object, region: str = "") -> bool:
    """Whether *number* is a valid E.164 mobile number (optionally in *region*)."""
    if not isinstance(number, str) or E164_PATTERN.fullmatch(number) is None:
        return False

    try:
        parsed = phonenumbers.parse(number, None)
    except NumberParseException:
        return False

    if not phonenumbers.is_valid_number(parsed):
        return False
    if phonenumbers.number_type(parsed) not in MOBILE_TYPES:
        return False
    if region and phonenumbers.region_code_for_number(parsed) != region:
        return False
    return True
