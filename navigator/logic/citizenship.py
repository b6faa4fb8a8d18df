"""
Citizenship Classifier

Maps a country of citizenship to the restriction category used by
eligibility rules.
"""

from .constants import RESTRICTED_COUNTRIES, US_NATIONAL_COUNTRIES, RestrictionCategory


def classify(country_code: str) -> str:
    """
    Classify an ISO-3166 alpha-2 code.

    Unknown or empty codes default to 'unrestricted' (fail open).

    Returns:
        'usNational', 'restricted' or 'unrestricted'
    """
    code = (country_code or "").strip().upper()

    if code in US_NATIONAL_COUNTRIES:
        return RestrictionCategory.US_NATIONAL.value
    if code in RESTRICTED_COUNTRIES:
        return RestrictionCategory.RESTRICTED.value
    return RestrictionCategory.UNRESTRICTED.value
