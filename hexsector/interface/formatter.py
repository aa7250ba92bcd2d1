"""Universal World Profile encodings."""

from ..models.star_system import StarSystemProfile
from ..utils.codes import ehex


def encode(profile: StarSystemProfile) -> str:
    """Render a profile as its UWP string.

    Format: <starport>-<size><atmo><hydro><pop><govt><law>-<tech>, every
    number in plain decimal. Values above 9 widen their field, so the
    string has no fixed width.

    Examples:
        >>> encode(StarSystemProfile(7, 8, 6, 5, 4, 3, "C", 9))
        'C-786543-9'
        >>> encode(StarSystemProfile(10, 15, 10, 10, 13, 15, "A", 23))
        'A-101510101315-23'
    """
    return (
        f"{profile.starport}-"
        f"{profile.size}{profile.atmosphere}{profile.hydrographics}"
        f"{profile.population}{profile.government}{profile.law_level}"
        f"-{profile.technology}"
    )


def encode_ehex(profile: StarSystemProfile) -> str:
    """Render a profile with one eHex character per middle field.

    Technology stays decimal since it can pass 16.

    Examples:
        >>> encode_ehex(StarSystemProfile(10, 15, 10, 10, 13, 15, "A", 23))
        'A-AFAADF-23'
    """
    fields = (
        profile.size,
        profile.atmosphere,
        profile.hydrographics,
        profile.population,
        profile.government,
        profile.law_level,
    )
    return f"{profile.starport}-{''.join(ehex(value) for value in fields)}-{profile.technology}"
