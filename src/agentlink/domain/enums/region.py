"""Frontegg hosting regions."""

from enum import Enum


class Region(str, Enum):
    """Frontegg region, each served from its own API host."""

    STG = "stg"
    EU = "eu"
    US = "us"
    AU = "au"
    CA = "ca"
    UK = "uk"

    @property
    def base_url(self) -> str:
        return REGION_BASE_URLS[self]

    @classmethod
    def names(cls) -> list[str]:
        return [region.value for region in cls]


REGION_BASE_URLS: dict[Region, str] = {
    Region.STG: "https://api.stg.frontegg.com",
    Region.EU: "https://api.frontegg.com",
    Region.US: "https://api.us.frontegg.com",
    Region.AU: "https://api.au.frontegg.com",
    Region.CA: "https://api.ca.frontegg.com",
    Region.UK: "https://api.uk.frontegg.com",
}

DEFAULT_REGION = Region.EU
