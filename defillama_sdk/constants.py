"""Dimension constants shared by the fees and volumes endpoints."""

from enum import StrEnum


class AdapterType(StrEnum):
    """Adapter families tracked by the dimensions (fees/volume) API."""

    DEXS = "dexs"
    FEES = "fees"
    AGGREGATORS = "aggregators"
    DERIVATIVES = "derivatives"
    AGGREGATOR_DERIVATIVES = "aggregator-derivatives"
    OPTIONS = "options"
    BRIDGE_AGGREGATORS = "bridge-aggregators"
    OPEN_INTEREST = "open-interest"


class FeeDataType(StrEnum):
    """Values accepted by the dataType parameter of fees endpoints."""

    DAILY_FEES = "dailyFees"
    DAILY_REVENUE = "dailyRevenue"
    DAILY_HOLDERS_REVENUE = "dailyHoldersRevenue"
    DAILY_SUPPLY_SIDE_REVENUE = "dailySupplySideRevenue"
    DAILY_BRIBES_REVENUE = "dailyBribesRevenue"
    DAILY_TOKEN_TAXES = "dailyTokenTaxes"
    DAILY_APP_FEES = "dailyAppFees"
    DAILY_APP_REVENUE = "dailyAppRevenue"


class VolumeDataType(StrEnum):
    """Values accepted by the dataType parameter of volume endpoints."""

    DAILY_VOLUME = "dailyVolume"
    TOTAL_VOLUME = "totalVolume"
    DAILY_NOTIONAL_VOLUME = "dailyNotionalVolume"
    DAILY_PREMIUM_VOLUME = "dailyPremiumVolume"
    DAILY_BRIDGE_VOLUME = "dailyBridgeVolume"
    OPEN_INTEREST_AT_END = "openInterestAtEnd"


# Short keys used by the API in compact chart payloads.
DATA_TYPE_SHORT_KEYS: dict[str, str] = {
    "dailyFees": "df",
    "dailyRevenue": "dr",
    "dailyHoldersRevenue": "dhr",
    "dailySupplySideRevenue": "dssr",
    "dailyBribesRevenue": "dbr",
    "dailyTokenTaxes": "dtt",
    "dailyAppRevenue": "dar",
    "dailyAppFees": "daf",
    "dailyNotionalVolume": "dnv",
    "dailyPremiumVolume": "dpv",
    "openInterestAtEnd": "doi",
    "dailyVolume": "dv",
    "dailyBridgeVolume": "dbv",
}
