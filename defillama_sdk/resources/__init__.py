"""API resources, one per DefiLlama data domain."""

from defillama_sdk.resources.account import AccountResource
from defillama_sdk.resources.bridges import BridgesResource
from defillama_sdk.resources.dat import DatResource
from defillama_sdk.resources.ecosystem import EcosystemResource
from defillama_sdk.resources.emissions import EmissionsResource
from defillama_sdk.resources.etfs import EtfsResource, FdvPeriod
from defillama_sdk.resources.fees import FeesResource
from defillama_sdk.resources.prices import PricesResource
from defillama_sdk.resources.stablecoins import StablecoinsResource
from defillama_sdk.resources.tvl import TvlResource
from defillama_sdk.resources.volumes import VolumesResource
from defillama_sdk.resources.yields import YieldsResource

__all__ = [
    "AccountResource",
    "BridgesResource",
    "DatResource",
    "EcosystemResource",
    "EmissionsResource",
    "EtfsResource",
    "FdvPeriod",
    "FeesResource",
    "PricesResource",
    "StablecoinsResource",
    "TvlResource",
    "VolumesResource",
    "YieldsResource",
]
