"""Domain enumerations."""

from .policy import MaskingDetector, RbacPolicyType
from .region import DEFAULT_REGION, REGION_BASE_URLS, Region
from .source import SchemaType, SourceType

__all__ = [
    "DEFAULT_REGION",
    "REGION_BASE_URLS",
    "MaskingDetector",
    "RbacPolicyType",
    "Region",
    "SchemaType",
    "SourceType",
]
