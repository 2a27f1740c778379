"""
core/region - 내장 AWS 리전 목록과 리전 입력 검증
"""

from .data import ALL_REGIONS, REGION_NAMES
from .validate import describe_region, resolve_region, validate_region

__all__ = ["ALL_REGIONS", "REGION_NAMES", "describe_region", "resolve_region", "validate_region"]
