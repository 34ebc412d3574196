from .base import PortfolioProvider, Provider
from .zapper import SUPPORTED_NETWORKS, ZapperApiError, ZapperError, ZapperProvider

__all__ = [
    "Provider",
    "PortfolioProvider",
    "SUPPORTED_NETWORKS",
    "ZapperProvider",
    "ZapperError",
    "ZapperApiError",
]
