from .networth import NetWorth, ProductSummary
from .portfolio import (
    AppBalance,
    Asset,
    AssetToken,
    BaseToken,
    EffectiveToken,
    Portfolio,
    PositionToken,
    Product,
    TokenBalance,
    TokenHolding,
    to_number,
)

__all__ = [
    "NetWorth",
    "ProductSummary",
    "AppBalance",
    "Asset",
    "AssetToken",
    "BaseToken",
    "EffectiveToken",
    "Portfolio",
    "PositionToken",
    "Product",
    "TokenBalance",
    "TokenHolding",
    "to_number",
]
