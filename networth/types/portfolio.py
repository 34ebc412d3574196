"""
Portfolio Payload Models

Permissive models for the ``portfolio`` block returned by Zapper's GraphQL
API. Every remote field is optional; unknown fields are ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Annotated, Any, Callable, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def to_number(value: Any) -> float:
    """Coerce a remote balance to ``float``.

    ``None`` and blank strings count as zero. Strings that do not parse yield
    ``nan`` rather than raising, so a malformed balance poisons whatever sum
    it is added to.
    """

    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def _none_as(factory: Callable[[], Any]) -> Callable[[Any], Any]:
    return lambda value: factory() if value is None else value


UsdAmount = Annotated[float, BeforeValidator(_none_as(float))]
Text = Annotated[str, BeforeValidator(_none_as(str))]
RawBalance = Optional[Union[float, str]]
# Descriptive fields are carried through unvalidated
Passthrough = Optional[Any]


class RemoteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BaseToken(RemoteModel):
    """Identity and market data for a fungible token."""

    id: Passthrough = None
    name: Passthrough = None
    label: Passthrough = None
    symbol: Text = Field(default="", description="Token symbol, used as the aggregation key")
    address: Passthrough = None
    decimals: Passthrough = None
    price: Optional[float] = Field(default=None, description="USD per unit")
    verified: Passthrough = None
    img_url: Passthrough = Field(default=None, alias="imgUrl")


class TokenHolding(RemoteModel):
    balance: UsdAmount = Field(default=0.0, description="Quantity held")
    balance_usd: UsdAmount = Field(default=0.0, alias="balanceUSD")
    balance_raw: Passthrough = Field(default=None, alias="balanceRaw")
    base_token: Annotated[BaseToken, BeforeValidator(_none_as(dict))] = Field(
        default_factory=BaseToken, alias="baseToken"
    )


class TokenBalance(RemoteModel):
    """A wallet-held balance of one token on one network."""

    key: Passthrough = None
    address: Passthrough = None
    network: Text = ""
    updated_at: Passthrough = Field(default=None, alias="updatedAt")
    token: Annotated[TokenHolding, BeforeValidator(_none_as(dict))] = Field(default_factory=TokenHolding)


@dataclass(frozen=True)
class EffectiveToken:
    """Normalized view of an asset token after resolving nested positions."""
    symbol: str
    price: Optional[float]
    balance: float


class PositionToken(RemoteModel):
    typename: Passthrough = Field(default=None, alias="__typename")
    meta_type: Passthrough = Field(default=None, alias="metaType")
    address: Passthrough = None
    network: Passthrough = None
    symbol: Text = ""
    price: Optional[float] = None
    balance: RawBalance = None
    balance_usd: UsdAmount = Field(default=0.0, alias="balanceUSD")


class AssetToken(PositionToken):
    """A constituent of an asset, optionally wrapping a nested ``token``."""

    token: Optional[PositionToken] = None

    def resolve(self) -> EffectiveToken:
        source = self.token if self.token is not None else self
        return EffectiveToken(
            symbol=source.symbol,
            price=source.price,
            balance=to_number(source.balance),
        )


class Asset(RemoteModel):
    """A position inside an application product."""

    typename: Passthrough = Field(default=None, alias="__typename")
    key: Passthrough = None
    address: Passthrough = None
    network: Passthrough = None
    app_id: Passthrough = Field(default=None, alias="appId")
    group_id: Passthrough = Field(default=None, alias="groupId")
    group_label: Passthrough = Field(default=None, alias="groupLabel")
    balance: Passthrough = None
    balance_usd: UsdAmount = Field(default=0.0, alias="balanceUSD")
    price: Passthrough = None
    symbol: Passthrough = None
    decimals: Passthrough = None
    supply: Passthrough = None
    price_per_share: Passthrough = Field(default=None, alias="pricePerShare")
    tokens: Annotated[List[AssetToken], BeforeValidator(_none_as(list))] = Field(default_factory=list)

    def effective_tokens(self) -> List[EffectiveToken]:
        return [token.resolve() for token in self.tokens]


class Product(RemoteModel):
    assets: Annotated[List[Asset], BeforeValidator(_none_as(list))] = Field(default_factory=list)


class AppBalance(RemoteModel):
    """An application-level grouping of positions."""

    key: Passthrough = None
    address: Passthrough = None
    network: Text = ""
    updated_at: Passthrough = Field(default=None, alias="updatedAt")
    balance_usd: UsdAmount = Field(default=0.0, alias="balanceUSD")
    app_name: Text = Field(default="", alias="appName")
    app_id: Passthrough = Field(default=None, alias="appId")
    products: Annotated[List[Product], BeforeValidator(_none_as(list))] = Field(default_factory=list)


class Portfolio(RemoteModel):
    token_balances: Annotated[List[TokenBalance], BeforeValidator(_none_as(list))] = Field(
        default_factory=list, alias="tokenBalances"
    )
    app_balances: Annotated[List[AppBalance], BeforeValidator(_none_as(list))] = Field(
        default_factory=list, alias="appBalances"
    )
