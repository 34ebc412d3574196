from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ProductSummary(BaseModel):
    value: float = Field(default=0.0, description="Accumulated USD value of the app")
    tokens: Dict[str, float] = Field(default_factory=dict, description="Token quantities held through the app")


class NetWorth(BaseModel):
    value: float = Field(default=0.0, description="Total USD value of admitted balances")
    networks: List[str] = Field(default_factory=list, description="Networks seen, first-seen order")
    prices: Dict[str, Optional[float]] = Field(default_factory=dict, description="First price seen per symbol")
    balances: Dict[str, float] = Field(default_factory=dict, description="Summed quantity per symbol")
    products: Dict[str, ProductSummary] = Field(default_factory=dict, description="Per-app totals keyed by app name")
