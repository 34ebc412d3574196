"""
Net Worth Aggregation.

Folds a Zapper portfolio into a flat net worth summary:
- Total USD value of balances above a threshold
- Networks touched, in first-seen order
- First-seen price and summed quantity per token symbol
- Per-app USD value and token quantities

Wallet token balances are folded first, then app balances. Only the
top-level ``balanceUSD`` of each admitted entry contributes to ``value``;
asset-level USD amounts never do.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, List, Optional

from ..types import AppBalance, EffectiveToken, NetWorth, Portfolio, ProductSummary, TokenBalance

logger = logging.getLogger(__name__)


@dataclass
class ProductState:
    value: float = 0.0
    tokens: Dict[str, float] = field(default_factory=dict)


@dataclass
class NetWorthState:
    """Running totals while folding a portfolio."""
    value: float = 0.0
    networks: List[str] = field(default_factory=list)
    prices: Dict[str, Optional[float]] = field(default_factory=dict)
    balances: Dict[str, float] = field(default_factory=dict)
    products: Dict[str, ProductState] = field(default_factory=dict)
    admitted: int = 0
    skipped: int = 0

    def to_net_worth(self) -> NetWorth:
        return NetWorth(
            value=self.value,
            networks=list(self.networks),
            prices=dict(self.prices),
            balances=dict(self.balances),
            products={
                name: ProductSummary(value=product.value, tokens=dict(product.tokens))
                for name, product in self.products.items()
            },
        )


def _is_truthy(quantity: float) -> bool:
    # NaN is falsy here, like zero
    return bool(quantity) and not math.isnan(quantity)


def _record_network(state: NetWorthState, network: str) -> None:
    if network not in state.networks:
        state.networks.append(network)


def _record_token(state: NetWorthState, symbol: str, price: Optional[float], balance: float) -> None:
    if not symbol:
        return

    if symbol not in state.prices:
        state.prices[symbol] = price

    if _is_truthy(balance):
        state.balances[symbol] = state.balances.get(symbol, 0.0) + balance


def apply_token_balance(state: NetWorthState, entry: TokenBalance, balance_threshold: float) -> NetWorthState:
    """Fold one wallet token balance into ``state``."""

    token = entry.token
    if token.balance_usd <= balance_threshold:
        state.skipped += 1
        return state

    _record_network(state, entry.network)
    _record_token(state, token.base_token.symbol, token.base_token.price, token.balance)
    state.value += token.balance_usd
    state.admitted += 1
    return state


def _record_app_token(state: NetWorthState, product: ProductState, token: EffectiveToken) -> None:
    _record_token(state, token.symbol, token.price, token.balance)
    if not token.symbol:
        return
    # No truthiness guard here, unlike the global balances
    product.tokens[token.symbol] = product.tokens.get(token.symbol, 0.0) + token.balance


def apply_app_balance(state: NetWorthState, entry: AppBalance, balance_threshold: float) -> NetWorthState:
    """Fold one app balance (all of its products and assets) into ``state``."""

    if entry.balance_usd <= balance_threshold:
        state.skipped += 1
        return state

    # Apps are grouped by display name, so same-named apps merge
    product = state.products.setdefault(entry.app_name, ProductState())

    for app_product in entry.products:
        for asset in app_product.assets:
            for token in asset.effective_tokens():
                _record_app_token(state, product, token)

    _record_network(state, entry.network)
    product.value += entry.balance_usd
    state.value += entry.balance_usd
    state.admitted += 1
    return state


def aggregate(portfolio: Portfolio, balance_threshold: float = 0.0) -> NetWorth:
    """Aggregate ``portfolio`` into a :class:`NetWorth`.

    Entries whose USD balance is at or below ``balance_threshold`` are
    ignored entirely.
    """

    state = reduce(
        lambda acc, entry: apply_token_balance(acc, entry, balance_threshold),
        portfolio.token_balances,
        NetWorthState(),
    )
    state = reduce(
        lambda acc, entry: apply_app_balance(acc, entry, balance_threshold),
        portfolio.app_balances,
        state,
    )

    logger.debug(
        "Aggregated net worth: %d entries admitted, %d skipped at threshold %s",
        state.admitted,
        state.skipped,
        balance_threshold,
    )
    return state.to_net_worth()


__all__ = [
    "NetWorthState",
    "ProductState",
    "aggregate",
    "apply_app_balance",
    "apply_token_balance",
]
