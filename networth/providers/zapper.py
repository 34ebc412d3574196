"""
Zapper provider for aggregated portfolio balances.

Issues a single GraphQL request covering wallet token balances and app
positions for a group of addresses across every supported network.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .base import PortfolioProvider
from ..config import settings
from ..types import Portfolio

logger = logging.getLogger(__name__)


class ZapperError(Exception):
    """Base Zapper provider error."""
    pass


class ZapperApiError(ZapperError):
    """API returned a response without a portfolio."""
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


SUPPORTED_NETWORKS: List[str] = [
    "APECHAIN_MAINNET",
    "ARBITRUM_MAINNET",
    "AVALANCHE_MAINNET",
    "BASE_MAINNET",
    "BINANCE_SMART_CHAIN_MAINNET",
    "BITCOIN_MAINNET",
    "BLAST_MAINNET",
    "CELO_MAINNET",
    "DEGEN_MAINNET",
    "ETHEREUM_MAINNET",
    "FANTOM_OPERA_MAINNET",
    "GNOSIS_MAINNET",
    "LINEA_MAINNET",
    "MANTLE_MAINNET",
    "METIS_MAINNET",
    "MODE_MAINNET",
    "MOONBEAM_MAINNET",
    "MORPH_MAINNET",
    "OPBNB_MAINNET",
    "OPTIMISM_MAINNET",
    "POLYGON_MAINNET",
    "SCROLL_MAINNET",
    "SHAPE_MAINNET",
    "SOLANA_MAINNET",
    "WORLDCHAIN_MAINNET",
    "ZKSYNC_MAINNET",
    "ZORA_MAINNET",
]

QUERY_ID = "providerPorfolioQuery"

PORTFOLIO_QUERY = """query providerPorfolioQuery(
  $addresses: [Address!]!
  $networks: [Network!]!
  $withOverrides: Boolean
) {
  portfolio(addresses: $addresses, networks: $networks, withOverrides: $withOverrides) {
    proxies {
      address
      owner {
        address
        id
      }
      app {
        id
        displayName
        imgUrl
      }
    }
    tokenBalances {
      key
      address
      network
      updatedAt
      token {
        balance
        balanceUSD
        balanceRaw
        baseToken {
          name
          label
          symbol
          address
          decimals
          price
          verified
          imgUrl
          id
        }
      }
    }
    appBalances {
      key
      address
      network
      updatedAt
      balanceUSD
      appName
      appId
      products {
        assets {
          __typename
          ... on AppTokenPositionBalance {
            __typename
            key
            address
            network
            appId
            groupId
            groupLabel
            balance
            balanceUSD
            price
            symbol
            decimals
            supply
            pricePerShare
            tokens {
              __typename
              address
              network
              balance
              balanceUSD
              price
              symbol
            }
          }
          ... on ContractPositionBalance {
            __typename
            key
            address
            network
            appId
            groupId
            groupLabel
            balanceUSD
            tokens {
              metaType
              token {
                __typename
                ... on NonFungiblePositionBalance {
                  __typename
                  address
                  balance
                  balanceUSD
                  network
                  symbol
                }
                ... on BaseTokenPositionBalance {
                  __typename
                  address
                  balance
                  balanceUSD
                  network
                  symbol
                }
                ... on AppTokenPositionBalance {
                  __typename
                  address
                  balance
                  balanceUSD
                  network
                  symbol
                }
              }
            }
          }
        }
      }
    }
    nftBalances {
      balanceUSD
      network
    }
  }
}
"""


def build_portfolio_query(addresses: List[str]) -> Dict[str, Any]:
    """Build the GraphQL request document for ``addresses``."""

    return {
        "id": QUERY_ID,
        "query": PORTFOLIO_QUERY,
        "variables": {
            "addresses": list(addresses),
            "networks": list(SUPPORTED_NETWORKS),
            "withOverrides": False,
        },
    }


class ZapperProvider(PortfolioProvider):
    """Zapper GraphQL provider for multi-network portfolios"""

    name = "zapper"

    def __init__(self):
        self.base_url = settings.zapper_graphql_url
        self.timeout_s = settings.request_timeout_seconds

    async def ready(self) -> bool:
        return settings.enable_zapper

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "accept": "application/json",
            "cache-control": "no-cache",
            "content-type": "application/json",
            "referer": settings.zapper_referrer,
        }
        if settings.has_zapper_cookie:
            headers["cookie"] = settings.zapper_cookie
        if settings.has_zapper_api_key:
            headers["x-zapper-api-key"] = settings.zapper_api_key
        return headers

    async def get_portfolio(self, addresses: List[str]) -> Portfolio:
        """Fetch token and app balances for ``addresses`` in one request."""
        if not addresses:
            raise ValueError("At least one address is required")

        logger.info("Fetching Zapper portfolio for %d address(es)", len(addresses))

        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            response = await client.post(
                self.base_url,
                json=build_portfolio_query(addresses),
                headers=self._build_headers(),
            )
            response.raise_for_status()
            data = response.json()

        portfolio = (data.get("data") or {}).get("portfolio") if isinstance(data, dict) else None
        if portfolio is None:
            errors = data.get("errors") if isinstance(data, dict) else None
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in (errors or [])
            )
            raise ZapperApiError(
                f"Zapper response did not include a portfolio{': ' + messages if messages else ''}",
                status_code=response.status_code,
                errors=errors,
            )

        result = Portfolio.model_validate(portfolio)
        logger.debug(
            "Zapper portfolio received: %d token balance(s), %d app balance(s)",
            len(result.token_balances),
            len(result.app_balances),
        )
        return result
