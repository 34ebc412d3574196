from abc import ABC, abstractmethod
from typing import List

from ..types import Portfolio


class Provider(ABC):
    """Base provider interface"""
    
    name: str
    timeout_s: float | None = None
    
    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass


class PortfolioProvider(Provider):
    """Provider for aggregated balances (wallet tokens and app positions)"""
    
    @abstractmethod
    async def get_portfolio(self, addresses: List[str]) -> Portfolio:
        """Get the combined portfolio for a group of addresses"""
        pass
