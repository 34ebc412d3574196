"""Service layer helpers"""

from .networth import NetWorthState, aggregate, apply_app_balance, apply_token_balance
from .presentation import emit, format_net_worth, present, select_fields, serialize, snapshot_filename

__all__ = [
    "NetWorthState",
    "aggregate",
    "apply_app_balance",
    "apply_token_balance",
    "emit",
    "format_net_worth",
    "present",
    "select_fields",
    "serialize",
    "snapshot_filename",
]
