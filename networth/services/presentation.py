"""Display formatting, field selection and output sinks for net worth results."""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..types import NetWorth

logger = logging.getLogger(__name__)

CURRENCY_KEY = "value"
_TWO_PLACES = Decimal("0.01")
_WIDE_CONTEXT = Context(prec=64)


def _non_finite(amount: float) -> Optional[str]:
    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "∞" if amount > 0 else "-∞"
    return None


def _rounded(amount: float) -> Decimal:
    rounded = Decimal(str(amount)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP, context=_WIDE_CONTEXT)
    # Avoid rendering "-0"
    return rounded if rounded != 0 else Decimal("0.00")


def format_usd(amount: float) -> str:
    """Render ``amount`` as US dollars, e.g. ``$1,234.50`` or ``-$5.00``."""

    special = _non_finite(amount)
    if special is not None:
        sign, symbol = ("-", special[1:]) if special.startswith("-") else ("", special)
        return f"{sign}${symbol}"
    rounded = _rounded(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_decimal(amount: float) -> str:
    """Render ``amount`` with grouping and at most two fraction digits."""

    special = _non_finite(amount)
    if special is not None:
        return special
    text = f"{_rounded(amount):,.2f}"
    return text.rstrip("0").rstrip(".")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_node(value: Any, key: Optional[str]) -> Any:
    if isinstance(value, dict):
        return {child_key: _format_node(child, child_key) for child_key, child in value.items()}
    if isinstance(value, list):
        return [_format_node(item, None) for item in value]
    if _is_number(value):
        return format_usd(value) if key == CURRENCY_KEY else format_decimal(value)
    return value


def format_net_worth(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert every numeric leaf of ``data`` to a display string.

    Leaves stored under a ``value`` key become USD amounts; all other numbers
    become plain decimals. The result is no longer summable.
    """

    return _format_node(data, None)


def select_fields(data: Dict[str, Any], only: Sequence[str]) -> Any:
    """Pick top-level fields from ``data``.

    No names returns ``data`` itself, one name returns that field's bare
    value, several names return a new dict in the order given.
    """

    for name in only:
        if name not in data:
            logger.warning("Unknown net worth field requested: %s", name)

    if not only:
        return data
    if len(only) == 1:
        return data.get(only[0])
    return {name: data[name] for name in only if name in data}


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(child) for key, child in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def serialize(result: Any) -> str:
    """Pretty-print ``result`` as JSON; NaN and infinities become ``null``."""

    return json.dumps(_json_safe(result), indent=2, ensure_ascii=False)


def snapshot_filename(now: Optional[datetime] = None) -> str:
    """Snapshot file name for ``now`` (local time), e.g. ``2024-03-05T9:7.json``."""

    now = now or datetime.now()
    return f"{now:%Y-%m-%d}T{now.hour}:{now.minute}.json"


def present(net_worth: NetWorth, format_values: bool = False, only: Optional[List[str]] = None) -> Any:
    """Apply optional formatting, then field selection."""

    data: Dict[str, Any] = net_worth.model_dump()
    if format_values:
        data = format_net_worth(data)
    return select_fields(data, only or [])


def emit(result: Any, data_folder: Optional[str] = None, now: Optional[datetime] = None) -> Optional[Path]:
    """Write ``result`` to a snapshot file in ``data_folder``, or print it.

    Returns the snapshot path when a file was written.
    """

    document = serialize(result)

    if not data_folder:
        print(document)
        return None

    path = Path(data_folder) / snapshot_filename(now)
    path.write_text(document, encoding="utf-8")
    logger.info("Wrote net worth snapshot to %s", path)
    return path


__all__ = [
    "emit",
    "format_decimal",
    "format_net_worth",
    "format_usd",
    "present",
    "select_fields",
    "serialize",
    "snapshot_filename",
]
