"""Shipping option helpers.

A line's ``shipping_option`` is either ``"Standard"`` or an ISO-8601 date
(or datetime) chosen at checkout.  A line becomes receivable on the day
before its shipping date.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from modules.orders.constants import DEFAULT_SHIPPING_OPTION

RECEIVABLE_LEAD = timedelta(days=1)


def normalize_shipping_option(value: Any) -> str:
    """Reduce a checkout shipping selection to the stored string.

    Accepts a plain string or a mapping carrying ``shipping_date`` (or the
    camel-cased ``shippingDate``).  Anything empty falls back to Standard.
    """
    if isinstance(value, dict):
        value = value.get("shipping_date") or value.get("shippingDate")
    if value is None:
        return DEFAULT_SHIPPING_OPTION
    value = str(value).strip()
    return value or DEFAULT_SHIPPING_OPTION


def resolve_shipping_date(option: Optional[str]) -> Optional[date]:
    """Calendar date of a dated shipping option; ``None`` otherwise."""
    if not option or option == DEFAULT_SHIPPING_OPTION:
        return None
    try:
        parsed = parse_date(option)
        if parsed is not None:
            return parsed
        parsed_dt = parse_datetime(option)
    except ValueError:
        return None
    if parsed_dt is None:
        return None
    return calendar_date(parsed_dt)


def calendar_date(moment: Union[date, datetime]) -> date:
    """Local calendar date of ``moment``; naive datetimes are taken as-is."""
    if isinstance(moment, datetime):
        if timezone.is_aware(moment):
            moment = timezone.localtime(moment)
        return moment.date()
    return moment


def is_receivable(option: Optional[str], now: Union[date, datetime]) -> bool:
    """True once ``now`` reaches the day before the shipping date."""
    shipping_date = resolve_shipping_date(option)
    if shipping_date is None:
        return False
    return calendar_date(now) >= shipping_date - RECEIVABLE_LEAD


def shipping_label(option: Optional[str]) -> str:
    """Human label used on receipts."""
    shipping_date = resolve_shipping_date(option)
    if shipping_date is None:
        return option or DEFAULT_SHIPPING_OPTION
    return shipping_date.isoformat()
