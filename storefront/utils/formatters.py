# storefront/utils/formatters.py
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
import pytz
from ..config import Config

def format_price(amount) -> str:
    """Rupee amount with thousands separators"""
    return f"₹{Decimal(str(amount)):,.0f}"

def round_half_up(amount: Decimal) -> int:
    """Round to a whole unit, halves away from zero"""
    return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))

def shop_today() -> date:
    """Today's date in the shop time zone"""
    return datetime.now(pytz.timezone(Config.TIMEZONE)).date()
