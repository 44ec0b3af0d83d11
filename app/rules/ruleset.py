# app/rules/ruleset.py
import math
import re
from datetime import datetime
from decimal import MAX_EMAX, MIN_EMIN, Decimal, DecimalException, localcontext
from typing import Callable, List, Optional, Tuple

from app.schemas import Receipt

RuleResult = Tuple[int, Optional[str]]
Rule = Callable[[Receipt], RuleResult]

# -----------------------------
# Point values
# -----------------------------
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTER = Decimal("0.25")
DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_FACTOR = Decimal("0.2")
AFTERNOON_HOUR = 14

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}\Z")
TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}\Z")

# -----------------------------
# Field parsers: None means "rule does not apply"
# -----------------------------
def parse_amount(value: str | None) -> Decimal | None:
    # ASCII only, no surrounding whitespace, no digit separators
    if not value or not value.isascii() or "_" in value or value != value.strip():
        return None
    try:
        amount = Decimal(value)
    except DecimalException:
        return None
    if not amount.is_finite():
        return None
    return amount

def parse_date(value: str | None):
    if not value or not DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None

def parse_time(value: str | None):
    if not value or not TIME_RE.match(value):
        return None
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        return None

def is_multiple_of(amount: Decimal, step: Decimal) -> bool:
    # exact arithmetic regardless of the magnitude of amount
    with localcontext() as ctx:
        ctx.prec = len(amount.as_tuple().digits) + len(step.as_tuple().digits) + 2
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        quotient = amount / step
        return quotient == quotient.to_integral_value()

def description_length_bytes(description: str) -> int:
    return len(description.strip().encode("utf-8"))

def is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()

# -----------------------------
# Rules
# -----------------------------
def retailer_alphanumeric(receipt: Receipt) -> RuleResult:
    """1 point for every ASCII letter or digit in the retailer name."""
    points = sum(1 for ch in receipt.retailer if is_ascii_alnum(ch))
    return points, "retailer_alphanumeric"

def round_dollar_total(receipt: Receipt) -> RuleResult:
    total = parse_amount(receipt.total)
    if total is not None and total == total.to_integral_value():
        return ROUND_DOLLAR_POINTS, "round_dollar_total"
    return 0, None

def quarter_multiple_total(receipt: Receipt) -> RuleResult:
    total = parse_amount(receipt.total)
    if total is None:
        return 0, None
    try:
        multiple = is_multiple_of(total, QUARTER)
    except DecimalException:
        multiple = False
    if multiple:
        return QUARTER_MULTIPLE_POINTS, "quarter_multiple_total"
    return 0, None

def item_pairs(receipt: Receipt) -> RuleResult:
    """5 points for every complete pair of items; a trailing odd item earns nothing."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS, "item_pairs"

def description_length(receipt: Receipt) -> RuleResult:
    """
    For each item whose trimmed description length (UTF-8 bytes) is a multiple of 3,
    ceil(price * 0.2) points. Unparsable prices earn nothing for that item.
    """
    points = 0
    for item in receipt.items:
        if description_length_bytes(item.short_description) % DESCRIPTION_LENGTH_MULTIPLE != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            continue
        try:
            award = math.ceil(price * DESCRIPTION_PRICE_FACTOR)
        except DecimalException:
            continue
        points += max(0, award)
    return points, "description_length"

def odd_purchase_day(receipt: Receipt) -> RuleResult:
    day = parse_date(receipt.purchase_date)
    if day is not None and day.day % 2 == 1:
        return ODD_DAY_POINTS, "odd_purchase_day"
    return 0, None

def afternoon_purchase(receipt: Receipt) -> RuleResult:
    # Literal hour check: 14:00-14:59 qualifies, 15:xx does not.
    at = parse_time(receipt.purchase_time)
    if at is not None and at.hour == AFTERNOON_HOUR:
        return AFTERNOON_POINTS, "afternoon_purchase"
    return 0, None

DEFAULT_RULES: List[Rule] = [
    retailer_alphanumeric,
    round_dollar_total,
    quarter_multiple_total,
    item_pairs,
    description_length,
    odd_purchase_day,
    afternoon_purchase,
]
