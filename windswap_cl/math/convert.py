"""
수량 변환 함수

human-readable 수량 ↔ 최소 단위(wei) 정수 변환과 표시용 포맷.
"""

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext
from typing import Union

logger = logging.getLogger(__name__)


def parse_to_wei(amount: Union[str, int, float, Decimal], decimals: int) -> int:
    """human-readable 수량 → 최소 단위 정수

    float 오차를 피하기 위해 Decimal로 계산하고, decimals를 넘는 자릿수는 버립니다.
    빈 값, 숫자가 아닌 값, 무한대, 음수는 0을 반환합니다.

    Example:
        >>> parse_to_wei("1.5", 18)
        1500000000000000000
        >>> parse_to_wei(0.000001, 6)
        1
    """
    if amount is None or amount == "":
        return 0

    try:
        value = Decimal(amount.strip()) if isinstance(amount, str) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        logger.debug("parse_to_wei: 숫자가 아닌 입력 %r -> 0", amount)
        return 0

    if not value.is_finite() or value <= 0:
        return 0

    # 정밀도 >= 결과 정수 자릿수 (기본 context는 28자리)
    _, digits, exponent = value.as_tuple()
    with localcontext() as ctx:
        ctx.prec = max(50, len(digits) + max(exponent, 0) + decimals + 1)
        scaled = (value * (Decimal(10) ** decimals)).quantize(Decimal(1), rounding=ROUND_DOWN)
    return int(scaled)


def format_from_wei(wei: int, decimals: int, display_decimals: int = 6) -> str:
    """최소 단위 정수 → 표시용 문자열 (뒤쪽 0 제거)

    Example:
        >>> format_from_wei(1500000000000000000, 18)
        '1.5'
    """
    if wei == 0:
        return "0"

    sign = "-" if wei < 0 else ""
    integer_part, fractional_part = divmod(abs(wei), 10 ** decimals)

    fractional_str = str(fractional_part).zfill(decimals)[:display_decimals].rstrip("0")
    if not fractional_str:
        return f"{sign}{integer_part}"
    return f"{sign}{integer_part}.{fractional_str}"


def format_amount(value: float, display_decimals: int = 6) -> str:
    """float 수량 → 표시용 문자열 (뒤쪽 0 제거, 유한하지 않으면 '0')"""
    if not math.isfinite(value):
        return "0"

    fixed = f"{value:.{display_decimals}f}"
    if "." in fixed:
        fixed = fixed.rstrip("0").rstrip(".")
    if fixed in ("", "-0"):
        return "0"
    return fixed


def to_human(amount: int, decimals: int) -> float:
    """최소 단위 정수 → human-readable float"""
    return amount / (10 ** decimals)
