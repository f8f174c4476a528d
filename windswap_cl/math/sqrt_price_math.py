"""
Sqrt Price Math - 가격 ↔ sqrtPriceX96 변환

풀의 가격은 sqrtPriceX96 형식으로 저장됩니다.
sqrtPriceX96 = sqrt(price) * 2^96  (price는 pool order, 최소 단위 기준)

틱에 정렬되지 않은 임의의 가격(예: 사용자가 입력한 범위 경계)을
변환할 때 사용하는 float 기반 함수들입니다.
"""

import logging
import math

from ..constants import Q96, Q192

logger = logging.getLogger(__name__)


def price_to_sqrt_price_x96(
    price: float,
    token0_decimals: int = 18,
    token1_decimals: int = 18,
    is_token0_base: bool = True
) -> int:
    """Human-readable 가격을 sqrtPriceX96으로 변환

    sqrtPriceX96 = sqrt(pool_price * 10^(token1_decimals - token0_decimals)) * 2^96

    Args:
        price: UI 가격 (is_token0_base=True면 token1/token0)
        token0_decimals: token0 소수점 자릿수
        token1_decimals: token1 소수점 자릿수
        is_token0_base: UI 기준 토큰이 token0인지 여부

    Returns:
        sqrtPriceX96 값 (가격이 0 이하이면 0)
    """
    if math.isnan(price) or price <= 0:
        logger.debug("price_to_sqrt_price_x96: 양수가 아닌 가격 %r -> 0", price)
        return 0

    pool_price = price if is_token0_base else 1 / price
    raw_price = pool_price * (10 ** (token1_decimals - token0_decimals))
    if math.isinf(raw_price):
        logger.debug("price_to_sqrt_price_x96: 가격 오버플로우 %r -> 0", price)
        return 0

    return int(math.sqrt(raw_price) * Q96)


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    token0_decimals: int = 18,
    token1_decimals: int = 18,
    is_token0_base: bool = True
) -> float:
    """sqrtPriceX96을 human-readable 가격으로 변환

    가격 = (sqrtPriceX96 / 2^96)^2 × 10^(token0_decimals - token1_decimals)

    Args:
        sqrt_price_x96: sqrtPriceX96 값
        token0_decimals: token0 소수점 자릿수
        token1_decimals: token1 소수점 자릿수
        is_token0_base: False면 token0/token1 방향으로 역수를 반환

    Returns:
        UI 가격 (sqrtPriceX96이 0 이하이면 0.0)
    """
    if sqrt_price_x96 <= 0:
        return 0.0

    # 정수 제곱 후 한 번만 나눔 (int / int는 올바르게 반올림된 float)
    price = sqrt_price_x96 ** 2 / Q192 * (10 ** (token0_decimals - token1_decimals))

    if is_token0_base:
        return price
    if price == 0:
        return 0.0
    return 1 / price
