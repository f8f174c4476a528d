"""
Position Math - 포지션 규모 계산

유동성 추가 화면에서 사용하는 계산 함수들:
- get_required_tokens: 범위가 어떤 토큰을 필요로 하는지 분류
- calculate_optimal_amounts: 한쪽 수량 입력 시 다른 쪽 수량 (float, 실시간 미리보기)
- calculate_optimal_amounts_wei: 같은 계산의 정수(wei) 버전 + 유동성

float 버전은 human-readable 가격/수량을 그대로 사용하고,
wei 버전은 Q96 sqrtPriceX96과 liquidity_math의 정수 연산을 사용합니다.
두 버전은 같은 get_required_tokens 분류를 공유하며, 유동성이 필요하면 wei 버전이 기준입니다.

공식 (pool order, P = token1/token0):
    amount0 입력: L = x * √P * √Pb / (√Pb - √P),  y = L * (√P - √Pa)
    amount1 입력: L = y / (√P - √Pa),            x = L * (√Pb - √P) / (√P * √Pb)
"""

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from ..config import settings
from ..constants import FULL_RANGE_TICKS
from .liquidity_math import (
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
)
from .tick_math import get_sqrt_ratio_at_tick, price_to_tick

logger = logging.getLogger(__name__)


class RequiredTokens(NamedTuple):
    """범위 분류 결과"""
    needs_token0: bool
    needs_token1: bool
    is_single_sided: bool


class PositionAmounts(NamedTuple):
    """포지션 토큰 수량 (human-readable)"""
    amount0: float
    amount1: float


class LiquidityAmounts(NamedTuple):
    """포지션 토큰 수량과 유동성 (최소 단위)"""
    amount0: int
    amount1: int
    liquidity: int


@dataclass
class RangePosition:
    """UI에서 입력된 포지션 범위

    가격은 UI order입니다 (화면 기준 토큰 대비 상대 토큰 가격).
    is_token0_base=False이면 UI 기준 토큰이 token1이므로 pool order의 역수입니다.
    """
    current_price: float
    price_lower: float
    price_upper: float
    token0_decimals: int
    token1_decimals: int
    tick_spacing: int
    is_token0_base: bool = True

    def has_valid_prices(self) -> bool:
        """세 가격이 모두 양수인지"""
        return self.current_price > 0 and self.price_lower > 0 and self.price_upper > 0

    def pool_prices(self) -> Tuple[float, float, float]:
        """(current, lower, upper)를 pool order(token1/token0)로 변환

        역수를 취하면 경계의 순서도 바뀝니다. 반환값의 lower <= upper를 보장합니다.
        """
        if self.is_token0_base:
            current, lower, upper = self.current_price, self.price_lower, self.price_upper
        else:
            current = 1 / self.current_price
            lower = 1 / self.price_upper
            upper = 1 / self.price_lower

        if lower > upper:
            lower, upper = upper, lower
        return current, lower, upper

    def tick_range(self) -> Tuple[int, int]:
        """범위 경계를 tick_spacing에 맞춘 (tick_lower, tick_upper)로 변환"""
        tick_a = price_to_tick(
            self.price_lower, self.token0_decimals, self.token1_decimals,
            self.tick_spacing, self.is_token0_base
        )
        tick_b = price_to_tick(
            self.price_upper, self.token0_decimals, self.token1_decimals,
            self.tick_spacing, self.is_token0_base
        )
        return min(tick_a, tick_b), max(tick_a, tick_b)


def get_required_tokens(current_price, price_lower, price_upper) -> RequiredTokens:
    """범위에 필요한 토큰 분류

    경계 순서와 무관합니다. float 가격과 정수 sqrtPriceX96 모두 사용할 수 있습니다.

    - current <= lower: token0만 필요 (가격 상승 대기)
    - current >= upper: token1만 필요 (가격 하락 대기)
    - 그 외: 두 토큰 모두 필요
    """
    lower, upper = (price_lower, price_upper) if price_lower < price_upper \
        else (price_upper, price_lower)

    if current_price <= lower:
        return RequiredTokens(needs_token0=True, needs_token1=False, is_single_sided=True)
    if current_price >= upper:
        return RequiredTokens(needs_token0=False, needs_token1=True, is_single_sided=True)
    return RequiredTokens(needs_token0=True, needs_token1=True, is_single_sided=False)


def calculate_amount1_from_amount0(
    amount0: float,
    sqrt_price: float,
    sqrt_price_lower: float,
    sqrt_price_upper: float
) -> float:
    """범위 내 포지션에서 amount0에 대응하는 amount1

    현재 가격이 범위 안(경계 제외)이 아니면 0.0을 반환합니다.
    """
    sqrt_pa, sqrt_pb = sorted((sqrt_price_lower, sqrt_price_upper))
    if amount0 <= 0 or not sqrt_pa < sqrt_price < sqrt_pb:
        return 0.0

    liquidity = amount0 * (sqrt_price * sqrt_pb) / (sqrt_pb - sqrt_price)
    return liquidity * (sqrt_price - sqrt_pa)


def calculate_amount0_from_amount1(
    amount1: float,
    sqrt_price: float,
    sqrt_price_lower: float,
    sqrt_price_upper: float
) -> float:
    """범위 내 포지션에서 amount1에 대응하는 amount0

    현재 가격이 범위 안(경계 제외)이 아니면 0.0을 반환합니다.
    """
    sqrt_pa, sqrt_pb = sorted((sqrt_price_lower, sqrt_price_upper))
    if amount1 <= 0 or not sqrt_pa < sqrt_price < sqrt_pb:
        return 0.0

    liquidity = amount1 / (sqrt_price - sqrt_pa)
    return liquidity * (sqrt_pb - sqrt_price) / (sqrt_price * sqrt_pb)


def calculate_other_amount(
    input_amount: float,
    input_is_token0: bool,
    position: RangePosition
) -> float:
    """한쪽 토큰 수량에 필요한 다른 쪽 토큰 수량 (human-readable)

    Args:
        input_amount: 사용자가 입력한 수량
        input_is_token0: 입력 토큰이 token0인지 (pool 기준)
        position: 포지션 범위

    Returns:
        다른 쪽 토큰 수량. 범위 밖(단일 토큰 범위)이면 0.0
    """
    if input_amount <= 0 or not position.has_valid_prices():
        return 0.0

    current, lower, upper = position.pool_prices()
    sqrt_p = math.sqrt(current)
    sqrt_pa = math.sqrt(lower)
    sqrt_pb = math.sqrt(upper)

    if input_is_token0:
        return calculate_amount1_from_amount0(input_amount, sqrt_p, sqrt_pa, sqrt_pb)
    return calculate_amount0_from_amount1(input_amount, sqrt_p, sqrt_pa, sqrt_pb)


def calculate_optimal_amounts(
    input_amount: float,
    input_is_token0: bool,
    position: RangePosition
) -> PositionAmounts:
    """한쪽 입력 수량으로 포지션의 두 토큰 수량 계산 (float 미리보기)

    입력 토큰이 범위에 필요하지 않은 토큰이면 (0, 0)을 반환합니다.
    오류가 아니라 "이 범위에서는 이 입력을 쓸 수 없음"을 의미합니다.

    Args:
        input_amount: 사용자가 입력한 수량 (human-readable)
        input_is_token0: 입력 토큰이 token0인지 (pool 기준)
        position: 포지션 범위

    Returns:
        PositionAmounts(amount0, amount1)
    """
    if input_amount <= 0 or not position.has_valid_prices():
        logger.debug(
            "calculate_optimal_amounts: 입력 %r 또는 가격이 유효하지 않음 -> (0, 0)",
            input_amount
        )
        return PositionAmounts(0.0, 0.0)

    current, lower, upper = position.pool_prices()
    required = get_required_tokens(current, lower, upper)

    if required.is_single_sided:
        if input_is_token0 and required.needs_token0:
            return PositionAmounts(input_amount, 0.0)
        if not input_is_token0 and required.needs_token1:
            return PositionAmounts(0.0, input_amount)
        return PositionAmounts(0.0, 0.0)

    other = calculate_other_amount(input_amount, input_is_token0, position)
    if input_is_token0:
        return PositionAmounts(input_amount, other)
    return PositionAmounts(other, input_amount)


def calculate_optimal_amounts_wei(
    input_amount: int,
    input_is_token0: bool,
    sqrt_price_x96: int,
    tick_lower: int,
    tick_upper: int
) -> LiquidityAmounts:
    """한쪽 입력 수량으로 포지션의 두 토큰 수량과 유동성 계산 (정수)

    Args:
        input_amount: 입력 수량 (최소 단위)
        input_is_token0: 입력 토큰이 token0인지
        sqrt_price_x96: 현재 풀 sqrtPriceX96
        tick_lower: 하한 틱 (순서가 바뀌면 교환)
        tick_upper: 상한 틱

    Returns:
        LiquidityAmounts(amount0, amount1, liquidity)

    Raises:
        TickOutOfRangeError: 틱이 유효 범위를 벗어난 경우
    """
    if tick_lower > tick_upper:
        tick_lower, tick_upper = tick_upper, tick_lower
    if input_amount <= 0 or tick_lower == tick_upper:
        return LiquidityAmounts(0, 0, 0)

    sqrt_lower = get_sqrt_ratio_at_tick(tick_lower)
    sqrt_upper = get_sqrt_ratio_at_tick(tick_upper)
    required = get_required_tokens(sqrt_price_x96, sqrt_lower, sqrt_upper)

    if required.is_single_sided:
        if input_is_token0 and required.needs_token0:
            liquidity = get_liquidity_for_amount0(sqrt_lower, sqrt_upper, input_amount)
            return LiquidityAmounts(input_amount, 0, liquidity)
        if not input_is_token0 and required.needs_token1:
            liquidity = get_liquidity_for_amount1(sqrt_lower, sqrt_upper, input_amount)
            return LiquidityAmounts(0, input_amount, liquidity)
        return LiquidityAmounts(0, 0, 0)

    if input_is_token0:
        liquidity = get_liquidity_for_amount0(sqrt_price_x96, sqrt_upper, input_amount)
        amount1 = get_amount1_for_liquidity(sqrt_lower, sqrt_price_x96, liquidity)
        return LiquidityAmounts(input_amount, amount1, liquidity)

    liquidity = get_liquidity_for_amount1(sqrt_lower, sqrt_price_x96, input_amount)
    amount0 = get_amount0_for_liquidity(sqrt_price_x96, sqrt_upper, liquidity)
    return LiquidityAmounts(amount0, input_amount, liquidity)


def is_position_in_range(current_tick: int, tick_lower: int, tick_upper: int) -> bool:
    """현재 틱이 [tick_lower, tick_upper) 안에 있는지"""
    return tick_lower <= current_tick < tick_upper


def is_full_range_position(tick_lower: int, tick_upper: int) -> bool:
    """전체 틱 범위의 FULL_RANGE_THRESHOLD(기본 90%) 이상을 덮는 포지션인지"""
    return (tick_upper - tick_lower) > FULL_RANGE_TICKS * settings.FULL_RANGE_THRESHOLD


def is_extreme_tick_range(tick_lower: int, tick_upper: int) -> bool:
    """경계 틱이 ±EXTREME_TICK 밖에 있는지 (가격 표시가 무의미한 범위)"""
    return tick_lower < -settings.EXTREME_TICK or tick_upper > settings.EXTREME_TICK
