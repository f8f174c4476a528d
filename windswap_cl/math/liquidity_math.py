"""
Liquidity Math - 유동성 계산

집중화된 유동성(Concentrated Liquidity) 계산.
특정 가격 범위에서의 토큰 수량과 유동성 간의 변환.

References:
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol
- 백서 Section 6.2.1: Concentrated Liquidity

핵심 공식:
    L = Δy / (√P_upper - √P_lower)  # token1 기준
    L = Δx / (1/√P_lower - 1/√P_upper)  # token0 기준

모든 나눗셈은 내림(truncation)입니다. 온체인 최소 수량 계산에 필요한
올림 버전은 제공하지 않습니다 (표시/추정 전용).
"""

from typing import Tuple

from ..constants import Q96


def _sorted(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> Tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        return sqrt_ratio_b_x96, sqrt_ratio_a_x96
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def get_liquidity_for_amount0(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int
) -> int:
    """amount0에서 유동성 계산

    공식: L = Δx * √P_a * √P_b / (Q96 * (√P_b - √P_a))

    Args:
        sqrt_ratio_a_x96: 경계 sqrtPriceX96
        sqrt_ratio_b_x96: 다른 경계 sqrtPriceX96 (순서 무관)
        amount0: token0 수량 (최소 단위)

    Returns:
        유동성 (경계가 같거나 수량이 0 이하이면 0)
    """
    sqrt_a, sqrt_b = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if sqrt_b == sqrt_a or amount0 <= 0:
        return 0

    return amount0 * sqrt_a * sqrt_b // (Q96 * (sqrt_b - sqrt_a))


def get_liquidity_for_amount1(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount1: int
) -> int:
    """amount1에서 유동성 계산

    공식: L = Δy * Q96 / (√P_b - √P_a)

    Args:
        sqrt_ratio_a_x96: 경계 sqrtPriceX96
        sqrt_ratio_b_x96: 다른 경계 sqrtPriceX96 (순서 무관)
        amount1: token1 수량 (최소 단위)

    Returns:
        유동성 (경계가 같거나 수량이 0 이하이면 0)
    """
    sqrt_a, sqrt_b = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if sqrt_b == sqrt_a or amount1 <= 0:
        return 0

    return amount1 * Q96 // (sqrt_b - sqrt_a)


def get_liquidity_for_amounts(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int
) -> int:
    """토큰 수량에서 유동성 계산

    현재 가격과 범위, 두 토큰 수량이 주어졌을 때
    민트 가능한 최대 유동성을 계산합니다.

    Args:
        sqrt_ratio_x96: 현재 sqrtPriceX96
        sqrt_ratio_a_x96: 하한 sqrtPriceX96
        sqrt_ratio_b_x96: 상한 sqrtPriceX96
        amount0: token0 수량
        amount1: token1 수량

    Returns:
        유동성 (범위 내라면 두 제약 조건 중 작은 값)
    """
    sqrt_a, sqrt_b = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_a:
        # 가격이 범위 아래: token0만 사용
        return get_liquidity_for_amount0(sqrt_a, sqrt_b, amount0)

    if sqrt_ratio_x96 < sqrt_b:
        # 가격이 범위 내: 양쪽 토큰 사용, 작은 값 반환
        liquidity0 = get_liquidity_for_amount0(sqrt_ratio_x96, sqrt_b, amount0)
        liquidity1 = get_liquidity_for_amount1(sqrt_a, sqrt_ratio_x96, amount1)
        return min(liquidity0, liquidity1)

    # 가격이 범위 위: token1만 사용
    return get_liquidity_for_amount1(sqrt_a, sqrt_b, amount1)


def get_amount0_for_liquidity(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> int:
    """유동성에서 amount0 계산

    공식: Δx = L * Q96 * (√P_b - √P_a) / √P_b / √P_a
    """
    sqrt_a, sqrt_b = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if sqrt_a <= 0 or liquidity <= 0:
        return 0

    return ((liquidity << 96) * (sqrt_b - sqrt_a) // sqrt_b) // sqrt_a


def get_amount1_for_liquidity(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> int:
    """유동성에서 amount1 계산

    공식: Δy = L * (√P_b - √P_a) / Q96
    """
    sqrt_a, sqrt_b = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if liquidity <= 0:
        return 0

    return liquidity * (sqrt_b - sqrt_a) // Q96


def get_amounts_for_liquidity(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> Tuple[int, int]:
    """유동성에서 토큰 수량 계산

    현재 가격과 범위, 유동성이 주어졌을 때
    포지션이 보유한 토큰 수량을 계산합니다.
    범위 밖이면 한쪽 수량은 정확히 0입니다.

    Args:
        sqrt_ratio_x96: 현재 sqrtPriceX96
        sqrt_ratio_a_x96: 하한 sqrtPriceX96
        sqrt_ratio_b_x96: 상한 sqrtPriceX96
        liquidity: 유동성

    Returns:
        (amount0, amount1) 튜플
    """
    sqrt_a, sqrt_b = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_a:
        # 가격이 범위 아래: token0만 보유
        return get_amount0_for_liquidity(sqrt_a, sqrt_b, liquidity), 0

    if sqrt_ratio_x96 < sqrt_b:
        # 가격이 범위 내: 양쪽 토큰 보유
        amount0 = get_amount0_for_liquidity(sqrt_ratio_x96, sqrt_b, liquidity)
        amount1 = get_amount1_for_liquidity(sqrt_a, sqrt_ratio_x96, liquidity)
        return amount0, amount1

    # 가격이 범위 위: token1만 보유
    return 0, get_amount1_for_liquidity(sqrt_a, sqrt_b, liquidity)
