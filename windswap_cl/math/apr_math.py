"""
APR Math - 집중화된 유동성 APR 추정

보상 배출량(reward rate)과 TVL로 계산한 기본 APR에
포지션 폭에 따른 집중 배수를 곱해 CL 포지션의 APR을 추정합니다.

보상 속도, 보상 토큰 가격, TVL은 모두 호출자가 전달합니다 (이 모듈은 조회하지 않음).

핵심 공식:
    base_apr = reward_rate × 1년(초) × reward_price / TVL × 100
    multiplier = clamp(√(FULL_RANGE_TICKS / position_width), 1, cap)

배수 상한과 범위 밖 할인율은 config.settings 한 곳에서 관리합니다.
"""

import logging
import math
from typing import Optional

from ..config import settings
from ..constants import FULL_RANGE_TICKS, SECONDS_PER_YEAR
from .position_math import RangePosition, is_position_in_range
from .tick_math import price_to_tick

logger = logging.getLogger(__name__)

# LP 토큰 소수점 (staked TVL 추정용)
LP_TOKEN_DECIMALS: int = 18


def calculate_base_apr(
    reward_rate_per_second: int,
    reward_price_usd: float,
    tvl_usd: float,
    reward_decimals: Optional[int] = None
) -> float:
    """전체 범위 기준 기본 APR (%)

    Args:
        reward_rate_per_second: 초당 보상 (최소 단위)
        reward_price_usd: 보상 토큰 USD 가격
        tvl_usd: 풀 TVL (USD)
        reward_decimals: 보상 토큰 소수점 (기본값 settings.REWARD_TOKEN_DECIMALS)

    Returns:
        APR (%, 예: 100 = 100%). TVL이나 가격이 0 이하이면 0.0
    """
    if tvl_usd <= 0 or reward_price_usd <= 0:
        return 0.0
    if reward_decimals is None:
        reward_decimals = settings.REWARD_TOKEN_DECIMALS

    rewards_per_second = reward_rate_per_second / (10 ** reward_decimals)
    annual_rewards_usd = rewards_per_second * SECONDS_PER_YEAR * reward_price_usd

    return annual_rewards_usd / tvl_usd * 100


def concentration_multiplier(position_width: int, cap: float) -> float:
    """포지션 폭(틱)에 따른 집중 배수

    √(FULL_RANGE_TICKS / position_width)를 [1, cap]으로 제한합니다.
    폭이 0 이하이면 1.0.
    """
    if position_width <= 0:
        return 1.0
    raw_multiplier = math.sqrt(FULL_RANGE_TICKS / position_width)
    return max(1.0, min(raw_multiplier, cap))


def get_concentration_multiplier(tick_spacing: Optional[int]) -> float:
    """tick_spacing 한 칸 폭 포지션의 집중 배수 (풀 목록 표시용)"""
    if not tick_spacing or tick_spacing <= 0:
        return 1.0
    return concentration_multiplier(tick_spacing, settings.multiplier_cap("pool"))


def calculate_pool_apr(
    reward_rate_per_second: int,
    reward_price_usd: float,
    tvl_usd: float,
    tick_spacing: Optional[int] = None
) -> float:
    """풀 목록에 표시할 APR (%)

    CL 풀(tick_spacing 지정)이면 한 칸 폭 포지션 기준 집중 배수를 적용합니다.
    """
    base_apr = calculate_base_apr(reward_rate_per_second, reward_price_usd, tvl_usd)
    if tick_spacing and tick_spacing > 0:
        return base_apr * get_concentration_multiplier(tick_spacing)
    return base_apr


def calculate_range_adjusted_apr(
    base_apr: float,
    tick_lower: int,
    tick_upper: int,
    current_tick: int
) -> Optional[float]:
    """사용자가 선택한 범위에 대한 APR 추정 (%)

    범위 밖 포지션은 가격이 돌아올 때만 보상을 받으므로
    settings.OUT_OF_RANGE_APR_FACTOR(기본 0.5)를 곱합니다.

    Args:
        base_apr: 풀 기본 APR (전체 범위 기준)
        tick_lower: 하한 틱
        tick_upper: 상한 틱
        current_tick: 현재 풀 틱

    Returns:
        APR (%). 기본 APR이 0 이하이거나 범위가 비어 있으면 None
    """
    if base_apr <= 0:
        return None
    if tick_lower >= tick_upper:
        return None

    multiplier = concentration_multiplier(
        tick_upper - tick_lower, settings.multiplier_cap("range")
    )
    if not is_position_in_range(current_tick, tick_lower, tick_upper):
        multiplier *= settings.OUT_OF_RANGE_APR_FACTOR

    return base_apr * multiplier


def calculate_range_apr_for_position(
    base_apr: float,
    position: RangePosition
) -> Optional[float]:
    """UI 가격 범위로 APR 추정

    범위 경계는 tick_spacing에 맞춘 틱으로, 현재 가격은 가장 가까운 틱으로 변환합니다.
    """
    if not position.has_valid_prices():
        return None

    tick_lower, tick_upper = position.tick_range()
    current_tick = price_to_tick(
        position.current_price,
        position.token0_decimals,
        position.token1_decimals,
        1,
        position.is_token0_base,
    )
    return calculate_range_adjusted_apr(base_apr, tick_lower, tick_upper, current_tick)


def calculate_staked_tvl(
    total_tvl_usd: float,
    staked_liquidity: int,
    total_lp_supply: Optional[int] = None
) -> Optional[float]:
    """게이지에 스테이킹된 TVL 추정 (USD)

    stakedTVL = staked_liquidity / total_lp_supply × total_tvl

    total_lp_supply가 없으면 LP 토큰 1개 ≈ $1로 보고 총 TVL을 상한으로 합니다.

    Returns:
        스테이킹 TVL. 계산할 수 없으면 None
    """
    if total_tvl_usd <= 0:
        return None
    if staked_liquidity <= 0:
        return None

    if total_lp_supply:
        staked_ratio = staked_liquidity / total_lp_supply
        # 0.01% 미만이면 사실상 0
        if staked_ratio < settings.MIN_STAKED_RATIO:
            return None
        return total_tvl_usd * staked_ratio

    staked_float = staked_liquidity / (10 ** LP_TOKEN_DECIMALS)
    if staked_float < 0.001:
        return None
    return min(staked_float, total_tvl_usd)


def calculate_staked_apr(
    reward_rate_per_second: int,
    reward_price_usd: float,
    total_tvl_usd: float,
    staked_liquidity: int,
    total_lp_supply: Optional[int] = None,
    tick_spacing: Optional[int] = None
) -> Optional[float]:
    """스테이킹 TVL 기준 APR (%)

    보상은 스테이킹된 LP에만 지급되므로 스테이커 입장에서 더 정확합니다.
    스테이킹 TVL을 계산할 수 없으면 총 TVL 기준으로 계산하며,
    그 값도 0 이하이면 None을 반환합니다.
    """
    staked_tvl_usd = calculate_staked_tvl(total_tvl_usd, staked_liquidity, total_lp_supply)

    if staked_tvl_usd is None:
        logger.debug("calculate_staked_apr: 스테이킹 TVL 없음, 총 TVL 사용")
        base_apr = calculate_base_apr(reward_rate_per_second, reward_price_usd, total_tvl_usd)
        if base_apr <= 0:
            return None
    else:
        base_apr = calculate_base_apr(reward_rate_per_second, reward_price_usd, staked_tvl_usd)

    if tick_spacing and tick_spacing > 0:
        return base_apr * get_concentration_multiplier(tick_spacing)
    return base_apr


def calculate_pool_apr_fallback(
    reward_rate_per_second: int,
    reward_price_usd: float,
    total_tvl_usd: float,
    staked_liquidity: Optional[int] = None,
    total_lp_supply: Optional[int] = None,
    tick_spacing: Optional[int] = None
) -> float:
    """스테이킹 데이터가 있으면 스테이킹 APR, 없으면 총 TVL 기준 APR (%)"""
    if staked_liquidity is not None and total_lp_supply is not None:
        staked_apr = calculate_staked_apr(
            reward_rate_per_second,
            reward_price_usd,
            total_tvl_usd,
            staked_liquidity,
            total_lp_supply,
            tick_spacing,
        )
        if staked_apr is not None:
            return staked_apr

    return calculate_pool_apr(reward_rate_per_second, reward_price_usd, total_tvl_usd, tick_spacing)
