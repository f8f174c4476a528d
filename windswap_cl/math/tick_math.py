"""
Tick Math - Tick ↔ Price 변환

집중화된 유동성 풀의 틱 수학 함수들. 온체인 컨트랙트와 동일한 정밀도로 구현.

References:
- Uniswap V3 Core: contracts/libraries/TickMath.sol
- 백서 Section 6.1: Ticks and Tick Spacing

핵심 공식:
    price = 1.0001^tick
    tick = log₁.₀₀₀₁(price)
    sqrtPriceX96 = sqrt(price) * 2^96

가격 방향:
    pool order = token1 / token0 (풀이 사용하는 방향)
    UI order   = 화면에 표시되는 방향. is_token0_base=False이면 pool order의 역수
"""

import logging
import math

from ..constants import (
    MIN_TICK,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
    Q96,
    TICK_BASE,
    UINT256_MAX,
)
from ..exceptions import TickOutOfRangeError, SqrtPriceOutOfRangeError

logger = logging.getLogger(__name__)


# |tick|의 bit 0이 켜져 있을 때의 시작 비율 (Q128.128)
_RATIO_ODD_TICK: int = 0xfffcb933bd6fad37aa2d162d1a594001
_RATIO_EVEN_TICK: int = 1 << 128

# |tick|의 bit 1..19에 대응하는 매직 넘버 (1/sqrt(1.0001)^(2^i), Q128.128)
_TICK_BIT_MULTIPLIERS = (
    0xfff97272373d413259a46990580e213a,
    0xfff2e50f5f656932ef12357cf3c7fdcc,
    0xffe5caca7e10e4e61c3624eaa0941cd0,
    0xffcb9843d60f6159c9db58835c926644,
    0xff973b41fa98c081472e6896dfb254c0,
    0xff2ea16466c96a3843ec78b326b52861,
    0xfe5dee046a99a2a811c461f1969c3053,
    0xfcbe86c7900a88aedcffc83b479aa3a4,
    0xf987a7253ac413176f2b074cf7815e54,
    0xf3392b0822b70005940c7a398e4b70f3,
    0xe7159475a2c29b7443b29c7fa6e889d9,
    0xd097f3bdfd2022b8845ad8f792aa5825,
    0xa9f746462d870fdf8a65dc1f90e061e5,
    0x70d869a156d2a1b890bb3df62baf32f7,
    0x31be135f97d08fd981231505542fcfa6,
    0x9aa508b5b7a84e1c677de54f3e99bc9,
    0x5d6af8dedb81196699c329225ee604,
    0x2216e584f5fa1ea926041bedfe98,
    0x48a170391f7dc42444e8fa2,
)


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """틱에서 sqrtPriceX96 계산

    Solidity TickMath.getSqrtRatioAtTick()과 비트 단위로 동일한 결과.
    정수 연산만 사용합니다.

    Args:
        tick: 틱 인덱스 (-887272 ~ 887272)

    Returns:
        sqrtPriceX96 (Q64.96 형식)

    Raises:
        TickOutOfRangeError: 틱이 유효 범위를 벗어난 경우
    """
    abs_tick = abs(tick)
    if abs_tick > MAX_TICK:
        raise TickOutOfRangeError(tick)

    ratio = _RATIO_ODD_TICK if abs_tick & 0x1 else _RATIO_EVEN_TICK

    for bit, multiplier in enumerate(_TICK_BIT_MULTIPLIERS, start=1):
        if abs_tick & (1 << bit):
            ratio = (ratio * multiplier) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, 나머지가 있으면 올림
    return (ratio >> 32) + (1 if ratio & 0xFFFFFFFF else 0)


def get_tick_at_sqrt_ratio(sqrt_price_x96: int) -> int:
    """sqrtPriceX96에서 틱 계산

    sqrt ratio가 입력값 이하인 가장 큰 틱을 반환합니다.
    float 로그로 근사한 뒤 get_sqrt_ratio_at_tick()으로 보정합니다.

    Args:
        sqrt_price_x96: sqrtPriceX96 (Q64.96 형식)

    Returns:
        틱 인덱스

    Raises:
        SqrtPriceOutOfRangeError: [MIN_SQRT_RATIO, MAX_SQRT_RATIO) 밖인 경우
    """
    if sqrt_price_x96 < MIN_SQRT_RATIO or sqrt_price_x96 >= MAX_SQRT_RATIO:
        raise SqrtPriceOutOfRangeError(sqrt_price_x96)

    # price = (sqrtPriceX96 / 2^96)^2  ->  ln(price) = 2 * ln(sqrtPriceX96 / 2^96)
    log_price = 2 * math.log(sqrt_price_x96 / Q96)
    tick = math.floor(log_price / math.log(TICK_BASE))
    tick = max(MIN_TICK, min(MAX_TICK, tick))

    # float 오차 보정
    while tick < MAX_TICK and get_sqrt_ratio_at_tick(tick + 1) <= sqrt_price_x96:
        tick += 1
    while tick > MIN_TICK and get_sqrt_ratio_at_tick(tick) > sqrt_price_x96:
        tick -= 1

    return tick


def round_tick_to_spacing(tick: int, tick_spacing: int) -> int:
    """틱을 가장 가까운 tick_spacing 배수로 반올림

    정확히 중간이면 +∞ 방향(upper)으로 반올림합니다.

    Args:
        tick: 반올림할 틱
        tick_spacing: 틱 간격

    Returns:
        반올림된 틱
    """
    lower = (tick // tick_spacing) * tick_spacing
    upper = lower + tick_spacing
    return upper if upper - tick <= tick - lower else lower


def usable_tick_bounds(tick_spacing: int):
    """tick_spacing에서 사용 가능한 (최소 틱, 최대 틱)"""
    max_usable = (MAX_TICK // tick_spacing) * tick_spacing
    return -max_usable, max_usable


def nearest_usable_tick(tick: int, tick_spacing: int) -> int:
    """가장 가까운 tick_spacing 배수로 반올림 후 유효 범위로 클램프"""
    min_usable, max_usable = usable_tick_bounds(tick_spacing)
    rounded = round_tick_to_spacing(tick, tick_spacing)
    return max(min_usable, min(max_usable, rounded))


def price_to_tick(
    price: float,
    token0_decimals: int,
    token1_decimals: int,
    tick_spacing: int,
    is_token0_base: bool = True
) -> int:
    """Human-readable 가격을 tick_spacing에 맞춘 틱으로 변환

    tick = log₁.₀₀₀₁(pool_price × 10^(token1_decimals - token0_decimals))

    가격이 0 이하이면 예외 대신 틱 0을 반환합니다.
    틱 0이 유효한 값으로 쓰이면 안 되는 호출자는 가격을 미리 검증해야 합니다.

    Args:
        price: UI 가격 (is_token0_base=True면 token1/token0)
        token0_decimals: token0 소수점 자릿수
        token1_decimals: token1 소수점 자릿수
        tick_spacing: 풀의 틱 간격 (0 이하는 1로 취급)
        is_token0_base: UI 기준 토큰이 token0인지 여부

    Returns:
        tick_spacing 배수인 틱 (유효 범위로 클램프)

    Example:
        >>> price_to_tick(2000, 18, 6, 10)  # WETH/USDC $2000
        -200310
    """
    if math.isnan(price) or price <= 0:
        logger.debug("price_to_tick: 양수가 아닌 가격 %r -> tick 0", price)
        return 0
    if tick_spacing <= 0:
        tick_spacing = 1

    pool_price = price if is_token0_base else 1 / price
    adjusted_price = pool_price * (10 ** (token1_decimals - token0_decimals))

    if adjusted_price <= 0:
        # float 언더플로우
        raw_tick = float(MIN_TICK)
    elif math.isinf(adjusted_price):
        raw_tick = float(MAX_TICK)
    else:
        raw_tick = math.log(adjusted_price) / math.log(TICK_BASE)

    # 가장 가까운 tick_spacing 배수 (중간값은 올림)
    tick = math.floor(raw_tick / tick_spacing + 0.5) * tick_spacing

    min_usable, max_usable = usable_tick_bounds(tick_spacing)
    return max(min_usable, min(max_usable, tick))


def tick_to_price(
    tick: int,
    token0_decimals: int,
    token1_decimals: int,
    is_token0_base: bool = True
) -> float:
    """틱을 human-readable 가격으로 변환

    price = 1.0001^tick × 10^(token0_decimals - token1_decimals)

    Args:
        tick: 틱 인덱스
        token0_decimals: token0 소수점 자릿수 (예: WETH = 18)
        token1_decimals: token1 소수점 자릿수 (예: USDC = 6)
        is_token0_base: False면 token0/token1 방향으로 역수를 반환

    Returns:
        UI 가격

    Example:
        >>> tick_to_price(-200310, 18, 6)  # WETH/USDC
        2000.2...  # tick_spacing 오차 내
    """
    raw_price = TICK_BASE ** tick
    adjusted_price = raw_price * (10 ** (token0_decimals - token1_decimals))

    if is_token0_base:
        return adjusted_price
    if adjusted_price == 0:
        return 0.0
    return 1 / adjusted_price
