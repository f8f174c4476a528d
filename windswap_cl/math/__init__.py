"""
Math layer for WindSwap CL

집중화된 유동성 수학 함수들:
- tick_math: Tick ↔ sqrtPriceX96 ↔ Price 변환 (온체인과 비트 단위 동일)
- sqrt_price_math: 임의 가격 ↔ sqrtPriceX96 변환
- liquidity_math: 유동성 ↔ 토큰 수량 (정수, 내림)
- position_math: 범위 분류와 포지션 수량 계산 (float 미리보기 / wei)
- apr_math: 보상 기반 APR 추정
- convert: wei ↔ human-readable 수량 변환
"""

from .tick_math import (
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
    tick_to_price,
    price_to_tick,
    round_tick_to_spacing,
    nearest_usable_tick,
)
from .sqrt_price_math import (
    sqrt_price_x96_to_price,
    price_to_sqrt_price_x96,
)
from .liquidity_math import (
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
    get_liquidity_for_amounts,
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_amounts_for_liquidity,
)
from .position_math import (
    RangePosition,
    RequiredTokens,
    PositionAmounts,
    LiquidityAmounts,
    get_required_tokens,
    calculate_amount0_from_amount1,
    calculate_amount1_from_amount0,
    calculate_other_amount,
    calculate_optimal_amounts,
    calculate_optimal_amounts_wei,
    is_position_in_range,
    is_full_range_position,
    is_extreme_tick_range,
)
from .apr_math import (
    calculate_base_apr,
    concentration_multiplier,
    get_concentration_multiplier,
    calculate_pool_apr,
    calculate_range_adjusted_apr,
    calculate_range_apr_for_position,
    calculate_staked_tvl,
    calculate_staked_apr,
    calculate_pool_apr_fallback,
)
from .convert import (
    parse_to_wei,
    format_from_wei,
    format_amount,
    to_human,
)
