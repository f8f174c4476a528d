"""
WindSwap CL 상수 정의

집중화된 유동성(CL) 풀 수학에 사용되는 상수들:
- Q96: sqrtPriceX96 고정소수점 인코딩 (2^96)
- MIN_TICK / MAX_TICK: 유효 틱 범위
- MIN_SQRT_RATIO / MAX_SQRT_RATIO: 유효 sqrtPriceX96 범위
- FULL_RANGE_TICKS: 전체 범위 포지션의 틱 폭 (APR 배수 계산용)
"""

# Fixed-point 인코딩 상수
Q96: int = 2 ** 96
Q192: int = 2 ** 192

# uint256 최대값 (Q128.128 역수 계산에 사용)
UINT256_MAX: int = 2 ** 256 - 1

# 틱 범위 상수 (TickMath.sol)
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# 전체 범위 틱 폭: 1,774,544
FULL_RANGE_TICKS: int = MAX_TICK - MIN_TICK

# sqrtPriceX96 범위 [MIN_SQRT_RATIO, MAX_SQRT_RATIO)
MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342

# price = 1.0001^tick
TICK_BASE: float = 1.0001

# 1년 = 365일
SECONDS_PER_YEAR: int = 60 * 60 * 24 * 365
