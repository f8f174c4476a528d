"""
공용 fixture
"""

import pytest

from ..math.position_math import RangePosition
from ..math.tick_math import get_sqrt_ratio_at_tick


@pytest.fixture
def weth_usdc_position():
    """WETH(18)/USDC(6) 풀, 현재가 $2000, 범위 $1500 ~ $2500"""
    return RangePosition(
        current_price=2000.0,
        price_lower=1500.0,
        price_upper=2500.0,
        token0_decimals=18,
        token1_decimals=6,
        tick_spacing=10,
    )


@pytest.fixture
def sqrt_bounds():
    """틱 0 ~ 100 범위의 sqrtPriceX96 경계"""
    return get_sqrt_ratio_at_tick(0), get_sqrt_ratio_at_tick(100)
