"""
Liquidity Math 테스트

유동성 계산 함수들을 테스트합니다.
"""

import pytest

from ..constants import Q96
from ..math.liquidity_math import (
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
    get_liquidity_for_amounts,
    get_amounts_for_liquidity,
)
from ..math.tick_math import get_sqrt_ratio_at_tick


class TestGetAmountForLiquidity:
    """get_amount0_for_liquidity, get_amount1_for_liquidity 테스트"""

    def test_amount0_basic(self, sqrt_bounds):
        """amount0 기본 테스트"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_amount0_for_liquidity(sqrt_a, sqrt_b, 10**18) > 0

    def test_amount1_basic(self, sqrt_bounds):
        """amount1 기본 테스트"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_amount1_for_liquidity(sqrt_a, sqrt_b, 10**18) > 0

    def test_swap_order(self, sqrt_bounds):
        """sqrt 순서가 바뀌어도 결과 동일"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_amount0_for_liquidity(sqrt_a, sqrt_b, 10**18) == \
            get_amount0_for_liquidity(sqrt_b, sqrt_a, 10**18)
        assert get_amount1_for_liquidity(sqrt_a, sqrt_b, 10**18) == \
            get_amount1_for_liquidity(sqrt_b, sqrt_a, 10**18)

    def test_zero_liquidity(self, sqrt_bounds):
        """유동성 0일 때"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_amount0_for_liquidity(sqrt_a, sqrt_b, 0) == 0
        assert get_amount1_for_liquidity(sqrt_a, sqrt_b, 0) == 0

    def test_amount1_exact(self):
        """L * (√P_b - √P_a) / Q96: 2^96 ~ 2*2^96 범위에서 amount1 = L"""
        assert get_amount1_for_liquidity(Q96, 2 * Q96, 12345) == 12345


class TestGetLiquidityForAmount:
    """get_liquidity_for_amount0, get_liquidity_for_amount1 테스트"""

    def test_liquidity_for_amount0(self, sqrt_bounds):
        """amount0에서 유동성 계산"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_liquidity_for_amount0(sqrt_a, sqrt_b, 10**18) > 0

    def test_liquidity_for_amount1(self, sqrt_bounds):
        """amount1에서 유동성 계산"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_liquidity_for_amount1(sqrt_a, sqrt_b, 10**18) > 0

    def test_amount0_roundtrip(self):
        """sqrtA=2^96, sqrtB=4*2^96, amount0=10^18 왕복 (내림 1 이내)"""
        sqrt_a, sqrt_b = Q96, 4 * Q96
        amount0 = 10**18

        liquidity = get_liquidity_for_amount0(sqrt_a, sqrt_b, amount0)
        assert liquidity == 4 * 10**18 // 3

        result = get_amount0_for_liquidity(sqrt_a, sqrt_b, liquidity)
        assert amount0 - 1 <= result <= amount0

    def test_amount1_roundtrip(self, sqrt_bounds):
        """amount1 -> 유동성 -> amount1 (내림 1 이내)"""
        sqrt_a, sqrt_b = sqrt_bounds
        amount1 = 5 * 10**17

        liquidity = get_liquidity_for_amount1(sqrt_a, sqrt_b, amount1)
        result = get_amount1_for_liquidity(sqrt_a, sqrt_b, liquidity)
        assert amount1 - 1 <= result <= amount1

    def test_reversed_bounds(self, sqrt_bounds):
        """경계 순서 무관"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_liquidity_for_amount0(sqrt_b, sqrt_a, 10**18) == \
            get_liquidity_for_amount0(sqrt_a, sqrt_b, 10**18)
        assert get_liquidity_for_amount1(sqrt_b, sqrt_a, 10**18) == \
            get_liquidity_for_amount1(sqrt_a, sqrt_b, 10**18)

    def test_equal_bounds(self):
        """경계가 같으면 0 (0으로 나누지 않음)"""
        assert get_liquidity_for_amount0(Q96, Q96, 10**18) == 0
        assert get_liquidity_for_amount1(Q96, Q96, 10**18) == 0

    def test_non_positive_amount(self, sqrt_bounds):
        """수량이 0 이하이면 0"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_liquidity_for_amount0(sqrt_a, sqrt_b, 0) == 0
        assert get_liquidity_for_amount1(sqrt_a, sqrt_b, -5) == 0

    def test_no_overflow_at_extremes(self):
        """256비트를 넘는 중간값에서도 정확 (무한 정밀도 정수)"""
        sqrt_a = get_sqrt_ratio_at_tick(800000)
        sqrt_b = get_sqrt_ratio_at_tick(887272)
        amount0 = 2**128
        liquidity = get_liquidity_for_amount0(sqrt_a, sqrt_b, amount0)
        expected = amount0 * sqrt_a * sqrt_b // (Q96 * (sqrt_b - sqrt_a))
        assert liquidity == expected
        assert amount0 * sqrt_a * sqrt_b > 2**256


class TestGetLiquidityForAmounts:
    """get_liquidity_for_amounts 테스트"""

    def test_below_range(self, sqrt_bounds):
        """가격이 범위 아래일 때: token0만 사용"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(-200)

        liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, 10**18, 10**18)
        assert liquidity == get_liquidity_for_amount0(sqrt_a, sqrt_b, 10**18)

    def test_at_lower_bound(self, sqrt_bounds):
        """가격이 하한과 같으면 범위 아래로 취급"""
        sqrt_a, sqrt_b = sqrt_bounds
        liquidity = get_liquidity_for_amounts(sqrt_a, sqrt_a, sqrt_b, 10**18, 0)
        assert liquidity == get_liquidity_for_amount0(sqrt_a, sqrt_b, 10**18)

    def test_above_range(self, sqrt_bounds):
        """가격이 범위 위일 때: token1만 사용"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(200)

        liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, 10**18, 10**18)
        assert liquidity == get_liquidity_for_amount1(sqrt_a, sqrt_b, 10**18)

    def test_at_upper_bound(self, sqrt_bounds):
        """가격이 상한과 같으면 범위 위로 취급"""
        sqrt_a, sqrt_b = sqrt_bounds
        liquidity = get_liquidity_for_amounts(sqrt_b, sqrt_a, sqrt_b, 0, 10**18)
        assert liquidity == get_liquidity_for_amount1(sqrt_a, sqrt_b, 10**18)

    def test_in_range(self, sqrt_bounds):
        """가격이 범위 내일 때: 둘 다 사용, 작은 값 반환"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(50)

        liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, 10**18, 10**18)

        liq0 = get_liquidity_for_amount0(sqrt_current, sqrt_b, 10**18)
        liq1 = get_liquidity_for_amount1(sqrt_a, sqrt_current, 10**18)
        assert liquidity == min(liq0, liq1)

    def test_reversed_bounds(self, sqrt_bounds):
        """경계 순서 무관"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(50)
        assert get_liquidity_for_amounts(sqrt_current, sqrt_b, sqrt_a, 10**18, 10**18) == \
            get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, 10**18, 10**18)


class TestGetAmountsForLiquidity:
    """get_amounts_for_liquidity 테스트"""

    def test_amounts_below_range(self, sqrt_bounds):
        """가격이 범위 아래일 때: token0만 반환"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(-200)

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, 10**18)
        assert amount0 > 0
        assert amount1 == 0

    def test_amounts_above_range(self, sqrt_bounds):
        """가격이 범위 위일 때: token1만 반환"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(200)

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, 10**18)
        assert amount0 == 0
        assert amount1 > 0

    def test_amounts_at_bounds(self, sqrt_bounds):
        """경계 위에서는 한쪽 수량이 정확히 0"""
        sqrt_a, sqrt_b = sqrt_bounds
        assert get_amounts_for_liquidity(sqrt_a, sqrt_a, sqrt_b, 10**18)[1] == 0
        assert get_amounts_for_liquidity(sqrt_b, sqrt_a, sqrt_b, 10**18)[0] == 0

    def test_amounts_in_range(self, sqrt_bounds):
        """가격이 범위 내일 때: 둘 다 반환"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(50)

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, 10**18)
        assert amount0 > 0
        assert amount1 > 0

    def test_limiting_side(self):
        """수량 -> 유동성 -> 수량은 입력 이하 (제한 토큰 기준)"""
        cases = [
            (-200311, -201000, -199000, 10**18, 2000 * 10**6),
            (50, 0, 100, 10**18, 10**18),
            (0, -60, 60, 123456789, 987654321),
            (300000, 200000, 400000, 10**6, 10**30),
        ]
        for tick, tick_a, tick_b, amount0, amount1 in cases:
            sqrt_current = get_sqrt_ratio_at_tick(tick)
            sqrt_a = get_sqrt_ratio_at_tick(tick_a)
            sqrt_b = get_sqrt_ratio_at_tick(tick_b)

            liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, amount0, amount1)
            result0, result1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, liquidity)

            assert 0 <= result0 <= amount0
            assert 0 <= result1 <= amount1

    def test_roundtrip(self, sqrt_bounds):
        """유동성 -> 토큰 -> 유동성 왕복 테스트"""
        sqrt_a, sqrt_b = sqrt_bounds
        sqrt_current = get_sqrt_ratio_at_tick(50)
        original_liquidity = 10**18

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, original_liquidity)
        result_liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, amount0, amount1)

        # 내림으로 인한 작은 차이 허용
        assert result_liquidity <= original_liquidity
        assert original_liquidity - result_liquidity < original_liquidity * 1e-9


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
