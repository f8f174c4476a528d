"""
도메인 예외

틱 또는 sqrtPriceX96이 유효 범위를 벗어나면 즉시 실패합니다.
상위 데이터 오류(예: 잘못 읽은 풀 상태)를 의미하므로 정상 흐름에서는 발생하지 않습니다.
"""


class DomainError(ValueError):
    """유효 범위를 벗어난 입력에 대한 기본 예외."""
    pass


class TickOutOfRangeError(DomainError):
    """틱이 [MIN_TICK, MAX_TICK] 밖에 있음."""

    def __init__(self, tick: int):
        self.tick = tick
        super().__init__(f"틱이 유효 범위를 벗어났습니다: {tick}")


class SqrtPriceOutOfRangeError(DomainError):
    """sqrtPriceX96이 [MIN_SQRT_RATIO, MAX_SQRT_RATIO) 밖에 있음."""

    def __init__(self, sqrt_price_x96: int):
        self.sqrt_price_x96 = sqrt_price_x96
        super().__init__(f"sqrtPriceX96이 유효 범위를 벗어났습니다: {sqrt_price_x96}")
