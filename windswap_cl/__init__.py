"""
WindSwap Concentrated Liquidity Math

WindSwap CL 풀의 틱/가격/sqrtPriceX96 변환과 유동성 계산 라이브러리.
온체인 컨트랙트와 동일한 정수 정밀도의 틱 수학 위에
UI 미리보기용 float 헬퍼와 APR 추정 함수를 제공합니다.
"""

__version__ = "0.1.0"

from .constants import (
    Q96,
    MIN_TICK,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
    FULL_RANGE_TICKS,
)
from .exceptions import DomainError, TickOutOfRangeError, SqrtPriceOutOfRangeError
