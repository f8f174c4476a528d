"""
Configuration settings for the WindSwap CL math package

Loads environment variables and provides the product constants used by the
APR estimation and position status helpers.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Package settings"""

    # APR concentration multiplier caps
    # pool: pools page, assumes a one-tick-spacing-wide position
    # range: user-selected range in the add-liquidity flow
    POOL_APR_MULTIPLIER_CAP: float = float(os.getenv("WINDSWAP_POOL_APR_MULTIPLIER_CAP", 500))
    RANGE_APR_MULTIPLIER_CAP: float = float(os.getenv("WINDSWAP_RANGE_APR_MULTIPLIER_CAP", 1000))

    # Out-of-range positions earn once price returns
    OUT_OF_RANGE_APR_FACTOR: float = float(os.getenv("WINDSWAP_OUT_OF_RANGE_APR_FACTOR", 0.5))

    # Below this staked/total LP ratio, staked TVL is treated as unavailable
    MIN_STAKED_RATIO: float = float(os.getenv("WINDSWAP_MIN_STAKED_RATIO", 0.0001))

    # Reward token (WIND) decimals
    REWARD_TOKEN_DECIMALS: int = int(os.getenv("WINDSWAP_REWARD_TOKEN_DECIMALS", 18))

    # Position status thresholds
    FULL_RANGE_THRESHOLD: float = float(os.getenv("WINDSWAP_FULL_RANGE_THRESHOLD", 0.9))
    EXTREME_TICK: int = int(os.getenv("WINDSWAP_EXTREME_TICK", 800000))

    def multiplier_cap(self, kind: str) -> float:
        """Get the concentration multiplier cap for 'pool' or 'range'"""
        if kind == "pool":
            return self.POOL_APR_MULTIPLIER_CAP
        if kind == "range":
            return self.RANGE_APR_MULTIPLIER_CAP
        raise ValueError(f"Unknown multiplier cap kind: {kind}")


# Create global settings instance
settings = Settings()
