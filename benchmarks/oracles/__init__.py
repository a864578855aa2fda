from .brute_force import BruteForceOracle
from .nearest_sklearn import NearestOracleSklearn

__all__ = ["BruteForceOracle", "NearestOracleSklearn"]
