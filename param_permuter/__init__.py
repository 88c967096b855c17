"""
Param Permuter - URL parameter permutation generator

Builds permutations of URLs by injecting parameter names and values
according to configurable strategies, for fuzzing and security testing.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from param_permuter.core.config import GenerationConfig, GenerationStrategy, ValueStrategy
from param_permuter.core.logger import get_logger
from param_permuter.generation.generator import PermutationGenerator

__all__ = [
    "GenerationConfig",
    "GenerationStrategy",
    "ValueStrategy",
    "PermutationGenerator",
    "get_logger",
    "__version__",
]
