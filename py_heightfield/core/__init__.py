"""
Core heightfield generation functionality.
"""

from .alea_prng import AleaPRNG
from .diamond_square import GridAccessor, RandomSource, VarianceSchedule, diamond_square_no_wrap
from .heightfield import Heightfield, HeightfieldStats
from .heightfield_generator import (
    HeightfieldConfig,
    HeightfieldGenerator,
    InvalidSizeError,
    generate_heightfield,
    validate_size,
)
from .variance import GeometricVariance

__all__ = ['AleaPRNG', 'GridAccessor', 'RandomSource', 'VarianceSchedule', 'diamond_square_no_wrap',
           'Heightfield', 'HeightfieldStats', 'HeightfieldConfig', 'HeightfieldGenerator',
           'InvalidSizeError', 'generate_heightfield', 'validate_size', 'GeometricVariance']
