"""
Diamond-square terrain heightfield generation.
"""

from .core import (
    AleaPRNG,
    GeometricVariance,
    Heightfield,
    HeightfieldConfig,
    HeightfieldGenerator,
    InvalidSizeError,
    diamond_square_no_wrap,
    generate_heightfield,
    validate_size,
)

__version__ = "0.1.0"

__all__ = ['AleaPRNG', 'GeometricVariance', 'Heightfield', 'HeightfieldConfig',
           'HeightfieldGenerator', 'InvalidSizeError', 'diamond_square_no_wrap',
           'generate_heightfield', 'validate_size']
