#!/usr/bin/env python3
"""
Demo script comparing heightfields generated at different roughness values.
"""

import numpy as np
from py_heightfield.core import HeightfieldConfig, HeightfieldGenerator


def main():
    """Demonstrate heightfield generation."""
    print("Py-Heightfield Diamond-Square Demo")
    print("=" * 40)

    size = 129

    for roughness in [0.3, 0.5, 0.7]:
        print(f"\nRoughness {roughness}:")
        print("-" * 30)

        config = HeightfieldConfig(size=size, corner_heights=128, roughness=roughness)
        field = HeightfieldGenerator(config, seed="demo123").generate()
        stats = field.stats()

        print(f"  Grid: {field.size}x{field.size} ({field.dtype.name})")
        print(f"  Height range: {stats.minimum:.0f}-{stats.maximum:.0f}")
        print(f"  Average height: {stats.mean:.1f} (std {stats.std:.1f})")

        # Show height distribution
        bins = [0, 64, 96, 112, 128, 144, 160, 192, 256]
        hist, _ = np.histogram(field.data, bins=bins)
        print("  Height distribution:")
        for i in range(len(bins) - 1):
            bar = '#' * int(hist[i] / max(hist) * 20)
            print(f"    {bins[i]:3d}-{bins[i+1]:3d}: {bar} ({hist[i]})")


if __name__ == "__main__":
    main()
