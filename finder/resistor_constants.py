"""
Resistor Finder - Value Tables

Base mantissas and decade multipliers that make up the searchable value space,
plus the fixed ±2 % match window.
"""

# E24-derived base mantissas (one decade, multiply by a decade multiplier)
BASE_VALUES: tuple[float, ...] = (
    1.0, 1.2, 1.5, 1.8, 2.2, 2.7,
    3.3, 3.9, 4.7, 5.6, 6.8, 8.2,
)

# Decade multipliers: 1 Ω through 1 MΩ
MULTIPLIERS: tuple[float, ...] = (
    1.0, 10.0, 100.0, 1_000.0, 10_000.0, 100_000.0, 1_000_000.0,
)

# Match window as factors of the desired value (exclusive on both ends)
LOWER_FACTOR = 0.98
UPPER_FACTOR = 1.02
