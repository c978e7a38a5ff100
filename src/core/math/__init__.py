"""
Core math modules

Математические примитивы для числового поля ввода.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    is_within,
)

__all__ = [
    "clamp",
    "is_valid_float",
    "is_within",
]
