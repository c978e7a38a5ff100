"""
Core domain models, text transforms, and numeric primitives.

This module contains the pure building blocks of the numeric input field,
independent of any UI toolkit.
"""
