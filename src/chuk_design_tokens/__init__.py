"""
Design-token build pipeline.

Compiles token documents (colors, spacing, typography, shadows, borders)
into CSS custom properties, typography utility classes and a
parametrized button component stylesheet.
"""

__version__ = "0.1.0"
