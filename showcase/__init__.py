"""Product Showcase.

Mock product catalog service with search, filtering and two-item comparison.
"""

__version__ = "1.0.0"
