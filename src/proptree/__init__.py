"""
proptree: Property-based testing with shrinkable value trees.

Strategies draw random values from declared domains; when a property fails,
the value tree behind each input walks toward a smaller counterexample
without ever leaving the domain it was drawn from.
"""

__version__ = "0.1.0"
