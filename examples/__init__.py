"""
Example scripts for the de Casteljau blossoming library.

Included examples:
- basic_usage.py: evaluation, blossom corners and subdivision of a cubic

How to run:
    python examples/basic_usage.py
    python examples/basic_usage.py --plot
"""

__all__ = []
