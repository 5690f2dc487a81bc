"""
taxassist: A tax compliance assistant with a terminal dashboard.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .markup import render

__all__ = ["render"]
