"""
Core interfaces (ports) shared by every domain.
"""

from storefront.core.interfaces.clock import IClock

__all__ = ["IClock"]
