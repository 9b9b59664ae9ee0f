"""
spendshare: what a slice of federal spending cost one taxpayer.

The arithmetic lives in ``spendshare.core``; ``spendshare.api`` and
``spendshare.main`` are thin HTTP and CLI wrappers around it.
"""

__version__ = "0.1.0"
