"""Diagnostics package.

- pretty_month, cross_check: always available
- distribution: needs numpy (and matplotlib for --out); pip install "weton[diagnostics]"
"""

__all__ = ["pretty_month", "cross_check", "distribution"]
