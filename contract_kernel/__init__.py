"""
Contract Kernel

Advertising contract lifecycle core:
- Term validation (start date, minimum run, amount range)
- Duplicate submission suppression
- Calendar-derived contract status
- Filtered, paged contract listing
"""

__version__ = "0.1.0"
