"""Public API of locheck.

Each module under this package exports exactly one function or class.
"""
