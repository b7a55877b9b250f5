"""
utils/ - Shared helpers (logging).
"""
