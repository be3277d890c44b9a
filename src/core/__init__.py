"""
Core generic containers, capability interfaces and collection utilities.

Everything here is in-memory and independent of external systems.
"""
