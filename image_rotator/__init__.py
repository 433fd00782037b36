"""Round-robin image backend used as a test double."""

__version__ = '0.1.0'
