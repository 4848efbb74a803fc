"""
sharc - Shard Programming Language compiler front-end
Command-line argument handling for the compiler driver.
"""

__version__ = "0.1.0"
