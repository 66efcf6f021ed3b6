"""
Sifbox - bootstrap a local sifnoded test network and its relayer.
"""

__version__ = "0.1.0"
