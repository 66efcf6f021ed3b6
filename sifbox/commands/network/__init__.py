"""
Network command package - Bootstrap a local sifnoded test network.

This package provides:
- network: Main CLI command with run/create-sample subcommands
- Network topology generation through sifgen
- Validator keyring and genesis bootstrap
- The sifnoded process supervisor
"""

from .command import network

__all__ = ['network']
