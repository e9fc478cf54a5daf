"""Mini README: Core package initializer for the household ledger.

Exposes the logging factory so scripts can obtain a configured logger
without knowing the module layout. Domain APIs live in subpackages such as
``householdledger.assets``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
