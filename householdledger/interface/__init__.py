"""Mini README: Interactive interfaces (web) for the household ledger.

Exports the FastAPI application factory that serves the asset dashboard and
JSON endpoints. The command line launcher lives in ``main_ledger.py``.
"""

from .web_app import create_application

__all__ = ["create_application"]
