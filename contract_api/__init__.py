"""HTTP boundary for the contract kernel."""

from contract_api.app import create_app

__all__ = ["create_app"]
