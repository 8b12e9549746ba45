"""Shared services."""

from wizard.services.log_service import LogService

__all__ = ["LogService"]
