"""
Configuration validation for Pointmap application.

This module provides validation functions to ensure the application
is properly configured before startup.
"""

from __future__ import annotations

from typing import Any

from .config import settings
from .database.connection import test_database_connection
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await test_database_connection()

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


def validate_pagination_settings() -> dict[str, Any]:
    """Check that list query page sizes are consistent."""
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    if settings.max_page_size < 1:
        results["valid"] = False
        results["errors"].append("max_page_size must be at least 1")
    if settings.default_page_size > settings.max_page_size:
        results["warnings"].append(
            "default_page_size exceeds max_page_size; list queries are clamped to "
            f"{settings.max_page_size}"
        )

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """Run all startup checks and combine their results."""
    database = await validate_database_connection()
    pagination = validate_pagination_settings()

    return {
        "overall_valid": database["valid"] and pagination["valid"],
        "database": database,
        "pagination": pagination,
    }


async def ensure_valid_startup() -> dict[str, Any]:
    """
    Run startup validation, raising in production when it fails.

    Outside production, failures are logged and startup continues.
    """
    results = await validate_startup_configuration()

    for warning in results["pagination"]["warnings"]:
        logger.warning("Configuration warning", warning=warning)

    if not results["overall_valid"]:
        logger.error(
            "Application configuration validation failed - some features may not work properly",
            database_errors=results["database"]["errors"],
            pagination_errors=results["pagination"]["errors"],
        )
        if settings.environment.lower() in ("production", "prod"):
            raise ValidationError("Critical configuration validation failed in production")

    return results
