"""Shared utilities: logging setup and id generators.

Used by domain, application, and infrastructure. No business logic.
"""

from registry.shared.logging import get_logger, setup_logging
from registry.shared.utils import generate_cuid

__all__ = ["generate_cuid", "get_logger", "setup_logging"]
