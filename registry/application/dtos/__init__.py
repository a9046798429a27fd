"""Application DTOs (no dependency on ORM)."""

from registry.application.dtos.entity import EntityIdentityResult

__all__ = ["EntityIdentityResult"]
