"""Use cases: orchestrate repositories and domain entities."""

from registry.application.use_cases.entities import EntityService

__all__ = ["EntityService"]
