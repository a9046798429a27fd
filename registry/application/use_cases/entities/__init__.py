"""Entity use cases."""

from registry.application.use_cases.entities.entity_operations import EntityService

__all__ = ["EntityService"]
