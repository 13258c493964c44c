"""Domain layer: entities and value objects. No dependencies on outer layers."""

from roster.domain.entities import Country, GenderOptions, Person

__all__ = ["Country", "GenderOptions", "Person"]
