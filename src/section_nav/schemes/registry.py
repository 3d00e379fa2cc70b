"""Scheme registry mapping ids and aliases to boundary definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from section_nav.runtime.telemetry import span

from .builtin import BUILTIN_SCHEMES, BuiltinScheme
from .models import BoundaryPredicate, SchemeDefinition

SchemeRef = str | BuiltinScheme | SchemeDefinition


class UnknownSchemeError(KeyError):
    """Raised when a scheme id or alias is not registered."""

    def __init__(self, scheme_id: str) -> None:
        super().__init__(f"Scheme '{scheme_id}' is not registered")
        self.scheme_id = scheme_id


class SchemeConflictError(RuntimeError):
    """Raised when a definition reuses a name that is already taken."""

    def __init__(
        self, definition: SchemeDefinition, conflicts: Iterable[SchemeDefinition]
    ) -> None:
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Scheme '{definition.id}' conflicts with "
            f"{[conflict.id for conflict in conflicts_tuple]}"
        )
        super().__init__(message)
        self.definition = definition
        self.conflicts = conflicts_tuple


@dataclass(slots=True)
class SchemeRegistryStats:
    scheme_count: int
    names: tuple[str, ...]


class SchemeRegistry:
    """Owns scheme definitions; ids and aliases share one namespace."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._definitions: Dict[str, SchemeDefinition] = {}
        self._names: Dict[str, str] = {}
        self._logger_name = logger_name

    @classmethod
    def with_builtins(cls, *, logger_name: str | None = None) -> "SchemeRegistry":
        registry = cls(logger_name=logger_name)
        for definition in BUILTIN_SCHEMES:
            registry.register(definition)
        return registry

    def register(
        self, definition: SchemeDefinition, *, replace: bool = False
    ) -> SchemeDefinition:
        with span(
            "schemes::register",
            logger_name=self._logger_name,
            component="schemes",
            fields={"scheme_id": definition.id},
        ) as handle:
            conflicts = self.detect_conflicts(definition)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise SchemeConflictError(definition, conflicts)

            for conflict in conflicts:
                self._remove(conflict)
            self._definitions[definition.id] = definition
            for name in definition.names:
                self._names[name] = definition.id
            return definition

    def unregister(self, scheme_id: str) -> Optional[SchemeDefinition]:
        definition = self._definitions.get(scheme_id)
        if definition is None:
            return None
        self._remove(definition)
        return definition

    def get(self, scheme: SchemeRef) -> SchemeDefinition:
        if isinstance(scheme, SchemeDefinition):
            return scheme
        if isinstance(scheme, BuiltinScheme):
            key = scheme.value
        else:
            key = str(scheme)
        try:
            return self._definitions[self._names[key]]
        except KeyError as exc:
            raise UnknownSchemeError(key) from exc

    def scheme(self, scheme: SchemeRef) -> BoundaryPredicate:
        """Return the boundary predicate registered under ``scheme``."""

        return self.get(scheme).predicate

    def __contains__(self, name: object) -> bool:
        if isinstance(name, BuiltinScheme):
            name = name.value
        return name in self._names

    def __iter__(self) -> Iterator[SchemeDefinition]:
        return iter(self._definitions.values())

    def ids(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def stats(self) -> SchemeRegistryStats:
        return SchemeRegistryStats(
            scheme_count=len(self._definitions),
            names=tuple(sorted(self._names)),
        )

    def detect_conflicts(self, definition: SchemeDefinition) -> list[SchemeDefinition]:
        conflicts: list[SchemeDefinition] = []
        for name in definition.names:
            owner = self._names.get(name)
            if owner is None:
                continue
            existing = self._definitions[owner]
            if existing not in conflicts:
                conflicts.append(existing)
        return conflicts

    def _remove(self, definition: SchemeDefinition) -> None:
        self._definitions.pop(definition.id, None)
        for name in definition.names:
            if self._names.get(name) == definition.id:
                self._names.pop(name)


__all__ = [
    "SchemeConflictError",
    "SchemeRegistry",
    "SchemeRegistryStats",
    "UnknownSchemeError",
]
