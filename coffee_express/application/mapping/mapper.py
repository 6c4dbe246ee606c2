"""Declarative object mapper between entities and DTOs.

A mapping is registered per (source type, target type) pair.  Target fields
are filled by name from the source (attributes and properties both count)
unless the pair's override table supplies a function for that field:

    mapper.register(
        Product,
        ProductDto,
        overrides={"product_name": lambda p: p.name},
    )
    dto = mapper.map(product, ProductDto)

Merge mappings (register_merge) copy a partial update DTO onto an existing
frozen model and return the new value; only fields the caller actually set,
and that are not None, are applied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from coffee_express.domain.errors import MappingError

S = TypeVar("S")
T = TypeVar("T", bound=BaseModel)

Override = Callable[[Any], Any]


@dataclass(frozen=True)
class _Mapping:
    source: type
    target: type[BaseModel]
    overrides: Mapping[str, Override] = field(default_factory=dict)
    ignore: frozenset[str] = frozenset()
    merge: bool = False


class Mapper:
    def __init__(self) -> None:
        self._mappings: dict[tuple[type, type], _Mapping] = {}

    def register(
        self,
        source: type,
        target: type[BaseModel],
        *,
        overrides: Mapping[str, Override] | None = None,
        ignore: Iterable[str] = (),
    ) -> Mapper:
        """Register a full source → target projection.  Returns self for chaining."""
        self._mappings[(source, target)] = _Mapping(
            source, target, dict(overrides or {}), frozenset(ignore)
        )
        return self

    def register_merge(
        self,
        source: type[BaseModel],
        target: type[BaseModel],
        *,
        ignore: Iterable[str] = (),
    ) -> Mapper:
        """Register a partial-update pair used by map_onto()."""
        self._mappings[(source, target)] = _Mapping(
            source, target, {}, frozenset(ignore), merge=True
        )
        return self

    def map(self, obj: Any, target: type[T]) -> T | None:
        if obj is None:
            return None
        mapping = self._lookup(type(obj), target, merge=False)
        values: dict[str, Any] = {}
        for name in target.model_fields:
            if name in mapping.ignore:
                continue
            if name in mapping.overrides:
                values[name] = mapping.overrides[name](obj)
            elif hasattr(obj, name):
                values[name] = getattr(obj, name)
        return self._build(target, values, mapping)

    def map_many(self, objs: Iterable[Any], target: type[T]) -> list[T]:
        return [self.map(obj, target) for obj in objs]

    def map_onto(self, source: BaseModel, destination: T) -> T:
        """Return a copy of destination with the set fields of source applied."""
        target = type(destination)
        mapping = self._lookup(type(source), target, merge=True)
        changes = {
            name: value
            for name, value in source.model_dump(exclude_unset=True, exclude_none=True).items()
            if name in target.model_fields and name not in mapping.ignore
        }
        merged = {**destination.model_dump(), **changes}
        return self._build(target, merged, mapping)

    def assert_configuration_is_valid(self) -> None:
        """Raise MappingError listing every registered pair that cannot be satisfied.

        A projection is invalid when a required target field has neither an
        override nor a same-named source attribute (or is ignored).  A merge
        is invalid when a source field has no counterpart on the target.
        """
        problems: list[str] = []
        for mapping in self._mappings.values():
            if mapping.merge:
                for name in mapping.source.model_fields:
                    if name not in mapping.ignore and name not in mapping.target.model_fields:
                        problems.append(
                            f"{mapping.source.__name__} -> {mapping.target.__name__}: "
                            f"source field {name!r} has no target field"
                        )
                continue
            for name, info in mapping.target.model_fields.items():
                if not info.is_required():
                    continue
                if name in mapping.overrides:
                    continue
                if name in mapping.ignore or not _source_provides(mapping.source, name):
                    problems.append(
                        f"{mapping.source.__name__} -> {mapping.target.__name__}: "
                        f"required field {name!r} is unmapped"
                    )
        if problems:
            raise MappingError("Invalid mapping configuration:\n" + "\n".join(problems))

    def _lookup(self, source: type, target: type, *, merge: bool) -> _Mapping:
        for klass in source.__mro__:
            mapping = self._mappings.get((klass, target))
            if mapping is not None and mapping.merge == merge:
                return mapping
        kind = "merge" if merge else "mapping"
        raise MappingError(f"No {kind} registered for {source.__name__} -> {target.__name__}")

    @staticmethod
    def _build(target: type[T], values: dict[str, Any], mapping: _Mapping) -> T:
        try:
            return target.model_validate(values)
        except ValidationError as exc:
            raise MappingError(
                f"Cannot map {mapping.source.__name__} -> {target.__name__}: {exc}"
            ) from exc


def _source_provides(source: type, name: str) -> bool:
    model_fields = getattr(source, "model_fields", None)
    if model_fields is not None and name in model_fields:
        return True
    return hasattr(source, name)
