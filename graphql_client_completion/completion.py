"""Completion suggestions for GraphQL client APIs and types."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

from .declarations import (
    FieldOrArgument,
    UnsupportedTypeShape,
    field_declaration,
    method_declaration,
)
from .schema_cache import SchemaCache

logger = logging.getLogger(__name__)

ROOT_TYPES = ("Query", "Mutation")


class ContainerKind(str, Enum):
    API = "api"  # interface annotated as a GraphQL client API
    TYPE = "type"  # class named after a schema type


@dataclass(frozen=True)
class Container:
    """The declaration the cursor is in, as resolved by the host."""

    kind: ContainerKind
    name: str
    existing: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Suggestion:
    """One completion entry."""

    text: str
    label: str
    tail_text: str
    type_text: str


def api_suggestions(cache: SchemaCache, existing: Iterable[str] = ()) -> list[Suggestion]:
    """Methods for the Query and Mutation operations not declared yet."""
    existing = set(existing)
    operations = [op for root in ROOT_TYPES for op in cache.fields_in(root)]
    return _render(cache, operations, existing, method_declaration)


def type_suggestions(
    cache: SchemaCache, type_name: str, existing: Iterable[str] = ()
) -> list[Suggestion]:
    """Fields of a schema type not declared yet; empty if the type is unknown."""
    if type_name not in cache.type_names():
        return []
    logger.debug("found GraphQL type %s", type_name)
    return _render(cache, cache.fields_in(type_name), set(existing), field_declaration)


def suggest(cache: SchemaCache, container: Container) -> list[Suggestion]:
    if container.kind is ContainerKind.API:
        logger.debug("found GraphQL client API %s", container.name)
        return api_suggestions(cache, container.existing)
    return type_suggestions(cache, container.name, container.existing)


def declaration(
    cache: SchemaCache, f: FieldOrArgument, declare: Callable[..., str]
) -> Optional[str]:
    """Render one field, reporting it and returning None if its type shape is unsupported."""
    try:
        return declare(f, cache.cfg)
    except UnsupportedTypeShape as e:
        cache.notifier.error(f"{e} in {f.owning_type_name}.{f.name}")
        return None


def _render(
    cache: SchemaCache,
    fields: list[FieldOrArgument],
    existing: set[str],
    declare: Callable[..., str],
) -> list[Suggestion]:
    suggestions = []
    for f in fields:
        if f.name in existing:
            continue
        text = declaration(cache, f, declare)
        if text is None:
            continue
        suggestions.append(
            Suggestion(
                text=text,
                label=f.name,
                tail_text=" " + f.description,
                type_text="GraphQL " + f.owning_type_name,
            )
        )
    return suggestions
