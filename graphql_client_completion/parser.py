"""GraphQL SDL parsing."""

from types import MappingProxyType
from typing import Mapping

from graphql import (
    GraphQLError,
    ScalarTypeDefinitionNode,
    TypeDefinitionNode,
    parse,
)

from . import utils

ParsedSchema = Mapping[str, TypeDefinitionNode]


def parse_sdl(source: str) -> ParsedSchema:
    """
    Parse GraphQL SDL text into a read-only map of type definitions.

    Scalar definitions are skipped. Schema definitions, directives and type
    extensions carry no completable fields and are ignored as well.

    Args:
        source: SDL text

    Returns:
        Mapping of type name to its definition node

    Raises:
        GraphQLError: If the SDL is syntactically invalid or defines a type twice
    """
    doc = parse(source, no_location=True)
    types: dict[str, TypeDefinitionNode] = {}
    for definition in doc.definitions:
        if not isinstance(definition, TypeDefinitionNode):
            continue
        if isinstance(definition, ScalarTypeDefinitionNode):
            continue
        name = definition.name.value
        if name in types:
            raise GraphQLError(f"There is already a type named '{name}'.")
        types[name] = definition
    return MappingProxyType(types)


def parse_schema_file(path: str) -> ParsedSchema:
    """Read and parse the SDL file at path."""
    return parse_sdl(utils.read_text(path))
