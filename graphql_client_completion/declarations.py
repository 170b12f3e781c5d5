"""Java declarations synthesized from GraphQL field and argument definitions."""

from dataclasses import dataclass
from typing import Optional, Union

from graphql import (
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
)

from . import utils
from .config import Config

DefinitionNode = Union[FieldDefinitionNode, InputValueDefinitionNode]


class UnsupportedTypeShape(ValueError):
    """Raised when a type reference nests deeper than ``[T!]!``."""

    def __init__(self, graphql_type: TypeNode):
        self.graphql_type = graphql_type
        super().__init__(f"unsupported type shape {utils.describe(graphql_type)}")


@dataclass(frozen=True)
class FieldOrArgument:
    """A field of a type, or an input value of an input type or operation."""

    owning_type_name: str
    name: str
    description: str
    graphql_type: TypeNode
    arguments: tuple["FieldOrArgument", ...] = ()

    @classmethod
    def of(cls, owning_type_name: str, node: DefinitionNode) -> "FieldOrArgument":
        if isinstance(node, FieldDefinitionNode):
            arguments = tuple(cls.of(owning_type_name, arg) for arg in node.arguments or ())
        else:
            arguments = ()
        return cls(
            owning_type_name=owning_type_name,
            name=node.name.value,
            description=utils.description_of(node),
            graphql_type=node.type,
            arguments=arguments,
        )


def members_of(type_definition: TypeDefinitionNode) -> list[FieldOrArgument]:
    """Fields or input values of a type definition, in declaration order."""
    if isinstance(
        type_definition,
        (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode, InputObjectTypeDefinitionNode),
    ):
        name = type_definition.name.value
        return [FieldOrArgument.of(name, node) for node in type_definition.fields or ()]
    # enums and unions
    return []


def to_declaration_type(graphql_type: TypeNode, cfg: Optional[Config] = None) -> str:
    """
    Render a GraphQL type reference as a Java type.

    Unwraps one non-null, one list and one more non-null wrapper, in that
    order. ``[String!]!`` becomes ``@NonNull List<@NonNull String>``.

    Raises:
        UnsupportedTypeShape: If anything other than a named type remains
    """
    cfg = cfg or Config()
    non_null = cfg.non_null_annotation + " "
    node = graphql_type
    prefix = ""
    suffix = ""
    if isinstance(node, NonNullTypeNode):
        prefix += non_null
        node = node.type
    if isinstance(node, ListTypeNode):
        prefix += cfg.list_type + "<"
        suffix += ">"
        node = node.type
    if isinstance(node, NonNullTypeNode):
        prefix += non_null
        node = node.type
    if not isinstance(node, NamedTypeNode):
        raise UnsupportedTypeShape(graphql_type)

    type_name = node.name.value
    annotation = cfg.scalar_annotations.get(type_name)
    if annotation:
        prefix = annotation + " " + prefix
    return prefix + cfg.scalar_mappings.get(type_name, type_name) + suffix


def method_declaration(field: FieldOrArgument, cfg: Optional[Config] = None) -> str:
    """``@Query Character hero(String episode);``"""
    parameters = ", ".join(parameter_declaration(arg, cfg) for arg in field.arguments)
    return (
        f"@{field.owning_type_name} {to_declaration_type(field.graphql_type, cfg)} "
        f"{field.name}({parameters});"
    )


def field_declaration(field: FieldOrArgument, cfg: Optional[Config] = None) -> str:
    """``Integer age;``"""
    return f"{to_declaration_type(field.graphql_type, cfg)} {field.name};"


def parameter_declaration(input_value: FieldOrArgument, cfg: Optional[Config] = None) -> str:
    """
    Render an argument as a Java parameter.

    Names that are Java keywords get a trailing underscore and a name
    annotation carrying the GraphQL name: ``@Name("class") String class_``.
    """
    cfg = cfg or Config()
    annotations = ""
    name = input_value.name
    if utils.is_java_keyword(name):
        annotations = f'{cfg.name_annotation}("{name}") '
        name += "_"
    return f"{annotations}{to_declaration_type(input_value.graphql_type, cfg)} {name}"
