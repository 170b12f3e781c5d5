"""Utility functions for schema files and GraphQL type nodes."""

import json
from pathlib import Path
from typing import Any

from graphql import TypeNode, print_ast

# Reserved words of the Java language, including the literal keywords.
JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "final", "finally", "float", "for", "goto", "if", "implements",
        "import", "instanceof", "int", "interface", "long", "native", "new",
        "package", "private", "protected", "public", "return", "short", "static",
        "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "try", "void", "volatile", "while", "true", "false", "null", "_",
    }
)


# File system utilities
def ensure_dir(path: str) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(path).mkdir(parents=True, exist_ok=True)


def exists(path: str) -> bool:
    """Check if file exists."""
    return Path(path).is_file()


def dirname(path: str) -> str:
    """Get directory name from path."""
    return str(Path(path).parent)


def join(*parts: str) -> str:
    """Join path components."""
    return str(Path(*parts))


def expand_path(path: str) -> str:
    """Expand ~ in path."""
    return str(Path(path).expanduser())


def modified_ns(path: str) -> int:
    """Last modification time of a file, in nanoseconds."""
    return Path(path).stat().st_mtime_ns


# File I/O
def read_text(path: str) -> str:
    """Read text file."""
    return Path(path).read_text(encoding="utf-8")


def to_json(data: Any) -> str:
    """Convert data to JSON string."""
    return json.dumps(data, indent=2)


# GraphQL type helpers
def describe(type_node: TypeNode) -> str:
    """SDL text of a type reference, e.g. ``[[Int]]!``."""
    return print_ast(type_node)


def description_of(node) -> str:
    """Description text of a definition node, empty when absent."""
    description = getattr(node, "description", None)
    if description is None:
        return ""
    return description.value


def is_java_keyword(name: str) -> bool:
    """Check if name is a reserved word in Java."""
    return name in JAVA_KEYWORDS
