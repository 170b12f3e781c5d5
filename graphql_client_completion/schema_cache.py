"""Schema loading and caching."""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Union

from graphql import GraphQLError

from . import parser, utils
from .config import Config
from .declarations import FieldOrArgument, members_of
from .notifications import Notifier, Severity
from .parser import ParsedSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Workspace:
    """The project the host currently has open."""

    name: str
    root_path: Optional[str]


WorkspaceResolver = Callable[[], Optional[Workspace]]


class SchemaUnavailable(Exception):
    """Base class for reasons the schema cannot be used."""

    severity = Severity.ERROR


class NoActiveWorkspace(SchemaUnavailable):
    def __init__(self):
        super().__init__("no active project")


class NoResolvableRoot(SchemaUnavailable):
    def __init__(self, workspace_name: str):
        super().__init__(f"no base path in project {workspace_name}")


class SchemaFileMissing(SchemaUnavailable):
    severity = Severity.WARNING

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"no GraphQL schema found at {path}")


class SchemaParseFailure(SchemaUnavailable):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"parsing of schema at {path} failed:\n{reason}")


@dataclass(frozen=True)
class SchemaSource:
    """Schema file path and the modification time it was parsed at."""

    path: str
    modified_ns: int


@dataclass(frozen=True)
class Unloaded:
    pass


@dataclass(frozen=True)
class Loaded:
    schema: ParsedSchema
    source: SchemaSource


CacheState = Union[Unloaded, Loaded]


class SchemaCache:
    """
    Parsed view of ``<workspace root>/schema.graphql``, reloaded when the file changes.

    Queries never raise: when the schema is unavailable they return empty
    results and report the reason through the notifier. A failed reparse
    keeps the last good schema in the cache; the failing call still returns
    nothing.
    """

    def __init__(
        self,
        workspace_resolver: WorkspaceResolver,
        notifier: Notifier,
        cfg: Optional[Config] = None,
        parse: Callable[[str], ParsedSchema] = parser.parse_schema_file,
    ):
        self._resolve_workspace = workspace_resolver
        self.notifier = notifier
        self.cfg = cfg or Config()
        self._parse = parse
        self._state: CacheState = Unloaded()
        self._reload_lock = threading.Lock()

    @property
    def state(self) -> CacheState:
        return self._state

    def type_names(self) -> set[str]:
        """Names of all type definitions, or an empty set."""
        schema = self.schema()
        if schema is None:
            return set()
        return set(schema)

    def fields_in(self, type_name: str) -> list[FieldOrArgument]:
        """Fields (or input values) of the named type, in declaration order."""
        schema = self.schema()
        if schema is None:
            return []
        type_definition = schema.get(type_name)
        if type_definition is None:
            return []
        return members_of(type_definition)

    def schema(self) -> Optional[ParsedSchema]:
        """Current schema, reloading it if the file changed; None if unavailable."""
        try:
            return self._load(self.schema_path())
        except SchemaUnavailable as e:
            self.notifier.notify(e.severity, str(e))
            return None

    def schema_path(self) -> str:
        """
        Resolve the schema file of the active workspace.

        Raises:
            NoActiveWorkspace: If the host has no workspace open
            NoResolvableRoot: If the workspace has no root directory
            SchemaFileMissing: If the schema file does not exist
        """
        workspace = self._resolve_workspace()
        if workspace is None:
            raise NoActiveWorkspace()
        if not workspace.root_path:
            raise NoResolvableRoot(workspace.name)
        path = utils.join(workspace.root_path, self.cfg.schema_file_name)
        if not utils.exists(path):
            raise SchemaFileMissing(path)
        return path

    def invalidate(self) -> None:
        """Drop the cached schema."""
        with self._reload_lock:
            self._state = Unloaded()

    def _load(self, path: str) -> ParsedSchema:
        try:
            modified = utils.modified_ns(path)
        except OSError as e:
            raise SchemaParseFailure(path, str(e)) from e

        state = self._state
        if self._is_fresh(state, path, modified):
            return state.schema

        with self._reload_lock:
            # another caller may have reloaded while we waited
            state = self._state
            if self._is_fresh(state, path, modified):
                return state.schema

            logger.debug("reload schema")
            try:
                schema = self._parse(path)
            except (GraphQLError, OSError, UnicodeDecodeError) as e:
                raise SchemaParseFailure(path, getattr(e, "message", None) or str(e)) from e
            self._state = Loaded(schema, SchemaSource(path, modified))
            self.notifier.clear()
            return schema

    @staticmethod
    def _is_fresh(state: CacheState, path: str, modified: int) -> bool:
        if not isinstance(state, Loaded):
            return False
        # a different workspace root means a different file
        if state.source.path != path:
            return False
        return modified <= state.source.modified_ns
