"""Shared fixtures."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from pathlib import Path

import pytest
from graphql_client_completion.notifications import Notification, Notifier
from graphql_client_completion.schema_cache import SchemaCache, Workspace

SCHEMA = '''
type Query {
  "Find a hero by class"
  hero(class: String): Character
  heroes(first: Int!): [Character!]!
}

type Mutation {
  createHero(name: String!, tags: [String!]): Character!
}

type Character {
  id: ID!
  "Age in years"
  age: Int
  tags: [String!]!
}

input CharacterFilter {
  name: String
  ids: [ID!]
}

enum Side { LIGHT DARK }

scalar Date
'''


class ImmediateExecutor(Executor):
    """Runs submitted work on the calling thread."""

    def submit(self, fn, /, *args, **kwargs):
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as e:
            future.set_exception(e)
        return future


class RecordingSink:
    def __init__(self) -> None:
        self.received: list[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.received.append(notification)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.received]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def notifier(sink: RecordingSink) -> Notifier:
    return Notifier(sink, executor=ImmediateExecutor())


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    return Workspace(name="demo", root_path=str(tmp_path))


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.graphql"
    path.write_text(SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def cache(workspace: Workspace, notifier: Notifier) -> SchemaCache:
    return SchemaCache(lambda: workspace, notifier)
