"""
Shared test fixtures and configuration for the graphql_helper test suite.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest

from graphql_helper import GraphQLHelper, GraphQLHelperConfig, Registry
from graphql_helper.transport import Transport, TransportResponse

TEST_ENDPOINT = "https://api.example.com/graphql"


class RecordingTransport(Transport):
    """Returns queued responses and records every document sent."""

    def __init__(self, *responses: TransportResponse):
        self.responses: List[TransportResponse] = list(responses)
        self.sent: List[Tuple[str, Optional[Dict[str, Any]]]] = []
        self.closed = False

    def queue(self, data: Any = None, errors: Any = None) -> None:
        self.responses.append(TransportResponse(data=data, errors=errors))

    async def send(self, document: str, variables: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        self.sent.append((document, None if variables is None else dict(variables)))
        if self.responses:
            return self.responses.pop(0)
        return TransportResponse(data={})

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def engine(registry: Registry, transport: RecordingTransport) -> GraphQLHelper:
    """Engine with an isolated registry and a recording transport."""
    config = GraphQLHelperConfig(host=TEST_ENDPOINT, client_mutation_id=lambda: "cmid-1")
    return GraphQLHelper(config=config, transport=transport, registry=registry)


@pytest.fixture
def http_engine(registry: Registry) -> GraphQLHelper:
    """Engine that talks HTTP to TEST_ENDPOINT."""
    engine = GraphQLHelper(registry=registry)
    engine.configure(host=TEST_ENDPOINT, client_mutation_id=lambda: "cmid-http")
    return engine
