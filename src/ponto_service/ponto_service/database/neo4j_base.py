from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from neo4j.exceptions import DriverError, Neo4jError

from ..core.exceptions import StoreError
from .connection import GraphConnection

logger = logging.getLogger(__name__)

STORE_ERRORS = (Neo4jError, DriverError)


@dataclass(frozen=True)
class QueryResult:
    """Materialized outcome of one Cypher statement.

    ``records`` holds ``Record.data()`` for every row, so nodes come back as
    plain property dicts. Counters come from the result summary.
    """

    records: List[Dict[str, Any]] = field(default_factory=list)
    nodes_created: int = 0
    nodes_deleted: int = 0
    relationships_created: int = 0
    relationships_deleted: int = 0


@contextmanager
def graph_session(conn_factory: GraphConnection) -> Iterator[Any]:
    try:
        session = conn_factory.session()
    except STORE_ERRORS as e:
        raise StoreError(f"Could not open graph session: {e}") from e

    try:
        yield session
    except STORE_ERRORS as e:
        raise StoreError(f"Graph query failed: {e}") from e
    finally:
        session.close()


def run_query(
    conn_factory: GraphConnection,
    query: str,
    parameters: Optional[Mapping[str, Any]] = None,
) -> QueryResult:
    """Run one parameterized statement as an auto-commit unit of work.

    Failures surface as ``StoreError``; nothing is retried.
    """

    with graph_session(conn_factory) as session:
        result = session.run(query, dict(parameters or {}))
        records = [record.data() for record in result]
        counters = result.consume().counters

    logger.debug("Cypher returned %d row(s): %s", len(records), " ".join(query.split()))
    return QueryResult(
        records=records,
        nodes_created=int(counters.nodes_created),
        nodes_deleted=int(counters.nodes_deleted),
        relationships_created=int(counters.relationships_created),
        relationships_deleted=int(counters.relationships_deleted),
    )
