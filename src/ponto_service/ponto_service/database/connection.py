from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from neo4j import GraphDatabase

logger = logging.getLogger(__name__)


@dataclass
class GraphConfig:
    uri: str
    user: str
    password: str
    database: Optional[str] = None


class GraphConnection:
    """Graph store connection factory.

    Owns one neo4j driver (its internal pool is left at driver defaults) and
    opens a short-lived session per operation. Built once by the container and
    closed on shutdown; there is no module-level instance.
    """

    def __init__(self, config: GraphConfig, *, driver: Any = None):
        self._config = config
        self._driver = driver

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def driver(self):
        # Created lazily so building the app does not require a reachable store.
        if self._driver is None:
            logger.debug("Opening neo4j driver for %s", self._config.uri)
            self._driver = GraphDatabase.driver(
                self._config.uri,
                auth=(self._config.user, self._config.password),
            )
        return self._driver

    def session(self):
        if self._config.database:
            return self.driver.session(database=self._config.database)
        return self.driver.session()

    def close(self) -> None:
        if self._driver is not None:
            self._driver.close()
            self._driver = None
