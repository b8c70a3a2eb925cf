import os

GRAPH_CONFIG = {
    "uri": os.getenv("NEO4J_URI", "bolt://localhost:7687"),
    "user": os.getenv("NEO4J_USER", "neo4j"),
    "password": os.getenv("NEO4J_PASSWORD", "test"),
    "database": os.getenv("NEO4J_DATABASE") or None,
}

PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"
