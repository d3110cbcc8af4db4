"""Database management for the feed aggregator."""

from .connection import close_connection_pool, get_connection, get_connection_pool
from .gateway import Gateway
from .init import init_database, validate_connection
from .postgres import PostgresGateway

__all__ = [
    "Gateway",
    "PostgresGateway",
    "close_connection_pool",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
