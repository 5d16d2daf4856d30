"""
eventgraph
GraphQL API over in-memory users, events, locations and participants
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
