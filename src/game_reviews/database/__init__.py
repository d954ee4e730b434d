from .base import Base
from .session import get_async_session, get_engine, get_sessionmaker, build_engine, dispose_engine

__all__ = [
    "Base",
    "get_async_session",
    "get_engine",
    "get_sessionmaker",
    "build_engine",
    "dispose_engine",
]
