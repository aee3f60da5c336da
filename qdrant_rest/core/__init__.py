from .config import ConnectionConfig

__all__ = ["ConnectionConfig"]
