from .db.tables import User

__all__ = ["User"]
