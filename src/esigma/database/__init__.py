from esigma.database.connection import Database, DatabaseError, RecordNotFoundError
from esigma.database.query import Embed, OrderBy

__all__ = ["Database", "DatabaseError", "RecordNotFoundError", "Embed", "OrderBy"]
