from peewee import Database
from playhouse.db_url import connect


def create_database(database_url: str) -> Database:
    """Crea la conexión a partir de una URL (sqlite:///..., postgresql://...)."""
    return connect(database_url)
