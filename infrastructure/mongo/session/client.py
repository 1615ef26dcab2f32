from typing import Any

from pymongo import MongoClient
from pymongo.database import Database


def create_client(mongo_uri: str) -> MongoClient[Any]:
    """
    Crea el cliente de MongoDB.

    `tz_aware=True` hace que las fechas vuelvan como datetime en UTC.
    """
    return MongoClient(mongo_uri, tz_aware=True)


def get_db(client: MongoClient[Any], db_name: str) -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    return client[db_name]
