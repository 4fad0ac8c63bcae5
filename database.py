"""
Database connection for ShopKart

A single MongoDB database handle is created at import time from the
DATABASE_URL and DATABASE_NAME environment variables. When either is missing
`db` stays None and the API answers data requests with 503.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel
from pymongo import MongoClient

logger = logging.getLogger("shopkart.database")

_client = None
db = None

database_url = os.getenv("DATABASE_URL")
database_name = os.getenv("DATABASE_NAME")

if database_url and database_name:
    _client = MongoClient(database_url, serverSelectionTimeoutMS=int(os.getenv("DATABASE_TIMEOUT_MS", 5000)))
    db = _client[database_name]
    logger.info("MongoDB client configured for database %s", database_name)
else:
    logger.warning("DATABASE_URL or DATABASE_NAME not set, running without a database")


def create_document(collection_name: str, data: Union[BaseModel, dict]) -> str:
    """Insert a document with created_at/updated_at stamps and return its id."""
    if db is None:
        raise RuntimeError("Database not available. Check DATABASE_URL and DATABASE_NAME environment variables.")

    if isinstance(data, BaseModel):
        data_dict = data.model_dump()
    else:
        data_dict = data.copy()

    now = datetime.now(timezone.utc)
    data_dict["created_at"] = now
    data_dict["updated_at"] = now

    result = db[collection_name].insert_one(data_dict)
    return str(result.inserted_id)

