# db.py
from pymongo import MongoClient
import os
from dotenv import load_dotenv

load_dotenv()

MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/")
MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "design_studio")
DESIGN_ITEMS_COLLECTION = "designItems"

_client = None


def get_client():
    """Return the shared Mongo client, creating it on first use.

    Set MONGO_MOCK=1 to get an in-memory client instead (used by the tests).
    """
    global _client
    if _client is None:
        if os.environ.get("MONGO_MOCK") == "1":
            import mongomock
            _client = mongomock.MongoClient()
        else:
            _client = MongoClient(MONGO_URI)
    return _client


def get_db():
    return get_client()[MONGO_DB_NAME]
