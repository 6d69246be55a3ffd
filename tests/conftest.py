import os
import sys
from pathlib import Path

import pytest
from pymongo.errors import AutoReconnect

os.environ['MONGO_MOCK'] = '1'

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from db import DESIGN_ITEMS_COLLECTION, get_db


class InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class RecordingCollection:
    def __init__(self, name, database):
        self.name = name
        self.database = database

    def insert_one(self, document):
        database = self.database
        database.calls.append((self.name, dict(document)))
        if len(database.calls) == database.fail_on_call:
            raise database.error
        return InsertResult(len(database.calls))


class RecordingDatabase:
    """Stands in for a pymongo Database; records every insert_one call."""

    def __init__(self, fail_on_call=None, error=None):
        self.fail_on_call = fail_on_call
        self.error = error or AutoReconnect('connection reset by peer')
        self.calls = []

    def __getitem__(self, name):
        return RecordingCollection(name, self)


@pytest.fixture
def recording_db():
    return RecordingDatabase()


@pytest.fixture
def failing_db():
    def make(fail_on_call, error=None):
        return RecordingDatabase(fail_on_call=fail_on_call, error=error)
    return make


@pytest.fixture(autouse=True)
def clear_db():
    get_db()[DESIGN_ITEMS_COLLECTION].delete_many({})
    yield
