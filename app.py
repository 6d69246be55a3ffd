from flask import Flask
from pymongo.errors import PyMongoError

from db import get_db
from api.seed_commands import seed_commands, init_seed_commands

app = Flask(__name__)

# MongoDB connection with error handling
try:
    db = get_db()
    init_seed_commands(db)
    app.register_blueprint(seed_commands)
except PyMongoError:
    app.logger.error("Error connecting to MongoDB. Check server and URI.")
    raise
