import click
from flask import Blueprint

from seed_design_items import seed_design_items

seed_commands = Blueprint('seed_commands', __name__, cli_group='seed')

# Database handle (assigned from app.py)
db = None

def init_seed_commands(database):
    """Initialize blueprint with the database the seed commands write to."""
    global db
    db = database

# ----------------------------
# 🎨 Design item catalog
# ----------------------------
@seed_commands.cli.command('design-items')
def design_items():
    """Insert the design item catalog into the designItems collection."""
    result = seed_design_items(db)
    if not result.ok:
        raise click.ClickException(
            f"Seeding stopped after {result.inserted_count} design items: {result.error}"
        )
    click.echo(f"✅ Seeded {result.inserted_count} design items.")
