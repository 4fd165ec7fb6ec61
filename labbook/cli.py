"""Command line tools, available as ``flask labbook <command>``."""
import click
from flask.cli import AppGroup

from labbook.core.extensions import db
from labbook.core.models import User

labbook = AppGroup("labbook", help="Manage the labbook database and users.")


@labbook.command()
def initdb():
    """Create all tables."""
    db.create_all()
    click.echo("Database initialized")


@labbook.command()
@click.confirmation_option(prompt="Are you sure you want to drop the database?")
def dropdb():
    """Drop the application DB."""
    click.echo(f"Dropping DB using engine: {db.engine.url!r}")
    db.drop_all()


@labbook.command()
@click.argument("email")
@click.argument("password")
@click.option("--first-name", default="")
@click.option("--last-name", default="")
@click.option("--admin", is_flag=True, default=False)
def createuser(email, password, first_name, last_name, admin):
    """Create new user."""
    if User.get_by_email(email) is not None:
        raise click.ClickException(
            f"A user with email '{email}' already exists, aborting."
        )

    user = User(
        email=email,
        password=password,
        first_name=first_name,
        last_name=last_name,
        is_admin=admin,
    )
    db.session.add(user)
    db.session.commit()
    click.echo(f"User {email} added")
