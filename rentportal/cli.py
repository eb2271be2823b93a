# rentportal/cli.py
import click
from flask import current_app
from flask.cli import with_appcontext

from .errors import ApiError
from .extensions import db
from .models import Role
from .services.auth_service import AuthService


def _auth_service() -> AuthService:
    return AuthService(db.session, password_rounds=current_app.config.get("PASSWORD_HASH_ROUNDS"))


@click.command("init-db")
@with_appcontext
def init_db():
    """Create all tables (use `flask db upgrade` for managed schemas)."""
    db.create_all()
    click.echo("Database tables created")


@click.command("create-user")
@click.argument("email")
@click.option("--role", type=click.Choice([r.value for r in Role]), default=Role.LANDLORD.value, show_default=True)
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--phone", default=None)
@click.password_option()
@with_appcontext
def create_user(email, role, first_name, last_name, phone, password):
    """Create a user account, e.g. the first landlord."""
    try:
        result = _auth_service().register(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            role=Role(role),
        )
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"User created: {result.user.id} {result.user.email} ({result.user.role.value})")


@click.command("deactivate-user")
@with_appcontext
@click.argument("email")
def deactivate_user(email):
    """Disable login and token refresh for a user."""
    try:
        user = _auth_service().deactivate(email)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"User deactivated: {user.id} {user.email}")


def register_cli(app) -> None:
    for command in (init_db, create_user, deactivate_user):
        app.cli.add_command(command)
