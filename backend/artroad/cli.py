import click
from flask import Flask

from artroad.application.admin_accounts import create_admin
from artroad.domain.exceptions import ContentError
from artroad.extensions import db
from artroad.seeds import seed_all


def register_commands(app: Flask):
    @app.cli.command("create-db")
    def create_db():
        """Create all tables (use `flask db upgrade` once migrations exist)."""
        db.create_all()
        click.echo("Tables created")

    @app.cli.command("seed")
    def seed():
        """Insert sample services, leads and settings into empty tables."""
        counts = seed_all()
        for table, count in counts.items():
            click.echo(f"{table}: {count} inserted")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.option("--name", default="Administrator", show_default=True)
    @click.password_option()
    def create_admin_command(email, name, password):
        """Create an admin account able to sign in to the dashboard."""
        try:
            user = create_admin({"email": email, "name": name, "password": password})
        except ContentError as exc:
            raise click.ClickException(f"{exc.message} ({exc.code})") from exc
        click.echo(f"Admin {user.email} created (id={user.id})")
