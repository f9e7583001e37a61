"""
CLI commands

    flask --app shop_backend create-admin --email owner@example.com --username owner
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import IntegrityError

from shop_backend.auth.schemas import check_email
from shop_backend.models import AdminRole
from shop_backend.services import seed_admin


def _validate_email_option(ctx, param, value):
    try:
        return check_email(value.strip())
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.command('create-admin')
@click.option('--email', required=True, callback=_validate_email_option,
              help='Login email for the admin.')
@click.option('--username', required=True)
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--role', type=click.Choice([r.value for r in AdminRole]),
              default=AdminRole.ADMIN.value, show_default=True)
@with_appcontext
def create_admin_command(email, username, password, role):
    """Create an admin account, or reset an existing one.

    An existing admin (matched by email) gets the given username, password
    and role, and is reactivated.
    """
    try:
        admin, created = seed_admin(
            current_app.extensions['credential_store'],
            current_app.extensions['password_verifier'],
            email=email,
            username=username,
            password=password,
            role=role,
        )
    except IntegrityError:
        raise click.ClickException(f'Username "{username}" is already taken.')
    
    if created:
        click.echo(f'New {admin.role} account created: {admin.email}')
    else:
        click.echo(f'Existing admin updated: {admin.email}')


def register_commands(app):
    app.cli.add_command(create_admin_command)
