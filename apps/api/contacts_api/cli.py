"""CLI tools for contacts API administration."""

import click

from contacts_api.db.models import Account, Organization
from contacts_api.db.session import SessionLocal
from contacts_api.services import auth_service, contact_seeder


@click.group()
def cli():
    """Contacts API CLI tools."""
    pass


@cli.command()
@click.option("--name", required=True, help="Account (tenant) name")
@click.option("--email", required=True, help="Owner email address")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Owner password")
@click.option("--first-name", required=True, help="Owner first name")
@click.option("--last-name", required=True, help="Owner last name")
def create_account(name: str, email: str, password: str, first_name: str, last_name: str):
    """
    Create an account and its owner user.

    This is the bootstrap command for setting up a new tenant.
    The owner logs in through POST /api/login with these credentials.

    Example:
        contacts-api create-account --name "Acme Corp" --email owner@acme.com \\
            --first-name Ada --last-name Lovelace
    """
    db = SessionLocal()
    try:
        try:
            account, user = auth_service.create_account_with_owner(
                db,
                account_name=name,
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
            )
        except ValueError as e:
            raise click.ClickException(str(e))

        click.echo(f"Created account '{account.name}' (id={account.id})")
        click.echo(f"Owner: {user.email} (id={user.id})")
    finally:
        db.close()


@cli.command()
@click.option("--account-id", required=True, type=int, help="Owning account id")
@click.option("--name", required=True, help="Organization name")
def create_organization(account_id: int, name: str):
    """
    Create an organization contacts can be linked to.

    Example:
        contacts-api create-organization --account-id 1 --name "Acme Inc."
    """
    db = SessionLocal()
    try:
        if not db.get(Account, account_id):
            raise click.ClickException(f"Account {account_id} not found")

        organization = Organization(account_id=account_id, name=name)
        db.add(organization)
        db.commit()
        click.echo(f"Created organization '{organization.name}' (id={organization.id})")
    finally:
        db.close()


@cli.command()
@click.option("--account-id", required=True, type=int, help="Account to seed")
@click.option("--count", default=100, show_default=True, type=click.IntRange(min=0), help="Contacts to create")
@click.option("--organizations", default=10, show_default=True, type=click.IntRange(min=0), help="Organizations to create")
def seed_contacts(account_id: int, count: int, organizations: int):
    """
    Insert demo contacts spread over the last two months.

    Example:
        contacts-api seed-contacts --account-id 1 --count 100
    """
    db = SessionLocal()
    try:
        if not db.get(Account, account_id):
            raise click.ClickException(f"Account {account_id} not found")

        result = contact_seeder.seed_all(
            db, account_id, organizations=organizations, contacts=count
        )
        click.echo(
            f"Created {result['contacts_created']} contacts and "
            f"{result['organizations_created']} organizations in account {account_id}"
        )
    finally:
        db.close()


if __name__ == "__main__":
    cli()
