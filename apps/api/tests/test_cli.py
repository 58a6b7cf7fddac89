"""Tests for the admin CLI."""
import pytest
from click.testing import CliRunner

from contacts_api import cli as cli_module
from contacts_api.core.security import verify_password
from contacts_api.db.models import Account, Contact, Organization, User


@pytest.fixture
def runner(db, monkeypatch) -> CliRunner:
    monkeypatch.setattr(cli_module, "SessionLocal", lambda: db)
    return CliRunner()


def test_create_account(runner, db):
    result = runner.invoke(
        cli_module.cli,
        [
            "create-account",
            "--name", "Acme Corporation",
            "--email", "Owner@Example.com",
            "--password", "secret",
            "--first-name", "Ada",
            "--last-name", "Lovelace",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Created account 'Acme Corporation'" in result.output

    user = db.query(User).filter(User.email == "owner@example.com").one()
    assert user.owner is True
    assert user.account.name == "Acme Corporation"
    assert verify_password("secret", user.password)


def test_create_account_duplicate_email(runner, db, test_user):
    result = runner.invoke(
        cli_module.cli,
        [
            "create-account",
            "--name", "Second",
            "--email", test_user.email,
            "--password", "secret",
            "--first-name", "Jane",
            "--last-name", "Doe",
        ],
    )

    assert result.exit_code != 0
    assert "already exists" in result.output
    assert db.query(Account).count() == 1


def test_create_organization(runner, db, test_account):
    account_id = test_account.id

    result = runner.invoke(
        cli_module.cli,
        ["create-organization", "--account-id", str(account_id), "--name", "Acme Inc."],
    )

    assert result.exit_code == 0, result.output
    organization = db.query(Organization).one()
    assert organization.account_id == account_id
    assert organization.name == "Acme Inc."


def test_create_organization_unknown_account(runner, db):
    result = runner.invoke(
        cli_module.cli,
        ["create-organization", "--account-id", "404", "--name", "Nowhere"],
    )

    assert result.exit_code != 0
    assert "Account 404 not found" in result.output


def test_seed_contacts(runner, db, test_account):
    account_id = test_account.id

    result = runner.invoke(
        cli_module.cli,
        ["seed-contacts", "--account-id", str(account_id), "--count", "12", "--organizations", "2"],
    )

    assert result.exit_code == 0, result.output
    assert "Created 12 contacts and 2 organizations" in result.output
    assert db.query(Contact).filter(Contact.account_id == account_id).count() == 12


def test_seed_contacts_unknown_account(runner, db):
    result = runner.invoke(cli_module.cli, ["seed-contacts", "--account-id", "404"])

    assert result.exit_code != 0
    assert db.query(Contact).count() == 0
