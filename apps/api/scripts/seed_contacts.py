"""
Seed script to create mock organizations and contacts for an account.
Run with: python -m scripts.seed_contacts

Environment:
    SEED_ACCOUNT_ID     account to seed (defaults to the first account)
    SEED_ORGANIZATIONS  number of organizations to create (default 10)
    SEED_CONTACTS       number of contacts to create (default 100)
"""

import os

from contacts_api.db.models import Account
from contacts_api.db.session import SessionLocal
from contacts_api.services import contact_seeder


def main():
    """Main entry point."""
    print("Seeding contacts...")

    db = SessionLocal()

    try:
        account_id = os.getenv("SEED_ACCOUNT_ID")
        if account_id:
            account = db.get(Account, int(account_id))
        else:
            account = db.query(Account).order_by(Account.id).first()
        if not account:
            print("ERROR: No account found. Run create-account first.")
            return

        print(f"Using account: {account.name} ({account.id})")

        result = contact_seeder.seed_all(
            db,
            account.id,
            organizations=int(os.getenv("SEED_ORGANIZATIONS", "10")),
            contacts=int(os.getenv("SEED_CONTACTS", "100")),
        )

        print("\nContacts seeded successfully!")
        print(f"  - {result['organizations_created']} organizations created")
        print(f"  - {result['contacts_created']} contacts created")

    except Exception as e:
        print(f"ERROR: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
