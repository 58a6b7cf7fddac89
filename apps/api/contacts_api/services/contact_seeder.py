"""
Demo data seeder for contacts and organizations.

Generates US-style contacts with created_at spread over the last two
months so every dashboard window has something to count.
"""
import random
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from contacts_api.db.models import Contact, Organization


# =============================================================================
# Sample data pools
# =============================================================================

FIRST_NAMES = [
    "Emma", "Olivia", "Ava", "Isabella", "Sophia", "Mia", "Charlotte", "Amelia",
    "Harper", "Evelyn", "James", "John", "Robert", "Michael", "William", "David",
    "Richard", "Joseph", "Thomas", "Daniel", "Matthew", "Anthony", "Grace", "Lucy",
    "Nora", "Hazel", "Claire", "Kevin", "Brian", "George",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
    "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson",
]

US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]

CITIES = [
    "Springfield", "Riverside", "Franklin", "Greenville", "Bristol", "Clinton",
    "Fairview", "Salem", "Madison", "Georgetown", "Arlington", "Ashland",
]

STREETS = [
    "Main St", "Oak Ave", "Pine Rd", "Maple Dr", "Cedar Ln", "Elm St",
    "Lakeview Blvd", "Sunset Ave", "Park Pl", "Hillcrest Rd",
]

COMPANY_WORDS = [
    "Acme", "Globex", "Initech", "Umbrella", "Stark", "Wayne", "Hooli",
    "Vandelay", "Wonka", "Soylent", "Cyberdyne", "Tyrell",
]

COMPANY_SUFFIXES = ["Inc.", "LLC", "Group", "Partners", "Holdings"]

# Reserved for documentation, never delivers mail
SAFE_DOMAINS = ["example.com", "example.org", "example.net"]


def random_phone(rng: random.Random) -> str:
    """US phone number in (###) ###-#### form."""
    return f"({rng.randint(200, 999)}) {rng.randint(100, 999)}-{rng.randint(1000, 9999)}"


def random_email(rng: random.Random, first: str, last: str, idx: int) -> str:
    return f"{first.lower()}.{last.lower()}{idx}@{rng.choice(SAFE_DOMAINS)}"


def random_created_at(rng: random.Random, now: datetime) -> datetime:
    """Somewhere within the last two months."""
    return now - timedelta(seconds=rng.randint(0, 60 * 24 * 3600))


def create_organizations(
    db: Session,
    account_id: int,
    count: int = 10,
    rng: random.Random | None = None,
) -> list[Organization]:
    """Create organizations contacts can be attached to."""
    rng = rng or random.Random()

    organizations = []
    for _ in range(count):
        name = f"{rng.choice(COMPANY_WORDS)} {rng.choice(COMPANY_SUFFIXES)}"
        organization = Organization(
            account_id=account_id,
            name=name,
            city=rng.choice(CITIES),
            region=rng.choice(US_STATES),
            country="US",
            postal_code=f"{rng.randint(10000, 99999)}",
        )
        db.add(organization)
        organizations.append(organization)

    db.commit()
    return organizations


def create_contacts(
    db: Session,
    account_id: int,
    count: int = 100,
    organizations: list[Organization] | None = None,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[Contact]:
    """
    Create contacts with US-style addresses.

    About two thirds are linked to one of ``organizations`` when any are given.
    created_at is spread over the last two months so dashboard windows fill up.
    """
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)

    contacts = []
    for idx in range(1, count + 1):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        organization = None
        if organizations and rng.random() < 0.66:
            organization = rng.choice(organizations)

        created_at = random_created_at(rng, now)
        contact = Contact(
            account_id=account_id,
            organization_id=organization.id if organization else None,
            first_name=first,
            last_name=last,
            email=random_email(rng, first, last, idx),
            phone=random_phone(rng),
            address=f"{rng.randint(100, 9999)} {rng.choice(STREETS)}",
            city=rng.choice(CITIES),
            region=rng.choice(US_STATES),
            country="US",
            postal_code=f"{rng.randint(10000, 99999)}",
            created_at=created_at,
            updated_at=created_at,
        )
        db.add(contact)
        contacts.append(contact)

        if idx % 50 == 0:
            db.flush()

    db.commit()
    return contacts


def seed_all(
    db: Session,
    account_id: int,
    organizations: int = 10,
    contacts: int = 100,
    rng: random.Random | None = None,
) -> dict:
    """Create organizations, then contacts linked to them."""
    rng = rng or random.Random()
    created_orgs = create_organizations(db, account_id, count=organizations, rng=rng)
    created_contacts = create_contacts(
        db, account_id, count=contacts, organizations=created_orgs, rng=rng
    )
    return {
        "organizations_created": len(created_orgs),
        "contacts_created": len(created_contacts),
    }
