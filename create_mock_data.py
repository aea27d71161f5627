"""
Seed and Mock Data Generator for the Wedding Guest Manager
Run this script to create the default family accounts and predefined guest
groups, and optionally fill a development database with realistic sample data.

Usage:
    python create_mock_data.py

Requirements:
    pip install faker passlib[bcrypt]
"""

import random
from datetime import datetime, timedelta
from faker import Faker
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from guestlist.database import SessionLocal, init_db
from guestlist.database_setup import ensure_predefined_groups
from guestlist.models import (
    User,
    Group,
    Label,
    GroupLabel,
    Guest,
    Function,
    Invite,
    RSVP,
    Expense,
)
from guestlist.models.enums import HouseholdRole
from guestlist.services.group_service import GroupService

# Initialize Faker
fake = Faker()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEFAULT_PASSWORD = "password123"

FUNCTION_TEMPLATES = [
    ("Mehndi", "mehndi", "Garden Lawn"),
    ("Sangeet", "sangeet", "Banquet Hall"),
    ("Nikah", "ceremony", "Community Masjid"),
    ("Walima", "reception", "Grand Ballroom"),
]

EXPENSE_DESCRIPTIONS = [
    "Venue deposit",
    "Catering advance",
    "Flowers and decor",
    "Photographer",
    "Invitation cards",
    "Mehndi artist",
    "Sound system",
    "Guest transport",
]


class MockDataGenerator:
    def __init__(self, db: Session):
        self.db = db
        self.users = []
        self.groups = []
        self.guests = []
        self.functions = []
        self.invites = []

    def clear_existing_data(self):
        """Clear existing data (use with caution!)"""
        print("🗑️  Clearing existing data...")

        # Delete in reverse dependency order
        self.db.query(RSVP).delete()
        self.db.query(Invite).delete()
        self.db.query(Guest).delete()
        self.db.query(Function).delete()
        self.db.query(GroupLabel).delete()
        self.db.query(Label).delete()
        self.db.query(Group).delete()
        self.db.query(Expense).delete()

        self.db.commit()
        print("✅ Existing data cleared")

    def create_default_users(self):
        """One account per family role; existing accounts are left untouched"""
        print("👥 Creating default users...")

        for role in HouseholdRole:
            email = f"{role.value}@wedding.com"
            user = self.db.query(User).filter(User.email == email).first()
            if not user:
                user = User(
                    email=email,
                    name=role.value.capitalize(),
                    role=role.value,
                    hashed_password=pwd_context.hash(DEFAULT_PASSWORD),
                )
                self.db.add(user)
            self.users.append(user)

        self.db.commit()
        print(f"✅ Default users ready, all with password: {DEFAULT_PASSWORD}")

    def create_predefined_groups(self):
        print("📁 Creating predefined groups...")

        created = ensure_predefined_groups(self.db)
        self.groups = self.db.query(Group).filter(Group.is_predefined.is_(True)).all()
        print(f"✅ Predefined groups ready ({created} new)")

    def create_labels(self):
        """Create a few labels and attach them to random groups"""
        print("🏷️  Creating labels...")

        for name in ["Bride side", "Groom side", "Out of town", "VIP"]:
            label = self.db.query(Label).filter(Label.name == name).first()
            if not label:
                label = Label(name=name)
                self.db.add(label)
                self.db.flush()

            for group in random.sample(self.groups, k=min(2, len(self.groups))):
                exists = (
                    self.db.query(GroupLabel)
                    .filter(
                        GroupLabel.group_id == group.id,
                        GroupLabel.label_id == label.id,
                    )
                    .first()
                )
                if not exists:
                    self.db.add(GroupLabel(group_id=group.id, label_id=label.id))

        self.db.commit()

    def create_guests(self, count=40):
        """Create mock guest households spread over the groups"""
        print(f"🧑‍🤝‍🧑 Creating {count} guests...")

        group_service = GroupService(self.db)
        groups = self.groups or [group_service.get_default_group()]

        for _ in range(count):
            name = fake.unique.name()
            if self.db.query(Guest).filter(Guest.name == name).first():
                continue

            guest = Guest(
                name=name,
                ladies=random.randint(0, 3),
                gents=random.randint(0, 3),
                children=random.randint(0, 2),
                notes=fake.sentence() if random.random() < 0.2 else None,
                group_id=random.choice(groups).id,
            )
            self.db.add(guest)
            self.guests.append(guest)

        self.db.commit()

    def create_functions(self):
        print("📅 Creating functions...")

        start = datetime.now().replace(hour=18, minute=0, second=0, microsecond=0)
        for offset, (name, function_type, venue) in enumerate(FUNCTION_TEMPLATES):
            function = Function(
                name=name,
                type=function_type,
                venue=venue,
                date=start + timedelta(days=30 + offset),
            )
            self.db.add(function)
            self.functions.append(function)

        self.db.commit()

    def create_invites_and_rsvps(self):
        """Invite most guests to most functions; some have already replied"""
        print("💌 Creating invites and RSVPs...")

        for guest in self.guests:
            for function in self.functions:
                if random.random() < 0.25:
                    continue

                invite = Invite(
                    guest_id=guest.id,
                    function_id=function.id,
                    ladies_invited=guest.ladies,
                    gents_invited=guest.gents,
                    children_invited=guest.children,
                )
                self.db.add(invite)
                self.invites.append(invite)

                if random.random() < 0.4:
                    self.db.add(
                        RSVP(
                            guest_id=guest.id,
                            function_id=function.id,
                            ladies_final=random.randint(0, guest.ladies),
                            gents_final=random.randint(0, guest.gents),
                            children_final=random.randint(0, guest.children),
                            notes=fake.sentence() if random.random() < 0.3 else None,
                        )
                    )

        self.db.commit()

    def create_expenses(self, count=12):
        print(f"💰 Creating {count} expenses...")

        for _ in range(count):
            self.db.add(
                Expense(
                    description=random.choice(EXPENSE_DESCRIPTIONS),
                    amount=round(random.uniform(50, 5000), 2),
                    paid_by=random.choice(list(HouseholdRole)).value,
                    note=fake.sentence() if random.random() < 0.3 else None,
                )
            )

        self.db.commit()

    def generate_all_data(self, with_samples=False, clear_existing=False):
        """Generate seed data and, when asked, sample data"""
        print("🚀 Starting data generation...")

        if clear_existing:
            self.clear_existing_data()

        self.create_default_users()
        self.create_predefined_groups()

        if with_samples:
            self.create_labels()
            self.create_guests(count=40)
            self.create_functions()
            self.create_invites_and_rsvps()
            self.create_expenses(count=12)

        print("🎉 Data generation completed!")
        print("📊 Summary:")
        print(f"   - Users: {len(self.users)}")
        print(f"   - Predefined groups: {len(self.groups)}")
        print(f"   - Guests: {len(self.guests)}")
        print(f"   - Functions: {len(self.functions)}")
        print(f"   - Invites: {len(self.invites)}")


def main():
    """Main function to run the seed and mock data generator"""
    print("💍 Wedding Guest Manager Seed Data")
    print("=" * 40)

    # Initialize database
    init_db()

    # Create database session
    db = SessionLocal()

    try:
        generator = MockDataGenerator(db)

        with_samples = input("Add sample guests and functions? (y/N): ")
        with_samples = with_samples.lower().startswith("y")
        clear_existing = False
        if with_samples:
            clear_existing = input("Clear existing data? (y/N): ").lower().startswith("y")

        generator.generate_all_data(
            with_samples=with_samples, clear_existing=clear_existing
        )

        print("\n✅ Seed data generation successful!")

    except Exception as e:
        print(f"\n❌ Error generating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
