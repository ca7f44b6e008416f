"""
Reset the SQL progress database.

DANGEROUS: This deletes all flashcard progress for every user!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_progress_db
"""

from prepcards import config
from prepcards.srs import database


def main():
    print("=" * 60)
    print("WARNING: Reset Progress Database")
    print("=" * 60)
    print()
    print(f"Database: {config.get_database_url()}")
    print("This will DELETE all flashcard progress:")
    print("  - Card statuses and review counters")
    print("  - Scheduled review dates")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        database.reset_db(database.get_engine())
        print("Database reset complete!")
        print("\nThe database now has an empty progress table.")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
