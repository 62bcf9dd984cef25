import logging
import sys

from database import DEFAULT_FILE_NAME, RideDatabase
from errors import StorageError
from inventory import RideInventory
from managing_system import ManagingSystem

logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def main(file_name=DEFAULT_FILE_NAME):
    """Main application entry point"""
    setup_logging()

    db = RideDatabase(file_name)                 # Storage for the rides file
    inventory = RideInventory(db.load())         # Rides held in memory while the menu runs
    system = ManagingSystem(inventory)

    system.run()

    try:
        db.save(inventory.list_all())
    except StorageError as e:
        logger.error("Final save failed: %s", e)
        print(f"Error: {e}. Your changes were NOT saved.")
        return 1

    print("Saved. Goodbye!")
    return 0


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    sys.exit(main())
