import math
from enum import Enum

from errors import RideTrackerError
from ride import MAX_FRIGHT, MIN_COST, MIN_FRIGHT, MIN_VISITORS, check_name


class State(Enum):
    RUNNING = "running"
    EXITING = "exiting"


def parse_int(text, low, high=None):
    """Return text as an int within [low, high], or None if it isn't one"""
    try:
        value = int(text)
    except (TypeError, ValueError):
        return None
    if value < low or (high is not None and value > high):
        return None
    return value


def parse_float(text, low):
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < low:
        return None
    return value


def read_int(prompt, low, high=None):
    """Prompt until the user types a whole number in range"""
    while True:
        value = parse_int(input(prompt), low, high)
        if value is not None:
            return value
        print("Invalid number.")


def read_float(prompt, low):
    """Prompt until the user types a number of at least `low`"""
    while True:
        value = parse_float(input(prompt), low)
        if value is not None:
            return value
        print("Invalid number.")


class ManagingSystem:
    """Text menu for the ride inventory"""

    def __init__(self, inventory):
        self.inventory = inventory
        self.state = State.RUNNING
        self.handlers = {
            "1": self.display_all,
            "2": self.search,
            "3": self.add_ride,
            "4": self.edit_ride,
            "5": self.remove_ride,
            "6": self.quit,
        }

    def display_menu(self):
        """Display main system menu"""
        print("\n--- Thrilladelphia Ride Menu ---")
        print("1. Display All Rides")
        print("2. Search Ride")
        print("3. Add Ride")
        print("4. Edit Ride")
        print("5. Remove Ride")
        print("6. Quit")

    def run(self):
        """Loop over the menu until the user quits or input runs out"""
        while self.state is State.RUNNING:
            self.display_menu()
            try:
                choice = input("Choice: ")
                handler = self.handlers.get(choice)
                if handler is None:
                    print("Invalid option.")
                    continue
                handler()
            except EOFError:
                self.quit()

    def quit(self):
        self.state = State.EXITING

    # ---------- Handlers ----------
    def display_all(self):
        rides = self.inventory.list_all()
        if not rides:
            print("No rides yet.")
            return

        print("\nName            FF    Cost     Visitors")
        print("-" * 40)
        for ride in rides:
            print(ride)

    def search(self):
        name = input("Enter ride name: ")
        ride = self.inventory.find_by_name(name)
        if ride is None:
            print("Ride not found.")
            return
        print("\n" + ride.details())

    def add_ride(self):
        name = input("Ride name: ")
        try:
            name = check_name(name)
        except RideTrackerError as e:
            print(f"Error adding ride: {e}")
            return
        # Check duplicates before asking for the numbers
        if self.inventory.find_by_name(name) is not None:
            print("A ride with that name already exists.")
            return

        fright = read_int(f"Fright Factor ({MIN_FRIGHT}-{MAX_FRIGHT}): ", MIN_FRIGHT, MAX_FRIGHT)
        cost = read_float(f"Cost (>={MIN_COST:g}): ", MIN_COST)
        visitors = read_int("Visitors Today: ", MIN_VISITORS)

        try:
            self.inventory.add(name, fright, cost, visitors)
        except RideTrackerError as e:
            print(f"Error adding ride: {e}")
            return
        print("Ride added.")

    def edit_ride(self):
        name = input("Ride name to edit: ")
        ride = self.inventory.find_by_name(name)
        if ride is None:
            print("Ride not found.")
            return

        fright = read_int(f"New Fright Factor ({ride.fright_factor}): ", MIN_FRIGHT, MAX_FRIGHT)
        cost = read_float(f"New Cost ({ride.cost_to_enter:.2f}): ", MIN_COST)
        visitors = read_int(f"New Visitors ({ride.visitors_today}): ", MIN_VISITORS)

        try:
            self.inventory.edit(name, fright, cost, visitors)
        except RideTrackerError as e:
            print(f"Error editing ride: {e}")
            return
        print("Ride updated.")

    def remove_ride(self):
        name = input("Ride name to remove: ")
        try:
            self.inventory.remove(name)
        except RideTrackerError as e:
            print(e)
            return
        print("Ride removed.")
