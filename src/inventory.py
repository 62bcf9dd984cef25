from errors import DuplicateNameError, NotFoundError
from ride import Ride


def _key(name):
    return (name or "").strip().casefold()


class RideInventory:
    """The in-memory, ordered collection of rides"""

    def __init__(self, rides=None):
        self.rides = list(rides) if rides else []

    def __len__(self):
        return len(self.rides)

    def find_by_name(self, name):
        """Return the first ride whose name matches, ignoring case, or None"""
        key = _key(name)
        for ride in self.rides:
            if ride.name.casefold() == key:
                return ride
        return None

    def _require(self, name):
        ride = self.find_by_name(name)
        if ride is None:
            raise NotFoundError(name)
        return ride

    def add(self, name, fright_factor, cost_to_enter, visitors_today):
        """Create a ride and append it; names must be unique ignoring case"""
        if self.find_by_name(name) is not None:
            raise DuplicateNameError(name.strip())
        ride = Ride(name, fright_factor, cost_to_enter, visitors_today)
        self.rides.append(ride)
        return ride

    def edit(self, name, fright_factor, cost_to_enter, visitors_today):
        """Replace the numeric fields of an existing ride (the name never changes)"""
        ride = self._require(name)
        ride.update(fright_factor, cost_to_enter, visitors_today)
        return ride

    def remove(self, name):
        ride = self._require(name)
        self.rides.remove(ride)
        return ride

    def list_all(self):
        return list(self.rides)
