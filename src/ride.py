'''
This module defines a Ride class that represents one amusement-park ride with
validated fields, derived values and the views used by the menu and the file.
'''

import math

from babel.numbers import format_currency

from errors import ValidationError, ValidationKind

MIN_FRIGHT = 0
MAX_FRIGHT = 100
MIN_COST = 1.0
MIN_VISITORS = 0

CURRENCY = "USD"
LOCALE = "en_US"

# (upper bound, label) pairs, checked in order
THRILL_LEVELS = [
    (20, "Mild"),
    (60, "Exciting"),
    (90, "Thrilling"),
]
TOP_THRILL_LEVEL = "Extreme"


# --------- Field checks ---------
def check_name(value):
    """Return the trimmed name or raise if it is blank"""
    if value is None or not str(value).strip():
        raise ValidationError(ValidationKind.EMPTY_NAME, "Name cannot be empty.")
    return str(value).strip()


def _is_whole(value):
    return isinstance(value, int) and not isinstance(value, bool)


def check_fright_factor(value):
    if not _is_whole(value) or value < MIN_FRIGHT or value > MAX_FRIGHT:
        raise ValidationError(
            ValidationKind.FRIGHT_FACTOR_OUT_OF_RANGE,
            f"Fright Factor must be a whole number {MIN_FRIGHT}-{MAX_FRIGHT}."
        )
    return value


def check_cost(value):
    value = float(value)
    if not math.isfinite(value) or value < MIN_COST:
        raise ValidationError(ValidationKind.COST_BELOW_MINIMUM, f"Cost must be at least {MIN_COST:.2f}.")
    return value


def check_visitors(value):
    if not _is_whole(value) or value < MIN_VISITORS:
        raise ValidationError(ValidationKind.NEGATIVE_VISITORS, "Visitors must be a whole number, not negative.")
    return value


def format_cost(value):
    """Format a cost as currency, e.g. $12.50"""
    return format_currency(value, CURRENCY, locale=LOCALE)


class Ride:
    """A single ride; every assignment is validated"""

    def __init__(self, name, fright_factor, cost_to_enter, visitors_today):
        self.name = name
        self.fright_factor = fright_factor
        self.cost_to_enter = cost_to_enter
        self.visitors_today = visitors_today

    # ---------- Validated fields ----------
    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = check_name(value)

    @property
    def fright_factor(self):
        return self._fright_factor

    @fright_factor.setter
    def fright_factor(self, value):
        self._fright_factor = check_fright_factor(value)

    @property
    def cost_to_enter(self):
        return self._cost_to_enter

    @cost_to_enter.setter
    def cost_to_enter(self, value):
        self._cost_to_enter = check_cost(value)

    @property
    def visitors_today(self):
        return self._visitors_today

    @visitors_today.setter
    def visitors_today(self, value):
        self._visitors_today = check_visitors(value)

    def update(self, fright_factor, cost_to_enter, visitors_today):
        """Replace the three numeric fields; nothing changes unless all are valid"""
        fright_factor = check_fright_factor(fright_factor)
        cost_to_enter = check_cost(cost_to_enter)
        visitors_today = check_visitors(visitors_today)

        self._fright_factor = fright_factor
        self._cost_to_enter = cost_to_enter
        self._visitors_today = visitors_today

    # ---------- Derived values ----------
    @property
    def popularity_score(self):
        return (self.fright_factor / 10.0) * self.visitors_today

    @property
    def thrill_level(self):
        for upper, label in THRILL_LEVELS:
            if self.fright_factor <= upper:
                return label
        return TOP_THRILL_LEVEL

    # ---------- Views ----------
    def details(self):
        """Return a multi-line report of all fields and derived values"""
        return (
            f"Name: {self.name}\n"
            f"Fright Factor: {self.fright_factor}\n"
            f"Cost: {format_cost(self.cost_to_enter)}\n"
            f"Visitors Today: {self.visitors_today}\n"
            f"Thrill Level: {self.thrill_level}\n"
            f"Popularity Score: {self.popularity_score:.2f}"
        )

    def to_csv_line(self):
        """Return the ride as one line of the rides file (commas in names are not escaped)"""
        return f"{self.name},{self.fright_factor},{self.cost_to_enter!r},{self.visitors_today}"

    def __str__(self):
        return f"{self.name:<15} {self.fright_factor:<5} {self.cost_to_enter:<8.2f} {self.visitors_today}"

    def __repr__(self):
        return (f"Ride({self.name!r}, {self.fright_factor!r}, "
                f"{self.cost_to_enter!r}, {self.visitors_today!r})")
