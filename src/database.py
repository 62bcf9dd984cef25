import logging
import os

from errors import MalformedRecordError, RideTrackerError, StorageError
from ride import Ride

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "rides.csv"
FIELD_COUNT = 4  # name, fright factor, cost, visitors


def decode_line(raw, line_no=0):
    """Decode one raw line of the rides file as UTF-8"""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRecordError(line_no, raw, "not valid UTF-8") from e


def parse_line(line, line_no=0):
    """Turn one line of the rides file into a Ride or raise MalformedRecordError"""
    parts = line.rstrip("\r\n").split(",")
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(line_no, line, f"expected {FIELD_COUNT} fields, got {len(parts)}")

    name, fright, cost, visitors = parts
    try:
        return Ride(name, int(fright), float(cost), int(visitors))
    except (ValueError, RideTrackerError) as e:
        raise MalformedRecordError(line_no, line, str(e)) from e


class RideDatabase:
    """Flat-file storage for rides: one comma-separated line per ride"""

    def __init__(self, file_name=DEFAULT_FILE_NAME):
        self.file_name = file_name
        logger.debug("Using rides file: %s", os.path.abspath(file_name))

    def load(self):
        """Read every ride from the file; bad lines are skipped with a warning"""
        if not os.path.exists(self.file_name):
            logger.info("No rides file at %s, starting empty", self.file_name)
            return []

        rides = []
        seen = set()
        with open(self.file_name, "rb") as f:
            for line_no, raw in enumerate(f, start=1):
                try:
                    line = decode_line(raw, line_no)
                    if not line.strip():
                        continue
                    ride = parse_line(line, line_no)
                except MalformedRecordError as e:
                    logger.warning("Skipping bad line in file: %s", e)
                    continue

                key = ride.name.casefold()
                if key in seen:
                    logger.warning("Duplicate ride name '%s' on line %d, keeping both", ride.name, line_no)
                seen.add(key)
                rides.append(ride)

        logger.info("Loaded %d ride(s) from %s", len(rides), self.file_name)
        return rides

    def save(self, rides):
        """Overwrite the file with the given rides, in order"""
        try:
            with open(self.file_name, "w", encoding="utf-8") as f:
                for ride in rides:
                    f.write(ride.to_csv_line() + "\n")
        except OSError as e:
            raise StorageError(self.file_name, e) from e
        logger.info("Saved %d ride(s) to %s", len(rides), self.file_name)
