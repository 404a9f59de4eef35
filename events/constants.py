EVENT_TYPES = [
    "Baseball",
    "Basketball",
    "Cycling",
    "Football",
    "Hockey",
    "Running",
    "Soccer",
    "Swimming",
    "Tennis",
    "Volleyball",
    "Other",
]

EVENT_NAME_MIN_LENGTH = 3
EVENT_NAME_MAX_LENGTH = 100
EVENT_TYPE_MAX_LENGTH = 50
VENUE_MIN_LENGTH = 2
VENUE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500

DATETIME_INPUT_FORMATS = [
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
]
