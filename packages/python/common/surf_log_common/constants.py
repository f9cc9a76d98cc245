"""Shared constants"""

# Unit conversions
METERS_TO_FEET = 3.28084

# (threshold, label) pairs checked in order with a strict ">" against the
# normalized bearing. Anything that falls through every threshold is "N".
CARDINAL_THRESHOLDS = [
    (348, "N"),
    (326, "NNW"),
    (303, "NW"),
    (281, "WNW"),
    (258, "W"),
    (236, "WSW"),
    (213, "SW"),
    (191, "SSW"),
    (168, "S"),
    (146, "SSE"),
    (123, "SE"),
    (101, "ESE"),
    (78, "E"),
    (56, "ENE"),
    (33, "NE"),
    (11, "NNE"),
    (0, "N"),
]

# Bearing offset applied before bucketing (direction-from -> label bucket)
CARDINAL_OFFSET_DEG = 180
