"""
Module for ``polyinterp``'s configuration.

This module can be used to:

* define default numerical settings
* load a configuration from a JSON mapping or file
* validate a configuration

The zero tolerance is shared by interpolation and formatting, so a single
:class:`InterpolationConfig` should be handed to both.
"""

import json
import math

from polyinterp.exceptions import ConfigurationError


# Values whose magnitude is below this are treated as zero, both when
# rejecting a singular basis denominator and when dropping printed terms.
ZERO_TOLERANCE = 1e-10

# Digits after the decimal point when printing coefficients.
DECIMAL_PLACES = 6

# A single point leaves a polynomial under-determined.
MIN_POINTS = 2


class ConfigVars(object):
    Tolerance = "tolerance"
    DecimalPlaces = "decimal_places"
    MinPoints = "min_points"


class InterpolationConfig(object):
    def __init__(self, tolerance, decimal_places, min_points):
        self.tolerance = tolerance
        self.decimal_places = decimal_places
        self.min_points = min_points
        self.validate()

    def __repr__(self):
        return (
            f"InterpolationConfig(tolerance={self.tolerance!r}, "
            f"decimal_places={self.decimal_places!r}, "
            f"min_points={self.min_points!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, InterpolationConfig):
            return NotImplemented
        return (self.tolerance, self.decimal_places, self.min_points) == (
            other.tolerance,
            other.decimal_places,
            other.min_points,
        )

    def __hash__(self):
        return hash((self.tolerance, self.decimal_places, self.min_points))

    def validate(self):
        tolerance = self.tolerance
        if (
            isinstance(tolerance, bool)
            or not isinstance(tolerance, (int, float))
            or not math.isfinite(tolerance)
            or tolerance <= 0
        ):
            raise ConfigurationError(
                f"{ConfigVars.Tolerance} must be a positive finite number, "
                f"got {tolerance!r}"
            )

        places = self.decimal_places
        if isinstance(places, bool) or not isinstance(places, int) or places < 0:
            raise ConfigurationError(
                f"{ConfigVars.DecimalPlaces} must be a non-negative integer, "
                f"got {places!r}"
            )

        min_points = self.min_points
        if (
            isinstance(min_points, bool)
            or not isinstance(min_points, int)
            or min_points < MIN_POINTS
        ):
            raise ConfigurationError(
                f"{ConfigVars.MinPoints} must be an integer >= {MIN_POINTS}, "
                f"got {min_points!r}"
            )

    @classmethod
    def default(cls):
        return cls(
            tolerance=ZERO_TOLERANCE,
            decimal_places=DECIMAL_PLACES,
            min_points=MIN_POINTS,
        )

    @classmethod
    def from_json(cls, json_config):
        if not isinstance(json_config, dict):
            raise ConfigurationError(
                f"Configuration must be a JSON object, got {type(json_config)}"
            )

        known = (ConfigVars.Tolerance, ConfigVars.DecimalPlaces, ConfigVars.MinPoints)
        unknown = sorted(set(json_config) - set(known))
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {unknown}")

        res = cls.default()
        if ConfigVars.Tolerance in json_config:
            res.tolerance = json_config[ConfigVars.Tolerance]
        if ConfigVars.DecimalPlaces in json_config:
            res.decimal_places = json_config[ConfigVars.DecimalPlaces]
        if ConfigVars.MinPoints in json_config:
            res.min_points = json_config[ConfigVars.MinPoints]

        res.validate()
        return res

    @classmethod
    def from_file(cls, config_file_path):
        try:
            with open(config_file_path) as f:
                json_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Could not parse configuration file {config_file_path}: {e}"
            ) from e
        return cls.from_json(json_config)
