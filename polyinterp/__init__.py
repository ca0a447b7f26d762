"""polyinterp: Lagrange polynomial interpolation over real-valued sample points."""

import logging.config
from pathlib import Path

import yaml

from .__version__ import __version__  # noqa: F401


CURRENT_DIR = Path(__file__).resolve().parent

with open(CURRENT_DIR / "logging.yaml", "r") as f:
    logging_config = yaml.safe_load(f.read())
    logging.config.dictConfig(logging_config)
