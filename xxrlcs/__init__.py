"""Building blocks for XCS and XCSR learning classifier systems, with an experiment runner."""

__version__ = "0.1.0"