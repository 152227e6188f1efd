"""typedconf: typed configuration properties backed by YAML resources."""

__version__ = "0.4.0"
