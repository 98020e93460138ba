"""Split a monorepo package into its own repository and tag the release."""

__version__ = "0.1.0"
