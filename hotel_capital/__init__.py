"""
hotel_capital package bootstrap.

Deterministic decision engines for a hospitality capital-raise CRM: the
compliance filter that gates investor-facing communications and the
investor scoring engine that ranks prospects.
"""

from importlib import metadata


def get_version() -> str:
    """Return the package version if installed, else '0.0.0'."""
    try:
        return metadata.version("hotel-capital")
    except metadata.PackageNotFoundError:  # pragma: no cover - best effort only
        return "0.0.0"


__all__ = ["get_version"]
