"""fleetdump rendering module."""

from .renderer import FleetRenderer

__all__ = ["FleetRenderer"]
