"""Utility modules for tabler_components."""
