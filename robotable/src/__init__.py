"""Robotable core and presentation modules."""
