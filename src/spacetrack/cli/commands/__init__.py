"""Spacetrack subcommands."""
