"""Compile, run and check small programming exercises, with worked example drills."""

__version__ = "5.4.0"