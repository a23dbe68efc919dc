"""
Reading - Plan Tracking and Navigation

A small manager for reading plans and other schedules. Parses plans from
indented plain text, tracks the current entry of each plan and moves it
forward or backward, wrapping around for cyclic plans.
"""

__version__ = "0.1.0"
__author__ = "Reading Team"
