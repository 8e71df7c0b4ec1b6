"""Time Tracker package.

This package is organized by feature modules (users, tasks, timelogs, ...)
with a thin Flask controller layer and service/repository layers on top of a
single snapshot-backed data store.
"""
