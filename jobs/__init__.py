"""
Background jobs.

Dramatiq actors plus the APScheduler process that triggers them.
"""
