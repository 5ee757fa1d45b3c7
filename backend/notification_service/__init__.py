"""
DreamHome Notification Service.

Records agent/client notifications in MongoDB, keyed by ids minted from
atomic sequence counters.
"""
