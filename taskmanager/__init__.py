"""
Task Manager - a small task-tracking service with an HTTP JSON API.
"""

__version__ = "0.1.0"
