"""
User-facing interfaces for Task Manager.
"""
