"""
Flask HTTP API for tasks.
"""
