"""
Services built on top of the task database.
"""
