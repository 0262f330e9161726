"""
Core domain types for the room booking service.
"""
