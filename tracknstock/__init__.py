"""
TrackNStock - tracks and stocks everything easily

Command-line client for the inventory REST API.
"""
__version__ = "1.0.0"
