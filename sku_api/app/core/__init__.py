"""
Core configuration, logging and error handling shared by every layer.
"""
