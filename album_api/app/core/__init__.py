"""
Core infrastructure: configuration, logging, responses and middleware.
"""
