"""
API package containing versioned routes and their dependencies.

A version subpackage exposes a top‑level ``router`` which includes all
of its endpoints; ``dependencies`` builds the services they use.
"""
