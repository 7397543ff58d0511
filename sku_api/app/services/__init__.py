"""
Service layer.

Services hold the business rules and talk to a record store through
the ``SKURepository`` interface, so the JSON file store can be swapped
for another implementation without touching the API handlers.
"""
