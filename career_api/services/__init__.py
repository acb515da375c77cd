"""
Service package

Request handling logic per resource, the managed backend client and the
nested resource composition helpers.

@version 1.0.0
"""
