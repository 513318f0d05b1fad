"""
Users bounded context: domain layer.

Holds the User entity, the error taxonomy used by the request
handlers and the ports the users service depends on.
"""
