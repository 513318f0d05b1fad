"""
Application layer for the users bounded context.

Use cases are the request handlers: each reads its command, calls the
user service and returns Ok or Err. ``UsersService`` implements the
service port on top of the repository and hashing ports.
No framework or infrastructure imports allowed.
"""
