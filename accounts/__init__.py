"""
Accounts: user account management API.

Application package root. This is a small service laid out with
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Listing, lookup, registration, update, deletion and
      password changes for user accounts.

Layers:
    - domain: Entities, ports (ABCs), error descriptors.
    - application: Use cases (request handlers), DTOs, the users service.
    - infrastructure: Adapters (SQL, in-memory, hashing) implementing ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (results, errors, security, logging).
"""
