"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Ok/Err result values returned by use cases
- Error translation to HTTP responses
- Security middleware
- Rate limiting
- Logging configuration
"""
