"""Core utilities and shared application primitives.

Modules in this package hold process configuration and the HTTP plumbing
(request logging, exception handling) shared by the API.
"""
