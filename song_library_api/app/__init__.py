"""
Application package initializer.

The service is organised into small layers: ``core`` holds
configuration, logging, database access and error kinds; ``schemas``
defines the request and response payloads; ``services`` contains the
query builders and the record store; ``api`` exposes versioned routers.
"""
