"""
Contracts (data models).

This folder defines the request/response shapes for the contacts integration:
- Contact records and client credentials
- Feed page / feed entry / token response formats
- The error types every client raises

Both mock and real HTTP clients should use these contracts.
"""
