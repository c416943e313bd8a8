"""
Mock integration clients.

These clients return feed pages from memory without calling any external API.
They are used when:
- No credentials are available
- We want to exercise callers end-to-end without network access

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
"""
