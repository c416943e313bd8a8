"""
Real HTTP integration clients.

These clients communicate with the contacts feed API and the OAuth token endpoint.

Important:
- Must implement the same ContactsDirectory interface as the mock clients
- Must return data shaped according to gcontacts/integrations/contracts/*
"""
