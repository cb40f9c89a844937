"""
Core helpers for the Jira update client.

Low-level infrastructure lives here: settings, the shared ``httpx``
client and the JSON codec.  Keeping them apart from the client makes
it easy to swap implementations in tests.
"""

__all__ = []
