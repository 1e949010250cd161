"""Endpoint groups, one class per area of the client-server API."""
