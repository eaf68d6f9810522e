"""Collaborator interfaces and the NetBox REST implementation."""
