"""ipsync - converge NetBox IP address objects to a declared desired state."""

__version__ = "0.1.0"
