# src/netrate/__init__.py
"""
NetRate - Healthcare Provider Network Rate Engine

Service-code catalog, provider network membership, and negotiated
service-rate pricing with time-bounded validity and scope precedence.
"""

__version__ = "0.1.0"
