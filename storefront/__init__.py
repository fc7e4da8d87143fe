"""
Scooter Storefront

Client-side core of the storefront: variant selection, the persisted cart
and checkout submission against the storefront REST API.
"""

__version__ = "1.0.0"
