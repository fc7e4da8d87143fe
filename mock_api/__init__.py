"""Development stand-in for the storefront REST API"""
