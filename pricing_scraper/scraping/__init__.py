"""
Pricing discovery and extraction engine.
"""
