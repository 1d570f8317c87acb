"""
pricing_scraper/api package marker.
"""
