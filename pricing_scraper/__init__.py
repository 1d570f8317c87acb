"""
Website pricing scraper.
"""
