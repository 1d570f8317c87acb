"""
pricing_scraper/api/routers package marker.
"""

from pricing_scraper.api.routers.pricing_scrape import router as pricing_scrape_router

__all__ = ["pricing_scrape_router"]
