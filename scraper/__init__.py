"""
Catalog scraper: three-level crawl of an e-commerce test catalog.

site → categories → subcategories → products. Products are extracted with
Playwright and written as one JSON array.
"""
