"""Storefront catalog service.

Serves read-only page data for an industrial-parts dealer:
- Brands and categories with product counts
- Product list filtered by brand, category and search term
- Product detail with search engine and social preview metadata
- Home page featured products and static content
"""

__version__ = "0.1.0"
