"""Catalog import and sample data."""

from menuplan.data.catalog_loader import CatalogImporter
from menuplan.data.sample_catalog import SAMPLE_FOOD_ITEMS, seed_sample_catalog

__all__ = ["CatalogImporter", "SAMPLE_FOOD_ITEMS", "seed_sample_catalog"]
