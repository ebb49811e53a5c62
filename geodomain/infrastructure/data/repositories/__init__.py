from geodomain.infrastructure.data.repositories.city_catalog import CityCatalog

__all__ = ["CityCatalog"]
