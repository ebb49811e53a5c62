"""Infrastructure: static data, external lookups and caches."""
