"""Pure domain helpers (search predicates, validation, catalog data)."""
