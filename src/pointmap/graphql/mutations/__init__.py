"""Root mutation type."""
