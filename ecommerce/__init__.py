"""E-commerce order management backend."""
