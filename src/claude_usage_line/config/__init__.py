"""Configuration file schema, defaults and loading."""
