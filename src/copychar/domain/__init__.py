"""Domain layer: symbols, delivery outcomes and clipboard ports."""
