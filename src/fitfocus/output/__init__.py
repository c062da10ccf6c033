"""Output targets, JSON rendering and console formatting."""
