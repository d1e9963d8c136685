"""Protocol stubs for vendor SDK shapes, grouped by vendor."""
