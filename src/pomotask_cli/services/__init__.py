"""Service layer for PomoTask CLI."""
