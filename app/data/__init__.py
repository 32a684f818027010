"""Data module - persisted entities."""
