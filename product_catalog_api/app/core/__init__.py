"""Configuration, logging setup, domain exceptions and seed data."""
