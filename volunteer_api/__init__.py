"""Shelter volunteer coordination API package."""
