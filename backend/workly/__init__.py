"""Workly job board API."""
