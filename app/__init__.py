"""Visits summary metrics API."""
