"""Shared infrastructure: logging and console views."""
