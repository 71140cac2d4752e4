"""Delivery applications."""
