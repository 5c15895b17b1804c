"""Advertising infrastructure: HTTP routes for advertisements, tiers and affiliates."""
