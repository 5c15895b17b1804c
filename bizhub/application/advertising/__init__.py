"""Advertising context: advertisements, tiers and affiliates."""
