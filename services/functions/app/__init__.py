"""Spot Booker Cloud Functions and admin helpers."""
