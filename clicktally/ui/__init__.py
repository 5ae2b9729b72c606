"""Couche de présentation."""
