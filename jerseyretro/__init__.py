"""Retro football jersey storefront."""
