"""Utility helpers for ConfigGuard."""
