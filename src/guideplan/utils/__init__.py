"""Utility helpers for guideplan."""
