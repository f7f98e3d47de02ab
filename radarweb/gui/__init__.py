"""Kivy-bound rendering of radar charts."""
