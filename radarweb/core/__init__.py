"""Kivy-free radar chart geometry.

Submodules are imported explicitly (``from radarweb.core.chart import RadarChart``)
so that importing the typed config does not pull in the whole core.
"""
