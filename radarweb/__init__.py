"""radarweb - geometry core for radial ("spider-web") charts.

The ``core`` package is Kivy-free and holds every geometric calculation.
The ``gui`` package carries the Kivy renderer and is imported lazily.
"""

__version__ = "1.0.0"
