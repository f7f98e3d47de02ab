# radarweb/common - shared, Kivy-independent building blocks
#
# Only stable values and helpers used by both core/ and gui/ live here.
