"""Google Maps provider adapter."""

from commuter.adapters.google_maps.router import GoogleMapsRouter

__all__ = ["GoogleMapsRouter"]
