"""Constants for the Google Maps APIs.

Distance Matrix: https://developers.google.com/maps/documentation/distance-matrix
Geolocation: https://developers.google.com/maps/documentation/geolocation
"""

from commuter.domain.models import TravelMode

DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"
GEOLOCATION_URL = "https://www.googleapis.com/geolocation/v1/geolocate"

# Travel mode names as the Distance Matrix API expects them
MODE_PARAMS: dict[TravelMode, str] = {
    TravelMode.DRIVE: "driving",
    TravelMode.WALK: "walking",
    TravelMode.BIKE: "bicycling",
    TravelMode.TRANSIT: "transit",
}

# Modes whose duration depends on the departure time
TIME_DEPENDENT_MODES = frozenset({TravelMode.DRIVE, TravelMode.TRANSIT})

STATUS_OK = "OK"
