NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
UA = "PlaceMap/1.0 (+https://example.com)"
# Nominatim answers in the first language listed here
HEADERS = {"User-Agent": UA, "Accept-Language": "ja"}
REQUEST_TIMEOUT = 30
RESULT_LIMIT = 1

TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = "&copy; OpenStreetMap contributors"
MAX_ZOOM = 18
FIT_PADDING = (50, 50)
