from placemap.geocode import geocode
from placemap.mapview import FoliumLibrary, MapSession, Viewpoint, create_map

__all__ = ["geocode", "create_map", "FoliumLibrary", "MapSession", "Viewpoint"]
