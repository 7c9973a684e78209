"""Leaflet map construction with an optional geocoded marker.

The map is built synchronously; geocoding the place name and fitting the
view to it run on a worker thread. ``create_map`` hands back a
:class:`MapSession` whose ``ready`` future resolves once the view is final.
"""
import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple

import folium

from placemap.geocode import geocode
from placemap.settings import FIT_PADDING, MAX_ZOOM, TILE_ATTRIBUTION, TILE_URL
from placemap.style import popup_html

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]

_EXECUTOR = ThreadPoolExecutor(max_workers=4, thread_name_prefix="placemap")


@dataclass(frozen=True)
class Viewpoint:
    center: Coordinate
    zoom: int

    def __post_init__(self):
        if len(self.center) != 2:
            raise ValueError(f"center must be (lat, lon), got {self.center!r}")
        lat, lon = self.center
        object.__setattr__(self, "center", (float(lat), float(lon)))
        object.__setattr__(self, "zoom", int(self.zoom))

    @classmethod
    def from_dict(cls, d):
        """Build from a ``{"center": [lat, lon], "zoom": z}`` mapping."""
        return cls(center=tuple(d["center"]), zoom=d["zoom"])


class FoliumLibrary:
    """Map library backed by folium (Leaflet under the hood)."""

    def new_map(self, center: Coordinate, zoom: int, attribution_control: bool = True) -> folium.Map:
        return folium.Map(
            location=list(center),
            zoom_start=zoom,
            tiles=None,
            attribution_control=attribution_control,
        )

    def set_view(self, m: folium.Map, center: Coordinate, zoom: int):
        m.location = [float(center[0]), float(center[1])]
        m.options["zoom"] = zoom

    def add_tile_layer(self, m: folium.Map, url: str, max_zoom: int, attribution: str = TILE_ATTRIBUTION):
        return folium.TileLayer(tiles=url, attr=attribution, max_zoom=max_zoom, name="OpenStreetMap").add_to(m)

    def add_marker(self, m: folium.Map, location: Coordinate, popup: str):
        return folium.Marker(list(location), popup=folium.Popup(popup)).add_to(m)

    def fit_bounds(self, m: folium.Map, bounds: Sequence[Coordinate], padding=FIT_PADDING):
        m.fit_bounds([list(p) for p in bounds], padding=padding)


@dataclass
class MapSession:
    container_id: str
    viewpoint: Viewpoint
    place_name: Optional[str]
    map: Any
    ready: Future
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self):
        """Stop the pending marker/viewport update. The map is left as built."""
        self._cancelled.set()
        self.ready.cancel()

    def wait(self, timeout: Optional[float] = None) -> Optional[Coordinate]:
        """Block until the update has run; return the geocoded coordinate or None."""
        try:
            latlng = self.ready.result(timeout)
        except CancelledError:
            return None
        return None if self.cancelled else latlng


def _place_and_fit(m, start: Viewpoint, place_name, library, geocoder, cancelled: threading.Event):
    bounds: List[Coordinate] = [start.center]
    if cancelled.is_set():
        return None

    latlng = None
    if place_name:
        latlng = geocoder(place_name)
        if cancelled.is_set():
            logger.info("Map update for %r cancelled before it could be applied", place_name)
            return None
        if latlng:
            bounds.append(latlng)
            library.add_marker(m, latlng, popup_html(place_name))

    if cancelled.is_set():
        logger.info("Viewport update for %r cancelled", place_name)
        return None
    if len(bounds) > 1:
        logger.debug("Fitting view to %d points", len(bounds))
        library.fit_bounds(m, bounds, padding=FIT_PADDING)
    else:
        library.set_view(m, start.center, start.zoom)
    return latlng


def create_map(
    container_id: str,
    start: Viewpoint,
    place_name: Optional[str] = None,
    *,
    library=None,
    geocoder: Callable[[str], Optional[Coordinate]] = geocode,
    executor=None,
) -> MapSession:
    """Build a map at ``start`` and, in the background, mark ``place_name`` on it.

    With a place that geocodes, the view is fitted to both the start center and
    the place; otherwise it stays on ``start``.
    """
    if not isinstance(start, Viewpoint):
        start = Viewpoint.from_dict(start)
    library = library if library is not None else FoliumLibrary()
    executor = executor if executor is not None else _EXECUTOR

    # attribution lives in the surrounding page footer
    m = library.new_map(start.center, start.zoom, attribution_control=False)
    library.add_tile_layer(m, TILE_URL, max_zoom=MAX_ZOOM)

    cancelled = threading.Event()
    ready = executor.submit(_place_and_fit, m, start, place_name, library, geocoder, cancelled)
    return MapSession(container_id, start, place_name, m, ready, cancelled)
