"""Overpass QL query building for bounding-box searches.

Radius is approximated on a sphere: one degree is taken as 111 km on both
axes, so the box is a square in degrees around the center point.
"""

from models import BoundingBox, Location, Tag

KM_PER_DEGREE = 111.0


def bounding_box(location: Location, radius_km: float) -> BoundingBox:
    """Square box of +/- radius_km around location, in degrees."""
    if radius_km <= 0:
        raise ValueError(f"radius_km must be positive, got {radius_km}")

    delta = radius_km / KM_PER_DEGREE
    return BoundingBox(
        south=location.latitude - delta,
        north=location.latitude + delta,
        west=location.longitude - delta,
        east=location.longitude + delta,
    )


def format_coordinate(value: float) -> str:
    """Fixed-point, '.'-separated rendering, independent of host locale.

    Never uses exponent notation, which Overpass QL does not accept.
    """
    text = f"{float(value):.10f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_bbox(box: BoundingBox) -> str:
    # Overpass expects (south, west, north, east)
    return ",".join(format_coordinate(v) for v in (box.south, box.west, box.north, box.east))


def build_query(location: Location, radius_km: float, tags: list[Tag], timeout: int = 25) -> str:
    """Build an Overpass QL query returning nodes that match any of `tags`."""
    bbox = format_bbox(bounding_box(location, radius_km))
    filters = "\n".join(f'  node["{tag.key}"="{tag.value}"]({bbox});' for tag in tags)

    return f"[out:json][timeout:{timeout}];\n(\n{filters}\n);\nout body;"
