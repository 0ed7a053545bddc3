"""Star catalog — fixed J2000 coordinates for the stars the compass can point to."""

from neverlandcompass.models import StarCatalogEntry


class UnknownStarError(KeyError):
    """Star name not present in the catalog."""


# Hipparcos HIP 32349. RA 6h 45m 8.9s, Dec -16° 42' 58".
SIRIUS = StarCatalogEntry(
    name="Sirius",
    nickname="The Dog Star",
    ra_hours=6.7525,
    dec_deg=-16.7161,
    magnitude=-1.46,
    color="#A3C9FF",
    light_years=8.6,
)

CANOPUS = StarCatalogEntry(
    name="Canopus",
    nickname="The Ship's Keel",
    ra_hours=6.3992,
    dec_deg=-52.6957,
    magnitude=-0.74,
    color="#FFFFF0",
    light_years=310.0,
)

ARCTURUS = StarCatalogEntry(
    name="Arcturus",
    nickname="The Bear Watcher",
    ra_hours=14.2610,
    dec_deg=19.1825,
    magnitude=-0.05,
    color="#FFB46B",
    light_years=36.7,
)

VEGA = StarCatalogEntry(
    name="Vega",
    nickname="The Harp Star",
    ra_hours=18.6156,
    dec_deg=38.7837,
    magnitude=0.03,
    color="#CAD7FF",
    light_years=25.0,
)

POLARIS = StarCatalogEntry(
    name="Polaris",
    nickname="The North Star",
    ra_hours=2.5303,
    dec_deg=89.2641,
    magnitude=1.98,
    color="#FFF4E8",
    light_years=433.0,
)

_CATALOG: dict[str, StarCatalogEntry] = {
    s.name.lower(): s for s in (SIRIUS, CANOPUS, ARCTURUS, VEGA, POLARIS)
}


def get_star(name: str) -> StarCatalogEntry:
    """Look up a catalog entry by name (case-insensitive).

    Raises:
        UnknownStarError: When the name is not in the catalog.
    """
    try:
        return _CATALOG[name.strip().lower()]
    except KeyError:
        raise UnknownStarError(name) from None


def list_stars() -> tuple[StarCatalogEntry, ...]:
    """All catalog entries, brightest first."""
    return tuple(sorted(_CATALOG.values(), key=lambda s: s.magnitude))
