# -*- coding: utf-8 -*-
"""
Map Projection Initializer - Projection block of projected SAR images.

Derives the projection block from the map projection data record when
one exists, and synthesizes an along-track/cross-track projection from
the image pixel spacing for ScanSAR scenes that lack one. Descriptions
of plain slant- and ground-range geometry are checked before the
projection designator, and a designator that matches no known
projection aborts the decode.

The along-track/cross-track angles follow the JPL AT/CT definition:
a latitude/longitude-style system centered under the satellite at the
start of imaging, built from the inertial start state vector.

Author
------
ceosmeta developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
import warnings
from typing import Optional, Tuple

# Third-party
import numpy as np

# ceosmeta internal
from ceosmeta.exceptions import ProjectionError
from ceosmeta.geolocation.base import GeometryServices
from ceosmeta.geolocation.utils import ellipsoid_radius
from ceosmeta.IO.models.metadata import (
    AtctParams,
    CeosMetadata,
    LambertParams,
    PolarStereoParams,
    ProjectionBlock,
    ProjectionParams,
    StateVector,
    UtmParams,
)
from ceosmeta.IO.models.records import (
    DatasetSummaryRecord,
    MapProjectionRecord,
    leading_int,
)
from ceosmeta.vocabulary import ImageType, ProjectionType

logger = logging.getLogger(__name__)

# Reference point offsets of Lambert products; the true origin is never
# stored in the record
LAMBERT_LAT0_OFFSET = 0.023
LAMBERT_LON0_OFFSET = 2.46

# Pole of pre-RADARSAT polar stereographic products
UPS_POLE = (70.0, -45.0)

_SLANT_DESCRIPTIONS = ('SLANT RANGE', 'Slant range')
_GROUND_DESCRIPTIONS = ('GROUND RANGE', 'Ground range')


# ===================================================================
# Along-track / cross-track
# ===================================================================

def _unit(vec: np.ndarray) -> np.ndarray:
    return vec / np.linalg.norm(vec)


def atct_init(st: StateVector) -> Tuple[float, float, float]:
    """
    Rotation angles of the along-track/cross-track system.

    Parameters
    ----------
    st : StateVector
        Inertial state vector at the start of imaging.

    Returns
    -------
    Tuple[float, float, float]
        ``(alpha1, alpha2, alpha3)`` in degrees.
    """
    pos = st.position.to_array()
    vel = st.velocity.to_array()
    up = np.array([0.0, 0.0, 1.0])

    z_orbit = _unit(np.cross(pos, vel))
    y_axis = _unit(np.cross(z_orbit, up))
    a = _unit(np.cross(y_axis, z_orbit))

    alpha1 = np.degrees(np.arctan2(a[1], a[0]))
    alpha2 = -np.degrees(np.arcsin(a[2]))
    if z_orbit[2] < 0.0:
        alpha1 += 180.0
        alpha2 = -(180.0 - abs(alpha2))

    nd = _unit(np.cross(a, pos))
    cos3 = np.clip(np.dot(a, pos) / np.linalg.norm(pos), -1.0, 1.0)
    alpha3 = np.degrees(np.arccos(cos3))
    if np.dot(nd, z_orbit) < 0.0:
        alpha3 = -alpha3

    return float(alpha1), float(alpha2), float(alpha3)


def _atct_params(
    meta: CeosMetadata, dssr: DatasetSummaryRecord, services: GeometryServices,
) -> AtctParams:
    if not meta.has_orbit:
        logger.warning("No state vectors, along-track/cross-track angles "
                       "left unset")
        general = meta.general
        if not (general.re_major and general.re_minor):
            return AtctParams()
        return AtctParams(rlocal=ellipsoid_radius(
            dssr.pro_lat, general.re_major, general.re_minor))

    rlocal = services.earth_radius(meta, meta.general.line_count // 2, 0)
    start = services.to_inertial(services.state_vector_at(meta, 0.0), 0.0)
    alpha1, alpha2, alpha3 = atct_init(start)
    return AtctParams(rlocal=rlocal, alpha1=alpha1, alpha2=alpha2,
                      alpha3=alpha3)


# ===================================================================
# Designator dispatch
# ===================================================================

def _lambert(mpdr: MapProjectionRecord) -> LambertParams:
    warnings.warn(
        "Images geocoded with the Lambert Conformal Conic projection may "
        "not be accurately geocoded",
        UserWarning,
        stacklevel=3,
    )
    return LambertParams(
        plat1=mpdr.nsppara1,
        plat2=mpdr.nsppara2,
        lat0=mpdr.blclat + LAMBERT_LAT0_OFFSET,
        lon0=mpdr.blclong + LAMBERT_LON0_OFFSET,
    )


def _ups(mpdr: MapProjectionRecord) -> PolarStereoParams:
    return PolarStereoParams(slat=UPS_POLE[0], slon=UPS_POLE[1],
                             fixed_pole=True)


def _ps_smmi(mpdr: MapProjectionRecord) -> PolarStereoParams:
    slon = mpdr.upslong
    # Northern products carry a zero reference longitude by mistake
    if mpdr.upslat > 0 and slon == 0.0:
        slon = -45.0
    return PolarStereoParams(slat=mpdr.upslat, slon=slon)


def _utm(mpdr: MapProjectionRecord) -> UtmParams:
    return UtmParams(
        zone=leading_int(mpdr.utmzone),
        false_easting=mpdr.utmeast,
        false_northing=mpdr.utmnorth,
        lat0=mpdr.utmlat,
        lon0=mpdr.utmlong,
        scale_factor=mpdr.utmscale,
    )


DESIGNATOR_TABLE = (
    ('GROUND RANGE', ProjectionType.ALONG_TRACK_CROSS_TRACK, None),
    ('LAMBERT', ProjectionType.LAMBERT_CONFORMAL_CONIC, _lambert),
    ('UPS', ProjectionType.POLAR_STEREOGRAPHIC, _ups),
    ('PS-SMM/I', ProjectionType.POLAR_STEREOGRAPHIC, _ps_smmi),
    ('UTM', ProjectionType.UNIVERSAL_TRANSVERSE_MERCATOR, _utm),
)


def resolve_projection(
    mpdr: MapProjectionRecord,
) -> Tuple[ProjectionType, Optional[ProjectionParams], ImageType]:
    """
    Projection type, parameters, and image type of a projection record.

    Parameters
    ----------
    mpdr : MapProjectionRecord

    Returns
    -------
    Tuple[ProjectionType, ProjectionParams or None, ImageType]
        Parameters are None for the unset slant/ground types and for
        along-track/cross-track, whose angles need the orbit.

    Raises
    ------
    ProjectionError
        If the designator matches no known projection.
    """
    if mpdr.mpdesc.startswith(_SLANT_DESCRIPTIONS):
        return ProjectionType.SLANT_UNSET, None, ImageType.SLANT
    if mpdr.mpdesc.startswith(_GROUND_DESCRIPTIONS):
        return ProjectionType.GROUND_UNSET, None, ImageType.GROUND

    for prefix, ptype, build in DESIGNATOR_TABLE:
        if mpdr.mpdesig.startswith(prefix):
            param = build(mpdr) if build is not None else None
            return ptype, param, ImageType.PROJECTED

    raise ProjectionError(
        f"Cannot match projection '{mpdr.mpdesig.strip()}' "
        f"in map projection data record"
    )


# ===================================================================
# Initializer
# ===================================================================

def _common(proj: ProjectionBlock, dssr: DatasetSummaryRecord) -> None:
    proj.units = 'meters'
    proj.hem = 'N' if dssr.pro_lat > 0.0 else 'S'
    proj.re_major = dssr.ellip_maj * 1000
    proj.re_minor = dssr.ellip_min * 1000


def init_projection(
    meta: CeosMetadata,
    dssr: DatasetSummaryRecord,
    mpdr: Optional[MapProjectionRecord],
    services: GeometryServices,
) -> ProjectionBlock:
    """
    Populate ``meta.projection`` for a projected or ScanSAR image.

    Parameters
    ----------
    meta : CeosMetadata
        Metadata with general, SAR and state vector blocks filled.
    dssr : DatasetSummaryRecord
    mpdr : MapProjectionRecord, optional
        When absent, the image is treated as ScanSAR.
    services : GeometryServices
        Earth radius, state vectors and inertial rotation for the
        along-track/cross-track angles.

    Returns
    -------
    ProjectionBlock
        The block assigned to ``meta.projection``.

    Raises
    ------
    ProjectionError
        If the projection designator is not recognized.
    """
    proj = ProjectionBlock()
    meta.projection = proj
    meta.sar.image_type = ImageType.PROJECTED

    if mpdr is None:
        proj.type = ProjectionType.ALONG_TRACK_CROSS_TRACK
        proj.per_x = meta.general.x_pixel_size
        proj.per_y = -meta.general.y_pixel_size
        proj.param = _atct_params(meta, dssr, services)
        _common(proj, dssr)
        proj.height = 0.0
        logger.info("No map projection record, using along-track/"
                    "cross-track projection of the ScanSAR image")
        return proj

    meta.general.sample_count = mpdr.npixels
    proj.type, proj.param, meta.sar.image_type = resolve_projection(mpdr)

    if proj.type is ProjectionType.ALONG_TRACK_CROSS_TRACK:
        proj.param = _atct_params(meta, dssr, services)
        proj.start_y = mpdr.tlceast
        proj.start_x = mpdr.tlcnorth
        proj.per_y = (mpdr.blceast - mpdr.tlceast) / mpdr.nlines
        proj.per_x = (mpdr.trcnorth - mpdr.tlcnorth) / mpdr.npixels
    else:
        proj.start_y = mpdr.tlcnorth * 1000
        proj.start_x = mpdr.tlceast * 1000
        proj.per_y = (mpdr.blcnorth - mpdr.tlcnorth) * 1000 / mpdr.nlines
        proj.per_x = (mpdr.trceast - mpdr.tlceast) * 1000 / mpdr.npixels

    _common(proj, dssr)
    logger.debug("Projection %s, start (%g, %g), spacing (%g, %g)",
                 proj.type.value, proj.start_x, proj.start_y,
                 proj.per_x, proj.per_y)
    return proj
