# -*- coding: utf-8 -*-
"""
SAR Normalizer Tests - Field derivations and full decodes per facility.

Pure derivation functions are tested on their own; the orchestrator is
exercised end to end through ``ceos_init`` with synthetic records for
ASF, CDPF, RSI, ESA and EOC (ALOS) products.

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
import math
from dataclasses import replace

# Third-party
import numpy as np
import pytest

# ceosmeta internal
from ceosmeta.classify import CeosDescriptor, classify_dssr
from ceosmeta.config import load_config
from ceosmeta.exceptions import (
    LineHeaderError,
    MissingRecordError,
    ProjectionError,
)
from ceosmeta.geolocation.orbit import OrbitGeometry
from ceosmeta.geolocation.utils import (
    EARTH_GM,
    EARTH_ROTATION_RATE,
    SPEED_OF_LIGHT,
    ellipsoid_radius,
)
from ceosmeta.IO import MemoryRecordReader
from ceosmeta.IO.models import (
    AsfFacilityRecord,
    CeosMetadata,
    DatasetSummaryRecord,
    EsaFacilityRecord,
    FileDescriptorRecord,
    ImageFileDescriptor,
    MapProjectionRecord,
    PlatformPositionRecord,
    ProcessingParameterRecord,
)
from ceosmeta.normalize import ceos_init
from ceosmeta.normalize.sar import (
    azimuth_time_per_pixel,
    bit_error_rate,
    data_type,
    deskewed,
    doppler_coefficients,
    frame_from_product_id,
    identify_mission,
    image_dimensions,
    image_type,
    look_count,
    orbit_direction,
    original_dimensions,
    processor_label,
    rsat_beam_name,
    sanitize_doppler,
    slant_range_first_pixel,
)
from ceosmeta.vocabulary import (
    DataType,
    Facility,
    ImageType,
    PolarizationMode,
    Processor,
    Product,
    ProjectionType,
    Satellite,
)


@pytest.fixture(scope='module')
def config():
    return load_config()


# ===================================================================
# Identification
# ===================================================================

class TestIdentifyMission:

    @pytest.mark.parametrize('sensor_id, mission_id, label, pol', [
        ('ERS-1 SAR', 'ERS1', 'ERS1', 'VV'),
        ('', 'ERS1', 'ERS1', 'VV'),
        ('ERS-2 SAR', 'ERS2', 'ERS2', 'VV'),
        ('JERS-1', 'J1', 'JERS1', 'HH'),
    ])
    def test_fixed_missions(self, sensor_id, mission_id, label, pol):
        dssr = DatasetSummaryRecord(sensor_id=sensor_id,
                                    mission_id=mission_id)
        info = identify_mission(dssr, Facility.ASF)
        assert info.sensor == label
        assert info.mode == 'STD'
        assert info.polarization == pol

    def test_alos_polarization_left_to_line_header(self):
        dssr = DatasetSummaryRecord(sensor_id='ALOS-SAR', mission_id='ALOS')
        info = identify_mission(dssr, Facility.EOC)
        assert info.sensor == 'ALOS'
        assert info.mode == '???'
        assert info.polarization is None

    def test_fallback_uses_mission_and_beam(self):
        dssr = DatasetSummaryRecord(sensor_id='SEASAT', mission_id='SEASAT  ',
                                    beam1='STD ')
        info = identify_mission(dssr, Facility.ASF)
        assert info.sensor == 'SEASAT'
        assert info.mode == 'STD'


class TestRsatBeamName:

    @pytest.mark.parametrize('beam1, expected', [
        ('ST4', 'ST4'),
        ('WD2', 'WD2'),
        ('FN5', 'FN5'),
        ('EH3', 'EH3'),
        ('EL1', 'EL1'),
        ('XX9', ''),
    ])
    def test_standard_beams(self, beam1, expected):
        dssr = DatasetSummaryRecord(product_type='FUL RES', beam1=beam1,
                                    fac_id='ASF')
        beam, forced = rsat_beam_name(dssr, Facility.ASF, None)
        assert beam == expected
        assert forced is None

    @pytest.mark.parametrize('beam3, expected', [
        ('WD3', 'SWA'),
        ('ST5', 'SWB'),
        ('ST6', 'SNA'),
        ('ST7', 'SNB'),
    ])
    def test_scansar_beams(self, beam3, expected):
        dssr = DatasetSummaryRecord(product_type='SCANSAR WIDE', beam3=beam3,
                                    fac_id='ASF')
        assert rsat_beam_name(dssr, Facility.ASF, None)[0] == expected

    def test_rsi_scansar_is_projected(self):
        dssr = DatasetSummaryRecord(product_type='SCANSAR NARROW',
                                    fac_id='RSI')
        assert rsat_beam_name(dssr, Facility.RSI, None) == (
            'SWB', ImageType.PROJECTED)

    def test_processing_parameter_beam_wins_for_cdpf(self):
        dssr = DatasetSummaryRecord(product_type='SCANSAR WIDE', beam3='WD3',
                                    fac_id='CDPF')
        ppr = ProcessingParameterRecord(beam_type='SNA ')
        assert rsat_beam_name(dssr, Facility.CDPF, ppr)[0] == 'SNA'

    def test_processing_parameter_ignored_for_asf(self):
        dssr = DatasetSummaryRecord(product_type='FUL RES', beam1='ST2',
                                    fac_id='ASF')
        ppr = ProcessingParameterRecord(beam_type='SNA')
        assert rsat_beam_name(dssr, Facility.ASF, ppr)[0] == 'ST2'


def test_processor_label():
    dssr = DatasetSummaryRecord(fac_id='ASF     ', sys_id='SPS  ',
                                ver_id='3.20 BETA')
    assert processor_label(dssr) == 'ASF/SPS/3.20'


# ===================================================================
# Image layout
# ===================================================================

class TestDataType:

    @pytest.mark.parametrize('bits, samples, group, fmt, expected', [
        (8, 1, 1, 'BYTE', DataType.BYTE),
        (16, 1, 2, 'INTEGER*2', DataType.INTEGER16),
        (32, 1, 4, 'INTEGER*4', DataType.INTEGER32),
        (8, 2, 2, 'COMPLEX INTEGER*1', DataType.COMPLEX_BYTE),
        (16, 2, 4, 'COMPLEX INTEGER*2', DataType.COMPLEX_INTEGER16),
        (32, 2, 8, 'COMPLEX*8', DataType.COMPLEX_REAL32),
        (16, 1, 2, 'COMPLEX INTEGER*2', DataType.COMPLEX_BYTE),
        (64, 1, 8, 'REAL*8', DataType.BYTE),
    ])
    def test_size_classes(self, bits, samples, group, fmt, expected):
        iof = ImageFileDescriptor(bitssamp=bits, sampdata=samples,
                                  bytgroup=group, formatid=fmt)
        assert data_type(iof) is expected

    def test_bits_per_group_halved(self):
        # 32 bits declared for a 4-byte complex group of two samples
        iof = ImageFileDescriptor(bitssamp=32, sampdata=2, bytgroup=4,
                                  formatid='COMPLEX INTEGER*2')
        assert data_type(iof) is DataType.COMPLEX_INTEGER16


class TestDimensions:

    def test_from_descriptor(self):
        iof = ImageFileDescriptor(numofrec=500, reclen=1212, predata=192,
                                  sufdata=20, bytgroup=2, lbrdrpxl=3,
                                  rbrdrpxl=2)
        assert image_dimensions(iof, DatasetSummaryRecord()) == (500, 495)

    def test_zero_falls_back_to_scene_center(self):
        iof = ImageFileDescriptor(numofrec=0, reclen=1000)
        dssr = DatasetSummaryRecord(sc_lin=2500, sc_pix=3000)
        assert image_dimensions(iof, dssr) == (5000, 6000)

    def test_original_subtracts_borders_before_division(self):
        iof = ImageFileDescriptor(numofrec=500, reclen=1212, predata=192,
                                  sufdata=20, bytgroup=2, lbrdrpxl=4,
                                  rbrdrpxl=2)
        lines, samples = original_dimensions(iof, DatasetSummaryRecord(),
                                             CeosDescriptor())
        assert (lines, samples) == (500, 497)

    def test_original_focus_pri_uses_data_groups(self):
        iof = ImageFileDescriptor(numofrec=500, reclen=1212, predata=192,
                                  bytgroup=2, datgroup=480)
        desc = CeosDescriptor(processor=Processor.FOCUS, product=Product.PRI)
        assert original_dimensions(iof, DatasetSummaryRecord(), desc) == (
            500, 480)


class TestFrameAndDirection:

    def test_rsat_frame(self):
        assert frame_from_product_id('RSAT-1', 'RSAT123456XYZ') == 456

    def test_alos_frame(self):
        assert frame_from_product_id('ALOS', 'ALPSRP123450750') == 750

    def test_other_sensors_have_no_embedded_frame(self):
        assert frame_from_product_id('ERS1', 'ERS1123456789') is None

    def test_unparseable_frame(self):
        assert frame_from_product_id('RSAT-1', 'RSAT12XXX') is None

    @pytest.mark.parametrize('asc_des, frame, expected', [
        ('A', None, 'A'),
        ('D', 100, 'D'),
        ('ASCENDING', None, 'A'),
        (' ', 1791, 'D'),
        ('', 5391, 'D'),
        ('', 5392, 'A'),
        ('', 1790, 'A'),
        ('', None, 'A'),
    ])
    def test_orbit_direction(self, asc_des, frame, expected):
        assert orbit_direction(asc_des, frame) == expected


class TestImageType:

    def test_projection_record_first(self):
        asf = AsfFacilityRecord(grndslnt='SLANT')
        result = image_type(None, CeosDescriptor(product=Product.SLC),
                            MapProjectionRecord(), asf)
        assert result is ImageType.PROJECTED

    def test_scansar_narrow_is_projected(self):
        result = image_type(None, CeosDescriptor(product=Product.SCN),
                            None, None)
        assert result is ImageType.PROJECTED

    @pytest.mark.parametrize('flag, expected', [
        ('GROUND', ImageType.GROUND),
        ('SLANT', ImageType.SLANT),
    ])
    def test_asf_range_flag(self, flag, expected):
        result = image_type(None, CeosDescriptor(product=Product.CCSD),
                            None, AsfFacilityRecord(grndslnt=flag))
        assert result is expected

    @pytest.mark.parametrize('product, expected', [
        (Product.CCSD, ImageType.SLANT),
        (Product.SLC, ImageType.SLANT),
        (Product.RAW, ImageType.SLANT),
        (Product.LOW_REZ, ImageType.GROUND),
        (Product.HI_REZ, ImageType.GROUND),
        (Product.SGF, ImageType.GROUND),
    ])
    def test_from_product(self, product, expected):
        assert image_type(None, CeosDescriptor(product=product),
                          None, None) is expected

    def test_no_rule_keeps_current(self):
        desc = CeosDescriptor(product=Product.SCANSAR)
        assert image_type(None, desc, None, None) is None
        assert image_type(ImageType.PROJECTED, desc, None, None) \
            is ImageType.PROJECTED


# ===================================================================
# Doppler
# ===================================================================

class TestDoppler:

    def test_sentinel_replaces_whole_triple(self):
        out = sanitize_doppler(np.array([15000.0, 1.0, 2.0]), 15000.0)
        assert np.all(np.isnan(out))

    def test_negative_sentinel(self):
        out = sanitize_doppler(np.array([-20000.0, 1.0, 2.0]), 15000.0)
        assert np.all(np.isnan(out))

    def test_physical_values_kept(self):
        out = sanitize_doppler(np.array([-14999.0, 1.0, 2.0]), 15000.0)
        np.testing.assert_array_equal(out, [-14999.0, 1.0, 2.0])

    def test_cdpf_reads_rate_fields(self):
        dssr = DatasetSummaryRecord(crt_dopcen=(99999.0, 0.0, 0.0),
                                    crt_rate=(250.0, 0.002, 0.0))
        rng, _ = doppler_coefficients(dssr, Facility.CDPF, 15000.0)
        np.testing.assert_allclose(rng, [250.0, 0.002, 0.0])

    def test_esa_converts_range_time(self):
        c = SPEED_OF_LIGHT
        dssr = DatasetSummaryRecord(crt_dopcen=(400.0, 1000.0, 2000.0))
        rng, _ = doppler_coefficients(dssr, Facility.ESA, 15000.0)
        np.testing.assert_allclose(
            rng, [400.0, 1000.0 / (2 * c), 2000.0 / (4 * c * c)])

    def test_azimuth_sanitized_independently(self):
        dssr = DatasetSummaryRecord(crt_dopcen=(300.0, 0.01, 0.0),
                                    alt_dopcen=(20000.0, 1.0, 0.0))
        rng, azi = doppler_coefficients(dssr, Facility.ASF, 15000.0)
        np.testing.assert_allclose(rng, [300.0, 0.01, 0.0])
        assert np.all(np.isnan(azi))


# ===================================================================
# Radiometry and timing
# ===================================================================

class TestLookCount:

    @pytest.mark.parametrize('satellite, rate, expected', [
        (Satellite.ERS, 18.96, 5),
        (Satellite.JERS, 17.1, 3),
        (Satellite.RSAT, 18.47, 4),
        (Satellite.RSAT, 32.3, 1),
    ])
    def test_fixed_rules(self, satellite, rate, expected):
        assert look_count(satellite, rate, None, 1.0, None) == expected

    def test_alos_projected_rounds_range_looks(self):
        assert look_count(Satellite.ALOS, 32.0, MapProjectionRecord(),
                          1.6, None) == 2

    def test_alos_unprojected_keeps_current(self):
        assert look_count(Satellite.ALOS, 32.0, None, 1.6, 4) == 4

    def test_unknown_satellite_keeps_current(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert look_count(Satellite.UNKNOWN, 18.0, None, 1.0, 7) == 7
        assert 'look count' in caplog.text


class TestFacilityDerived:

    def test_deskew_flag(self):
        assert deskewed(AsfFacilityRecord(deskewf='Y'), None)
        assert not deskewed(AsfFacilityRecord(deskewf='N'), None)

    def test_esa_record_means_deskewed(self):
        assert deskewed(None, EsaFacilityRecord())
        assert not deskewed(None, None)

    def test_bit_error_rate(self):
        assert bit_error_rate(AsfFacilityRecord(biterrrt=1e-6),
                              EsaFacilityRecord(ber=1e-3)) == 1e-6
        assert bit_error_rate(None, EsaFacilityRecord(ber=1e-3)) == 1e-3
        assert bit_error_rate(None, None) == 0.0

    def test_slant_range_priority(self):
        dssr = DatasetSummaryRecord(rng_time=(5.5, 0.0, 0.0))
        asf = AsfFacilityRecord(sltrngfp=850.0)
        assert slant_range_first_pixel(dssr, asf, None, 0.0) == 850000.0
        assert slant_range_first_pixel(
            dssr, None, EsaFacilityRecord(), 0.0) == pytest.approx(
                5.5 * SPEED_OF_LIGHT / 2000.0)
        assert slant_range_first_pixel(
            dssr, None, None, 5.0e-3) == pytest.approx(
                5.0e-3 * SPEED_OF_LIGHT / 2.0)


class TestAzimuthTimePerPixel:

    def test_asf_uses_swath_velocity(self):
        asf = AsfFacilityRecord(swathvel=6600.0)
        aztpp = azimuth_time_per_pixel(MemoryRecordReader(), CeosDescriptor(),
                                       DatasetSummaryRecord(), asf, 12.5, 8000)
        assert aztpp == pytest.approx(12.5 / 6600.0)

    def test_zero_swath_velocity_is_infinite(self, caplog):
        asf = AsfFacilityRecord(swathvel=0.0)
        aztpp = azimuth_time_per_pixel(MemoryRecordReader(), CeosDescriptor(),
                                       DatasetSummaryRecord(), asf, 12.5, 8000)
        assert aztpp == math.inf
        assert 'by zero' in caplog.text

    @pytest.mark.parametrize('first, expected', [
        ('19950601101500000', math.inf),
        ('19950601101508000', None),
    ])
    def test_single_line_image(self, first, expected):
        dssr = DatasetSummaryRecord(az_time_first=first,
                                    inp_sctim='19950601101508000')
        desc = CeosDescriptor(facility=Facility.ESA)
        aztpp = azimuth_time_per_pixel(MemoryRecordReader(), desc, dssr,
                                       None, 12.5, 1)
        if expected is None:
            assert math.isnan(aztpp)
        else:
            assert aztpp == expected

    def test_esa_uses_summary_record(self):
        dssr = DatasetSummaryRecord(az_time_first='19950601101500000',
                                    inp_sctim='19950601101508000')
        desc = CeosDescriptor(facility=Facility.ESA)
        aztpp = azimuth_time_per_pixel(MemoryRecordReader(), desc, dssr,
                                       None, 12.5, 8000)
        assert aztpp == pytest.approx(0.002)

    def test_line_header_without_data_file(self):
        desc = CeosDescriptor(facility=Facility.CDPF)
        with pytest.raises(MissingRecordError):
            azimuth_time_per_pixel(MemoryRecordReader(), desc,
                                   DatasetSummaryRecord(), None, 12.5, 1000)

    def test_line_header_from_data_file(self, data_file_factory):
        path = data_file_factory(acq_msec=43190000)
        dssr = DatasetSummaryRecord(inp_sctim='20000101120000000')
        desc = CeosDescriptor(facility=Facility.RSI)
        aztpp = azimuth_time_per_pixel(MemoryRecordReader(data_path=path),
                                       desc, dssr, None, 50.0, 1000)
        assert aztpp == pytest.approx(0.02)


# ===================================================================
# ASF RADARSAT-1 UTM product
# ===================================================================

def _asf_rsat_records(**overrides):
    records = dict(
        dssr=DatasetSummaryRecord(
            mission_id='RSAT-1', sensor_id='RSAT-1', fac_id='ASF',
            sys_id='SPS', ver_id='3.20', product_type='FUL RES',
            product_id='RSAT123456XYZ', beam1='ST4', asc_des='A',
            revolution='12345', rng_samp_rate=18.47, rng_gate=5.6,
            clock_ang=90.0, wave_length=0.0566, prf=1300.0,
            crt_dopcen=(300.0, 0.01, 0.0), alt_dopcen=(20000.0, 1.0, 0.0),
            pixel_spacing=12.5, line_spacing=12.5, n_rnglok=1.0,
            ellip_maj=6378.137, ellip_min=6356.752, pro_lat=64.8,
            pro_long=-147.7, inp_sctim='19980115203000000',
            sat_bintim='1234567 ', sat_clktim='19980115203000000 ',
        ),
        ifiledr=ImageFileDescriptor(numofrec=8000, reclen=8192, predata=192,
                                    bytgroup=1, bitssamp=8, sampdata=1),
        mpdr=MapProjectionRecord(
            mpdesig='UTM', utmzone='6', utmeast=500000.0, utmnorth=0.0,
            utmlat=0.0, utmlong=-147.0, utmscale=0.9996,
            npixels=8100, nlines=8000,
            tlcnorth=7250.0, tlceast=420.0, trcnorth=7250.0, trceast=521.25,
            blcnorth=7150.0, blceast=420.0,
        ),
        fdr=FileDescriptorRecord(l_facdr=1717),
        asf_facdr=AsfFacilityRecord(
            grndslnt='GROUND', deskewf='Y', swathvel=6600.0, alines=8000,
            sltrngfp=850.0, eradcntr=6360.0, scalt=790.0, biterrrt=1e-6,
            nearslat=65.1, nearslon=-148.9, farslat=65.4, farslon=-146.5,
            nearelat=64.2, nearelon=-149.3, farelat=64.5, farelon=-146.9,
        ),
    )
    records.update(overrides)
    return records


class TestAsfRadarsatDecode:

    @pytest.fixture
    def decoded(self, stub_services, config):
        reader = MemoryRecordReader(**_asf_rsat_records())
        meta = ceos_init(reader, services=stub_services, config=config)
        return meta, reader, stub_services

    def test_general(self, decoded):
        meta, _, _ = decoded
        general = meta.general
        assert general.sensor == 'RSAT-1'
        assert general.sensor_name == 'SAR'
        assert general.mode == 'ST4'
        assert general.processor == 'ASF/SPS/3.20'
        assert general.data_type is DataType.BYTE
        assert general.system in ('lil_ieee', 'big_ieee')
        assert general.orbit == 12345
        assert general.frame == 456
        assert general.orbit_direction == 'A'
        assert general.band_number == 0
        assert general.line_count == 8000
        assert general.sample_count == 8100
        assert general.re_major == pytest.approx(6378137.0)
        assert general.re_minor == pytest.approx(6356752.0)
        assert general.bit_error_rate == 1e-6
        assert general.no_data == 0.0

    def test_frame_not_recomputed(self, decoded):
        _, _, services = decoded
        assert services.frame_calls == []

    def test_sar_block(self, decoded):
        meta, _, _ = decoded
        sar = meta.sar
        assert sar.polarization == 'HH'
        assert sar.image_type is ImageType.PROJECTED
        assert sar.look_direction == 'R'
        assert sar.look_count == 4
        assert sar.deskewed is True
        assert sar.original_line_count == 8000
        assert sar.original_sample_count == 8000
        assert sar.wavelength == pytest.approx(0.0566)
        assert sar.range_sampling_rate == pytest.approx(18.47e6)
        assert sar.range_time_per_pixel == pytest.approx(1.0 / 18.47e6)
        assert sar.slant_range_first_pixel == pytest.approx(850000.0)
        assert sar.satellite_binary_time == '1234567'
        assert sar.satellite_clock_time == '19980115203000000'

    def test_flipped_time(self, decoded):
        meta, _, _ = decoded
        aztpp = 12.5 / 6600.0
        assert meta.sar.azimuth_time_per_pixel == pytest.approx(-aztpp)
        assert meta.sar.time_shift == pytest.approx(aztpp * 8000)
        assert meta.sar.slant_shift == 0.0

    def test_doppler(self, decoded):
        meta, _, _ = decoded
        np.testing.assert_allclose(meta.sar.range_doppler_coefficients,
                                   [300.0, 0.01, 0.0])
        assert np.all(np.isnan(meta.sar.azimuth_doppler_coefficients))

    def test_earth_geometry_from_facility_record(self, decoded):
        meta, _, services = decoded
        assert meta.sar.earth_radius == pytest.approx(6.36e6)
        assert meta.sar.satellite_height == pytest.approx(7.15e6)
        assert services.radius_calls == []

    def test_projection(self, decoded):
        meta, _, _ = decoded
        proj = meta.projection
        assert proj.type is ProjectionType.UNIVERSAL_TRANSVERSE_MERCATOR
        assert proj.param.zone == 6
        assert proj.param.false_easting == 500000.0
        assert proj.param.scale_factor == 0.9996
        assert proj.start_x == pytest.approx(420000.0)
        assert proj.start_y == pytest.approx(7250000.0)
        assert proj.per_x == pytest.approx(12.5)
        assert proj.per_y == pytest.approx(-12.5)
        assert proj.units == 'meters'
        assert proj.hem == 'N'
        assert proj.re_major == pytest.approx(6378137.0)

    def test_location(self, decoded):
        meta, _, _ = decoded
        loc = meta.location
        assert loc.lat_start_near_range == 65.1
        assert loc.lon_end_far_range == -146.9

    def test_no_state_vectors_skips_propagation(self, stub_services, config,
                                                caplog):
        reader = MemoryRecordReader(**_asf_rsat_records())
        with caplog.at_level(logging.WARNING):
            meta = ceos_init(reader, services=stub_services, config=config)
        assert meta.state_vectors is None
        assert stub_services.propagations == []
        assert 'skipping propagation' in caplog.text

    def test_reader_closed(self, decoded):
        _, reader, _ = decoded
        assert reader.closed

    def test_left_looking(self, stub_services, config):
        records = _asf_rsat_records()
        records['dssr'] = replace(records['dssr'], clock_ang=-90.0)
        meta = ceos_init(MemoryRecordReader(**records),
                         services=stub_services, config=config)
        assert meta.sar.look_direction == 'L'

    def test_precision_processor_not_propagated(self, stub_services, config):
        records = _asf_rsat_records(ppdr=PlatformPositionRecord(ndata=1))
        records['dssr'] = replace(records['dssr'], sys_id='PREC')
        meta = ceos_init(MemoryRecordReader(**records),
                         services=stub_services, config=config)
        assert meta.state_vectors.vector_count == 3
        assert stub_services.propagations == []

    def test_unknown_designator_is_fatal(self, stub_services, config):
        reader = MemoryRecordReader(**_asf_rsat_records(
            mpdr=MapProjectionRecord(mpdesig='MERCATOR', npixels=1, nlines=1)))
        with pytest.raises(ProjectionError):
            ceos_init(reader, services=stub_services, config=config)
        assert reader.closed

    def test_missing_image_descriptor(self, stub_services, config):
        reader = MemoryRecordReader(**_asf_rsat_records(ifiledr=None))
        with pytest.raises(MissingRecordError):
            ceos_init(reader, services=stub_services, config=config)
        assert reader.closed

    def test_missing_sar_block_allocated(self, stub_services, config):
        meta = CeosMetadata()
        assert meta.sar is None
        ceos_init(MemoryRecordReader(**_asf_rsat_records()), meta=meta,
                  services=stub_services, config=config)
        assert meta.sar.look_count == 4


# ===================================================================
# CDPF ScanSAR product
# ===================================================================

def _cdpf_records(data_path, **overrides):
    records = dict(
        dssr=DatasetSummaryRecord(
            mission_id='RSAT-1', sensor_id='RSAT-1', fac_id='CDPF',
            sys_id='SKY', ver_id='V1.0', product_type='SCANSAR WIDE',
            product_id='RS10000045A', beam3='WD3', asc_des='D',
            rng_samp_rate=14.6, rng_gate=5.0, clock_ang=30.0,
            crt_dopcen=(99999.0, 0.0, 0.0), crt_rate=(250.0, 0.002, 0.0),
            pixel_spacing=50.0, line_spacing=50.0, n_rnglok=2.0,
            ellip_maj=6378.137, ellip_min=6356.752, pro_lat=-20.0,
            inp_sctim='20000101120000000',
        ),
        ifiledr=ImageFileDescriptor(numofrec=1000, reclen=2192, predata=192,
                                    bytgroup=2, bitssamp=16, sampdata=1),
        mpdr=MapProjectionRecord(mpdesig='BOGUS'),
        fdr=FileDescriptorRecord(l_facdr=12288),
        esa_facdr=EsaFacilityRecord(ber=0.5),
        ppdr=PlatformPositionRecord(ndata=3),
        data_path=data_path,
    )
    records.update(overrides)
    return records


class TestCdpfScansarDecode:

    @pytest.fixture
    def data_path(self, data_file_factory):
        return data_file_factory(acq_msec=43190000)

    def test_beam_from_third_identifier(self, data_path, stub_services,
                                        config):
        meta = ceos_init(MemoryRecordReader(**_cdpf_records(data_path)),
                         services=stub_services, config=config)
        assert meta.general.mode == 'SWA'

    def test_beam_from_processing_parameters(self, data_path, stub_services,
                                             config):
        reader = MemoryRecordReader(**_cdpf_records(
            data_path, ppr=ProcessingParameterRecord(beam_type='SWB ')))
        meta = ceos_init(reader, services=stub_services, config=config)
        assert meta.general.mode == 'SWB'

    def test_projection_and_esa_records_ignored(self, data_path,
                                                stub_services, config):
        meta = ceos_init(MemoryRecordReader(**_cdpf_records(data_path)),
                         services=stub_services, config=config)
        assert meta.projection is None
        assert meta.sar.deskewed is False
        assert meta.general.bit_error_rate == 0.0
        assert meta.sar.slant_range_first_pixel == pytest.approx(
            5.0e-3 * SPEED_OF_LIGHT / 2.0)

    def test_decode(self, data_path, stub_services, config):
        meta = ceos_init(MemoryRecordReader(**_cdpf_records(data_path)),
                         services=stub_services, config=config)
        assert meta.general.frame == 45
        assert meta.general.orbit_direction == 'D'
        assert meta.general.data_type is DataType.INTEGER16
        assert meta.general.sample_count == 1000
        assert meta.sar.look_count == 4
        assert meta.sar.azimuth_time_per_pixel == pytest.approx(0.02)
        assert meta.sar.time_shift == 0.0
        np.testing.assert_allclose(meta.sar.range_doppler_coefficients,
                                   [250.0, 0.002, 0.0])

    def test_geometry_from_services(self, data_path, stub_services, config):
        meta = ceos_init(MemoryRecordReader(**_cdpf_records(data_path)),
                         services=stub_services, config=config)
        assert meta.sar.earth_radius == stub_services.EARTH_RADIUS
        assert meta.sar.satellite_height == stub_services.SATELLITE_HEIGHT
        assert stub_services.radius_calls == [(500, 500)]

    def test_propagation(self, data_path, stub_services, config):
        meta = ceos_init(MemoryRecordReader(**_cdpf_records(data_path)),
                         services=stub_services, config=config)
        assert stub_services.propagations == [(3, 10.0)]
        assert meta.state_vectors.vectors[0].time == stub_services.TIME_DELTA

    def test_long_interval_halved(self, data_file_factory, stub_services,
                                  config):
        # 100 s from first to center line over 500 lines
        path = data_file_factory(acq_msec=43100000)
        ceos_init(MemoryRecordReader(**_cdpf_records(path)),
                  services=stub_services, config=config)
        count, interval = stub_services.propagations[0]
        assert (count, interval) == (17, pytest.approx(12.5))

    def test_long_scene_not_propagated(self, data_file_factory,
                                       stub_services, config):
        path = data_file_factory(acq_msec=42700000)
        ceos_init(MemoryRecordReader(**_cdpf_records(path)),
                  services=stub_services, config=config)
        assert stub_services.propagations == []

    def test_needs_data_file(self, stub_services, config):
        reader = MemoryRecordReader(**_cdpf_records(None))
        with pytest.raises(MissingRecordError):
            ceos_init(reader, services=stub_services, config=config)
        assert reader.closed

    def test_truncated_data_file(self, tmp_path, stub_services, config):
        path = tmp_path / 'short.D'
        path.write_bytes(b'\x00' * 20)
        with pytest.raises(LineHeaderError):
            ceos_init(MemoryRecordReader(**_cdpf_records(path)),
                      services=stub_services, config=config)


# ===================================================================
# RSI ScanSAR narrow product without projection record
# ===================================================================

def _rsi_reader(data_path, **records):
    return MemoryRecordReader(
        dssr=DatasetSummaryRecord(
            mission_id='RSAT-1', sensor_id='RSAT-1', fac_id='RSI',
            sys_id='PDS', ver_id='1.2', product_type='SCANSAR NARROW',
            asc_des='A', rng_samp_rate=14.6, rng_gate=5.0,
            pixel_spacing=50.0, line_spacing=50.0, n_rnglok=2.0,
            ellip_maj=6378.137, ellip_min=6356.752, pro_lat=45.0,
            inp_sctim='20000101120000000',
        ),
        ifiledr=ImageFileDescriptor(numofrec=1000, reclen=1192,
                                    predata=192),
        data_path=data_path,
        **records,
    )


class TestRsiScansarDecode:

    @pytest.fixture
    def decoded(self, data_file_factory, stub_services, config):
        reader = _rsi_reader(data_file_factory(acq_msec=43190000),
                             ppdr=PlatformPositionRecord(ndata=3))
        reader = _rsi_reader(data_file_factory(acq_msec=43190000))
        meta = ceos_init(reader, services=stub_services, config=config)
        return meta, stub_services

    def test_beam_and_frame(self, decoded):
        meta, services = decoded
        assert meta.general.mode == 'SWB'
        assert meta.general.frame == services.FRAME
        assert services.frame_calls == [('ERS', 45.0, '')]

    def test_classified_as_narrow(self, decoded):
        meta, _ = decoded
        assert meta.sar.image_type is ImageType.PROJECTED
        assert meta.sar.time_shift == pytest.approx(20.0)

    def test_along_track_cross_track_fallback(self, decoded):
        meta, services = decoded
        proj = meta.projection
        assert proj.type is ProjectionType.ALONG_TRACK_CROSS_TRACK
        assert proj.per_x == 50.0
        assert proj.per_y == -50.0
        assert proj.height == 0.0
        assert proj.hem == 'N'
        assert proj.param.rlocal == services.EARTH_RADIUS
        # start point on the equator moving north: orbit normal along -y
        assert proj.param.alpha2 == pytest.approx(-90.0)
        assert proj.param.alpha3 == pytest.approx(-90.0)
        assert services.radius_calls == [(500, 0), (500, 500)]

    def test_propagation(self, decoded):
        meta, services = decoded
        assert services.propagations == [(3, 10.0)]
        assert meta.state_vectors.vectors[0].time == services.TIME_DELTA

    def test_orbit_geometry_without_platform_positions(
            self, data_file_factory, config, caplog):
        reader = _rsi_reader(data_file_factory(acq_msec=43190000))
        with caplog.at_level(logging.WARNING, logger='ceosmeta'):
            meta = ceos_init(reader, services=OrbitGeometry(), config=config)

        proj = meta.projection
        assert proj.type is ProjectionType.ALONG_TRACK_CROSS_TRACK
        assert proj.param.rlocal == pytest.approx(
            ellipsoid_radius(45.0, 6378137.0, 6356752.0))
        assert proj.param.alpha1 is None
        assert proj.param.alpha2 is None
        assert proj.param.alpha3 is None
        assert meta.sar.earth_radius is None
        assert meta.sar.satellite_height is None
        assert meta.state_vectors is None
        assert 'along-track/cross-track angles' in caplog.text
        assert reader.closed


# ===================================================================
# ESA ERS-1 product with real orbit geometry
# ===================================================================

_ORBIT_RADIUS = 7.16e6


def _polar_orbit_ppdr(count=5, step=60.0):
    """Earth-fixed state vectors of a circular polar orbit."""
    n = math.sqrt(EARTH_GM / _ORBIT_RADIUS**3)
    omega = np.array([0.0, 0.0, EARTH_ROTATION_RATE])
    rows = []
    for i in range(count):
        t = i * step
        th = n * t
        pos = _ORBIT_RADIUS * np.array([math.cos(th), 0.0, math.sin(th)])
        vel = _ORBIT_RADIUS * n * np.array([-math.sin(th), 0.0,
                                            math.cos(th)])
        vel = vel - np.cross(omega, pos)
        c, s = math.cos(EARTH_ROTATION_RATE * t), math.sin(
            EARTH_ROTATION_RATE * t)
        rot = np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])
        rows.append(tuple(rot @ pos) + tuple(rot @ vel))
    return PlatformPositionRecord(ndata=count, year=1995, month=6, day=1,
                                  gmt_sec=36880.0, data_int=step,
                                  pos_vec=tuple(rows))


def _esa_reader(**records):
    return MemoryRecordReader(
        dssr=DatasetSummaryRecord(
            mission_id='ERS1', sensor_id='ERS-1', fac_id='ESRIN',
            sys_id='VMP', ver_id='6.8', product_type='SAR PRECISION IMAGE',
            asc_des='D', revolution='20123', rng_samp_rate=18.96,
            wave_length=0.0566, prf=1679.9, clock_ang=90.0,
            crt_dopcen=(400.0, 1000.0, 0.0), n_rnglok=1.0,
            pixel_spacing=12.5, line_spacing=12.5,
            ellip_maj=6378.137, ellip_min=6356.752, pro_lat=45.0,
            az_time_first='19950601101500000',
            inp_sctim='19950601101508000', rng_time=(5.5, 0.0, 0.0),
        ),
        ifiledr=ImageFileDescriptor(numofrec=8000, reclen=16012,
                                    predata=12, bytgroup=2,
                                    bitssamp=16, sampdata=1),
        **records,
    )


class TestEsaErsDecode:

    @pytest.fixture
    def decoded(self, config):
        reader = _esa_reader(
            mpdr=MapProjectionRecord(mpdesc='GROUND RANGE', npixels=8000,
                                     nlines=8000),
            fdr=FileDescriptorRecord(l_facdr=12288),
            esa_facdr=EsaFacilityRecord(ber=1e-7),
            ppdr=_polar_orbit_ppdr(),
        )
        return ceos_init(reader, services=OrbitGeometry(), config=config)

    def test_identification(self, decoded):
        assert decoded.general.sensor == 'ERS1'
        assert decoded.general.mode == 'STD'
        assert decoded.general.processor == 'ESRIN/VMP/6.8'
        assert decoded.sar.polarization == 'VV'
        assert decoded.sar.look_count == 5

    def test_frame_from_latitude(self, decoded):
        assert decoded.general.orbit_direction == 'D'
        assert 1800 <= decoded.general.frame <= 5400

    def test_ground_range_description(self, decoded):
        assert decoded.sar.image_type is ImageType.GROUND
        assert decoded.projection.type is ProjectionType.GROUND_UNSET
        assert decoded.projection.param is None

    def test_esa_facility_fields(self, decoded):
        assert decoded.sar.deskewed is True
        assert decoded.general.bit_error_rate == 1e-7
        assert decoded.sar.slant_range_first_pixel == pytest.approx(
            5.5 * SPEED_OF_LIGHT / 2000.0)

    def test_timing(self, decoded):
        assert decoded.sar.azimuth_time_per_pixel == pytest.approx(0.002)
        assert decoded.sar.time_shift == 0.0

    def test_state_vector_epoch(self, decoded):
        block = decoded.state_vectors
        assert block.year == 1995
        assert block.julian_day == 152
        assert block.second == pytest.approx(36900.0)

    def test_propagated_vectors(self, decoded):
        vectors = decoded.state_vectors.vectors
        assert [v.time for v in vectors] == pytest.approx([0.0, 8.0, 16.0])
        for vec in vectors:
            radius = np.linalg.norm(vec.position.to_array())
            assert radius == pytest.approx(_ORBIT_RADIUS, rel=1e-4)

    def test_earth_geometry(self, decoded):
        assert 6.35e6 < decoded.sar.earth_radius < 6.3782e6
        assert decoded.sar.satellite_height == pytest.approx(
            _ORBIT_RADIUS, rel=1e-4)

    def test_summary_and_descriptor_only(self, config, caplog):
        reader = _esa_reader()
        with caplog.at_level(logging.WARNING, logger='ceosmeta'):
            meta = ceos_init(reader, services=OrbitGeometry(), config=config)

        assert meta.general.sensor == 'ERS1'
        assert meta.sar.image_type is None
        assert meta.projection is None
        assert meta.sar.azimuth_time_per_pixel == pytest.approx(0.002)
        assert meta.state_vectors is None
        assert meta.sar.earth_radius is None
        assert meta.sar.satellite_height is None
        assert 'earth radius and satellite height left unset' in caplog.text
        assert reader.closed


# ===================================================================
# ALOS PALSAR level 1.1
# ===================================================================

def _alos_reader(data_path):
    return MemoryRecordReader(
        dssr=DatasetSummaryRecord(
            mission_id='ALOS', sensor_id='ALOS-SAR', fac_id='EOC',
            sys_id='SKY', ver_id='1.0', lev_code='1.1', product_type='L1.1',
            product_id='ALPSRP123450750', asc_des='A', revolution='05000',
            rng_samp_rate=32.0, wave_length=0.236, prf=2160.0,
            n_rnglok=1.0, ellip_maj=6378.137, ellip_min=6356.752,
            pro_lat=35.0, inp_sctim='20070101000010000',
            phas_coef=(0.0, 0.0, -1.0e12, 0.0, 0.0),
        ),
        ifiledr=ImageFileDescriptor(numofrec=1000, reclen=8412, predata=412,
                                    bytgroup=8, bitssamp=32, sampdata=2,
                                    formatid='COMPLEX*8'),
        data_path=data_path,
    )


class TestAlosDecode:

    def test_single_polarization(self, data_file_factory, stub_services,
                                 config):
        path = data_file_factory(sar_cib=2, tran_polar=0, recv_polar=1,
                                 chirp_linear=5)
        meta = ceos_init(_alos_reader(path), services=stub_services,
                         config=config)
        assert meta.general.sensor == 'ALOS'
        assert meta.general.frame == 750
        assert meta.general.data_type is DataType.COMPLEX_REAL32
        assert meta.sar.polarization == 'HV'
        assert meta.sar.polarization_mode is PolarizationMode.SINGLE
        assert meta.sar.chirp_rate == 5000.0
        assert meta.sar.look_count == 4
        assert meta.sar.image_type is ImageType.SLANT

    def test_complex_pixel_sizes(self, data_file_factory, stub_services,
                                 config):
        path = data_file_factory(sar_cib=2)
        meta = ceos_init(_alos_reader(path), services=stub_services,
                         config=config)
        assert meta.general.x_pixel_size == pytest.approx(
            SPEED_OF_LIGHT / (2.0 * 32.0e6))
        assert meta.general.y_pixel_size == 3.125

    def test_dual_polarization_looks(self, data_file_factory, stub_services,
                                     config):
        path = data_file_factory(sar_cib=1)
        meta = ceos_init(_alos_reader(path), services=stub_services,
                         config=config)
        assert meta.sar.polarization_mode is PolarizationMode.DUAL
        assert meta.sar.look_count == 2

    def test_timing_from_line_header(self, data_file_factory, stub_services,
                                     config):
        path = data_file_factory(acq_msec=0)
        meta = ceos_init(_alos_reader(path), services=stub_services,
                         config=config)
        assert meta.sar.azimuth_time_per_pixel == pytest.approx(0.02)

    def test_requires_data_file(self, stub_services, config):
        with pytest.raises(MissingRecordError):
            ceos_init(_alos_reader(None), services=stub_services,
                      config=config)


# ===================================================================
# Descriptor from summary record
# ===================================================================

def test_descriptor_for_decode_is_fresh():
    dssr = DatasetSummaryRecord(mission_id='ERS1', fac_id='ESRIN',
                                product_type='SAR PRECISION IMAGE')
    first = classify_dssr(dssr)
    second = classify_dssr(dssr)
    assert first == second
    assert first is not second
    assert first.facility is Facility.ESA
