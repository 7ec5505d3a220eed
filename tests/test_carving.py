"""
Tests for carving sessions.

Organized into:
  1. Dimension math and seam selection
  2. Failure handling and partial progress
  3. Input normalisation and configuration
  4. Progress reporting
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import logging

import torch
import pytest
from seamcarver.carving import SeamCarver, as_pixel_grid, carve_image
from seamcarver.config import Axis, CarvingConfig, EnergyStrategy
from seamcarver.diagnostics import LoggingReporter, RecordingReporter
from seamcarver.errors import ConfigurationError, GeometryError, SeamCarvingError

from conftest import make_uniform_image, make_valley_image


# ---------------------------------------------------------------------------
# 1. Dimension math and seam selection
# ---------------------------------------------------------------------------

class TestReduce:
    def test_reduces_width(self, random_image):
        carver = SeamCarver(random_image, CarvingConfig('vertical'))
        assert carver.reduce(5) == 5
        assert carver.shape == (3, 24, 27)

    def test_reduces_height(self, random_image):
        carver = SeamCarver(random_image, CarvingConfig('horizontal'))
        carver.reduce(4)
        assert carver.shape == (3, 20, 32)

    @pytest.mark.parametrize("energy", list(EnergyStrategy))
    @pytest.mark.parametrize("axis", list(Axis))
    def test_multiple_carves_reduce_correctly(self, energy, axis, random_image):
        """Iterative carving should reduce dimensions by exactly n_seams."""
        for n in [1, 3, 7]:
            carved = carve_image(random_image, n, direction=axis, energy=energy)
            if axis is Axis.VERTICAL:
                assert carved.shape == (3, 24, 32 - n)
            else:
                assert carved.shape == (3, 24 - n, 32)
            assert carved.dtype == torch.uint8

    def test_zero_seams_is_a_no_op(self, random_image):
        carver = SeamCarver(random_image)
        assert carver.reduce(0) == 0
        assert torch.equal(carver.image, random_image)

    def test_valley_column_is_removed(self, valley_image):
        """The only zero-energy column is the one that gets carved."""
        carver = SeamCarver(valley_image, CarvingConfig(Axis.VERTICAL, EnergyStrategy.GRADIENT))
        carver.reduce(1)

        assert carver.last_seam.tolist() == [2, 2, 2, 2, 2]
        assert carver.shape == (3, 5, 4)
        expected = torch.cat([valley_image[:, :, :2], valley_image[:, :, 3:]], dim=2)
        assert torch.equal(carver.image, expected)

    def test_valley_row_is_removed_horizontally(self):
        image = make_valley_image().transpose(1, 2).contiguous()
        carver = SeamCarver(image, CarvingConfig(Axis.HORIZONTAL))
        carver.reduce(1)
        assert carver.last_seam.tolist() == [2, 2, 2, 2, 2]
        expected = torch.cat([image[:, :2], image[:, 3:]], dim=1)
        assert torch.equal(carver.image, expected)

    def test_uniform_image_stays_uniform(self):
        image = make_uniform_image(6, 8, (10, 20, 30))
        carved = carve_image(image, 3)
        assert torch.equal(carved, make_uniform_image(6, 5, (10, 20, 30)))

    def test_uniform_image_reference_seam(self):
        """Zero energy everywhere: the tie-break walks diagonally to the edge."""
        carver = SeamCarver(make_uniform_image(6, 4))
        carver.reduce(1)
        assert carver.last_seam.tolist() == [3, 3, 3, 2, 1, 0]

    def test_does_not_modify_input(self, random_image):
        before = random_image.clone()
        carve_image(random_image, 3)
        assert torch.equal(random_image, before)

    def test_seams_are_recorded(self, random_image):
        carver = SeamCarver(random_image)
        carver.reduce(3)
        assert len(carver.seams) == 3
        for i, seam in enumerate(carver.seams):
            assert seam.shape == (24,)
            assert seam.max() <= 32 - 1 - i

    def test_maps_match_current_image(self, random_image):
        carver = SeamCarver(random_image, CarvingConfig(energy='sobel'))
        carver.reduce(2)
        assert carver.energy_map().shape == (24, 30)
        assert carver.cost_map().shape == (24, 30)
        assert torch.equal(carver.energy_map(), carver.energy_map())


# ---------------------------------------------------------------------------
# 2. Failure handling and partial progress
# ---------------------------------------------------------------------------

class TestGeometryErrors:
    def test_one_by_one_image(self):
        image = make_uniform_image(1, 1)
        carver = SeamCarver(image)
        with pytest.raises(GeometryError) as excinfo:
            carver.reduce(1)
        assert excinfo.value.cycles_completed == 0
        assert torch.equal(carver.image, image)

    def test_partial_progress_is_kept(self):
        carver = SeamCarver(make_uniform_image(4, 3))
        with pytest.raises(GeometryError) as excinfo:
            carver.reduce(5)
        assert excinfo.value.cycles_completed == 2
        assert carver.shape == (3, 4, 1)
        assert len(carver.seams) == 2

    def test_fully_carved_axis_fails_again(self):
        carver = SeamCarver(make_uniform_image(2, 5), CarvingConfig('horizontal'))
        carver.reduce(1)
        assert carver.remaining() == 0
        with pytest.raises(GeometryError):
            carver.reduce(1)
        assert carver.shape == (3, 1, 5)

    def test_other_axis_still_usable(self):
        """A column-thin image can still lose rows."""
        image = make_uniform_image(5, 1)
        assert carve_image(image, 2, direction='horizontal').shape == (3, 3, 1)
        with pytest.raises(GeometryError):
            carve_image(image, 1, direction='vertical')

    def test_negative_seam_count(self, random_image):
        carver = SeamCarver(random_image)
        with pytest.raises(GeometryError):
            carver.reduce(-1)
        assert torch.equal(carver.image, random_image)

    @pytest.mark.parametrize("shape", [(3, 0, 5), (3, 5, 0)])
    def test_zero_dimension_rejected(self, shape):
        with pytest.raises(GeometryError):
            SeamCarver(torch.zeros(shape, dtype=torch.uint8))

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            carve_image(make_uniform_image(1, 1), 1)


# ---------------------------------------------------------------------------
# 3. Input normalisation and configuration
# ---------------------------------------------------------------------------

class TestConfiguration:
    def test_defaults(self):
        config = CarvingConfig()
        assert config.axis is Axis.VERTICAL
        assert config.energy is EnergyStrategy.GRADIENT

    def test_string_aliases(self):
        config = CarvingConfig('horizontal', 'dualGradient')
        assert config.axis is Axis.HORIZONTAL
        assert config.energy is EnergyStrategy.DUAL_GRADIENT

    def test_unknown_energy_rejected_at_construction(self):
        with pytest.raises(ConfigurationError):
            CarvingConfig(energy='laplacian')

    def test_unknown_axis_rejected_at_construction(self):
        with pytest.raises(ConfigurationError):
            CarvingConfig(axis='diagonal')

    def test_config_is_frozen(self):
        config = CarvingConfig()
        with pytest.raises(AttributeError):
            config.axis = Axis.HORIZONTAL

    def test_wrong_config_type(self, random_image):
        with pytest.raises(ConfigurationError):
            SeamCarver(random_image, config={'axis': 'vertical'})

    def test_carve_image_bad_direction(self, random_image):
        with pytest.raises(SeamCarvingError):
            carve_image(random_image, 1, direction='sideways')


class TestAsPixelGrid:
    def test_float_image_is_scaled(self):
        image = torch.tensor([0.0, 0.5, 1.0]).view(1, 1, 3).expand(3, 1, 3)
        grid = as_pixel_grid(image)
        assert grid.dtype == torch.uint8
        assert grid[0, 0].tolist() == [0, 128, 255]

    def test_grayscale_is_expanded(self):
        grid = as_pixel_grid(torch.full((4, 5), 7, dtype=torch.uint8))
        assert grid.shape == (3, 4, 5)
        assert (grid == 7).all()

    def test_returns_a_copy(self):
        image = make_uniform_image(2, 2)
        grid = as_pixel_grid(image)
        grid[0, 0, 0] = 0
        assert image[0, 0, 0].item() == 128

    @pytest.mark.parametrize("bad", [
        torch.zeros(4, 5, 5, dtype=torch.uint8),
        torch.zeros(5, dtype=torch.uint8),
        [[0, 0], [0, 0]],
    ])
    def test_rejects_malformed(self, bad):
        with pytest.raises(ConfigurationError):
            as_pixel_grid(bad)


# ---------------------------------------------------------------------------
# 4. Progress reporting
# ---------------------------------------------------------------------------

class TestReporting:
    def test_event_order(self):
        reporter = RecordingReporter()
        carver = SeamCarver(make_uniform_image(3, 4), reporter=reporter)
        carver.reduce(2)

        assert [e[0] for e in reporter.events] == [
            'cycle_started', 'map_built', 'map_built', 'seam_chosen', 'seam_removed',
        ] * 2
        assert reporter.events[0] == ('cycle_started', 0, 2)
        assert reporter.events[3] == ('seam_chosen', 0, [2, 1, 0])
        assert reporter.events[4] == ('seam_removed', 0, (3, 3, 3))

    def test_reporter_does_not_change_results(self, random_image):
        plain = carve_image(random_image, 4)
        reported = carve_image(random_image, 4, reporter=RecordingReporter())
        assert torch.equal(plain, reported)

    def test_logging_reporter_levels(self, caplog):
        log = logging.getLogger('seamcarver.test')
        with caplog.at_level(logging.INFO, logger='seamcarver.test'):
            carve_image(make_uniform_image(3, 4), 1, reporter=LoggingReporter(1, log))
        assert 'Carving seam #1' in caplog.text
        assert 'Chose seam' not in caplog.text

        caplog.clear()
        with caplog.at_level(logging.INFO, logger='seamcarver.test'):
            carve_image(make_uniform_image(3, 4), 1, reporter=LoggingReporter(2, log))
        assert 'Chose seam 2 1 0' in caplog.text

    def test_logging_reporter_silent_at_zero(self, caplog):
        log = logging.getLogger('seamcarver.test')
        with caplog.at_level(logging.INFO, logger='seamcarver.test'):
            carve_image(make_uniform_image(3, 4), 1, reporter=LoggingReporter(0, log))
        assert caplog.text == ''
