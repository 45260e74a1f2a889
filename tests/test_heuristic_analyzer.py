"""Tests for HeuristicAnalyzer: face locator, feature scorer and classifier."""

import numpy as np
import pytest

from gendercam.core.config import HeuristicConfig
from gendercam.models import CandidateRegion, FeatureVector
from gendercam.services.video.heuristic_analyzer import HeuristicAnalyzer

from helpers import SKIN_BGR, GREY_BGR, make_uniform_frame, make_noisy_skin


class TestSkinMask:

    def test_skin_pixel_accepted(self, analyzer):
        frame = make_uniform_frame(2, 2, SKIN_BGR)
        assert analyzer.skin_mask(frame).all()

    @pytest.mark.parametrize("bgr", [
        (100, 120, 95),   # red not above 95
        (100, 40, 200),   # green not above 40
        (20, 120, 200),   # blue not above 20
        (210, 120, 200),  # blue >= red
        (100, 190, 200),  # red - green <= 15
        GREY_BGR,
    ])
    def test_non_skin_pixels_rejected(self, analyzer, bgr):
        frame = make_uniform_frame(2, 2, bgr)
        assert not analyzer.skin_mask(frame).any()


class TestFaceLocator:

    @pytest.mark.parametrize("bgr", [(255, 0, 0), (0, 0, 0), (255, 255, 255), GREY_BGR])
    def test_uniform_non_skin_frame_has_no_candidates(self, analyzer, bgr):
        assert analyzer.locate(make_uniform_frame(240, 320, bgr)) == []

    def test_uniform_skin_raster_rejected_by_variance(self, analyzer):
        frame = make_uniform_frame(60, 60, SKIN_BGR)
        assert analyzer.skin_mask(frame).mean() == 1.0
        assert analyzer.locate(frame) == []

    def test_uniform_skin_block_on_matching_background(self, analyzer):
        frame = make_uniform_frame(200, 200, GREY_BGR)
        frame[40:160, 40:160] = SKIN_BGR
        assert analyzer.locate(frame) == []

    def test_noisy_skin_block_is_found(self, analyzer, noisy_block_frame):
        candidates = analyzer.locate(noisy_block_frame)

        assert len(candidates) > 0
        assert CandidateRegion(60, 60, 60, 60, 1.0) in candidates

    def test_candidates_stay_inside_frame(self, analyzer, noisy_block_frame):
        for region in analyzer.locate(noisy_block_frame):
            assert region.x >= 0 and region.y >= 0
            assert region.x + region.width <= 200
            assert region.y + region.height <= 200
            assert region.width == region.height == 60
            assert 0.3 < region.confidence <= 1.0

    def test_window_grid_covers_full_frame(self, analyzer):
        frame = make_noisy_skin(200, 200)
        candidates = analyzer.locate(frame)

        # origins 0, 10, ..., 140 on each axis
        assert len(candidates) == 15 * 15
        assert max(c.x for c in candidates) == 140
        assert max(c.y for c in candidates) == 140

    def test_minimum_raster_yields_single_window(self, analyzer):
        candidates = analyzer.locate(make_noisy_skin(60, 60))
        assert [c.as_rect() for c in candidates] == [(0, 0, 60, 60)]

    def test_raster_smaller_than_window(self, analyzer):
        assert analyzer.locate(make_noisy_skin(59, 200)) == []
        assert analyzer.locate(make_noisy_skin(200, 59)) == []

    def test_low_skin_fraction_rejected(self, analyzer):
        # 15-column strip: skin fraction 0.25
        frame = make_uniform_frame(60, 60, (0, 0, 0))
        frame[:, :15] = make_noisy_skin(60, 15)
        assert analyzer.locate(frame) == []

    def test_aspect_filter(self):
        analyzer = HeuristicAnalyzer(HeuristicConfig(min_aspect_ratio=1.5, max_aspect_ratio=2.0))
        assert analyzer.locate(make_noisy_skin(100, 100)) == []

    def test_locator_is_deterministic(self, analyzer, noisy_block_frame):
        assert analyzer.locate(noisy_block_frame) == analyzer.locate(noisy_block_frame)


class TestFeatureScorer:

    def test_uniform_region(self, analyzer):
        frame = make_uniform_frame(60, 60, SKIN_BGR)
        features = analyzer.extract_features(frame, CandidateRegion(0, 0, 60, 60))

        assert isinstance(features, FeatureVector)
        assert len(features) == 4
        assert features.brightness == pytest.approx(140.0)
        assert features.variance == pytest.approx(0.0)
        assert features.edge_density == 0.0
        assert features.skin_tone_ratio == pytest.approx((200 - 120) / 420)

    def test_striped_region_is_all_edges(self, analyzer):
        frame = np.zeros((20, 20, 3), dtype=np.uint8)
        frame[:, ::2] = 255
        features = analyzer.extract_features(frame, CandidateRegion(0, 0, 20, 20))

        assert features.edge_density == pytest.approx(1.0)
        assert features.brightness == pytest.approx(127.5)
        assert features.variance == pytest.approx(127.5 ** 2)

    def test_edge_threshold_is_strict(self, analyzer):
        # Horizontal step of exactly 30 does not count
        frame = np.zeros((10, 10, 3), dtype=np.uint8)
        frame[:, ::2] = 30
        features = analyzer.extract_features(frame, CandidateRegion(0, 0, 10, 10))
        assert features.edge_density == 0.0

    def test_edge_density_excludes_last_row_and_column(self, analyzer):
        frame = np.zeros((10, 10, 3), dtype=np.uint8)
        frame[9, :] = 255
        frame[:, 9] = 255
        features = analyzer.extract_features(frame, CandidateRegion(0, 0, 10, 10))

        # Only pixels in row 8 or column 8 see the bright border
        assert features.edge_density == pytest.approx(17 / 81)

    def test_single_pixel_region(self, analyzer):
        frame = make_uniform_frame(5, 5, SKIN_BGR)
        features = analyzer.extract_features(frame, CandidateRegion(2, 2, 1, 1))
        assert features.edge_density == 0.0
        assert features.variance == 0.0

    def test_empty_region(self, analyzer):
        frame = make_uniform_frame(10, 10, SKIN_BGR)
        features = analyzer.extract_features(frame, CandidateRegion(50, 50, 10, 10))
        assert features == FeatureVector(0.0, 0.0, 0.0, 0.0)

    def test_black_region_skin_ratio_is_zero(self, analyzer):
        frame = make_uniform_frame(10, 10, (0, 0, 0))
        features = analyzer.extract_features(frame, CandidateRegion(0, 0, 10, 10))
        assert features.skin_tone_ratio == 0.0

    def test_region_clipped_to_frame(self, analyzer):
        frame = make_uniform_frame(30, 30, SKIN_BGR)
        clipped = analyzer.extract_features(frame, CandidateRegion(10, 10, 60, 60))
        assert clipped.brightness == pytest.approx(140.0)

    def test_scorer_is_deterministic(self, analyzer, noisy_block_frame):
        region = CandidateRegion(40, 40, 60, 60)
        first = analyzer.extract_features(noisy_block_frame, region)
        second = analyzer.extract_features(noisy_block_frame, region)
        assert first == second

    def test_scorer_does_not_modify_frame(self, analyzer, noisy_block_frame):
        before = noisy_block_frame.copy()
        analyzer.extract_features(noisy_block_frame, CandidateRegion(40, 40, 60, 60))
        np.testing.assert_array_equal(before, noisy_block_frame)


class TestClassifier:

    def test_all_thresholds_exceeded(self, analyzer):
        result = analyzer.classify([125, 210, 0.35, 0.15])
        assert result.label == "Male"
        assert result.confidence == pytest.approx(1.0)

    def test_no_thresholds_exceeded(self, analyzer):
        result = analyzer.classify([50, 50, 0.1, -0.2])
        assert result.label == "Female"
        assert result.confidence == pytest.approx(0.5)

    def test_single_threshold(self, analyzer):
        result = analyzer.classify(FeatureVector(130, 0, 0, 0))
        assert result.label == "Male"
        assert result.confidence == pytest.approx(0.6)

    def test_thresholds_are_strict(self, analyzer):
        result = analyzer.classify([120, 200, 0.3, 0.1])
        assert result.label == "Female"
        assert result.confidence == pytest.approx(0.5)

    @pytest.mark.parametrize("features", [[], [1, 2, 3], [1, 2, 3, 4, 5]])
    def test_wrong_length_falls_back(self, analyzer, features):
        result = analyzer.classify(features)
        assert result.label == "Female"
        assert result.confidence == 0.5

    @pytest.mark.parametrize("features", [
        [1e12, 1e12, 1e12, 1e12],
        [-1e12, -1e12, -1e12, -1e12],
        [0, 0, 0, 0],
        [255, 65025, 1.0, 1.0],
    ])
    def test_score_always_in_unit_interval(self, analyzer, features):
        result = analyzer.classify(features)
        assert 0.0 <= result.confidence <= 1.0
        assert result.label in ("Male", "Female")

    def test_score_clamped_below_zero(self):
        analyzer = HeuristicAnalyzer(HeuristicConfig(brightness_weight=-2.0))
        result = analyzer.classify([200, 0, 0, 0])
        assert result.label == "Female"
        assert result.confidence == pytest.approx(1.0)

    def test_custom_labels(self):
        analyzer = HeuristicAnalyzer(HeuristicConfig(labels=("M", "F")))
        assert analyzer.classify([125, 210, 0.35, 0.15]).label == "M"
        assert analyzer.classify([]).label == "F"


class TestAnalyze:

    def test_results_pair_with_candidates(self, analyzer, noisy_block_frame):
        candidates, results = analyzer.analyze(noisy_block_frame)
        assert len(candidates) == len(results) > 0
        for result in results:
            assert result.label in ("Male", "Female")
            assert 0.0 <= result.confidence <= 1.0

    def test_empty_frame(self, analyzer):
        assert analyzer.analyze(None) == ([], [])
        assert analyzer.analyze(np.zeros((0, 0, 3), dtype=np.uint8)) == ([], [])

    def test_config_is_immutable(self, analyzer):
        with pytest.raises(Exception):
            analyzer.config.window_size = 30
