import math

import pytest

from radarsim.analyser import RadarAnalyser


def test_default_speed_factor():
    assert RadarAnalyser().radar_visualizer_speed_factor == pytest.approx(0.17)


def test_update_accumulates_and_reports_radians():
    analyser = RadarAnalyser(radar_visualizer_speed_factor=1.0)
    result = analyser.update_angle(45.0, 1.0)
    analyser.update_angle(45.0, 1.0)
    assert analyser.radar_angle_degrees == pytest.approx(90.0)
    assert analyser.radar_angle_radians == pytest.approx(math.pi / 2)
    assert result == pytest.approx(math.pi / 4)


def test_angle_wraps_at_full_turn():
    analyser = RadarAnalyser(radar_visualizer_speed_factor=1.0)
    analyser.update_angle(360.0, 1.0)
    assert analyser.radar_angle_degrees == pytest.approx(0.0)


def test_angle_stays_below_full_turn():
    analyser = RadarAnalyser()
    for _ in range(500):
        analyser.update_angle(1000.0, 0.5)
        assert 0.0 <= analyser.radar_angle_degrees < 360.0


def test_negative_speed_keeps_sign():
    analyser = RadarAnalyser(radar_visualizer_speed_factor=1.0)
    analyser.update_angle(-30.0, 1.0)
    assert analyser.radar_angle_degrees == pytest.approx(-30.0)


def test_saved_names_start_empty():
    assert RadarAnalyser().saved_target_names == []