import random

from binmonitor.api.handlers import format_bin_identifier, next_bin_number
from binmonitor.services import determine_sensor_status, overall_air_quality, simulate_sensor_value


def test_sensor_status_levels():
    assert determine_sensor_status(None)['level'] == 'N/A'
    assert determine_sensor_status('N/A')['level'] == 'N/A'
    assert determine_sensor_status('abc')['level'] == 'N/A'
    assert determine_sensor_status(100)['level'] == 'Safe'
    assert determine_sensor_status('100.5')['level'] == 'Bad'
    assert determine_sensor_status(100.5)['color'] == 'danger'
    assert determine_sensor_status(40, threshold=30)['level'] == 'Bad'


def test_overall_air_quality():
    assert overall_air_quality(['Safe', 'Bad', 'N/A']) == 'Bad'
    assert overall_air_quality(['Safe', 'N/A']) == 'Good'
    assert overall_air_quality(['N/A', 'N/A']) == 'N/A'
    assert overall_air_quality([]) == 'N/A'


def test_next_bin_number():
    assert next_bin_number([], 4) == 1
    assert next_bin_number(['Bin 001', 'Bin 002'], 4) == 3
    assert next_bin_number(['Bin 010', 'Bin 002'], 4) == 11
    assert next_bin_number(['Bin abc', 'Bin 4x'], 4) == 5
    assert next_bin_number(['Spare'], 4) == 1


def test_format_bin_identifier():
    assert format_bin_identifier(3) == 'Bin 003'
    assert format_bin_identifier(42) == 'Bin 042'
    assert format_bin_identifier(1000) == 'Bin 1000'


def test_simulate_sensor_value_is_non_negative_and_repeatable():
    values = [simulate_sensor_value('Carbon Monoxide (CO)', rng=random.Random(7)) for _ in range(3)]
    assert len(set(values)) == 1
    
    rng = random.Random(1)
    for _ in range(200):
        assert simulate_sensor_value('Unknown Gas', rng=rng) >= 0


def test_simulate_sensor_value_without_spikes_stays_in_range():
    rng = random.Random(3)
    baseline = max(simulate_sensor_value('Carbon Dioxide (CO2)', spike_chance=0, rng=rng)
                   for _ in range(100))
    assert baseline <= 120.0
