"""
Services Package

Exports all services for easy importing.
"""

from binmonitor.services.air_quality import determine_sensor_status, overall_air_quality
from binmonitor.services.simulation import simulate_sensor_value

__all__ = [
    'determine_sensor_status',
    'overall_air_quality',
    'simulate_sensor_value',
]
