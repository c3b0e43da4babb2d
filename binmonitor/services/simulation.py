"""
Sensor Reading Simulation Service

Generates plausible readings for the default sensor types.
"""

import random

# Typical values per sensor type
SENSOR_CHARACTERISTICS = {
    'Particulate Matter (PM2.5/PM10)': {'base': 35.0, 'spread': 25.0},
    'Carbon Monoxide (CO)': {'base': 9.0, 'spread': 6.0},
    'Carbon Dioxide (CO2)': {'base': 80.0, 'spread': 40.0},
    'Total Volatile Organic Compounds (TVOC)': {'base': 60.0, 'spread': 50.0},
}

DEFAULT_CHARACTERISTICS = {'base': 50.0, 'spread': 30.0}


def simulate_sensor_value(sensor_name, spike_chance=0.1, rng=random):
    """
    Simulate a single reading for a sensor.
    
    Args:
        sensor_name: Name of the sensor, used to pick its characteristics
        spike_chance: Probability of a spike well above the usual range
        rng: Random source (anything with ``uniform`` and ``random``)
    
    Returns:
        Reading value rounded to 2 decimals, never negative
    """
    characteristics = SENSOR_CHARACTERISTICS.get(sensor_name, DEFAULT_CHARACTERISTICS)
    value = characteristics['base'] + rng.uniform(-characteristics['spread'], characteristics['spread'])
    
    if rng.random() < spike_chance:
        value *= rng.uniform(1.5, 3.0)
    
    return round(max(0.0, value), 2)
