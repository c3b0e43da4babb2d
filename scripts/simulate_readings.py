"""Post one simulated reading for every sensor of every active bin.

Usage: python scripts/simulate_readings.py [API_URL]

Requires the package to be installed (pip install -e .).
"""
import sys

from binmonitor.client import ApiRequestError, BinApiClient
from binmonitor.config import Config
from binmonitor.services import simulate_sensor_value


def main(base_url):
    client = BinApiClient(base_url)
    count = 0
    for b in client.get_bins():
        details = client.get_bin_details(b['id'])
        for sensor in details['sensors']:
            value = simulate_sensor_value(sensor['sensor_name'])
            try:
                result = client.update_sensor_reading(sensor['id'], value)
            except ApiRequestError as e:
                print(f"  {b['bin_identifier']} / {sensor['sensor_name']}: {e.message}")
                continue
            count += 1
            print(f"  {b['bin_identifier']} / {sensor['sensor_name']}: {value} "
                  f"(air quality {result.get('airQualityStatus')})")
    print(f'Simulated {count} readings')


if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else Config.API_BASE_URL)
