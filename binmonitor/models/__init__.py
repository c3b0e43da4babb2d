"""
Models Package

Exports all models for easy importing.
"""

from binmonitor.models.bin import Bin, BinStatus
from binmonitor.models.sensor import Sensor
from binmonitor.models.reading import SensorReading
from binmonitor.models.contact import ContactMessage

__all__ = ['Bin', 'BinStatus', 'Sensor', 'SensorReading', 'ContactMessage']
