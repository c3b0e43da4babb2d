"""
Configuration settings for the Bin Monitor API
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'bin_monitor.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    
    # Base URL used by the Python client and scripts
    API_BASE_URL = os.environ.get('BIN_API_URL') or 'http://127.0.0.1:5000/api'
    
    # Bin identifiers look like "Bin 003"
    BIN_IDENTIFIER_PREFIX = 'Bin '
    BIN_IDENTIFIER_WIDTH = 3
    BIN_IDENTIFIER_MAX_ATTEMPTS = 3
    DEFAULT_LOCATION_TEMPLATE = 'New Location {number}'
    
    # Sensors fitted to every new bin
    DEFAULT_SENSOR_NAMES = (
        'Particulate Matter (PM2.5/PM10)',
        'Carbon Monoxide (CO)',
        'Carbon Dioxide (CO2)',
        'Total Volatile Organic Compounds (TVOC)',
    )
    
    # Readings returned per sensor in bin details
    RECENT_READINGS_LIMIT = 6
    
    # Readings above this value mark a sensor as Bad
    BAD_STATUS_THRESHOLD = float(os.environ.get('BAD_STATUS_THRESHOLD', '100'))
    
    # Map lookup: location name -> [latitude, longitude]
    DEFAULT_MAP_CENTER = [8.2280, 124.2451]
    LOCATION_COORDINATES = {
        'MSU-IIT': [8.2398, 124.2448],
        'SMC': [8.2287, 124.2396],
        'AMCC': [8.24063, 124.24791],
        'SPC': [8.2318, 124.2364],
        'ICC': [8.2224, 124.2406],
    }


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = 'DEBUG'
