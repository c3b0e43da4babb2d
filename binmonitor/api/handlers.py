"""
Action Handlers

One function per action. Each takes the request's store session and the
action's typed parameters and returns that action's result. Failures are
raised as ApiError subclasses; committing or rolling back is left to the
dispatcher.
"""

import logging
import re

from flask import current_app
from sqlalchemy.exc import IntegrityError

from binmonitor.api.actions import EditableField
from binmonitor.api.results import (
    BinAddedResult,
    BinDeletedResult,
    BinDetailUpdatedResult,
    BinDetailsResult,
    BinListResult,
    BinLocationsResult,
    BinRecoveredResult,
    ContactSubmittedResult,
    ReadingRecordedResult,
    SensorAddedResult,
    SensorDeletedResult,
)
from binmonitor.errors import NotFoundError, StoreOperationError, ValidationError
from binmonitor.models import Bin, BinStatus, ContactMessage, Sensor, SensorReading
from binmonitor.services.air_quality import determine_sensor_status, overall_air_quality
from binmonitor.utils.validation import is_numeric, parse_date

logger = logging.getLogger(__name__)

NA_VALUE = 'N/A'


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def next_bin_number(identifiers, prefix_length):
    """Return 1 + the highest number found after the identifier prefix.
    
    The number is the run of leading digits after the prefix; identifiers
    without one count as 0. Deleted bins keep their numbers reserved because
    every identifier is scanned.
    """
    highest = 0
    for identifier in identifiers:
        match = re.match(r'\s*(\d+)', (identifier or '')[prefix_length:])
        if match:
            highest = max(highest, int(match.group(1)))
    return highest + 1


def format_bin_identifier(number, prefix='Bin ', width=3):
    return f'{prefix}{number:0{width}d}'


def _recent_readings(session, sensor_id, limit):
    """Latest ``limit`` readings for a sensor, oldest first."""
    readings = session.query(SensorReading).filter_by(sensor_id=sensor_id)\
        .order_by(SensorReading.reading_timestamp.desc(), SensorReading.id.desc())\
        .limit(limit).all()
    readings.reverse()
    return readings


def _latest_value(session, sensor_id):
    row = session.query(SensorReading.reading_value).filter_by(sensor_id=sensor_id)\
        .order_by(SensorReading.reading_timestamp.desc(), SensorReading.id.desc()).first()
    return row[0] if row else None


def refresh_air_quality(session, bin_id):
    """Recompute and store a bin's air quality from its sensors' latest readings."""
    threshold = current_app.config['BAD_STATUS_THRESHOLD']
    sensor_ids = [row[0] for row in session.query(Sensor.id).filter_by(bin_id=bin_id)]
    levels = [determine_sensor_status(_latest_value(session, sensor_id), threshold)['level']
              for sensor_id in sensor_ids]
    status = overall_air_quality(levels)
    
    session.query(Bin).filter_by(id=bin_id)\
        .update({Bin.air_quality_status: status}, synchronize_session=False)
    return status


# ---------------------------------------------------------------------------
# Read actions
# ---------------------------------------------------------------------------

def get_bins(session, params):
    bins = session.query(Bin).filter_by(status=BinStatus.ACTIVE)\
        .order_by(Bin.bin_identifier.asc()).all()
    return BinListResult(bins=[b.to_dict() for b in bins])


def get_deleted_bins(session, params):
    """Deleted bins, most recently deleted first.
    
    ``updated_at`` keeps microseconds, so the id tie-break only matters for
    rows touched within the same microsecond.
    """
    bins = session.query(Bin).filter_by(status=BinStatus.DELETED)\
        .order_by(Bin.updated_at.desc(), Bin.id.desc()).all()
    return BinListResult(bins=[
        {'id': b.id, 'bin_identifier': b.bin_identifier, 'location': b.location}
        for b in bins
    ])


def get_bin_details(session, params):
    """Bin row, its sensors by name, and each sensor's recent readings."""
    bin_record = session.get(Bin, params.bin_id)
    if bin_record is None:
        raise NotFoundError('Bin not found.')
    
    config = current_app.config
    sensors = session.query(Sensor).filter_by(bin_id=bin_record.id)\
        .order_by(Sensor.sensor_name.asc(), Sensor.id.asc()).all()
    
    sensor_data = []
    readings = {}
    for sensor in sensors:
        recent = _recent_readings(session, sensor.id, config['RECENT_READINGS_LIMIT'])
        readings[sensor.id] = [r.to_dict() for r in recent]
        
        latest = recent[-1].reading_value if recent else None
        entry = sensor.to_dict()
        entry['status'] = determine_sensor_status(latest, config['BAD_STATUS_THRESHOLD'])['level']
        sensor_data.append(entry)
    
    return BinDetailsResult(
        details=bin_record.to_dict(include_details=True),
        sensors=sensor_data,
        readings=readings,
    )


def get_bin_locations(session, params):
    """Active bins whose location has known map coordinates."""
    config = current_app.config
    coordinates = config['LOCATION_COORDINATES']
    
    located = []
    bins = session.query(Bin).filter_by(status=BinStatus.ACTIVE)\
        .order_by(Bin.bin_identifier.asc()).all()
    for b in bins:
        point = coordinates.get((b.location or '').strip())
        if point is None:
            continue
        entry = b.to_dict()
        entry['latitude'], entry['longitude'] = point[0], point[1]
        located.append(entry)
    
    return BinLocationsResult(bins=located, center=list(config['DEFAULT_MAP_CENTER']))


# ---------------------------------------------------------------------------
# Write actions
# ---------------------------------------------------------------------------

def add_bin(session, params):
    """Create the next numbered bin with the default sensor set.
    
    The identifier column is unique. When a concurrent request has already
    taken the computed identifier the insert fails, the transaction is rolled
    back and the number is computed again.
    """
    config = current_app.config
    prefix = config['BIN_IDENTIFIER_PREFIX']
    max_attempts = config['BIN_IDENTIFIER_MAX_ATTEMPTS']
    
    for attempt in range(1, max_attempts + 1):
        identifiers = [row[0] for row in session.query(Bin.bin_identifier)]
        number = next_bin_number(identifiers, len(prefix))
        identifier = format_bin_identifier(number, prefix, config['BIN_IDENTIFIER_WIDTH'])
        
        new_bin = Bin(
            bin_identifier=identifier,
            location=config['DEFAULT_LOCATION_TEMPLATE'].format(number=number),
            status=BinStatus.ACTIVE,
        )
        session.add(new_bin)
        try:
            session.flush()
        except IntegrityError:
            # Nothing else is pending in this transaction yet
            session.rollback()
            logger.warning('Bin identifier %s already taken (attempt %d of %d)',
                           identifier, attempt, max_attempts)
            continue
        
        for sensor_name in config['DEFAULT_SENSOR_NAMES']:
            session.add(Sensor(bin_id=new_bin.id, sensor_name=sensor_name))
        session.flush()
        
        logger.info('Added %s with %d default sensors', identifier, len(config['DEFAULT_SENSOR_NAMES']))
        return BinAddedResult(bin=new_bin.to_dict())
    
    raise StoreOperationError('Error adding bin: could not allocate a unique identifier.')


def delete_bin(session, params):
    """Soft-delete an active bin."""
    changed = session.query(Bin).filter_by(id=params.bin_id, status=BinStatus.ACTIVE)\
        .update({Bin.status: BinStatus.DELETED}, synchronize_session=False)
    return BinDeletedResult(changed=changed > 0)


def recover_bin(session, params):
    """Reactivate a soft-deleted bin and return it as it was, now Active."""
    bin_record = session.query(Bin).filter_by(id=params.bin_id, status=BinStatus.DELETED).first()
    if bin_record is None:
        raise NotFoundError('Deleted bin not found.')
    recovered = bin_record.to_dict(include_details=True)
    
    changed = session.query(Bin).filter_by(id=params.bin_id, status=BinStatus.DELETED)\
        .update({Bin.status: BinStatus.ACTIVE}, synchronize_session=False)
    if not changed:
        raise NotFoundError('Bin not found or already active.')
    
    recovered['status'] = BinStatus.ACTIVE.value
    return BinRecoveredResult(bin=recovered)


def update_bin_detail(session, params):
    field = params.field
    if field is EditableField.LAST_MAINTENANCE:
        try:
            value = parse_date(params.value)
        except ValueError:
            raise ValidationError('Invalid date for Last Maintenance. Use YYYY-MM-DD.') from None
    else:
        value = params.value.strip()
    
    changed = session.query(Bin).filter_by(id=params.bin_id)\
        .update({field.column: value}, synchronize_session=False)
    if not changed:
        raise NotFoundError('Bin not found.')
    
    return BinDetailUpdatedResult(field_label=field.value)


def add_sensor(session, params):
    if session.get(Bin, params.bin_id) is None:
        raise NotFoundError('Bin not found.')
    
    sensor = Sensor(bin_id=params.bin_id, sensor_name=params.sensor_name)
    session.add(sensor)
    session.flush()
    return SensorAddedResult(sensor=sensor.to_dict())


def delete_sensor(session, params):
    """Hard-delete a sensor and its readings. A missing sensor is not an error."""
    sensor = session.get(Sensor, params.sensor_id)
    if sensor is not None:
        session.delete(sensor)
        session.flush()
    return SensorDeletedResult()


def update_sensor_reading(session, params):
    """Record a numeric reading; "N/A" and other non-numeric values store nothing."""
    value = params.value
    if value == NA_VALUE or not is_numeric(value):
        logger.debug('Sensor %s value %r not recorded', params.sensor_id, value)
        return ReadingRecordedResult(recorded=False)
    
    sensor = session.get(Sensor, params.sensor_id)
    if sensor is None:
        raise NotFoundError('Sensor not found.')
    
    session.add(SensorReading(sensor_id=sensor.id, reading_value=float(value)))
    session.flush()
    
    status = refresh_air_quality(session, sensor.bin_id)
    return ReadingRecordedResult(recorded=True, air_quality_status=status)


def submit_contact(session, params):
    session.add(ContactMessage(name=params.name, email=params.email, message=params.message))
    session.flush()
    logger.info('Contact message saved: name=%s, email=%s', params.name, params.email)
    return ContactSubmittedResult()
