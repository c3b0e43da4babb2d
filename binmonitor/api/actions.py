"""
API Actions

The closed set of actions the endpoint understands, the typed parameters each
one takes, and the parsers that build those parameters from request values.
"""

import enum
from dataclasses import dataclass

from binmonitor.errors import ValidationError
from binmonitor.utils.validation import is_valid_email, parse_positive_int


class Action(enum.Enum):
    GET_BINS = 'get_bins'
    GET_DELETED_BINS = 'get_deleted_bins'
    GET_BIN_DETAILS = 'get_bin_details'
    GET_BIN_LOCATIONS = 'get_bin_locations'
    ADD_BIN = 'add_bin'
    DELETE_BIN = 'delete_bin'
    RECOVER_BIN = 'recover_bin'
    UPDATE_BIN_DETAIL = 'update_bin_detail'
    ADD_SENSOR = 'add_sensor'
    DELETE_SENSOR = 'delete_sensor'
    UPDATE_SENSOR_READING = 'update_sensor_reading'
    SUBMIT_CONTACT = 'submit_contact'
    
    @property
    def is_write(self):
        """Write actions change the store and must be sent with POST."""
        return self not in READ_ACTIONS


READ_ACTIONS = frozenset({
    Action.GET_BINS,
    Action.GET_DELETED_BINS,
    Action.GET_BIN_DETAILS,
    Action.GET_BIN_LOCATIONS,
})


class EditableField(enum.Enum):
    """Bin fields an operator may edit, keyed by their display label."""
    LOCATION = 'Location'
    LAST_MAINTENANCE = 'Last Maintenance'
    
    @property
    def column(self):
        return EDITABLE_COLUMNS[self]


EDITABLE_COLUMNS = {
    EditableField.LOCATION: 'location',
    EditableField.LAST_MAINTENANCE: 'last_maintenance',
}


@dataclass(frozen=True)
class NoParams:
    pass


@dataclass(frozen=True)
class BinRef:
    bin_id: int


@dataclass(frozen=True)
class SensorRef:
    sensor_id: int


@dataclass(frozen=True)
class BinDetailUpdate:
    bin_id: int
    field: EditableField
    value: str


@dataclass(frozen=True)
class NewSensor:
    bin_id: int
    sensor_name: str


@dataclass(frozen=True)
class SensorReadingUpdate:
    sensor_id: int
    value: str


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    message: str


def _require_bin_id(values):
    bin_id = parse_positive_int(values.get('bin_id'))
    if bin_id is None:
        raise ValidationError('Invalid or missing Bin ID.')
    return bin_id


def _require_sensor_id(values):
    sensor_id = parse_positive_int(values.get('sensor_id'))
    if sensor_id is None:
        raise ValidationError('Invalid or missing Sensor ID.')
    return sensor_id


def parse_no_params(values):
    return NoParams()


def parse_bin_ref(values):
    return BinRef(bin_id=_require_bin_id(values))


def parse_sensor_ref(values):
    return SensorRef(sensor_id=_require_sensor_id(values))


def parse_bin_detail_update(values):
    bin_id = parse_positive_int(values.get('bin_id'))
    field_name = values.get('field')
    value = values.get('value')
    
    if bin_id is None or not field_name or value is None:
        raise ValidationError('Missing required fields for update.')
    
    try:
        field = EditableField(field_name)
    except ValueError:
        raise ValidationError('Invalid field specified for update.') from None
    
    return BinDetailUpdate(bin_id=bin_id, field=field, value=value)


def parse_new_sensor(values):
    bin_id = parse_positive_int(values.get('bin_id'))
    sensor_name = (values.get('sensor_name') or '').strip()
    if bin_id is None or not sensor_name:
        raise ValidationError('Missing Bin ID or Sensor Name.')
    return NewSensor(bin_id=bin_id, sensor_name=sensor_name)


def parse_sensor_reading_update(values):
    sensor_id = parse_positive_int(values.get('sensor_id'))
    value = values.get('value')
    if sensor_id is None or value is None:
        raise ValidationError('Missing Sensor ID or Value.')
    return SensorReadingUpdate(sensor_id=sensor_id, value=value)


def parse_contact_submission(values):
    name = (values.get('contact_name') or '').strip()
    email = (values.get('contact_email') or '').strip()
    message = (values.get('contact_message') or '').strip()

    if not name or not email or not message:
        raise ValidationError('Please fill in all required fields.')
    if not is_valid_email(email):
        raise ValidationError('Invalid email format provided.')

    return ContactSubmission(name=name, email=email, message=message)


PARAM_PARSERS = {
    Action.GET_BINS: parse_no_params,
    Action.GET_DELETED_BINS: parse_no_params,
    Action.GET_BIN_DETAILS: parse_bin_ref,
    Action.GET_BIN_LOCATIONS: parse_no_params,
    Action.ADD_BIN: parse_no_params,
    Action.DELETE_BIN: parse_bin_ref,
    Action.RECOVER_BIN: parse_bin_ref,
    Action.UPDATE_BIN_DETAIL: parse_bin_detail_update,
    Action.ADD_SENSOR: parse_new_sensor,
    Action.DELETE_SENSOR: parse_sensor_ref,
    Action.UPDATE_SENSOR_READING: parse_sensor_reading_update,
    Action.SUBMIT_CONTACT: parse_contact_submission,
}


def parse_params(action, values):
    """Build the typed parameters for an action from request values."""
    return PARAM_PARSERS[action](values)
