"""
Action Results

One result type per action. Each renders the success envelope
``{success: true, message?, ...}`` with the top-level keys the browser
client reads for that action.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


class ActionResult:
    """Base for successful action outcomes."""
    
    @property
    def message(self):
        return None
    
    def payload(self):
        return {}
    
    def to_envelope(self):
        body = {'success': True}
        if self.message is not None:
            body['message'] = self.message
        body.update(self.payload())
        return body


@dataclass
class BinListResult(ActionResult):
    bins: List[Dict[str, Any]]
    
    def payload(self):
        return {'data': self.bins}


@dataclass
class BinDetailsResult(ActionResult):
    details: Dict[str, Any]
    sensors: List[Dict[str, Any]]
    readings: Dict[int, List[Dict[str, Any]]]
    
    def payload(self):
        return {'data': {
            'details': self.details,
            'sensors': self.sensors,
            'readings': self.readings,
        }}


@dataclass
class BinLocationsResult(ActionResult):
    bins: List[Dict[str, Any]]
    center: List[float]
    
    def payload(self):
        return {'data': self.bins, 'center': self.center}


@dataclass
class BinAddedResult(ActionResult):
    bin: Dict[str, Any]
    
    @property
    def message(self):
        return 'Bin added successfully.'
    
    def payload(self):
        return {'newBin': self.bin}


@dataclass
class BinDeletedResult(ActionResult):
    changed: bool
    
    @property
    def message(self):
        return 'Bin marked as deleted.' if self.changed else 'Bin not found or already deleted.'


@dataclass
class BinRecoveredResult(ActionResult):
    bin: Dict[str, Any]
    
    @property
    def message(self):
        return 'Bin recovered.'
    
    def payload(self):
        return {'recoveredBin': self.bin}


@dataclass
class BinDetailUpdatedResult(ActionResult):
    field_label: str
    
    @property
    def message(self):
        return f'{self.field_label} updated successfully.'


@dataclass
class SensorAddedResult(ActionResult):
    sensor: Dict[str, Any]
    
    @property
    def message(self):
        return 'Sensor added.'
    
    def payload(self):
        return {'newSensor': self.sensor}


@dataclass
class SensorDeletedResult(ActionResult):
    
    @property
    def message(self):
        return 'Sensor removed.'


@dataclass
class ReadingRecordedResult(ActionResult):
    recorded: bool
    air_quality_status: Optional[str] = None
    
    @property
    def message(self):
        if self.recorded:
            return 'Sensor reading added.'
        return 'Sensor value set (no history added).'
    
    def payload(self):
        if not self.recorded:
            return {}
        return {'airQualityStatus': self.air_quality_status}


@dataclass
class ContactSubmittedResult(ActionResult):
    
    @property
    def message(self):
        return 'Message sent successfully! Thank you.'
