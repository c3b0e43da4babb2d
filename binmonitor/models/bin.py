"""
Bin Model
"""

import enum
from datetime import datetime, timezone

from sqlalchemy.dialects import mysql

from binmonitor.extensions import db

# Microsecond precision so deletions within the same second keep their order
PreciseDateTime = db.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql')


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BinStatus(enum.Enum):
    """Lifecycle status of a bin. Bins are soft-deleted, never removed."""
    ACTIVE = 'Active'
    DELETED = 'Deleted'


class Bin(db.Model):
    """A monitored receptacle fitted with air-quality sensors"""
    __tablename__ = 'bins'
    
    id = db.Column(db.Integer, primary_key=True)
    bin_identifier = db.Column(db.String(50), unique=True, nullable=False)
    location = db.Column(db.String(255))
    status = db.Column(
        db.Enum(BinStatus, name='bin_status', values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=BinStatus.ACTIVE,
    )
    last_maintenance = db.Column(db.Date)
    air_quality_status = db.Column(db.String(50))
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())
    updated_at = db.Column(PreciseDateTime, default=utcnow, onupdate=utcnow)
    
    sensors = db.relationship('Sensor', backref='bin', lazy=True,
                              order_by='Sensor.sensor_name')
    
    def to_dict(self, include_details=False):
        data = {
            'id': self.id,
            'bin_identifier': self.bin_identifier,
            'location': self.location,
            'status': self.status.value if self.status else None,
        }
        if include_details:
            data['last_maintenance'] = (self.last_maintenance.isoformat()
                                        if self.last_maintenance else None)
            data['air_quality_status'] = self.air_quality_status
        return data
    
    def __repr__(self):
        return f'<Bin {self.bin_identifier} ({self.status.value if self.status else None})>'
