"""
Sensor Reading Model
"""

from binmonitor.extensions import db

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class SensorReading(db.Model):
    """Append-only history of numeric sensor samples"""
    __tablename__ = 'sensor_readings'
    
    id = db.Column(db.Integer, primary_key=True)
    sensor_id = db.Column(db.Integer, db.ForeignKey('sensors.id', ondelete='CASCADE'),
                          nullable=False)
    reading_value = db.Column(db.Float, nullable=False)
    reading_timestamp = db.Column(db.DateTime, nullable=False,
                                  default=db.func.current_timestamp())
    
    def to_dict(self):
        return {
            'reading_value': self.reading_value,
            'reading_timestamp': (self.reading_timestamp.strftime(TIMESTAMP_FORMAT)
                                  if self.reading_timestamp else None),
        }
    
    def __repr__(self):
        return f'<SensorReading Sensor:{self.sensor_id} Value:{self.reading_value}>'
