"""
Sensor Model
"""

from binmonitor.extensions import db


class Sensor(db.Model):
    """Named measurement channel attached to exactly one bin"""
    __tablename__ = 'sensors'
    
    id = db.Column(db.Integer, primary_key=True)
    bin_id = db.Column(db.Integer, db.ForeignKey('bins.id'), nullable=False)
    sensor_name = db.Column(db.String(100), nullable=False)
    
    # Readings go with the sensor on hard delete
    readings = db.relationship('SensorReading', backref='sensor', lazy=True,
                               cascade='all, delete-orphan')
    
    def to_dict(self):
        return {'id': self.id, 'sensor_name': self.sensor_name}
    
    def __repr__(self):
        return f'<Sensor {self.sensor_name} Bin:{self.bin_id}>'
