"""
Contact Message Model
"""

from binmonitor.extensions import db


class ContactMessage(db.Model):
    """Write-only mailbox entry left through the contact form"""
    __tablename__ = 'contact_messages'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())
    
    def __repr__(self):
        return f'<ContactMessage {self.email}>'
