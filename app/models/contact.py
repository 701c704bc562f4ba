from datetime import datetime, timezone
import uuid
from app.extensions import db
from app.models.enums import ContactStatus

DEFAULT_SUBJECT = "Booking enquiry"


class Contact(db.Model):
    __tablename__ = 'contacts'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Contact details
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30))
    subject = db.Column(db.String(200), default=DEFAULT_SUBJECT, nullable=False)
    message = db.Column(db.Text, nullable=False)
    
    # Status tracking
    status = db.Column(db.String(20), default=ContactStatus.PENDING.value, nullable=False, index=True)
    replied_at = db.Column(db.DateTime)
    
    # Timestamps
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    def mark_replied(self):
        self.status = ContactStatus.REPLIED.value
        self.replied_at = datetime.now(timezone.utc)
    
    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'subject': self.subject,
            'message': self.message,
            'status': self.status,
            'replied_at': self.replied_at.isoformat() if self.replied_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
