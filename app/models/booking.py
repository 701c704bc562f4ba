from datetime import datetime, timezone
import re
import uuid
from app.extensions import db
from app.models.enums import BookingStatus

PREFERRED_PACKAGE_PATTERN = re.compile(r'Preferred package:\s*(.+)')


class Booking(db.Model):
    __tablename__ = 'bookings'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Traveller details
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    date = db.Column(db.Date, nullable=False)  # Travel date
    persons = db.Column(db.Integer, nullable=False)
    message = db.Column(db.Text)
    
    # Optional package reference
    package_id = db.Column(db.String(36), db.ForeignKey('packages.id', ondelete='SET NULL'), index=True)
    
    status = db.Column(db.String(20), default=BookingStatus.PENDING.value, nullable=False, index=True)
    
    # Client-generated key so a resubmitted form does not create a second row
    idempotency_key = db.Column(db.String(100), unique=True, index=True)
    # sha256 of the submitted fields; a key is only replayed for the same submission
    submission_fingerprint = db.Column(db.String(64))
    
    # Timestamps
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    # Relationships
    package = db.relationship('Package')
    
    def package_name(self):
        """Linked package title, else the one named in the message, else a custom booking"""
        if self.package:
            return self.package.title
        if self.message:
            match = PREFERRED_PACKAGE_PATTERN.search(self.message)
            if match:
                return match.group(1).split('\n')[0].strip()
        return 'Custom Booking'
    
    def package_price(self):
        if self.package and self.package.price is not None:
            return float(self.package.price)
        return 0.0
    
    def to_dict(self):
        price = self.package_price()
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'date': self.date.isoformat() if self.date else None,
            'persons': self.persons,
            'message': self.message,
            'package_id': self.package_id,
            'status': self.status,
            'packageName': self.package_name(),
            'packagePrice': price,
            'totalAmount': price * (self.persons or 0),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }
