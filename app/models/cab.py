from datetime import datetime, timezone
import uuid
from app.extensions import db
from app.models.enums import RecordStatus

class Cab(db.Model):
    __tablename__ = 'cabs'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), index=True)
    type = db.Column(db.String(50), default='sedan', nullable=False)  # sedan, suv, tempo traveller...
    description = db.Column(db.Text)
    
    # Capacity
    capacity = db.Column(db.Integer, default=4, nullable=False)
    luggage_capacity = db.Column(db.Integer, default=2, nullable=False)
    
    # Fares
    base_fare = db.Column(db.Numeric(10, 2))
    per_km_rate = db.Column(db.Numeric(10, 2))
    
    tags = db.Column(db.JSON)  # e.g. ["AC", "Airport pickup"]
    main_image_url = db.Column(db.String(500))
    
    # Visibility
    status = db.Column(db.String(20), default=RecordStatus.ACTIVE.value, nullable=False, index=True)
    featured = db.Column(db.Boolean, default=False, nullable=False)
    ordering = db.Column(db.Integer, default=0, nullable=False)
    
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'type': self.type,
            'description': self.description,
            'capacity': self.capacity,
            'luggage_capacity': self.luggage_capacity,
            'base_fare': float(self.base_fare) if self.base_fare is not None else None,
            'per_km_rate': float(self.per_km_rate) if self.per_km_rate is not None else None,
            'tags': self.tags or [],
            'main_image_url': self.main_image_url,
            'status': self.status,
            'featured': self.featured,
            'ordering': self.ordering,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
