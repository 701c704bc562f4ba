from datetime import datetime, timezone
import uuid
from app.extensions import db
from app.models.enums import RecordStatus

class Place(db.Model):
    __tablename__ = 'places'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), index=True)
    region = db.Column(db.String(100))
    short_description = db.Column(db.String(500))
    description = db.Column(db.Text)
    
    # Media
    hero_image_url = db.Column(db.String(500))
    gallery = db.Column(db.JSON)  # List of image URLs
    
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
            'region': self.region,
            'short_description': self.short_description,
            'description': self.description,
            'hero_image_url': self.hero_image_url,
            'gallery': self.gallery or [],
            'status': self.status,
            'featured': self.featured,
            'ordering': self.ordering,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
