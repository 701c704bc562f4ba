from datetime import datetime, timezone
import uuid
from app.extensions import db
from app.models.enums import RecordStatus

class Package(db.Model):
    """Travel package (shown as a "journey" on the website)"""
    __tablename__ = 'packages'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), index=True)
    location = db.Column(db.String(200))
    category = db.Column(db.String(100))
    description = db.Column(db.Text)
    
    # Duration
    days = db.Column(db.Integer, default=1, nullable=False)
    nights = db.Column(db.Integer, default=0, nullable=False)
    duration = db.Column(db.String(100))  # Free text, e.g. "5 Days / 4 Nights"
    
    # Pricing
    price = db.Column(db.Numeric(10, 2), default=0, nullable=False)
    rating = db.Column(db.Float)
    
    # Package details
    itinerary = db.Column(db.JSON)  # [{"day": 1, "title": "...", "description": "..."}]
    inclusions = db.Column(db.JSON)  # List of what's included
    exclusions = db.Column(db.JSON)  # List of what's not included
    
    # Media
    main_image_url = db.Column(db.String(500))
    
    # Visibility
    status = db.Column(db.String(20), default=RecordStatus.ACTIVE.value, nullable=False, index=True)
    featured = db.Column(db.Boolean, default=False, nullable=False)
    
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    # Relationships
    images = db.relationship('PackageImage', backref='package', lazy='dynamic', cascade='all, delete-orphan')
    
    @property
    def is_active(self):
        return self.status == RecordStatus.ACTIVE.value
    
    def cover_image(self):
        """First gallery image, falling back to the main image"""
        first = self.images.first()
        return first.image_url if first else self.main_image_url
    
    def to_dict(self, include_images=False):
        data = {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'location': self.location,
            'category': self.category,
            'description': self.description,
            'price': float(self.price) if self.price is not None else 0.0,
            'days': self.days,
            'nights': self.nights,
            'duration': self.duration or f"{self.days} Days / {self.nights} Nights",
            'rating': self.rating,
            'itinerary': self.itinerary or [],
            'inclusions': self.inclusions or [],
            'exclusions': self.exclusions or [],
            'main_image_url': self.main_image_url,
            'image': self.cover_image(),
            'status': self.status,
            'featured': self.featured,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
        if include_images:
            data['images'] = [img.to_dict() for img in self.images.all()]
        return data


class PackageImage(db.Model):
    __tablename__ = 'package_images'
    
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    package_id = db.Column(db.String(36), db.ForeignKey('packages.id', ondelete='CASCADE'), nullable=False, index=True)
    image_url = db.Column(db.String(500), nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    
    def to_dict(self):
        return {
            'id': self.id,
            'image_url': self.image_url
        }
