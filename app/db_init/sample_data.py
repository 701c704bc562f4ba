"""
Sample Data Generation
Seeds the catalogue with realistic Kashmir travel content for development
"""

from app.extensions import db
from app.models import Package, Place, Cab, Service
from app.models.enums import RecordStatus
import uuid


def create_sample_packages():
    """Create sample travel packages"""
    print("   Creating packages...")

    packages = []

    # Package 1 - Kashmir classic
    pkg1 = Package(
        id=str(uuid.uuid4()),
        title='Kashmir Valley Tour',
        slug='kashmir-valley-tour',
        location='Srinagar, Gulmarg, Pahalgam',
        category='Family',
        description='Houseboats on Dal Lake, the meadows of Gulmarg and the Lidder valley at Pahalgam.',
        price=18999.00,
        days=6,
        nights=5,
        rating=4.8,
        itinerary=[
            {'day': 1, 'title': 'Arrival in Srinagar', 'description': 'Pickup from the airport, evening shikara ride on Dal Lake.'},
            {'day': 2, 'title': 'Gulmarg', 'description': 'Day trip with gondola ride to Kongdoori.'},
            {'day': 3, 'title': 'Pahalgam', 'description': 'Drive via the saffron fields of Pampore.'},
            {'day': 4, 'title': 'Aru and Betaab valleys', 'description': 'Local sightseeing in Pahalgam.'},
            {'day': 5, 'title': 'Srinagar gardens', 'description': 'Mughal gardens and old city.'},
            {'day': 6, 'title': 'Departure', 'description': 'Drop at Srinagar airport.'}
        ],
        inclusions=['Hotel and houseboat stay', 'Breakfast and dinner', 'Private cab for all transfers'],
        exclusions=['Flights', 'Gondola tickets', 'Pony rides'],
        status=RecordStatus.ACTIVE.value,
        featured=True
    )
    packages.append(pkg1)

    # Package 2 - Winter
    pkg2 = Package(
        id=str(uuid.uuid4()),
        title='Gulmarg Snow Escape',
        slug='gulmarg-snow-escape',
        location='Gulmarg',
        category='Adventure',
        description='Skiing, snowboarding and the gondola in peak winter.',
        price=14499.00,
        days=4,
        nights=3,
        rating=4.6,
        itinerary=[
            {'day': 1, 'title': 'Srinagar to Gulmarg', 'description': 'Transfer and check-in.'},
            {'day': 2, 'title': 'Snow day', 'description': 'Ski lessons on the beginner slopes.'},
            {'day': 3, 'title': 'Gondola phase 2', 'description': 'Apharwat peak, weather permitting.'},
            {'day': 4, 'title': 'Departure', 'description': 'Drop at Srinagar airport.'}
        ],
        inclusions=['Hotel stay', 'Breakfast', 'Transfers'],
        exclusions=['Ski equipment rental', 'Gondola tickets'],
        status=RecordStatus.ACTIVE.value,
        featured=False
    )
    packages.append(pkg2)

    # Package 3 - Not yet published
    pkg3 = Package(
        id=str(uuid.uuid4()),
        title='Ladakh Road Trip',
        slug='ladakh-road-trip',
        location='Leh, Nubra, Pangong',
        category='Adventure',
        description='Srinagar to Leh by road over Zojila.',
        price=32999.00,
        days=8,
        nights=7,
        itinerary=[],
        inclusions=['Hotel and camp stays', 'Inner line permits'],
        exclusions=['Flights'],
        status=RecordStatus.INACTIVE.value,
        featured=False
    )
    packages.append(pkg3)

    db.session.add_all(packages)
    db.session.commit()

    print(f"   ✓ Created {len(packages)} packages")
    return packages


def create_sample_places():
    """Create sample destinations"""
    print("   Creating places...")

    rows = [
        ('Srinagar', 'Kashmir', 'Dal Lake, houseboats and Mughal gardens.', True),
        ('Gulmarg', 'Kashmir', 'Meadow of flowers and the Gulmarg gondola.', True),
        ('Pahalgam', 'Kashmir', 'Valley of shepherds on the Lidder river.', False),
        ('Sonamarg', 'Kashmir', 'Meadow of gold and the Thajiwas glacier.', False),
        ('Gurez Valley', 'Kashmir', 'Remote valley along the Kishanganga.', False),
        ('Leh', 'Ladakh', 'High-altitude desert, monasteries and passes.', False),
    ]

    places = []
    for ordering, (name, region, short_description, featured) in enumerate(rows):
        places.append(Place(
            id=str(uuid.uuid4()),
            name=name,
            slug=name.lower().replace(' ', '-'),
            region=region,
            short_description=short_description,
            gallery=[],
            status=RecordStatus.ACTIVE.value,
            featured=featured,
            ordering=ordering
        ))

    db.session.add_all(places)
    db.session.commit()

    print(f"   ✓ Created {len(places)} places")
    return places


def create_sample_cabs():
    """Create sample cabs"""
    print("   Creating cabs...")

    cabs = [
        Cab(
            id=str(uuid.uuid4()),
            name='Swift Dzire',
            slug='swift-dzire',
            type='sedan',
            capacity=4,
            luggage_capacity=2,
            base_fare=2500.00,
            per_km_rate=12.00,
            tags=['AC', 'Airport pickup'],
            status=RecordStatus.ACTIVE.value,
            featured=False,
            ordering=1
        ),
        Cab(
            id=str(uuid.uuid4()),
            name='Toyota Innova Crysta',
            slug='toyota-innova-crysta',
            type='suv',
            capacity=7,
            luggage_capacity=4,
            base_fare=4000.00,
            per_km_rate=18.00,
            tags=['AC', 'Family', 'Hill driving'],
            status=RecordStatus.ACTIVE.value,
            featured=True,
            ordering=0
        ),
        Cab(
            id=str(uuid.uuid4()),
            name='Tempo Traveller',
            slug='tempo-traveller',
            type='tempo traveller',
            capacity=12,
            luggage_capacity=10,
            base_fare=7000.00,
            per_km_rate=25.00,
            tags=['Groups'],
            status=RecordStatus.ACTIVE.value,
            featured=False,
            ordering=2
        ),
    ]

    db.session.add_all(cabs)
    db.session.commit()

    print(f"   ✓ Created {len(cabs)} cabs")
    return cabs


def create_sample_services():
    """Create sample services"""
    print("   Creating services...")

    services = [
        Service(id=str(uuid.uuid4()), title='Houseboat stays', icon='home',
                description='Handpicked houseboats on Dal and Nigeen lakes.'),
        Service(id=str(uuid.uuid4()), title='Airport transfers', icon='car',
                description='Pickup and drop at Srinagar and Jammu airports.'),
        Service(id=str(uuid.uuid4()), title='Custom itineraries', icon='map',
                description='Trips planned around your dates and budget.'),
    ]

    db.session.add_all(services)
    db.session.commit()

    print(f"   ✓ Created {len(services)} services")
    return services
