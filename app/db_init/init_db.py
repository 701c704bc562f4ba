"""
Database Initialization Script
Creates tables and optionally seeds the catalogue
"""

from app.extensions import db


def clear_database():
    """Drop all tables and recreate them"""
    print("🗑️  Dropping all tables...")
    db.drop_all()
    print("✅ Tables dropped successfully")
    
    print("📋 Creating tables...")
    db.create_all()
    print("✅ Tables created successfully")


def init_database(with_sample_data=True):
    """
    Initialize the database with tables and optionally sample data
    
    Args:
        with_sample_data (bool): Whether to populate with sample data
    """
    print("🚀 Initializing database...")
    
    print("📋 Creating tables...")
    db.create_all()
    print("✅ Tables created successfully")
    
    if with_sample_data:
        print("\n📦 Creating sample data...")
        from .sample_data import (
            create_sample_packages,
            create_sample_places,
            create_sample_cabs,
            create_sample_services
        )
        
        packages = create_sample_packages()
        places = create_sample_places()
        cabs = create_sample_cabs()
        services = create_sample_services()
        
        print(f"\n✅ Database initialized successfully!")
        print(f"   - Packages: {len(packages)}")
        print(f"   - Places: {len(places)}")
        print(f"   - Cabs: {len(cabs)}")
        print(f"   - Services: {len(services)}")
        print("\n🔑 Create an admin with: flask db-manage create-admin --email <email> --password <password>")
    else:
        print("✅ Database tables created (no sample data)")
    
    return True


def reset_database():
    """Complete database reset - drop, create, and populate"""
    print("⚠️  RESETTING DATABASE - This will delete all data!")
    clear_database()
    init_database(with_sample_data=True)
    print("\n✅ Database reset complete!")
