import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///wasturwan.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT Configuration
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY") or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES", 900))  # 15 minutes
    JWT_REFRESH_TOKEN_EXPIRES = int(os.getenv("JWT_REFRESH_TOKEN_EXPIRES", 2592000))  # 30 days

    # Object storage for uploaded images
    STORAGE_ROOT = os.getenv("STORAGE_ROOT", os.path.join(basedir, 'instance', 'storage'))
    STORAGE_PUBLIC_URL = os.getenv("STORAGE_PUBLIC_URL", "/storage")
    STORAGE_BUCKETS = os.getenv("STORAGE_BUCKETS", "packages,places,cabs,services,admin").split(',')
    ALLOWED_UPLOAD_EXTENSIONS = os.getenv(
        "ALLOWED_UPLOAD_EXTENSIONS", "jpg,jpeg,png,webp,gif,avif,svg"
    ).split(',')
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", 10 * 1024 * 1024))

    # Frontend
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Manual follow-up channels offered after a booking
    AGENCY_EMAIL = os.getenv("AGENCY_EMAIL", "wasturwantravels@gmail.com")
    AGENCY_WHATSAPP = os.getenv("AGENCY_WHATSAPP", "917006594976")
    AGENCY_NAME = os.getenv("AGENCY_NAME", "Wasturwan Travels")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
