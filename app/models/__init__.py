from app.models.user import User
from app.models.package import Package, PackageImage
from app.models.booking import Booking
from app.models.contact import Contact
from app.models.place import Place
from app.models.cab import Cab
from app.models.service import Service
from app.models.audit_log import AuditLog
from app.models.revoked_tokens import RevokedToken
