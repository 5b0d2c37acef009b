"""SQLAlchemy models for the classifieds backend."""
from app.models.property_model import Property
from app.models.property_type_model import PropertyType
from app.models.system_settings_model import SystemSettings
from app.models.user_model import Credential, User

__all__ = [
    "Property",
    "PropertyType",
    "SystemSettings",
    "User",
    "Credential",
]
