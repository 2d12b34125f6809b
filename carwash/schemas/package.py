"""
Pydantic schemas for Package.
"""
from carwash.schemas.common import CamelModel
from carwash.validators import Amount, RequiredStr


class PackageBase(CamelModel):
    """Base package schema with common fields."""
    package_name: RequiredStr
    package_description: RequiredStr
    package_price: Amount


class PackageCreate(PackageBase):
    """Schema for creating a package."""
    pass


class PackageUpdate(PackageBase):
    """Schema for replacing a package."""
    pass


class Package(PackageBase):
    """Schema for package responses."""
    package_number: int
