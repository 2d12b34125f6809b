"""
Package repository.
"""
from sqlalchemy import select

from carwash.exceptions import Conflict, NotFound
from carwash.models import Package, ServicePackage
from carwash.repositories.base import Repository
from carwash.schemas.package import PackageCreate, PackageUpdate

IN_USE = "Cannot delete package that is being used in services"


class PackageRepository(Repository):

    async def list(self) -> list[Package]:
        result = await self.session.execute(select(Package).order_by(Package.package_number))
        return list(result.scalars().all())

    async def get(self, package_number: int) -> Package:
        package = await self.session.get(Package, package_number)
        if package is None:
            raise NotFound("Package not found")
        return package

    async def exists(self, package_number: int) -> bool:
        return await self.session.get(Package, package_number) is not None

    async def create(self, data: PackageCreate) -> Package:
        package = Package(**data.model_dump())
        self.session.add(package)
        await self._commit("Package could not be created")
        return package

    async def update(self, package_number: int, data: PackageUpdate) -> Package:
        package = await self.get(package_number)
        for field, value in data.model_dump().items():
            setattr(package, field, value)
        await self._commit("Package could not be updated")
        return package

    async def delete(self, package_number: int) -> None:
        package = await self.get(package_number)
        if await self._count(ServicePackage, ServicePackage.package_number == package_number):
            raise Conflict(IN_USE)

        await self.session.delete(package)
        await self._commit(IN_USE)
