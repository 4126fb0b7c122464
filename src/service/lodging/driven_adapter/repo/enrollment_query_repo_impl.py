from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.lodging.domain.entity.enrollment_entity import Address, Enrollment
from src.service.lodging.driven_adapter.model.address_model import AddressModel
from src.service.lodging.driven_adapter.model.enrollment_model import EnrollmentModel


class EnrollmentQueryRepoImpl(IEnrollmentQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        async with self.session_factory() as session:
            yield session

    @staticmethod
    def _to_address(db_address: AddressModel) -> Address:
        return Address(
            id=db_address.id,
            enrollment_id=db_address.enrollment_id,
            cep=db_address.cep,
            street=db_address.street,
            city=db_address.city,
            state=db_address.state,
            number=db_address.number,
            neighborhood=db_address.neighborhood,
            address_detail=db_address.address_detail,
        )

    @Logger.io
    async def get_with_address_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EnrollmentModel)
                .options(selectinload(EnrollmentModel.addresses))
                .where(EnrollmentModel.user_id == user_id)
            )
            db_enrollment = result.scalar_one_or_none()

            if not db_enrollment:
                return None

            return Enrollment(
                id=db_enrollment.id,
                user_id=db_enrollment.user_id,
                name=db_enrollment.name,
                cpf=db_enrollment.cpf,
                birthday=db_enrollment.birthday,
                phone=db_enrollment.phone,
                addresses=[self._to_address(a) for a in db_enrollment.addresses],
                created_at=db_enrollment.created_at,
                updated_at=db_enrollment.updated_at,
            )
