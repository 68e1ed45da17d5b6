from typing import List, Optional
from sqlalchemy import delete, insert, or_, select, update
from retail.core.database import StoreGateway
from retail.core.session import Role
from retail.models.user import User


class UserRepository:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def create(
        self, name: str, password: str, latitude: float, longitude: float, role: str
    ) -> int:
        return await self.gateway.execute_insert(
            insert(User).values(
                {
                    User.name: name,
                    User.password: password,
                    User.latitude: latitude,
                    User.longitude: longitude,
                    User.role: role,
                }
            )
        )

    async def find_by_credentials(
        self, name: str, password: str
    ) -> List[List[Optional[str]]]:
        """
        Найти пользователей с точным совпадением имени и пароля.

        Returns:
            List[List[Optional[str]]]: Строки (id, name, latitude, longitude, type)
        """
        query = select(
            User.id, User.name, User.latitude, User.longitude, User.role
        ).where(User.name == name, User.password == password)
        return await self.gateway.execute_query_rows(query)

    async def update(
        self,
        user_id: int,
        name: str,
        password: str,
        latitude: float,
        longitude: float,
        role: str,
    ) -> int:
        return await self.gateway.execute_update(
            update(User)
            .where(User.id == user_id)
            .values(
                {
                    User.name: name,
                    User.password: password,
                    User.latitude: latitude,
                    User.longitude: longitude,
                    User.role: role,
                }
            )
        )

    async def delete_user(self, user_id: int) -> int:
        return await self.gateway.execute_update(delete(User).where(User.id == user_id))

    async def print_customers(self) -> int:
        query = (
            select(User.__table__)
            .where(
                or_(User.role == Role.CUSTOMER.value, User.role == Role.MANAGER.value)
            )
            .order_by(User.id)
        )
        return await self.gateway.execute_query_print(query)
