from typing import Optional
from retail.core.database import StoreGateway
from retail.core.session import Role, SessionBundle
from retail.repositories.user_repository import UserRepository
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, gateway: StoreGateway):
        self.repo = UserRepository(gateway)

    async def create_user(
        self, name: str, password: str, latitude: float, longitude: float
    ) -> int:
        """Зарегистрировать покупателя. Уникальность имени не проверяется."""
        user_id = await self.repo.create(
            name, password, latitude, longitude, Role.CUSTOMER.value
        )
        logger.info("Создан пользователь %s (id=%s)", name, user_id)
        return user_id

    async def log_in(self, name: str, password: str) -> Optional[SessionBundle]:
        """
        Проверяет имя и пароль пользователя.

        Args:
            name: Имя пользователя
            password: Пароль в открытом виде

        Returns:
            Optional[SessionBundle]: Данные сессии по первой найденной строке
            или None, если совпадений нет
        """
        rows = await self.repo.find_by_credentials(name, password)
        if not rows:
            logger.info("Неудачная попытка входа: %s", name)
            return None

        user_id, user_name, latitude, longitude, user_type = rows[0]
        try:
            role = Role.parse(user_type)
        except ValueError:
            logger.warning(
                "Пользователь %s имеет неизвестную роль %r, вход отклонен",
                user_id,
                user_type,
            )
            return None

        logger.info("Пользователь авторизован: %s (%s)", user_name, role.value)
        return SessionBundle(
            user_id=int(user_id),
            name=user_name.strip(),
            role=role,
            latitude=float(latitude),
            longitude=float(longitude),
        )

    async def update_user(
        self,
        user_id: int,
        name: str,
        password: str,
        latitude: float,
        longitude: float,
        user_type: str,
    ) -> int:
        """Перезаписать все поля пользователя. Роль сохраняется как введена."""
        updated = await self.repo.update(
            user_id, name, password, latitude, longitude, user_type.strip()
        )
        logger.info("Обновлен пользователь %s, затронуто строк: %s", user_id, updated)
        return updated

    async def delete_user(self, user_id: int) -> int:
        deleted = await self.repo.delete_user(user_id)
        logger.info("Удален пользователь %s, затронуто строк: %s", user_id, deleted)
        return deleted

    async def print_customers(self) -> int:
        return await self.repo.print_customers()
