from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    CUSTOMER = "customer"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """
        Преобразует строку роли из БД в Role.

        Колонка type в БД может быть дополнена пробелами (CHAR), поэтому
        значение нормализуется перед сравнением.

        Raises:
            ValueError: Если роль неизвестна
        """
        normalized = (value or "").strip().lower()
        for role in cls:
            if role.value == normalized:
                return role
        raise ValueError(f"Unknown user type: {value}")


@dataclass(frozen=True)
class SessionBundle:
    user_id: int
    name: str
    role: Role
    latitude: float
    longitude: float


class Session:
    """Состояние текущего пользователя. Меняется только при входе и выходе."""

    def __init__(self):
        self.bundle: Optional[SessionBundle] = None

    @property
    def is_authenticated(self) -> bool:
        return self.bundle is not None

    @property
    def user_id(self) -> Optional[int]:
        return self.bundle.user_id if self.bundle else None

    @property
    def name(self) -> Optional[str]:
        return self.bundle.name if self.bundle else None

    @property
    def role(self) -> Optional[Role]:
        return self.bundle.role if self.bundle else None

    @property
    def latitude(self) -> Optional[float]:
        return self.bundle.latitude if self.bundle else None

    @property
    def longitude(self) -> Optional[float]:
        return self.bundle.longitude if self.bundle else None

    def log_in(self, bundle: SessionBundle) -> None:
        self.bundle = bundle

    def log_out(self) -> None:
        self.bundle = None
