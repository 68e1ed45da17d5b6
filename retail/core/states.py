from enum import Enum

from retail.core.session import Role, Session


class MenuState(Enum):
    ANONYMOUS = "anonymous"
    CUSTOMER = "customer"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def for_session(cls, session: Session) -> "MenuState":
        if not session.is_authenticated:
            return cls.ANONYMOUS
        return _ROLE_STATES[session.role]


_ROLE_STATES = {
    Role.CUSTOMER: MenuState.CUSTOMER,
    Role.MANAGER: MenuState.MANAGER,
    Role.ADMIN: MenuState.ADMIN,
}
