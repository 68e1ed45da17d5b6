import logging
from typing import Awaitable, Callable, Dict, Optional

from retail.core.database import StatementError, StoreGateway
from retail.core.session import Session
from retail.core.states import MenuState
from retail.handlers import admin_handler, auth_handler, customer_handler, manager_handler
from retail.utils.console import Console
from retail.utils.menu import EXIT_CHOICE, LOGOUT_CHOICE, get_menu_text

logger = logging.getLogger(__name__)

Handler = Callable[[Console, Session, StoreGateway], Awaitable[None]]

CUSTOMER_HANDLERS: Dict[int, Handler] = {
    1: customer_handler.cmd_view_stores,
    2: customer_handler.cmd_view_products,
    3: customer_handler.cmd_place_order,
    4: customer_handler.cmd_view_recent_orders,
}

HANDLERS: Dict[MenuState, Dict[int, Handler]] = {
    MenuState.ANONYMOUS: {
        1: auth_handler.cmd_create_user,
        2: auth_handler.cmd_log_in,
    },
    MenuState.CUSTOMER: CUSTOMER_HANDLERS,
    MenuState.MANAGER: {
        **CUSTOMER_HANDLERS,
        5: manager_handler.cmd_view_managed_stores,
        6: manager_handler.cmd_update_product,
        7: manager_handler.cmd_view_recent_updates,
        8: manager_handler.cmd_view_popular_products,
        9: manager_handler.cmd_view_popular_customers,
        10: manager_handler.cmd_place_supply_request,
    },
    MenuState.ADMIN: {
        1: admin_handler.cmd_view_all_stores,
        2: admin_handler.cmd_view_all_customers,
        3: customer_handler.cmd_view_products,
        4: customer_handler.cmd_place_order,
        5: admin_handler.cmd_view_all_orders,
        6: admin_handler.cmd_update_product,
        7: admin_handler.cmd_update_user,
        8: admin_handler.cmd_delete_user,
        9: admin_handler.cmd_view_all_updates,
        10: admin_handler.cmd_view_all_requests,
    },
}


class MenuDispatcher:
    """
    Цикл меню: показывает меню текущего состояния сессии, читает выбор и
    вызывает соответствующую операцию.

    Ошибки операций перехватываются здесь, выводятся одной строкой, после
    чего меню показывается снова.
    """

    def __init__(
        self,
        gateway: StoreGateway,
        console: Console,
        session: Optional[Session] = None,
    ):
        self.gateway = gateway
        self.console = console
        self.session = session if session is not None else Session()

    async def run(self) -> None:
        try:
            while await self.step():
                pass
        except EOFError:
            logger.info("Ввод завершен, выход из меню")

    async def step(self) -> bool:
        """
        Один проход меню.

        Returns:
            bool: False, если пользователь выбрал выход
        """
        state = MenuState.for_session(self.session)
        self.console.echo(get_menu_text(state))
        choice = self.console.read_choice()

        if state is MenuState.ANONYMOUS and choice == EXIT_CHOICE:
            return False
        if state is not MenuState.ANONYMOUS and choice == LOGOUT_CHOICE:
            logger.info("Пользователь %s вышел из системы", self.session.name)
            self.session.log_out()
            return True

        handler = HANDLERS[state].get(choice)
        if handler is None:
            self.console.echo("Unrecognized choice!")
            return True

        await self._run_operation(handler)
        return True

    async def _run_operation(self, handler: Handler) -> None:
        try:
            await handler(self.console, self.session, self.gateway)
        except EOFError:
            raise
        except (ValueError, StatementError) as e:
            logger.info("Операция %s не выполнена: %s", handler.__name__, e)
            self.console.error(str(e))
        except Exception as e:
            logger.exception("Ошибка в операции %s: %s", handler.__name__, e)
            self.console.error(str(e) or e.__class__.__name__)
