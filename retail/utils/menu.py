from typing import Dict

from retail.core.states import MenuState

GREETING_TEXT = (
    "\n\n*******************************************************\n"
    "              User Interface                         \n"
    "*******************************************************\n"
)

SEPARATOR = "........................."

LOGOUT_CHOICE = 20
EXIT_CHOICE = 9

ANONYMOUS_MENU: Dict[int, str] = {
    1: "Create user",
    2: "Log in",
    EXIT_CHOICE: "< EXIT",
}

CUSTOMER_MENU: Dict[int, str] = {
    1: "View Stores Within 30 Miles",
    2: "View Product List",
    3: "Place an Order",
    4: "View 5 Recent Orders",
}

MANAGER_MENU: Dict[int, str] = {
    **CUSTOMER_MENU,
    5: "View Managed Stores",
    6: "Update Product",
    7: "View 5 Recent Product Updates Info",
    8: "View 5 Popular Items",
    9: "View 5 Popular Customers",
    10: "Place Product Supply Request to Warehouse",
}

ADMIN_MENU: Dict[int, str] = {
    1: "View All Stores",
    2: "View All Customers",
    3: "View Product List",
    4: "Place an Order",
    5: "View All Recent Orders",
    6: "Update Product",
    7: "Update User",
    8: "Delete User",
    9: "View All Recent Product Updates Info",
    10: "View All Recent Product Supply Requests Info",
}

MENU_ITEMS: Dict[MenuState, Dict[int, str]] = {
    MenuState.ANONYMOUS: ANONYMOUS_MENU,
    MenuState.CUSTOMER: CUSTOMER_MENU,
    MenuState.MANAGER: MANAGER_MENU,
    MenuState.ADMIN: ADMIN_MENU,
}


def get_menu_text(state: MenuState) -> str:
    """Возвращает текст меню для состояния сессии"""
    lines = ["MAIN MENU", "---------"]
    lines.extend(f"{choice}. {label}" for choice, label in MENU_ITEMS[state].items())
    if state is not MenuState.ANONYMOUS:
        lines.append(SEPARATOR)
        lines.append(f"{LOGOUT_CHOICE}. Log out")
    return "\n".join(lines)
