import re
from typing import Optional, TextIO

import click

from retail.core.config import MAX_CHOICE_ATTEMPTS

_CHOICE_RE = re.compile(r"^[+-]?\d+$")


class Console:
    """
    Построчный ввод/вывод в терминал.

    Потоки можно подменить (например, io.StringIO в тестах).
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        max_attempts: int = MAX_CHOICE_ATTEMPTS,
    ):
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.max_attempts = max_attempts

    def echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, file=self.stdout, nl=nl)

    def error(self, message: str) -> None:
        click.echo(message, file=self.stderr, err=True)

    def read_line(self) -> str:
        stream = self.stdin or click.get_text_stream("stdin")
        line = stream.readline()
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def prompt(self, label: str) -> str:
        """Вывести приглашение без перевода строки и прочитать одну строку."""
        self.echo(label, nl=False)
        return self.read_line()

    def read_choice(self) -> Optional[int]:
        """
        Прочитать номер пункта меню.

        Некорректный ввод повторно запрашивается не более max_attempts раз.

        Returns:
            Optional[int]: Номер пункта или None, если попытки исчерпаны
        """
        for _ in range(max(1, self.max_attempts)):
            raw = self.prompt("Please make your choice: ").strip()
            if _CHOICE_RE.match(raw):
                return int(raw)
            self.echo("Your input is invalid!")
        return None
