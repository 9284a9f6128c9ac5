"""Ввод-вывод в консоль построчно."""


class Console:
    def write(self, text: str) -> None:
        print(text, flush=True)

    def read_line(self) -> str:
        """Одна строка ввода без перевода строки. EOFError, если ввод закрыт."""
        return input()
