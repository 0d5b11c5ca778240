class DhcpDataError(Exception):
    """Базовая ошибка разбора/обработки, прерывает весь прогон."""


class InputFileError(DhcpDataError):
    """Не удалось открыть или прочитать входной файл."""


class UsageError(DhcpDataError):
    pass


class HeaderNotFoundError(DhcpDataError):
    """В файле аренд так и не встретилось ни одного блока lease."""


class MalformedWordError(DhcpDataError):
    """В инструкции не хватает ожидаемого слова."""

    def __init__(self, what: str, line_no: int, text: str):
        self.what = what
        self.line_no = line_no
        self.text = text
        super().__init__(f"строка {line_no}: не удалось прочитать {what}: {text.strip()}")


class MalformedStatementError(DhcpDataError):
    """Неизвестная инструкция внутри блока lease."""

    def __init__(self, keyword: str, line_no: int, text: str):
        self.keyword = keyword
        self.line_no = line_no
        self.text = text
        super().__init__(f"строка {line_no}: нет парсера для слова {keyword}: {text.strip()}")


class TimeParseError(DhcpDataError):
    pass


class UnhandledSubnetStatement(DhcpDataError):
    """Неизвестная инструкция в блоке subnet.

    По умолчанию не фатальна: парсер собирает такие ошибки как предупреждения.
    """

    def __init__(self, keyword: str, line_no: int, text: str):
        self.keyword = keyword
        self.line_no = line_no
        self.text = text
        super().__init__(f"строка {line_no}: необработанная инструкция subnet {keyword}: {text.strip()}")
