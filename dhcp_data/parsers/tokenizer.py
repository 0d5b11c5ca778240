from typing import List

from dhcp_data.parsers.errors import MalformedWordError

STATEMENT_TRIM = " \t;"
VALUE_TRIM = "\";"


def strip_comment(line: str) -> str:
    """Убирает комментарий `# ...`, если решётка не внутри кавычек."""
    if "#" not in line:
        return line

    quoted = False
    escaped = False
    for i, ch in enumerate(line):
        if escaped:
            escaped = False
        elif ch == "\\" and quoted:
            # \" внутри строки не закрывает кавычки
            escaped = True
        elif ch == '"':
            quoted = not quoted
        elif ch == "#" and not quoted:
            return line[:i]
    return line


def split_statement(line: str) -> List[str]:
    """
    Разбивает строку на слова по любым пробелам.
    Края инструкции чистим от пробелов, табов и `;`.
    Пустая строка или строка-комментарий даёт пустой список.
    """
    statement = strip_comment(line).strip(STATEMENT_TRIM)
    if not statement:
        return []
    return statement.split()


def trim_value(word: str) -> str:
    return word.strip(VALUE_TRIM)


def word_at(words: List[str], index: int, what: str, line_no: int, text: str) -> str:
    if index >= len(words):
        raise MalformedWordError(what, line_no, text)

    word = words[index].rstrip(";")
    if not word:
        raise MalformedWordError(what, line_no, text)
    return word


def quoted_value(words: List[str], index: int, what: str, line_no: int, text: str) -> str:
    # client-hostname "My Laptop"; значение в кавычках может содержать пробелы
    if index >= len(words):
        raise MalformedWordError(what, line_no, text)
    return trim_value(" ".join(words[index:]))
