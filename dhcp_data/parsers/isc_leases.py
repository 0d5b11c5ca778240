import sys
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from dhcp_data.models.lease import RawLease

from .base_parser import BaseParser
from .block_scanner import BlockScanner, Statement
from .errors import HeaderNotFoundError, MalformedStatementError, TimeParseError
from .registry import register_parser
from .tokenizer import quoted_value, word_at

LEASE_START_WORD = "lease"
LEASE_END_WORD = "}"
TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


def parse_time_utc(statement: Statement) -> Optional[datetime]:
    """
    starts 4 2019/03/07 10:21:54;  день недели читаем и выбрасываем.
    Также встречаются "ends never;" и "starts epoch 1551954114;" (db-time-format local).
    """
    words = statement.words
    weekday = word_at(words, 1, "день недели", statement.line_no, statement.text)

    if weekday == "never":
        return None

    if weekday == "epoch":
        seconds = word_at(words, 2, "время", statement.line_no, statement.text)
        try:
            return datetime.fromtimestamp(int(seconds), tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as e:
            raise TimeParseError(f"строка {statement.line_no}: неверное время {seconds}: {e}") from e

    date = word_at(words, 2, "дату", statement.line_no, statement.text)
    time = word_at(words, 3, "время", statement.line_no, statement.text)
    try:
        return datetime.strptime(f"{date} {time}", TIME_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as e:
        raise TimeParseError(f"строка {statement.line_no}: неверное время {date} {time}: {e}") from e


def _set_word(field: str, index: int) -> Callable:
    def handler(lease, statement: Statement):
        setattr(lease, field, word_at(statement.words, index, field, statement.line_no, statement.text))
    return handler


def _set_quoted(field: str) -> Callable:
    def handler(lease, statement: Statement):
        setattr(lease, field, quoted_value(statement.words, 1, field, statement.line_no, statement.text))
    return handler


def _set_time(field: str) -> Callable:
    def handler(lease, statement: Statement):
        setattr(lease, field, parse_time_utc(statement))
    return handler


def _ignore(lease, statement: Statement):
    pass


# Ключевое слово -> обработчик(lease, statement)
LEASE_STATEMENTS: Dict[str, Callable] = {
    "lease": _set_word("ip", 1),
    "hostname": _set_quoted("hostname"),
    "starts": _set_time("starts"),
    "ends": _set_time("ends"),
    "tstp": _set_time("tstp"),
    "cltt": _set_time("cltt"),
    "binding": _set_word("binding", 2),        # binding state active;
    "uid": _set_quoted("uid"),
    "hardware": _set_word("hardware", 2),      # hardware ethernet 00:11:22:33:44:55;
    "client-hostname": _set_quoted("client_hostname"),
    "next": _set_word("next", 3),              # next binding state free;
    "rewind": _set_word("rewind", 3),          # rewind binding state free;
    "set": _ignore,
}


class IscLeasesParser(BaseParser):
    @classmethod
    def parse(cls, lines: Iterable[str], strict: bool = True, require_header: bool = False, verbose: bool = False) -> Dict[str, Any]:
        """
        Разбирает dhcpd.leases. Возвращает блоки в порядке файла, без фильтра
        и без дедупликации по IP, это делают filters/.

        strict=False превращает неизвестные инструкции в предупреждения.
        require_header=True: отсутствие хотя бы одного блока lease считается ошибкой.
        verbose=True печатает число разобранных блоков.
        """
        scanner = BlockScanner(LEASE_START_WORD, LEASE_END_WORD, tag="LEASE PARSER")
        leases: List[RawLease] = []
        warnings: List[MalformedStatementError] = []

        for block in scanner.scan(lines):
            head = block[0]
            lease = RawLease(ip=word_at(head.words, 1, "ip", head.line_no, head.text))

            for statement in block[1:]:
                handler = LEASE_STATEMENTS.get(statement.keyword)
                if handler is None:
                    error = MalformedStatementError(statement.keyword, statement.line_no, statement.text)
                    if strict:
                        raise error
                    print(f"[LEASE PARSER] Пропущено: {error}", file=sys.stderr)
                    warnings.append(error)
                    continue
                handler(lease, statement)

            leases.append(lease)

        if require_header and scanner.started == 0:
            raise HeaderNotFoundError("не удалось пропустить заголовок файла аренд: блок lease не найден")

        if verbose:
            print(f"[LEASE PARSER] Спарсено leases: {len(leases)}", file=sys.stderr)
        return {"dhcp_leases": leases, "warnings": warnings}


register_parser("isc", "leases", IscLeasesParser.parse)
