from pathlib import Path
from typing import Any, Dict

from dhcp_data.parsers import get_parser
from dhcp_data.parsers.errors import InputFileError


def parse_file(path: str, dialect: str, entity: str, **options) -> Dict[str, Any]:
    """
    Открывает файл на время разбора и отдаёт строки зарегистрированному парсеру.
    Ошибки открытия/чтения превращаются в InputFileError.
    """
    parser = get_parser(dialect, entity)
    if parser is None:
        raise InputFileError(f"парсер {dialect}/{entity} не зарегистрирован")

    try:
        with open(Path(path), "r", encoding="utf-8", errors="replace") as f:
            return parser(f, **options)
    except OSError as e:
        raise InputFileError(f"не удалось прочитать файл {path}: {e}") from e


def load_leases(path: str, strict: bool = True, require_header: bool = False, verbose: bool = False) -> Dict[str, Any]:
    return parse_file(path, "isc", "leases", strict=strict, require_header=require_header, verbose=verbose)


def load_subnets(path: str, strict: bool = False, verbose: bool = False) -> Dict[str, Any]:
    return parse_file(path, "isc", "subnets", strict=strict, verbose=verbose)
