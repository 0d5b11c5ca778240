from typing import Callable, Dict

parser_registry: Dict[str, Callable] = {}

def register_parser(dialect: str, entity: str, parser_func: Callable):
    key = f"{dialect}_{entity}"
    parser_registry[key] = parser_func

def get_parser(dialect: str, entity: str) -> Callable | None:
    key = f"{dialect}_{entity}"
    return parser_registry.get(key)
