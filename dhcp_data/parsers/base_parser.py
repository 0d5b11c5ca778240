from typing import Any, Dict, Iterable


class BaseParser:
    @classmethod
    def parse(cls, lines: Iterable[str], **options) -> Dict[str, Any]:
        raise NotImplementedError("Реализуйте метод parse в наследнике")
