import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from dhcp_data.parsers.tokenizer import split_statement

OUTSIDE_BLOCK = "outside"
INSIDE_BLOCK = "inside"


@dataclass
class Statement:
    line_no: int
    text: str
    words: List[str]

    @property
    def keyword(self) -> str:
        return self.words[0]


class BlockScanner:
    """
    Общий автомат для обоих диалектов ISC DHCP:
    OUTSIDE_BLOCK -> INSIDE_BLOCK по строке, начинающейся со start_word,
    INSIDE_BLOCK -> блок готов по строке, начинающейся с end_word.

    Всё, что вне блоков (заголовок файла аренд, host/shared-network в конфиге),
    пропускается. Вложенные блоки (pool { ... }) считаются по глубине,
    их закрывающая скобка отдаётся как обычная инструкция.
    """

    def __init__(self, start_word: str, end_word: str = "}", tag: str = "PARSER"):
        self.start_word = start_word
        self.end_word = end_word
        self.tag = tag
        self.started = 0

    def scan(self, lines: Iterable[str]) -> Iterator[List[Statement]]:
        state = OUTSIDE_BLOCK
        block: List[Statement] = []
        depth = 0

        for line_no, line in enumerate(lines, start=1):
            words = split_statement(line)
            if not words:
                continue

            statement = Statement(line_no, line.rstrip("\r\n"), words)

            if state == OUTSIDE_BLOCK:
                if statement.keyword == self.start_word:
                    self.started += 1
                    state = INSIDE_BLOCK
                    block = [statement]
                    depth = 0
                    if words[-1].endswith(self.end_word):
                        # пустой блок в одну строку: subnet ... { }
                        yield block
                        state = OUTSIDE_BLOCK
                        block = []
                continue

            if words == ["{"] and len(block) == 1 and not block[0].words[-1].endswith("{"):
                # открывающая скобка блока на отдельной строке
                continue

            if statement.keyword.startswith(self.end_word):
                if depth == 0:
                    yield block
                    state = OUTSIDE_BLOCK
                    block = []
                    continue
                depth -= 1

            # "} else {" закрывает и сразу открывает блок: глубина не меняется
            if words[-1].endswith("{"):
                depth += 1

            block.append(statement)

        if state == INSIDE_BLOCK:
            # Блок без закрывающей скобки в конце файла отбрасываем
            print(
                f"[{self.tag}] Блок {self.start_word} со строки {block[0].line_no} не закрыт — пропущен",
                file=sys.stderr,
            )
