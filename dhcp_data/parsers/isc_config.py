import sys
from typing import Any, Callable, Dict, Iterable, List

from dhcp_data.models.subnet import Subnet

from .base_parser import BaseParser
from .block_scanner import BlockScanner, Statement
from .errors import UnhandledSubnetStatement
from .registry import register_parser
from .tokenizer import quoted_value, word_at

SUBNET_START_WORD = "subnet"
SUBNET_END_WORD = "}"


def _parse_subnet(subnet: Subnet, statement: Statement):
    # subnet 10.0.0.0 netmask 255.255.255.0 {
    subnet.network = word_at(statement.words, 1, "адрес сети", statement.line_no, statement.text)
    subnet.mask = word_at(statement.words, 3, "маску", statement.line_no, statement.text)


def _parse_option(subnet: Subnet, statement: Statement):
    # Нас интересует только option domain-name "example.com";
    if len(statement.words) > 1 and statement.words[1] == "domain-name":
        subnet.domain = quoted_value(statement.words, 2, "domain-name", statement.line_no, statement.text)


def _ignore(subnet: Subnet, statement: Statement):
    pass


SUBNET_STATEMENTS: Dict[str, Callable] = {
    "subnet": _parse_subnet,
    "option": _parse_option,
    "ping-check": _ignore,
    "pool": _ignore,
    "range": _ignore,
    "}": _ignore,
}


class IscSubnetParser(BaseParser):
    @classmethod
    def parse(cls, lines: Iterable[str], strict: bool = False, verbose: bool = False) -> Dict[str, Any]:
        """
        Разбирает блоки subnet ... { ... } из dhcpd.conf в порядке файла.

        Неизвестная инструкция внутри subnet считается только предупреждением
        (UnhandledSubnetStatement в "warnings"), строка не влияет на запись.
        strict=True делает её фатальной, как в разборе аренд.
        """
        scanner = BlockScanner(SUBNET_START_WORD, SUBNET_END_WORD, tag="SUBNET PARSER")
        subnets: List[Subnet] = []
        warnings: List[UnhandledSubnetStatement] = []

        for block in scanner.scan(lines):
            subnet = Subnet(network="", mask="")

            for statement in block:
                handler = SUBNET_STATEMENTS.get(statement.keyword)
                if handler is None:
                    warning = UnhandledSubnetStatement(statement.keyword, statement.line_no, statement.text)
                    if strict:
                        raise warning
                    print(f"[SUBNET PARSER] {warning}", file=sys.stderr)
                    warnings.append(warning)
                    continue
                handler(subnet, statement)

            subnets.append(subnet)

        if verbose:
            print(f"[SUBNET PARSER] Спарсено subnets: {len(subnets)}", file=sys.stderr)
        return {"subnets": subnets, "warnings": warnings}


register_parser("isc", "subnets", IscSubnetParser.parse)
