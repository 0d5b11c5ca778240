import json
import sys
from typing import Iterable, TextIO

from dhcp_data.models.lease import OutputLease


def emit_leases(leases: Iterable[OutputLease], stream: TextIO = None) -> int:
    """
    Пишет каждую запись отдельным JSON-объектом на своей строке (NDJSON).
    Поле fqdn выводится только если домен найден. Порядок записей не гарантируется.
    """
    if stream is None:
        stream = sys.stdout

    count = 0
    for lease in leases:
        stream.write(json.dumps(lease.model_dump(exclude_none=True), ensure_ascii=False))
        stream.write("\n")
        count += 1

    stream.flush()
    return count
