import sys
from typing import Dict, Iterable

from dhcp_data.models.lease import RawLease


def is_excluded_lease(lease: RawLease) -> bool:
    if lease.binding == "abandoned":
        return True
    if not lease.hardware:
        return True
    if not lease.hostname and not lease.client_hostname:
        return True
    return False


def collect_active_leases(leases: Iterable[RawLease], verbose: bool = False) -> Dict[str, RawLease]:
    """
    Складывает аренды в словарь по IP: более поздний блок перезаписывает ранний.
    Фильтр применяется до вставки: abandoned/неполная запись не затирает
    нормальную, встреченную раньше для того же IP.
    """
    by_ip: Dict[str, RawLease] = {}
    skipped = 0

    for lease in leases:
        if is_excluded_lease(lease):
            skipped += 1
            continue
        by_ip[lease.ip] = lease

    if verbose and skipped:
        print(f"[FILTER] Отброшено leases: {skipped}", file=sys.stderr)
    return by_ip
