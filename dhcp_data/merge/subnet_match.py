from typing import List, Optional

from dhcp_data.models.subnet import Subnet

FULL_OCTET = 255


def _octets(address: str) -> Optional[List[int]]:
    parts = address.split(".")
    if len(parts) != 4:
        return None
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def ip_in_subnet(ip: str, subnet: Subnet) -> bool:
    """
    Сравнение по целым октетам: проверяется только позиция, где октет маски
    ровно 255. Частичные маски (255.255.240.0) не поддерживаются: такой
    октет просто не проверяется.
    """
    ip_octets = _octets(ip)
    net_octets = _octets(subnet.network)
    mask_octets = _octets(subnet.mask)
    if ip_octets is None or net_octets is None or mask_octets is None:
        return False

    for ip_octet, net_octet, mask_octet in zip(ip_octets, net_octets, mask_octets):
        if mask_octet == FULL_OCTET and ip_octet != net_octet:
            return False
    return True


def match_subnet(ip: str, subnets: List[Subnet]) -> Optional[Subnet]:
    # Выигрывает последняя подходящая подсеть в порядке файла
    matched = None
    for subnet in subnets:
        if ip_in_subnet(ip, subnet):
            matched = subnet
    return matched
