import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from dhcp_data.merge.subnet_match import match_subnet
from dhcp_data.models.lease import OutputLease, RawLease
from dhcp_data.models.subnet import Subnet

from .base import BaseNormalizer

# Что делать с арендой, для которой домен не найден
DOMAIN_OPTIONAL = "optional"  # выводим без fqdn
DOMAIN_REQUIRED = "required"  # не выводим вовсе
DOMAIN_POLICIES = (DOMAIN_OPTIONAL, DOMAIN_REQUIRED)


def build_output_lease(
    lease: RawLease,
    subnets: List[Subnet],
    domain_policy: str = DOMAIN_OPTIONAL,
) -> Optional[OutputLease]:
    hostname = ""
    if lease.hostname:
        hostname = lease.hostname.lower()
    if lease.client_hostname:
        hostname = lease.client_hostname.lower()

    fqdn = None
    subnet = match_subnet(lease.ip, subnets)
    if subnet is not None and subnet.domain:
        fqdn = f"{hostname}.{subnet.domain}"
    elif domain_policy == DOMAIN_REQUIRED:
        return None

    return OutputLease(ip=lease.ip, hostname=hostname, mac=lease.hardware, fqdn=fqdn)


class LeaseNormalizer(BaseNormalizer):
    @classmethod
    def normalize(
        cls,
        leases_by_ip: Dict[str, RawLease],
        subnets: List[Subnet],
        domain_policy: str = DOMAIN_OPTIONAL,
        verbose: bool = False,
    ) -> Dict[str, Any]:
        if domain_policy not in DOMAIN_POLICIES:
            raise ValueError(f"неизвестная политика домена: {domain_policy}")

        normalized: List[OutputLease] = []
        unresolved = 0

        for ip, lease in leases_by_ip.items():
            try:
                output = build_output_lease(lease, subnets, domain_policy)
            except ValidationError as e:
                print(f"Ошибка валидации аренды {ip}: {e}", file=sys.stderr)
                continue

            if output is None:
                unresolved += 1
                continue
            normalized.append(output)

        if verbose and unresolved:
            print(f"[DHCP] Без домена пропущено: {unresolved}", file=sys.stderr)

        return {"dhcp_leases_normalized": normalized}
