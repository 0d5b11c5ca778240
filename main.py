import argparse
import sys
from typing import List, Optional, TextIO

from dhcp_data.filters.lease_filters import collect_active_leases
from dhcp_data.models.lease import OutputLease
from dhcp_data.normalizer.lease import LeaseNormalizer
from dhcp_data.parsers.errors import DhcpDataError
from dhcp_data.settings import Settings, load_settings
from dhcp_data.storage.emitter import emit_leases
from dhcp_data.storage.reader import load_leases, load_subnets


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dhcp-leases",
        description="Активные аренды ISC DHCP в JSON, по объекту на строку",
    )
    parser.add_argument("leases", nargs="?", help="путь к dhcpd.leases")
    parser.add_argument("--domains", dest="join_domains", action="store_true", default=None,
                        help="сопоставить аренды с subnet/domain-name из dhcpd.conf")
    parser.add_argument("--conf", dest="conf_path", help="путь к dhcpd.conf (включает --domains)")
    parser.add_argument("--settings", dest="settings_path", help="YAML с настройками (по умолчанию config/settings.yaml)")
    parser.add_argument("--domain-policy", choices=["optional", "required"],
                        help="optional: выводить без fqdn, required: пропускать аренды без домена")
    parser.add_argument("--strict-subnets", action="store_true", default=None,
                        help="неизвестная инструкция в subnet считается ошибкой")
    parser.add_argument("--lenient-leases", dest="strict_leases", action="store_false", default=None,
                        help="неизвестная инструкция в lease считается предупреждением")
    parser.add_argument("-v", "--verbose", action="store_true", default=None,
                        help="печатать в stderr счётчики разобранных и отброшенных аренд")
    return parser


def collect_leases(settings: Settings) -> List[OutputLease]:
    # Сначала конфиг целиком, затем аренды целиком, вывод только после полного разбора
    subnets = []
    if settings.join_domains:
        parsed_subnets = load_subnets(settings.conf_path, strict=settings.strict_subnets, verbose=settings.verbose)
        subnets = parsed_subnets["subnets"]

    parsed_leases = load_leases(
        settings.leases_path,
        strict=settings.strict_leases,
        require_header=not settings.join_domains,
        verbose=settings.verbose,
    )
    leases_by_ip = collect_active_leases(parsed_leases["dhcp_leases"], verbose=settings.verbose)

    normalized = LeaseNormalizer.normalize(leases_by_ip, subnets, settings.domain_policy, verbose=settings.verbose)
    return normalized["dhcp_leases_normalized"]


def run(argv: Optional[List[str]] = None, out: TextIO = None, err: TextIO = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr

    args = build_arg_parser().parse_args(argv)
    cli = {
        "leases_path": args.leases,
        "conf_path": args.conf_path,
        "join_domains": args.join_domains,
        "domain_policy": args.domain_policy,
        "strict_leases": args.strict_leases,
        "strict_subnets": args.strict_subnets,
        "verbose": args.verbose,
    }

    try:
        settings = load_settings(cli, args.settings_path)
        leases = collect_leases(settings)
    except DhcpDataError as e:
        print(e, file=err)
        return 1

    emit_leases(leases, out)
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
