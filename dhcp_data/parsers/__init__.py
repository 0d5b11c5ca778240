# dhcp_data/parsers/__init__.py
from .registry import register_parser, get_parser
from .isc_leases import IscLeasesParser  # ← импорт выполняет register_parser внутри isc_leases.py
from .isc_config import IscSubnetParser
