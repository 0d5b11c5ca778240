import unittest

from dhcp_data.filters.lease_filters import collect_active_leases, is_excluded_lease
from dhcp_data.models.lease import RawLease


def lease(ip="10.0.0.5", **fields):
    defaults = {"binding": "active", "hardware": "00:11:22:33:44:55", "hostname": "host1"}
    defaults.update(fields)
    return RawLease(ip=ip, **defaults)


class TestLeaseFilter(unittest.TestCase):

    def test_active_lease_kept(self):
        self.assertFalse(is_excluded_lease(lease()))

    def test_abandoned_excluded(self):
        self.assertTrue(is_excluded_lease(lease(binding="abandoned")))

    def test_missing_hardware_excluded(self):
        self.assertTrue(is_excluded_lease(lease(hardware="")))

    def test_missing_both_hostnames_excluded(self):
        self.assertTrue(is_excluded_lease(lease(hostname="", client_hostname="")))

    def test_client_hostname_is_enough(self):
        self.assertFalse(is_excluded_lease(lease(hostname="", client_hostname="laptop")))


class TestCollectActiveLeases(unittest.TestCase):

    def test_later_block_wins(self):
        first = lease(hostname="old", hardware="00:00:00:00:00:01")
        second = lease(hostname="new", hardware="00:00:00:00:00:02")
        by_ip = collect_active_leases([first, second])
        self.assertEqual(list(by_ip), ["10.0.0.5"])
        self.assertIs(by_ip["10.0.0.5"], second)

    def test_excluded_lease_does_not_overwrite(self):
        good = lease(hostname="good")
        abandoned = lease(binding="abandoned", hostname="bad")
        by_ip = collect_active_leases([good, abandoned])
        self.assertIs(by_ip["10.0.0.5"], good)

    def test_distinct_ips(self):
        by_ip = collect_active_leases([lease("10.0.0.1"), lease("10.0.0.2"), lease("10.0.0.3", hardware="")])
        self.assertEqual(sorted(by_ip), ["10.0.0.1", "10.0.0.2"])


if __name__ == "__main__":
    unittest.main()
