from django.test import RequestFactory, SimpleTestCase, override_settings

from apps.api.common.client_ip import (
    UNKNOWN_IP,
    get_client_ip,
    is_client_in_lab_subnets,
    is_ip_in_subnet,
    resolve_client_ip,
)


class ResolveClientIpTest(SimpleTestCase):
    def test_forwarded_for_wins_over_real_ip(self):
        headers = {"X-Forwarded-For": "10.0.0.5, 172.16.0.1", "X-Real-IP": "192.168.1.9"}
        self.assertEqual(resolve_client_ip(headers), "10.0.0.5")

    def test_header_names_are_case_insensitive(self):
        self.assertEqual(resolve_client_ip({"x-real-ip": "192.168.1.9"}), "192.168.1.9")
        self.assertEqual(resolve_client_ip({"X-REAL-IP": "192.168.1.9"}), "192.168.1.9")

    def test_ipv4_mapped_prefix_is_stripped(self):
        self.assertEqual(resolve_client_ip({"x-real-ip": "::ffff:192.168.1.9"}), "192.168.1.9")

    def test_empty_header_is_skipped(self):
        headers = {"x-forwarded-for": "", "cf-connecting-ip": "203.0.113.7"}
        self.assertEqual(resolve_client_ip(headers), "203.0.113.7")

    def test_forwarded_header_for_parameter(self):
        self.assertEqual(
            resolve_client_ip({"Forwarded": "for=192.0.2.60;proto=http;by=203.0.113.43"}),
            "192.0.2.60",
        )
        self.assertEqual(
            resolve_client_ip({"Forwarded": 'for="[2001:db8:cafe::17]:4711"'}),
            "2001:db8:cafe::17",
        )
        self.assertEqual(resolve_client_ip({"Forwarded": "for=192.0.2.60:8080"}), "192.0.2.60")

    def test_falls_back_to_remote_addr(self):
        self.assertEqual(resolve_client_ip({}, remote_addr="::ffff:10.1.1.1"), "10.1.1.1")

    def test_unknown_when_nothing_present(self):
        self.assertEqual(resolve_client_ip({}), UNKNOWN_IP)
        self.assertEqual(resolve_client_ip(None, remote_addr="  "), UNKNOWN_IP)

    def test_bad_policy_does_not_raise(self):
        self.assertEqual(resolve_client_ip({"x-real-ip": "192.168.1.9"}, header_policy=42), UNKNOWN_IP)

    def test_custom_policy_order(self):
        headers = {"X-Forwarded-For": "10.0.0.5", "X-Real-IP": "192.168.1.9"}
        self.assertEqual(
            resolve_client_ip(headers, header_policy=("x-real-ip", "x-forwarded-for")),
            "192.168.1.9",
        )


class GetClientIpTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_reads_request_headers(self):
        request = self.factory.post(
            "/",
            HTTP_X_FORWARDED_FOR="10.0.0.5",
            HTTP_X_REAL_IP="192.168.1.9",
        )
        self.assertEqual(get_client_ip(request), "10.0.0.5")

    def test_remote_addr_when_no_proxy_headers(self):
        request = self.factory.post("/", REMOTE_ADDR="172.20.0.3")
        self.assertEqual(get_client_ip(request), "172.20.0.3")

    @override_settings(CLIENT_IP_HEADER_POLICY=("x-real-ip",))
    def test_settings_policy(self):
        request = self.factory.post(
            "/",
            HTTP_X_FORWARDED_FOR="10.0.0.5",
            HTTP_X_REAL_IP="192.168.1.9",
        )
        self.assertEqual(get_client_ip(request), "192.168.1.9")


class SubnetTest(SimpleTestCase):
    def test_is_ip_in_subnet(self):
        self.assertTrue(is_ip_in_subnet("10.12.16.123", "10.12.16.0/24"))
        self.assertFalse(is_ip_in_subnet("10.12.17.1", "10.12.16.0/24"))
        self.assertTrue(is_ip_in_subnet("::ffff:10.12.16.5", "10.12.16.0/24"))

    def test_bad_input_is_false(self):
        self.assertFalse(is_ip_in_subnet("not-an-ip", "10.0.0.0/8"))
        self.assertFalse(is_ip_in_subnet("10.0.0.1", "garbage"))
        self.assertFalse(is_ip_in_subnet(UNKNOWN_IP, "10.0.0.0/8"))
        self.assertFalse(is_ip_in_subnet("2001:db8::1", "10.0.0.0/8"))

    def test_any_lab_subnet(self):
        subnets = ["10.12.16.0/24", "10.12.18.0/24"]
        self.assertTrue(is_client_in_lab_subnets("10.12.18.40", subnets))
        self.assertFalse(is_client_in_lab_subnets("10.12.19.40", subnets))
        self.assertFalse(is_client_in_lab_subnets("10.12.18.40", []))
