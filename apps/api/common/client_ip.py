# PATH: apps/api/common/client_ip.py
"""
클라이언트 IP 판별 (감사 로그용, best-effort)

- 보안 통제 수단이 아님 (헤더는 클라이언트가 위조 가능)
- 프록시 헤더 우선순위는 설정(CLIENT_IP_HEADER_POLICY)으로 교체 가능
- 순수 함수: 예외를 던지지 않고, I/O 없음
"""
from __future__ import annotations

import ipaddress
import logging
from typing import Iterable, Mapping, Optional, Sequence

from django.conf import settings

logger = logging.getLogger(__name__)

UNKNOWN_IP = "Unknown IP"

IPV4_MAPPED_PREFIX = "::ffff:"

# 앞에 있을수록 우선
DEFAULT_CLIENT_IP_HEADERS: tuple[str, ...] = (
    "x-forwarded-for",
    "cf-connecting-ip",
    "x-real-ip",
    "fastly-client-ip",
    "true-client-ip",
    "x-client-ip",
    "x-cluster-client-ip",
    "x-forward",
    "forwarded",
)

# RFC 7239 Forwarded: for=<node>;proto=...;by=...
FORWARDED_HEADER = "forwarded"


def _strip_mapped_prefix(ip: str) -> str:
    if ip.lower().startswith(IPV4_MAPPED_PREFIX):
        return ip[len(IPV4_MAPPED_PREFIX):]
    return ip


def _parse_forwarded_hop(hop: str) -> Optional[str]:
    """'for=192.0.2.60;proto=http' → '192.0.2.60' / '"[2001:db8::1]:4711"' → '2001:db8::1'"""
    for param in hop.split(";"):
        name, sep, value = param.partition("=")
        if not sep or name.strip().lower() != "for":
            continue
        node = value.strip().strip('"')
        if node.startswith("["):
            end = node.find("]")
            return node[1:end] if end > 0 else None
        # ipv4:port
        if node.count(":") == 1:
            node = node.split(":", 1)[0]
        return node or None
    return None


def _first_hop(header_name: str, raw: str) -> Optional[str]:
    # 다중 hop 헤더: "client, proxy1, proxy2" → client
    first = raw.split(",")[0].strip()
    if not first:
        return None
    if header_name == FORWARDED_HEADER:
        return _parse_forwarded_hop(first)
    return first


def resolve_client_ip(
    headers: Mapping[str, str],
    remote_addr: Optional[str] = None,
    header_policy: Optional[Sequence[str]] = None,
) -> str:
    """
    헤더 우선순위 목록에서 처음 발견되는 값을 클라이언트 IP로 사용.

    Args:
        headers: 요청 헤더 (대소문자 무관)
        remote_addr: 전송 계층 peer 주소 (REMOTE_ADDR)
        header_policy: 헤더 이름 순서. None/빈 값이면 DEFAULT_CLIENT_IP_HEADERS

    Returns:
        IP 문자열. 아무것도 없으면 UNKNOWN_IP
    """
    try:
        policy = tuple(header_policy or DEFAULT_CLIENT_IP_HEADERS)
        normalized = {str(k).lower(): v for k, v in (headers or {}).items()}

        for name in policy:
            raw = normalized.get(name.lower())
            if not raw:
                continue
            ip = _first_hop(name.lower(), str(raw))
            if ip:
                return _strip_mapped_prefix(ip)

        if remote_addr and str(remote_addr).strip():
            return _strip_mapped_prefix(str(remote_addr).strip())
    except Exception as e:
        logger.warning("client ip resolution failed: %s", e)

    return UNKNOWN_IP


def get_client_ip(request) -> str:
    """Django/DRF request 어댑터. 헤더 정책은 settings.CLIENT_IP_HEADER_POLICY."""
    policy = getattr(settings, "CLIENT_IP_HEADER_POLICY", None) or DEFAULT_CLIENT_IP_HEADERS
    return resolve_client_ip(
        request.headers,
        remote_addr=request.META.get("REMOTE_ADDR"),
        header_policy=policy,
    )


# --------------------------------------------------
# Lab subnet 검사
# --------------------------------------------------

def is_ip_in_subnet(client_ip: Optional[str], subnet: str) -> bool:
    """
    CIDR 포함 여부.
    is_ip_in_subnet("10.12.16.123", "10.12.16.0/24") → True
    잘못된 입력은 False.
    """
    if not client_ip or client_ip == UNKNOWN_IP:
        return False
    try:
        ip = ipaddress.ip_address(_strip_mapped_prefix(client_ip.strip()))
        network = ipaddress.ip_network(subnet.strip(), strict=False)
    except ValueError:
        logger.warning("invalid ip/subnet ip=%s subnet=%s", client_ip, subnet)
        return False
    if ip.version != network.version:
        return False
    return ip in network


def is_client_in_lab_subnets(client_ip: Optional[str], lab_subnets: Iterable[str]) -> bool:
    subnets = [s for s in lab_subnets if s]
    if not client_ip or not subnets:
        return False
    return any(is_ip_in_subnet(client_ip, s) for s in subnets)
