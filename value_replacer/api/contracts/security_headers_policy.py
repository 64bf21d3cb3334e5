"""
value_replacer.api.contracts.security_headers_policy

Purpose:
    Response security headers added to every API response.
    Values mirror the defaults of the Express "helmet" middleware, so clients
    see the same hardening regardless of which stack serves them.

Created:
    2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SecurityHeadersPolicy:
    content_security_policy: str = (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    )
    cross_origin_opener_policy: str = "same-origin"
    cross_origin_resource_policy: str = "same-origin"
    origin_agent_cluster: str = "?1"
    referrer_policy: str = "no-referrer"
    strict_transport_security: str = "max-age=31536000; includeSubDomains"
    x_content_type_options: str = "nosniff"
    x_dns_prefetch_control: str = "off"
    x_download_options: str = "noopen"
    x_frame_options: str = "SAMEORIGIN"
    x_permitted_cross_domain_policies: str = "none"
    x_xss_protection: str = "0"

    def as_headers(self) -> dict[str, str]:
        return {
            "Content-Security-Policy": self.content_security_policy,
            "Cross-Origin-Opener-Policy": self.cross_origin_opener_policy,
            "Cross-Origin-Resource-Policy": self.cross_origin_resource_policy,
            "Origin-Agent-Cluster": self.origin_agent_cluster,
            "Referrer-Policy": self.referrer_policy,
            "Strict-Transport-Security": self.strict_transport_security,
            "X-Content-Type-Options": self.x_content_type_options,
            "X-DNS-Prefetch-Control": self.x_dns_prefetch_control,
            "X-Download-Options": self.x_download_options,
            "X-Frame-Options": self.x_frame_options,
            "X-Permitted-Cross-Domain-Policies": self.x_permitted_cross_domain_policies,
            "X-XSS-Protection": self.x_xss_protection,
        }
