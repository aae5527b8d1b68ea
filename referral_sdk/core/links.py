"""
Referral link generation.

Pure string transform: the referrer address is not validated and
no network access happens.
"""

from urllib.parse import SplitResult, parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from referral_sdk.constants import DEFAULT_PORTS, REFERRAL_PARAM, UTM_PARAMS
from referral_sdk.exceptions import InvalidUrlError
from referral_sdk.types import LinkParams


class ReferralLinkBuilder:
    """Builds referral URLs with optional UTM tracking parameters."""

    def build_link(
        self,
        referrer_address: str,
        base_url: str,
        params: LinkParams | None = None,
    ) -> str:
        """
        Append referral and UTM query parameters to a base URL.

        Parameters are appended as ref, utm_source, utm_medium, utm_campaign;
        UTM fields that are missing or empty are skipped. Output follows the
        WHATWG URL serializer: lowercase scheme and host, default port
        dropped, existing query pairs re-encoded in form-urlencoded style
        (space as +, only alphanumerics and *-._ unescaped). The fragment is
        kept.

        Args:
            referrer_address: Referrer address placed in ``ref``
            base_url: Absolute URL with scheme and host
            params: Optional source/medium/campaign values

        Returns:
            Referral URL

        Raises:
            InvalidUrlError: If base_url is not an absolute URL

        Example:
            >>> ReferralLinkBuilder().build_link("0xABC", "https://x.com", {"source": "a"})
            'https://x.com/?ref=0xABC&utm_source=a'
        """
        if not isinstance(base_url, str) or not base_url.strip():
            raise InvalidUrlError("Base URL is empty")

        try:
            parts = urlsplit(base_url.strip())
            port = parts.port
        except ValueError as e:
            raise InvalidUrlError(f"Invalid base URL {base_url!r}: {e}") from e

        if not parts.scheme or not parts.netloc or not parts.hostname:
            raise InvalidUrlError(f"Invalid base URL {base_url!r}: scheme and host are required")

        # Existing pairs are decoded and re-encoded along with the new ones
        query_pairs = parse_qsl(parts.query, keep_blank_values=True)
        query_pairs.append((REFERRAL_PARAM, referrer_address))
        params = params or {}
        for key, name in UTM_PARAMS:
            value = params.get(key)
            if value:
                query_pairs.append((name, value))

        query = urlencode(query_pairs, quote_via=_quote_form_value)
        netloc = _serialize_host(parts, port)

        return urlunsplit((parts.scheme, netloc, parts.path or "/", query, parts.fragment))


def _quote_form_value(value: str, safe: str = "", encoding=None, errors=None) -> str:
    """Encode with the WHATWG form-urlencoded set: only alphanumerics and *-._ stay raw."""
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def _serialize_host(parts: SplitResult, port: int | None) -> str:
    """Lowercase host, default port dropped, userinfo kept."""
    userinfo, _, _ = parts.netloc.rpartition("@")
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    if port is not None and DEFAULT_PORTS.get(parts.scheme) != port:
        host = f"{host}:{port}"
    return f"{userinfo}@{host}" if userinfo else host
