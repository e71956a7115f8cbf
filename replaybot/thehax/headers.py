from __future__ import annotations

# algunos CDNs y el WAF de TheHax filtran clientes sin UA de navegador
USER_AGENT = "Mozilla/5.0 (compatible; DiscordBot/1.0; +https://discordapp.com)"

def browser_headers(base_url: str, referer: str = "") -> dict[str, str]:
    return {
        "User-Agent": USER_AGENT,
        "Origin": base_url,
        "Referer": referer or base_url,
    }

def credential_headers(api_key: str, tenant_key: str) -> dict[str, str]:
    """
    TheHax no documenta el nombre de cabecera de las claves, así que se
    mandan las dos candidatas de cada una (principal + alternativa).
    """
    headers: dict[str, str] = {}
    if api_key:
        headers["X-Api-Key"] = api_key
        headers["Authorization"] = f"Bearer {api_key}"
    if tenant_key:
        headers["X-Tenant-Key"] = tenant_key
        headers["X-Tenant"] = tenant_key
    return headers
