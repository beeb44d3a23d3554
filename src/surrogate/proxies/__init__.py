"""Account proxies: pass-through, protection, virtual and dynamic."""

from surrogate.proxies.account_proxy import AccountProxy
from surrogate.proxies.protection_proxy import AccountProtectionProxy
from surrogate.proxies.virtual_proxy import VirtualAccountProxy
from surrogate.proxies.dynamic_proxy import DynamicProxy

__all__ = [
    "AccountProxy",
    "AccountProtectionProxy",
    "VirtualAccountProxy",
    "DynamicProxy",
]
