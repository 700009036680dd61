from typing import Any, Awaitable, Dict, Iterable, Optional

from i2pcontrol.protocol import (
    METHOD_ECHO,
    METHOD_I2PCONTROL,
    METHOD_NETWORK_SETTING,
    METHOD_ROUTER_INFO,
    METHOD_ROUTER_MANAGER,
    PARAM_ECHO,
    ROUTER_INFO_KEYS,
    ROUTER_MANAGER_OPERATIONS,
)
from i2pcontrol.session import Handler, Result, Session


def echo(session: Session, value: str, handler: Handler) -> Awaitable[Optional[Result]]:
    """The router answers with {"Result": value}."""
    return session.request(METHOD_ECHO, {PARAM_ECHO: value}, handler)


def router_info(session: Session, handler: Handler, keys: Optional[Iterable[str]] = None) -> Awaitable[Optional[Result]]:
    """
    Query RouterInfo. Each requested key is sent with a null value and comes back filled.
    Defaults to every key the router knows.
    """
    wanted = list(keys) if keys is not None else ROUTER_INFO_KEYS
    return session.request(METHOD_ROUTER_INFO, {k: None for k in wanted}, handler)


def router_manager(session: Session, operation: str, handler: Handler) -> Awaitable[Optional[Result]]:
    if operation not in ROUTER_MANAGER_OPERATIONS:
        raise ValueError(f"Unsupported RouterManager operation: {operation}. Allowed: {ROUTER_MANAGER_OPERATIONS}")
    return session.request(METHOD_ROUTER_MANAGER, {operation: None}, handler)


def network_setting(session: Session, settings: Dict[str, Any], handler: Handler) -> Awaitable[Optional[Result]]:
    # None reads a setting, any other value writes it
    return session.request(METHOD_NETWORK_SETTING, dict(settings), handler)


def i2pcontrol_settings(session: Session, settings: Dict[str, Any], handler: Handler) -> Awaitable[Optional[Result]]:
    return session.request(METHOD_I2PCONTROL, dict(settings), handler)
