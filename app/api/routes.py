"""Ordered route table and its one-time registration onto the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from fastapi import FastAPI


@dataclass(frozen=True)
class RouteEntry:
    """One method and path bound to a handler.

    Attributes:
        method: HTTP method, e.g. `GET`.
        path: Exact path or Starlette path pattern.
        handler: Endpoint callable.
        name: Unique route name.
    """

    method: str
    path: str
    handler: Callable[..., Any]
    name: str


def api_route_methods(route_entry: RouteEntry) -> list[str]:
    """Return the HTTP methods served for one entry.

    GET entries also answer HEAD so HEAD-based monitors see the same status.

    Args:
        route_entry: Route entry being registered.

    Returns:
        list[str]: Upper-case method names.
    """

    method = route_entry.method.upper()
    if method == "GET":
        return ["GET", "HEAD"]
    return [method]


def api_register_route_table(application: FastAPI, route_table: Sequence[RouteEntry]) -> tuple[RouteEntry, ...]:
    """Register routes in table order so the first matching entry wins.

    Args:
        application: Application receiving the routes.
        route_table: Ordered route entries.

    Returns:
        tuple[RouteEntry, ...]: Immutable copy of the registered table.

    Raises:
        ValueError: Raised when two entries share a method and path or a name.
    """

    registered_table = tuple(route_table)
    seen_keys: set[tuple[str, str]] = set()
    seen_names: set[str] = set()
    for route_entry in registered_table:
        route_methods = api_route_methods(route_entry)
        for method in route_methods:
            if (method, route_entry.path) in seen_keys:
                raise ValueError(f"duplicate route {method} {route_entry.path}")
        if route_entry.name in seen_names:
            raise ValueError(f"duplicate route name {route_entry.name}")
        seen_keys.update((method, route_entry.path) for method in route_methods)
        seen_names.add(route_entry.name)
        application.add_api_route(
            route_entry.path,
            route_entry.handler,
            methods=route_methods,
            name=route_entry.name,
        )
    return registered_table
