from typing import Any, Callable, Dict, Optional

from .server import Server
from .whm import Account, Host


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _server_resources(server: Server, args: Dict[str, Any]) -> Dict[str, Any]:
    host = Host(server)
    return {"load": host.load_average(), "disk": host.disk_info()}


def _list_accounts(server: Server, args: Dict[str, Any]) -> Any:
    return Account(server).list()


def _list_domains(server: Server, args: Dict[str, Any]) -> Any:
    return Account(server).list_domains()


def _disk_usage(server: Server, args: Dict[str, Any]) -> Any:
    return Account(server).disk_usage(username=args["account"])


def _suspend(server: Server, args: Dict[str, Any]) -> Any:
    options: Dict[str, Any] = {"username": args["account"]}
    if args.get("reason"):
        options["reason"] = args["reason"]
    return Account(server).suspend(**options)


def _unsuspend(server: Server, args: Dict[str, Any]) -> Any:
    return Account(server).unsuspend(username=args["account"])


def _bandwidth(server: Server, args: Dict[str, Any]) -> Any:
    account = args.get("account", "")
    if account:
        return Account(server).bandwidth(search_type="user", search=account)
    return Account(server).bandwidth()


def _hostname(server: Server, args: Dict[str, Any]) -> Any:
    return Host(server).hostname()


def _restart(server: Server, args: Dict[str, Any]) -> Any:
    return Host(server).restart_service(name=args["service"])


Handler = Callable[[Server, Dict[str, Any]], Any]

COMMANDS: Dict[str, Handler] = {
    "get_server_resources": _server_resources,
    "resources": _server_resources,
    "list_accounts": _list_accounts,
    "accounts": _list_accounts,
    "list_domains": _list_domains,
    "domains": _list_domains,
    "get_disk_usage": _disk_usage,
    "disk": _disk_usage,
    "suspend_account": _suspend,
    "suspend": _suspend,
    "unsuspend_account": _unsuspend,
    "unsuspend": _unsuspend,
    "get_bandwidth": _bandwidth,
    "bandwidth": _bandwidth,
    "get_hostname": _hostname,
    "hostname": _hostname,
    "restart_service": _restart,
    "restart": _restart,
}

# Handlers and the string argument each one cannot run without
REQUIRED_ARGS: Dict[Handler, str] = {
    _disk_usage: "account",
    _suspend: "account",
    _unsuspend: "account",
    _restart: "service",
}


# ---------------------------------------------------------------------------
# Command router
# ---------------------------------------------------------------------------

def execute_command(
    server: Server, command: str, args: Optional[Dict[str, Any]] = None
) -> Any:
    """Route a command string to the matching WHM operation."""
    command = command.lower().strip()
    func = COMMANDS.get(command)
    if not func:
        raise ValueError(
            f"Unknown command '{command}'. "
            f"Valid: {', '.join(sorted(COMMANDS.keys()))}"
        )

    args = dict(args or {})
    required = REQUIRED_ARGS.get(func)
    if required:
        value = args.get(required)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{command} requires a non-empty '{required}' string")
        args[required] = value.strip()

    return func(server, args)
