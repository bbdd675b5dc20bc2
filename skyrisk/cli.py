"""CLI entry point for the SkyRisk weather risk tool."""

import argparse
import logging
import sys

from skyrisk.app import build_controller
from skyrisk.climatology.source import climatology_from_config
from skyrisk.config.loader import get_config_value, load_config_or_default, set_config_value
from skyrisk.controller.state import Phase
from skyrisk.ingest.geolocation import ReportedPosition
from skyrisk.models.common import parse_date
from skyrisk.reporting.formatters import format_result_json, format_result_text

DEFAULT_CONFIG = "skyrisk.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skyrisk",
        description="Weather risk from climatology and short-range forecasts",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # risk
    risk_p = sub.add_parser("risk", help="Compute risk for a date and location")
    risk_p.add_argument("--date", required=True, help="Target date YYYY-MM-DD")
    risk_p.add_argument("--city", help="City name to geocode")
    risk_p.add_argument("--lat", type=float, help="Latitude")
    risk_p.add_argument("--lon", type=float, help="Longitude")
    risk_p.add_argument("--json", action="store_true", help="JSON output")

    # climatology
    sub.add_parser("climatology", help="Show the monthly climatology table")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard")
    serve_p.add_argument("--host", help="Bind host")
    serve_p.add_argument("--port", type=int, help="Bind port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config_or_default(args.config)

    if args.command == "risk":
        return _cmd_risk(config, args)
    elif args.command == "climatology":
        return _cmd_climatology(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_risk(config, args) -> int:
    try:
        target = parse_date(args.date)
    except ValueError:
        print(f"Error: invalid date {args.date!r}, expected YYYY-MM-DD")
        return 1

    has_coords = args.lat is not None and args.lon is not None
    if bool(args.city) == has_coords:
        print("Error: give either --city or both --lat and --lon")
        return 1

    messages: list[str] = []
    controller = build_controller(config, notifier=messages.append)
    controller.set_date(target)
    if args.city:
        controller.set_city_query(args.city)
        state = controller.search_city()
    else:
        state = controller.use_my_location(ReportedPosition(args.lat, args.lon))

    if state.phase != Phase.READY or state.result is None:
        for message in messages:
            print(f"Error: {message}", file=sys.stderr)
        return 1

    formatter = format_result_json if args.json else format_result_text
    print(formatter(state.location, target, state.result))
    return 0


def _cmd_climatology(config) -> int:
    table = climatology_from_config(config.climatology_file)
    print(f"{'month':>5} {'tmax':>6} {'tmin':>6} {'precip':>7} {'wind':>6}")
    for r in table.records():
        print(f"{r.month:>5} {r.tmax:>6g} {r.tmin:>6g} {r.precip:>7g} {r.wind:>6g}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from skyrisk.dashboard import create_app

    host = args.host or config.dashboard.host
    port = args.port or config.dashboard.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0
